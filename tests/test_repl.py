import builtins
import io

from cursus.shell.repl import USAGE, main, run


def _fake_input(items):
    feed = iter(items)

    def fake(prompt=""):
        try:
            item = next(feed)
        except StopIteration:
            raise EOFError from None
        if isinstance(item, BaseException):
            raise item
        return item

    return fake


def test_run_executes_lines():
    out = io.StringIO()
    run(["echo hi", "echo there"], out)
    assert out.getvalue() == "hi\nthere\n"


def test_run_stops_at_exit():
    out = io.StringIO()
    run(["exit", "echo no"], out)
    assert out.getvalue() == ""


def test_run_exit_prefix_stops():
    out = io.StringIO()
    run(["echo a", "exitnow", "echo b"], out)
    assert out.getvalue() == "a\n"


def test_run_blank_line_is_invalid():
    out = io.StringIO()
    run(["   "], out)
    assert out.getvalue() == "Invalid command\n"


def test_run_skips_empty_lines():
    out = io.StringIO()
    run(["", "\n", "echo x\n"], out)
    assert out.getvalue() == "x\n"


def test_run_keeps_status(tmp_path, monkeypatch):
    tool = tmp_path / "failing"
    tool.write_text("#!/bin/sh\nexit 4\n")
    tool.chmod(0o755)
    monkeypatch.setenv("PATH", str(tmp_path))
    out = io.StringIO()
    state = run(["failing", "echo $?"], out, io.StringIO())
    assert state.status == 4
    assert out.getvalue() == "4\n"


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == 1
    assert capsys.readouterr().out == USAGE


def test_main_reads_until_end_of_input(capsys, monkeypatch):
    monkeypatch.setattr(builtins, "input", _fake_input(["echo hi"]))
    assert main([]) == 0
    assert capsys.readouterr().out == "hi\n"


def test_main_survives_interrupt(capsys, monkeypatch):
    monkeypatch.setattr(
        builtins, "input", _fake_input([KeyboardInterrupt(), "echo after"])
    )
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == "after\n"
    assert captured.err == "\n"