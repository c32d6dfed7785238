import os
import stat

import pytest

from cursus.shell.lookup import build_path, find_command_in_path, strncmp, tokenize


def test_strncmp_equal_strings_is_zero():
    assert strncmp("echo", "echo", 5) == 0


def test_strncmp_only_compares_prefix():
    assert strncmp("exitnow", "exit", 4) == 0


def test_strncmp_reports_sign_of_difference():
    assert strncmp("a", "b", 1) < 0
    assert strncmp("b", "a", 1) > 0


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("cd", "cd\0", 2) == 0
    assert strncmp("c", "cd", 2) < 0


def test_strncmp_is_antisymmetric():
    pairs = [("env", "export"), ("unset", "echo"), ("<", ">>")]
    for left, right in pairs:
        assert strncmp(left, right, 7) == -strncmp(right, left, 7)


def test_strncmp_zero_length_is_zero():
    assert strncmp("abc", "xyz", 0) == 0


def test_tokenize_skips_empty_fields():
    assert list(tokenize("::/usr/bin::/bin:", ":")) == ["/usr/bin", "/bin"]


def test_tokenize_multiple_delimiters():
    assert list(tokenize("ls  -l\n|\nwc", " \n")) == ["ls", "-l", "|", "wc"]


def test_tokenize_only_delimiters_yields_nothing():
    assert list(tokenize(" \n \n", " \n")) == []


def test_tokenize_tokens_hold_no_delimiters():
    text = "a:b;c::d;;e"
    tokens = list(tokenize(text, ":;"))
    assert all(":" not in t and ";" not in t for t in tokens)
    assert "".join(tokens) == text.replace(":", "").replace(";", "")


def test_build_path_joins_with_slash():
    assert build_path("/usr/bin", "ls") == "/usr/bin/ls"


@pytest.mark.parametrize("size", [1, 2, 3, 5, 8, 12, 20])
def test_build_path_fits_in_buffer(size):
    result = build_path("/usr/local/bin", "command", size)
    assert len(result) <= size - 1


def test_build_path_rejects_empty_buffer():
    with pytest.raises(ValueError):
        build_path("/bin", "ls", 0)


def test_build_path_drops_command_that_does_not_fit():
    result = build_path("/bin", "averyveryverylongcommand", 10)
    assert result.startswith("/bin")
    assert "averyveryverylongcommand" not in result


def _make_executable(path):
    path.write_text("#!/bin/sh\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)


def test_find_command_in_path_finds_executable(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / "tool").write_text("not executable")
    _make_executable(second / "tool")
    search = f"{first}:{second}"
    assert find_command_in_path("tool", search) == str(second / "tool")


def test_find_command_in_path_first_match_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_executable(first / "tool")
    _make_executable(second / "tool")
    assert find_command_in_path("tool", f"{first}:{second}") == str(first / "tool")


def test_find_command_in_path_missing_returns_none(tmp_path):
    assert find_command_in_path("no-such-tool", str(tmp_path)) is None


def test_find_command_in_path_uses_environment(tmp_path, monkeypatch):
    _make_executable(tmp_path / "tool")
    monkeypatch.setenv("PATH", str(tmp_path))
    assert find_command_in_path("tool") == os.path.join(str(tmp_path), "tool")


def test_find_command_in_path_without_path_variable(monkeypatch):
    monkeypatch.delenv("PATH", raising=False)
    assert find_command_in_path("ls") is None