"""The interactive loop of the shell."""

from __future__ import annotations

import signal
import sys
import threading
from collections.abc import Iterable, Iterator
from typing import TextIO

from cursus.shell.execution import ShellState, execute
from cursus.shell.parsing import handle_input

PROMPT = "minishell> "
USAGE = "\033[0;31mWRONG USAGE!\033[0m\nTRY: minishell\n"


def run(
    lines: Iterable[str], out: TextIO | None = None, err: TextIO | None = None
) -> ShellState:
    """Execute each non-empty line until one asks to exit; return the final state."""
    state = ShellState()
    for raw in lines:
        line = raw.rstrip("\n")
        if not line:
            continue
        args, wants_exit = handle_input(line)
        if wants_exit:
            break
        execute(state, args, out, err)
    return state


def _prompt_lines(err: TextIO) -> Iterator[str]:
    """Read lines at the prompt; an interrupt starts a fresh prompt, end of input stops."""
    while True:
        try:
            yield input(PROMPT)
        except KeyboardInterrupt:
            err.write("\n")
            err.flush()
        except EOFError:
            return


def _ignore_sigquit():
    if not hasattr(signal, "SIGQUIT"):
        return None
    if threading.current_thread() is not threading.main_thread():
        return None
    return signal.signal(signal.SIGQUIT, signal.SIG_IGN)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive shell; it takes no arguments."""
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        sys.stdout.write(USAGE)
        return 1
    try:
        import readline  # enables line editing and history for input()
    except ImportError:
        readline = None
    previous = _ignore_sigquit()
    try:
        run(_prompt_lines(sys.stderr))
    finally:
        if previous is not None:
            signal.signal(signal.SIGQUIT, previous)
        clear_history = getattr(readline, "clear_history", None)
        if clear_history is not None:
            clear_history()
    return 0


if __name__ == "__main__":
    sys.exit(main())