"""Splitting command lines into arguments and pipeline stages."""

from __future__ import annotations

from cursus.shell.lookup import tokenize

MAX_ARGS = 1024
PIPE = "|"
EXIT_COMMAND = "exit"


def parse_command(line: str) -> list[str]:
    """Split ``line`` on spaces and newlines, keeping at most ``MAX_ARGS - 1`` words."""
    args: list[str] = []
    for token in tokenize(line, " \n"):
        if len(args) >= MAX_ARGS - 1:
            break
        args.append(token)
    return args


def _is_pipe(arg: str) -> bool:
    return arg.startswith(PIPE)


def contains_pipe(args: list[str]) -> bool:
    """Tell whether any argument starts with a pipe character."""
    return any(_is_pipe(arg) for arg in args)


def split_pipeline(args: list[str]) -> list[list[str]]:
    """Split ``args`` into the commands separated by pipe arguments.

    There is always one more command than there are pipes; a command may be
    empty when pipes are adjacent or at either end.
    """
    commands: list[list[str]] = [[]]
    for arg in args:
        if _is_pipe(arg):
            commands.append([])
        else:
            commands[-1].append(arg)
    return commands


def handle_input(line: str) -> tuple[list[str], bool]:
    """Parse ``line`` and tell whether it asks the shell to exit.

    Any first word starting with ``exit`` ends the shell.
    """
    args = parse_command(line)
    wants_exit = bool(args) and args[0].startswith(EXIT_COMMAND)
    return args, wants_exit