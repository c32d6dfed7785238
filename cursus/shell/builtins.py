"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import errno
import os
import sys
from enum import IntEnum
from typing import TextIO

from cursus.shell.lookup import strncmp

CLEAR_SEQUENCE = "\033[H\033[J"
_QUOTES = "\"'"


class Builtin(IntEnum):
    """The builtin that handled a command line."""

    EMPTY = 1
    CD = 2
    ENV = 3
    UNSET = 4
    EXPORT = 5
    ECHO = 6
    CLEAR = 7


# Name, number of characters compared (the terminator counts), builtin.
# "cd" compares only two characters, so any word starting with "cd" matches.
_NAMES: tuple[tuple[str, int, Builtin], ...] = (
    ("cd", 2, Builtin.CD),
    ("env", 4, Builtin.ENV),
    ("unset", 6, Builtin.UNSET),
    ("export", 7, Builtin.EXPORT),
    ("echo", 5, Builtin.ECHO),
    ("clear", 6, Builtin.CLEAR),
)


def change_directory(args: list[str]) -> None:
    """Change to ``args[1]``, or to ``$HOME`` when no directory is given.

    Raises OSError when the directory cannot be entered or HOME is unset.
    """
    if len(args) < 2:
        home = os.environ.get("HOME")
        if home is None:
            raise OSError(errno.ENOENT, "HOME not set")
        os.chdir(home)
    else:
        os.chdir(args[1])


def print_environment(out: TextIO | None = None) -> None:
    """Write every environment variable as ``NAME=value`` on its own line."""
    out = sys.stdout if out is None else out
    for name, value in os.environ.items():
        out.write(f"{name}={value}\n")


def _valid_name(name: str) -> bool:
    return bool(name) and "=" not in name


def unset_variables(args: list[str], err: TextIO | None = None) -> None:
    """Remove the environment variables named in ``args[1:]``."""
    err = sys.stderr if err is None else err
    if len(args) < 2:
        err.write("unset: missing arguments\n")
        return
    for name in args[1:]:
        if not _valid_name(name):
            err.write(f"unset: {os.strerror(errno.EINVAL)}\n")
            continue
        os.environ.pop(name, None)


def export_variables(args: list[str], err: TextIO | None = None) -> None:
    """Set the environment variables given as ``NAME=value`` in ``args[1:]``."""
    err = sys.stderr if err is None else err
    if len(args) < 2:
        err.write("export: missing arguments\n")
        return
    for assignment in args[1:]:
        if "=" not in assignment:
            err.write("export: invalid format\n")
            continue
        name, value = assignment.split("=", 1)
        if not _valid_name(name):
            err.write(f"export: {os.strerror(errno.EINVAL)}\n")
            continue
        os.environ[name] = value


def _echo_word(word: str, last_status: int, out: TextIO) -> bool:
    """Write one echo argument; return True when an expansion ended the command."""
    in_quotes = False
    quote_char = ""
    rest = word
    while rest:
        if rest[0] == "$":
            if rest.startswith("$?"):
                out.write(f"{last_status}\n")
                return True
            value = os.environ.get(rest[1:])
            if value is not None:
                out.write(f"{value}\n")
                return True
        if rest[0] in _QUOTES and not in_quotes:
            in_quotes = True
            quote_char = rest[0]
            rest = rest[1:]
            if not rest:
                break
        if in_quotes and rest[0] == quote_char:
            # The closing quote ends the argument; whatever follows is dropped.
            break
        out.write(rest[0])
        rest = rest[1:]
    return False


def echo(args: list[str], last_status: int = 0, out: TextIO | None = None) -> None:
    """Write the arguments separated by spaces, with the shell's own quoting rules.

    A leading ``-n`` suppresses the final newline. ``$?`` or a set variable
    prints its value on a line of its own and ends the command there.
    """
    out = sys.stdout if out is None else out
    words = args[1:]
    newline = True
    if words and words[0] == "-n":
        newline = False
        words = words[1:]
    for position, word in enumerate(words):
        if _echo_word(word, last_status, out):
            return
        if position < len(words) - 1:
            out.write(" ")
    if newline:
        out.write("\n")


def clear_screen(out: TextIO | None = None) -> None:
    """Move the cursor home and clear the terminal."""
    out = sys.stdout if out is None else out
    out.write(CLEAR_SEQUENCE)


def _match(name: str) -> Builtin | None:
    for builtin_name, length, builtin in _NAMES:
        if strncmp(name, builtin_name, length) == 0:
            return builtin
    return None


def execute_builtin(
    args: list[str],
    last_status: int = 0,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> Builtin | None:
    """Run ``args`` if it names a builtin and return which one; None otherwise."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    if not args:
        return Builtin.EMPTY
    builtin = _match(args[0])
    if builtin is Builtin.CD:
        try:
            change_directory(args)
        except OSError as exc:
            err.write(f"cd: {exc.strerror or exc}\n")
    elif builtin is Builtin.ENV:
        print_environment(out)
    elif builtin is Builtin.UNSET:
        unset_variables(args, err)
    elif builtin is Builtin.EXPORT:
        export_variables(args, err)
    elif builtin is Builtin.ECHO:
        echo(args, last_status, out)
    elif builtin is Builtin.CLEAR:
        clear_screen(out)
    return builtin