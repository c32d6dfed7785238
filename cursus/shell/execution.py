"""Running parsed command lines: redirections, pipelines and programs."""

from __future__ import annotations

import os
import subprocess
import sys
from contextlib import ExitStack
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from cursus.shell.builtins import execute_builtin
from cursus.shell.lookup import find_command_in_path
from cursus.shell.parsing import contains_pipe, split_pipeline


@dataclass
class Redirections:
    """Files a command reads from and writes to instead of the terminal."""

    input_file: str | None = None
    output_file: str | None = None
    append: bool = False


@dataclass
class ShellState:
    """What the shell remembers between commands."""

    status: int = 0


def extract_redirections(args: list[str]) -> tuple[list[str], Redirections]:
    """Split ``args`` into the command words and its redirections.

    The command ends at the first redirection operator; later operators still
    count, and the last one of each kind wins.
    """
    redirections = Redirections()
    cut = len(args)
    for index, (arg, target) in enumerate(zip(args, [*args[1:], None])):
        if arg == "<":
            redirections.input_file = target
        elif arg == ">":
            redirections.output_file = target
            redirections.append = False
        elif arg == ">>":
            redirections.output_file = target
            redirections.append = True
        else:
            continue
        cut = min(cut, index)
    return args[:cut], redirections


def resolve_command(name: str) -> str | None:
    """Return the program to run for ``name``, or None when there is none.

    A name holding a slash is used as it stands if it is executable; any
    other name is looked up in ``PATH``.
    """
    if "/" in name:
        return name if os.access(name, os.X_OK) else None
    return find_command_in_path(name)


def _flush(*streams: TextIO) -> None:
    for stream in streams:
        stream.flush()


def _run_stage(
    command: list[str], data: bytes | None, last: bool, err: TextIO
) -> tuple[int, bytes]:
    if not command:
        err.write("Invalid command\n")
        return 1, b""
    path = find_command_in_path(command[0])
    if path is None:
        err.write(f"{command[0]}Command not found\n")
        return 1, b""
    _flush(sys.stdout, err)
    try:
        completed = subprocess.run(
            command,
            executable=path,
            input=data,
            stdout=None if last else subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        err.write(f"execve error: {exc.strerror or exc}\n")
        return 1, b""
    return completed.returncode, completed.stdout or b""


def run_pipeline(args: list[str], err: TextIO | None = None) -> list[int]:
    """Run the commands of a pipeline one after another and return their statuses.

    Each command reads what the one before it wrote; the first reads the
    shell's input and the last writes to the shell's output.
    """
    err = sys.stderr if err is None else err
    stages = split_pipeline(args)
    statuses: list[int] = []
    data: bytes | None = None
    for position, command in enumerate(stages):
        status, data = _run_stage(command, data, position == len(stages) - 1, err)
        statuses.append(status)
    return statuses


def _create_0644(path: str, flags: int) -> int:
    return os.open(path, flags, 0o644)


def _spawn(
    path: str, command: list[str], redirections: Redirections, out: TextIO, err: TextIO
) -> int:
    with ExitStack() as stack:
        stdin: BinaryIO | None = None
        stdout: BinaryIO | None = None
        if redirections.input_file is not None:
            try:
                stdin = stack.enter_context(open(redirections.input_file, "rb"))
            except OSError as exc:
                err.write(f"Error opening input file: {exc.strerror or exc}\n")
                return 1
        if redirections.output_file is not None:
            mode = "ab" if redirections.append else "wb"
            try:
                stdout = stack.enter_context(
                    open(redirections.output_file, mode, opener=_create_0644)
                )
            except OSError as exc:
                err.write(f"Error opening output file: {exc.strerror or exc}\n")
                return 1
        _flush(out, err, sys.stdout)
        try:
            completed = subprocess.run(
                command, executable=path, stdin=stdin, stdout=stdout, check=False
            )
        except OSError as exc:
            err.write(f"execve: {exc.strerror or exc}\n")
            return 1
        return completed.returncode


def execute(
    state: ShellState,
    args: list[str],
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Run one parsed command line and record its exit status in ``state``."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    command, redirections = extract_redirections(args)
    if not command:
        out.write("Invalid command\n")
        return
    if execute_builtin(command, state.status, out, err) is not None:
        return
    if contains_pipe(command):
        run_pipeline(command, err)
        return
    path = resolve_command(command[0])
    if path is None:
        out.write(f"{command[0]}: Command not found\n")
        return
    state.status = _spawn(path, command, redirections, out, err)