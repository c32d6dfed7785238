"""String comparison, tokenising and PATH lookup for the shell."""

from __future__ import annotations

import os
from collections.abc import Iterator

PATH_BUFFER_SIZE = 1024


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, returning the difference of the first mismatch.

    The end of a string counts as the character with code 0, so a shorter
    string compares below a longer one that it prefixes.
    """
    for position in range(n):
        left = ord(s1[position]) if position < len(s1) else 0
        right = ord(s2[position]) if position < len(s2) else 0
        if left != right or left == 0:
            return left - right
    return 0


def tokenize(text: str, delimiters: str) -> Iterator[str]:
    """Yield the non-empty runs of ``text`` separated by any of ``delimiters``."""
    token: list[str] = []
    for char in text:
        if char in delimiters:
            if token:
                yield "".join(token)
                token.clear()
        else:
            token.append(char)
    if token:
        yield "".join(token)


def _bounded_append(dst: str, src: str, size: int) -> str:
    """Append ``src`` to ``dst`` so the result holds at most ``size - 1`` characters."""
    if len(dst) >= size:
        return dst
    return dst + src[: max(0, size - len(dst) - 1)]


def build_path(directory: str, command: str, size: int = PATH_BUFFER_SIZE) -> str:
    """Join ``directory`` and ``command`` with a slash inside a buffer of ``size``.

    Parts that do not fit are dropped or cut short, as a fixed buffer would.
    """
    if size < 1:
        raise ValueError("buffer size must be at least 1")
    full_path = directory[: max(0, size - 2)] if len(directory) < size else ""
    if len(full_path) + 1 < size:
        full_path = _bounded_append(full_path, "/", size - len(full_path) - 1)
    if len(full_path) + len(command) < size:
        full_path = _bounded_append(full_path, command, size - len(full_path) - 1)
    return full_path


def find_command_in_path(command: str, path: str | None = None) -> str | None:
    """Return the first executable ``command`` found in the directories of ``path``.

    ``path`` defaults to the ``PATH`` environment variable; ``None`` is
    returned when it is unset or no directory holds an executable match.
    """
    if path is None:
        path = os.environ.get("PATH")
    if path is None:
        return None
    for directory in tokenize(path, ":"):
        candidate = build_path(directory, command)
        if os.access(candidate, os.X_OK):
            return candidate
    return None