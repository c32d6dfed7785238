"""Millisecond clock, precise sleeping and argument parsing for the simulation."""

from __future__ import annotations

import time
from collections.abc import Iterable
from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")
_WORD = 1 << 64
_SIGN_BIT = 1 << 63


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def precise_sleep(milliseconds: int) -> None:
    """Block until ``milliseconds`` have passed on the millisecond clock.

    Sleeps in ever shorter steps so the wake-up lands close to the target.
    """
    target = current_time_ms() + milliseconds
    while (remaining := target - current_time_ms()) > 0:
        time.sleep(remaining / 2000)


def parse_long(text: str) -> int:
    """Read a leading integer from ``text`` the way the C library's atoi-style parsers do.

    Leading whitespace is skipped, one sign is accepted, and digits are read
    until the first non-digit. The value wraps like a 64-bit integer; text
    with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = -1 if rest.startswith("-") else 1
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    digits = "".join(takewhile(lambda char: char in _DIGITS, rest))
    magnitude = int(digits) % _WORD if digits else 0
    value = (sign * magnitude) % _WORD
    return value - _WORD if value >= _SIGN_BIT else value


def all_digits(args: Iterable[str]) -> bool:
    """Tell whether every character of every argument is an ASCII digit."""
    return all(char in _DIGITS for arg in args for char in arg)