import time

import pytest

from cursus.philo.timing import all_digits, current_time_ms, parse_long, precise_sleep


def test_current_time_matches_wall_clock():
    before = int(time.time() * 1000)
    now = current_time_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1


def test_current_time_is_non_decreasing():
    first = current_time_ms()
    second = current_time_ms()
    assert second >= first


@pytest.mark.parametrize("milliseconds", [0, 5, 30])
def test_precise_sleep_waits_at_least_the_requested_time(milliseconds):
    start = current_time_ms()
    precise_sleep(milliseconds)
    assert current_time_ms() - start >= milliseconds


def test_precise_sleep_negative_returns_at_once():
    start = current_time_ms()
    precise_sleep(-100)
    elapsed = current_time_ms() - start
    assert 0 <= elapsed < 50


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("  +42", 42),
        ("\t\n\v\f\r7", 7),
        ("-17", -17),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("+", 0),
        ("- 5", 0),
    ],
)
def test_parse_long(text, expected):
    assert parse_long(text) == expected


def test_parse_long_only_one_sign():
    assert parse_long("+-3") == 0
    assert parse_long("--3") == 0


def test_parse_long_wraps_like_a_64_bit_integer():
    assert parse_long("18446744073709551616") == 0
    assert parse_long("9223372036854775808") == -(2**63)


def test_parse_long_keeps_large_values_below_the_limit():
    assert parse_long("2147483648") == 2**31


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["4", "800", "200", "200"], True),
        (["4", "800", "200", "200", "5"], True),
        ([""], True),
        ([], True),
        (["4", "-800"], False),
        (["+4"], False),
        (["4 "], False),
        (["12a"], False),
        (["٣"], False),
    ],
)
def test_all_digits(args, expected):
    assert all_digits(args) is expected