from datetime import timedelta

import pytest

from gatus.duration import parse_duration


def test_minutes():
    assert parse_duration("30m") == timedelta(minutes=30)


def test_hours():
    assert parse_duration("4h") == timedelta(hours=4)


def test_compound_equals_single_unit():
    assert parse_duration("1h30m") == parse_duration("90m")


def test_fractional_value():
    assert parse_duration("1.5h") == parse_duration("90m")


def test_zero_without_unit():
    assert parse_duration("0") == timedelta(0)


def test_negative_duration():
    assert parse_duration("-1h") == -parse_duration("1h")


def test_explicit_positive_sign():
    assert parse_duration("+2h") == parse_duration("2h")


@pytest.mark.parametrize(
    "left, right",
    [
        ("1000ms", "1s"),
        ("1000us", "1ms"),
        ("1µs", "1us"),
        ("60m", "1h"),
        ("60s", "1m"),
        ("500ms500ms", "1s"),
    ],
)
def test_unit_equivalences(left, right):
    assert parse_duration(left) == parse_duration(right)


def test_timedelta_passthrough():
    delta = timedelta(seconds=42)
    assert parse_duration(delta) is delta


def test_none_is_zero():
    assert parse_duration(None) == timedelta(0)


def test_integer_is_nanoseconds():
    assert parse_duration(1_000_000_000) == parse_duration("1s")


@pytest.mark.parametrize("text", ["", "abc", "1", "1x", "h", "1h-30m", " 1h"])
def test_invalid_strings(text):
    with pytest.raises(ValueError):
        parse_duration(text)


def test_invalid_type():
    with pytest.raises(TypeError):
        parse_duration([1])