"""Parsing of duration values such as ``"30m"``, ``"4h"`` or ``"1h30m"``."""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal

_UNIT_NANOSECONDS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_UNIT = r"(?:ns|us|µs|μs|ms|s|m|h)"
_COMPONENT = re.compile(rf"({_NUMBER})({_UNIT})")
_FULL = re.compile(rf"[+-]?(?:{_NUMBER}{_UNIT})+")


def parse_duration(value: str | int | timedelta | None) -> timedelta:
    """Convert a duration value into a :class:`~datetime.timedelta`.

    Strings are sequences of decimal numbers, each followed by a unit
    (``ns``, ``us``, ``ms``, ``s``, ``m``, ``h``), with an optional leading
    sign. A bare ``"0"`` is also accepted. Integers are nanoseconds.
    ``None`` is a zero duration.
    """
    if value is None:
        return timedelta(0)
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise TypeError(f"invalid duration type: {type(value).__name__}")
    if isinstance(value, int):
        return timedelta(microseconds=_truncate_to_microseconds(value))
    if not isinstance(value, str):
        raise TypeError(f"invalid duration type: {type(value).__name__}")
    if value in ("0", "+0", "-0"):
        return timedelta(0)
    if not _FULL.fullmatch(value):
        raise ValueError(f"invalid duration {value!r}")
    nanoseconds = int(
        sum(Decimal(number) * _UNIT_NANOSECONDS[unit] for number, unit in _COMPONENT.findall(value))
    )
    if value.startswith("-"):
        nanoseconds = -nanoseconds
    return timedelta(microseconds=_truncate_to_microseconds(nanoseconds))


def _truncate_to_microseconds(nanoseconds: int) -> int:
    magnitude = abs(nanoseconds) // 1000
    return -magnitude if nanoseconds < 0 else magnitude