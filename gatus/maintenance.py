"""Maintenance windows during which no alerts are sent. Times are in UTC."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from gatus.duration import parse_duration

LONG_DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

# Indexed by datetime.weekday(), where Monday is 0.
_WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_INTEGER = re.compile(r"[+-]?\d+")


class MaintenanceError(ValueError):
    """Raised when a maintenance configuration is invalid."""


class InvalidDayNameError(MaintenanceError):
    def __init__(self) -> None:
        super().__init__(
            "invalid value specified for 'on'. supported values are [" + " ".join(LONG_DAY_NAMES) + "]"
        )


class InvalidStartFormatError(MaintenanceError):
    def __init__(self, detail: str | None = None) -> None:
        message = "invalid maintenance start format: must be hh:mm, between 00:00 and 23:59 inclusively (e.g. 23:00)"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidDurationError(MaintenanceError):
    def __init__(self) -> None:
        super().__init__("invalid maintenance duration: must be bigger than 0 (e.g. 30m)")


@dataclass
class MaintenanceConfig:
    """A recurring maintenance period.

    ``enabled`` of ``None`` means enabled. An empty ``every`` means every day.
    """

    enabled: bool | None = None
    start: str = ""
    duration: timedelta = timedelta(0)
    every: list[str] = field(default_factory=list)
    _start_offset: timedelta = field(default=timedelta(0), init=False, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> MaintenanceConfig:
        data = data or {}
        enabled = data.get("enabled")
        return cls(
            enabled=None if enabled is None else bool(enabled),
            start=str(data.get("start") or ""),
            duration=parse_duration(data.get("duration")),
            every=[str(day) for day in data.get("every") or []],
        )

    def is_enabled(self) -> bool:
        return True if self.enabled is None else self.enabled

    def validate_and_set_defaults(self) -> None:
        """Validate the configuration; must be called before checking the window."""
        if not self.is_enabled():
            return
        if any(day not in LONG_DAY_NAMES for day in self.every):
            raise InvalidDayNameError()
        self._start_offset = _hhmm_to_timedelta(self.start)
        if self.duration <= timedelta(0) or self.duration > timedelta(hours=24):
            raise InvalidDurationError()

    def is_under_maintenance(self, now: datetime | None = None) -> bool:
        """Return whether ``now`` (default: the current time) is inside the window."""
        if not self.is_enabled():
            return False
        now = _as_utc(now)
        start_hour = int(self._start_offset.total_seconds() // 3600)
        if now.hour >= start_hour:
            start_day = _truncate_to_day(now)
        else:
            start_day = _truncate_to_day(now - self.duration)
        if self.every and _WEEKDAY_NAMES[start_day.weekday()] not in self.every:
            return False
        window_start = start_day + self._start_offset
        window_end = window_start + self.duration
        return window_start < now < window_end


def default_config() -> MaintenanceConfig:
    """Return the default maintenance configuration, which is disabled."""
    return MaintenanceConfig(enabled=False)


def _as_utc(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def _truncate_to_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _hhmm_to_timedelta(text: str) -> timedelta:
    if len(text) != 5:
        raise InvalidStartFormatError()
    hours = _parse_padded_number(text[:2])
    minutes = _parse_padded_number(text[3:5])
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise InvalidStartFormatError()
    return timedelta(hours=hours, minutes=minutes)


def _parse_padded_number(text: str) -> int:
    digits = text.removeprefix("0")
    if not _INTEGER.fullmatch(digits):
        raise InvalidStartFormatError(f"{text!r} is not a number")
    return int(digits)