"""Checking that the monitoring host itself can reach the network."""

from __future__ import annotations

import socket
import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Mapping

from gatus.duration import parse_duration

DEFAULT_INTERVAL = timedelta(seconds=60)
MINIMUM_INTERVAL = timedelta(seconds=5)
CHECK_TIMEOUT = timedelta(seconds=5)
DNS_PORT_SUFFIX = ":53"


class ConnectivityError(ValueError):
    """Raised when the connectivity configuration is invalid."""


class InvalidIntervalError(ConnectivityError):
    def __init__(self) -> None:
        super().__init__("connectivity.checker.interval must be 5s or higher")


class InvalidDNSTargetError(ConnectivityError):
    def __init__(self) -> None:
        super().__init__("connectivity.checker.target must be suffixed with :53")


def can_create_tcp_connection(address: str, timeout: timedelta | float) -> bool:
    """Return whether a TCP connection to ``host:port`` can be opened."""
    host, separator, port = address.rpartition(":")
    if not separator:
        return False
    host = host.strip("[]")
    try:
        port_number = int(port)
    except ValueError:
        return False
    seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
    try:
        with socket.create_connection((host, port_number), timeout=seconds):
            return True
    except (OSError, OverflowError):
        return False


@dataclass
class Checker:
    """Periodically checks that ``target`` (e.g. ``1.1.1.1:53``) is reachable."""

    target: str = ""
    interval: timedelta = timedelta(0)
    _connected: bool = field(default=False, init=False, repr=False, compare=False)
    _last_check: float | None = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Checker:
        data = data or {}
        return cls(
            target=str(data.get("target") or ""),
            interval=parse_duration(data.get("interval")),
        )

    def check(self) -> bool:
        return can_create_tcp_connection(self.target, CHECK_TIMEOUT)

    def is_connected(self) -> bool:
        """Return the connection state, checking again once the interval has passed."""
        now = time.monotonic()
        if self._last_check is None or now > self._last_check + self.interval.total_seconds():
            self._last_check, self._connected = now, self.check()
        return self._connected


@dataclass
class ConnectivityConfig:
    """Configuration of the connectivity checker."""

    checker: Checker | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ConnectivityConfig:
        data = data or {}
        checker = data.get("checker")
        return cls(checker=None if checker is None else Checker.from_dict(checker))

    def validate_and_set_defaults(self) -> None:
        if self.checker is None:
            return
        if self.checker.interval == timedelta(0):
            self.checker.interval = DEFAULT_INTERVAL
        elif self.checker.interval < MINIMUM_INTERVAL:
            raise InvalidIntervalError()
        if not self.checker.target.endswith(DNS_PORT_SUFFIX):
            raise InvalidDNSTargetError()