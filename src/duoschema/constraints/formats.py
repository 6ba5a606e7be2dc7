"""String format checkers and the pluggable format registry."""

from __future__ import annotations

import ipaddress
import logging
import re
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta, timezone
from enum import StrEnum
from urllib.parse import urlsplit

logger = logging.getLogger("duoschema.formats")

FormatChecker = Callable[[str], bool]


class StringFormat(StrEnum):
    EMAIL = "email"
    URI = "uri"
    DATE = "date"
    TIME = "time"
    DATE_TIME = "date-time"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    UUID = "uuid"


class UnsupportedFormatError(Exception):
    """Raised when a requested format has no registered checker."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.format_name = name
        self.available = available
        super().__init__(f"Unsupported format '{name}'. Available: {', '.join(available)}")


class FormatRegistry:
    """Registry mapping ``format`` keyword values to checker functions."""

    _checkers: dict[str, FormatChecker] = {}

    @classmethod
    def register(
        cls, name: str, checker: FormatChecker | None = None
    ) -> FormatChecker | Callable[[FormatChecker], FormatChecker]:
        """Register a checker for ``name``. Can be used as a decorator."""

        def _register(fn: FormatChecker) -> FormatChecker:
            cls._checkers[str(name)] = fn
            logger.debug("registered format checker %r", str(name))
            return fn

        if checker is None:
            return _register
        return _register(checker)

    @classmethod
    def get(cls, name: str) -> FormatChecker:
        """Get the checker for the named format."""
        if name not in cls._checkers:
            raise UnsupportedFormatError(name, available=cls.available())
        return cls._checkers[name]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._checkers

    @classmethod
    def available(cls) -> list[str]:
        """List registered format names."""
        return sorted(cls._checkers.keys())

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a checker (for tests and overrides)."""
        cls._checkers.pop(name, None)


# --- Built-in checkers -----------------------------------------------------

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")
_URI_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_TIME = re.compile(r"^(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$")
_UUID = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


@FormatRegistry.register(StringFormat.EMAIL)
def is_email(value: str) -> bool:
    return _EMAIL.match(value) is not None


@FormatRegistry.register(StringFormat.URI)
def is_uri(value: str) -> bool:
    """Absolute URI: a valid scheme and no whitespace."""
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and _URI_SCHEME.match(parts.scheme) is not None


@FormatRegistry.register(StringFormat.DATE)
def is_date(value: str) -> bool:
    return _parse_date(value) is not None


@FormatRegistry.register(StringFormat.TIME)
def is_time(value: str) -> bool:
    return _parse_time(value) is not None


@FormatRegistry.register(StringFormat.DATE_TIME)
def is_date_time(value: str) -> bool:
    date_part, sep, time_part = _split_date_time(value)
    if not sep:
        return False
    return _parse_date(date_part) is not None and _parse_time(time_part) is not None


@FormatRegistry.register(StringFormat.IPV4)
def is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


@FormatRegistry.register(StringFormat.IPV6)
def is_ipv6(value: str) -> bool:
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


@FormatRegistry.register(StringFormat.UUID)
def is_uuid(value: str) -> bool:
    return _UUID.match(value) is not None


# --- RFC 3339 helpers ------------------------------------------------------


def _split_date_time(value: str) -> tuple[str, str, str]:
    for sep in ("T", "t"):
        if sep in value:
            return value.partition(sep)
    return value, "", ""


def _parse_date(value: str) -> date | None:
    m = _DATE.match(value)
    if m is None:
        return None
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def _parse_time(value: str) -> tuple[int, int, int, int, timezone] | None:
    """Parse an RFC 3339 full-time into (hour, minute, second, microsecond, tz)."""
    m = _TIME.match(value)
    if m is None:
        return None
    hour, minute, second = int(m.group(1)), int(m.group(2)), int(m.group(3))
    # second == 60 admits leap seconds
    if hour > 23 or minute > 59 or second > 60:
        return None
    fraction = m.group(4) or "0"
    microsecond = int(fraction[:6].ljust(6, "0"))
    offset = m.group(5)
    if offset in ("Z", "z"):
        tz = UTC
    else:
        off_hours, off_minutes = int(offset[1:3]), int(offset[4:6])
        if off_hours > 23 or off_minutes > 59:
            return None
        delta = timedelta(hours=off_hours, minutes=off_minutes)
        tz = timezone(-delta if offset[0] == "-" else delta)
    return hour, minute, second, microsecond, tz


def parse_rfc3339(value: str) -> datetime | None:
    """Parse an RFC 3339 date-time into an aware ``datetime``, or ``None``.

    Leap seconds pass the format check but cannot be represented by
    ``datetime`` and therefore do not parse.
    """
    date_part, sep, time_part = _split_date_time(value)
    if not sep:
        return None
    day = _parse_date(date_part)
    clock = _parse_time(time_part)
    if day is None or clock is None:
        return None
    hour, minute, second, microsecond, tz = clock
    if second == 60:
        return None
    return datetime(day.year, day.month, day.day, hour, minute, second, microsecond, tzinfo=tz)
