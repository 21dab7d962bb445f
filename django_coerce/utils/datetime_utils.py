"""
Date and time utilities for django-coerce.

This module provides the mutable date-time flavor returned by
``to_datetime`` as well as the canonical timestamp helpers used to rebuild
date-time values from their parts.
"""

from datetime import datetime, timedelta, tzinfo
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.core.exceptions import ImproperlyConfigured
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from ..config_proxy import get_setting

CANONICAL_TIMESTAMP_FORMAT = (
    "{year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}"
)


class MutableDateTime:
    """
    A timezone-aware date-time whose value can be changed in place.

    Python's ``datetime`` is immutable; this wrapper is the mutable flavor
    produced by ``to_datetime`` when ``immutable`` is false. Read-only
    attributes and methods (``year``, ``tzinfo``, ``isoformat()``...) are
    delegated to the wrapped ``datetime``. Equality and ordering compare
    instants, against either flavor.

    Example:
        moment = MutableDateTime(datetime(1978, 10, 1, tzinfo=ZoneInfo("UTC")))
        moment.modify(days=1)
        moment.day  # 2
    """

    __slots__ = ("_value",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: datetime):
        if not isinstance(value, datetime):
            raise TypeError(
                f"MutableDateTime wraps a datetime, got {type(value).__name__}"
            )
        self._value = value

    def __getattr__(self, name: str) -> Any:
        if name == "_value":
            raise AttributeError(name)
        return getattr(self._value, name)

    def to_datetime(self) -> datetime:
        """Return the current value as an immutable ``datetime``."""
        return self._value

    def modify(self, **delta: float) -> "MutableDateTime":
        """Shift the value by a ``timedelta`` built from ``delta``."""
        self._value = self._value + timedelta(**delta)
        return self

    def set_date(self, year: int, month: int, day: int) -> "MutableDateTime":
        self._value = self._value.replace(year=year, month=month, day=day)
        return self

    def set_time(
        self, hour: int, minute: int, second: int = 0, microsecond: int = 0
    ) -> "MutableDateTime":
        self._value = self._value.replace(
            hour=hour, minute=minute, second=second, microsecond=microsecond
        )
        return self

    def set_timezone(self, tz: Union[str, tzinfo]) -> "MutableDateTime":
        """Convert the value to another zone, keeping the same instant."""
        if isinstance(tz, str):
            tz = ZoneInfo(tz)
        self._value = self._value.astimezone(tz)
        return self

    @staticmethod
    def _unwrap(other: Any) -> Optional[datetime]:
        if isinstance(other, MutableDateTime):
            return other._value
        if isinstance(other, datetime):
            return other
        return None

    def __eq__(self, other: Any) -> bool:
        other_value = self._unwrap(other)
        if other_value is None:
            return NotImplemented
        return self._value == other_value

    def __lt__(self, other: Any) -> bool:
        other_value = self._unwrap(other)
        if other_value is None:
            return NotImplemented
        return self._value < other_value

    def __le__(self, other: Any) -> bool:
        other_value = self._unwrap(other)
        if other_value is None:
            return NotImplemented
        return self._value <= other_value

    def __gt__(self, other: Any) -> bool:
        other_value = self._unwrap(other)
        if other_value is None:
            return NotImplemented
        return self._value > other_value

    def __ge__(self, other: Any) -> bool:
        other_value = self._unwrap(other)
        if other_value is None:
            return NotImplemented
        return self._value >= other_value

    def __repr__(self) -> str:
        return f"MutableDateTime({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)


def get_default_timezone() -> tzinfo:
    """
    Return the zone applied to date/time text that carries no offset.

    ``DJANGO_COERCE["DEFAULT_TIMEZONE"]`` wins; otherwise Django's
    ``TIME_ZONE`` setting is used.
    """
    configured = get_setting("DEFAULT_TIMEZONE")
    if not configured:
        return timezone.get_default_timezone()
    if isinstance(configured, tzinfo):
        return configured
    try:
        return ZoneInfo(configured)
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as exc:
        raise ImproperlyConfigured(
            f"DJANGO_COERCE['DEFAULT_TIMEZONE'] is not a valid zone: {configured!r}"
        ) from exc


def format_timestamp(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
) -> str:
    """
    Build a canonical ``Y-M-D h:m:s`` timestamp string.

    Out-of-range parts are formatted as-is, so the string only parses when
    the parts form a real calendar date.

    Examples:
        >>> format_timestamp(1978, 10, 1, 6, 30)
        "1978-10-01 06:30:00"
    """
    return CANONICAL_TIMESTAMP_FORMAT.format(
        year=year, month=month, day=day, hour=hour, minute=minute, second=second
    )


def format_wall_time(value: datetime) -> str:
    """Format the wall-clock time of ``value``, microseconds included when set."""
    text = format_timestamp(
        value.year, value.month, value.day, value.hour, value.minute, value.second
    )
    if value.microsecond:
        text += f".{value.microsecond:06d}"
    return text


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Parse date/time text with Django's date parser.

    Date-only text resolves to midnight. Returns None when the text is not
    a recognised format.

    Raises:
        ValueError: If the text is well formatted but not a valid date.
    """
    parsed = parse_datetime(value)
    if parsed is not None:
        return parsed

    parsed_date = parse_date(value)
    if parsed_date is not None:
        return datetime(parsed_date.year, parsed_date.month, parsed_date.day)
    return None


def localize(value: datetime, tz: tzinfo) -> datetime:
    """Attach ``tz`` to a naive datetime; aware values keep their own offset."""
    if timezone.is_aware(value):
        return value
    return timezone.make_aware(value, tz)
