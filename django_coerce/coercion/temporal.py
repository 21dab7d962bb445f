"""
Date/time coercer.

``to_datetime`` accepts three input shapes, decided once on entry:

- an existing date-time (``datetime`` or ``MutableDateTime``), whose flavor
  and zone are preserved unless overridden by the options
- a mapping of ``year``/``month``/``day`` and optional ``hour``/``minute``
- anything else, coerced to trimmed text

Each shape is reduced to date/time text which is then parsed with Django's
date parser. Text that carries its own UTC offset keeps it; otherwise the
``tz`` option (or the default zone) is attached.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from ..config_proxy import get_setting
from ..options import DateTimeOptions, OptionsInput
from ..utils.datetime_utils import (
    MutableDateTime,
    format_timestamp,
    format_wall_time,
    get_default_timezone,
    localize,
    parse_timestamp,
)
from .scalars import to_int
from .text import to_string
from .utils import fallback

# Out-of-range defaults: a missing or malformed required component yields a
# timestamp that can never parse.
YEAR_SENTINEL = -1
MONTH_SENTINEL = 13
DAY_SENTINEL = 99


def _components_to_timestamp(components: Mapping) -> str:
    return format_timestamp(
        to_int(components.get("year"), default=YEAR_SENTINEL),
        to_int(components.get("month"), default=MONTH_SENTINEL),
        to_int(components.get("day"), default=DAY_SENTINEL),
        to_int(components.get("hour"), default=0, no_greater_than=23, no_less_than=0),
        to_int(components.get("minute"), default=0, no_greater_than=59, no_less_than=0),
    )


def to_datetime(value: Any, options: OptionsInput = None, **overrides: Any) -> Any:
    """
    Coerce a value to a timezone-aware date-time.

    Args:
        value: A ``datetime``/``MutableDateTime``, a mapping of date/time
            components, or date/time text.
        options: ``DateTimeOptions`` or a mapping of option names.
        **overrides: Options given as keywords (``default``, ``immutable``,
            ``tz``).

    Returns:
        A ``datetime`` when ``immutable`` resolves to true, a
        ``MutableDateTime`` otherwise, or ``default`` if coercion fails.

    Examples:
        >>> to_datetime({"day": 1, "month": 10, "year": 1978}, immutable=True)
        datetime.datetime(1978, 10, 1, 0, 0, tzinfo=zoneinfo.ZoneInfo(key='UTC'))
        >>> to_datetime({"day": 1, "month": 13, "year": 1978}) is None
        True
    """
    resolved = DateTimeOptions.resolve(options, overrides)
    immutable = resolved.immutable
    tz = resolved.tz
    fold = 0

    if isinstance(value, (datetime, MutableDateTime)):
        if immutable is None:
            immutable = not isinstance(value, MutableDateTime)
        if tz is None:
            # The fold picks the instant of an ambiguous wall time in its own zone.
            tz = value.tzinfo
            fold = value.fold
        text = format_wall_time(value)
    elif isinstance(value, Mapping):
        text = _components_to_timestamp(value)
    else:
        text = to_string(value, default="", trim_whitespace=True)

    if immutable is None:
        immutable = bool(get_setting("IMMUTABLE_DATETIMES", False))
    if tz is None:
        tz = get_default_timezone()

    try:
        parsed = parse_timestamp(text)
    except ValueError as exc:
        return fallback("datetime", value, resolved.default, str(exc))
    if parsed is None:
        return fallback("datetime", value, resolved.default, "unrecognised format")

    moment = localize(parsed, tz)
    if fold:
        moment = moment.replace(fold=fold)
    if immutable:
        return moment
    return MutableDateTime(moment)
