"""
Utility modules for django-coerce.
"""

from .datetime_utils import (
    MutableDateTime,
    format_timestamp,
    format_wall_time,
    get_default_timezone,
    localize,
    parse_timestamp,
)
from .normalization import normalize_option_name
from .sanitization import sanitize_log_value

__all__ = [
    # Datetime
    "MutableDateTime",
    "format_timestamp",
    "format_wall_time",
    "get_default_timezone",
    "localize",
    "parse_timestamp",
    # Normalization
    "normalize_option_name",
    # Sanitization
    "sanitize_log_value",
]
