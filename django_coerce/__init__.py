"""
django-coerce: predictable value coercion for Django projects.

Example:
    from django_coerce import to_bool, to_datetime, to_int

    to_bool(" yes ")                         # True
    to_int("873.432", no_less_than=900)      # 900
    to_datetime({"day": 1, "month": 10, "year": 1978}, immutable=True)
"""

from .coercion import (
    is_numeric,
    to_bool,
    to_datetime,
    to_email_address,
    to_float,
    to_int,
    to_plain_text,
    to_string,
)
from .exceptions import CoercionError, InvalidConfiguration
from .options import (
    BoolOptions,
    CoerceOptions,
    DateTimeOptions,
    EmailAddressOptions,
    FloatOptions,
    IntOptions,
    PlainTextOptions,
    StringOptions,
)
from .utils.datetime_utils import MutableDateTime

__version__ = "0.1.0"

__all__ = [
    # Coercers
    "is_numeric",
    "to_bool",
    "to_datetime",
    "to_email_address",
    "to_float",
    "to_int",
    "to_plain_text",
    "to_string",
    # Options
    "CoerceOptions",
    "BoolOptions",
    "DateTimeOptions",
    "EmailAddressOptions",
    "FloatOptions",
    "IntOptions",
    "PlainTextOptions",
    "StringOptions",
    # Date/time flavor
    "MutableDateTime",
    # Exceptions
    "CoercionError",
    "InvalidConfiguration",
]
