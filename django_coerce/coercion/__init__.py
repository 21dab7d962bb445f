"""
Coercion functions.

Each function takes an arbitrary input value plus options, and returns the
value converted to its target type or the ``default`` option when that is
not possible.
"""

from .scalars import is_numeric, to_bool, to_float, to_int
from .temporal import to_datetime
from .text import to_email_address, to_plain_text, to_string

__all__ = [
    "is_numeric",
    "to_bool",
    "to_datetime",
    "to_email_address",
    "to_float",
    "to_int",
    "to_plain_text",
    "to_string",
]
