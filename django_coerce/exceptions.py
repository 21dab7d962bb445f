"""
Custom exceptions for django-coerce.

Coercion failures caused by the *input value* never raise; they resolve to
the caller's default. The exceptions below are reserved for programmer
errors, i.e. options that do not match a coercer's schema.
"""

from typing import Optional


class CoercionError(Exception):
    """Base exception for django-coerce errors."""


class InvalidConfiguration(CoercionError, ValueError):
    """Raised when the options passed to a coercer cannot be resolved."""

    def __init__(self, message: str, option: Optional[str] = None):
        self.option = option
        super().__init__(message)
