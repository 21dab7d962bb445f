"""
Default configuration for the django-coerce library.

Every setting the library consumes is listed here. Projects override any of
them through a ``DJANGO_COERCE`` dictionary in their Django settings.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "django-coerce"

SETTINGS_NAME = "DJANGO_COERCE"


# --------------------------------------------------------------------------- #
# Library-wide defaults
# --------------------------------------------------------------------------- #
LIBRARY_DEFAULTS: dict[str, Any] = {
    # Zone applied to naive date/time text; None falls back to TIME_ZONE.
    "DEFAULT_TIMEZONE": None,
    # Flavor returned by to_datetime() when it cannot be inferred.
    "IMMUTABLE_DATETIMES": False,
    # Candidate email strings are truncated to this many characters.
    "EMAIL_MAX_LENGTH": 320,
    "LOG_COERCION_FAILURES": False,
}


# --------------------------------------------------------------------------- #
# Helper functions
# --------------------------------------------------------------------------- #
def get_default_settings() -> dict[str, Any]:
    """Return a shallow copy of the library defaults."""
    return LIBRARY_DEFAULTS.copy()


def merge_settings(*settings_dicts: dict[str, Any]) -> dict[str, Any]:
    """
    Merge multiple settings dictionaries.
    Later dictionaries override earlier ones.
    """
    result: dict[str, Any] = {}
    for settings_dict in settings_dicts:
        if settings_dict:
            result.update(settings_dict)
    return result


def validate_settings(settings: dict[str, Any]) -> list[str]:
    """
    Validate a settings dictionary and return a list of validation errors.
    """
    errors: list[str] = []

    for key in settings:
        if key not in LIBRARY_DEFAULTS:
            errors.append(f"Unknown setting '{key}'")

    zone = settings.get("DEFAULT_TIMEZONE")
    if zone is not None and not isinstance(zone, tzinfo):
        if not isinstance(zone, str):
            errors.append("DEFAULT_TIMEZONE must be a zone name or a tzinfo")
        else:
            try:
                ZoneInfo(zone)
            except (ZoneInfoNotFoundError, ValueError, OSError):
                errors.append(f"DEFAULT_TIMEZONE '{zone}' is not a known zone")

    for key in ("IMMUTABLE_DATETIMES", "LOG_COERCION_FAILURES"):
        if key in settings and not isinstance(settings[key], bool):
            errors.append(f"{key} must be a boolean")

    max_length = settings.get("EMAIL_MAX_LENGTH")
    if max_length is not None and (
        isinstance(max_length, bool) or not isinstance(max_length, int) or max_length <= 0
    ):
        errors.append("EMAIL_MAX_LENGTH must be a positive integer")

    return errors
