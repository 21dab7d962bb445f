"""
Sanitization utilities for django-coerce log output.
"""

from typing import Any

MAX_LOG_VALUE_LENGTH = 200


def sanitize_log_value(value: Any, limit: int = MAX_LOG_VALUE_LENGTH) -> str:
    """
    Render a value for safe logging.

    Raw input can be arbitrarily large (whole documents handed to
    ``to_plain_text``), so the repr is truncated.

    Args:
        value: Value to render.
        limit: Maximum number of characters kept from the repr.

    Returns:
        A bounded, single-line representation of the value.

    Examples:
        >>> sanitize_log_value("x" * 5, limit=3)
        "'xx...[truncated]"
    """
    try:
        rendered = repr(value)
    except Exception:  # repr() of arbitrary input may raise
        rendered = f"<{type(value).__name__} instance>"

    rendered = rendered.replace("\n", "\\n").replace("\r", "\\r")
    if len(rendered) > limit:
        return rendered[:limit] + "...[truncated]"
    return rendered
