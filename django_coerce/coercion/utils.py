"""
Helpers shared by the coercion functions.
"""

import logging
from typing import Any

from ..config_proxy import get_setting
from ..utils.sanitization import sanitize_log_value

logger = logging.getLogger("django_coerce.coercion")


def fallback(target: str, value: Any, default: Any, reason: str = "") -> Any:
    """
    Return ``default`` for a value that could not be coerced to ``target``.

    The failure is logged at DEBUG level when ``LOG_COERCION_FAILURES`` is
    enabled.

    Args:
        target: Name of the target type (for log output).
        value: The rejected input value.
        default: The caller's default.
        reason: Optional short explanation.
    """
    if get_setting("LOG_COERCION_FAILURES", False):
        logger.debug(
            "Could not coerce %s to %s%s; returning default",
            sanitize_log_value(value),
            target,
            f" ({reason})" if reason else "",
        )
    return default
