"""
Normalization utilities for django-coerce.

Option mappings frequently come straight from deserialized payloads, where
keys are written in camelCase. This module maps them onto the snake_case
names used by the option dataclasses.
"""

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def normalize_option_name(name: str) -> str:
    """
    Normalize an option name to snake_case.

    Args:
        name: Option name, either snake_case or camelCase.

    Returns:
        The snake_case option name.

    Examples:
        >>> normalize_option_name("noGreaterThan")
        "no_greater_than"
        >>> normalize_option_name("allow_zero")
        "allow_zero"
    """
    return _CAMEL_BOUNDARY.sub(r"_\1", name.strip()).lower()


