"""
Scalar coercers: booleans, floats and integers.

These functions never raise for a bad input value; they return the
``default`` option instead. Only malformed options raise
``InvalidConfiguration``.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..options import BoolOptions, FloatOptions, IntOptions, OptionsInput
from .utils import fallback

TRUE_STRINGS = frozenset({"1", "true", "on", "yes"})
FALSE_STRINGS = frozenset({"0", "false", "off", "no"})

# Optional sign, digits with an optional decimal point, optional exponent.
NUMERIC_PATTERN = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)

NUMERIC_TYPES = (int, float, Decimal)


def is_numeric(value: Any) -> bool:
    """
    Check whether a value is a number or numeric text.

    Booleans are never numeric. Text is trimmed before matching and must be
    plain decimal notation (no underscores, hex, ``nan`` or ``inf``).

    Examples:
        >>> is_numeric(" -17.54 ")
        True
        >>> is_numeric("1_000")
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, NUMERIC_TYPES):
        return True
    if isinstance(value, str):
        return NUMERIC_PATTERN.fullmatch(value.strip()) is not None
    return False


def _to_finite_float(value: Any) -> Optional[float]:
    if not is_numeric(value):
        return None
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (OverflowError, ValueError, InvalidOperation):
        return None
    if not math.isfinite(number):
        return None
    return number


def _coerce_float(value: Any, options: FloatOptions) -> Optional[float]:
    number = _to_finite_float(value)
    if number is None:
        return None

    if options.no_greater_than is not None and number > options.no_greater_than:
        number = float(options.no_greater_than)
    if options.no_less_than is not None and number < options.no_less_than:
        number = float(options.no_less_than)

    if number == 0.0 and not options.allow_zero:
        return None
    return number


def to_bool(value: Any, options: OptionsInput = None, **overrides: Any) -> Any:
    """
    Coerce a value to a boolean.

    ``True``, ``1`` and the strings ``"1"``, ``"true"``, ``"on"``, ``"yes"``
    coerce to True; ``False``, ``0`` and ``"0"``, ``"false"``, ``"off"``,
    ``"no"`` coerce to False. Strings are trimmed and compared
    case-insensitively. Everything else fails.

    Args:
        value: The value to coerce.
        options: ``BoolOptions`` or a mapping of option names.
        **overrides: Options given as keywords (``default``).

    Returns:
        The coerced boolean, or ``default`` if coercion fails.

    Examples:
        >>> to_bool("  Yes ")
        True
        >>> to_bool(154, default=False)
        False
    """
    resolved = BoolOptions.resolve(options, overrides)

    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
    elif isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False

    return fallback("bool", value, resolved.default)


def to_float(value: Any, options: OptionsInput = None, **overrides: Any) -> Any:
    """
    Coerce a value to a float.

    Numbers and numeric strings are accepted. The result is clamped to
    ``no_greater_than`` first and ``no_less_than`` second. A zero result
    fails when ``allow_zero`` is false, including a value clamped to zero.

    Args:
        value: The value to coerce.
        options: ``FloatOptions`` or a mapping of option names.
        **overrides: Options given as keywords.

    Returns:
        The coerced float, or ``default`` if coercion fails.

    Examples:
        >>> to_float("  -17.54  ")
        -17.54
        >>> to_float(100, no_greater_than=10, no_less_than=20)
        20.0
    """
    resolved = FloatOptions.resolve(options, overrides)
    number = _coerce_float(value, resolved)
    if number is None:
        return fallback("float", value, resolved.default)
    return number


def to_int(value: Any, options: OptionsInput = None, **overrides: Any) -> Any:
    """
    Coerce a value to an integer.

    The value goes through the float coercion with the same options, then
    the integer part is kept (truncation toward zero). The ``default`` is
    returned untouched on failure.

    Examples:
        >>> to_int("873.432")
        873
        >>> to_int(-32.114)
        -32
    """
    resolved = IntOptions.resolve(options, overrides)
    number = _coerce_float(value, resolved)
    if number is None:
        return fallback("int", value, resolved.default)
    return int(number)
