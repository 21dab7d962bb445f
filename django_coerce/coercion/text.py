"""
Text coercers: strings, plain text and email addresses.
"""

import html
import logging
import math
import re
from decimal import Decimal
from typing import Any, Optional

from django.core.exceptions import SuspiciousOperation, ValidationError
from django.core.validators import validate_email
from django.utils.html import strip_tags

from ..config_proxy import get_setting
from ..options import EmailAddressOptions, OptionsInput, PlainTextOptions, StringOptions
from .scalars import NUMERIC_TYPES
from .utils import fallback

logger = logging.getLogger(__name__)

WHITESPACE_PATTERN = re.compile(r"\s+")

# Stands in for word-separating whitespace while markup is stripped.
SPACE_MARKER = "~~@~~"

# This many consecutive markers (whitespace around them included) become a
# paragraph break; shorter runs become a single space.
PARAGRAPH_MARKER_RUN = 4

BLOCK_TAGS = [
    "address",
    "article",
    "aside",
    "blockquote",
    "div",
    "dl",
    "figure",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "header",
    "li",
    "main",
    "nav",
    "ol",
    "p",
    "pre",
    "section",
    "table",
    "tr",
    "ul",
]

CLOSING_BLOCK_TAG_PATTERN = re.compile(
    r"</(?:%s)\s*>" % "|".join(BLOCK_TAGS), re.IGNORECASE
)
PARAGRAPH_PATTERN = re.compile(
    r"(\s*%s\s*){%d,}" % (re.escape(SPACE_MARKER), PARAGRAPH_MARKER_RUN)
)
SPACE_PATTERN = re.compile(r"(\s*%s\s*)+" % re.escape(SPACE_MARKER))
LEADING_BLANK_PATTERN = re.compile(r"^\s{2,}", re.MULTILINE)


def _number_to_text(value: Any) -> str:
    """Render a number in plain decimal notation (no exponent, no ``.0``)."""
    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return "0" if text == "-0" else text
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _stringify(value: Any) -> Optional[str]:
    """Return the text form of a value, or None if it has none."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, bytes, bytearray)):
        return None
    if isinstance(value, NUMERIC_TYPES):
        return _number_to_text(value)
    # Only objects that define their own __str__ have a textual form;
    # containers and plain objects fall back to object.__str__ (their repr).
    if type(value).__str__ is object.__str__:
        return None
    try:
        return str(value)
    except Exception:
        return None


def to_string(value: Any, options: OptionsInput = None, **overrides: Any) -> Any:
    """
    Coerce a value to a string.

    Strings, numbers and objects defining ``__str__`` are accepted. On a
    non-empty result the following are applied in order:

    - ``compact_whitespace``: collapse every whitespace run to one space
    - ``trim_whitespace``: strip leading/trailing whitespace
    - ``max_length`` (> 0): truncate, then strip trailing whitespace again
      if ``trim_whitespace`` is set

    A blank result fails when ``allow_blank`` is false.

    Args:
        value: The value to coerce.
        options: ``StringOptions`` or a mapping of option names.
        **overrides: Options given as keywords.

    Returns:
        The coerced string, or ``default`` if coercion fails.

    Examples:
        >>> to_string(-32.114)
        "-32.114"
        >>> to_string("  foo", max_length=2, trim_whitespace=True)
        "fo"
    """
    resolved = StringOptions.resolve(options, overrides)

    text = _stringify(value)
    if text is None:
        return fallback("string", value, resolved.default)

    if text:
        if resolved.compact_whitespace:
            text = WHITESPACE_PATTERN.sub(" ", text)
        if resolved.trim_whitespace:
            text = text.strip()
        if resolved.max_length is not None and resolved.max_length > 0:
            text = text[: resolved.max_length]
            if resolved.trim_whitespace:
                text = text.rstrip()

    if not resolved.allow_blank and not text.strip():
        return fallback("string", value, resolved.default, "blank")
    return text


def _markup_to_text(markup: str) -> str:
    text = CLOSING_BLOCK_TAG_PATTERN.sub(
        r"\g<0>" + SPACE_MARKER * (PARAGRAPH_MARKER_RUN - 1), markup
    )
    text = text.replace(">", ">" + SPACE_MARKER)
    text = strip_tags(text)
    text = text.replace("&nbsp;", " ")
    text = html.unescape(text)
    text = text.replace(" ", SPACE_MARKER)
    text = PARAGRAPH_PATTERN.sub("\n\n", text)
    text = SPACE_PATTERN.sub(" ", text)
    return LEADING_BLANK_PATTERN.sub("\n", text)


def to_plain_text(value: Any, options: OptionsInput = None, **overrides: Any) -> Any:
    """
    Coerce rich text (HTML) to normalized plain text.

    Markup is stripped without running adjacent words together, entities
    are decoded, whitespace runs become single spaces, and block boundaries
    (closing ``</p>``, ``</div>``, ``</li>``...) or long whitespace runs
    become a paragraph break (``"\\n\\n"``). The result is then passed through
    ``to_string`` with ``trim_whitespace`` forced on.

    Args:
        value: The value to coerce. Values without a text form become "".
        options: ``PlainTextOptions`` or a mapping of option names.
        **overrides: Options given as keywords.

    Returns:
        The plain text, or ``default`` if coercion fails.

    Examples:
        >>> to_plain_text("<p>A</p><p>B</p>")
        "A\\n\\nB"
    """
    resolved = PlainTextOptions.resolve(options, overrides)

    text = to_string(value, default="")
    if text:
        try:
            text = _markup_to_text(text)
        except SuspiciousOperation as exc:
            logger.warning(f"Refusing to strip markup from plain text input: {exc}")
            return fallback("plain text", value, resolved.default, "suspicious markup")

    return to_string(
        text,
        allow_blank=resolved.allow_blank,
        compact_whitespace=resolved.compact_whitespace,
        default=resolved.default,
        max_length=resolved.max_length,
        trim_whitespace=True,
    )


def to_email_address(value: Any, options: OptionsInput = None, **overrides: Any) -> Any:
    """
    Coerce a value to a syntactically valid email address.

    The value is coerced to a trimmed string (truncated to
    ``EMAIL_MAX_LENGTH`` characters) and checked with Django's
    ``validate_email``.

    Examples:
        >>> to_email_address("  test@test.com ")
        "test@test.com"
        >>> to_email_address("10", default="")
        ""
    """
    resolved = EmailAddressOptions.resolve(options, overrides)

    candidate = to_string(
        value,
        default="",
        max_length=get_setting("EMAIL_MAX_LENGTH", 320),
        trim_whitespace=True,
    )
    try:
        validate_email(candidate)
    except ValidationError:
        return fallback("email address", value, resolved.default, "invalid format")
    return candidate
