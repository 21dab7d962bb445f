"""
Unit tests for the string, plain text and email address coercers.
"""

from datetime import datetime
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.core.exceptions import SuspiciousOperation
from django.test import override_settings

from django_coerce import to_email_address, to_plain_text, to_string

pytestmark = pytest.mark.unit

LOREM = "Lorem ipsum dolor sit amet, consectetur adipiscing elit."


class Shouty:
    def __str__(self):
        return "HELLO"


class TestToString:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "0"),
            (-2, "-2"),
            (975.32, "975.32"),
            (-32.114, "-32.114"),
            (Decimal("1.50"), "1.50"),
            (1.0, "1"),
            (-0.0, "0"),
            (1e20, "100000000000000000000"),
            (1.5e-7, "0.00000015"),
            (Decimal("1E+3"), "1000"),
            (LOREM, LOREM),
            ("   " + LOREM + "  ", "   " + LOREM + "  "),
            (Shouty(), "HELLO"),
        ],
    )
    def test_coerces(self, value, expected):
        assert to_string(value) == expected

    @pytest.mark.parametrize(
        "value, compact, expected",
        [
            ("", True, ""),
            ("", False, ""),
            ("  ", True, " "),
            ("  ", False, "  "),
            (
                "Lorem   ipsum dolor  \t  sit amet\n, consectetur\n\nadipiscing elit.",
                True,
                "Lorem ipsum dolor sit amet , consectetur adipiscing elit.",
            ),
            (
                " Lorem ipsum dolor  sit amet, consectetur adipiscing elit. ",
                True,
                " Lorem ipsum dolor sit amet, consectetur adipiscing elit. ",
            ),
        ],
    )
    def test_compact_whitespace(self, value, compact, expected):
        assert to_string(value, compact_whitespace=compact) == expected

    @pytest.mark.parametrize(
        "value, max_length, expected, extra",
        [
            ("", None, "", {}),
            ("  ", None, "  ", {}),
            ("  ", 0, "  ", {}),
            ("  ", 1, " ", {}),
            ("foo", -1, "foo", {}),
            ("foo", -35, "foo", {}),
            ("foo", 35, "foo", {}),
            ("foo", 3, "foo", {}),
            ("foo", 2, "fo", {}),
            (" foo", 35, " foo", {}),
            ("  foo", 3, "  f", {}),
            ("  foo", 2, "  ", {}),
            ("  foo", 2, None, {"allow_blank": False}),
            ("  f  o o ", 6, " f o o", {"compact_whitespace": True}),
            ("  foo", 2, "fo", {"trim_whitespace": True}),
            ("  f  o o  ", 4, "f o", {"compact_whitespace": True, "trim_whitespace": True}),
        ],
    )
    def test_max_length(self, value, max_length, expected, extra):
        assert to_string(value, max_length=max_length, **extra) == expected

    @pytest.mark.parametrize(
        "value, options",
        [
            (True, {}),
            (False, {}),
            (None, {}),
            ([], {}),
            ({}, {}),
            (object(), {}),
            (b"bytes", {}),
            ("", {"allow_blank": False}),
            ("     ", {"allow_blank": False}),
            ("\n", {"allow_blank": False}),
            ("\r", {"allow_blank": False}),
            ("\t", {"allow_blank": False}),
            (" \n\r\t", {"allow_blank": False}),
            ("    ", {"allow_blank": False, "compact_whitespace": True}),
            (" a", {"allow_blank": False, "max_length": 1}),
        ],
    )
    def test_failure_returns_none_by_default(self, value, options):
        assert to_string(value, options) is None

    def test_failure_returns_default(self):
        now = datetime.now()
        assert to_string(True, default=False) is False
        assert to_string(False, default=True) is True
        assert to_string([1, 2, 3], default=now) is now
        assert to_string([1, 2, 3], default=["a", "b", "c"]) == ["a", "b", "c"]

    @pytest.mark.parametrize(
        "options",
        [
            {},
            {"trim_whitespace": True},
            {"compact_whitespace": True},
            {"max_length": 7, "trim_whitespace": True},
            {"max_length": 5, "compact_whitespace": True},
        ],
    )
    def test_idempotent(self, options):
        value = "  Lorem \t ipsum\n\n dolor  "
        once = to_string(value, options)
        assert to_string(once, options) == once


class TestToPlainText:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (LOREM, LOREM),
            ("   " + LOREM + "  ", LOREM),
            (
                "  <p>Lorem ipsum &nbsp; dolor sit amet,  </p><p><i>consectetur</i>&nbsp;adipiscing elit. ",
                "Lorem ipsum dolor sit amet,\n\nconsectetur adipiscing elit.",
            ),
            (
                "<p>Lorem ipsum dolor sit amet.</p><p></p><p></p><p>Consectetur adipiscing elit.</p>",
                "Lorem ipsum dolor sit amet.\n\nConsectetur adipiscing elit.",
            ),
            (
                "<p>Lorem ipsum dolor sit amet.</p><p></p><p></p><p>\n \n \n \n\n <p>Consectetur adipiscing elit.</p>",
                "Lorem ipsum dolor sit amet.\n\nConsectetur adipiscing elit.",
            ),
            ("\n \n \n<h1>Hello\n \n \n<p>World!</p>", "Hello World!"),
            ("<p>A</p><p>B</p>", "A\n\nB"),
            ("<div>One</div><div>Two</div>", "One\n\nTwo"),
            ("<b>bold</b><i>italic</i>", "bold italic"),
            ("Fish &amp; Chips &lt;3 &quot;quoted&quot; &apos;single&apos; &#169;", "Fish & Chips <3 \"quoted\" 'single' ©"),
            (42, "42"),
        ],
    )
    def test_coerces(self, value, expected):
        assert to_plain_text(value) == expected

    def test_values_without_text_become_blank(self):
        assert to_plain_text(None) == ""
        assert to_plain_text([1, 2]) == ""
        assert to_plain_text(None, allow_blank=False, default="n/a") == "n/a"
        assert to_plain_text("<p> &nbsp; </p>", allow_blank=False) is None

    def test_options_are_forwarded(self):
        assert to_plain_text("<p>Hello</p><p>World</p>", compact_whitespace=True) == "Hello World"
        assert to_plain_text("<p>Hello world</p>", max_length=6) == "Hello"

    def test_trim_whitespace_is_not_an_option(self):
        from django_coerce import InvalidConfiguration

        with pytest.raises(InvalidConfiguration):
            to_plain_text("text", trim_whitespace=False)

    def test_suspicious_markup_returns_default(self):
        with patch(
            "django_coerce.coercion.text.strip_tags",
            side_effect=SuspiciousOperation("too deep"),
        ):
            assert to_plain_text("<p>x</p>", default="fallback") == "fallback"


class TestToEmailAddress:
    @pytest.mark.parametrize(
        "value",
        ["test@test.com", "   test@test.com", "test@test.com  ", "  test@test.com   "],
    )
    def test_coerces(self, value):
        assert to_email_address(value) == "test@test.com"

    @pytest.mark.parametrize(
        "value, options, expected",
        [
            ("  ", {}, None),
            (object(), {}, None),
            ("no-at-sign", {}, None),
            ("two@@example.com", {}, None),
            (True, {"default": False}, False),
            ("10", {"default": 7736}, 7736),
            ([1, 2, 3], {"default": ["a", "b", "c"]}, ["a", "b", "c"]),
        ],
    )
    def test_failure_returns_default(self, value, options, expected):
        assert to_email_address(value, options) == expected

    def test_candidate_is_truncated(self):
        with override_settings(DJANGO_COERCE={"EMAIL_MAX_LENGTH": 13}):
            assert to_email_address("test@test.com.extra") == "test@test.com"

    @pytest.mark.parametrize(
        "value",
        ["user@localhost", "user@exämple.com", "first.last+tag@sub.example.co.uk"],
    )
    def test_accepts_what_django_validates(self, value):
        assert to_email_address(value) == value

    @pytest.mark.parametrize(
        "value",
        ["user@example", "user@-example.com", "user name@example.com", "user@[300.1.1.1]"],
    )
    def test_rejects_what_django_rejects(self, value):
        assert to_email_address(value) is None
