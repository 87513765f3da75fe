"""Tests for unit helpers."""

import pytest

from .lib import (
    format_number,
    format_px,
    html_length,
    is_zero_length,
    leading_number,
    normalize_hex,
    parse_px,
    to_length,
)


class TestParsePx:
    """Tests for parse_px."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [("20px", 20.0), (" 12.5px ", 12.5), ("0px", 0.0), (600, 600.0), ("-4px", -4.0)],
    )
    def test_pixel_values(self, value, expected):
        assert parse_px(value) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "", "50%", "auto", "1em", "20", True])
    def test_non_pixel_values(self, value):
        assert parse_px(value) is None


class TestLeadingNumber:
    """Tests for leading_number."""

    @pytest.mark.unit
    def test_shorthand(self):
        assert leading_number("12px 24px") == 12.0

    @pytest.mark.unit
    def test_default(self):
        assert leading_number("auto", default=7) == 7
        assert leading_number(None) == 0.0

    @pytest.mark.unit
    def test_number(self):
        assert leading_number(8) == 8.0


class TestFormatting:
    """Tests for number and pixel formatting."""

    @pytest.mark.unit
    def test_rounds_to_two_decimals(self):
        assert format_px(560 / 3) == "186.67px"

    @pytest.mark.unit
    def test_strips_trailing_zeros(self):
        assert format_px(400.0) == "400px"
        assert format_number(6.80) == "6.8"

    @pytest.mark.unit
    def test_negative(self):
        assert format_px(-10.5) == "-10.5px"

    @pytest.mark.unit
    def test_zero(self):
        assert format_px(-0.001) == "0px"

    @pytest.mark.unit
    def test_to_length(self):
        assert to_length(24) == "24px"
        assert to_length("50%") == "50%"
        assert to_length(None) is None


class TestNormalizeHex:
    """Tests for normalize_hex."""

    @pytest.mark.unit
    def test_prefixes_hash(self):
        assert normalize_hex("007bff") == "#007bff"

    @pytest.mark.unit
    def test_expands_short_hex(self):
        assert normalize_hex("#fff") == "#ffffff"
        assert normalize_hex("abc") == "#aabbcc"

    @pytest.mark.unit
    def test_default(self):
        assert normalize_hex(None) == "#000000"
        assert normalize_hex("  ", default="#ffffff") == "#ffffff"

    @pytest.mark.unit
    def test_malformed_is_prefixed(self):
        assert normalize_hex("red") == "#red"


class TestIsZeroLength:
    """Tests for is_zero_length."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "", "0", "0px", 0, " 0px "])
    def test_zero(self, value):
        assert is_zero_length(value)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["10px", "1em", 4])
    def test_non_zero(self, value):
        assert not is_zero_length(value)


class TestHtmlLength:
    """Tests for html_length."""

    @pytest.mark.unit
    def test_px_loses_unit(self):
        assert html_length("186.67px") == "186.67"
        assert html_length(24) == "24"

    @pytest.mark.unit
    def test_other_units_verbatim(self):
        assert html_length("35%") == "35%"

    @pytest.mark.unit
    def test_empty(self):
        assert html_length(None) is None
        assert html_length("") is None
