"""Tests for alignment mapping."""

import pytest

from src.schema import Alignment

from .lib import to_horizontal, to_vertical


class TestHorizontal:
    """Tests for horizontal alignment."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected", [("start", "left"), ("center", "center"), ("end", "right")]
    )
    def test_mapping(self, value, expected):
        assert to_horizontal(value) == expected

    @pytest.mark.unit
    def test_enum_member(self):
        assert to_horizontal(Alignment.END) == "right"

    @pytest.mark.unit
    def test_default(self):
        assert to_horizontal(None) == "left"
        assert to_horizontal(None, default="center") == "center"
        assert to_horizontal("diagonal") == "left"


class TestVertical:
    """Tests for vertical alignment."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected", [("start", "top"), ("center", "middle"), ("end", "bottom")]
    )
    def test_mapping(self, value, expected):
        assert to_vertical(value) == expected

    @pytest.mark.unit
    def test_default(self):
        assert to_vertical(None) == "top"
        assert to_vertical(None, default="middle") == "middle"
