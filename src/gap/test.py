"""Tests for the gap-to-structure translator."""

import pytest

from src.markup import Element, Text, render_markup, table_cell, table_row

from .lib import (
    DESKTOP_GAP_CLASS,
    MOBILE_GAP_CLASS,
    has_gap,
    horizontal_cells,
    horizontal_spacer,
    interleave,
    mobile_spacer,
    vertical_rows,
    vertical_spacer,
)


def cells(count: int) -> list[Element]:
    return [table_cell(Text(f"child-{i}")) for i in range(count)]


class TestInterleave:
    """Tests for interleave."""

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [0, 1, 2, 5])
    def test_spacer_count(self, count):
        result = interleave(list(range(count)), lambda i: f"gap-{i}")
        spacers = [item for item in result if isinstance(item, str)]
        assert len(spacers) == max(count - 1, 0)

    @pytest.mark.unit
    def test_no_trailing_spacer(self):
        assert interleave(["a", "b"], lambda i: "-") == ["a", "-", "b"]


class TestHasGap:
    """Tests for has_gap."""

    @pytest.mark.unit
    def test_values(self):
        assert has_gap("10px")
        assert not has_gap(None)
        assert not has_gap("0px")
        assert not has_gap("0")


class TestSpacers:
    """Tests for individual spacer elements."""

    @pytest.mark.unit
    def test_horizontal_spacer(self):
        assert render_markup(horizontal_spacer("20px")) == (
            '<td class="desktop-gap-column" width="20" '
            'style="width: 20px; line-height: 1px; font-size: 1px">&nbsp;</td>'
        )

    @pytest.mark.unit
    def test_vertical_spacer(self):
        row = vertical_spacer("10px")
        cell = row.children[0]
        assert row.tag == "tr"
        assert cell.attrs["height"] == "10"
        assert cell.style["height"] == "10px"
        assert cell.style["line-height"] == "1px"

    @pytest.mark.unit
    def test_non_px_gap_kept_verbatim(self):
        assert horizontal_spacer("1em").attrs["width"] == "1em"

    @pytest.mark.unit
    def test_mobile_spacer_hidden(self):
        spacer = mobile_spacer("16px")
        assert spacer.classes == [MOBILE_GAP_CLASS]
        assert spacer.style["display"] == "none"
        assert spacer.style["height"] == "16px"


class TestHorizontalCells:
    """Tests for horizontal gap translation."""

    @pytest.mark.unit
    def test_no_gap(self):
        assert horizontal_cells(cells(3), None) == cells(3)

    @pytest.mark.unit
    def test_spacers_between_children(self):
        result = horizontal_cells(cells(3), "20px")
        assert len(result) == 5
        assert [DESKTOP_GAP_CLASS in c.classes for c in result] == [
            False,
            True,
            False,
            True,
            False,
        ]

    @pytest.mark.unit
    def test_order_preserved(self):
        result = horizontal_cells(cells(3), "20px")
        texts = [c.children[0].value for c in result if not c.classes]
        assert texts == ["child-0", "child-1", "child-2"]

    @pytest.mark.unit
    def test_stacking_adds_mobile_spacer_except_last(self):
        result = horizontal_cells(cells(3), "20px", stacking=True)
        content = [c for c in result if DESKTOP_GAP_CLASS not in c.classes]
        mobile = [len(c.find_all("div", MOBILE_GAP_CLASS)) for c in content]
        assert mobile == [1, 1, 0]

    @pytest.mark.unit
    def test_stacking_without_gap(self):
        result = horizontal_cells(cells(2), None, stacking=True)
        assert all(not c.find_all("div") for c in result)


class TestVerticalRows:
    """Tests for vertical gap translation."""

    @pytest.mark.unit
    def test_spacer_rows(self):
        rows = [table_row(cell) for cell in cells(3)]
        result = vertical_rows(rows, "10px")
        assert len(result) == 5
        assert result[1].children[0].style["height"] == "10px"
        assert result[3].children[0].style["height"] == "10px"

    @pytest.mark.unit
    def test_no_gap(self):
        rows = [table_row(cell) for cell in cells(2)]
        assert vertical_rows(rows, "0px") == rows
