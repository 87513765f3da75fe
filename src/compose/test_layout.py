"""Tests for layout renderers."""

import pytest

from src.markup import Element, Text
from src.mid import ColumnConfig, ContainerConfig, RowConfig, SectionConfig

from .layout import (
    FIXED_WIDTH_CLASS,
    render_column,
    render_container,
    render_row,
    render_section,
)
from .lib import RenderOptions


def block(name: str) -> Element:
    return Element("p", children=(Text(name),))


def blocks(count: int) -> list[Element]:
    return [block(f"child-{index}") for index in range(count)]


def labelled(element: Element, label: str) -> list[Element]:
    return [
        table
        for table in element.find_all("table")
        if table.attrs.get("aria-label") == label
    ]


@pytest.fixture
def options() -> RenderOptions:
    return RenderOptions(canvas_width=600)


class TestContainer:
    """Tests for the container renderer."""

    @pytest.mark.unit
    def test_fixed_width_table(self, options):
        config = ContainerConfig(width_type="fixed", width="480px")
        element = render_container(config, blocks(2), options)
        (middle,) = labelled(element, "Container | Middle")
        assert middle.attrs["class"] == FIXED_WIDTH_CLASS
        assert middle.attrs["width"] == "480"
        assert middle.attrs["align"] == "center"
        assert middle.style["max-width"] == "480px"

    @pytest.mark.unit
    def test_full_width_uses_canvas(self, options):
        element = render_container(ContainerConfig(), blocks(2), options)
        (middle,) = labelled(element, "Container | Middle")
        assert middle.attrs["class"] is None
        widths = [td.attrs.get("width") for td in element.find_all("td")]
        assert widths.count("300") == 2

    @pytest.mark.unit
    def test_manual_widths(self, options):
        config = ContainerConfig.model_validate(
            {
                "childrenConstraints": {
                    "widthDistributionType": "manual",
                    "widths": ["25%", "75%"],
                }
            }
        )
        element = render_container(config, blocks(2), options)
        widths = [td.attrs.get("width") for td in element.find_all("td")]
        assert "25%" in widths
        assert "75%" in widths

    @pytest.mark.unit
    def test_stacking_cells(self, options):
        config = ContainerConfig(gap="16px", should_wrap=True)
        element = render_container(config, blocks(3), options)
        assert len(element.find_all("td", "stack-td")) == 3
        assert len(element.find_all("div", "mobile-gap-spacer")) == 2
        assert len(element.find_all("td", "desktop-gap-column")) == 2

    @pytest.mark.unit
    def test_single_child_does_not_stack(self, options):
        config = ContainerConfig(gap="16px", should_wrap=True)
        element = render_container(config, blocks(1), options)
        assert element.find_all("td", "stack-td") == []
        assert element.find_all("td", "desktop-gap-column") == []

    @pytest.mark.unit
    def test_no_children(self, options):
        element = render_container(ContainerConfig(gap="20px"), [], options)
        assert element.tag == "table"
        assert element.find_all("p") == []

    @pytest.mark.unit
    def test_border_layer(self, options):
        plain = render_container(ContainerConfig(padding="10px"), blocks(1), options)
        assert labelled(plain, "Container | Border") == []

        config = ContainerConfig.model_validate(
            {
                "padding": "10px",
                "borderRadius": "8px",
                "border": {"width": "1px", "style": "solid", "color": "#ddd"},
            }
        )
        boxed = render_container(config, blocks(1), options)
        (border,) = labelled(boxed, "Container | Border")
        assert border.style["border"] == "1px solid #ddd"
        assert border.style["border-collapse"] == "separate"
        padding_cell = border.find_all("td")[0]
        assert padding_cell.style["padding"] == "10px"

    @pytest.mark.unit
    def test_alignment(self, options):
        config = ContainerConfig(align_items="center", justify_content="end")
        element = render_container(config, blocks(2), options)
        (middle,) = labelled(element, "Container | Middle")
        assert middle.attrs["align"] == "right"
        valigns = {
            td.style.get("vertical-align")
            for td in element.find_all("td")
            if td.attrs.get("width") == "300"
        }
        assert valigns == {"middle"}


class TestRow:
    """Tests for the row renderer."""

    @pytest.mark.unit
    def test_justification(self, options):
        element = render_row(RowConfig(justify_content="end"), blocks(2), options)
        (justified,) = labelled(element, "Row | Justification")
        assert justified.find_all("td")[0].attrs["align"] == "right"

    @pytest.mark.unit
    def test_default_alignment(self, options):
        element = render_row(RowConfig(), blocks(2), options)
        (justified,) = labelled(element, "Row | Justification")
        assert justified.find_all("td")[0].attrs["align"] == "left"
        (content,) = labelled(element, "Row | Content")
        assert content.style["width"] == "auto"

    @pytest.mark.unit
    def test_gap(self, options):
        element = render_row(RowConfig(gap="12px"), blocks(4), options)
        spacers = element.find_all("td", "desktop-gap-column")
        assert len(spacers) == 3
        assert spacers[0].attrs["width"] == "12"

    @pytest.mark.unit
    def test_zero_gap(self, options):
        element = render_row(RowConfig(gap="0px"), blocks(3), options)
        assert element.find_all("td", "desktop-gap-column") == []

    @pytest.mark.unit
    def test_cell_valign(self, options):
        element = render_row(RowConfig(align_items="end"), blocks(2), options)
        valigns = [td.attrs.get("valign") for td in element.find_all("td")]
        assert valigns.count("bottom") == 2


class TestColumn:
    """Tests for the column renderer."""

    @pytest.mark.unit
    def test_gap_rows(self, options):
        element = render_column(ColumnConfig(gap="8px"), blocks(3), options)
        (gap_table,) = labelled(element, "Column | Gap")
        rows = gap_table.find_all("tr")
        assert len(rows) == 5

    @pytest.mark.unit
    def test_single_child_has_no_gap_table(self, options):
        element = render_column(ColumnConfig(gap="8px"), blocks(1), options)
        assert labelled(element, "Column | Gap") == []
        assert len(element.find_all("p")) == 1

    @pytest.mark.unit
    def test_alignment_attrs(self, options):
        config = ColumnConfig(align_items="center", justify_content="end")
        element = render_column(config, blocks(1), options)
        cell = element.find_all("td")[0]
        assert cell.attrs["align"] == "center"
        assert cell.attrs["valign"] == "bottom"

    @pytest.mark.unit
    def test_width_attr(self, options):
        element = render_column(ColumnConfig(width="200px"), blocks(1), options)
        assert element.find_all("td")[0].attrs["width"] == "200"


class TestSection:
    """Tests for the section renderer."""

    @pytest.mark.unit
    def test_label(self, options):
        config = SectionConfig(section_type="header")
        element = render_section(config, blocks(1), options)
        assert element.attrs["aria-label"] == "Section | header"

    @pytest.mark.unit
    def test_gap(self, options):
        element = render_section(SectionConfig(gap="24px"), blocks(2), options)
        heights = [td.attrs.get("height") for td in element.find_all("td")]
        assert heights.count("24") == 1

    @pytest.mark.unit
    def test_background(self, options):
        element = render_section(
            SectionConfig(background_color="#f0f0f0", padding="32px 0"), [], options
        )
        cell = element.find_all("td")[0]
        assert cell.style["background-color"] == "#f0f0f0"
        assert cell.style["padding"] == "32px 0"
