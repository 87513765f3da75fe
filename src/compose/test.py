"""Tests for the node composer."""

from dataclasses import dataclass

import pytest

from src.links import IconRequest, IconResolver
from src.markup import render_markup
from src.memo import RenderCache
from src.mid import LayoutNode

from .lib import RenderOptions, compose, get_renderer, list_renderers, render_html


@dataclass(frozen=True)
class StaticIconResolver(IconResolver):
    """Resolver returning a fixed URL per identifier."""

    def resolve(self, request: IconRequest) -> str:
        return f"https://icons.test/{request.identifier}.png"


def node(data: dict) -> LayoutNode:
    return LayoutNode.model_validate(data)


def width_cells(element) -> list:
    """Distribution cells of a rendered container, in order."""
    content = next(
        table
        for table in element.find_all("table")
        if table.attrs.get("aria-label") == "Container | Content"
    )
    row = content.children[0].children[0]
    return list(row.children)


@pytest.fixture
def options() -> RenderOptions:
    return RenderOptions(canvas_width=600, icon_resolver=StaticIconResolver())


class TestRegistry:
    """Tests for the renderer registry."""

    @pytest.mark.unit
    def test_every_kind_registered(self):
        assert list_renderers() == sorted(
            [
                "button",
                "column",
                "container",
                "divider",
                "heading",
                "icon",
                "image",
                "row",
                "section",
                "spacer",
                "text",
            ]
        )

    @pytest.mark.unit
    def test_unknown_kind(self):
        with pytest.raises(KeyError, match="Unknown node kind 'carousel'"):
            get_renderer("carousel")


class TestCompose:
    """Tests for tree composition."""

    @pytest.mark.unit
    def test_leaf(self, options):
        spacer = node({"kind": "spacer", "config": {"height": "8px"}})
        element = compose(spacer, options)
        assert element.tag == "table"
        assert element.attrs["aria-label"] == "Spacer"

    @pytest.mark.unit
    def test_empty_content_renders_nothing(self, options):
        assert compose(node({"kind": "text", "config": {}}), options) is None
        assert render_html(node({"kind": "image", "config": {}}), options) == ""

    @pytest.mark.unit
    def test_child_rendering_nothing_keeps_its_cell(self, options):
        element = compose(
            node(
                {
                    "kind": "container",
                    "config": {"widthType": "fixed", "width": "600px"},
                    "children": [
                        {"kind": "text", "config": {"text": "A"}},
                        {"kind": "button", "config": {"text": "No link"}},
                        {"kind": "text", "config": {"text": "B"}},
                    ],
                }
            ),
            options,
        )
        cells = width_cells(element)
        assert [cell.attrs["width"] for cell in cells] == ["200"] * 3
        assert cells[1].children == ()
        assert cells[0].children and cells[2].children

    @pytest.mark.unit
    def test_ratio_index_counts_children_rendering_nothing(self, options):
        tree = node(
            {
                "kind": "container",
                "config": {
                    "widthType": "fixed",
                    "width": "600px",
                    "childrenConstraints": {
                        "widthDistributionType": "ratio",
                        "ratio": {"mainChildIndex": 1, "value": [2, 3]},
                    },
                },
                "children": [
                    {"kind": "image", "config": {}},
                    {"kind": "spacer", "config": {"height": "11px"}},
                    {"kind": "spacer", "config": {"height": "22px"}},
                ],
            }
        )
        cells = width_cells(compose(tree, options))
        assert [cell.style["width"] for cell in cells] == ["100px", "400px", "100px"]
        assert cells[1].children[0].attrs["height"] == "11"
        assert cells[2].children[0].attrs["height"] == "22"

    @pytest.mark.unit
    def test_manual_widths_count_children_rendering_nothing(self, options):
        tree = node(
            {
                "kind": "container",
                "config": {
                    "widthType": "fixed",
                    "width": "600px",
                    "childrenConstraints": {
                        "widthDistributionType": "manual",
                        "widths": ["100px", "200px", "300px"],
                    },
                },
                "children": [
                    {"kind": "spacer", "config": {"height": "11px"}},
                    {"kind": "image", "config": {}},
                    {"kind": "spacer", "config": {"height": "22px"}},
                ],
            }
        )
        cells = width_cells(compose(tree, options))
        assert [cell.style["width"] for cell in cells] == ["100px", "200px", "300px"]
        assert cells[1].children == ()

    @pytest.mark.unit
    def test_row_skips_children_rendering_nothing(self, options):
        tree = node(
            {
                "kind": "row",
                "config": {"gap": "10px"},
                "children": [
                    {"kind": "text", "config": {"text": "A"}},
                    {"kind": "image", "config": {}},
                    {"kind": "text", "config": {"text": "B"}},
                ],
            }
        )
        element = compose(tree, options)
        assert len(element.find_all("td", "desktop-gap-column")) == 1

    @pytest.mark.unit
    def test_leaf_children_ignored(self, options):
        data = {"kind": "spacer", "config": {"height": "8px"}}
        child = {"kind": "text", "config": {"text": "x"}}
        with_children = {**data, "children": [child]}
        assert render_html(node(with_children), options) == render_html(
            node(data), options
        )

    @pytest.mark.unit
    def test_cache_is_transparent(self, complex_layout, options):
        tree = node(complex_layout)
        cache = RenderCache()
        first = render_html(tree, options, cache)
        assert first == render_html(tree, options)
        assert cache.misses > 0
        assert render_html(tree, options, cache) == first
        assert cache.hits > 0

    @pytest.mark.unit
    def test_cache_keyed_on_canvas_width(self, options):
        tree = node(
            {
                "kind": "container",
                "config": {},
                "children": [{"kind": "spacer", "config": {"height": "4px"}}],
            }
        )
        cache = RenderCache()
        narrow = render_html(tree, RenderOptions(400, StaticIconResolver()), cache)
        wide = render_html(tree, RenderOptions(600, StaticIconResolver()), cache)
        assert narrow != wide

    @pytest.mark.unit
    def test_output_is_deterministic(self, complex_layout, options):
        tree = node(complex_layout)
        assert render_markup(compose(tree, options)) == render_markup(
            compose(tree, options)
        )


class TestEndToEnd:
    """Worked layouts with known geometry."""

    @pytest.mark.unit
    def test_equal_thirds_with_gap(self, options):
        tree = node(
            {
                "kind": "container",
                "config": {"widthType": "fixed", "width": "600px", "gap": "20px"},
                "children": [
                    {"kind": "text", "config": {"text": "One"}},
                    {"kind": "text", "config": {"text": "Two"}},
                    {"kind": "text", "config": {"text": "Three"}},
                ],
            }
        )
        element = compose(tree, options)
        cells = [
            td for td in element.find_all("td") if td.style.get("width") == "186.67px"
        ]
        spacers = element.find_all("td", "desktop-gap-column")
        assert len(cells) == 3
        assert [cell.attrs["width"] for cell in cells] == ["186.67"] * 3
        assert len(spacers) == 2
        assert all(spacer.style["width"] == "20px" for spacer in spacers)

    @pytest.mark.unit
    def test_ratio_split(self, options):
        tree = node(
            {
                "kind": "container",
                "config": {
                    "widthType": "fixed",
                    "width": "600px",
                    "childrenConstraints": {
                        "widthDistributionType": "ratio",
                        "ratio": {"mainChildIndex": 0, "value": [2, 3]},
                    },
                },
                "children": [
                    {"kind": "text", "config": {"text": "Main"}},
                    {"kind": "text", "config": {"text": "Side"}},
                ],
            }
        )
        html = render_html(tree, options)
        assert 'width="400" style="width: 400px' in html
        assert 'width="200" style="width: 200px' in html
        assert "desktop-gap-column" not in html

    @pytest.mark.unit
    def test_column_gap_rows(self, options):
        tree = node(
            {
                "kind": "column",
                "config": {"gap": "10px"},
                "children": [
                    {"kind": "text", "config": {"text": "A"}},
                    {"kind": "text", "config": {"text": "B"}},
                    {"kind": "text", "config": {"text": "C"}},
                ],
            }
        )
        element = compose(tree, options)
        spacer_cells = [
            td for td in element.find_all("td") if td.attrs.get("height") == "10"
        ]
        assert len(spacer_cells) == 2
        assert all(td.style["height"] == "10px" for td in spacer_cells)

    @pytest.mark.unit
    def test_button_legacy_geometry(self, options):
        tree = node(
            {
                "kind": "button",
                "config": {
                    "href": "https://example.com",
                    "text": "Go",
                    "borderRadius": "3px",
                    "padding": "12px 24px",
                },
            }
        )
        html = render_html(tree, options)
        assert 'arcsize="6.82%"' in html
        assert "height: 44px" in html
        assert html.count("<!--[if mso]>") == 1
        assert html.count("<!--[if !mso]><!-->") == 1
