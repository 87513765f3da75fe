"""Tests for the dual-path renderer."""

import pytest

from src.markup import Branch, render_markup
from src.mid import ButtonConfig, IconConfig

from .lib import (
    VML_NAMESPACE,
    arc_size,
    button_geometry,
    icon_geometry,
    icon_image,
    render_button_dual,
    render_icon_dual,
    uses_icon_dual_path,
)

ICON_URL = "https://icons.test/mdi-star.png"


class TestArcSize:
    """Tests for arc size conversion."""

    @pytest.mark.unit
    def test_percentage(self):
        assert arc_size(3, 44) == pytest.approx(6.818, abs=0.001)

    @pytest.mark.unit
    def test_clamped(self):
        assert arc_size(80, 44) == 100
        assert arc_size(-5, 44) == 0
        assert arc_size(5, 0) == 0


class TestButtonGeometry:
    """Tests for button legacy geometry."""

    @pytest.mark.unit
    def test_height_estimate(self):
        geometry = button_geometry(
            ButtonConfig(border_radius="3px", padding="12px 24px")
        )
        assert geometry.height == 44
        assert geometry.arcsize_attr == "6.82%"

    @pytest.mark.unit
    def test_width_fallback(self):
        assert button_geometry(ButtonConfig()).width == 200
        assert button_geometry(ButtonConfig(width="100%")).width == 200
        assert button_geometry(ButtonConfig(width="260px")).width == 260

    @pytest.mark.unit
    def test_fill_colour_normalised(self):
        assert button_geometry(ButtonConfig(background_color="0a0")).fill_color == "#00aa00"

    @pytest.mark.unit
    def test_shape_style(self):
        geometry = button_geometry(ButtonConfig(padding="10px"))
        assert geometry.shape_style == {
            "height": "40px",
            "v-text-anchor": "middle",
            "width": "200px",
        }


class TestRenderButtonDual:
    """Tests for button rendering."""

    @pytest.mark.unit
    def test_both_branches(self):
        fragment = render_button_dual(
            ButtonConfig(text="Shop now"), "https://example.com/shop"
        )
        assert fragment.legacy.branch is Branch.LEGACY
        assert fragment.standard.branch is Branch.STANDARD
        html = "".join(render_markup(node) for node in fragment.nodes())
        assert html.startswith("<!--[if mso]><v:roundrect")
        assert "<!--[if !mso]><!--><table" in html
        assert html.endswith("<!--<![endif]-->")

    @pytest.mark.unit
    def test_branches_are_equivalent(self):
        config = ButtonConfig(text="Go", color="#111111")
        fragment = render_button_dual(config, "https://example.com")
        shape = fragment.legacy.children[0]
        link = fragment.standard.children[0].find_all("a")[0]
        assert shape.attrs["href"] == link.attrs["href"] == "https://example.com"
        assert shape.find_all("center")[0].children[0].value == "Go"
        assert link.find_all("span")[0].children[0].value == "Go"
        assert shape.find_all("center")[0].style["color"] == link.style["color"] == "#111111"

    @pytest.mark.unit
    def test_vml_attributes(self):
        fragment = render_button_dual(ButtonConfig(text="Go"), "https://example.com")
        shape = fragment.legacy.children[0]
        assert shape.tag == "v:roundrect"
        assert shape.attrs["xmlns:v"] == VML_NAMESPACE
        assert shape.attrs["fillcolor"] == shape.attrs["strokecolor"] == "#007bff"
        assert shape.find_all("w:anchorlock")

    @pytest.mark.unit
    def test_blank_target_has_rel(self):
        fragment = render_button_dual(ButtonConfig(text="Go"), "https://example.com")
        link = fragment.standard.children[0].find_all("a")[0]
        assert link.attrs["target"] == "_blank"
        assert link.attrs["rel"] == "noopener noreferrer"

    @pytest.mark.unit
    def test_self_target_has_no_rel(self):
        fragment = render_button_dual(ButtonConfig(text="Go"), "#top", target="_self")
        link = fragment.standard.children[0].find_all("a")[0]
        assert link.attrs["rel"] is None

    @pytest.mark.unit
    @pytest.mark.parametrize("href,text", [(None, "Go"), ("", "Go"), ("https://x", None)])
    def test_nothing_actionable(self, href, text):
        assert render_button_dual(ButtonConfig(text=text), href) is None

    @pytest.mark.unit
    def test_label_is_escaped(self):
        fragment = render_button_dual(ButtonConfig(text="Tea & cake"), "https://x")
        assert "Tea &amp; cake" in render_markup(fragment.standard)


class TestIconGeometry:
    """Tests for icon legacy geometry."""

    @pytest.mark.unit
    def test_default_box(self):
        geometry = icon_geometry(
            IconConfig(background_color="#eee", border_radius="8px", padding="4px")
        )
        assert geometry.width == geometry.height == 32
        assert geometry.arc_size == 25

    @pytest.mark.unit
    def test_explicit_size(self):
        geometry = icon_geometry(
            IconConfig(width="40px", height=20, padding="0", border_radius="50px",
                       background_color="fff")
        )
        assert geometry.width == 40
        assert geometry.height == 20
        assert geometry.arc_size == 100
        assert geometry.fill_color == "#ffffff"

    @pytest.mark.unit
    def test_default_fill(self):
        assert icon_geometry(IconConfig()).fill_color == "#ffffff"


class TestIconDualPath:
    """Tests for icon rendering."""

    @pytest.mark.unit
    def test_uses_dual_path(self):
        assert uses_icon_dual_path(IconConfig(background_color="#000", border_radius="4px"))
        assert not uses_icon_dual_path(IconConfig(background_color="#000"))
        assert not uses_icon_dual_path(IconConfig(border_radius="4px"))

    @pytest.mark.unit
    def test_same_source_and_link(self):
        config = IconConfig(background_color="#000", border_radius="4px", width="24px")
        fragment = render_icon_dual(config, ICON_URL, "https://example.com", "_blank")
        legacy_img = fragment.legacy.children[0].find_all("img")[0]
        standard_img = fragment.standard.children[0].find_all("img")[0]
        assert legacy_img.attrs["src"] == standard_img.attrs["src"] == ICON_URL
        assert fragment.legacy.children[0].attrs["href"] == "https://example.com"
        assert fragment.standard.children[0].find_all("a")[0].attrs["href"] == "https://example.com"

    @pytest.mark.unit
    def test_stroke_disabled(self):
        config = IconConfig(background_color="#000", border_radius="4px")
        shape = render_icon_dual(config, ICON_URL, None).legacy.children[0]
        assert shape.attrs["stroke"] == "false"
        assert shape.attrs["href"] is None
        assert "href" not in render_markup(shape)

    @pytest.mark.unit
    def test_no_source(self):
        config = IconConfig(background_color="#000", border_radius="4px")
        assert render_icon_dual(config, None, "https://x") is None


class TestIconImage:
    """Tests for the icon image element."""

    @pytest.mark.unit
    def test_sized(self):
        image = icon_image(IconConfig(width=16, height="16px"), ICON_URL)
        assert image.attrs["width"] == "16"
        assert image.style["width"] == "16px"

    @pytest.mark.unit
    def test_unsized(self):
        image = icon_image(IconConfig(), ICON_URL)
        assert image.attrs["width"] is None
        assert image.style["height"] == "auto"

    @pytest.mark.unit
    def test_sized_attrs_fallback(self):
        image = icon_image(IconConfig(), ICON_URL, sized_attrs=True)
        assert image.attrs["width"] == image.attrs["height"] == "24"
