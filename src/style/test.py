"""Tests for the style resolver."""

import pytest

from src.mid import BackgroundImage, BorderConfig, ColumnConfig, TextConfig

from .lib import (
    background_style,
    border_style,
    merge_styles,
    resolve_layers,
    to_css,
    typography_style,
)


class TestToCss:
    """Tests for style serialisation."""

    @pytest.mark.unit
    def test_joins_declarations(self):
        assert to_css({"width": "100%", "color": "#000"}) == "width: 100%; color: #000"

    @pytest.mark.unit
    def test_drops_unset(self):
        assert to_css({"width": None, "color": ""}) == ""
        assert to_css(None) == ""


class TestMergeStyles:
    """Tests for merge_styles."""

    @pytest.mark.unit
    def test_later_wins(self):
        assert merge_styles({"color": "red"}, {"color": "blue"}) == {"color": "blue"}

    @pytest.mark.unit
    def test_none_does_not_override(self):
        assert merge_styles({"color": "red"}, {"color": None}) == {"color": "red"}

    @pytest.mark.unit
    def test_preserves_order(self):
        merged = merge_styles({"a": "1"}, None, {"b": "2"})
        assert list(merged) == ["a", "b"]


class TestBorderStyle:
    """Tests for border decomposition."""

    @pytest.mark.unit
    def test_uniform(self):
        border = BorderConfig(width="1px", style="solid", color="#ddd")
        assert border_style(border) == {"border": "1px solid #ddd"}

    @pytest.mark.unit
    def test_partial_uniform_ignored(self):
        assert border_style(BorderConfig(width="1px", style="solid")) == {}

    @pytest.mark.unit
    def test_side_overrides_uniform(self):
        border = BorderConfig.model_validate(
            {
                "width": "1px",
                "style": "solid",
                "color": "#ddd",
                "top": {"width": "3px", "style": "dashed", "color": "#f00"},
            }
        )
        style = border_style(border)
        assert style["border"] == "1px solid #ddd"
        assert style["border-top"] == "3px dashed #f00"
        assert list(style) == ["border", "border-top"]

    @pytest.mark.unit
    def test_partial_side_contributes_nothing(self):
        border = BorderConfig.model_validate(
            {"left": {"width": "2px", "style": "solid"}}
        )
        assert border_style(border) == {}

    @pytest.mark.unit
    def test_none(self):
        assert border_style(None) == {}


class TestBackgroundStyle:
    """Tests for background declarations."""

    @pytest.mark.unit
    def test_colour_only(self):
        assert background_style("#fff") == {"background-color": "#fff"}

    @pytest.mark.unit
    def test_image(self):
        image = BackgroundImage(src="https://x/bg.png", repeat="no-repeat", size="cover")
        style = background_style(None, image)
        assert style["background-image"] == "url(https://x/bg.png)"
        assert style["background-repeat"] == "no-repeat"
        assert style["background-size"] == "cover"
        assert "background-position" not in style

    @pytest.mark.unit
    def test_image_without_src(self):
        assert background_style(None, BackgroundImage()) == {}


class TestTypographyStyle:
    """Tests for typography declarations."""

    @pytest.mark.unit
    def test_maps_fields(self):
        config = TextConfig(color="#333", font_size="14px", text_align="center", opacity=0.5)
        style = typography_style(config)
        assert style == {
            "color": "#333",
            "text-align": "center",
            "font-size": "14px",
            "opacity": "0.5",
        }

    @pytest.mark.unit
    def test_overrides(self):
        style = typography_style(TextConfig(), font_family="Arial")
        assert style == {"font-family": "Arial"}


class TestResolveLayers:
    """Tests for layer decomposition."""

    @pytest.mark.unit
    def test_plain_node_has_no_border_layer(self):
        layers = resolve_layers(ColumnConfig())
        assert not layers.has_border_layer
        assert layers.outer == {}
        assert layers.padding == {"width": "100%", "vertical-align": "top"}

    @pytest.mark.unit
    def test_radius_goes_on_outer_and_border_layer(self):
        layers = resolve_layers(
            ColumnConfig(background_color="#eee", border_radius="8px", padding="10px")
        )
        assert layers.outer == {
            "background-color": "#eee",
            "border-radius": "8px",
            "overflow": "hidden",
        }
        assert layers.border["border-collapse"] == "separate"
        assert layers.border["border-radius"] == "8px"
        assert layers.padding["padding"] == "10px"

    @pytest.mark.unit
    def test_zero_radius_ignored(self):
        layers = resolve_layers(ColumnConfig(border_radius="0px"))
        assert not layers.has_border_layer
        assert "overflow" not in layers.outer

    @pytest.mark.unit
    def test_border_layer(self):
        config = ColumnConfig.model_validate(
            {"border": {"width": "1px", "style": "solid", "color": "#000"}}
        )
        layers = resolve_layers(config)
        assert layers.has_border_layer
        assert layers.border["border"] == "1px solid #000"
        assert "border" not in layers.outer

    @pytest.mark.unit
    def test_extras_and_alignment(self):
        layers = resolve_layers(
            ColumnConfig(),
            vertical_align="middle",
            outer={"max-width": "600px"},
            content={"height": "200px"},
        )
        assert layers.outer == {"max-width": "600px"}
        assert layers.padding["vertical-align"] == "middle"
        assert layers.content["height"] == "200px"

    @pytest.mark.unit
    def test_collapsed_outer(self):
        layers = resolve_layers(ColumnConfig(background_color="#fff", padding="4px"))
        assert layers.collapsed_outer()["padding"] == "4px"
        assert layers.collapsed_outer()["background-color"] == "#fff"
