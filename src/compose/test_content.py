"""Tests for content renderers."""

from dataclasses import dataclass

import pytest

from src.links import IconRequest, IconResolver
from src.markup import render_markup
from src.mid import (
    ButtonConfig,
    DividerConfig,
    HeadingConfig,
    IconConfig,
    ImageConfig,
    SpacerConfig,
    TextConfig,
)

from .content import (
    TEXT_FONT_FAMILY,
    render_button,
    render_divider,
    render_heading,
    render_icon,
    render_image,
    render_spacer,
    render_text,
)
from .lib import RenderOptions


@dataclass(frozen=True)
class RecordingIconResolver(IconResolver):
    """Resolver encoding the request into the URL."""

    def resolve(self, request: IconRequest) -> str:
        return f"https://icons.test/{request.identifier}/{request.size:g}.png"


@pytest.fixture
def options() -> RenderOptions:
    return RenderOptions(canvas_width=600, icon_resolver=RecordingIconResolver())


class TestText:
    """Tests for the text renderer."""

    @pytest.mark.unit
    def test_trusted_html_kept(self, options):
        element = render_text(TextConfig(text="<b>Bold</b>"), [], options)
        assert "<div" in render_markup(element)
        assert "<b>Bold</b>" in render_markup(element)

    @pytest.mark.unit
    def test_typography(self, options):
        config = TextConfig(text="Hi", color="#333", font_size="14px")
        (div,) = render_text(config, [], options).find_all("div")
        assert div.style["color"] == "#333"
        assert div.style["font-size"] == "14px"
        assert div.style["font-family"] == TEXT_FONT_FAMILY
        assert div.style["margin"] == "0"

    @pytest.mark.unit
    def test_cell_align(self, options):
        centred = render_text(TextConfig(text="Hi", text_align="center"), [], options)
        assert centred.find_all("td")[0].attrs["align"] == "center"
        config = TextConfig(text="Hi", text_align="justify")
        justified = render_text(config, [], options)
        assert justified.find_all("td")[0].attrs["align"] is None

    @pytest.mark.unit
    def test_padding_on_cell(self, options):
        config = TextConfig(text="Hi", padding="8px", background_color="#eee")
        cell = render_text(config, [], options).find_all("td")[0]
        assert cell.style["padding"] == "8px"
        assert cell.style["background-color"] == "#eee"

    @pytest.mark.unit
    def test_empty(self, options):
        assert render_text(TextConfig(), [], options) is None
        assert render_text(TextConfig(text=""), [], options) is None


class TestHeading:
    """Tests for the heading renderer."""

    @pytest.mark.unit
    def test_level_tag(self, options):
        element = render_heading(HeadingConfig(text="Title", level="h3"), [], options)
        (heading,) = element.find_all("h3")
        assert heading.style["mso-line-height-rule"] == "exactly"
        assert heading.style["margin"] == "0"

    @pytest.mark.unit
    def test_default_level(self, options):
        element = render_heading(HeadingConfig(text="Title"), [], options)
        assert len(element.find_all("h1")) == 1

    @pytest.mark.unit
    def test_vertical_align_on_cell(self, options):
        config = HeadingConfig(text="Title", vertical_align="middle")
        element = render_heading(config, [], options)
        assert element.find_all("td")[0].style["vertical-align"] == "middle"
        assert "vertical-align" not in element.find_all("h1")[0].style

    @pytest.mark.unit
    def test_empty(self, options):
        assert render_heading(HeadingConfig(), [], options) is None


class TestButton:
    """Tests for the button renderer."""

    @pytest.mark.unit
    def test_both_branches(self, options):
        config = ButtonConfig(href="https://example.com", text="Go")
        html = render_markup(render_button(config, [], options))
        assert "<!--[if mso]><v:roundrect" in html
        assert '<a href="https://example.com" target="_blank"' in html
        assert 'rel="noopener noreferrer"' in html

    @pytest.mark.unit
    def test_typed_link_wins(self, options):
        config = ButtonConfig.model_validate(
            {
                "href": "https://example.com",
                "text": "Mail us",
                "innerLink": {"type": "email", "email": "hi@example.com"},
            }
        )
        html = render_markup(render_button(config, [], options))
        assert 'href="mailto:hi@example.com"' in html
        assert "https://example.com" not in html

    @pytest.mark.unit
    def test_typed_link_target(self, options):
        config = ButtonConfig.model_validate(
            {
                "text": "Top",
                "innerLink": {"type": "page_top", "target": "_self"},
            }
        )
        html = render_markup(render_button(config, [], options))
        assert 'href="#top" target="_self"' in html
        assert "noopener" not in html

    @pytest.mark.unit
    def test_label_escaped(self, options):
        config = ButtonConfig(href="https://example.com", text="<Sale> & more")
        html = render_markup(render_button(config, [], options))
        assert "&lt;Sale&gt; &amp; more" in html
        assert "<Sale>" not in html

    @pytest.mark.unit
    def test_alignment(self, options):
        config = ButtonConfig(href="#", text="Go", justify_content="start")
        element = render_button(config, [], options)
        assert element.attrs["align"] == "left"
        assert element.attrs["aria-label"] == "Button"

    @pytest.mark.unit
    def test_missing_link_or_label(self, options):
        assert render_button(ButtonConfig(text="Go"), [], options) is None
        assert render_button(ButtonConfig(href="https://x.test"), [], options) is None


class TestIcon:
    """Tests for the icon renderer."""

    @pytest.mark.unit
    def test_plain_icon(self, options):
        config = IconConfig(icon_identifier="mdi:star", height="32px")
        element = render_icon(config, [], options)
        (image,) = element.find_all("img")
        assert image.attrs["src"] == "https://icons.test/mdi:star/32.png"
        assert element.attrs["align"] == "center"
        assert "<!--[if mso]>" not in render_markup(element)

    @pytest.mark.unit
    def test_linked_icon(self, options):
        config = IconConfig.model_validate(
            {
                "iconIdentifier": "mdi:phone",
                "innerLink": {"type": "phone", "phone": "+15550100"},
            }
        )
        (link,) = render_icon(config, [], options).find_all("a")
        assert link.attrs["href"] == "tel:+15550100"
        assert link.attrs["target"] == "_self"

    @pytest.mark.unit
    def test_rounded_background_uses_both_branches(self, options):
        config = IconConfig(
            icon_identifier="mdi:star",
            background_color="#ff0000",
            border_radius="12px",
            padding="6px",
        )
        html = render_markup(render_icon(config, [], options))
        assert "<v:roundrect" in html
        assert html.count("<img") == 2

    @pytest.mark.unit
    def test_background_without_radius_is_single_path(self, options):
        config = IconConfig(icon_identifier="mdi:star", background_color="#ff0000")
        html = render_markup(render_icon(config, [], options))
        assert "v:roundrect" not in html
        assert "background-color: #ff0000" in html

    @pytest.mark.unit
    def test_missing_identifier(self, options):
        assert render_icon(IconConfig(), [], options) is None


class TestImage:
    """Tests for the image renderer."""

    @pytest.mark.unit
    def test_pixel_dimensions_become_attrs(self, options):
        config = ImageConfig(src="https://x.test/a.png", width="120px", height="40px")
        (image,) = render_image(config, [], options).find_all("img")
        assert image.attrs["width"] == "120"
        assert image.attrs["height"] == "40"
        assert image.style["display"] == "block"

    @pytest.mark.unit
    def test_relative_width_has_no_attr(self, options):
        config = ImageConfig(src="https://x.test/a.png", width="50%")
        (image,) = render_image(config, [], options).find_all("img")
        assert image.attrs["width"] is None
        assert image.style["width"] == "50%"
        assert image.style["height"] == "auto"

    @pytest.mark.unit
    def test_linked(self, options):
        config = ImageConfig(
            src="https://x.test/a.png", href="https://x.test", target="_blank"
        )
        (link,) = render_image(config, [], options).find_all("a")
        assert link.attrs["href"] == "https://x.test"
        assert link.attrs["rel"] == "noopener noreferrer"
        assert link.find_all("img")

    @pytest.mark.unit
    def test_alt_in_label(self, options):
        config = ImageConfig(src="https://x.test/a.png", alt="Hero")
        element = render_image(config, [], options)
        assert element.attrs["aria-label"] == "Image | Hero"

    @pytest.mark.unit
    def test_missing_src(self, options):
        assert render_image(ImageConfig(), [], options) is None


class TestDivider:
    """Tests for the divider renderer."""

    @pytest.mark.unit
    def test_defaults(self, options):
        element = render_divider(DividerConfig(), [], options)
        (line,) = [
            table
            for table in element.find_all("table")
            if table.attrs.get("aria-label") == "Divider | Line"
        ]
        assert line.attrs["height"] == "1"
        assert line.style["background-color"] == "#cccccc"
        assert element.find_all("td")[0].style["padding"] == "20px 0"

    @pytest.mark.unit
    def test_thick(self, options):
        element = render_divider(DividerConfig(height="4px"), [], options)
        assert 'height="4"' in render_markup(element)


class TestSpacer:
    """Tests for the spacer renderer."""

    @pytest.mark.unit
    def test_height_attrs(self, options):
        element = render_spacer(SpacerConfig(height="30px"), [], options)
        assert element.attrs["height"] == "30"
        cell = element.find_all("td")[0]
        assert cell.attrs["height"] == "30"
        assert cell.style["height"] == "30px"
        assert cell.style["font-size"] == "0"

    @pytest.mark.unit
    def test_zero_height_attr_floor(self, options):
        element = render_spacer(SpacerConfig(height="0px"), [], options)
        assert element.attrs["height"] == "1"
