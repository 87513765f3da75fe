"""Tests for document assembly."""

import pytest

from src.compose import RenderOptions
from src.markup import Element, render_markup
from src.mid import GlobalConfig, LayoutNode, parse_layout

from .lib import DOCTYPE, Rule, build_stylesheet, render_body, render_document


@pytest.fixture
def options() -> RenderOptions:
    return RenderOptions(canvas_width=600)


class TestStylesheet:
    """Tests for the shared stylesheet."""

    @pytest.mark.unit
    def test_reset_and_responsive_rules(self):
        css = build_stylesheet("#f4f4f4", 768)
        assert "body { background-color: #f4f4f4 !important; }" in css
        assert "@media screen and (max-width: 768px) {" in css
        assert ".stack-td {" in css
        assert (
            ".desktop-gap-column { width: 0 !important; display: none !important; }"
            in css
        )
        assert ".mobile-gap-spacer {" in css
        assert ".container-fixed-width {" in css
        assert "-ms-interpolation-mode: bicubic;" in css

    @pytest.mark.unit
    def test_breakpoint_from_environment(self, monkeypatch):
        monkeypatch.setenv("MAILFRAME_MOBILE_BREAKPOINT", "480")
        assert "(max-width: 480px)" in build_stylesheet()

    @pytest.mark.unit
    def test_scoped(self):
        css = build_stylesheet("#ffffff", 600, scope=".builder-canvas")
        assert "@container builder-canvas (max-width: 600px) {" in css
        assert "@media" not in css
        assert ".builder-canvas { background-color: #ffffff !important; }" in css
        assert ".builder-canvas .stack-td {" in css
        assert ".builder-canvas p { margin: 0; }" in css
        assert "container-type: inline-size;" in css

    @pytest.mark.unit
    def test_rule_render(self):
        rule = Rule(("h1", "h2"), (("margin", "0"),))
        assert rule.render() == "h1, h2 { margin: 0; }"
        assert rule.render(".x") == ".x h1, .x h2 { margin: 0; }"


class TestBody:
    """Tests for the body wrapper."""

    @pytest.mark.unit
    def test_global_styles(self):
        config = GlobalConfig(color="#222222", font_size="14px")
        body = render_body(Element("p"), config)
        assert body.style["color"] == "#222222"
        assert body.style["font-size"] == "14px"
        assert body.style["font-family"] == "Arial, Helvetica, sans-serif"
        assert body.find_all("p")

    @pytest.mark.unit
    def test_background_image_defaults(self):
        config = GlobalConfig.model_validate(
            {"backgroundImage": {"src": "https://x.test/bg.png"}}
        )
        body = render_body(None, config)
        assert body.style["background-image"] == "url(https://x.test/bg.png)"
        assert body.style["background-repeat"] == "no-repeat"
        assert body.style["background-size"] == "cover"
        assert body.style["background-position"] == "center"

    @pytest.mark.unit
    def test_centered_table_and_scrollbar_fix(self):
        html = render_markup(render_body(None, GlobalConfig()))
        assert '<table role="presentation"' in html
        assert 'align="center" width="100%"' in html
        assert "font: 15px courier" in html


class TestRenderDocument:
    """Tests for full document rendering."""

    @pytest.mark.unit
    def test_document_shell(self, sample_document, options):
        document = parse_layout(sample_document)
        rendered = render_document(
            document.root, document.config, document.title, options
        )
        assert rendered.html.startswith(DOCTYPE)
        assert 'xmlns:v="urn:schemas-microsoft-com:vml"' in rendered.html
        assert 'xmlns:o="urn:schemas-microsoft-com:office:office"' in rendered.html
        assert 'bgcolor="#f4f4f4"' in rendered.html
        assert "<title>Welcome</title>" in rendered.html
        assert rendered.head_styles in rendered.html
        assert rendered.body in rendered.html
        assert rendered.body.startswith("<body")

    @pytest.mark.unit
    def test_meta_tags(self, sample_layout, options):
        root = LayoutNode.model_validate(sample_layout)
        html = render_document(root, options=options).html
        assert '<meta http-equiv="Content-Type"' in html
        assert 'name="viewport"' in html
        assert 'content="IE=edge" />' in html

    @pytest.mark.unit
    def test_default_title(self, sample_layout, options, monkeypatch):
        monkeypatch.setenv("MAILFRAME_DOCUMENT_TITLE", "Newsletter")
        root = LayoutNode.model_validate(sample_layout)
        rendered = render_document(root, options=options)
        assert "<title>Newsletter</title>" in rendered.html

    @pytest.mark.unit
    def test_title_escaped(self, sample_layout, options):
        root = LayoutNode.model_validate(sample_layout)
        rendered = render_document(root, title="Tom & Jerry", options=options)
        assert "<title>Tom &amp; Jerry</title>" in rendered.html

    @pytest.mark.unit
    def test_stylesheet_emitted_once(self, complex_layout, options):
        rendered = render_document(
            LayoutNode.model_validate(complex_layout), options=options
        )
        assert rendered.html.count("<style") == 1
        assert rendered.html.count(".stack-td {") == 1

    @pytest.mark.unit
    def test_empty_root(self, options):
        root = LayoutNode.model_validate({"kind": "text", "config": {}})
        rendered = render_document(root, options=options)
        assert "</body>" in rendered.html
