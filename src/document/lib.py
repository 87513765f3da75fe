"""Document assembly.

Wraps a composed layout in a complete email document: the XHTML doctype,
an ``<html>`` root declaring the VML and Office namespaces, a ``<head>``
with meta tags, title and the shared stylesheet, and a ``<body>`` holding a
centered full-width table.

The stylesheet is returned as data (``RenderedDocument.head_styles``) so a
live-preview host can inject it itself; ``build_stylesheet`` with a
``scope`` produces the canvas-scoped variant using container queries.
"""

from dataclasses import dataclass

from src.compose import RenderOptions, compose
from src.compose.layout import FIXED_WIDTH_CLASS
from src.config import get_document_title, get_mobile_breakpoint
from src.core import get_logger
from src.dual import VML_NAMESPACE
from src.gap import DESKTOP_GAP_CLASS, MOBILE_GAP_CLASS, STACK_CELL_CLASS
from src.markup import (
    Element,
    Raw,
    Text,
    layout_table,
    render_markup,
    table_cell,
    table_row,
)
from src.memo import RenderCache
from src.mid import BackgroundImage, GlobalConfig, LayoutNode
from src.style import Style, merge_styles

logger = get_logger("mailframe.document")

DOCTYPE = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">'
)
XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
OFFICE_NAMESPACE = "urn:schemas-microsoft-com:office:office"
BODY_FONT_FAMILY = "Arial, Helvetica, sans-serif"
DEFAULT_SCOPE_CONTAINER = "builder-canvas"

# Non-breaking run that keeps legacy renderers from showing a bottom scrollbar
_SCROLLBAR_FIX = " ".join(["&nbsp;"] * 30)


# =============================================================================
# Stylesheet
# =============================================================================


@dataclass(frozen=True)
class Rule:
    """A CSS rule: one or more selectors sharing a declaration block."""

    selectors: tuple[str, ...]
    declarations: tuple[tuple[str, str], ...]

    def render(self, scope: str | None = None, indent: str = "") -> str:
        selectors = ", ".join(_scoped(selector, scope) for selector in self.selectors)
        body = " ".join(f"{name}: {value};" for name, value in self.declarations)
        return f"{indent}{selectors} {{ {body} }}"


def _rule(selectors: str, **declarations: str) -> Rule:
    return Rule(
        tuple(selector.strip() for selector in selectors.split(",")),
        tuple((name.replace("_", "-"), value) for name, value in declarations.items()),
    )


def _scoped(selector: str, scope: str | None) -> str:
    if scope is None:
        return selector
    if selector == "body":
        return scope
    return f"{scope} {selector}"


def _reset_rules(background_color: str) -> list[Rule]:
    return [
        _rule(".ExternalClass", width="100%", line_height="100%"),
        _rule(
            ".ExternalClass p, .ExternalClass span, .ExternalClass font, "
            ".ExternalClass td, .ExternalClass div",
            line_height="100%",
        ),
        _rule(
            "table",
            mso_table_lspace="0pt",
            mso_table_rspace="0pt",
            border_collapse="collapse",
            border_spacing="0",
        ),
        _rule("td", mso_table_lspace="0pt", mso_table_rspace="0pt"),
        _rule(
            "img",
            border="0",
            height="auto",
            line_height="100%",
            outline="none",
            text_decoration="none",
            _ms_interpolation_mode="bicubic",
        ),
        _rule("#MessageViewBody img", min_width="100%"),
        _rule(
            "a[x-apple-data-detectors]",
            color="inherit !important",
            text_decoration="none !important",
            font_size="inherit !important",
            font_family="inherit !important",
            font_weight="inherit !important",
            line_height="inherit !important",
        ),
        _rule("body", background_color=f"{background_color} !important"),
        _rule("p", margin="0"),
    ]


def _responsive_rules() -> list[Rule]:
    return [
        _rule(
            f".{FIXED_WIDTH_CLASS}",
            width="100% !important",
            max_width="100% !important",
        ),
        _rule(
            f".{STACK_CELL_CLASS}",
            width="100% !important",
            display="block !important",
            float="left",
            clear="both",
            padding_left="0 !important",
            padding_right="0 !important",
        ),
        _rule(
            f".{DESKTOP_GAP_CLASS}",
            width="0 !important",
            display="none !important",
        ),
        _rule(
            f".{MOBILE_GAP_CLASS}",
            display="block !important",
            width="100% !important",
            font_size="1px !important",
            line_height="1px !important",
            mso_line_height_rule="exactly",
        ),
    ]


def _element_rules() -> list[Rule]:
    return [
        _rule("a", color="inherit", text_decoration="none"),
        _rule("ol, ul", margin="0px", padding="0px", list_style="none"),
        _rule(
            "li",
            list_style_type="none !important",
            list_style="none !important",
            position="relative",
            padding_left="0px",
            margin="0px",
            display="block !important",
        ),
        _rule(
            'li[data-list="bullet"]',
            list_style_type="disc !important",
            list_style_position="inside !important",
            padding_left="1.5em",
            display="list-item !important",
        ),
        _rule(
            'li[data-list="ordered"]',
            list_style_type="decimal !important",
            list_style_position="inside !important",
            padding_left="1.5em",
            display="list-item !important",
        ),
        _rule(
            "h1, h2, h3, h4, h5, h6",
            margin="0",
            padding="0",
            font_weight="inherit",
        ),
    ]


def build_stylesheet(
    background_color: str = "#ffffff",
    breakpoint: int | None = None,
    scope: str | None = None,
) -> str:
    """Build the document-level stylesheet.

    Args:
        background_color: Document background colour.
        breakpoint: Viewport width (px) below which layouts stack.
        scope: Selector of a live-preview canvas. When set, every selector
            is prefixed with it and breakpoints become container queries
            against that canvas.

    Returns:
        The stylesheet text, emitted once per document.
    """
    breakpoint = get_mobile_breakpoint(breakpoint)
    lines: list[str] = []

    if scope is not None:
        lines.append(
            f"{scope} {{ container-name: {DEFAULT_SCOPE_CONTAINER}; "
            "container-type: inline-size; }"
        )
        query = f"@container {DEFAULT_SCOPE_CONTAINER} (max-width: {breakpoint}px)"
    else:
        query = f"@media screen and (max-width: {breakpoint}px)"

    lines.extend(rule.render(scope) for rule in _reset_rules(background_color))
    lines.append(f"{query} {{")
    lines.extend(rule.render(scope, indent="  ") for rule in _responsive_rules())
    lines.append("}")
    lines.extend(rule.render(scope) for rule in _element_rules())
    return "\n".join(lines)


# =============================================================================
# Body and document
# =============================================================================


@dataclass(frozen=True)
class RenderedDocument:
    """A rendered email.

    Attributes:
        html: The complete document, doctype included.
        head_styles: The stylesheet emitted in the head.
        body: The serialised ``<body>`` element.
    """

    html: str
    head_styles: str
    body: str


def _background_image_style(image: BackgroundImage | None) -> Style:
    if image is None or not image.src:
        return {}
    return {
        "background-image": f"url({image.src})",
        "background-repeat": image.repeat or "no-repeat",
        "background-size": image.size or "cover",
        "background-position": image.position or "center",
    }


def render_body(content: Element | None, global_config: GlobalConfig) -> Element:
    """Wrap composed content in the document body."""
    background = _background_image_style(global_config.background_image)
    body_style = merge_styles(
        {
            "background-color": global_config.background_color,
            "color": global_config.color,
            "font-size": global_config.font_size,
            "line-height": global_config.line_height,
            "padding": "0",
            "margin": "0",
            "-webkit-text-size-adjust": "100%",
            "overflow-x": "hidden",
            "-ms-text-size-adjust": "100%",
            "mso-line-height-rule": "exactly",
            "font-family": BODY_FONT_FAMILY,
        },
        background,
    )
    wrapper = layout_table(
        table_row(
            table_cell(
                *(() if content is None else (content,)),
                attrs={"align": "center"},
                style={"padding": "0", "margin": "0"},
            )
        ),
        style={
            "width": "100%",
            "mso-line-height-rule": "exactly",
            "border-collapse": "collapse",
        },
        attrs={"align": "center", "width": "100%"},
    )
    center = Element(
        "center",
        {},
        merge_styles(
            {"width": "100%", "background": global_config.background_color},
            background,
        ),
        (wrapper,),
    )
    scrollbar_fix = Element(
        "div",
        {},
        {
            "display": "none",
            "white-space": "nowrap",
            "font": "15px courier",
            "line-height": "0",
        },
        (Raw(_SCROLLBAR_FIX),),
    )
    return Element("body", {}, body_style, (center, scrollbar_fix))


def _head(title: str, stylesheet: str) -> Element:
    return Element(
        "head",
        children=(
            Element(
                "meta",
                {"http-equiv": "Content-Type", "content": "text/html; charset=utf-8"},
            ),
            Element(
                "meta",
                {
                    "name": "viewport",
                    "content": "width=device-width, initial-scale=1.0",
                },
            ),
            Element("meta", {"http-equiv": "X-UA-Compatible", "content": "IE=edge"}),
            Element("title", children=(Text(title),)),
            Element("style", {"type": "text/css"}, children=(Raw(stylesheet),)),
        ),
    )


def render_document(
    root: LayoutNode,
    global_config: GlobalConfig | None = None,
    title: str | None = None,
    options: RenderOptions | None = None,
    breakpoint: int | None = None,
    cache: RenderCache | None = None,
) -> RenderedDocument:
    """Render a layout tree into a complete email document.

    Args:
        root: Root of the layout tree.
        global_config: Body-level styling (defaults when omitted).
        title: Document title (``MAILFRAME_DOCUMENT_TITLE`` when omitted).
        options: Render-wide inputs for the composer.
        breakpoint: Responsive breakpoint in pixels.
        cache: Optional memoisation store.

    Returns:
        RenderedDocument with the full html, the stylesheet and the body.
    """
    global_config = global_config or GlobalConfig()
    title = get_document_title(title)
    stylesheet = build_stylesheet(global_config.background_color, breakpoint)

    body = render_body(compose(root, options, cache), global_config)
    html_root = Element(
        "html",
        {
            "xmlns": XHTML_NAMESPACE,
            "xmlns:v": VML_NAMESPACE,
            "xmlns:o": OFFICE_NAMESPACE,
            "lang": "en",
            "xml:lang": "en",
            "bgcolor": global_config.background_color,
        },
        children=(_head(title, stylesheet), body),
    )
    html = f"{DOCTYPE}\n{render_markup(html_root)}"
    logger.debug("Rendered document %r (%d characters)", title, len(html))
    return RenderedDocument(html=html, head_styles=stylesheet, body=render_markup(body))


__all__ = [
    "DOCTYPE",
    "XHTML_NAMESPACE",
    "OFFICE_NAMESPACE",
    "BODY_FONT_FAMILY",
    "Rule",
    "build_stylesheet",
    "RenderedDocument",
    "render_body",
    "render_document",
]
