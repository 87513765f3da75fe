"""Renderers for content kinds (text, heading, button, icon, image,
divider, spacer).

Content nodes render as a one-cell presentation table so padding and
background land on the cell, where every renderer honours them. Nodes
missing their required content render nothing.
"""

from src.align import to_horizontal
from src.dual import (
    block_link,
    icon_image,
    render_button_dual,
    render_icon_dual,
    uses_icon_dual_path,
)
from src.links import icon_request_from_config, link_target, resolve_link
from src.markup import (
    NBSP,
    Element,
    Raw,
    layout_table,
    single_cell_table,
    table_cell,
    table_row,
)
from src.mid import (
    ButtonConfig,
    DividerConfig,
    HeadingConfig,
    IconConfig,
    ImageConfig,
    SpacerConfig,
    TextConfig,
)
from src.schema import CellAlign, NodeKind
from src.style import Style, merge_styles, typography_style
from src.units import format_number, leading_number, parse_px, to_length

from .lib import RenderOptions, register_renderer

TEXT_FONT_FAMILY = "Arial, Helvetica, sans-serif"

_COLLAPSED_TABLE: Style = {"width": "100%", "border-collapse": "collapse"}

_INLINE_TABLE_RESET: Style = {
    "border-collapse": "collapse",
    "box-sizing": "border-box",
    "border": "0",
    "margin": "0",
    "padding": "0",
}

_MSO_TABLE_RESET: Style = {"mso-table-lspace": "0pt", "mso-table-rspace": "0pt"}

_CELL_ALIGNMENTS = frozenset(align.value for align in CellAlign)


def _cell_align(text_align: str | None) -> str | None:
    return text_align if text_align in _CELL_ALIGNMENTS else None


def _block_cell_style(padding: str | None, background_color: str | None) -> Style:
    return {
        "padding": padding,
        "background-color": background_color,
        "width": "100%",
        "vertical-align": "top",
    }


@register_renderer(NodeKind.TEXT)
def render_text(
    config: TextConfig, children: list[Element], options: RenderOptions
) -> Element | None:
    """Rich text block; the text is trusted editor HTML."""
    if not config.text:
        return None
    style = merge_styles(
        typography_style(config),
        {"margin": "0", "padding": "0", "font-family": TEXT_FONT_FAMILY},
    )
    return single_cell_table(
        Element("div", {}, style, (Raw(config.text),)),
        label="Text",
        table_style=_COLLAPSED_TABLE,
        cell_style=_block_cell_style(config.padding, config.background_color),
        cell_attrs={"align": _cell_align(config.text_align)},
    )


@register_renderer(NodeKind.HEADING)
def render_heading(
    config: HeadingConfig, children: list[Element], options: RenderOptions
) -> Element | None:
    """Heading tag with zeroed margins, wrapped for padding and background."""
    if not config.text:
        return None
    style = merge_styles(
        typography_style(config, vertical_align=None),
        {
            "margin": "0",
            "padding": "0",
            "font-family": TEXT_FONT_FAMILY,
            "mso-line-height-rule": "exactly",
        },
    )
    cell_style = merge_styles(
        _block_cell_style(config.padding, config.background_color),
        {"vertical-align": config.vertical_align},
    )
    return single_cell_table(
        Element(config.level, {}, style, (Raw(config.text),)),
        label="Heading",
        table_style=_COLLAPSED_TABLE,
        cell_style=cell_style,
        cell_attrs={"align": _cell_align(config.text_align)},
    )


@register_renderer(NodeKind.BUTTON)
def render_button(
    config: ButtonConfig, children: list[Element], options: RenderOptions
) -> Element | None:
    """Dual-path button; a typed link takes precedence over ``href``."""
    href = resolve_link(config.inner_link) or config.href
    target = link_target(config.inner_link, default="_blank")
    fragment = render_button_dual(config, href, target)
    if fragment is None:
        return None
    return single_cell_table(
        *fragment.nodes(),
        label="Button",
        table_style={"width": config.width or "auto", **_INLINE_TABLE_RESET},
        table_attrs={"align": to_horizontal(config.justify_content, "center")},
    )


@register_renderer(NodeKind.ICON)
def render_icon(
    config: IconConfig, children: list[Element], options: RenderOptions
) -> Element | None:
    """Icon image; dual-path when drawn on a rounded coloured background."""
    request = icon_request_from_config(config)
    if request is None:
        return None
    src = options.icon_resolver.resolve(request)
    href = resolve_link(config.inner_link)
    target = link_target(config.inner_link)
    align = to_horizontal(config.justify_content, "center")

    if uses_icon_dual_path(config):
        fragment = render_icon_dual(config, src, href, target)
        if fragment is None:
            return None
        cell = table_cell(*fragment.nodes(), attrs={"align": align})
    else:
        cell = table_cell(
            block_link(icon_image(config, src), href, target),
            attrs={"align": align},
            style={
                "padding": config.padding,
                "background-color": config.background_color,
                "font-size": "0",
                "line-height": "0",
                "border-radius": config.border_radius,
                "overflow": "hidden",
            },
        )
    return layout_table(
        table_row(cell),
        label="Icon",
        style={"width": to_length(config.width) or "auto", **_INLINE_TABLE_RESET},
        attrs={"align": align},
    )


@register_renderer(NodeKind.IMAGE)
def render_image(
    config: ImageConfig, children: list[Element], options: RenderOptions
) -> Element | None:
    """Block image, optionally wrapped in a link."""
    if not config.src:
        return None
    width = parse_px(config.width)
    height = parse_px(config.height)
    image = Element(
        "img",
        {
            "src": config.src,
            "alt": config.alt,
            "width": format_number(width) if width is not None else None,
            "height": format_number(height) if height is not None else None,
            "border": "0",
        },
        {
            "display": "block",
            "object-fit": "cover",
            "width": config.width or "100%",
            "height": config.height or "auto",
            "max-width": "100%",
            "border": "0",
            "border-radius": config.border_radius,
        },
    )
    return single_cell_table(
        block_link(image, config.href, config.target),
        label=f"Image | {config.alt}" if config.alt else "Image",
        table_style={"width": config.width or "100%", "border-collapse": "collapse"},
        cell_style={
            "padding": config.padding,
            "background-color": config.background_color,
            "font-size": "0",
            "line-height": "0",
        },
        cell_attrs={"align": "center"},
    )


@register_renderer(NodeKind.DIVIDER)
def render_divider(
    config: DividerConfig, children: list[Element], options: RenderOptions
) -> Element:
    """Horizontal rule drawn as a coloured one-cell table."""
    height_attr = format_number(leading_number(config.height, 0) or 1)
    line = layout_table(
        table_row(
            table_cell(
                NBSP,
                style={
                    "height": config.height,
                    "font-size": "0",
                    "line-height": "0",
                    "padding": "0",
                },
            )
        ),
        label="Divider | Line",
        style={
            "width": config.width,
            "height": config.height,
            "background-color": config.color,
            "border-collapse": "collapse",
            "border": "0",
            **_MSO_TABLE_RESET,
        },
        attrs={"align": config.align, "height": height_attr},
    )
    return single_cell_table(
        line,
        label="Divider",
        table_style=_COLLAPSED_TABLE,
        cell_style={
            "padding": config.margin,
            "font-size": "0",
            "line-height": "0",
            "width": "100%",
        },
        cell_attrs={"align": config.align},
    )


@register_renderer(NodeKind.SPACER)
def render_spacer(
    config: SpacerConfig, children: list[Element], options: RenderOptions
) -> Element:
    """Fixed-height space with explicit height attributes."""
    height_attr = format_number(leading_number(config.height, 0) or 1)
    return single_cell_table(
        NBSP,
        label="Spacer",
        table_style={
            "background-color": "transparent",
            "border-collapse": "collapse",
            "border": "0",
            "width": "100%",
            **_MSO_TABLE_RESET,
        },
        table_attrs={"height": height_attr},
        cell_style={
            "height": config.height,
            "font-size": "0",
            "line-height": "0",
            "padding": "0",
        },
        cell_attrs={"height": height_attr},
    )


__all__ = [
    "TEXT_FONT_FAMILY",
    "render_text",
    "render_heading",
    "render_button",
    "render_icon",
    "render_image",
    "render_divider",
    "render_spacer",
]
