"""Dual-path renderer.

Buttons and rounded-background icons need a vector-shape fallback for the
legacy (Word-based) renderer. Both branches are always produced and wrapped
in mutually exclusive conditional comments; each renderer shows exactly one.

The legacy branch needs fixed geometry, estimated here:

- button height: ``2 * first padding token + 20``
- button width: explicit pixel width, else 200px
- icon box: ``(icon size or 24) + 2 * first padding token`` per axis
- arc size: corner radius as a percentage of the reference dimension,
  clamped to ``[0, 100]``
- fill colour: normalised to 6-digit hex
"""

from dataclasses import dataclass

from src.core import get_logger
from src.markup import (
    Conditional,
    Element,
    Node,
    Text,
    layout_table,
    legacy,
    standard,
    table_cell,
    table_row,
)
from src.links import link_rel
from src.mid import ButtonConfig, IconConfig
from src.style import Style, merge_styles, typography_style
from src.units import format_number, leading_number, normalize_hex, parse_px, to_length

logger = get_logger("mailframe.dual")

VML_NAMESPACE = "urn:schemas-microsoft-com:vml"
WORD_NAMESPACE = "urn:schemas-microsoft-com:office:word"

BUTTON_LINE_HEIGHT_ESTIMATE = 20
DEFAULT_BUTTON_WIDTH = 200
DEFAULT_BUTTON_PADDING = 12
DEFAULT_ICON_BOX = 24


@dataclass(frozen=True)
class LegacyGeometry:
    """Fixed geometry for a legacy vector shape."""

    width: float
    height: float
    arc_size: float
    fill_color: str

    @property
    def arcsize_attr(self) -> str:
        return f"{format_number(self.arc_size)}%"

    @property
    def shape_style(self) -> Style:
        return {
            "height": f"{format_number(self.height)}px",
            "v-text-anchor": "middle",
            "width": f"{format_number(self.width)}px",
        }


@dataclass(frozen=True)
class DualFragment:
    """A legacy fragment and a standard fragment for the same content."""

    legacy: Conditional
    standard: Conditional

    def nodes(self) -> tuple[Conditional, Conditional]:
        return (self.legacy, self.standard)


def arc_size(radius: float, reference: float) -> float:
    """Corner radius as a percentage of the reference dimension, in [0, 100]."""
    if reference <= 0 or radius <= 0:
        return 0.0
    return min(radius / reference * 100, 100.0)


# =============================================================================
# Buttons
# =============================================================================


def button_geometry(config: ButtonConfig) -> LegacyGeometry:
    """Legacy geometry for a button.

    Example:
        >>> geometry = button_geometry(ButtonConfig(padding="12px 24px"))
        >>> geometry.height, round(geometry.arc_size, 1)
        (44.0, 6.8)
    """
    padding = leading_number(config.padding, DEFAULT_BUTTON_PADDING)
    height = padding * 2 + BUTTON_LINE_HEIGHT_ESTIMATE
    width = parse_px(config.width)
    if width is None:
        width = float(DEFAULT_BUTTON_WIDTH)
    radius = leading_number(config.border_radius, 0)
    return LegacyGeometry(
        width=width,
        height=height,
        arc_size=arc_size(radius, height),
        fill_color=normalize_hex(config.background_color),
    )


def _button_legacy_text_style(config: ButtonConfig) -> Style:
    return merge_styles(
        {
            "color": config.color,
            "font-family": config.font_family,
            "font-size": config.font_size,
            "font-weight": config.font_weight or "bold",
            "font-style": "italic" if config.font_style == "italic" else None,
            "letter-spacing": config.letter_spacing,
            "text-transform": config.text_transform,
            "text-decoration": (
                config.text_decoration if config.text_decoration != "none" else None
            ),
            "white-space": (
                config.white_space if config.white_space != "normal" else None
            ),
        }
    )


def _button_text_style(config: ButtonConfig) -> Style:
    return typography_style(
        config,
        font_style=config.font_style or "normal",
        letter_spacing=config.letter_spacing or "normal",
        text_transform=config.text_transform or "none",
        text_align=None,
    )


def render_button_dual(
    config: ButtonConfig, href: str | None, target: str = "_blank"
) -> DualFragment | None:
    """Render both branches of a button.

    Returns None when there is no link or no label; nothing is emitted for
    such buttons.
    """
    if not href or not config.text:
        logger.debug("Button without link or label renders nothing")
        return None

    geometry = button_geometry(config)
    radius = config.border_radius or None

    shape = Element(
        "v:roundrect",
        {
            "xmlns:v": VML_NAMESPACE,
            "xmlns:w": WORD_NAMESPACE,
            "href": href,
            "arcsize": geometry.arcsize_attr,
            "strokecolor": geometry.fill_color,
            "fillcolor": geometry.fill_color,
        },
        geometry.shape_style,
        (
            Element("w:anchorlock"),
            Element(
                "center",
                {},
                _button_legacy_text_style(config),
                (Text(config.text),),
            ),
        ),
    )

    label = Element("span", {}, _button_text_style(config), (Text(config.text),))
    link = Element(
        "a",
        {
            "href": href,
            "target": target,
            "rel": link_rel(target),
        },
        merge_styles(
            {
                "color": config.color,
                "text-decoration": config.text_decoration,
                "display": "block",
                "word-break": "break-word",
            },
            _button_text_style(config),
            {"text-align": config.text_align},
        ),
        (label,),
    )
    inner = layout_table(
        table_row(table_cell(link, style={"padding": config.padding})),
        style={
            "border-collapse": "separate",
            "border-spacing": "0",
            "border-radius": radius,
            "width": "100%",
        },
    )
    box = layout_table(
        table_row(
            table_cell(
                inner,
                style={
                    "background-color": config.background_color,
                    "border-radius": radius,
                    "width": config.width or "auto",
                    "overflow": "hidden" if radius else None,
                },
            )
        ),
        style={"border-collapse": "collapse", "width": "100%"},
    )
    return DualFragment(legacy=legacy(shape), standard=standard(box))


# =============================================================================
# Icons
# =============================================================================


def uses_icon_dual_path(config: IconConfig) -> bool:
    """Icons need the legacy shape only on a rounded coloured background."""
    return bool(config.background_color) and leading_number(config.border_radius, 0) > 0


def _icon_dimension(value) -> float | None:
    px = parse_px(value)
    return px if px else None


def icon_geometry(config: IconConfig) -> LegacyGeometry:
    """Legacy geometry for an icon on a rounded background."""
    padding = leading_number(config.padding, 0)
    width = (_icon_dimension(config.width) or DEFAULT_ICON_BOX) + padding * 2
    height = (_icon_dimension(config.height) or DEFAULT_ICON_BOX) + padding * 2
    radius = leading_number(config.border_radius, 0)
    return LegacyGeometry(
        width=width,
        height=height,
        arc_size=arc_size(radius, min(width, height)),
        fill_color=normalize_hex(config.background_color, default="#ffffff"),
    )


def icon_image(config: IconConfig, src: str, *, sized_attrs: bool = False) -> Element:
    """The ``img`` element for an icon.

    With ``sized_attrs`` the width/height attributes fall back to 24, as the
    fixed-geometry branches require.
    """
    width = _icon_dimension(config.width)
    height = _icon_dimension(config.height)
    if sized_attrs:
        width = width or DEFAULT_ICON_BOX
        height = height or DEFAULT_ICON_BOX
    return Element(
        "img",
        {
            "src": src,
            "alt": "",
            "width": format_number(width) if width else None,
            "height": format_number(height) if height else None,
            "border": "0",
        },
        {
            "display": "block",
            "border": "0",
            "width": to_length(config.width) or "auto",
            "height": to_length(config.height) or "auto",
        },
    )


def block_link(child: Node, href: str | None, target: str | None) -> Node:
    """Wrap an image in a block-level link when there is an href."""
    if not href:
        return child
    return Element(
        "a",
        {
            "href": href,
            "target": target,
            "rel": link_rel(target),
        },
        {
            "display": "block",
            "text-decoration": "none",
            "border": "0",
            "outline": "none",
        },
        (child,),
    )


def render_icon_dual(
    config: IconConfig, src: str | None, href: str | None, target: str = "_self"
) -> DualFragment | None:
    """Render both branches of an icon on a rounded background.

    Returns None when there is no image source.
    """
    if not src:
        logger.debug("Icon without source renders nothing")
        return None

    geometry = icon_geometry(config)
    padding = config.padding

    legacy_image = Element(
        "img",
        icon_image(config, src, sized_attrs=True).attrs,
        {"display": "block", "border": "0"},
    )
    shape = Element(
        "v:roundrect",
        {
            "xmlns:v": VML_NAMESPACE,
            "xmlns:w": WORD_NAMESPACE,
            "href": href,
            "arcsize": geometry.arcsize_attr,
            "stroke": "false",
            "fillcolor": geometry.fill_color,
        },
        geometry.shape_style,
        (
            Element("w:anchorlock"),
            Element(
                "v:textbox",
                {"inset": "0,0,0,0"},
                {"text-align": "center"},
                (Element("center", {}, {"padding": padding}, (legacy_image,)),),
            ),
        ),
    )

    box = layout_table(
        table_row(
            table_cell(
                block_link(icon_image(config, src, sized_attrs=True), href, target),
                style={
                    "background-color": config.background_color,
                    "border-radius": config.border_radius,
                    "padding": padding,
                    "font-size": "0",
                    "line-height": "0",
                    "overflow": "hidden",
                },
            )
        ),
        style={"border-collapse": "collapse", "width": "100%"},
    )
    return DualFragment(legacy=legacy(shape), standard=standard(box))


__all__ = [
    "VML_NAMESPACE",
    "WORD_NAMESPACE",
    "LegacyGeometry",
    "DualFragment",
    "arc_size",
    "button_geometry",
    "render_button_dual",
    "uses_icon_dual_path",
    "icon_geometry",
    "icon_image",
    "block_link",
    "render_icon_dual",
]
