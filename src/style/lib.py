"""Style resolver.

Maps semantic config (padding, border, background, typography) onto inline
style records. Styles are plain ``{css-property: value}`` dicts; ``None``
values mean "not set" and are dropped on serialisation.

Background-with-radius and border-with-radius cannot share one element
reliably, so boxed layout nodes are decomposed into concentric layers:

1. outer: background colour/image, corner radius, overflow clip
2. border: border shorthand or per-side borders on a non-collapsed table
3. padding: spacing and vertical alignment only
"""

from dataclasses import dataclass, field
from typing import Any

from src.units import is_zero_length

Style = dict[str, str | None]

TYPOGRAPHY_PROPERTIES: dict[str, str] = {
    "color": "color",
    "text_align": "text-align",
    "font_family": "font-family",
    "font_size": "font-size",
    "font_weight": "font-weight",
    "font_style": "font-style",
    "line_height": "line-height",
    "letter_spacing": "letter-spacing",
    "text_transform": "text-transform",
    "text_decoration": "text-decoration",
    "direction": "direction",
    "vertical_align": "vertical-align",
    "white_space": "white-space",
    "opacity": "opacity",
}


def to_css(style: Style | None) -> str:
    """Serialise a style record to an inline ``style`` attribute value."""
    if not style:
        return ""
    return "; ".join(
        f"{prop}: {value}" for prop, value in style.items() if value not in (None, "")
    )


def merge_styles(*styles: Style | None) -> Style:
    """Merge style records left to right; unset values never override."""
    merged: Style = {}
    for style in styles:
        if not style:
            continue
        for prop, value in style.items():
            if value is None or value == "":
                continue
            merged[prop] = value
    return merged


def border_style(border: Any) -> Style:
    """Border declarations for a BorderConfig.

    The uniform triple is used only when complete. A complete side always
    overrides it; an incomplete side contributes nothing.
    """
    if border is None:
        return {}
    style: Style = {}
    if border.is_complete:
        style["border"] = border.to_css()
    for side, value in border.sides().items():
        if value is not None and value.is_complete:
            style[f"border-{side}"] = value.to_css()
    return style


def background_style(color: str | None = None, image: Any = None) -> Style:
    """Background colour and image declarations."""
    style: Style = {"background-color": color}
    if image is not None and image.src:
        style["background-image"] = f"url({image.src})"
        style["background-repeat"] = image.repeat
        style["background-size"] = image.size
        style["background-position"] = image.position
    return merge_styles(style)


def typography_style(config: Any, **overrides: str | None) -> Style:
    """Text declarations from any config carrying typography fields."""
    style: Style = {}
    for attr, prop in TYPOGRAPHY_PROPERTIES.items():
        value = overrides.get(attr, getattr(config, attr, None))
        if value is not None:
            style[prop] = str(value)
    return style


def _radius(config: Any) -> str | None:
    radius = getattr(config, "border_radius", None)
    return None if is_zero_length(radius) else radius


@dataclass(frozen=True)
class LayerStyles:
    """Per-layer style records for a boxed layout node.

    An empty ``border`` record means no border layer is emitted and the
    padding declarations belong on the outer cell.
    """

    outer: Style = field(default_factory=dict)
    border: Style = field(default_factory=dict)
    padding: Style = field(default_factory=dict)
    content: Style = field(default_factory=dict)

    @property
    def has_border_layer(self) -> bool:
        return bool(self.border)

    def collapsed_outer(self) -> Style:
        """Outer cell style when the border layer is skipped."""
        return merge_styles(self.outer, self.padding)


def resolve_layers(
    config: Any,
    *,
    vertical_align: str = "top",
    outer: Style | None = None,
    content: Style | None = None,
) -> LayerStyles:
    """Decompose a layout config into outer/border/padding/content layers.

    Args:
        config: Any layout config (fields are read with getattr).
        vertical_align: Vertical alignment of the padding cell.
        outer: Extra declarations for the outer cell (width, max-width).
        content: Extra declarations for the content table.

    Returns:
        LayerStyles for the node.
    """
    radius = _radius(config)
    borders = border_style(getattr(config, "border", None))

    outer_style = merge_styles(
        background_style(
            getattr(config, "background_color", None),
            getattr(config, "background_image", None),
        ),
        {"border-radius": radius, "overflow": "hidden" if radius else None},
        outer,
    )

    border_layer: Style = {}
    if borders or radius:
        border_layer = merge_styles(
            {
                "width": "100%",
                "border-collapse": "separate",
                "border-spacing": "0",
                "border-radius": radius,
            },
            borders,
        )

    padding_layer = merge_styles(
        {
            "padding": getattr(config, "padding", None),
            "width": "100%",
            "vertical-align": vertical_align,
        }
    )

    content_style = merge_styles(
        {"width": "100%", "border-collapse": "collapse"},
        content,
    )

    return LayerStyles(
        outer=outer_style,
        border=border_layer,
        padding=padding_layer,
        content=content_style,
    )


__all__ = [
    "Style",
    "TYPOGRAPHY_PROPERTIES",
    "to_css",
    "merge_styles",
    "border_style",
    "background_style",
    "typography_style",
    "LayerStyles",
    "resolve_layers",
]
