"""Dual-path renderer (legacy vector shape plus standard markup)."""

from .lib import (
    VML_NAMESPACE,
    WORD_NAMESPACE,
    DualFragment,
    LegacyGeometry,
    arc_size,
    block_link,
    button_geometry,
    icon_geometry,
    icon_image,
    render_button_dual,
    render_icon_dual,
    uses_icon_dual_path,
)

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
