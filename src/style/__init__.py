"""Style resolver: inline style records and layer decomposition.

Example:
    >>> from src.style import merge_styles, to_css
    >>> to_css(merge_styles({"width": "100%"}, {"color": None}))
    'width: 100%'
"""

from .lib import (
    TYPOGRAPHY_PROPERTIES,
    LayerStyles,
    Style,
    background_style,
    border_style,
    merge_styles,
    resolve_layers,
    to_css,
    typography_style,
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
