"""Authoritative schema module for email layout vocabulary.

Example:
    >>> from src.schema import NodeKind, is_layout_kind
    >>> is_layout_kind(NodeKind.ROW)
    True
"""

from .lib import (
    COMPONENT_REGISTRY,
    Alignment,
    BackgroundRepeat,
    BackgroundSize,
    BorderStyle,
    CellAlign,
    CellValign,
    ComponentCategory,
    ComponentMeta,
    HeadingLevel,
    LinkTarget,
    LinkType,
    NodeKind,
    RotateOrientation,
    SectionType,
    TextAlign,
    WidthDistribution,
    WidthType,
    get_component_meta,
    is_layout_kind,
    list_components,
)

__all__ = [
    "NodeKind",
    "ComponentCategory",
    "Alignment",
    "CellAlign",
    "CellValign",
    "TextAlign",
    "WidthType",
    "WidthDistribution",
    "BorderStyle",
    "BackgroundRepeat",
    "BackgroundSize",
    "HeadingLevel",
    "SectionType",
    "LinkType",
    "LinkTarget",
    "RotateOrientation",
    "ComponentMeta",
    "COMPONENT_REGISTRY",
    "get_component_meta",
    "is_layout_kind",
    "list_components",
]
