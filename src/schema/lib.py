"""Authoritative Schema Module for email layout definitions.

This module serves as the single source of truth for the vocabulary of the
layout compiler. It provides:
- The node kind taxonomy (rows, columns, containers, text, buttons, ...)
- The enumerations used by node configuration records
- Component metadata (category, description, whether a kind owns children)

All vocabulary-related queries should route through this module.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """Node kinds understood by the compiler.

    Layout kinds (row, column, container, section) own an ordered child
    sequence; every other kind is a leaf.
    """

    # Layout
    ROW = "row"
    COLUMN = "column"
    CONTAINER = "container"
    SECTION = "section"

    # Content
    TEXT = "text"
    HEADING = "heading"
    BUTTON = "button"
    ICON = "icon"
    IMAGE = "image"

    # Spacing
    DIVIDER = "divider"
    SPACER = "spacer"


class ComponentCategory(str, Enum):
    """High-level component groupings."""

    LAYOUT = "layout"
    CONTENT = "content"
    SPACING = "spacing"


class Alignment(str, Enum):
    """Abstract alignment used by justifyContent / alignItems."""

    START = "start"
    CENTER = "center"
    END = "end"


class CellAlign(str, Enum):
    """Concrete horizontal cell alignment (HTML ``align``)."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class CellValign(str, Enum):
    """Concrete vertical cell alignment (HTML ``valign``)."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class TextAlign(str, Enum):
    """Horizontal text alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class WidthType(str, Enum):
    """Container width mode."""

    FULL = "full"
    FIXED = "fixed"


class WidthDistribution(str, Enum):
    """Strategy for splitting a container's width among its children."""

    EQUALS = "equals"
    RATIO = "ratio"
    MANUAL = "manual"


class BorderStyle(str, Enum):
    """Supported CSS border styles."""

    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    DOUBLE = "double"


class BackgroundRepeat(str, Enum):
    """CSS background-repeat values."""

    NO_REPEAT = "no-repeat"
    REPEAT = "repeat"
    REPEAT_X = "repeat-x"
    REPEAT_Y = "repeat-y"


class BackgroundSize(str, Enum):
    """CSS background-size keywords."""

    AUTO = "auto"
    COVER = "cover"
    CONTAIN = "contain"


class HeadingLevel(str, Enum):
    """HTML heading levels."""

    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"


class SectionType(str, Enum):
    """Role of a top-level section."""

    HEADER = "header"
    CONTENT = "content"
    FOOTER = "footer"


class LinkType(str, Enum):
    """Typed link descriptor variants."""

    NONE = "none"
    URL = "url"
    EMAIL = "email"
    PHONE = "phone"
    ANCHOR = "anchor"
    PAGE_TOP = "page_top"
    PAGE_BOTTOM = "page_bottom"


class LinkTarget(str, Enum):
    """HTML link targets."""

    BLANK = "_blank"
    SELF = "_self"
    PARENT = "_parent"
    TOP = "_top"


class RotateOrientation(str, Enum):
    """Icon rotation direction."""

    CW = "cw"
    CCW = "ccw"


@dataclass(frozen=True)
class ComponentMeta:
    """Rich metadata definition for a node kind."""

    kind: NodeKind
    category: ComponentCategory
    description: str
    can_have_children: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to dictionary for schema export."""
        return {
            "kind": self.kind.value,
            "category": self.category.value,
            "description": self.description,
            "can_have_children": self.can_have_children,
        }


COMPONENT_REGISTRY: dict[NodeKind, ComponentMeta] = {
    # === LAYOUT ===
    NodeKind.ROW: ComponentMeta(
        kind=NodeKind.ROW,
        category=ComponentCategory.LAYOUT,
        description="Places children side by side in an auto-width table row",
        can_have_children=True,
    ),
    NodeKind.COLUMN: ComponentMeta(
        kind=NodeKind.COLUMN,
        category=ComponentCategory.LAYOUT,
        description="Stacks children top to bottom inside one cell",
        can_have_children=True,
    ),
    NodeKind.CONTAINER: ComponentMeta(
        kind=NodeKind.CONTAINER,
        category=ComponentCategory.LAYOUT,
        description="Distributes its pixel width among side-by-side children",
        can_have_children=True,
    ),
    NodeKind.SECTION: ComponentMeta(
        kind=NodeKind.SECTION,
        category=ComponentCategory.LAYOUT,
        description="Top-level header, content or footer band",
        can_have_children=True,
    ),
    # === CONTENT ===
    NodeKind.TEXT: ComponentMeta(
        kind=NodeKind.TEXT,
        category=ComponentCategory.CONTENT,
        description="Rich text block",
    ),
    NodeKind.HEADING: ComponentMeta(
        kind=NodeKind.HEADING,
        category=ComponentCategory.CONTENT,
        description="Heading (h1-h6) block",
    ),
    NodeKind.BUTTON: ComponentMeta(
        kind=NodeKind.BUTTON,
        category=ComponentCategory.CONTENT,
        description="Call-to-action link with a legacy vector-shape fallback",
    ),
    NodeKind.ICON: ComponentMeta(
        kind=NodeKind.ICON,
        category=ComponentCategory.CONTENT,
        description="Icon image, optionally on a rounded background",
    ),
    NodeKind.IMAGE: ComponentMeta(
        kind=NodeKind.IMAGE,
        category=ComponentCategory.CONTENT,
        description="Block image, optionally linked",
    ),
    # === SPACING ===
    NodeKind.DIVIDER: ComponentMeta(
        kind=NodeKind.DIVIDER,
        category=ComponentCategory.SPACING,
        description="Horizontal rule drawn as a coloured table",
    ),
    NodeKind.SPACER: ComponentMeta(
        kind=NodeKind.SPACER,
        category=ComponentCategory.SPACING,
        description="Fixed-height vertical space",
    ),
}


def get_component_meta(kind: NodeKind | str) -> ComponentMeta:
    """Get metadata for a node kind.

    Args:
        kind: Node kind (enum member or its string value).

    Returns:
        ComponentMeta for the kind.

    Raises:
        ValueError: If the string is not a known kind.
    """
    return COMPONENT_REGISTRY[NodeKind(kind)]


def is_layout_kind(kind: NodeKind | str) -> bool:
    """Check whether a node kind owns children."""
    return get_component_meta(kind).can_have_children


def list_components(
    category: ComponentCategory | str | None = None,
) -> list[ComponentMeta]:
    """List component metadata, optionally filtered by category."""
    return [
        meta
        for meta in COMPONENT_REGISTRY.values()
        if category is None or meta.category == ComponentCategory(category)
    ]


__all__ = [
    # Enums
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
    # Metadata
    "ComponentMeta",
    "COMPONENT_REGISTRY",
    "get_component_meta",
    "is_layout_kind",
    "list_components",
]
