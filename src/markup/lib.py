"""Immutable markup tree and serialiser.

Renderers build a small tree of Element/Text/Raw/Conditional values and
serialise it once at the end. Conditional nodes carry the renderer branch
(legacy or standard) and serialise to mutually exclusive conditional
comments, so both branches always live in the output document.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from html import escape
from typing import Union

from src.style import Style, to_css

VOID_TAGS = frozenset({"img", "meta", "br", "hr", "link", "input", "w:anchorlock"})

PRESENTATION_ATTRS: dict[str, str] = {
    "role": "presentation",
    "cellpadding": "0",
    "cellspacing": "0",
    "border": "0",
}


class Branch(str, Enum):
    """Renderer branch selected by a conditional comment."""

    LEGACY = "legacy"
    STANDARD = "standard"


CONDITIONAL_MARKERS: dict[Branch, tuple[str, str]] = {
    Branch.LEGACY: ("<!--[if mso]>", "<![endif]-->"),
    Branch.STANDARD: ("<!--[if !mso]><!-->", "<!--<![endif]-->"),
}


@dataclass(frozen=True)
class Text:
    """Text content, escaped on output."""

    value: str


@dataclass(frozen=True)
class Raw:
    """Trusted markup, emitted verbatim."""

    value: str


NBSP = Raw("&nbsp;")


@dataclass(frozen=True)
class Element:
    """A markup element.

    Attributes with a ``None`` value and empty style values are omitted on
    output.
    """

    tag: str
    attrs: Mapping[str, str | int | float | None] = field(default_factory=dict)
    style: Style = field(default_factory=dict)
    children: tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def append(self, *children: "Node") -> "Element":
        """Return a copy with children appended."""
        return replace(self, children=self.children + children)

    def iter(self) -> Iterator["Element"]:
        """Yield this element and every descendant element in document order."""
        yield self
        for child in self.children:
            yield from iter_elements(child)

    def find_all(self, tag: str, class_name: str | None = None) -> list["Element"]:
        """Descendant elements (self included) with the tag and optional class."""
        return [
            element
            for element in self.iter()
            if element.tag == tag
            and (class_name is None or class_name in element.classes)
        ]

    @property
    def classes(self) -> list[str]:
        value = self.attrs.get("class")
        return str(value).split() if value else []


@dataclass(frozen=True)
class Conditional:
    """Children visible only to one renderer branch."""

    branch: Branch
    children: tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "branch", Branch(self.branch))
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


Node = Union[Element, Text, Raw, Conditional]


def iter_elements(node: Node) -> Iterator[Element]:
    """Yield every element within a markup node."""
    if isinstance(node, Element):
        yield from node.iter()
    elif isinstance(node, Conditional):
        for child in node.children:
            yield from iter_elements(child)


def legacy(*children: Node) -> Conditional:
    """Wrap children so only the legacy renderer sees them."""
    return Conditional(Branch.LEGACY, children)


def standard(*children: Node) -> Conditional:
    """Wrap children so the legacy renderer skips them."""
    return Conditional(Branch.STANDARD, children)


# =============================================================================
# Serialisation
# =============================================================================


def _render_attrs(attrs: Mapping[str, object], style: Style) -> str:
    parts = []
    for name, value in attrs.items():
        if value is None:
            continue
        parts.append(f'{name}="{escape(str(value), quote=True)}"')
    css = to_css(style)
    if css:
        parts.append(f'style="{escape(css, quote=True)}"')
    return "".join(f" {part}" for part in parts)


def render_markup(node: Node | None) -> str:
    """Serialise a markup node to a compact string.

    Example:
        >>> render_markup(Element("td", {"width": 20}, children=(NBSP,)))
        '<td width="20">&nbsp;</td>'
    """
    if node is None:
        return ""
    if isinstance(node, Text):
        return escape(node.value, quote=False)
    if isinstance(node, Raw):
        return node.value
    if isinstance(node, Conditional):
        start, end = CONDITIONAL_MARKERS[node.branch]
        inner = "".join(render_markup(child) for child in node.children)
        return f"{start}{inner}{end}"
    attrs = _render_attrs(node.attrs, node.style)
    if node.tag in VOID_TAGS:
        return f"<{node.tag}{attrs} />"
    inner = "".join(render_markup(child) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


# =============================================================================
# Table helpers
# =============================================================================


def table_cell(
    *children: Node,
    attrs: Mapping[str, object] | None = None,
    style: Style | None = None,
) -> Element:
    return Element("td", dict(attrs or {}), dict(style or {}), children)


def table_row(*cells: Node, attrs: Mapping[str, object] | None = None) -> Element:
    return Element("tr", dict(attrs or {}), {}, cells)


def layout_table(
    *rows: Node,
    label: str | None = None,
    style: Style | None = None,
    attrs: Mapping[str, object] | None = None,
) -> Element:
    """A ``role="presentation"`` table with zero padding, spacing and border."""
    table_attrs: dict[str, object] = {"aria-label": label, **PRESENTATION_ATTRS}
    table_attrs.update(attrs or {})
    return Element(
        "table",
        table_attrs,
        dict(style or {}),
        (Element("tbody", children=rows),),
    )


def single_cell_table(
    *children: Node,
    label: str | None = None,
    table_style: Style | None = None,
    table_attrs: Mapping[str, object] | None = None,
    cell_style: Style | None = None,
    cell_attrs: Mapping[str, object] | None = None,
) -> Element:
    """A layout table holding one row with one cell."""
    return layout_table(
        table_row(table_cell(*children, attrs=cell_attrs, style=cell_style)),
        label=label,
        style=table_style,
        attrs=table_attrs,
    )


__all__ = [
    "VOID_TAGS",
    "PRESENTATION_ATTRS",
    "CONDITIONAL_MARKERS",
    "Branch",
    "Text",
    "Raw",
    "NBSP",
    "Element",
    "Conditional",
    "Node",
    "iter_elements",
    "legacy",
    "standard",
    "render_markup",
    "table_cell",
    "table_row",
    "layout_table",
    "single_cell_table",
]
