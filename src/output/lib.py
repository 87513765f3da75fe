"""Output formatting for layout review.

Generates human-readable text representations of LayoutNode trees
alongside the rendered markup, for the CLI and for review.
"""

import re
from dataclasses import dataclass

from src.compose import RenderOptions, render_html
from src.memo import RenderCache
from src.mid import LayoutNode
from src.schema import NodeKind, WidthDistribution, WidthType

_TAG_PATTERN = re.compile(r"<[^>]+>")
_SNIPPET_LENGTH = 24


@dataclass
class LayoutOutput:
    """Complete output for review.

    Attributes:
        text_tree: Human-readable tree representation.
        html: Rendered markup fragment.
        node: Original LayoutNode.
    """

    text_tree: str
    html: str
    node: LayoutNode


def format_layout_tree(node: LayoutNode) -> str:
    """Format a LayoutNode as a human-readable tree.

    Example output:
        Section [section, content, gap 16px]
        ├── header [row, justify center]
        │   └── logo [image, "Logo"]
        └── body [container, full, ratio 2:3 @0, gap 20px, wrap]
            ├── copy [column, gap 10px]
            └── aside [icon, mdi:star]

    Args:
        node: Root LayoutNode to format.

    Returns:
        Formatted tree string.
    """
    lines: list[str] = []
    _format_node(node, lines, "", is_last=True, is_root=True)
    return "\n".join(lines)


def _format_node(
    node: LayoutNode,
    lines: list[str],
    prefix: str,
    is_last: bool,
    is_root: bool = False,
) -> None:
    """Recursively format a node and its children."""
    if is_root:
        connector = ""
        child_prefix = ""
    else:
        connector = "└── " if is_last else "├── "
        child_prefix = prefix + ("    " if is_last else "│   ")

    label = node.id or node.kind.capitalize()
    attrs = [node.kind, *_describe(node)]
    lines.append(f"{prefix}{connector}{label} [{', '.join(attrs)}]")

    for i, child in enumerate(node.children):
        is_last_child = i == len(node.children) - 1
        _format_node(child, lines, child_prefix, is_last_child)


def _snippet(text: str | None) -> str:
    plain = _TAG_PATTERN.sub("", text or "").strip()
    if len(plain) > _SNIPPET_LENGTH:
        plain = plain[: _SNIPPET_LENGTH - 1] + "…"
    return f'"{plain}"'


def _describe(node: LayoutNode) -> list[str]:
    """Short kind-specific attributes for the tree view."""
    config = node.config
    attrs: list[str] = []

    match node.kind:
        case NodeKind.CONTAINER.value:
            if config.width_type == WidthType.FIXED.value:
                attrs.append(f"fixed {config.width}" if config.width else "fixed")
            else:
                attrs.append("full")
            constraint = config.children_constraints
            strategy = constraint.width_distribution_type
            if strategy == WidthDistribution.RATIO.value and constraint.ratio:
                numerator, denominator = constraint.ratio.value
                attrs.append(
                    f"ratio {numerator:g}:{denominator:g} "
                    f"@{constraint.ratio.main_child_index}"
                )
            elif strategy == WidthDistribution.MANUAL.value:
                attrs.append(f"manual {'/'.join(constraint.widths or ())}")
            else:
                attrs.append(strategy)
        case NodeKind.SECTION.value:
            attrs.append(config.section_type)
        case NodeKind.ROW.value:
            if config.justify_content:
                attrs.append(f"justify {config.justify_content}")
        case NodeKind.TEXT.value:
            attrs.append(_snippet(config.text))
        case NodeKind.HEADING.value:
            attrs.extend([config.level, _snippet(config.text)])
        case NodeKind.BUTTON.value:
            attrs.append(_snippet(config.text))
        case NodeKind.ICON.value:
            if config.icon_identifier:
                attrs.append(config.icon_identifier)
        case NodeKind.IMAGE.value:
            if config.alt:
                attrs.append(f'"{config.alt}"')
        case NodeKind.SPACER.value | NodeKind.DIVIDER.value:
            attrs.append(config.height)

    if getattr(config, "gap", None):
        attrs.append(f"gap {config.gap}")
    if getattr(config, "should_wrap", False):
        attrs.append("wrap")
    return attrs


class OutputGenerator:
    """Generates complete output for review.

    Produces both the text tree and the rendered markup from a layout node.
    """

    def __init__(
        self,
        options: RenderOptions | None = None,
        cache: RenderCache | None = None,
    ):
        """Initialize generator.

        Args:
            options: Render options shared by every generated output.
            cache: Optional memoisation store reused across outputs.
        """
        self._options = options or RenderOptions()
        self._cache = cache

    def generate(self, node: LayoutNode) -> LayoutOutput:
        """Generate output from a LayoutNode."""
        return LayoutOutput(
            text_tree=format_layout_tree(node),
            html=render_html(node, self._options, self._cache),
            node=node,
        )


__all__ = [
    "format_layout_tree",
    "LayoutOutput",
    "OutputGenerator",
]
