"""Node composer.

Walks a LayoutNode tree and turns every node into markup through a per-kind
renderer registry. A renderer is a pure function of the node's own config,
its already-rendered children and the render-wide options; there is no
shared mutable state between invocations.

Layout renderers receive one entry per configured child, with None standing
in for a child that renders nothing, so width constraints keep addressing
children by their configured position.
"""

import importlib
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from src.config import get_canvas_width
from src.core import get_logger
from src.links import IconResolver, TemplateIconResolver
from src.markup import Element, render_markup
from src.memo import RenderCache, fingerprint
from src.mid import LayoutNode
from src.schema import NodeKind, is_layout_kind

logger = get_logger("mailframe.compose")


@dataclass(frozen=True)
class RenderOptions:
    """Render-wide inputs.

    Attributes:
        canvas_width: Width (px) of full-width containers.
        icon_resolver: Collaborator turning icon requests into URLs.
    """

    canvas_width: int = field(default_factory=get_canvas_width)
    icon_resolver: IconResolver = field(default_factory=TemplateIconResolver)

    @property
    def cache_salt(self) -> str:
        return f"{self.canvas_width}|{self.icon_resolver!r}"


Renderer = Callable[[Any, list[Element | None], RenderOptions], Element | None]

# Renderer registry - populated by the layout and content modules on import
_registry: dict[str, Renderer] = {}


def register_renderer(kind: NodeKind | str) -> Callable[[Renderer], Renderer]:
    """Register a renderer for a node kind.

    Example:
        >>> @register_renderer(NodeKind.SPACER)
        ... def render_spacer(config, children, options):
        ...     ...
    """
    key = NodeKind(kind).value

    def decorator(renderer: Renderer) -> Renderer:
        _registry[key] = renderer
        return renderer

    return decorator


def get_renderer(kind: NodeKind | str) -> Renderer:
    """Get the renderer for a node kind.

    Raises:
        KeyError: If no renderer is registered for the kind.
    """
    key = kind.value if isinstance(kind, NodeKind) else kind
    if key not in _registry:
        _import_renderers()
        if key not in _registry:
            available = ", ".join(sorted(_registry)) or "(none)"
            raise KeyError(f"Unknown node kind '{key}'. Available: {available}")
    return _registry[key]


def list_renderers() -> list[str]:
    """List node kinds with a registered renderer."""
    _import_renderers()
    return sorted(_registry)


def _import_renderers() -> None:
    """Import renderer modules to trigger registration."""
    for module_name in ("layout", "content"):
        importlib.import_module(f"src.compose.{module_name}")


def compose(
    node: LayoutNode,
    options: RenderOptions | None = None,
    cache: RenderCache | None = None,
) -> Element | None:
    """Render a layout tree into a markup element.

    Args:
        node: Root of the (sub)tree to render.
        options: Render-wide inputs (defaults from the environment).
        cache: Optional memoisation store; output is identical without it.

    Returns:
        The rendered element, or None when the node renders nothing.
    """
    options = options or RenderOptions()

    key = None
    if cache is not None:
        key = fingerprint(node, options.cache_salt)
        found, cached = cache.get(key)
        if found:
            return cached

    renderer = get_renderer(node.kind)

    children: list[Element | None] = []
    if is_layout_kind(node.kind):
        children = [compose(child, options, cache) for child in node.children]
    elif node.children:
        logger.debug(
            "Ignoring %d children of leaf node %s", len(node.children), node.label
        )

    element = renderer(node.config, children, options)
    if element is None:
        logger.debug("Node %s renders nothing", node.label)

    if cache is not None:
        cache.put(key, element)
    return element


def render_html(
    node: LayoutNode,
    options: RenderOptions | None = None,
    cache: RenderCache | None = None,
) -> str:
    """Render a layout tree to a markup string."""
    return render_markup(compose(node, options, cache))


__all__ = [
    "RenderOptions",
    "Renderer",
    "register_renderer",
    "get_renderer",
    "list_renderers",
    "compose",
    "render_html",
]
