"""Node composer: per-kind renderers assembled into one markup tree."""

from . import content, layout
from .lib import (
    RenderOptions,
    Renderer,
    compose,
    get_renderer,
    list_renderers,
    register_renderer,
    render_html,
)

__all__ = [
    "RenderOptions",
    "Renderer",
    "register_renderer",
    "get_renderer",
    "list_renderers",
    "compose",
    "render_html",
    "content",
    "layout",
]
