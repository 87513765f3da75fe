"""Optional structural-hash memoisation for composed subtrees."""

from .lib import RenderCache, fingerprint

__all__ = ["fingerprint", "RenderCache"]
