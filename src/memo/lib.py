"""Optional render memoisation.

A composed subtree is a pure function of the node (config plus children)
and the render options, so it can be keyed on a structural hash. The cache
is purely additive: output with and without it is identical. A cache is
owned by one host and is not shared between threads.
"""

import hashlib
from dataclasses import dataclass, field
from typing import Any

from src.mid import LayoutNode


def fingerprint(node: LayoutNode, salt: str = "") -> str:
    """SHA-256 over the node's canonical JSON and a salt.

    The node's JSON includes its children, so any change below the node
    changes the fingerprint.
    """
    payload = node.model_dump_json(by_alias=True, exclude_none=True)
    digest = hashlib.sha256()
    digest.update(salt.encode("utf-8"))
    digest.update(b"\x00")
    digest.update(payload.encode("utf-8"))
    return digest.hexdigest()


@dataclass
class RenderCache:
    """Fingerprint-keyed store of composed elements."""

    entries: dict[str, Any] = field(default_factory=dict)
    hits: int = 0
    misses: int = 0

    def get(self, key: str) -> tuple[bool, Any]:
        """Look up a key; returns ``(found, value)``."""
        if key in self.entries:
            self.hits += 1
            return True, self.entries[key]
        self.misses += 1
        return False, None

    def put(self, key: str, value: Any) -> None:
        self.entries[key] = value

    def clear(self) -> None:
        """Drop all entries and reset counters."""
        self.entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self.entries)


__all__ = ["fingerprint", "RenderCache"]
