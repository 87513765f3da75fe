"""Tests for render memoisation."""

import pytest

from src.mid import LayoutNode

from .lib import RenderCache, fingerprint


def spacer(height: str) -> LayoutNode:
    return LayoutNode.model_validate({"kind": "spacer", "config": {"height": height}})


class TestFingerprint:
    """Tests for structural fingerprints."""

    @pytest.mark.unit
    def test_equal_trees_match(self):
        assert fingerprint(spacer("10px")) == fingerprint(spacer("10px"))

    @pytest.mark.unit
    def test_config_change(self):
        assert fingerprint(spacer("10px")) != fingerprint(spacer("12px"))

    @pytest.mark.unit
    def test_salt(self):
        assert fingerprint(spacer("10px"), "a") != fingerprint(spacer("10px"), "b")

    @pytest.mark.unit
    def test_child_change(self, sample_layout):
        changed = {**sample_layout, "children": sample_layout["children"][:1]}
        original = LayoutNode.model_validate(sample_layout)
        trimmed = LayoutNode.model_validate(changed)
        assert fingerprint(original) != fingerprint(trimmed)


class TestRenderCache:
    """Tests for the render cache."""

    @pytest.mark.unit
    def test_miss_then_hit(self):
        cache = RenderCache()
        assert cache.get("k") == (False, None)
        cache.put("k", "value")
        assert cache.get("k") == (True, "value")
        assert (cache.hits, cache.misses) == (1, 1)
        assert len(cache) == 1

    @pytest.mark.unit
    def test_cached_none(self):
        cache = RenderCache()
        cache.put("empty", None)
        assert cache.get("empty") == (True, None)

    @pytest.mark.unit
    def test_clear(self):
        cache = RenderCache()
        cache.put("k", 1)
        cache.get("k")
        cache.clear()
        assert len(cache) == 0
        assert cache.hits == cache.misses == 0
