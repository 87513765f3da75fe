"""Tests for link and icon resolution."""

import pytest

from src.config import DEFAULT_ICON_URL_TEMPLATE
from src.mid import IconConfig, InnerLink

from .lib import (
    IconRequest,
    IconResolver,
    TemplateIconResolver,
    icon_request_from_config,
    link_rel,
    link_target,
    resolve_link,
)


class TestResolveLink:
    """Tests for typed link resolution."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "data,expected",
        [
            ({"type": "url", "url": "https://example.com"}, "https://example.com"),
            ({"type": "email", "email": "a@b.c"}, "mailto:a@b.c"),
            ({"type": "phone", "phone": "+15550100"}, "tel:+15550100"),
            ({"type": "anchor", "anchor": "pricing"}, "#pricing"),
            ({"type": "page_top"}, "#top"),
            ({"type": "page_bottom"}, "#bottom"),
            ({"type": "none", "url": "https://ignored"}, None),
        ],
    )
    def test_variants(self, data, expected):
        assert resolve_link(InnerLink.model_validate(data)) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("link_type", ["url", "email", "phone", "anchor"])
    def test_missing_value(self, link_type):
        assert resolve_link(InnerLink(type=link_type)) is None

    @pytest.mark.unit
    def test_none(self):
        assert resolve_link(None) is None


class TestLinkTarget:
    """Tests for link target and rel."""

    @pytest.mark.unit
    def test_default_self(self):
        assert link_target(None) == "_self"
        assert link_target(InnerLink(type="url", url="x")) == "_self"

    @pytest.mark.unit
    def test_explicit(self):
        assert link_target(InnerLink(type="url", url="x", target="_blank")) == "_blank"

    @pytest.mark.unit
    def test_rel(self):
        assert link_rel("_blank") == "noopener noreferrer"
        assert link_rel("_self") is None


class TestTemplateIconResolver:
    """Tests for template icon resolution."""

    @pytest.mark.unit
    def test_default_template(self, monkeypatch):
        monkeypatch.delenv("MAILFRAME_ICON_URL_TEMPLATE", raising=False)
        resolver = TemplateIconResolver()
        url = resolver.resolve(
            IconRequest(identifier="mdi:home", size=24, color="#ff0000", rotation=90)
        )
        assert resolver.template == DEFAULT_ICON_URL_TEMPLATE
        assert url == "https://iconify.pagenflow.com/api/image/48/ff0000/90-cw/mdi:home.png"

    @pytest.mark.unit
    def test_env_template(self, monkeypatch):
        monkeypatch.setenv(
            "MAILFRAME_ICON_URL_TEMPLATE", "https://icons.test/{{icon-full-name}}?s={{height}}"
        )
        url = TemplateIconResolver().resolve(IconRequest(identifier="a:b", size=16))
        assert url == "https://icons.test/a:b?s=32"

    @pytest.mark.unit
    def test_scale(self):
        resolver = TemplateIconResolver(template="{{height}}", scale=1)
        assert resolver.resolve(IconRequest(identifier="x", size=20)) == "20"

    @pytest.mark.unit
    def test_is_icon_resolver(self):
        assert isinstance(TemplateIconResolver(template=""), IconResolver)


class TestIconRequestFromConfig:
    """Tests for building icon requests."""

    @pytest.mark.unit
    def test_defaults(self):
        request = icon_request_from_config(IconConfig(icon_identifier="mdi:star"))
        assert request == IconRequest(identifier="mdi:star")

    @pytest.mark.unit
    def test_values(self):
        config = IconConfig.model_validate(
            {
                "iconIdentifier": "mdi:star",
                "height": "32px",
                "color": "#333",
                "rotate": 180,
                "rotateOrientation": "ccw",
            }
        )
        request = icon_request_from_config(config)
        assert request.size == 32
        assert request.color == "#333"
        assert request.rotation == 180
        assert request.rotation_direction == "ccw"

    @pytest.mark.unit
    def test_missing_identifier(self):
        assert icon_request_from_config(IconConfig()) is None
