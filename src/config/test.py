"""Tests for configuration management."""

from pathlib import Path

import pytest

from .lib import (
    DEFAULT_ICON_URL_TEMPLATE,
    EnvConfig,
    EnvVar,
    _convert_value,
    get_canvas_width,
    get_document_title,
    get_environment,
    get_environment_info,
    get_icon_url_template,
    get_log_level,
    get_mobile_breakpoint,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("MAILFRAME_CANVAS_WIDTH", raising=False)
        assert get_environment(EnvVar.CANVAS_WIDTH) == 600

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("MAILFRAME_CANVAS_WIDTH", "700")
        assert get_environment(EnvVar.CANVAS_WIDTH, override=640) == 640

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("MAILFRAME_MOBILE_BREAKPOINT", "480")
        result = get_environment(EnvVar.MOBILE_BREAKPOINT)
        assert result == 480
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("MAILFRAME_CANVAS_WIDTH", "wide")
        assert get_environment(EnvVar.CANVAS_WIDTH) == 600

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("MAILFRAME_DOCUMENT_TITLE", "Newsletter")
        assert get_environment(EnvVar.DOCUMENT_TITLE) == "Newsletter"


class TestConvertValue:
    """Tests for raw value conversion."""

    @pytest.mark.unit
    def test_bool_values(self):
        """Boolean conversion recognizes common spellings."""
        for value in ("true", "1", "yes", "TRUE"):
            assert _convert_value(value, bool, None) is True
        for value in ("false", "0", "no", "No"):
            assert _convert_value(value, bool, None) is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self):
        """Unrecognized boolean strings fall back to the default."""
        assert _convert_value("maybe", bool, True) is True

    @pytest.mark.unit
    def test_path_conversion(self):
        """Path values are wrapped in Path."""
        assert _convert_value("/tmp/out", Path, None) == Path("/tmp/out")

    @pytest.mark.unit
    def test_none_returns_default(self):
        """Missing values return the default."""
        assert _convert_value(None, int, 7) == 7


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.CANVAS_WIDTH)
        assert isinstance(info, EnvConfig)
        assert info.name == "MAILFRAME_CANVAS_WIDTH"
        assert info.default == 600
        assert info.var_type is int
        assert info.category == "render"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.ICON_URL_TEMPLATE)
        assert "Icon" in info.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_lists_all(self):
        """No category returns every variable."""
        assert set(list_environment_variables()) == set(EnvVar)

    @pytest.mark.unit
    def test_filters_by_category(self):
        """Category filter returns only matching variables."""
        render_vars = list_environment_variables("render")
        assert EnvVar.CANVAS_WIDTH in render_vars
        assert EnvVar.ICON_URL_TEMPLATE not in render_vars

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        """Unknown category yields nothing."""
        assert list_environment_variables("nope") == []


class TestConvenienceFunctions:
    """Tests for convenience accessors."""

    @pytest.mark.unit
    def test_canvas_width_default(self, monkeypatch):
        monkeypatch.delenv("MAILFRAME_CANVAS_WIDTH", raising=False)
        assert get_canvas_width() == 600

    @pytest.mark.unit
    def test_breakpoint_override(self):
        assert get_mobile_breakpoint(override=600) == 600

    @pytest.mark.unit
    def test_document_title_default(self, monkeypatch):
        monkeypatch.delenv("MAILFRAME_DOCUMENT_TITLE", raising=False)
        assert get_document_title() == "Email Preview"

    @pytest.mark.unit
    def test_icon_template_default(self, monkeypatch):
        monkeypatch.delenv("MAILFRAME_ICON_URL_TEMPLATE", raising=False)
        assert get_icon_url_template() == DEFAULT_ICON_URL_TEMPLATE

    @pytest.mark.unit
    def test_icon_template_empty_env_falls_back(self, monkeypatch):
        """An empty template value uses the built-in template."""
        monkeypatch.setenv("MAILFRAME_ICON_URL_TEMPLATE", "")
        assert get_icon_url_template() == DEFAULT_ICON_URL_TEMPLATE

    @pytest.mark.unit
    def test_log_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("MAILFRAME_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"
