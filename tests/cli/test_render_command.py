"""Tests for the rendering CLI commands."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def run_cli(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        timeout=60,
    )


@pytest.fixture
def layout_file(tmp_path, sample_document) -> Path:
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.mark.unit
def test_render_document(layout_file):
    """render prints a complete document."""
    result = run_cli("render", str(layout_file))
    assert result.returncode == 0
    assert result.stdout.startswith("<!DOCTYPE html")
    assert "<title>Welcome</title>" in result.stdout


@pytest.mark.unit
def test_render_fragment_to_file(layout_file, tmp_path):
    """render --fragment writes only the layout markup."""
    output = tmp_path / "out.html"
    result = run_cli("render", str(layout_file), "--fragment", "-o", str(output))
    assert result.returncode == 0
    html = output.read_text(encoding="utf-8")
    assert html.startswith("<table")
    assert "<!DOCTYPE" not in html


@pytest.mark.unit
def test_render_title_override(layout_file):
    result = run_cli("render", str(layout_file), "--title", "Spring Sale")
    assert "<title>Spring Sale</title>" in result.stdout


@pytest.mark.unit
def test_render_invalid_json(tmp_path):
    """Malformed input exits with status 1."""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    result = run_cli("render", str(path))
    assert result.returncode == 1
    assert "Render failed" in result.stderr


@pytest.mark.unit
def test_render_unknown_kind(tmp_path):
    path = tmp_path / "unknown.json"
    path.write_text(json.dumps({"kind": "carousel", "config": {}}), encoding="utf-8")
    result = run_cli("render", str(path))
    assert result.returncode == 1


@pytest.mark.unit
def test_render_missing_file(tmp_path):
    result = run_cli("render", str(tmp_path / "missing.json"))
    assert result.returncode == 1


@pytest.mark.unit
@pytest.mark.parametrize("payload", ["42", "[1, 2]", '"layout"'])
def test_render_non_object_json(tmp_path, payload):
    """Top-level JSON that is not an object fails cleanly."""
    path = tmp_path / "scalar.json"
    path.write_text(payload, encoding="utf-8")
    result = run_cli("render", str(path))
    assert result.returncode == 1
    assert "Render failed" in result.stderr
    assert "Traceback" not in result.stderr


@pytest.mark.unit
def test_render_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"kind": "text", "config": {"text": "caf\xe9"}}')
    result = run_cli("render", str(path))
    assert result.returncode == 1
    assert "Render failed" in result.stderr
    assert "Traceback" not in result.stderr


@pytest.mark.unit
def test_tree(layout_file):
    result = run_cli("tree", str(layout_file))
    assert result.returncode == 0
    assert result.stdout.splitlines()[0] == (
        "root [container, fixed 600px, equals, gap 20px]"
    )


@pytest.mark.unit
def test_tree_with_html(layout_file):
    """tree --html prints the markup fragment after the tree."""
    result = run_cli("tree", str(layout_file), "--html")
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert lines[0].startswith("root [container")
    assert lines[-1].startswith("<table")


@pytest.mark.unit
def test_tree_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"kind": "text", "config": {"text": "caf\xe9"}}')
    result = run_cli("tree", str(path))
    assert result.returncode == 1
    assert "Could not read layout" in result.stderr


@pytest.mark.unit
def test_validate_clean(layout_file):
    result = run_cli("validate", str(layout_file))
    assert result.returncode == 0
    assert "Layout is valid" in result.stdout


@pytest.mark.unit
def test_validate_reports_issues(tmp_path):
    path = tmp_path / "issues.json"
    layout = {
        "kind": "container",
        "children": [
            {"id": "a", "kind": "text", "config": {"text": "x"}},
            {"id": "a", "kind": "image", "config": {}},
        ],
    }
    path.write_text(json.dumps(layout), encoding="utf-8")
    result = run_cli("validate", str(path))
    assert result.returncode == 1
    assert "duplicate_id" in result.stdout
    assert "missing_content" in result.stdout


@pytest.mark.unit
def test_schema():
    result = run_cli("schema")
    assert result.returncode == 0
    assert "LayoutNode" in json.dumps(json.loads(result.stdout))


@pytest.mark.unit
def test_schema_components():
    result = run_cli("schema", "--components", "--category", "spacing")
    assert result.returncode == 0
    components = json.loads(result.stdout)
    assert {item["kind"] for item in components} == {"divider", "spacer"}
    assert all(item["category"] == "spacing" for item in components)


@pytest.mark.unit
def test_env_category():
    result = run_cli("env", "--category", "icons")
    assert result.returncode == 0
    assert "MAILFRAME_ICON_URL_TEMPLATE" in result.stdout
    assert "MAILFRAME_CANVAS_WIDTH" not in result.stdout


@pytest.mark.unit
def test_unknown_command():
    result = run_cli("publish")
    assert result.returncode == 1
    assert "Usage: python . {command}" in result.stdout
