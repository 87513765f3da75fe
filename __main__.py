"""CLI entry point for mailframe.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the appropriate submodules.
"""

import argparse
import json
import os
import sys
from pathlib import Path

import pydantic
from dotenv import load_dotenv

from src.compose import RenderOptions, render_html
from src.config import (
    get_canvas_width,
    get_environment,
    get_environment_info,
    get_log_level,
    list_environment_variables,
)
from src.core import get_logger, setup_logging
from src.document import render_document
from src.mid import EmailDocument, export_json_schema, parse_layout
from src.output import OutputGenerator
from src.schema import ComponentCategory, list_components
from src.validation import validate_layout

# Load environment variables from .env file
load_dotenv()

logger = get_logger("mailframe.cli")

# Errors reported as a failed command rather than a traceback
INPUT_ERRORS = (
    pydantic.ValidationError,
    json.JSONDecodeError,
    UnicodeDecodeError,
    OSError,
)


def _load_document(path: Path) -> EmailDocument:
    """Read a layout file (a full document or a bare layout node)."""
    with path.open(encoding="utf-8") as handle:
        return parse_layout(json.load(handle))


def _emit(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        logger.info(f"Wrote {len(text)} characters to {output}")
    else:
        print(text)


# =============================================================================
# Render Command
# =============================================================================


def cmd_render(args: argparse.Namespace) -> int:
    """Handle the render command."""
    try:
        document = _load_document(args.file)
        for error in validate_layout(document.root):
            logger.warning(f"{error.node_id}: {error.message}")

        options = RenderOptions(canvas_width=get_canvas_width(args.canvas_width))
        if args.fragment:
            html = render_html(document.root, options)
        else:
            html = render_document(
                document.root,
                document.config,
                title=args.title or document.title,
                options=options,
                breakpoint=args.breakpoint,
            ).html

        _emit(html, args.output)
        return 0

    except INPUT_ERRORS as e:
        logger.error(f"Render failed: {e}")
        return 1


def handle_render_command(argv: list[str]) -> int:
    """Handle render-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . render",
        description="Render a layout file to email HTML",
    )
    parser.add_argument(
        "file",
        type=Path,
        help="Layout JSON file (document or bare layout node)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--title",
        type=str,
        default=None,
        help="Document title (overrides the file's title)",
    )
    parser.add_argument(
        "--canvas-width",
        type=int,
        default=None,
        help="Canvas width in px (default: MAILFRAME_CANVAS_WIDTH)",
    )
    parser.add_argument(
        "--breakpoint",
        type=int,
        default=None,
        help="Responsive breakpoint in px (default: MAILFRAME_MOBILE_BREAKPOINT)",
    )
    parser.add_argument(
        "--fragment",
        action="store_true",
        help="Emit only the layout markup, without the document shell",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    return cmd_render(args)


# =============================================================================
# Tree Command
# =============================================================================


def cmd_tree(args: argparse.Namespace) -> int:
    """Handle the tree command."""
    try:
        document = _load_document(args.file)
    except INPUT_ERRORS as e:
        logger.error(f"Could not read layout: {e}")
        return 1

    options = RenderOptions(canvas_width=get_canvas_width(args.canvas_width))
    output = OutputGenerator(options).generate(document.root)
    print(output.text_tree)
    if args.html:
        print()
        print(output.html)
    return 0


def handle_tree_command(argv: list[str]) -> int:
    """Handle tree-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . tree",
        description="Print a layout file as a text tree",
    )
    parser.add_argument("file", type=Path, help="Layout JSON file")
    parser.add_argument(
        "--html",
        action="store_true",
        help="Also print the rendered markup fragment below the tree",
    )
    parser.add_argument(
        "--canvas-width",
        type=int,
        default=None,
        help="Canvas width in px for --html (default: MAILFRAME_CANVAS_WIDTH)",
    )

    if not argv:
        parser.print_help()
        return 1

    return cmd_tree(parser.parse_args(argv))


# =============================================================================
# Validate Command
# =============================================================================


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    try:
        document = _load_document(args.file)
    except INPUT_ERRORS as e:
        logger.error(f"Invalid layout: {e}")
        return 1

    errors = validate_layout(document.root)
    if not errors:
        print("Layout is valid")
        return 0

    for error in errors:
        print(f"{error.node_id}: {error.message} ({error.error_type})")
    print(f"\n{len(errors)} issue(s) found")
    return 1


def handle_validate_command(argv: list[str]) -> int:
    """Handle validate-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . validate",
        description="Check a layout file for problems",
    )
    parser.add_argument("file", type=Path, help="Layout JSON file")

    if not argv:
        parser.print_help()
        return 1

    return cmd_validate(parser.parse_args(argv))


# =============================================================================
# Schema Command
# =============================================================================


def handle_schema_command(argv: list[str]) -> int:
    """Handle schema-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . schema",
        description="Export the layout JSON schema",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--components",
        action="store_true",
        help="Export component metadata instead of the JSON schema",
    )
    parser.add_argument(
        "--category",
        "-c",
        type=str,
        default=None,
        choices=[category.value for category in ComponentCategory],
        help="Only list components in this category (with --components)",
    )
    args = parser.parse_args(argv)

    if args.components:
        payload = [meta.to_dict() for meta in list_components(args.category)]
    else:
        payload = export_json_schema()

    try:
        _emit(json.dumps(payload, indent=2), args.output)
    except OSError as e:
        logger.error(f"Schema export failed: {e}")
        return 1
    return 0


# =============================================================================
# Env Command
# =============================================================================


def handle_env_command(argv: list[str]) -> int:
    """Handle env-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . env",
        description="Show environment configuration",
    )
    parser.add_argument(
        "--category",
        "-c",
        type=str,
        default=None,
        choices=["render", "icons", "logging"],
        help="Only show variables in this category",
    )
    args = parser.parse_args(argv)

    for var in list_environment_variables(args.category):
        config = get_environment_info(var)
        source = "env" if config.name in os.environ else "default"
        print(f"{config.name}={get_environment(var)}  [{config.category}, {source}]")
        print(f"    {config.description}")
    return 0


# =============================================================================
# Main
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Rendering ===")
    print("  render     Render a layout file to email HTML")
    print("  tree       Print a layout file as a text tree")
    print("  validate   Check a layout file for problems")
    print("\n=== Reference ===")
    print("  schema     Export the layout JSON schema (or component metadata)")
    print("  env        Show environment configuration")
    print("\nExamples:")
    print("  python . render layout.json -o email.html")
    print("  python . render layout.json --fragment --canvas-width 640")
    print("  python . tree layout.json --html")
    print("  python . validate layout.json")
    print("  python . schema -o layout.schema.json")
    print("  python . schema --components --category layout")
    print("  python . env --category render")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        show_help()
        return 1

    command = argv[0]
    rest_args = argv[1:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "render": handle_render_command,
        "tree": handle_tree_command,
        "validate": handle_validate_command,
        "schema": handle_schema_command,
        "env": handle_env_command,
    }

    if command in commands:
        setup_logging(get_log_level())
        return commands[command](rest_args)

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
