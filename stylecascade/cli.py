"""
Command-line interface for stylecascade.

Usage:
    stylecascade resolve theme.json Button -a outline --variant success --state active
    stylecascade compile theme.json Button -a default -a outline --variant success --state active -o compiled.json
    stylecascade lookup compiled.json Button -a outline --variant success --state active
    stylecascade version
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .exceptions import StyleCascadeError
from .mapping.accessors import APPEARANCE_DEFAULT
from .mapping.loader import compile_component_mapping, load_theme_mapping, save_theme_mapping
from .styles.style_service import create_style, get_style
from .utils.logger import LOG_LEVELS, configure_logging
from .utils.rich_logger import get_rich_logger


def _add_facet_arguments(parser: argparse.ArgumentParser, multiple_appearances: bool = False) -> None:
    parser.add_argument("theme", help="Theme mapping JSON file")
    parser.add_argument("component", help="Component name")
    if multiple_appearances:
        parser.add_argument(
            "-a", "--appearance",
            dest="appearances",
            action="append",
            help="Appearance to compile, repeatable (default: default)"
        )
    else:
        parser.add_argument(
            "-a", "--appearance",
            default=APPEARANCE_DEFAULT,
            help="Appearance (default: default)"
        )
    parser.add_argument(
        "--variant",
        dest="variants",
        action="append",
        default=[],
        help="Variant, repeatable"
    )
    parser.add_argument(
        "--state",
        dest="states",
        action="append",
        default=[],
        help="State, repeatable"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="stylecascade",
        description="stylecascade - resolve component styles from theme mappings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  stylecascade resolve theme.json Button -a outline --variant success --state active
  stylecascade compile theme.json Button --variant success --state active -o compiled.json
  stylecascade lookup compiled.json Button --state active --variant success
  stylecascade version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    resolve_parser = subparsers.add_parser("resolve", help="Cascade a style from a theme mapping")
    _add_facet_arguments(resolve_parser)
    resolve_parser.add_argument("--json", action="store_true", help="Output as JSON")

    compile_parser = subparsers.add_parser("compile", help="Precompute named styles of a component")
    _add_facet_arguments(compile_parser, multiple_appearances=True)
    compile_parser.add_argument(
        "-o", "--output",
        help="Output JSON file, merged with its existing components (default: stdout)"
    )

    lookup_parser = subparsers.add_parser("lookup", help="Find a style in a compiled mapping")
    _add_facet_arguments(lookup_parser)
    lookup_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("version", help="Show version information")

    return parser


def _print_style(args, title: str, style) -> None:
    if args.json:
        print(json.dumps(style, indent=2, ensure_ascii=False, default=str))
    else:
        get_rich_logger().style_table(title, style)


def _facet_title(args) -> str:
    facets = [args.appearance, *args.variants, *args.states]
    return f"{args.component} ({', '.join(facet for facet in facets if facet)})"


def cmd_resolve(args) -> int:
    """Handle resolve command."""
    mapping = load_theme_mapping(args.theme)
    style = create_style(mapping, args.component, args.appearance, args.variants, args.states)
    _print_style(args, _facet_title(args), style)
    return 0


def cmd_compile(args) -> int:
    """Handle compile command."""
    mapping = load_theme_mapping(args.theme)
    appearances = args.appearances or [APPEARANCE_DEFAULT]
    compiled = compile_component_mapping(mapping, args.component, appearances, args.variants, args.states)

    if not args.output:
        print(json.dumps({args.component: compiled}, indent=2, ensure_ascii=False, sort_keys=True, default=str))
        return 0

    output_path = Path(args.output)
    existing = load_theme_mapping(output_path) if output_path.exists() else {}
    existing[args.component] = compiled
    save_theme_mapping(existing, output_path)
    get_rich_logger().success(f"Compiled {len(compiled)} styles of {args.component} into {output_path}")
    return 0


def cmd_lookup(args) -> int:
    """Handle lookup command."""
    compiled = load_theme_mapping(args.theme)
    style = get_style(compiled, args.component, args.appearance, args.variants, args.states)
    if style is None:
        get_rich_logger().failure(f"No compiled style for {_facet_title(args)}")
        return 1

    _print_style(args, _facet_title(args), style)
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    print(f"stylecascade v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    commands = {
        "resolve": cmd_resolve,
        "compile": cmd_compile,
        "lookup": cmd_lookup,
        "version": cmd_version,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    try:
        return command(args)
    except StyleCascadeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
