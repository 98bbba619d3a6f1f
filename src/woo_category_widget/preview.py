#!/usr/bin/env python3

import argparse
import json
import sys

from typing import Any, Optional

from .cli import cmd_doctor, cmd_render, cmd_schema
from .utils.debug import debug_log


def parse_input_data() -> dict[str, Any]:
    """Parse stored widget settings from stdin.

    Returns:
        Settings dictionary, empty if input is not a JSON object
    """
    try:
        input_data = sys.stdin.read()
        data = json.loads(input_data)
    except (json.JSONDecodeError, ValueError):
        return {}

    if not isinstance(data, dict):
        return {}
    return data


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured argument parser
    """
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="woo-category-widget",
        description="Preview and inspect the product category card widget",
        epilog="The render command reads stored widget settings as JSON from stdin.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    schema_parser = subparsers.add_parser("schema", help="Print editor controls as JSON")
    schema_parser.add_argument("--catalog", help="Catalog YAML file")

    render_parser = subparsers.add_parser("render", help="Render the widget")
    render_parser.add_argument("--catalog", help="Catalog YAML file")
    render_parser.add_argument(
        "--css", action="store_true", help="Prepend scoped CSS from style controls"
    )

    subparsers.add_parser("doctor", help="Check configuration and catalog")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    debug_log(f"Command: {args.command}")

    if args.command == "schema":
        return cmd_schema(args.catalog)

    if args.command == "render":
        return cmd_render(parse_input_data(), args.catalog, args.css)

    return cmd_doctor()


if __name__ == "__main__":
    sys.exit(main())
