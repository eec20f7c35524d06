#!/usr/bin/env python3
"""
CLI interface for eds-block-analyser.

Usage:
    eds tools
    eds templates
    eds template <name>
    eds call <tool> [--arg key=value ...]

This provides the same functionality as the MCP tools but via command line,
making the prompts accessible to agents that don't support MCP.
"""

import argparse
import json
import sys
from pathlib import Path

from config import build_components, load_config
from dispatcher import Dispatcher
from logging_config import configure_logging
from models import ConfigurationError


def _parse_args_pairs(pairs: list[str]) -> dict[str, str]:
    """Turn ["key=value", ...] into a dict."""
    arguments: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        arguments[key] = value
    return arguments


def cmd_tools(args: argparse.Namespace) -> int:
    """List tools as JSON."""
    _, registry = build_components(load_config(args.assets_dir))
    print(json.dumps(registry.list_capabilities(), indent=2))
    return 0


def cmd_templates(args: argparse.Namespace) -> int:
    """List template names, one per line."""
    store, _ = build_components(load_config(args.assets_dir))
    for descriptor in store.descriptors():
        print(f"{descriptor.name}\t{descriptor.description}")
    return 0


def cmd_template(args: argparse.Namespace) -> int:
    """Print a template (or the not-found listing)."""
    store, _ = build_components(load_config(args.assets_dir))
    sys.stdout.write(store.resolve(args.name))
    return 0


def cmd_call(args: argparse.Namespace) -> int:
    """Call a tool and print its text. Exit 1 on error results."""
    _, registry = build_components(load_config(args.assets_dir))
    result = Dispatcher(registry).call_tool(args.tool, _parse_args_pairs(args.arg))
    text = "".join(block.text for block in result.content if block.type == "text")
    stream = sys.stderr if result.isError else sys.stdout
    stream.write(text if text.endswith("\n") else text + "\n")
    return 1 if result.isError else 0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="EDS block analyser prompts and templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    eds tools
    eds template analysis_summary
    eds call eds_block_analyser > prompt.md
    eds call get_template --arg templateName=evaluation_log
""",
    )
    parser.add_argument(
        "--assets-dir",
        type=Path,
        help="Directory with prompts/ and artifacts/ (default: bundled templates)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for stderr output (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # tools
    tools_p = subparsers.add_parser("tools", help="List tools (JSON)")
    tools_p.set_defaults(func=cmd_tools)

    # templates
    templates_p = subparsers.add_parser("templates", help="List template names")
    templates_p.set_defaults(func=cmd_templates)

    # template
    template_p = subparsers.add_parser("template", help="Print a template")
    template_p.add_argument("name", help="Template name")
    template_p.set_defaults(func=cmd_template)

    # call
    call_p = subparsers.add_parser("call", help="Call a tool")
    call_p.add_argument("tool", help="Tool name")
    call_p.add_argument(
        "--arg",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Tool argument (repeatable)",
    )
    call_p.set_defaults(func=cmd_call)

    args = parser.parse_args()
    configure_logging(args.log_level)
    try:
        sys.exit(args.func(args))
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except ConfigurationError as e:
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
