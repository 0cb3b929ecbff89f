"""
Switchboard

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Usage:
    python -m switchboard --json switches.yaml -- --force -b dev extra
"""

import json
import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from typing import Any

from rich.markup import escape
from rich.table import Table

from switchboard.config import loader
from switchboard.console import console, error_console
from switchboard.exceptions import ConfigError, ConstructionError, ParseError
from switchboard.parser import ParseResult
from switchboard.utils import setup_logging


def get_root_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="switchboard",
        description="Parse a token list against switch declarations.",
        epilog=(
            "Flags for switchboard itself go before the config path. Everything "
            "after it is parsed as-is; use -- to separate them."
        ),
    )
    parser.add_argument("config", help="Path to a YAML or TOML declaration file.")
    parser.add_argument(
        "--usage", action="store_true", help="Print the usage line and exit."
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the parse result as JSON."
    )
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], default=None, help="Logging output mode."
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    parser.add_argument("tokens", nargs=REMAINDER, help="Tokens to parse.")
    return parser


def render_result(result: ParseResult) -> Table:
    table = Table(title="Parse result", show_lines=False)
    table.add_column("Kind", style="bold")
    table.add_column("Name")
    table.add_column("Value")
    for index, value in enumerate(result.arguments):
        table.add_row("argument", str(index), escape(repr(value)))
    for name, value in result.values.items():
        table.add_row("option", escape(name), escape(repr(value)))
    if result.trailing:
        table.add_row("trailing", "", escape(" ".join(result.trailing)))
    return table


def run(args: Namespace) -> int:
    try:
        parser = loader(args.config)
    except (ConfigError, ConstructionError, FileNotFoundError) as error:
        error_console.print(f"[bold red]config error:[/] {escape(str(error))}")
        return 1

    if args.usage:
        console.print(escape(parser.formatted_usage()), highlight=False)
        return 0

    tokens: list[str] = args.tokens
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]

    try:
        result = parser.parse(tokens)
    except ParseError as error:
        error_console.print(f"[bold red]error:[/] {escape(str(error))}")
        error_console.print(f"usage: {escape(parser.formatted_usage())}", highlight=False)
        return 2

    if args.json:
        payload: dict[str, Any] = {
            "values": result.values,
            "arguments": result.arguments,
            "trailing": result.trailing,
        }
        console.print_json(json.dumps(payload))
    else:
        console.print(render_result(result))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        level=logging.DEBUG if args.debug else logging.WARNING,
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
