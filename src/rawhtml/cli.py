"""Command-line interface for rawhtml."""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .conversion.converter import HtmlConverter
from .errors import RawHtmlError, TreeFormatError
from .grammar import match_tag_at_start
from .logging_config import setup_logging
from .models.config import ConverterConfig
from .models.tree import MarkdownTree


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="rawhtml",
        description="Convert raw HTML inside markdown trees into editable document operations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check whether a literal starts with an HTML tag
  rawhtml match '<a href="/docs">'

  # Convert a JSON markdown tree and print the document
  rawhtml convert tree.json

  # Show the builder operations instead, reading the tree from stdin
  cat tree.json | rawhtml convert - --ops
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="YAML configuration file",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from config, else WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command")

    match_parser = subparsers.add_parser("match", help="Recognize an HTML tag at the start of TEXT")
    match_parser.add_argument("text", help="Literal to test")

    convert_parser = subparsers.add_parser("convert", help="Convert a JSON markdown tree")
    convert_parser.add_argument("file", help="JSON tree file, or - for stdin")
    convert_parser.add_argument(
        "--ops",
        action="store_true",
        help="Print builder operations instead of the document",
    )

    return parser


def load_config(args: argparse.Namespace) -> ConverterConfig:
    """Load configuration from --config and apply command-line overrides."""
    config = ConverterConfig.from_yaml_file(args.config) if args.config else ConverterConfig()
    if args.log_level:
        config = config.model_copy(update={"log_level": args.log_level})
    return config


def read_tree(source: str) -> MarkdownTree:
    """Read a markdown tree from a JSON file or stdin."""
    text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeFormatError(f"Invalid JSON in {source}: {e}") from e
    return MarkdownTree.from_dict(data)


def run_match(args: argparse.Namespace, console: Console) -> int:
    parsed = match_tag_at_start(args.text)
    if parsed is None:
        console.print("no tag")
        return 1

    kind = "open" if parsed.is_open else "close"
    console.print(f"{kind} {escape(parsed.name)}")
    return 0


def run_convert(args: argparse.Namespace, console: Console, config: ConverterConfig) -> int:
    tree = read_tree(args.file)
    builder = HtmlConverter(config=config).convert_tree(tree)

    if args.ops:
        table = Table(title="Builder operations")
        table.add_column("#", justify="right")
        table.add_column("operation")
        table.add_column("arguments")
        for index, op in enumerate(builder.operations, 1):
            table.add_row(str(index), op.name, Text(", ".join(repr(arg) for arg in op.args)))
        console.print(table)
        return 0

    console.print_json(data=builder.finish().to_dict())
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    console = Console()
    error_console = Console(stderr=True)

    try:
        config = load_config(args)
        setup_logging(
            level=config.log_level,
            log_file=str(config.log_file) if config.log_file else None,
        )

        if args.command == "match":
            return run_match(args, console)
        return run_convert(args, console, config)

    except (RawHtmlError, ValidationError, OSError) as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        suggestions = getattr(e, "suggestions", None)
        for suggestion in suggestions or []:
            error_console.print(f"  - {escape(suggestion)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
