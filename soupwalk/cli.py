from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable

import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import SoupConfig, load_config, save_config
from .errors import SoupError
from .fetch import fetch_document
from .node import Node
from .parser import html_parse

console = Console()


def _load_source(source: str, config: SoupConfig) -> Node:
    if source.startswith(("http://", "https://")):
        return fetch_document(source, config)
    return html_parse(Path(source).read_text(encoding="utf-8"), parser=config.parser)


def _render_matches(matches: Iterable[Node], *, full_text: bool) -> None:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Tag")
    table.add_column("Attributes")
    table.add_column("Text")
    for idx, node in enumerate(matches, start=1):
        attrs = " ".join(f'{key}="{value}"' for key, value in (node.attrs() or {}).items())
        content = node.full_text() if full_text else node.text()
        table.add_row(str(idx), escape(node.label), escape(attrs), escape(" ".join(content.split())))
    console.print(table)


def cmd_find(args: argparse.Namespace) -> int:
    if (args.key is None) != (args.value is None):
        console.print("[red]An attribute filter needs both KEY and VALUE.[/red]")
        return 1
    try:
        config = load_config(args.config) if args.config else SoupConfig()
    except (OSError, ValueError, yaml.YAMLError) as exc:
        console.print(f"[red]Failed to read config {args.config}:[/red] {escape(str(exc))}")
        return 1

    try:
        root = _load_source(args.source, config).raise_for_error()
    except (OSError, SoupError) as exc:
        console.print(f"[red]Failed to load {args.source}:[/red] {escape(str(exc))}")
        return 1

    query = [args.tag] + ([args.key, args.value] if args.key is not None else [])
    try:
        if args.all:
            search = root.find_all_strict if args.strict else root.find_all
            matches = list(search(*query).raise_for_error())
        else:
            search = root.find_strict if args.strict else root.find
            matches = [search(*query).raise_for_error()]
    except SoupError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 1

    if not matches:
        console.print("No matching elements found.")
        return 0
    _render_matches(matches, full_text=args.full_text)
    return 0


def cmd_init_config(args: argparse.Namespace) -> int:
    path = Path(args.path)
    if path.exists() and not args.force:
        console.print(f"{path} already exists. Use --force to overwrite it.")
        return 0

    save_config(SoupConfig(), path)
    console.print(f"Wrote default soupwalk config to {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(description="Query HTML documents by tag name and attributes")
    subparsers = parser.add_subparsers(dest="command", required=True)

    find_parser = subparsers.add_parser(
        "find", parents=[common], help="Find elements in a URL or local HTML file"
    )
    find_parser.add_argument("source", help="http(s) URL or path to an HTML file")
    find_parser.add_argument("tag", help="Tag name to search for")
    find_parser.add_argument("key", nargs="?", help="Attribute name to filter on")
    find_parser.add_argument("value", nargs="?", help="Attribute value to filter on")
    find_parser.add_argument("--all", "-a", action="store_true", help="List every match instead of the first")
    find_parser.add_argument("--strict", action="store_true", help="Require the exact attribute value")
    find_parser.add_argument("--full-text", action="store_true", help="Show text from nested elements too")
    find_parser.add_argument("--config", "-c", default=None, help="Path to a YAML config file")
    find_parser.set_defaults(func=cmd_find)

    init_parser = subparsers.add_parser("init-config", parents=[common], help="Create a starter config file")
    init_parser.add_argument("--path", "-p", default="soupwalk.yaml", help="Where to create the file")
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing file")
    init_parser.set_defaults(func=cmd_init_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(console=console)])
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
