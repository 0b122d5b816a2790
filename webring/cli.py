#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Command line entry point for the webring browser.

Usage:
    webring                                   # Full TUI mode
    webring browse --base https://example.org # Load webring.json from a URL
    webring browse --list --tab COMP          # One-shot text listing (no TUI)
"""

import argparse
import sys
from typing import List, Optional

from webring._version import __version__
from webring.logger import setup_logging
from webring.models import ALL_CATEGORY, CATEGORIES, LoadError, SortDirection, SortKey


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webring",
        description="Concordia Webring - browse member sites",
    )
    parser.add_argument(
        "--version", action="version", version=f"webring {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    browse_parser = subparsers.add_parser("browse", help="Browse the webring (default)")
    _add_browse_arguments(browse_parser)
    return parser


def _add_browse_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--base", "-b",
        help="URL or directory holding webring.json (default: $WEBRING_BASE_PATH or cwd)",
    )
    parser.add_argument(
        "--list", "-l", action="store_true", help="Print the list and exit (no TUI)"
    )
    parser.add_argument(
        "--tab", "-t", choices=CATEGORIES, default=ALL_CATEGORY, help="Program tab"
    )
    parser.add_argument("--search", "-s", default="", help="Search text")
    parser.add_argument(
        "--sort",
        choices=[k.value for k in SortKey],
        default=SortKey.YEAR.value,
        help="Sort column",
    )
    parser.add_argument("--desc", action="store_true", help="Sort descending")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    # Default to browse when no subcommand given
    if not args_list or (args_list[0].startswith("-") and args_list[0] not in ("-h", "--help", "--version")):
        args_list.insert(0, "browse")

    parser = build_parser()
    args = parser.parse_args(args_list)
    setup_logging()

    from webring.resolver import EntryResolver
    from webring.tui.app_state import AppState

    state = AppState()
    state.set_category(args.tab)
    state.set_search_text(args.search)
    state.sort.column = SortKey(args.sort)
    state.sort.direction = SortDirection.DESC if args.desc else SortDirection.ASC

    resolver = EntryResolver(args.base)

    if args.list:
        from webring.tui.formatting import format_listing

        try:
            catalog = resolver.load()
        except LoadError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        state.finish_load(catalog)
        print(format_listing(state.derived(), state.category_count()))
        return 0

    from webring.tui.app import WebringApp

    app = WebringApp(resolver=resolver, state=state)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
