#!/usr/bin/env python3
"""
CLI for minigrep - search a file for lines containing a query

Usage:
  minigrep to poem.txt                    # Case-sensitive (unless IGNORE_CASE is set)
  IGNORE_CASE=1 minigrep to poem.txt      # Case-insensitive via environment
  minigrep -i to poem.txt                 # Case-insensitive, overrides IGNORE_CASE
  minigrep -s to poem.txt                 # Case-sensitive, overrides IGNORE_CASE
  minigrep --report to poem.txt           # Numbered report instead of bare lines

Runs searches through the same container and MCP handlers as the servers
"""

import argparse
import asyncio
import logging
import sys

from .container import Container
from .adapters.mcp import MCPHandlers
from .formatters import format_lines, format_search


async def search_command(
    query: str,
    file_path: str,
    ignore_case: bool | None,
    report: bool,
    container: Container | None = None,
) -> int:
    """Search file and print matches"""
    handlers = MCPHandlers(container or Container())

    result = await handlers.search_file(
        query=query,
        file_path=file_path,
        ignore_case=ignore_case
    )

    if not result["success"]:
        print(f"Application error: {result['error']}", file=sys.stderr)
        return 1

    if report:
        print(format_search(result))
    elif result["match_count"]:
        print(format_lines(result))

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minigrep",
        description="Print lines of FILE_PATH that contain QUERY"
    )
    parser.add_argument("query", help="Substring to search for")
    parser.add_argument("file_path", help="File to search")

    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument(
        "-i", "--ignore-case",
        dest="ignore_case",
        action="store_const",
        const=True,
        help="Case-insensitive search (overrides IGNORE_CASE)"
    )
    case_group.add_argument(
        "-s", "--case-sensitive",
        dest="ignore_case",
        action="store_const",
        const=False,
        help="Case-sensitive search (overrides IGNORE_CASE)"
    )

    parser.add_argument(
        "--report",
        action="store_true",
        help="Show numbered matches with a summary header"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging to stderr"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(levelname)s] %(name)s: %(message)s",
            stream=sys.stderr
        )

    return asyncio.run(search_command(
        query=args.query,
        file_path=args.file_path,
        ignore_case=args.ignore_case,
        report=args.report
    ))


if __name__ == "__main__":
    sys.exit(main())
