"""
minigrep MCP Server

MCP delivery layer - wraps the container's handlers as MCP tools.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import os
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .container import Container
from .adapters.mcp import MCPHandlers

# Get host/port from env or default
HTTP_PORT = int(os.getenv("MINIGREP_HTTP_PORT", "6661"))
HTTP_HOST = os.getenv("MINIGREP_HTTP_HOST", "127.0.0.1")

# Initialize MCP server with HTTP config
mcp = FastMCP("minigrep", host=HTTP_HOST, port=HTTP_PORT)

handlers = MCPHandlers(Container())


@mcp.tool()
async def search_file(
    query: str,
    file_path: str,
    ignore_case: Optional[bool] = None
) -> dict:
    """
    Return every line of a file that contains query.

    Plain substring matching, no regex. Case-sensitive unless ignore_case is
    true, or ignore_case is omitted and IGNORE_CASE is set in the server's
    environment.

    Args:
        query: Substring to search for. An empty query matches every line.
        file_path: Path to the file to search
        ignore_case: Explicit case policy; overrides IGNORE_CASE when given

    Returns:
        Dictionary with matches (line_number, line), match_count and total_lines

    Example:
        search_file("duct", "poem.txt")
        → {matches: [{line_number: 2, line: "safe, fast, productive."}], ...}
    """
    return await handlers.search_file(query, file_path, ignore_case)


@mcp.tool()
async def search_text(
    query: str,
    text: str,
    ignore_case: Optional[bool] = None
) -> dict:
    """
    Return every line of text that contains query.

    Same matching rules as search_file, applied to the given text.
    """
    return await handlers.search_text(query, text, ignore_case)


@mcp.tool()
async def resolve_case_policy(ignore_case: Optional[bool] = None) -> dict:
    """Show whether a search would be case-sensitive or case-insensitive."""
    return await handlers.resolve_case_policy(ignore_case)


def main():
    """Main entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="minigrep: line search over MCP."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    parser.add_argument(
        "--host",
        default=HTTP_HOST,
        help=f"Host to bind to for HTTP transport (default: {HTTP_HOST}, or set MINIGREP_HTTP_HOST)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=HTTP_PORT,
        help=f"Port to bind to for HTTP transport (default: {HTTP_PORT}, or set MINIGREP_HTTP_PORT)"
    )
    args = parser.parse_args()

    # Run the server
    if args.transport == "streamable-http":
        mcp.settings.host = args.host
        mcp.settings.port = args.port
        print(f"Starting minigrep on http://{args.host}:{args.port}")
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
