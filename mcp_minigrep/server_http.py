#!/usr/bin/env python3
"""
MCP HTTP/SSE Server - Hexagonal Architecture

HTTP/SSE server using dependency injection and hexagonal architecture.

Run with: uvicorn mcp_minigrep.server_http:app --host 127.0.0.1 --port 5002

Configuration:
- PORT: Server port (default: 5002)
- IGNORE_CASE: When set (to any value), searches without an explicit
  ignore_case argument are case-insensitive
"""

import json
import logging
import os
import signal
import sys
from datetime import datetime, timezone
from typing import Any

from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from .container import Container
from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .formatters import format_search, format_policy

# Configure logging with millisecond precision
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] %(message)s",
    datefmt="%Y/%m/%d %H:%M:%S"
)


class MillisecondFormatter(logging.Formatter):
    """Formatter with milliseconds as :XXXX"""
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            s = ct.strftime(datefmt)
            ms = int((record.created % 1) * 10000)
            return f"{s}:{ms:04d}"
        return super().formatTime(record, datefmt)


for handler in logging.root.handlers:
    handler.setFormatter(MillisecondFormatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S"
    ))

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_PORT = 5002


def get_port() -> int:
    """Get server port from environment or use default"""
    port_str = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(port_str)
    except ValueError:
        msg = f"Invalid PORT value: {port_str}"
        raise ValueError(msg) from None


container = Container()
handlers = MCPHandlers(container)

mcp_server = Server("minigrep-mcp")

# SSE transport for multi-client support
sse_transport = SseServerTransport("/messages")

FORMATTERS = {
    "search_file": format_search,
    "search_text": format_search,
    "resolve_case_policy": format_policy,
}


@mcp_server.list_tools()  # type: ignore[misc,no-untyped-call]
async def list_tools() -> list[Tool]:
    """List available MCP tools"""
    return [Tool(**schema) for schema in TOOL_SCHEMAS.values()]


@mcp_server.call_tool()  # type: ignore[misc,no-untyped-call]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls"""
    logger.info(f"call_tool: {name} args={arguments}")

    try:
        result = await _dispatch_tool(name, arguments)
    except Exception as e:
        logger.error(f"call_tool: {name} FAILED: {e}")
        raise

    formatter = FORMATTERS.get(name)
    if formatter:
        formatted_text = formatter(result)
    else:
        formatted_text = json.dumps(result, indent=2)

    logger.info(f"call_tool: {name} returning {len(formatted_text)} chars")
    return [TextContent(type="text", text=formatted_text)]


async def _dispatch_tool(name: str, arguments: dict[str, Any]) -> Any:
    """Dispatch tool call to appropriate handler"""
    if name == "search_file":
        return await handlers.search_file(
            query=arguments["query"],
            file_path=arguments["file_path"],
            ignore_case=arguments.get("ignore_case")
        )

    elif name == "search_text":
        return await handlers.search_text(
            query=arguments["query"],
            text=arguments["text"],
            ignore_case=arguments.get("ignore_case")
        )

    elif name == "resolve_case_policy":
        return await handlers.resolve_case_policy(
            ignore_case=arguments.get("ignore_case")
        )

    else:
        raise ValueError(f"Unknown tool: {name}")


# HTTP routes
async def handle_ping(request: Request) -> Response:
    """Health check endpoint"""
    return JSONResponse({"status": "ok"})


async def handle_sse(request: Request) -> Response:
    """SSE endpoint for MCP communication"""
    client_addr = request.client.host if request.client else "unknown"
    logger.info(f"SSE connect from {client_addr}")
    async with sse_transport.connect_sse(
        request.scope, request.receive, request._send
    ) as streams:
        await mcp_server.run(
            streams[0], streams[1], mcp_server.create_initialization_options()
        )
        logger.info(f"SSE disconnect from {client_addr}")
    return Response()


routes = [
    Route("/ping", handle_ping),
    Route("/sse", handle_sse),
    Mount("/messages", app=sse_transport.handle_post_message),
]

app = Starlette(routes=routes)


def handle_sigterm(signum, frame):
    logger.info("Received SIGTERM, shutting down gracefully...")
    sys.exit(0)


def main():
    import uvicorn
    signal.signal(signal.SIGTERM, handle_sigterm)
    port = get_port()
    logger.info(f"Starting MCP HTTP server on port {port}")
    uvicorn.run(app, host="127.0.0.1", port=port)


if __name__ == "__main__":
    main()
