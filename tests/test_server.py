"""
Unit tests for mcp_minigrep.server and mcp_minigrep.server_http

Tests the MCP server layer (tool wrappers and dispatch, not full MCP protocol).
"""
import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from starlette.testclient import TestClient

from mcp_minigrep.server import search_file, search_text, resolve_case_policy
from mcp_minigrep import server_http


class TestSearchFileTool:
    """Test search_file MCP tool."""

    @patch('mcp_minigrep.server.handlers')
    def test_success(self, mock_handlers):
        mock_handlers.search_file = AsyncMock(return_value={
            "success": True,
            "matches": [{"line_number": 2, "line": "safe, fast, productive."}],
            "match_count": 1
        })

        result = asyncio.run(search_file("duct", "/tmp/poem.txt"))

        assert result["success"] is True
        assert result["match_count"] == 1
        mock_handlers.search_file.assert_awaited_once_with("duct", "/tmp/poem.txt", None)

    @patch('mcp_minigrep.server.handlers')
    def test_with_override(self, mock_handlers):
        mock_handlers.search_file = AsyncMock(return_value={"success": True})

        asyncio.run(search_file("duct", "/tmp/poem.txt", ignore_case=True))

        assert mock_handlers.search_file.call_args.args[2] is True

    @patch('mcp_minigrep.server.handlers')
    def test_error_passthrough(self, mock_handlers):
        mock_handlers.search_file = AsyncMock(return_value={
            "success": False,
            "error": "Failed to search /tmp/poem.txt: No such file"
        })

        result = asyncio.run(search_file("duct", "/tmp/poem.txt"))

        assert result["success"] is False
        assert "No such file" in result["error"]


class TestSearchTextTool:
    """Test search_text MCP tool against the real container."""

    def test_case_insensitive(self):
        result = asyncio.run(search_text("rUsT", "Rust:\nPick three.\nTrust me.", ignore_case=True))

        assert result["success"] is True
        assert [m["line"] for m in result["matches"]] == ["Rust:", "Trust me."]

    def test_case_sensitive_override(self, monkeypatch):
        monkeypatch.setenv("IGNORE_CASE", "1")

        result = asyncio.run(search_text("rUsT", "Rust:\nTrust me.", ignore_case=False))

        assert result["matches"] == []


class TestResolveCasePolicyTool:
    """Test resolve_case_policy MCP tool."""

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("IGNORE_CASE", "yes")

        result = asyncio.run(resolve_case_policy())

        assert result["policy"] == "insensitive"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("IGNORE_CASE", raising=False)

        result = asyncio.run(resolve_case_policy())

        assert result["policy"] == "sensitive"


class TestHttpServer:
    """Test HTTP/SSE server dispatch and routes."""

    def test_ping(self):
        client = TestClient(server_http.app)
        response = client.get("/ping")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_dispatch_search_text(self, monkeypatch):
        monkeypatch.delenv("IGNORE_CASE", raising=False)
        result = asyncio.run(server_http._dispatch_tool(
            "search_text", {"query": "duct", "text": "safe, fast, productive.\nDuct tape."}
        ))
        assert result["success"] is True
        assert result["match_count"] == 1

    def test_dispatch_unknown_tool(self):
        with pytest.raises(ValueError, match="Unknown tool"):
            asyncio.run(server_http._dispatch_tool("replace_text", {}))

    def test_formatters_cover_all_tools(self):
        assert set(server_http.FORMATTERS) == set(server_http.TOOL_SCHEMAS)

    def test_get_port_default(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert server_http.get_port() == 5002

    def test_get_port_invalid(self, monkeypatch):
        monkeypatch.setenv("PORT", "abc")
        with pytest.raises(ValueError, match="Invalid PORT"):
            server_http.get_port()
