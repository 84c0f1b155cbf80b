"""
MCP Tool Handlers

Shared handlers for MCP tools that use the hexagonal core.
"""
import asyncio
from typing import Any, Optional

from ...container import Container
from ...core.domain import SearchResult


def _search_payload(result: SearchResult) -> dict[str, Any]:
    match_result = result.result
    return {
        "success": True,
        "query": match_result.query,
        "policy": match_result.policy.value,
        "ignore_case": match_result.policy.ignore_case,
        "matches": [
            {"line_number": m.line_number, "line": m.line}
            for m in match_result.matches
        ],
        "match_count": match_result.total_matches,
        "total_lines": result.total_lines,
        "source": result.source,
    }


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    async def search_file(
        self,
        query: str,
        file_path: str,
        ignore_case: Optional[bool] = None
    ) -> dict[str, Any]:
        """Search a file for lines containing query"""
        try:
            result = await asyncio.to_thread(
                self.container.search_file.execute,
                query=query,
                file_path=file_path,
                ignore_case=ignore_case
            )
            return _search_payload(result)

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to search {file_path}: {str(e)}"
            }

    async def search_text(
        self,
        query: str,
        text: str,
        ignore_case: Optional[bool] = None
    ) -> dict[str, Any]:
        """Search inline text for lines containing query"""
        try:
            result = await asyncio.to_thread(
                self.container.search_text.execute,
                query=query,
                text=text,
                ignore_case=ignore_case
            )
            return _search_payload(result)

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to search text: {str(e)}"
            }

    async def resolve_case_policy(
        self,
        ignore_case: Optional[bool] = None
    ) -> dict[str, Any]:
        """Report which case policy a search would use"""
        try:
            policy = await asyncio.to_thread(
                self.container.resolver.resolve,
                ignore_case
            )
            return {
                "success": True,
                "policy": policy.value,
                "ignore_case": policy.ignore_case,
                "override": ignore_case,
                "variable": self.container.resolver.variable,
            }

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to resolve case policy: {str(e)}"
            }
