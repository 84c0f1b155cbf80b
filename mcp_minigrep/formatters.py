"""
Text formatters for MCP tool results

Format handler results as plain terminal text.
Used by both CLI and MCP adapters for consistent presentation.
"""

from typing import Any


def _policy_label(result: dict[str, Any]) -> str:
    return "case-insensitive" if result.get("ignore_case") else "case-sensitive"


def format_lines(result: dict[str, Any]) -> str:
    """Format search result as bare matching lines, one per line (grep style)."""
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    return "\n".join(m["line"] for m in result["matches"])


def format_search(result: dict[str, Any]) -> str:
    """Format search_file / search_text result as a report.

    Example output:
        SEARCH "rUsT" | case-insensitive
        SOURCE: poem.txt

        MATCHES (2 found | 5 lines)
        ──────────────────────────────────────────────────────────────────────
             1: Rust:
             5: Trust me.
    """
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    lines = []
    lines.append(f"SEARCH \"{result['query']}\" | {_policy_label(result)}")
    lines.append(f"SOURCE: {result['source']}")
    lines.append("")

    match_count = result['match_count']
    total_lines = result.get('total_lines', 0)

    if match_count == 0:
        lines.append(f"NO MATCHES FOUND ({total_lines:,} lines searched)")
        return "\n".join(lines)

    lines.append(f"MATCHES ({match_count} found | {total_lines:,} lines)")
    lines.append("─" * 70)

    for match in result['matches']:
        lines.append(f"  {match['line_number']:>4}: {match['line']}")

    return "\n".join(lines)


def format_policy(result: dict[str, Any]) -> str:
    """Format resolve_case_policy result.

    Example output:
        CASE POLICY: insensitive
        SOURCE:      IGNORE_CASE environment variable
    """
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    if result.get("override") is None:
        origin = f"{result['variable']} environment variable"
    else:
        origin = "explicit override"

    return "\n".join([
        f"CASE POLICY: {result['policy']}",
        f"SOURCE:      {origin}",
    ])
