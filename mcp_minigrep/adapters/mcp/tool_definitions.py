"""
MCP Tool Definitions

Single source of truth for tool schemas and descriptions.
Used by both stdio and HTTP/SSE servers.
"""

# Tool schemas for MCP
TOOL_SCHEMAS = {
    "search_file": {
        "name": "search_file",
        "description": """Return every line of a file that contains the query (plain substring, not regex).

search_file("body", "poem.txt") → matching lines with line numbers
search_file("body", "poem.txt", ignore_case=true) → case-insensitive
Omit ignore_case to follow the server's IGNORE_CASE environment variable.
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Substring to look for (empty matches every line)"
                },
                "file_path": {
                    "type": "string",
                    "description": "Path of the file to search"
                },
                "ignore_case": {
                    "type": "boolean",
                    "description": "Force case-insensitive (true) or case-sensitive (false). Overrides IGNORE_CASE."
                }
            },
            "required": ["query", "file_path"]
        }
    },
    "search_text": {
        "name": "search_text",
        "description": """Return every line of the given text that contains the query.

search_text("duct", "Rust:\\nsafe, fast, productive.\\nDuct tape.") → "safe, fast, productive."
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Substring to look for (empty matches every line)"
                },
                "text": {
                    "type": "string",
                    "description": "Text to search, split on newlines"
                },
                "ignore_case": {
                    "type": "boolean",
                    "description": "Force case-insensitive (true) or case-sensitive (false). Overrides IGNORE_CASE."
                }
            },
            "required": ["query", "text"]
        }
    },
    "resolve_case_policy": {
        "name": "resolve_case_policy",
        "description": """Show which case policy a search would use.

resolve_case_policy() → "sensitive" unless IGNORE_CASE is set on the server
resolve_case_policy(ignore_case=false) → "sensitive" (override wins)
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "ignore_case": {
                    "type": "boolean",
                    "description": "Optional explicit override"
                }
            },
            "required": []
        }
    }
}
