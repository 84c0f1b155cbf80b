"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- environment.py: Process environment / mapping presence checks
- filesystem.py: File-backed document source
- mcp/: MCP tool schemas and handlers
"""
from .environment import OsEnvironment, MappingEnvironment
from .filesystem import FileDocumentSource

__all__ = [
    "OsEnvironment",
    "MappingEnvironment",
    "FileDocumentSource",
]
