"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
from typing import Optional

from .config import ConfigResolver
from .domain import Document, SearchResult
from .matcher import find_matches
from .ports import DocumentSource

INLINE_SOURCE = "<text>"


class SearchFileService:
    """Use case: Search the lines of a file for a query"""

    def __init__(self, source: DocumentSource, resolver: ConfigResolver):
        self.source = source
        self.resolver = resolver

    def execute(
        self,
        query: str,
        file_path: str,
        ignore_case: Optional[bool] = None
    ) -> SearchResult:
        """
        Search a file.

        Resolves the case policy once (ignore_case overrides IGNORE_CASE),
        then reads the file and selects matching lines.

        Raises whatever the document source raises for unreadable files.
        """
        config = self.resolver.build(query, file_path, ignore_case)
        document = self.source.read(config.file_path)
        result = find_matches(config.query, document, config.policy)

        return SearchResult(
            result=result,
            source=str(config.file_path),
            total_lines=len(document)
        )


class SearchTextService:
    """Use case: Search in-memory text for a query"""

    def __init__(self, resolver: ConfigResolver):
        self.resolver = resolver

    def execute(
        self,
        query: str,
        text: str,
        ignore_case: Optional[bool] = None
    ) -> SearchResult:
        """Search `text`; same policy rules as SearchFileService"""
        policy = self.resolver.resolve(ignore_case)
        document = Document.from_text(text)

        return SearchResult(
            result=find_matches(query, document, policy),
            source=INLINE_SOURCE,
            total_lines=len(document)
        )
