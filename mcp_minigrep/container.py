"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from typing import Optional

from .adapters import OsEnvironment, FileDocumentSource
from .core import (
    IGNORE_CASE_VAR,
    ConfigResolver,
    DocumentSource,
    EnvironmentLookup,
    SearchFileService,
    SearchTextService
)


class Container:
    """Dependency injection container for the application"""

    def __init__(
        self,
        environment: Optional[EnvironmentLookup] = None,
        variable: str = IGNORE_CASE_VAR,
        source: Optional[DocumentSource] = None
    ):
        # Adapters (infrastructure)
        self.environment = environment or OsEnvironment()
        self.source = source or FileDocumentSource()

        self.resolver = ConfigResolver(self.environment, variable)

        # Services (use cases)
        self.search_file = SearchFileService(
            source=self.source,
            resolver=self.resolver
        )

        self.search_text = SearchTextService(
            resolver=self.resolver
        )
