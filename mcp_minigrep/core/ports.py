"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from pathlib import Path

from .domain import Document


class EnvironmentLookup(ABC):
    """Port for checking process-wide configuration signals"""

    @abstractmethod
    def is_set(self, name: str) -> bool:
        """Return True if a variable named `name` has any value. The value is never read."""
        pass


class DocumentSource(ABC):
    """Port for loading a document to search"""

    @abstractmethod
    def read(self, location: str | Path) -> Document:
        """Load the document at `location`"""
        pass
