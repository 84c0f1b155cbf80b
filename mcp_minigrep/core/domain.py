"""
Domain Models - Pure business entities

No external dependencies. These represent the core search concepts.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class CasePolicy(Enum):
    """How a query is compared against each line"""
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"

    @classmethod
    def from_ignore_case(cls, ignore_case: bool) -> "CasePolicy":
        return cls.INSENSITIVE if ignore_case else cls.SENSITIVE

    @property
    def ignore_case(self) -> bool:
        return self is CasePolicy.INSENSITIVE


@dataclass(frozen=True)
class Document:
    """An ordered, immutable sequence of lines"""
    lines: tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> "Document":
        """
        Split text on line boundaries.

        Lines end at "\\n" with an optional preceding "\\r". A final newline
        does not produce an extra empty line, so "" has zero lines and
        "a\\n\\nb\\n" has three.
        """
        if not text:
            return cls(())
        parts = text.split("\n")
        if parts[-1] == "":
            parts.pop()
        return cls(tuple(p[:-1] if p.endswith("\r") else p for p in parts))

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)


@dataclass(frozen=True)
class SearchMatch:
    """A matching line and its 1-based position in the document"""
    line_number: int
    line: str


@dataclass(frozen=True)
class MatchResult:
    """Matches for one query, in document order"""
    query: str
    policy: CasePolicy
    matches: tuple[SearchMatch, ...] = ()

    @property
    def lines(self) -> list[str]:
        return [m.line for m in self.matches]

    @property
    def total_matches(self) -> int:
        return len(self.matches)


@dataclass(frozen=True)
class SearchConfig:
    """A fully resolved search request"""
    query: str
    file_path: Optional[str]
    policy: CasePolicy = CasePolicy.SENSITIVE

    @property
    def ignore_case(self) -> bool:
        return self.policy.ignore_case


@dataclass(frozen=True)
class SearchResult:
    """Results from searching a document, with where it came from"""
    result: MatchResult
    source: str  # file path, or "<text>" for inline documents
    total_lines: int = field(default=0)
