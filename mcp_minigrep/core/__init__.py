"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- ports.py: Port interfaces (abstractions for external dependencies)
- matcher.py: Line selection under a case policy
- config.py: Case policy resolution
- services.py: Application services (use cases)
"""
from .domain import CasePolicy, Document, SearchMatch, MatchResult, SearchConfig, SearchResult
from .ports import EnvironmentLookup, DocumentSource
from .matcher import search, find_matches, search_case_sensitive, search_case_insensitive
from .config import IGNORE_CASE_VAR, ConfigResolver, resolve_case_policy
from .services import SearchFileService, SearchTextService

__all__ = [
    # Domain models
    "CasePolicy",
    "Document",
    "SearchMatch",
    "MatchResult",
    "SearchConfig",
    "SearchResult",
    # Ports
    "EnvironmentLookup",
    "DocumentSource",
    # Matcher
    "search",
    "find_matches",
    "search_case_sensitive",
    "search_case_insensitive",
    # Config
    "IGNORE_CASE_VAR",
    "ConfigResolver",
    "resolve_case_policy",
    # Services
    "SearchFileService",
    "SearchTextService",
]
