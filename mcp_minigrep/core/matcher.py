"""
Matcher - line selection by substring containment

Both case policies share one selection loop; the policy only picks the
comparison predicate.
"""
import logging
from typing import Callable, Union

from .domain import CasePolicy, Document, MatchResult, SearchMatch

logger = logging.getLogger(__name__)

Predicate = Callable[[str, str], bool]


def _contains(query: str, line: str) -> bool:
    return query in line


def _contains_ignore_case(query: str, line: str) -> bool:
    # both sides lowercased, never just one
    return query.lower() in line.lower()


_PREDICATES: dict[CasePolicy, Predicate] = {
    CasePolicy.SENSITIVE: _contains,
    CasePolicy.INSENSITIVE: _contains_ignore_case,
}


def _as_document(document: Union[Document, str]) -> Document:
    if isinstance(document, Document):
        return document
    return Document.from_text(document)


def find_matches(
    query: str,
    document: Union[Document, str],
    policy: CasePolicy = CasePolicy.SENSITIVE
) -> MatchResult:
    """
    Select every line of `document` containing `query` under `policy`.

    Every line is tested exactly once, in order. An empty query matches
    every line; an empty document yields no matches.
    """
    doc = _as_document(document)
    predicate = _PREDICATES[policy]

    matches = []
    for line_number, line in enumerate(doc, 1):
        if predicate(query, line):
            matches.append(SearchMatch(line_number=line_number, line=line))

    logger.debug("query=%r policy=%s matched %d/%d lines",
                 query, policy.value, len(matches), len(doc))
    return MatchResult(query=query, policy=policy, matches=tuple(matches))


def search(
    query: str,
    document: Union[Document, str],
    policy: CasePolicy = CasePolicy.SENSITIVE
) -> list[str]:
    """Return the matching lines of `document`, in document order"""
    return find_matches(query, document, policy).lines


def search_case_sensitive(query: str, contents: Union[Document, str]) -> list[str]:
    return search(query, contents, CasePolicy.SENSITIVE)


def search_case_insensitive(query: str, contents: Union[Document, str]) -> list[str]:
    return search(query, contents, CasePolicy.INSENSITIVE)
