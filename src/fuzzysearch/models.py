# src/fuzzysearch/models.py
"""
Data models for the fuzzy search engine.

- QueryConfig: the immutable configuration of one query (term, fields, paging).
- SearchHit: one ranked record returned by a query.
- Collection: a named set of records plus the fields to scan (one haystack entry).
- EngineHit: a SearchHit tagged with the collection it came from.

These classes hold no business logic; building, scoring and ranking live in
index.py and search.py.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Hashable, Optional, Tuple

from . import config as CFG


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """
    Everything a single execute() needs, besides the records themselves.

    Attributes
    ----------
    terms : Tuple[str, ...]
        Lowercased search words in phrase order. Empty means "match nothing".
    fields : Tuple[str, ...]
        Ordered, de-duplicated field names scanned on every record.
    relevance : int
        Clamped percentage in [1, 100].
    limit : Optional[int]
        Maximum number of hits after offset, or None for all of them.
    offset : int
        Number of ranked hits to drop from the front.
    skip : FrozenSet[str]
        Lowercased words that are never indexed.
    """
    terms: Tuple[str, ...] = ()
    fields: Tuple[str, ...] = ()
    relevance: int = CFG.DEFAULT_RELEVANCE
    limit: Optional[int] = CFG.DEFAULT_LIMIT
    offset: int = CFG.DEFAULT_OFFSET
    skip: FrozenSet[str] = frozenset()


@dataclass(frozen=True, slots=True)
class SearchHit:
    key: Hashable
    record: Any
    score: int


@dataclass(slots=True)
class Collection:
    """One haystack entry: records keyed by position or explicit id, and the fields to scan."""
    name: str
    records: Dict[Hashable, Any] = field(default_factory=dict)
    fields: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class EngineHit:
    collection: str
    key: Hashable
    record: Any
    score: int

    def as_dict(self) -> dict:
        return {
            "collection": self.collection,
            "key": self.key,
            "score": self.score,
            "record": self.record,
        }
