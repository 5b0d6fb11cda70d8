# src/fuzzysearch/query.py
"""
Fluent query builder.

    hits = (find("jon smith", relevance=80)
            .data(people)
            .fields("first_name", "last_name")
            .limit(10)
            .execute())

Every setter validates immediately and raises InvalidInput on bad input, so a
broken query never reaches execute(). Configuration is kept in a frozen
QueryConfig that each setter replaces; two Query objects never share state.
"""
from __future__ import annotations
import dataclasses
from collections.abc import Iterable
from typing import Any, Dict, Hashable, List, Optional

from . import config as CFG
from .errors import InvalidInput
from .models import QueryConfig, SearchHit
from .normalize import normalize_words, split_terms
from .records import keyed_records
from .relevance import clamp_relevance
from .search import run_query


def _names(values: tuple, what: str) -> List[str]:
    # accept f("a", "b") as well as f(["a", "b"])
    if len(values) == 1 and not isinstance(values[0], str) and isinstance(values[0], Iterable):
        values = tuple(values[0])
    out: List[str] = []
    for v in values:
        if not isinstance(v, str) or not v.strip():
            raise InvalidInput(f"{what} must be non-empty strings, got {v!r}")
        out.append(v)
    return out


def check_term(phrase: Any) -> str:
    if not isinstance(phrase, str):
        raise InvalidInput(f"the search term must be a string, got {type(phrase).__name__}")
    return phrase


def check_fields(*names: Any) -> tuple[str, ...]:
    fields = _names(names, "field names")
    if not fields:
        raise InvalidInput("at least one field name is required")
    return tuple(dict.fromkeys(fields))


def check_relevance(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"relevance must be an integer, got {value!r}")
    return clamp_relevance(value)


def check_count(value: Any, what: str, *, allow_none: bool = False) -> Optional[int]:
    if value is None and allow_none:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidInput(f"{what} must be a non-negative integer, got {value!r}")
    return value


class Query:
    """One configurable, re-executable search over an in-memory collection."""

    def __init__(self, phrase: str = "") -> None:
        self._config = QueryConfig(terms=split_terms(check_term(phrase)))
        self._records: Dict[Hashable, Any] = {}

    @property
    def config(self) -> QueryConfig:
        return self._config

    def _set(self, **changes: Any) -> "Query":
        self._config = dataclasses.replace(self._config, **changes)
        return self

    # ------------- configuration -------------

    def term(self, phrase: str) -> "Query":
        return self._set(terms=split_terms(check_term(phrase)))

    def data(self, records: Any) -> "Query":
        self._records = keyed_records(records)
        return self

    def fields(self, *names: Any) -> "Query":
        return self._set(fields=check_fields(*names))

    def relevance(self, value: int) -> "Query":
        return self._set(relevance=check_relevance(value))

    def limit(self, value: Optional[int]) -> "Query":
        return self._set(limit=check_count(value, "limit", allow_none=True))

    def offset(self, value: int) -> "Query":
        return self._set(offset=check_count(value, "offset"))

    def skip(self, *words: Any) -> "Query":
        """Words that are never matched (stop words). Replaces any previous list."""
        return self._set(skip=normalize_words(_names(words, "skip words")))

    # ------------- execution -------------

    def execute_hits(self) -> List[SearchHit]:
        return run_query(self._records, self._config)

    def execute(self) -> Dict[Hashable, Any]:
        """Ranked {key: record}; empty when nothing matches."""
        return {hit.key: hit.record for hit in self.execute_hits()}


def find(phrase: str, relevance: Optional[int] = None) -> Query:
    """Shortcut: Query(phrase) with an optional relevance."""
    q = Query(phrase)
    return q.relevance(relevance if relevance is not None else CFG.DEFAULT_RELEVANCE)
