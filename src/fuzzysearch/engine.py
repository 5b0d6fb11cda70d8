# fuzzysearch/engine.py
from __future__ import annotations

import os
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from . import config as CFG
from .errors import InvalidInput
from .loader import iter_data_files, load_records
from .models import Collection, EngineHit, QueryConfig
from .normalize import normalize_words, split_terms
from .query import check_count, check_fields, check_relevance, check_term
from .records import keyed_records
from .search import run_query

log = logging.getLogger(__name__)

PreFind = Callable[[str], Optional[List[EngineHit]]]
PostFind = Callable[[str, List[EngineHit]], List[EngineHit]]


class Engine:
    """
    A haystack of named collections searched together.

    Each collection carries its own records and field set. find() runs the same
    fuzzy query over every selected collection, merges the hits by score (ties
    keep collection order, then record order) and paginates the merged list.

    Hooks:
      * pre_find(phrase)        -> list of hits to return instead of searching, or None
      * post_find(phrase, hits) -> the list find() actually returns

    Public API (used by CLI/Flask):
      * add_collection(name, records, fields)
      * load(paths, fields):  one collection per record file, named after the file stem
      * find(phrase, ...):    ranked EngineHit list
      * shutdown():           drop every collection
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        *,
        skip: Iterable[str] = (),
        pre_find: Optional[PreFind] = None,
        post_find: Optional[PostFind] = None,
        verbose: bool = False,
    ) -> None:
        if verbose or os.environ.get(CFG.VERBOSE_ENV) == "1":
            logging.basicConfig(level=logging.INFO)
        self._collections: Dict[str, Collection] = {}
        self._skip = normalize_words(skip)
        self._pre_find = pre_find
        self._post_find = post_find

    # /* ~~~ Register (or replace) one collection ~~~ */
    def add_collection(self, name: str, records: Any, fields: Sequence[str]) -> Collection:
        if not isinstance(name, str) or not name:
            raise InvalidInput(f"collection name must be a non-empty string, got {name!r}")
        coll = Collection(name=name, records=keyed_records(records), fields=check_fields(fields))
        self._collections[name] = coll
        log.info("collection %r: %d records, fields=%s", name, len(coll.records), list(coll.fields))
        return coll

    # /* ~~~ Load record files from files/folders ~~~ */
    def load(self, paths: Iterable[str], fields: Sequence[str]) -> List[str]:
        paths = list(paths)
        if not paths:
            raise InvalidInput("load(): at least one file or folder is required")
        # read everything first: a bad or clashing file leaves the haystack untouched
        loaded: Dict[str, tuple[str, Any]] = {}
        for path in iter_data_files(paths):
            name = Path(path).stem
            if name in loaded:
                raise InvalidInput(
                    f"collection name {name!r} used by both {loaded[name][0]} and {path}"
                )
            loaded[name] = (path, load_records(path))
        for name, (_, records) in loaded.items():
            self.add_collection(name, records, fields)
        names = list(loaded)
        log.info("Engine load() complete: collections=%d records=%d", len(self._collections), self.count())
        return names

    def remove_collection(self, name: str) -> None:
        if self._collections.pop(name, None) is None:
            raise InvalidInput(f"unknown collection: {name!r}")

    def collections(self) -> List[str]:
        return list(self._collections)

    def count(self) -> int:
        return sum(len(c.records) for c in self._collections.values())

    # ------------- query -------------

    def find(
        self,
        phrase: str,
        *,
        relevance: Optional[int] = None,
        limit: Optional[int] = None,
        offset: int = 0,
        collections: Optional[Sequence[str]] = None,
    ) -> List[EngineHit]:
        phrase = check_term(phrase)
        rel = check_relevance(relevance if relevance is not None else CFG.DEFAULT_RELEVANCE)
        limit = check_count(limit, "limit", allow_none=True)
        offset = check_count(offset, "offset")
        selected = self._select(collections)

        if self._pre_find is not None:
            cached = self._pre_find(phrase)
            if cached is not None:
                log.info("pre_find hook answered %r", phrase)
                return cached

        terms = split_terms(phrase)
        merged: List[EngineHit] = []
        for coll in selected:
            # each collection unpaginated; paging happens on the merged list
            cfg = QueryConfig(terms=terms, fields=coll.fields, relevance=rel, skip=self._skip)
            for hit in run_query(coll.records, cfg):
                merged.append(EngineHit(coll.name, hit.key, hit.record, hit.score))

        merged.sort(key=lambda h: h.score)  # stable: collection order, then rank order
        end = None if limit is None else offset + limit
        hits = merged[offset:end]

        if self._post_find is not None:
            hits = self._post_find(phrase, hits)
        return hits

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._collections.clear()
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _select(self, names: Optional[Sequence[str]]) -> List[Collection]:
        if names is None:
            return list(self._collections.values())
        if isinstance(names, str):
            names = [names]
        missing = [n for n in names if n not in self._collections]
        if missing:
            raise InvalidInput(f"unknown collection(s): {', '.join(map(repr, missing))}")
        return [self._collections[n] for n in dict.fromkeys(names)]
