from __future__ import annotations
import logging
from collections import defaultdict
from typing import AbstractSet, Any, Dict, Hashable, List, Mapping, Sequence

from .normalize import tokenize
from .records import get_field
from .relevance import CostModel

log = logging.getLogger(__name__)

WordIndex = Dict[str, List[Hashable]]


def record_words(record: Any, fields: Sequence[str]) -> List[str]:
    """
    Distinct lowercase words of one record across the given fields, in first-seen order.
    Fields the record does not have are skipped.
    """
    seen: dict[str, None] = {}
    for name in fields:
        text = get_field(record, name)
        if not text:
            continue
        for tok in tokenize(text):
            seen.setdefault(tok, None)
    return list(seen)


def build_word_index(
    records: Mapping[Hashable, Any],
    fields: Sequence[str],
    model: CostModel,
    *,
    skip: AbstractSet[str] = frozenset(),
) -> WordIndex:
    """
    /* ~~~ word -> [record keys] for every word that survives the length window.
       - one entry per record per word, however often the word repeats
       - skip words never enter the index
       - keys are appended in record order, so postings stay in input order ~~~ */
    """
    buckets: WordIndex = defaultdict(list)
    if not fields or model.min_len > model.max_len:
        return {}

    dropped = 0
    for key, rec in records.items():
        for word in record_words(rec, fields):
            if word in skip or not model.admits_length(len(word)):
                dropped += 1
                continue
            buckets[word].append(key)

    log.debug("word index: %d candidate words, %d tokens outside window or skipped", len(buckets), dropped)
    return dict(buckets)
