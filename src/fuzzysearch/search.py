from __future__ import annotations
import logging
from typing import Any, Dict, Hashable, List, Mapping, Optional, Tuple

from .distance import edit_distance
from .index import WordIndex, build_word_index
from .models import QueryConfig, SearchHit
from .relevance import CostModel

log = logging.getLogger(__name__)

ScoreTable = Dict[Hashable, int]


def word_score(word: str, model: CostModel) -> int:
    """Summed distance of one candidate word to every term, each bounded by its own limit + 1."""
    return sum(
        edit_distance(word, term, limit + 1)
        for term, limit in zip(model.terms, model.limits)
    )


def score_words(index: WordIndex, model: CostModel) -> ScoreTable:
    """
    Score every candidate word and keep, per record, the best (lowest) score among
    its qualifying words. A word qualifies when its score is <= model.total.
    """
    scores: ScoreTable = {}
    for word, keys in index.items():
        score = word_score(word, model)
        if score > model.total:
            continue
        for key in keys:
            cur = scores.get(key)
            if cur is None or score < cur:
                scores[key] = score
    return scores


def rank(
    scores: ScoreTable,
    order: Mapping[Hashable, int],
    *,
    offset: int = 0,
    limit: Optional[int] = None,
) -> List[Tuple[Hashable, int]]:
    """
    Ascending score; equal scores keep the original record order given by `order`
    (key -> position in the input). Then slice [offset, offset + limit).
    """
    ranked = sorted(scores.items(), key=lambda kv: (kv[1], order[kv[0]]))
    end = None if limit is None else offset + limit
    return ranked[offset:end]


def run_query(records: Mapping[Hashable, Any], cfg: QueryConfig) -> List[SearchHit]:
    """Tokenize -> score -> rank over in-memory records. Never raises for empty input."""
    if not records or not cfg.terms or not cfg.fields:
        return []

    model = CostModel.for_terms(cfg.terms, cfg.relevance)
    index = build_word_index(records, cfg.fields, model, skip=cfg.skip)
    scores = score_words(index, model)

    # positions captured up front so the tie-break never depends on scoring order
    order = {key: pos for pos, key in enumerate(records)}
    page = rank(scores, order, offset=cfg.offset, limit=cfg.limit)

    log.info(
        "query %r relevance=%d: %d records, %d words, %d matches, %d returned",
        " ".join(cfg.terms), cfg.relevance, len(records), len(index), len(scores), len(page),
    )
    return [SearchHit(key=key, record=records[key], score=score) for key, score in page]
