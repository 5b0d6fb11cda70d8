from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple

from . import config as CFG


def clamp_relevance(relevance: int) -> int:
    """Clamp into [MIN_RELEVANCE, MAX_RELEVANCE]."""
    if relevance > CFG.MAX_RELEVANCE:
        return CFG.MAX_RELEVANCE
    if relevance < CFG.MIN_RELEVANCE:
        return CFG.MIN_RELEVANCE
    return relevance


def cost_limit(term: str, relevance: int) -> int:
    """ceil(len(term) * (100 - relevance) / 100), in integer arithmetic."""
    return -(-(len(term) * (100 - relevance)) // 100)


@dataclass(frozen=True, slots=True)
class CostModel:
    """
    Per-term cost limits for one query plus the aggregate bounds derived from them.

    total    : sum of the per-term limits; a word qualifies when its summed score is <= total
    min_len  : shortest word that can still be within budget of some term
    max_len  : longest word that can still be within budget of some term
    """
    terms: Tuple[str, ...]
    limits: Tuple[int, ...]
    total: int
    min_len: int
    max_len: int

    @classmethod
    def for_terms(cls, terms: Sequence[str], relevance: int) -> "CostModel":
        terms = tuple(terms)
        if not terms:
            # min_len > max_len: nothing fits the window
            return cls(terms=(), limits=(), total=0, min_len=1, max_len=0)
        limits = tuple(cost_limit(t, relevance) for t in terms)
        return cls(
            terms=terms,
            limits=limits,
            total=sum(limits),
            min_len=min(len(t) - c for t, c in zip(terms, limits)),
            max_len=max(len(t) + c for t, c in zip(terms, limits)),
        )

    def admits_length(self, n: int) -> bool:
        return self.min_len <= n <= self.max_len
