import pytest
from fuzzysearch.relevance import CostModel, clamp_relevance, cost_limit


@pytest.mark.parametrize("raw,clamped", [(150, 100), (100, 100), (80, 80), (1, 1), (0, 1), (-5, 1)])
def test_clamp(raw, clamped):
    assert clamp_relevance(raw) == clamped


@pytest.mark.parametrize("term,relevance,expected", [
    ("john", 80, 1),          # ceil(0.8)
    ("john", 75, 1),          # ceil(1.0)
    ("smith", 75, 2),         # ceil(1.25)
    ("abc", 100, 0),
    ("abcdefghij", 1, 10),    # ceil(9.9)
    ("", 50, 0),
])
def test_cost_limit_is_integer_ceiling(term, relevance, expected):
    assert cost_limit(term, relevance) == expected


def test_cost_limit_never_grows_with_relevance():
    limits = [cost_limit("international", r) for r in range(1, 101)]
    assert all(a >= b for a, b in zip(limits, limits[1:]))
    assert all(isinstance(c, int) and c >= 0 for c in limits)


def test_model_aggregates_terms():
    m = CostModel.for_terms(("john", "smith"), 75)
    assert m.limits == (1, 2)
    assert m.total == 3
    assert m.min_len == 3     # min(4-1, 5-2)
    assert m.max_len == 7     # max(4+1, 5+2)
    assert m.admits_length(3) and m.admits_length(7)
    assert not m.admits_length(2) and not m.admits_length(8)


def test_empty_model_admits_nothing():
    m = CostModel.for_terms((), 75)
    assert m.total == 0
    assert not any(m.admits_length(n) for n in range(0, 20))
