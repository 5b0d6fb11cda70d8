from fuzzysearch.distance import edit_distance
from fuzzysearch.models import QueryConfig
from fuzzysearch.relevance import CostModel
from fuzzysearch.search import rank, run_query, score_words, word_score


def test_scores_keep_only_words_within_budget():
    model = CostModel.for_terms(("john",), 80)    # limit 1
    idx = {"john": [0], "jon": [1], "alice": [2]}
    assert score_words(idx, model) == {0: 0, 1: 1}


def test_best_score_wins_per_record():
    model = CostModel.for_terms(("john",), 80)
    idx = {"jon": [0, 1], "john": [0]}
    assert score_words(idx, model) == {0: 0, 1: 1}


def test_widened_limit_rejects_words_past_the_limit():
    model = CostModel.for_terms(("john",), 80)
    # with the bare limit the sentinel would look like a qualifying score
    assert edit_distance("jxhx", "john", 1) == 1
    assert word_score("jxhx", model) == 2
    assert score_words({"jxhx": [0]}, model) == {}


def test_multi_term_score_is_sum_over_terms():
    model = CostModel.for_terms(("john", "smith"), 80)    # limits (1, 1), total 2
    assert word_score("john", model) == 0 + 2
    assert word_score("smith", model) == 2 + 0
    assert score_words({"john": [0], "smith": [1]}, model) == {0: 2, 1: 2}


def test_rank_is_stable_on_original_order():
    scores = {"c": 2, "a": 2, "b": 0, "d": 1}
    order = {"a": 0, "b": 1, "c": 2, "d": 3}
    assert rank(scores, order) == [("b", 0), ("d", 1), ("a", 2), ("c", 2)]


def test_rank_pagination():
    scores = {"a": 2, "b": 0, "c": 2, "d": 1}
    order = {"a": 0, "b": 1, "c": 2, "d": 3}
    assert rank(scores, order, offset=1, limit=2) == [("d", 1), ("a", 2)]
    assert rank(scores, order, offset=10) == []
    assert rank(scores, order, limit=0) == []


def test_run_query_degrades_to_empty():
    cfg = QueryConfig(terms=("john",), fields=("name",), relevance=80)
    assert run_query({}, cfg) == []
    assert run_query({0: {"name": "John"}}, QueryConfig(terms=(), fields=("name",))) == []
    assert run_query({0: {"other": "John"}}, cfg) == []
