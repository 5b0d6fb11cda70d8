from dataclasses import dataclass

import pytest

from fuzzysearch import find

PEOPLE = [{"name": "John Smith"}, {"name": "Jon Smyth"}, {"name": "Alice"}]

NAMES = [
    {"name": n} for n in (
        "Jonathan Smith", "John", "Joan Smyth", "Johnny Cash", "Jane Doe",
        "Jon Snow", "Joanna", "Smithers", "Jo Hnson", "Johan Smit",
    )
]


def test_john_and_jon_found_alice_excluded():
    result = find("John", relevance=80).data(PEOPLE).fields("name").execute()
    assert list(result) == [0, 1]
    assert result[0] == {"name": "John Smith"}
    assert result[1] == {"name": "Jon Smyth"}


def test_exact_match_ranks_first_with_score_zero():
    hits = find("John", relevance=80).data(PEOPLE).fields("name").execute_hits()
    assert [(h.key, h.score) for h in hits] == [(0, 0), (1, 1)]
    assert hits[0].record is PEOPLE[0]


def test_empty_data_is_an_empty_result():
    for rel in (1, 50, 100):
        assert find("john", relevance=rel).data([]).fields("name").execute() == {}


def test_strict_relevance_without_exact_word_is_empty():
    data = [{"name": "abc def"}, {"name": "xyzz"}, {"name": "xzy"}]
    assert find("xyz", relevance=100).data(data).fields("name").execute() == {}
    data.append({"name": "the xyz"})
    assert list(find("xyz", relevance=100).data(data).fields("name").execute()) == [3]


def test_blank_phrase_matches_nothing():
    assert find("   ").data(PEOPLE).fields("name").execute() == {}


def test_raising_relevance_never_adds_results():
    counts = [
        len(find("john smith", relevance=r).data(NAMES).fields("name").execute())
        for r in range(1, 101, 3)
    ]
    assert all(a >= b for a, b in zip(counts, counts[1:]))
    assert counts[0] > counts[-1]


@pytest.mark.parametrize("offset,limit", [(0, 1), (0, 3), (1, 2), (2, 100), (4, 0)])
def test_pagination_is_a_slice_of_the_full_ranking(offset, limit):
    base = find("john", relevance=50).data(NAMES).fields("name")
    full = list(base.limit(None).offset(0).execute())
    page = list(base.limit(limit).offset(offset).execute())
    assert page == full[offset:offset + limit]


def test_offset_past_the_end_is_empty():
    q = find("john", relevance=50).data(NAMES).fields("name")
    total = len(q.execute())
    assert q.offset(total + 5).execute() == {}


def test_equal_scores_keep_input_order():
    data = [{"n": "cat"}, {"n": "bat"}, {"n": "cat"}, {"n": "hat"}]
    hits = find("cat", relevance=67).data(data).fields("n").execute_hits()   # limit 1
    assert [(h.key, h.score) for h in hits] == [(0, 0), (2, 0), (1, 1), (3, 1)]


def test_explicit_keys_from_a_mapping():
    data = {"u7": {"name": "Jon"}, "u3": {"name": "John"}, "u9": {"name": "Mary"}}
    assert list(find("john", relevance=80).data(data).fields("name").execute()) == ["u3", "u7"]


def test_several_fields_and_missing_fields():
    data = [{"first": "Jon"}, {"last": "Johnson"}, {}, {"first": "Mary", "last": "John"}]
    result = find("john", relevance=80).data(data).fields("first", "last").execute()
    assert list(result) == [3, 0]


def test_attribute_records():
    @dataclass
    class Person:
        name: str

    data = [Person("Alice"), Person("Jon")]
    result = find("john", relevance=80).data(data).fields("name").execute()
    assert list(result.values()) == [data[1]]


def test_skip_words_are_never_matched():
    data = [{"t": "the cat"}, {"t": "a dog"}]
    q = find("the", relevance=100).data(data).fields("t")
    assert list(q.execute()) == [0]
    assert q.skip("The").execute() == {}


def test_query_can_be_reconfigured_and_rerun():
    data = [{"n": "cat"}, {"n": "hat"}]
    q = find("cat", relevance=100).data(data).fields("n")
    assert list(q.execute()) == [0]
    assert list(q.execute()) == [0]
    assert list(q.term("hat").execute()) == [1]


def test_case_and_non_text_values():
    data = [{"code": 12345, "name": "JOHN"}]
    assert list(find("12345", relevance=100).data(data).fields("code").execute()) == [0]
    assert list(find("john", relevance=100).data(data).fields("name").execute()) == [0]
