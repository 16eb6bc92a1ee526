# src/e2e/test_incremental_search.py

import pytest

import searchables.fuzzy as F
from searchables.fuzzy import search
from searchables.incremental import IncrementalSearch, is_single_append

CHOICES = [
    "Apple", "Banana", "Grape", "Pineapple", "Papaya", "Apricot",
    "Blackberry", "Blueberry", "Grapefruit", "Pear", "Peach", "Plum",
]


@pytest.fixture
def score_calls(monkeypatch):
    """Count calls into the scorer used by search()."""
    calls = []
    real = F.score

    def counting(candidate, query):
        calls.append(candidate)
        return real(candidate, query)

    monkeypatch.setattr(F, "score", counting)
    return calls


def test_is_single_append():
    assert is_single_append("", "a")
    assert is_single_append("ap", "app")
    assert not is_single_append(None, "a")
    assert not is_single_append("ap", "ap")
    assert not is_single_append("ap", "apple")
    assert not is_single_append("ap", "xpp")
    assert not is_single_append("app", "ap")


def test_query_before_set_candidates_is_empty():
    inc = IncrementalSearch()
    assert inc.query("x") == []
    assert inc.query("") == []
    assert inc.query(None) == []


def test_empty_query_returns_all_and_bypasses_memo():
    inc = IncrementalSearch(CHOICES)
    assert inc.query("") == CHOICES
    assert len(inc) == 0


def test_typing_forward_matches_direct_search():
    inc = IncrementalSearch(CHOICES)
    word = "pineapple"
    for i in range(1, len(word) + 1):
        q = word[:i]
        assert inc.query(q) == search(CHOICES, q), q
    assert inc.stats.full_scans == 1
    assert inc.stats.narrowed == len(word) - 1


def test_each_single_char_extension_matches_direct_search():
    for q1 in ("a", "p", "pe", "bl", "gr", "zz", "Ap"):
        for ch in "aeprlbyz":
            inc = IncrementalSearch(CHOICES)
            inc.query(q1)
            assert inc.query(q1 + ch) == search(CHOICES, q1 + ch), (q1, ch)


def test_narrowing_only_scans_previous_result(score_calls):
    inc = IncrementalSearch(CHOICES)
    first = inc.query("b")
    assert len(score_calls) == len(CHOICES)
    score_calls.clear()
    inc.query("bl")
    assert sorted(score_calls) == sorted(first)


def test_backspace_hits_memo_then_narrows_from_it(score_calls):
    inc = IncrementalSearch(CHOICES)
    inc.query("p")
    inc.query("pe")
    expected_p = search(CHOICES, "p")
    expected_pl = search(CHOICES, "pl")
    score_calls.clear()
    assert inc.query("p") == expected_p    # memo hit
    assert score_calls == []
    assert inc.query("pl") == expected_pl  # narrowed from "p"
    assert sorted(score_calls) == sorted(expected_p)
    assert inc.stats.hits == 1
    assert inc.stats.full_scans == 1


def test_non_append_edit_rescans_full_set():
    inc = IncrementalSearch(CHOICES)
    inc.query("gra")
    assert inc.query("bl") == search(CHOICES, "bl")      # replaced
    assert inc.query("blueb") == search(CHOICES, "blueb")  # pasted
    assert inc.stats.full_scans == 3
    assert inc.stats.narrowed == 0


def test_negative_result_is_memoized(score_calls):
    inc = IncrementalSearch(CHOICES)
    assert inc.query("qqq") == []
    assert len(score_calls) == len(CHOICES)
    assert inc.query("qqq") == []
    assert len(score_calls) == len(CHOICES)
    assert "qqq" in inc


def test_typing_past_a_no_match_scans_nothing(score_calls):
    inc = IncrementalSearch(CHOICES)
    inc.query("q")
    score_calls.clear()
    assert inc.query("qx") == []
    assert score_calls == []


def test_set_candidates_drops_memo_and_rescores():
    inc = IncrementalSearch(["Apple"])
    assert inc.query("ap") == ["Apple"]
    inc.set_candidates(["Grape", "Map"])
    assert "ap" not in inc and len(inc) == 0
    assert inc.query("ap") == ["Map", "Grape"]


def test_set_candidates_does_not_narrow_from_old_session():
    inc = IncrementalSearch(["Apple"])
    inc.query("a")
    inc.set_candidates(["Banana", "Papaya"])
    assert inc.last_query is None
    assert inc.query("ap") == ["Papaya"]
    assert inc.stats.full_scans == 1 and inc.stats.narrowed == 0


def test_candidates_are_copied_on_bind():
    src = ["Apple", "Grape"]
    inc = IncrementalSearch(src)
    src.append("Papaya")
    assert inc.query("ap") == ["Apple", "Grape"]
    assert inc.candidates == ("Apple", "Grape")


def test_returned_lists_do_not_alias_the_memo():
    inc = IncrementalSearch(CHOICES)
    out = inc.query("pe")
    out.clear()
    assert inc.query("pe") == search(CHOICES, "pe")


def test_empty_candidate_set():
    inc = IncrementalSearch([])
    assert inc.query("x") == []
    assert inc.query("xy") == []


def test_lru_bound_evicts_oldest():
    inc = IncrementalSearch(CHOICES, max_entries=2)
    inc.query("a")
    inc.query("b")
    inc.query("a")          # refresh "a"
    inc.query("c")
    assert "b" not in inc
    assert "a" in inc and "c" in inc
    assert len(inc) == 2
    assert inc.stats.evictions == 1


def test_eviction_keeps_results_correct():
    inc = IncrementalSearch(CHOICES, max_entries=1)
    for q in ("p", "pe", "pea", "pe", "p", "pl"):
        assert inc.query(q) == search(CHOICES, q), q


def test_unbounded_cache():
    inc = IncrementalSearch(CHOICES, max_entries=None)
    for i in range(50):
        inc.query(f"q{i}")
    assert len(inc) == 50


def test_invalid_bound():
    with pytest.raises(ValueError):
        IncrementalSearch(max_entries=0)


def test_reset_forgets_session():
    inc = IncrementalSearch(CHOICES)
    inc.query("p")
    inc.reset()
    assert len(inc) == 0 and inc.last_query is None
    assert inc.stats.misses == 0
    assert inc.candidates == tuple(CHOICES)
