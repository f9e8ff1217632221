# tests/test_search.py

import pytest

from core.errors import RosterConsistencyError
from core.fuzzy import fuzzy_score
from core.search import build_view
from models.student import Student

# --- fuzzy scoring ---


def test_fuzzy_score_requires_subsequence():
    assert fuzzy_score("Paul Atreides", "zz") is None
    assert fuzzy_score("Paul", "paulo") is None
    assert fuzzy_score("Paul Atreides", "pat") is not None


def test_fuzzy_score_is_case_insensitive():
    assert fuzzy_score("ALIA", "al") == fuzzy_score("alia", "AL")


def test_fuzzy_score_empty_pattern():
    assert fuzzy_score("Paul", "") == 0


def test_fuzzy_score_prefers_contiguous_matches():
    assert fuzzy_score("Alia Atreides", "al") > fuzzy_score("Paul Atreides", "al")


def test_fuzzy_score_prefers_word_boundaries():
    assert fuzzy_score("Chani Kynes", "k") > fuzzy_score("Zakary", "k")


def test_fuzzy_score_multibyte():
    assert fuzzy_score("Zoë Ñúñez", "ëñ") is not None
    assert fuzzy_score("Zoë", "zoe") is None


# --- view building ---


def test_empty_query_returns_order_verbatim(sample_roster):
    order = ["b@mmm.edu", "a@mmm.edu", "c@mmm.edu"]
    view = build_view(sample_roster, order, "")

    assert view == order
    assert view is not order


def test_query_without_matches_is_empty(sample_roster):
    assert build_view(sample_roster, list(sample_roster.students), "zz") == []


def test_query_ranks_best_match_first(sample_roster):
    view = build_view(sample_roster, list(sample_roster.students), "chani")
    assert view == ["c@mmm.edu"]

    view = build_view(sample_roster, list(sample_roster.students), "a")
    assert view[0] == "a@mmm.edu"
    assert set(view) <= set(list(sample_roster.students))


def test_ties_keep_roster_order(make_roster):
    roster = make_roster(Student("x", "Alex Kim"), Student("y", "Alex Kim"))
    assert build_view(roster, ["y", "x"], "alex") == ["x", "y"]

    roster = make_roster(Student("y", "Alex Kim"), Student("x", "Alex Kim"))
    assert build_view(roster, ["x", "y"], "alex") == ["y", "x"]


def test_build_view_is_idempotent(sample_roster):
    order = list(sample_roster.students)

    assert build_view(sample_roster, order, "e") == build_view(sample_roster, order, "e")


def test_stale_order_key_is_fatal(sample_roster):
    with pytest.raises(RosterConsistencyError):
        build_view(sample_roster, ["a@mmm.edu", "gone@mmm.edu"], "")
