from __future__ import annotations

from movie_lookup.integrations.tmdb.credits import extract_cast, extract_director, extract_writers
from tests.fakes import load_fixture


def test_extract_writers_dedups_and_preserves_first_seen_order() -> None:
    crew = [
        {"name": "Writer One", "job": "Screenplay"},
        {"name": "Writer One", "job": "Story"},
        {"name": "Writer Two", "job": "Writer"},
    ]
    assert extract_writers(crew) == ["Writer One", "Writer Two"]


def test_extract_writers_caps_at_three_in_input_order() -> None:
    crew = [
        {"name": "A", "job": "Writer"},
        {"name": "B", "job": "Screenplay"},
        {"name": "C", "job": "Story"},
        {"name": "D", "job": "Writer"},
    ]
    assert extract_writers(crew) == ["A", "B", "C"]


def test_extract_writers_ignores_other_jobs() -> None:
    crew = [
        {"name": "Director Person", "job": "Director"},
        {"name": "Composer", "job": "Original Music Composer"},
        {"name": "Novelist", "job": "Novel"},
        {"name": "Writer", "job": "Writer"},
    ]
    assert extract_writers(crew) == ["Writer"]


def test_extract_writers_dedup_happens_before_truncation() -> None:
    crew = [
        {"name": "A", "job": "Writer"},
        {"name": "A", "job": "Screenplay"},
        {"name": "A", "job": "Story"},
        {"name": "B", "job": "Writer"},
        {"name": "C", "job": "Story"},
    ]
    assert extract_writers(crew) == ["A", "B", "C"]


def test_extract_cast_returns_lowest_five_billing_orders_ascending() -> None:
    cast = [
        {"name": "Five", "order": 5},
        {"name": "Two", "order": 2},
        {"name": "Zero", "order": 0},
        {"name": "Four", "order": 4},
        {"name": "One", "order": 1},
        {"name": "Three", "order": 3},
    ]
    assert extract_cast(cast) == ["Zero", "One", "Two", "Three", "Four"]


def test_extract_cast_sort_is_stable_for_equal_billing_order() -> None:
    cast = [
        {"name": "Late", "order": 1},
        {"name": "First Tie", "order": 0},
        {"name": "Second Tie", "order": 0},
    ]
    assert extract_cast(cast) == ["First Tie", "Second Tie", "Late"]


def test_extract_cast_does_not_mutate_input() -> None:
    cast = [{"name": "B", "order": 1}, {"name": "A", "order": 0}]
    extract_cast(cast)
    assert [c["name"] for c in cast] == ["B", "A"]


def test_extract_cast_places_missing_order_last() -> None:
    cast = [{"name": "Unbilled"}, {"name": "Lead", "order": 0}]
    assert extract_cast(cast) == ["Lead", "Unbilled"]


def test_extract_cast_nameless_top_billed_entry_leaves_slot_empty() -> None:
    cast = [
        {"name": "Zero", "order": 0},
        {"name": "  ", "order": 1},
        {"order": 2},
        {"name": "Three", "order": 3},
        {"name": " Four ", "order": 4},
        {"name": "Five", "order": 5},
    ]
    assert extract_cast(cast) == ["Zero", "Three", "Four"]


def test_extract_director_returns_first_director() -> None:
    crew = [
        {"name": "Producer", "job": "Producer"},
        {"name": "First Director", "job": "Director"},
        {"name": "Second Director", "job": "Director"},
    ]
    assert extract_director(crew) == "First Director"


def test_extract_director_returns_none_when_missing() -> None:
    assert extract_director([{"name": "Writer", "job": "Writer"}]) is None


def test_empty_inputs_yield_empty_results() -> None:
    assert extract_director([]) is None
    assert extract_writers([]) == []
    assert extract_cast([]) == []
    assert extract_director(None) is None
    assert extract_writers(None) == []
    assert extract_cast(None) == []


def test_normalizer_on_credits_fixture() -> None:
    credits = load_fixture("tmdb/movie_credits_sample.json")

    assert extract_director(credits["crew"]) == "Christopher Nolan"
    assert extract_writers(credits["crew"]) == ["Christopher Nolan"]
    assert extract_cast(credits["cast"]) == [
        "Leonardo DiCaprio",
        "Joseph Gordon-Levitt",
        "Elliot Page",
        "Tom Hardy",
        "Ken Watanabe",
    ]
