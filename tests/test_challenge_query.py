# tests/test_challenge_query.py
import datetime as dt

import pytest

from daily_challenges.core.exceptions import InvalidInputError, NotFoundError
from daily_challenges.services.challenges import (
    analyze,
    create_challenge,
    filter_by_status,
    list_all,
    register_progress,
    set_challenge_status,
)

DAY1 = dt.date(2026, 10, 19)


def _records():
    records = []
    for name, duration in [("Read", 5), ("Run", 10), ("Write", 3)]:
        _, records = create_challenge(records, name, duration, day=DAY1)
    _, records = set_challenge_status(records, 2, "abandoned")
    return records


# --- Listing ---
def test_list_empty_signal():
    listing = list_all([])
    assert listing.is_empty
    assert listing.items == []
    assert listing.message == "No challenges registered."


def test_list_summaries_in_creation_order():
    listing = list_all(_records())
    assert not listing.is_empty
    assert [(s.id, s.name, s.status, s.duration_days) for s in listing.items] == [
        (1, "Read", "active", 5),
        (2, "Run", "abandoned", 10),
        (3, "Write", "active", 3),
    ]


# --- Filtre ---
def test_filter_by_status():
    records = _records()
    assert [r.id for r in filter_by_status(records, "active")] == [1, 3]
    assert [r.id for r in filter_by_status(records, "abandoned")] == [2]
    assert filter_by_status(records, "completed") == []
    assert len(filter_by_status(records, "all")) == 3


def test_filter_rejects_unknown_status():
    with pytest.raises(InvalidInputError):
        filter_by_status(_records(), "paused")


# --- Analyse ---
def test_analyze_reports_progress():
    records = _records()
    records, _ = register_progress(records, 1, True, day=DAY1)
    records, _ = register_progress(records, 1, False, day=DAY1 + dt.timedelta(days=1))
    records, _ = register_progress(records, 1, True, "extra", day=DAY1 + dt.timedelta(days=1))

    detail = analyze(records, 1, day=DAY1 + dt.timedelta(days=1))
    assert detail.name == "Read"
    assert detail.current_streak == 0
    assert detail.best_streak == 1
    assert detail.stats.days_fulfilled == 1
    assert detail.stats.days_failed == 1
    assert detail.stats.success_percentage == 50.0
    assert detail.goal_progress_percentage == 20.0
    assert detail.days_elapsed == 2
    assert detail.days_remaining == 3
    assert detail.supplementary_entries == 1
    assert len(detail.progress_log) == 3


def test_analyze_clamps_period_outside_window():
    records = _records()
    before = analyze(records, 3, day=DAY1 - dt.timedelta(days=4))
    assert before.days_elapsed == 0
    assert before.days_remaining == 3

    after = analyze(records, 3, day=DAY1 + dt.timedelta(days=30))
    assert after.days_elapsed == 3
    assert after.days_remaining == 0


def test_analyze_unknown_id():
    with pytest.raises(NotFoundError):
        analyze(_records(), 99, day=DAY1)
