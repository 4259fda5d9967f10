# tests/test_challenge_lifecycle.py
import datetime as dt

import pytest

from daily_challenges.core.exceptions import InvalidInputError, NotFoundError
from daily_challenges.services.challenges import (
    ChallengeValidator,
    StatsCalculator,
    create_challenge,
    delete_challenge,
    set_challenge_status,
)

DAY1 = dt.date(2026, 10, 19)


def _records(*names):
    records = []
    for name in names:
        _, records = create_challenge(records, name, 10, day=DAY1)
    return records


# --- Création ---
def test_create_assigns_period_and_defaults():
    record, records = create_challenge([], "  Read daily  ", 5, None, day=DAY1)
    assert record.id == 1
    assert record.name == "Read daily"
    assert record.description == ""
    assert record.status == "active"
    assert record.start_date == DAY1
    assert record.end_date == dt.date(2026, 10, 23)
    assert record.current_streak == 0 and record.best_streak == 0
    assert record.stats.success_percentage == 0.0
    assert records == [record]


def test_single_day_challenge_ends_on_start_date():
    record, _ = create_challenge([], "Once", 1, day=DAY1)
    assert record.end_date == record.start_date


def test_ids_follow_max_plus_one():
    records = _records("a", "b", "c")
    assert [r.id for r in records] == [1, 2, 3]

    _, records = delete_challenge(records, 3)
    record, records = create_challenge(records, "d", 3, day=DAY1)
    assert record.id == 3

    _, records = delete_challenge(records, 1)
    record, _ = create_challenge(records, "e", 3, day=DAY1)
    assert record.id == 4


@pytest.mark.parametrize(
    "name, duration, field",
    [
        ("", 5, "name"),
        ("   ", 5, "name"),
        ("ok", 0, "durationDays"),
        ("ok", -3, "durationDays"),
        ("ok", True, "durationDays"),
        ("x" * 201, 5, "name"),
        ("ok", 3_000_000, "durationDays"),
        ("ok", 36_501, "durationDays"),
    ],
)
def test_create_rejects_invalid_input(name, duration, field):
    records = _records("kept")
    with pytest.raises(InvalidInputError) as exc:
        create_challenge(records, name, duration, day=DAY1)
    assert exc.value.field == field
    assert len(records) == 1


# --- Suppression ---
def test_delete_keeps_order_of_remaining():
    records = _records("a", "b", "c")
    removed, remaining = delete_challenge(records, 2)
    assert removed.name == "b"
    assert [r.id for r in remaining] == [1, 3]
    assert len(records) == 3


def test_delete_unknown_id():
    with pytest.raises(NotFoundError):
        delete_challenge(_records("a"), 9)
    with pytest.raises(NotFoundError):
        delete_challenge([], 1)


# --- Statut ---
def test_set_status_allows_any_transition():
    records = _records("a")
    record, records = set_challenge_status(records, 1, "completed")
    assert record.status == "completed"
    record, records = set_challenge_status(records, 1, "active")
    assert record.status == "active"
    assert records[0].status == "active"


def test_set_status_rejects_unknown_value():
    records = _records("a")
    with pytest.raises(InvalidInputError) as exc:
        set_challenge_status(records, 1, "paused")
    assert exc.value.field == "status"
    assert records[0].status == "active"


def test_set_status_unknown_id():
    with pytest.raises(NotFoundError):
        set_challenge_status(_records("a"), 2, "abandoned")


# --- Calculs et validations ---
def test_percentages_rounding():
    assert StatsCalculator.success_percentage(0, 0) == 0.0
    assert StatsCalculator.success_percentage(1, 1) == 50.0
    assert StatsCalculator.success_percentage(2, 1) == 66.7
    # égalités exactes arrondies vers le haut
    assert StatsCalculator.success_percentage(1, 15) == 6.3
    assert StatsCalculator.success_percentage(5, 11) == 31.3
    assert StatsCalculator.success_percentage(9, 7) == 56.3
    assert StatsCalculator.goal_progress_percentage(1, 8) == 12.5
    assert StatsCalculator.goal_progress_percentage(1, 16) == 6.25
    assert StatsCalculator.goal_progress_percentage(1, 3) == 33.33
    assert StatsCalculator.goal_progress_percentage(3, 3) == 100.0


def test_next_streak():
    assert StatsCalculator.next_streak(0, None, DAY1) == 1
    assert StatsCalculator.next_streak(4, DAY1, DAY1 + dt.timedelta(days=1)) == 5
    assert StatsCalculator.next_streak(4, DAY1, DAY1 + dt.timedelta(days=2)) == 1


def test_validator_normalizes_optional_text():
    assert ChallengeValidator.validate_description(None) == ""
    assert ChallengeValidator.validate_note(None) == ""
    assert ChallengeValidator.validate_status_filter("all") == "all"
    with pytest.raises(InvalidInputError):
        ChallengeValidator.validate_status_filter("everything")


def test_longest_allowed_duration_is_accepted():
    record, _ = create_challenge([], "Lifetime", 36_500, day=DAY1)
    assert record.end_date == DAY1 + dt.timedelta(days=36_499)


def test_end_date_past_calendar_limit_is_rejected():
    with pytest.raises(InvalidInputError) as exc:
        create_challenge([], "Late", 10, day=dt.date(9999, 12, 25))
    assert exc.value.field == "durationDays"
