"""Tests for daily progress registration (streaks, stats, completion)."""

import datetime as dt

import pytest

from daily_challenges.core.exceptions import InvalidInputError, NotFoundError
from daily_challenges.services.challenges import create_challenge, register_progress

DAY1 = dt.date(2026, 10, 19)


def _day(n: int) -> dt.date:
    return DAY1 + dt.timedelta(days=n - 1)


@pytest.fixture
def records():
    _, records = create_challenge([], "Read daily", 30, day=DAY1)
    return records


class TestStreaks:
    """Test current and best streak updates."""

    def test_consecutive_fulfilled_days_build_streak(self, records):
        """Each consecutive fulfilled day extends the streak by one."""
        for k in range(1, 6):
            records, result = register_progress(records, 1, True, day=_day(k))
            assert result.record.current_streak == k
            assert result.record.best_streak == k
            assert result.authoritative

    def test_failed_day_resets_streak_and_keeps_best(self, records):
        for k in range(1, 4):
            records, _ = register_progress(records, 1, True, day=_day(k))
        records, result = register_progress(records, 1, False, "tired", day=_day(4))

        assert result.record.current_streak == 0
        assert result.record.best_streak == 3
        assert result.entry.note == "tired"

    def test_gap_restarts_streak_at_one(self, records):
        """A fulfilled day after a missing day starts a new streak."""
        records, _ = register_progress(records, 1, True, day=_day(1))
        records, _ = register_progress(records, 1, True, day=_day(2))
        records, result = register_progress(records, 1, True, day=_day(5))

        assert result.record.current_streak == 1
        assert result.record.best_streak == 2

    def test_best_streak_never_decreases(self, records):
        pattern = [True, True, False, True, True, True, False, True]
        best = 0
        for k, fulfilled in enumerate(pattern, start=1):
            records, result = register_progress(records, 1, fulfilled, day=_day(k))
            assert result.record.best_streak >= best
            assert result.record.best_streak >= result.record.current_streak
            best = result.record.best_streak
        assert best == 3


class TestSameDay:
    """Test repeated registrations on one calendar date."""

    def test_second_registration_only_grows_log(self, records):
        records, first = register_progress(records, 1, True, day=_day(1))
        records, second = register_progress(records, 1, False, "again", day=_day(1))

        assert not second.authoritative
        assert second.record.current_streak == first.record.current_streak
        assert second.record.best_streak == first.record.best_streak
        assert second.record.stats == first.record.stats
        assert len(second.record.progress_log) == 2
        assert second.entry.day_index == 2
        assert second.record.supplementary_count == 1
        assert "already exists" in second.notices[0]

    def test_stats_match_authoritative_entries(self, records):
        for k, fulfilled in enumerate([True, False, True], start=1):
            records, _ = register_progress(records, 1, fulfilled, day=_day(k))
        records, result = register_progress(records, 1, True, day=_day(3))

        stats = result.record.stats
        assert stats.days_fulfilled == 2
        assert stats.days_failed == 1
        assert stats.days_fulfilled + stats.days_failed == len(result.record.authoritative_entries())
        assert stats.success_percentage == 66.7


class TestCompletion:
    """Test automatic completion once the duration is reached."""

    def test_completion_after_last_required_day(self):
        _, records = create_challenge([], "Stretch", 3, day=DAY1)
        records, r1 = register_progress(records, 1, True, day=_day(1))
        records, r2 = register_progress(records, 1, True, day=_day(2))
        assert r1.record.status == "active"
        assert r2.record.status == "active"

        records, r3 = register_progress(records, 1, True, day=_day(3))
        assert r3.record.status == "completed"
        assert r3.completed_now
        assert any("completed" in n for n in r3.notices)

    def test_abandoned_challenge_is_not_auto_completed(self):
        _, records = create_challenge([], "Once", 1, day=DAY1)
        records[0] = records[0].model_copy(update={"status": "abandoned"})
        records, result = register_progress(records, 1, True, day=_day(1))

        assert result.record.status == "abandoned"
        assert not result.completed_now


# --- Erreurs / immutabilité ---
def test_unknown_id_leaves_records_untouched(records):
    snapshot = [r.model_copy(deep=True) for r in records]
    with pytest.raises(NotFoundError) as exc:
        register_progress(records, 42, True, day=_day(1))
    assert exc.value.challenge_id == 42
    assert records == snapshot


def test_input_records_are_not_mutated(records):
    new_records, _ = register_progress(records, 1, True, day=_day(1))
    assert records[0].progress_log == []
    assert records[0].current_streak == 0
    assert new_records[0].current_streak == 1


def test_non_boolean_fulfilled_is_rejected(records):
    with pytest.raises(InvalidInputError) as exc:
        register_progress(records, 1, "yes", day=_day(1))
    assert exc.value.field == "fulfilled"
