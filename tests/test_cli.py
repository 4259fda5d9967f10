# tests/test_cli.py
import io

import pytest
from rich.console import Console

from daily_challenges import cli
from daily_challenges.core.exceptions import StorageIOError
from daily_challenges.services.challenges import list_all


def _console():
    return Console(file=io.StringIO(), width=120, color_system=None)


def _run(service, *lines):
    console = _console()
    stream = io.StringIO("".join(f"{line}\n" for line in lines))
    cli.ChallengeMenu(service, console, stream).run()
    return console.file.getvalue()


# --- Rendu ---
def test_render_empty_listing():
    console = _console()
    cli.render_listing(console, list_all([]))
    assert "No challenges registered." in console.file.getvalue()


# --- Menu ---
def test_create_list_register_flow(service, store):
    out = _run(
        service,
        "1", "Read daily", "5", "Ten pages",
        "2",
        "4", "1", "y", "first day",
        "7",
    )
    assert "Challenge created (ID: 1): Read daily (5 days)" in out
    assert "Read daily" in out
    assert 'Progress recorded for "Read daily"' in out
    assert "See you!" in out

    saved = store.load()[0]
    assert saved.current_streak == 1
    assert saved.progress_log[0].note == "first day"


def test_default_duration_comes_from_settings(service, store):
    _run(service, "1", "Meditate", "", "", "7")
    assert store.load()[0].duration_days == 30


def test_selection_menus_skipped_when_empty(service):
    out = _run(service, "3", "4", "5", "6", "7")
    assert out.count("No challenges registered.") == 4


def test_unknown_id_prints_error_and_continues(service):
    service.create_challenge("Run", 10)
    out = _run(service, "3", "9", "2", "7")
    assert "Challenge 9 not found" in out
    assert "See you!" in out


def test_update_status_and_analyze(service, store):
    service.create_challenge("Run", 10)
    out = _run(service, "5", "1", "abandoned", "3", "1", "7")
    assert 'Status of "Run" set to: abandoned' in out
    assert "Challenge analysis" in out
    assert store.load()[0].status == "abandoned"


def test_delete_defaults_to_no(service, store):
    service.create_challenge("Run", 10)
    out = _run(service, "6", "1", "", "7")
    assert "Action cancelled." in out
    assert len(store.load()) == 1

    out = _run(service, "6", "1", "y", "7")
    assert 'Challenge "Run" deleted.' in out
    assert store.load() == []


def test_completion_notice_prefixed_separately(service):
    service.create_challenge("Once", 1)
    out = _run(service, "4", "1", "y", "", "7")
    assert '🏆 Challenge "Once" completed: 1 days fulfilled!' in out
    assert '📅 Progress recorded for "Once"' in out


def test_end_of_input_raises_eof(service):
    service.create_challenge("Run", 10)
    with pytest.raises(EOFError):
        _run(service, "6", "1")
    assert len(service.list_challenges().items) == 1


# --- Point d'entrée ---
def test_main_exits_with_code_1_on_storage_error(monkeypatch):
    def _broken_run(self):
        raise StorageIOError("disk unavailable")

    monkeypatch.setattr(cli.ChallengeMenu, "run", _broken_run)
    assert cli.main() == 1


def test_storage_error_ends_menu(clock):
    class _BrokenStore:
        def load(self):
            raise StorageIOError("disk unavailable")

        def save(self, records):
            raise StorageIOError("disk unavailable")

    service = cli.ChallengeService(_BrokenStore(), clock)
    with pytest.raises(StorageIOError):
        _run(service, "2")
