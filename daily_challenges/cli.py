# daily_challenges/cli.py
# Menu interactif en console (rich) au-dessus du service de challenges.

from __future__ import annotations

import sys
from typing import IO, Optional

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from daily_challenges.core.exceptions import ChallengeError, StorageIOError
from daily_challenges.core.settings import get_settings
from daily_challenges.domain.models import ChallengeDetail, ChallengeListing
from daily_challenges.services.challenge_store import JsonChallengeStore
from daily_challenges.services.challenges import ChallengeService
from daily_challenges.shared.constants import CHALLENGE_STATUSES

MENU_OPTIONS = {
    "1": "Create challenge",
    "2": "List challenges",
    "3": "Analyze a challenge",
    "4": "Register today's progress",
    "5": "Update status",
    "6": "Delete a challenge",
    "7": "Exit",
}
EXIT_OPTION = "7"

_STATUS_STYLES = {"active": "cyan", "completed": "green", "abandoned": "red"}


class _LineReader:
    """Lecture ligne à ligne d'un flux de saisie, comme `input()`.

    Description:
        Retire le saut de ligne final (une réponse vide vaut donc `""` et active la
        valeur par défaut du prompt) et lève `EOFError` en fin de flux.
    """

    def __init__(self, stream: IO[str]):
        self.stream = stream

    def readline(self) -> str:
        line = self.stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")


def render_listing(console: Console, listing: ChallengeListing) -> None:
    """Afficher la liste des challenges (ou le message de liste vide)."""
    if listing.is_empty:
        console.print(listing.message or "No challenges registered.")
        return

    table = Table(title="📋 Challenges")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("Days", justify="right")
    table.add_column("Success %", justify="right")
    for item in listing.items:
        style = _STATUS_STYLES.get(item.status, "")
        table.add_row(
            str(item.id),
            item.name,
            f"[{style}]{item.status}[/{style}]" if style else item.status,
            str(item.duration_days),
            f"{item.success_percentage:.1f}",
        )
    console.print(table)


def render_detail(console: Console, detail: ChallengeDetail) -> None:
    """Afficher l'analyse complète d'un challenge.

    Args:
        console (Console): Console de sortie.
        detail (ChallengeDetail): Vue d'analyse produite par le service.
    """
    console.print(f"\n📊 Challenge analysis: [bold]{detail.name}[/bold]")
    console.print(f"Description: {detail.description}")
    console.print(f"Status: {detail.status}")
    console.print(f"Period: {detail.start_date.isoformat()} → {detail.end_date.isoformat()}")
    console.print(f"Current streak: {detail.current_streak}")
    console.print(f"Best streak: {detail.best_streak}")
    console.print(f"Days fulfilled: {detail.stats.days_fulfilled}")
    console.print(f"Days failed: {detail.stats.days_failed}")
    console.print(f"Success rate: {detail.stats.success_percentage:.1f}%")
    console.print(
        f"Goal progress: {detail.goal_progress_percentage:.2f}% "
        f"({detail.days_elapsed} days elapsed, {detail.days_remaining} remaining)"
    )
    if detail.supplementary_entries:
        console.print(f"Extra same-day attempts: {detail.supplementary_entries}")

    if detail.progress_log:
        table = Table(title="Progress log")
        table.add_column("#", justify="right")
        table.add_column("Date")
        table.add_column("Done")
        table.add_column("Note")
        for entry in detail.progress_log:
            table.add_row(
                str(entry.day_index),
                entry.date.isoformat(),
                "✅" if entry.fulfilled else "❌",
                entry.note,
            )
        console.print(table)


class ChallengeMenu:
    """Boucle de menu interactive.

    Description:
        Chaque action délègue au `ChallengeService`. Les erreurs du domaine
        (challenge introuvable, saisie invalide) sont affichées et la boucle continue ;
        une `StorageIOError` est propagée à l'appelant.
    """

    def __init__(
        self,
        service: ChallengeService,
        console: Optional[Console] = None,
        stream: Optional[IO[str]] = None,
    ):
        self.service = service
        self.console = console or Console()
        self.stream = _LineReader(stream) if stream is not None else None
        self.default_duration = get_settings().default_duration_days

    # --- Saisies ---
    def _ask(self, prompt: str, **kwargs) -> str:
        return Prompt.ask(prompt, console=self.console, stream=self.stream, **kwargs)

    def _ask_int(self, prompt: str, **kwargs) -> int:
        return IntPrompt.ask(prompt, console=self.console, stream=self.stream, **kwargs)

    def _confirm(self, prompt: str, default: bool) -> bool:
        return Confirm.ask(prompt, console=self.console, stream=self.stream, default=default)

    def _has_challenges(self) -> bool:
        listing = self.service.list_challenges()
        if listing.is_empty:
            self.console.print("📭 No challenges registered.")
            return False
        render_listing(self.console, listing)
        return True

    # --- Actions ---
    def create(self) -> None:
        name = self._ask("Challenge name")
        duration = self._ask_int("Duration (days)", default=self.default_duration)
        description = self._ask("Description", default="", show_default=False)
        record = self.service.create_challenge(name, duration, description)
        self.console.print(
            f"✅ Challenge created (ID: {record.id}): {record.name} ({record.duration_days} days)"
        )

    def list_challenges(self) -> None:
        render_listing(self.console, self.service.list_challenges())

    def analyze(self) -> None:
        if not self._has_challenges():
            return
        challenge_id = self._ask_int("Challenge ID")
        render_detail(self.console, self.service.analyze_challenge(challenge_id))

    def register(self) -> None:
        if not self._has_challenges():
            return
        challenge_id = self._ask_int("Challenge ID")
        fulfilled = self._confirm("Done today?", default=True)
        note = self._ask("Note (optional)", default="", show_default=False)
        result = self.service.register_progress(challenge_id, fulfilled, note)
        # Le dernier message confirme toujours l'enregistrement
        *extras, recorded = result.notices
        extra_prefix = "🏆" if result.completed_now else "⚠️"
        for notice in extras:
            self.console.print(f"{extra_prefix} {notice}")
        self.console.print(f"📅 {recorded}")

    def update_status(self) -> None:
        if not self._has_challenges():
            return
        challenge_id = self._ask_int("Challenge ID")
        new_status = self._ask("New status", choices=list(CHALLENGE_STATUSES))
        record = self.service.update_status(challenge_id, new_status)
        self.console.print(f'✅ Status of "{record.name}" set to: {record.status}')

    def delete(self) -> None:
        if not self._has_challenges():
            return
        challenge_id = self._ask_int("Challenge ID")
        if not self._confirm(f"Delete challenge {challenge_id} permanently?", default=False):
            self.console.print("❌ Action cancelled.")
            return
        removed = self.service.delete_challenge(challenge_id)
        self.console.print(f'✅ Challenge "{removed.name}" deleted.')

    def run(self) -> None:
        """Afficher le menu jusqu'au choix « Exit »."""
        actions = {
            "1": self.create,
            "2": self.list_challenges,
            "3": self.analyze,
            "4": self.register,
            "5": self.update_status,
            "6": self.delete,
        }
        self.console.print("🏆 Welcome to Daily Challenges!")
        while True:
            self.console.print()
            for key, label in MENU_OPTIONS.items():
                self.console.print(f"{key}. {label}")
            choice = self._ask("Choose an option", choices=list(MENU_OPTIONS))
            if choice == EXIT_OPTION:
                self.console.print("👋 See you!")
                return
            try:
                actions[choice]()
            except StorageIOError:
                raise
            except ChallengeError as e:
                self.console.print(f"[red]❌ {e.message}[/red]")


def main() -> int:
    """Point d'entrée console `daily-challenges`.

    Returns:
        int: Code de sortie (1 si le stockage est inaccessible).
    """
    console = Console()
    service = ChallengeService(JsonChallengeStore(get_settings().data_file))
    try:
        ChallengeMenu(service, console).run()
    except StorageIOError as e:
        console.print(f"[red]❌ Storage unavailable: {e.message}[/red]")
        return 1
    except (KeyboardInterrupt, EOFError):
        console.print("\n👋 See you!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
