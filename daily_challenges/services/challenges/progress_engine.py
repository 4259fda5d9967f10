# daily_challenges/services/challenges/progress_engine.py
# Enregistrement du résultat d'une journée : journal, séries, statistiques et auto-complétion.

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from daily_challenges.core.exceptions import InvalidInputError
from daily_challenges.domain.models import ChallengeRecord, ProgressEntry, challenge_index
from daily_challenges.shared.constants import STATUS_COMPLETED

from .challenge_validator import ChallengeValidator
from .stats_calculator import StatsCalculator


class RegistrationResult(BaseModel):
    """Résultat d'un enregistrement de progression.

    Attributes:
        record (ChallengeRecord): Challenge après mise à jour.
        entry (ProgressEntry): Entrée ajoutée au journal.
        authoritative (bool): False si le jour avait déjà été jugé (tentative supplémentaire).
        completed_now (bool): True si cet enregistrement a fait passer le challenge en `completed`.
        notices (list[str]): Messages destinés à l'utilisateur.
    """

    record: ChallengeRecord
    entry: ProgressEntry
    authoritative: bool
    completed_now: bool = False
    notices: list[str] = Field(default_factory=list)


def register_progress(
    records: list[ChallengeRecord],
    challenge_id: int,
    fulfilled: bool,
    note: str | None = None,
    *,
    day: dt.date,
) -> tuple[list[ChallengeRecord], RegistrationResult]:
    """Enregistrer le résultat du jour `day` pour un challenge.

    Description:
        - Une entrée est toujours ajoutée au journal (`day_index = len(journal) + 1`).\n
        - Si aucune entrée n'existe encore pour `day`, elle fait autorité : la série
          courante est prolongée (veille jugée ou premier jour) ou redémarre à 1 après
          un trou, remise à 0 en cas d'échec ; la meilleure série et les statistiques
          sont mises à jour.\n
        - Si le jour a déjà été jugé, l'entrée est seulement conservée pour l'historique :
          séries et statistiques restent inchangées.\n
        - Un challenge `active` dont les jours tenus atteignent la durée passe en `completed`.

        L'ensemble reçu n'est jamais modifié : le challenge concerné est copié puis
        remplacé dans une nouvelle liste.

    Args:
        records (list[ChallengeRecord]): Ensemble courant.
        challenge_id (int): Challenge visé.
        fulfilled (bool): Objectif tenu ce jour.
        note (str | None): Observation facultative.
        day (date): Date de l'enregistrement (fournie par l'horloge).

    Returns:
        tuple: (nouvel ensemble, RegistrationResult).

    Raises:
        NotFoundError: Aucun challenge avec cet identifiant.
        InvalidInputError: `fulfilled` non booléen ou note invalide.
    """
    if not isinstance(fulfilled, bool):
        raise InvalidInputError("fulfilled must be a boolean", field="fulfilled")
    note = ChallengeValidator.validate_note(note)

    index = challenge_index(records, challenge_id)
    record = records[index].model_copy(deep=True)

    judged = record.entry_for(day)
    authoritative_entries = record.authoritative_entries()
    previous = authoritative_entries[-1] if authoritative_entries else None

    entry = ProgressEntry(
        day_index=len(record.progress_log) + 1,
        date=day,
        fulfilled=fulfilled,
        note=note,
    )
    record.progress_log.append(entry)

    notices: list[str] = []
    completed_now = False

    if judged is not None:
        notices.append(
            f"An entry already exists for {day.isoformat()}: attempt logged, streak not affected."
        )
    else:
        if fulfilled:
            record.current_streak = StatsCalculator.next_streak(
                record.current_streak, previous.date if previous else None, day
            )
            record.best_streak = max(record.best_streak, record.current_streak)
        else:
            record.current_streak = 0
        record.stats = StatsCalculator.apply_outcome(record.stats, fulfilled)

        if StatsCalculator.should_auto_complete(record):
            record.status = STATUS_COMPLETED
            completed_now = True
            notices.append(
                f'Challenge "{record.name}" completed: {record.duration_days} days fulfilled!'
            )

    notices.append(f'Progress recorded for "{record.name}" on {day.isoformat()}.')

    result = RegistrationResult(
        record=record,
        entry=entry,
        authoritative=judged is None,
        completed_now=completed_now,
        notices=notices,
    )
    updated = [*records[:index], record, *records[index + 1:]]
    return updated, result
