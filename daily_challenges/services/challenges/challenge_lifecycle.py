# daily_challenges/services/challenges/challenge_lifecycle.py
# Création, suppression et changement manuel de statut des challenges.

from __future__ import annotations

import datetime as dt

from daily_challenges.core.exceptions import InvalidInputError
from daily_challenges.domain.models import ChallengeRecord, challenge_index, next_challenge_id

from .challenge_validator import ChallengeValidator


def create_challenge(
    records: list[ChallengeRecord],
    name: str,
    duration_days: int,
    description: str | None = "",
    *,
    day: dt.date,
) -> tuple[ChallengeRecord, list[ChallengeRecord]]:
    """Créer un challenge actif démarrant le jour `day`.

    Description:
        Attribue l'identifiant `max(id) + 1`, calcule la période
        (`end_date = day + duration_days - 1`) et initialise séries, statistiques
        et journal à vide.

    Args:
        records (list[ChallengeRecord]): Ensemble courant.
        name (str): Nom (non vide).
        duration_days (int): Durée en jours (> 0).
        description (str | None): Description libre.
        day (date): Date de début.

    Returns:
        tuple: (challenge créé, nouvel ensemble).

    Raises:
        InvalidInputError: Nom vide ou durée invalide.
    """
    name = ChallengeValidator.validate_name(name)
    duration_days = ChallengeValidator.validate_duration(duration_days)
    description = ChallengeValidator.validate_description(description)

    try:
        end_date = day + dt.timedelta(days=duration_days - 1)
    except OverflowError as e:
        raise InvalidInputError("Challenge would end after the last supported date", field="durationDays") from e

    record = ChallengeRecord(
        id=next_challenge_id(records),
        name=name,
        description=description,
        duration_days=duration_days,
        start_date=day,
        end_date=end_date,
    )
    return record, [*records, record]


def delete_challenge(
    records: list[ChallengeRecord], challenge_id: int
) -> tuple[ChallengeRecord, list[ChallengeRecord]]:
    """Supprimer définitivement un challenge (l'ordre des autres est conservé).

    Raises:
        NotFoundError: Aucun challenge avec cet identifiant.
    """
    index = challenge_index(records, challenge_id)
    return records[index], [*records[:index], *records[index + 1:]]


def set_challenge_status(
    records: list[ChallengeRecord], challenge_id: int, new_status: str
) -> tuple[ChallengeRecord, list[ChallengeRecord]]:
    """Écraser le statut d'un challenge.

    Description:
        Aucune transition n'est interdite : seul le statut cible doit être valide.

    Raises:
        InvalidInputError: Statut inconnu.
        NotFoundError: Aucun challenge avec cet identifiant.
    """
    new_status = ChallengeValidator.validate_status(new_status)
    index = challenge_index(records, challenge_id)
    record = records[index].model_copy(update={"status": new_status}, deep=True)
    return record, [*records[:index], record, *records[index + 1:]]
