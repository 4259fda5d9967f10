# daily_challenges/services/challenges/challenge_validator.py
# Service de validation des saisies (nom, durée, statut, note) avant opération.

from __future__ import annotations

from typing import Any

from daily_challenges.core.exceptions import InvalidInputError
from daily_challenges.shared.constants import (
    CHALLENGE_STATUSES,
    MAX_DURATION_DAYS,
    NAME_MAX_LENGTH,
    NOTE_MAX_LENGTH,
    STATUS_FILTER_ALL,
)


class ChallengeValidator:
    """Service de validation pour les challenges.

    Description:
        Chaque méthode retourne la valeur normalisée ou lève `InvalidInputError`,
        sans jamais toucher à l'ensemble des challenges.
    """

    @staticmethod
    def validate_name(name: Any) -> str:
        """Valider le nom d'un challenge.

        Args:
            name: Nom saisi.

        Returns:
            str: Nom sans espaces superflus.

        Raises:
            InvalidInputError: Nom absent, vide ou trop long.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidInputError("Name must not be empty", field="name")
        name = name.strip()
        if len(name) > NAME_MAX_LENGTH:
            raise InvalidInputError(
                f"Name too long (max {NAME_MAX_LENGTH} characters)", field="name"
            )
        return name

    @staticmethod
    def validate_duration(duration_days: Any) -> int:
        """Valider la durée (entier de 1 à `MAX_DURATION_DAYS`, booléens refusés).

        Raises:
            InvalidInputError: Durée non entière, non positive ou trop longue.
        """
        if isinstance(duration_days, bool) or not isinstance(duration_days, int):
            raise InvalidInputError("Duration must be an integer number of days", field="durationDays")
        if duration_days <= 0:
            raise InvalidInputError("Duration must be a positive number of days", field="durationDays")
        if duration_days > MAX_DURATION_DAYS:
            raise InvalidInputError(
                f"Duration too long (max {MAX_DURATION_DAYS} days)", field="durationDays"
            )
        return duration_days

    @staticmethod
    def validate_description(description: Any) -> str:
        if description is None:
            return ""
        if not isinstance(description, str):
            raise InvalidInputError("Description must be a string", field="description")
        return description.strip()

    @staticmethod
    def validate_note(note: Any) -> str:
        if note is None:
            return ""
        if not isinstance(note, str):
            raise InvalidInputError("Note must be a string", field="note")
        if len(note) > NOTE_MAX_LENGTH:
            raise InvalidInputError(
                f"Note too long (max {NOTE_MAX_LENGTH} characters)", field="note"
            )
        return note.strip()

    @staticmethod
    def validate_status(status: Any) -> str:
        """Valider un statut cible (`active`, `completed` ou `abandoned`).

        Raises:
            InvalidInputError: Statut inconnu.
        """
        if status not in CHALLENGE_STATUSES:
            raise InvalidInputError(
                f"Invalid status: {status} (expected one of {', '.join(CHALLENGE_STATUSES)})",
                field="status",
            )
        return status

    @staticmethod
    def validate_status_filter(status: Any) -> str:
        """Valider un filtre de statut (statut ou `all`)."""
        if status == STATUS_FILTER_ALL:
            return status
        return ChallengeValidator.validate_status(status)
