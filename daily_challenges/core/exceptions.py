# daily_challenges/core/exceptions.py
# Erreurs typées du domaine (introuvable, saisie invalide) et du stockage (corruption, E/S).

from __future__ import annotations


class ChallengeError(Exception):
    """Base de toutes les erreurs applicatives."""

    code = "CHALLENGE_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ChallengeError):
    """Aucun challenge ne correspond à l'identifiant demandé."""

    code = "NOT_FOUND"

    def __init__(self, challenge_id: int):
        super().__init__(f"Challenge {challenge_id} not found")
        self.challenge_id = challenge_id


class InvalidInputError(ChallengeError):
    """Saisie refusée (nom vide, durée non positive, statut inconnu...)."""

    code = "INVALID_INPUT"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class StorageCorruptError(ChallengeError):
    """Le fichier persistant ne peut être interprété.

    Description:
        Jamais fatale : le store la traite localement en repartant d'une liste vide.
    """

    code = "STORAGE_CORRUPT"


class StorageIOError(ChallengeError):
    """Échec de lecture/écriture du stockage (remonté à l'appelant)."""

    code = "STORAGE_UNAVAILABLE"
