# daily_challenges/api/dependencies.py
# Dépendances FastAPI : service de challenges construit depuis la configuration.

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from daily_challenges.core.settings import get_settings
from daily_challenges.services.challenge_store import JsonChallengeStore
from daily_challenges.services.challenges import ChallengeService


def get_challenge_store() -> JsonChallengeStore:
    return JsonChallengeStore(get_settings().data_file)


def get_challenge_service(
    store: Annotated[JsonChallengeStore, Depends(get_challenge_store)],
) -> ChallengeService:
    """Service de challenges branché sur le fichier configuré (surchargé dans les tests)."""
    return ChallengeService(store)


ChallengeServiceDep = Annotated[ChallengeService, Depends(get_challenge_service)]
