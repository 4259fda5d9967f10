# daily_challenges/api/routes/challenge_progress.py
# Route d'enregistrement du résultat du jour pour un challenge.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Path

from daily_challenges.api.dependencies import ChallengeServiceDep
from daily_challenges.api.dto.challenge import RegisterProgressIn
from daily_challenges.api.dto.response_format import SuccessResponse
from daily_challenges.services.challenges import RegistrationResult

router = APIRouter(
    prefix="/challenges",
    tags=["challenge-progress"],
)


@router.post(
    "/{challenge_id}/progress",
    response_model=SuccessResponse[RegistrationResult],
    summary="Enregistrer le résultat du jour",
    description=(
        "Ajoute une entrée datée du jour au journal du challenge.\n\n"
        "- Première entrée du jour : séries et statistiques mises à jour\n"
        "- Entrée supplémentaire le même jour : conservée, sans effet sur les séries"
    ),
)
def register_progress_route(
    challenge_id: Annotated[int, Path(..., ge=1, description="Identifiant du challenge.")],
    service: ChallengeServiceDep,
    payload: Annotated[
        RegisterProgressIn, Body(description="Objectif tenu et note facultative.")
    ] = RegisterProgressIn(),
):
    """Enregistrer le résultat du jour.

    Args:
        challenge_id (int): Challenge visé.
        payload (RegisterProgressIn): `fulfilled` (défaut True) et `note`.

    Returns:
        SuccessResponse[RegistrationResult]: Challenge mis à jour ; les messages
        sont joints dans `message`.
    """
    result = service.register_progress(challenge_id, payload.fulfilled, payload.note)
    return SuccessResponse(data=result, message=" ".join(result.notices))
