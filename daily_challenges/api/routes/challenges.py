# daily_challenges/api/routes/challenges.py
# Routes challenges : listing/filtrage, création, analyse, changement de statut et suppression.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Path, Query, status

from daily_challenges.api.dependencies import ChallengeServiceDep
from daily_challenges.api.dto.challenge import CreateChallengeIn, StatusPatchIn
from daily_challenges.api.dto.response_format import SuccessResponse
from daily_challenges.domain.models import (
    ChallengeDetail,
    ChallengeListing,
    ChallengeRecord,
    StatusFilter,
)

router = APIRouter(prefix="/challenges", tags=["challenges"])


@router.get(
    "",
    response_model=SuccessResponse[ChallengeListing],
    summary="Lister les challenges",
    description=(
        "Retourne les challenges dans l’ordre de création.\n\n"
        "- Filtre optionnel `status` (active|completed|abandoned|all)\n"
        "- `isEmpty` signale l’absence de challenge"
    ),
)
def list_challenges(
    service: ChallengeServiceDep,
    status_filter: StatusFilter = Query(
        default="all",
        alias="status",
        description="Filtrer par statut du challenge.",
    ),
):
    """Lister les challenges.

    Args:
        status_filter (str): Statut à filtrer (`all` par défaut).

    Returns:
        SuccessResponse[ChallengeListing]: Résumés et signal de liste vide.
    """
    listing = service.list_challenges(status_filter)
    return SuccessResponse(data=listing, message=listing.message)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[ChallengeRecord],
    summary="Créer un challenge",
    description="Crée un challenge `active` démarrant aujourd’hui pour `durationDays` jours.",
)
def create_challenge(
    payload: Annotated[CreateChallengeIn, Body(..., description="Nom, durée et description.")],
    service: ChallengeServiceDep,
):
    """Créer un challenge.

    Args:
        payload (CreateChallengeIn): Nom, durée, description.

    Returns:
        SuccessResponse[ChallengeRecord]: Challenge créé.
    """
    record = service.create_challenge(payload.name, payload.duration_days, payload.description)
    return SuccessResponse(data=record, message=f"Challenge created (ID: {record.id})")


@router.get(
    "/{challenge_id}",
    response_model=SuccessResponse[ChallengeDetail],
    summary="Analyse d’un challenge",
    description="Séries, statistiques, période, avancement et journal complet.",
)
def get_challenge(
    challenge_id: Annotated[int, Path(..., ge=1, description="Identifiant du challenge.")],
    service: ChallengeServiceDep,
):
    return SuccessResponse(data=service.analyze_challenge(challenge_id))


@router.patch(
    "/{challenge_id}/status",
    response_model=SuccessResponse[ChallengeRecord],
    summary="Modifier le statut d’un challenge",
    description="Écrase le statut (`active|completed|abandoned`) sans contrôle de transition.",
)
def patch_status(
    challenge_id: Annotated[int, Path(..., ge=1, description="Identifiant du challenge.")],
    payload: Annotated[StatusPatchIn, Body(..., description="Nouveau statut.")],
    service: ChallengeServiceDep,
):
    """Modifier le statut d’un challenge.

    Returns:
        SuccessResponse[ChallengeRecord]: Challenge après mise à jour.
    """
    record = service.update_status(challenge_id, payload.status)
    return SuccessResponse(data=record, message=f"Status set to {record.status}")


@router.delete(
    "/{challenge_id}",
    response_model=SuccessResponse[ChallengeRecord],
    summary="Supprimer un challenge",
    description="Suppression définitive (non réversible).",
)
def delete_challenge(
    challenge_id: Annotated[int, Path(..., ge=1, description="Identifiant du challenge.")],
    service: ChallengeServiceDep,
):
    removed = service.delete_challenge(challenge_id)
    return SuccessResponse(data=removed, message=f'Challenge "{removed.name}" deleted')
