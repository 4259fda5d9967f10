# daily_challenges/api/routes/health.py
# Health check : disponibilité du fichier de données.

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from daily_challenges.api.dependencies import get_challenge_store
from daily_challenges.api.dto.health import HealthCheck
from daily_challenges.core.settings import get_settings
from daily_challenges.core.utils import utcnow
from daily_challenges.services.challenge_store import JsonChallengeStore

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthCheck,
    summary="Health check de l'API",
    description="Retourne le statut de l'API et du stockage des challenges.",
)
def health(
    store: Annotated[JsonChallengeStore, Depends(get_challenge_store)],
) -> JSONResponse:
    """
    Health check endpoint standard

    Vérifie :
    - Stockage (fichier de données lisible ou absent)

    Returns:
        200 si tout OK, 503 si le stockage est inutilisable
    """
    checks = {
        "storage": "ok" if store.is_readable() else "error",
    }

    has_errors = any(check != "ok" for check in checks.values())
    overall_status = "degraded" if has_errors else "ok"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE if has_errors else status.HTTP_200_OK

    response = HealthCheck(
        status=overall_status,
        timestamp=utcnow(),
        version=get_settings().api_version,
        checks=checks,
    )
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))
