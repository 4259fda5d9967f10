# daily_challenges/core/exception_handlers.py
# Gestionnaires d'exceptions globaux : erreurs du domaine, HTTP, validation et imprévues.

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from daily_challenges.api.dto.response_format import ErrorResponse
from daily_challenges.core.exceptions import (
    ChallengeError,
    InvalidInputError,
    NotFoundError,
    StorageIOError,
)
from daily_challenges.core.logging_config import get_loggers

# Erreurs du domaine -> code HTTP
_STATUS_BY_ERROR: dict[type[ChallengeError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidInputError: 422,
    StorageIOError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def register_exception_handlers(app: FastAPI):
    """Enregistre les gestionnaires d'exceptions globaux pour standardiser les réponses."""

    @app.exception_handler(ChallengeError)
    async def challenge_exception_handler(request: Request, exc: ChallengeError):
        """Challenge introuvable (404), saisie refusée (422), stockage indisponible (503)."""
        return JSONResponse(
            status_code=_STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST),
            content=ErrorResponse.from_error(exc).to_content(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Gestionnaire pour les exceptions HTTP standards (route inconnue, méthode...)."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse.from_detail(f"HTTP_{exc.status_code}", str(exc.detail)).to_content(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Corps ou paramètres de requête refusés par pydantic."""
        errors = [
            {
                "field": " -> ".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=422,
            content=ErrorResponse.from_detail(
                "VALIDATION_ERROR", "Validation failed", details=errors
            ).to_content(),
        )

    # Gestionnaire pour les exceptions non capturées
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        _, error_logger, _ = get_loggers()
        error_logger.error("Unhandled error on %s %s: %r", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse.from_detail(
                "INTERNAL_ERROR", "An unexpected error occurred"
            ).to_content(),
        )
