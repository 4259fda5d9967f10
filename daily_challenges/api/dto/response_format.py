# daily_challenges/api/dto/response_format.py
# Enveloppes JSON communes : succès (`data` + `message`) et erreur (`error.code` + `error.message`).

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from daily_challenges.core.exceptions import ChallengeError, InvalidInputError

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Enveloppe des réponses de succès.

    Attributes:
        success (bool): Toujours True.
        data (T | None): Challenge, listing, analyse ou résultat d'enregistrement.
        message (str | None): Confirmation ou messages de l'enregistrement du jour.
    """

    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None


class ErrorDetail(BaseModel):
    """Contenu de `error` : code stable, message, champ fautif éventuel."""

    code: str
    message: str
    field: Optional[str] = None
    details: Optional[list[dict[str, Any]]] = None


class ErrorResponse(BaseModel):
    """Enveloppe des réponses d'erreur (sérialisée sans les clés vides)."""

    success: bool = False
    error: ErrorDetail

    @classmethod
    def from_error(cls, exc: ChallengeError) -> "ErrorResponse":
        """Construire l'enveloppe depuis une erreur du domaine ou du stockage."""
        field = exc.field if isinstance(exc, InvalidInputError) else None
        return cls(error=ErrorDetail(code=exc.code, message=exc.message, field=field))

    @classmethod
    def from_detail(cls, code: str, message: str, **extra: Any) -> "ErrorResponse":
        return cls(error=ErrorDetail(code=code, message=message, **extra))

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
