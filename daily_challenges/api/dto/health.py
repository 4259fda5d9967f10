from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class HealthCheck(BaseModel):
    """Réponse du health check."""

    status: Literal["ok", "degraded"]
    timestamp: datetime
    version: str
    checks: dict[str, str]
