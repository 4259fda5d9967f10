# daily_challenges/api/dto/challenge.py
# Objets d'entrée des endpoints challenges (création, progression, statut).

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CreateChallengeIn(BaseModel):
    """Payload de création d'un challenge.

    Attributes:
        name (str): Nom du challenge.
        duration_days (int): Durée en jours (> 0).
        description (str): Description libre.
    """

    name: str = Field(..., description="Nom du challenge")
    duration_days: int = Field(..., alias="durationDays", description="Durée en jours (> 0)")
    description: str = Field(default="", description="Description libre")

    model_config = ConfigDict(populate_by_name=True)


class RegisterProgressIn(BaseModel):
    """Payload d'enregistrement du jour.

    Attributes:
        fulfilled (bool): Objectif tenu aujourd'hui.
        note (str | None): Observation facultative.
    """

    fulfilled: bool = True
    note: str | None = Field(default=None, description="Observation facultative")


class StatusPatchIn(BaseModel):
    status: str = Field(..., description="Nouveau statut (active|completed|abandoned)")
