# daily_challenges/domain/models/challenge_views.py
# Vues en lecture seule produites par le moteur de requêtes (liste, détail).

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from .challenge import ChallengeStats, ChallengeStatus, ProgressEntry


class ChallengeSummary(BaseModel):
    """Ligne de liste d'un challenge.

    Attributes:
        id (int): Identifiant.
        name (str): Nom.
        status (str): Statut courant.
        duration_days (int): Durée en jours.
        success_percentage (float): Taux de réussite.
    """

    id: int
    name: str
    status: ChallengeStatus
    duration_days: int = Field(..., alias="durationDays")
    success_percentage: float = Field(..., alias="successPercentage")

    model_config = ConfigDict(populate_by_name=True)


class ChallengeListing(BaseModel):
    """Liste ordonnée de challenges.

    Description:
        `is_empty` signale explicitement l'absence de challenge (avec `message`)
        plutôt qu'une liste vide à afficher.
    """

    items: list[ChallengeSummary] = Field(default_factory=list)
    is_empty: bool = Field(default=False, alias="isEmpty")
    message: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class ChallengeDetail(BaseModel):
    """Analyse détaillée d'un challenge.

    Attributes:
        id (int): Identifiant.
        name (str): Nom.
        description (str): Description.
        status (str): Statut courant.
        duration_days (int): Durée en jours.
        start_date (date): Premier jour.
        end_date (date): Dernier jour.
        current_streak (int): Série courante.
        best_streak (int): Meilleure série.
        stats (ChallengeStats): Jours tenus/manqués et taux de réussite.
        goal_progress_percentage (float): Jours tenus rapportés à la durée (2 décimales).
        days_elapsed (int): Jours écoulés de la période, aujourd'hui inclus.
        days_remaining (int): Jours restants après aujourd'hui.
        supplementary_entries (int): Tentatives supplémentaires (hors jours jugés).
        progress_log (list[ProgressEntry]): Journal complet.
    """

    id: int
    name: str
    description: str
    status: ChallengeStatus
    duration_days: int = Field(..., alias="durationDays")
    start_date: dt.date = Field(..., alias="startDate")
    end_date: dt.date = Field(..., alias="endDate")
    current_streak: int = Field(..., alias="currentStreak")
    best_streak: int = Field(..., alias="bestStreak")
    stats: ChallengeStats
    goal_progress_percentage: float = Field(..., alias="goalProgressPercentage")
    days_elapsed: int = Field(..., alias="daysElapsed")
    days_remaining: int = Field(..., alias="daysRemaining")
    supplementary_entries: int = Field(default=0, alias="supplementaryEntries")
    progress_log: list[ProgressEntry] = Field(default_factory=list, alias="progressLog")

    model_config = ConfigDict(populate_by_name=True)
