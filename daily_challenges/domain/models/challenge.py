# daily_challenges/domain/models/challenge.py
# Représentation d'un challenge quotidien, de son journal de progression et de ses statistiques.

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from daily_challenges.core.exceptions import NotFoundError

ChallengeStatus = Literal["active", "completed", "abandoned"]
StatusFilter = Literal["active", "completed", "abandoned", "all"]


class ProgressEntry(BaseModel):
    """Entrée du journal de progression.

    Description:
        Une entrée par enregistrement. Seule la première entrée d'une date donnée fait
        autorité (séries/statistiques) ; les suivantes sont conservées pour l'historique.

    Attributes:
        day_index (int): Rang 1-based dans le journal au moment de l'insertion.
        date (date): Date calendaire de l'entrée.
        fulfilled (bool): Objectif tenu ce jour-là.
        note (str): Observation libre (chaîne vide si absente).
    """

    day_index: int = Field(..., ge=1, alias="dayIndex")
    date: dt.date
    fulfilled: bool
    note: str = ""

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("note", mode="before")
    @classmethod
    def _none_note_to_empty(cls, v):
        return "" if v is None else v


class ChallengeStats(BaseModel):
    """Statistiques dérivées des entrées faisant autorité.

    Attributes:
        days_fulfilled (int): Jours tenus.
        days_failed (int): Jours manqués.
        success_percentage (float): Taux de réussite (0–100, 1 décimale).
    """

    days_fulfilled: int = Field(default=0, ge=0, alias="daysFulfilled")
    days_failed: int = Field(default=0, ge=0, alias="daysFailed")
    success_percentage: float = Field(default=0.0, ge=0.0, le=100.0, alias="successPercentage")

    model_config = ConfigDict(populate_by_name=True)


class ChallengeRecord(BaseModel):
    """Challenge personnel suivi jour par jour.

    Description:
        Porte l'identité du challenge (nom, durée, période), son statut, son journal
        append-only et l'état dérivé (séries, statistiques). Les noms de champs
        persistés sont ceux des alias (camelCase).

    Attributes:
        id (int): Identifiant unique (> 0).
        name (str): Nom non vide.
        description (str): Description libre.
        duration_days (int): Durée en jours (> 0), fixée à la création.
        start_date (date): Premier jour.
        end_date (date): Dernier jour (`start_date + duration_days - 1`).
        status (Literal['active','completed','abandoned']): Statut courant.
        progress_log (list[ProgressEntry]): Journal ordonné par insertion.
        current_streak (int): Série courante de jours tenus consécutifs.
        best_streak (int): Meilleure série observée.
        stats (ChallengeStats): Statistiques agrégées.
    """

    id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1)
    description: str = ""
    duration_days: int = Field(..., gt=0, alias="durationDays")
    start_date: dt.date = Field(..., alias="startDate")
    end_date: dt.date = Field(..., alias="endDate")
    status: ChallengeStatus = "active"
    progress_log: list[ProgressEntry] = Field(default_factory=list, alias="progressLog")
    current_streak: int = Field(default=0, ge=0, alias="currentStreak")
    best_streak: int = Field(default=0, ge=0, alias="bestStreak")
    stats: ChallengeStats = Field(default_factory=ChallengeStats)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("description", mode="before")
    @classmethod
    def _none_description_to_empty(cls, v):
        return "" if v is None else v

    @model_validator(mode="after")
    def _check_invariants(self) -> ChallengeRecord:
        try:
            expected_end = self.start_date + dt.timedelta(days=self.duration_days - 1)
        except OverflowError as e:
            raise ValueError("durationDays runs past the last supported date") from e
        if self.end_date != expected_end:
            raise ValueError(
                f"endDate must be {expected_end.isoformat()} for a {self.duration_days}-day challenge"
            )
        if self.best_streak < self.current_streak:
            raise ValueError("bestStreak cannot be lower than currentStreak")
        return self

    def authoritative_entries(self) -> list[ProgressEntry]:
        """Entrées faisant autorité (la première de chaque date), dans l'ordre du journal."""
        seen: set[dt.date] = set()
        entries = []
        for entry in self.progress_log:
            if entry.date in seen:
                continue
            seen.add(entry.date)
            entries.append(entry)
        return entries

    def entry_for(self, day: dt.date) -> ProgressEntry | None:
        """Entrée faisant autorité pour `day`, ou None si le jour n'a pas été jugé."""
        for entry in self.progress_log:
            if entry.date == day:
                return entry
        return None

    @property
    def supplementary_count(self) -> int:
        return len(self.progress_log) - len(self.authoritative_entries())


def find_challenge(records: Iterable[ChallengeRecord], challenge_id: int) -> ChallengeRecord | None:
    for record in records:
        if record.id == challenge_id:
            return record
    return None


def challenge_index(records: list[ChallengeRecord], challenge_id: int) -> int:
    """Position d'un challenge dans l'ensemble.

    Raises:
        NotFoundError: Aucun challenge avec cet identifiant.
    """
    for i, record in enumerate(records):
        if record.id == challenge_id:
            return i
    raise NotFoundError(challenge_id)


def next_challenge_id(records: Iterable[ChallengeRecord]) -> int:
    """Prochain identifiant : `max(id) + 1`, ou 1 si aucun challenge."""
    return max((r.id for r in records), default=0) + 1


def ensure_unique_ids(records: Iterable[ChallengeRecord]) -> None:
    """Vérifier l'unicité des identifiants d'un ensemble de challenges.

    Raises:
        ValueError: Si un identifiant apparaît plusieurs fois.
    """
    seen: set[int] = set()
    for record in records:
        if record.id in seen:
            raise ValueError(f"Duplicate challenge id: {record.id}")
        seen.add(record.id)
