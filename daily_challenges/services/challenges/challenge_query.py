# daily_challenges/services/challenges/challenge_query.py
# Vues en lecture seule : liste, analyse détaillée et filtrage par statut.

from __future__ import annotations

import datetime as dt

from daily_challenges.core.exceptions import NotFoundError
from daily_challenges.core.utils import days_between
from daily_challenges.domain.models import (
    ChallengeDetail,
    ChallengeListing,
    ChallengeRecord,
    ChallengeSummary,
    find_challenge,
)
from daily_challenges.shared.constants import STATUS_FILTER_ALL

from .challenge_validator import ChallengeValidator
from .stats_calculator import StatsCalculator

NO_CHALLENGES_MESSAGE = "No challenges registered."


def _summary(record: ChallengeRecord) -> ChallengeSummary:
    return ChallengeSummary(
        id=record.id,
        name=record.name,
        status=record.status,
        duration_days=record.duration_days,
        success_percentage=record.stats.success_percentage,
    )


def list_all(records: list[ChallengeRecord]) -> ChallengeListing:
    """Lister les challenges dans l'ordre de stockage.

    Args:
        records (list[ChallengeRecord]): Ensemble courant.

    Returns:
        ChallengeListing: Résumés ordonnés, ou signal `is_empty` avec message si aucun challenge.
    """
    if not records:
        return ChallengeListing(items=[], is_empty=True, message=NO_CHALLENGES_MESSAGE)
    return ChallengeListing(items=[_summary(r) for r in records])


def analyze(records: list[ChallengeRecord], challenge_id: int, *, day: dt.date) -> ChallengeDetail:
    """Analyse détaillée d'un challenge.

    Description:
        Reprend séries, statistiques, période et description ; ajoute l'avancement
        vers l'objectif et la position de `day` dans la période (jours écoulés/restants,
        bornés à la durée du challenge).

    Args:
        records (list[ChallengeRecord]): Ensemble courant.
        challenge_id (int): Challenge visé.
        day (date): Date de référence (aujourd'hui).

    Returns:
        ChallengeDetail: Vue détaillée.

    Raises:
        NotFoundError: Aucun challenge avec cet identifiant.
    """
    record = find_challenge(records, challenge_id)
    if record is None:
        raise NotFoundError(challenge_id)

    duration = record.duration_days
    days_elapsed = min(max(days_between(record.start_date, day) + 1, 0), duration)
    days_remaining = min(max(days_between(day, record.end_date), 0), duration)

    return ChallengeDetail(
        id=record.id,
        name=record.name,
        description=record.description,
        status=record.status,
        duration_days=duration,
        start_date=record.start_date,
        end_date=record.end_date,
        current_streak=record.current_streak,
        best_streak=record.best_streak,
        stats=record.stats.model_copy(),
        goal_progress_percentage=StatsCalculator.goal_progress_percentage(
            record.stats.days_fulfilled, duration
        ),
        days_elapsed=days_elapsed,
        days_remaining=days_remaining,
        supplementary_entries=record.supplementary_count,
        progress_log=[e.model_copy() for e in record.progress_log],
    )


def filter_by_status(records: list[ChallengeRecord], status: str) -> list[ChallengeRecord]:
    """Filtrer par statut (`all` retourne tout), ordre d'origine conservé.

    Raises:
        InvalidInputError: Filtre inconnu.
    """
    status = ChallengeValidator.validate_status_filter(status)
    if status == STATUS_FILTER_ALL:
        return list(records)
    return [r for r in records if r.status == status]
