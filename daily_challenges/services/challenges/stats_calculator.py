# daily_challenges/services/challenges/stats_calculator.py
# Règles de calcul des séries, pourcentages et de l'auto-complétion d'un challenge.

from __future__ import annotations

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal

from daily_challenges.core.utils import days_between
from daily_challenges.domain.models import ChallengeRecord, ChallengeStats
from daily_challenges.shared.constants import (
    GOAL_PERCENT_DECIMALS,
    STATUS_ACTIVE,
    SUCCESS_PERCENT_DECIMALS,
)


def _round_half_up(value: float, decimals: int) -> float:
    # Égalités arrondies vers le haut (6.25 -> 6.3), sur la valeur binaire exacte du float
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


class StatsCalculator:
    """Service de calcul des statistiques d'un challenge.

    Description:
        Regroupe les règles pures (sans E/S) utilisées par le moteur d'enregistrement
        et par les vues d'analyse.
    """

    @staticmethod
    def success_percentage(days_fulfilled: int, days_failed: int) -> float:
        """Taux de réussite sur les jours jugés.

        Args:
            days_fulfilled: Jours tenus.
            days_failed: Jours manqués.

        Returns:
            float: Pourcentage arrondi à 1 décimale, 0.0 si aucun jour jugé.
        """
        total = days_fulfilled + days_failed
        if total == 0:
            return 0.0
        return _round_half_up(days_fulfilled / total * 100, SUCCESS_PERCENT_DECIMALS)

    @staticmethod
    def goal_progress_percentage(days_fulfilled: int, duration_days: int) -> float:
        """Avancement vers l'objectif (jours tenus / durée), arrondi à 2 décimales."""
        if duration_days <= 0:
            return 0.0
        return _round_half_up(days_fulfilled / duration_days * 100, GOAL_PERCENT_DECIMALS)

    @staticmethod
    def next_streak(current_streak: int, previous_date: dt.date | None, day: dt.date) -> int:
        """Série après un jour tenu.

        Description:
            La série se prolonge si le jour précédent jugé est exactement la veille
            (ou s'il n'y en a pas), sinon une nouvelle série démarre à 1.

        Args:
            current_streak: Série avant l'enregistrement.
            previous_date: Date de la précédente entrée faisant autorité.
            day: Date du jour tenu.

        Returns:
            int: Nouvelle série courante.
        """
        if previous_date is None or days_between(previous_date, day) == 1:
            return current_streak + 1
        return 1

    @staticmethod
    def apply_outcome(stats: ChallengeStats, fulfilled: bool) -> ChallengeStats:
        """Compter un jour jugé et recalculer le taux de réussite."""
        days_fulfilled = stats.days_fulfilled + (1 if fulfilled else 0)
        days_failed = stats.days_failed + (0 if fulfilled else 1)
        return ChallengeStats(
            days_fulfilled=days_fulfilled,
            days_failed=days_failed,
            success_percentage=StatsCalculator.success_percentage(days_fulfilled, days_failed),
        )

    @staticmethod
    def should_auto_complete(record: ChallengeRecord) -> bool:
        """Le challenge actif vient d'atteindre sa durée en jours tenus."""
        return (
            record.status == STATUS_ACTIVE
            and record.stats.days_fulfilled == record.duration_days
        )
