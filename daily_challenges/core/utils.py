# daily_challenges/core/utils.py
# Fonctions temporelles basiques (timestamps, date du jour, écart en jours) et horloge injectable.

from __future__ import annotations

import datetime as dt
from typing import Protocol


def now():
    """Date/heure locale (naive).

    Description:
        Retourne `datetime.now()` sans timezone attachée. Pratique pour usages locaux
        mais à éviter pour les comparaisons cross-TZ (préférer `utcnow()`).

    Returns:
        datetime.datetime: Timestamp local (naive).
    """
    return dt.datetime.now()


def utcnow():
    """Date/heure UTC (timezone-aware).

    Returns:
        datetime.datetime: Timestamp UTC (aware).
    """
    return dt.datetime.now(dt.timezone.utc)


def today() -> dt.date:
    """Date calendaire du jour, sans composante horaire.

    Description:
        Dérivée de l'horloge UTC afin que le « jour » soit le même quelle que soit
        la machine. La sérialisation se fait au format ISO `YYYY-MM-DD`.

    Returns:
        datetime.date: Date du jour (UTC).
    """
    return utcnow().date()


def days_between(a: dt.date, b: dt.date) -> int:
    """Nombre de jours calendaires entiers de `a` vers `b`.

    Args:
        a (date): Date de départ.
        b (date): Date d'arrivée.

    Returns:
        int: Écart en jours (négatif si `b` précède `a`).
    """
    return (b - a).days


class Clock(Protocol):
    """Source de la date du jour (injectée dans les services)."""

    def today(self) -> dt.date: ...


class SystemClock:
    """Horloge système par défaut."""

    def today(self) -> dt.date:
        return today()
