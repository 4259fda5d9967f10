# daily_challenges/services/challenges/challenge_service.py
# Service principal : chargement, opération pure, sauvegarde et journalisation pour chaque action.

from __future__ import annotations

from daily_challenges.core.exceptions import StorageIOError
from daily_challenges.core.logging_config import get_loggers
from daily_challenges.core.utils import Clock, SystemClock
from daily_challenges.domain.models import ChallengeDetail, ChallengeListing, ChallengeRecord
from daily_challenges.services.challenge_store import ChallengeStore
from daily_challenges.shared.constants import STATUS_FILTER_ALL

from . import challenge_lifecycle, challenge_query, progress_engine
from .progress_engine import RegistrationResult

logger, error_logger, data_logger = get_loggers()


class ChallengeService:
    """Service principal de gestion des challenges.

    Description:
        Orchestre chaque opération autour du stockage injecté : lecture de l'ensemble
        complet, transformation en mémoire, puis une seule écriture (opérations de
        modification uniquement). Une erreur du domaine interrompt l'opération avant
        toute écriture.
    """

    def __init__(self, store: ChallengeStore, clock: Clock | None = None):
        """Initialiser le service.

        Args:
            store: Stockage des challenges (chargement/sauvegarde complets).
            clock: Source de la date du jour (défaut : horloge système).
        """
        self.store = store
        self.clock = clock or SystemClock()

    def create_challenge(
        self, name: str, duration_days: int, description: str | None = ""
    ) -> ChallengeRecord:
        """Créer un challenge démarrant aujourd'hui.

        Returns:
            ChallengeRecord: Challenge créé (statut `active`).
        """
        records = self._load()
        record, records = challenge_lifecycle.create_challenge(
            records, name, duration_days, description, day=self.clock.today()
        )
        self._save(records)
        logger.info(
            "Challenge %s created: %s (%s days)", record.id, record.name, record.duration_days
        )
        return record

    def register_progress(
        self, challenge_id: int, fulfilled: bool, note: str | None = None
    ) -> RegistrationResult:
        """Enregistrer le résultat du jour pour un challenge.

        Args:
            challenge_id: Challenge visé.
            fulfilled: Objectif tenu aujourd'hui.
            note: Observation facultative.

        Returns:
            RegistrationResult: Challenge mis à jour, entrée ajoutée et messages.
        """
        day = self.clock.today()
        records = self._load()
        records, result = progress_engine.register_progress(
            records, challenge_id, fulfilled, note, day=day
        )
        self._save(records)

        logger.info(
            "Progress registered for challenge %s on %s (fulfilled=%s, authoritative=%s)",
            challenge_id,
            day.isoformat(),
            fulfilled,
            result.authoritative,
        )
        if result.completed_now:
            logger.info("Challenge %s completed", challenge_id)

        data_logger.log_data(
            "progress_registration",
            {
                "challenge_id": challenge_id,
                "entry": result.entry,
                "authoritative": result.authoritative,
                "current_streak": result.record.current_streak,
                "best_streak": result.record.best_streak,
                "stats": result.record.stats,
                "status": result.record.status,
            },
        )
        return result

    def list_challenges(self, status: str = STATUS_FILTER_ALL) -> ChallengeListing:
        """Lister les challenges, éventuellement filtrés par statut."""
        records = challenge_query.filter_by_status(self._load(), status)
        listing = challenge_query.list_all(records)
        if listing.is_empty and status != STATUS_FILTER_ALL:
            listing.message = f"No {status} challenges."
        return listing

    def analyze_challenge(self, challenge_id: int) -> ChallengeDetail:
        return challenge_query.analyze(self._load(), challenge_id, day=self.clock.today())

    def filter_challenges(self, status: str) -> list[ChallengeRecord]:
        return challenge_query.filter_by_status(self._load(), status)

    def update_status(self, challenge_id: int, new_status: str) -> ChallengeRecord:
        """Forcer le statut d'un challenge (aucune transition interdite)."""
        records = self._load()
        record, records = challenge_lifecycle.set_challenge_status(
            records, challenge_id, new_status
        )
        self._save(records)
        logger.info("Challenge %s status set to %s", challenge_id, record.status)
        return record

    def delete_challenge(self, challenge_id: int) -> ChallengeRecord:
        """Supprimer définitivement un challenge.

        Returns:
            ChallengeRecord: Challenge supprimé.
        """
        records = self._load()
        removed, records = challenge_lifecycle.delete_challenge(records, challenge_id)
        self._save(records)
        logger.info("Challenge %s deleted: %s", removed.id, removed.name)
        return removed

    def _load(self) -> list[ChallengeRecord]:
        try:
            return self.store.load()
        except StorageIOError as e:
            error_logger.error("Storage read failed: %s", e)
            raise

    def _save(self, records: list[ChallengeRecord]) -> None:
        try:
            self.store.save(records)
        except StorageIOError as e:
            error_logger.error("Storage write failed: %s", e)
            raise
