# daily_challenges/services/challenge_store.py
# Persistance de l'ensemble des challenges dans un fichier JSON (réécriture complète à chaque sauvegarde).

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from daily_challenges.core.exceptions import StorageCorruptError, StorageIOError
from daily_challenges.core.logging_config import get_loggers
from daily_challenges.domain.models import ChallengeRecord, ensure_unique_ids

logger = get_loggers()[0]

_records_adapter = TypeAdapter(list[ChallengeRecord])


class ChallengeStore(Protocol):
    """Contrat d'un stockage de challenges (chargement/sauvegarde de l'ensemble)."""

    def load(self) -> list[ChallengeRecord]: ...

    def save(self, records: list[ChallengeRecord]) -> None: ...


class JsonChallengeStore:
    """Stockage JSON d'une liste de challenges.

    Description:
        - `load()` : fichier absent → liste vide ; contenu illisible ou invalide → warning,
          fichier réinitialisé à `[]`, liste vide ; erreur système → `StorageIOError`.\n
        - `save()` : écrit dans un fichier temporaire voisin puis remplace la cible,
          de sorte qu'une écriture interrompue ne laisse jamais de fichier tronqué.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> list[ChallengeRecord]:
        """Charger tous les challenges.

        Returns:
            list[ChallengeRecord]: Challenges dans l'ordre du fichier.

        Raises:
            StorageIOError: Si le fichier existe mais ne peut être lu.
        """
        if not self.path.exists():
            return []

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise StorageIOError(f"Cannot read {self.path}: {e}") from e

        try:
            return self._parse(raw)
        except StorageCorruptError as e:
            logger.warning("Invalid data file '%s' (%s), resetting to an empty list", self.path, e)
            self.save([])
            return []

    def save(self, records: list[ChallengeRecord]) -> None:
        """Réécrire intégralement le fichier.

        Args:
            records (list[ChallengeRecord]): Ensemble complet à persister.

        Raises:
            StorageIOError: Si l'écriture échoue.
        """
        payload = _records_adapter.dump_json(records, by_alias=True, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except OSError:
                if os.path.exists(tmp_name):
                    os.remove(tmp_name)
                raise
        except OSError as e:
            raise StorageIOError(f"Cannot write {self.path}: {e}") from e

    def is_readable(self) -> bool:
        """Vérifier que le stockage est accessible (health check)."""
        if not self.path.exists():
            parent = self.path.parent
            return not parent.exists() or os.access(parent, os.W_OK)
        return os.access(self.path, os.R_OK | os.W_OK)

    @staticmethod
    def _parse(raw: bytes) -> list[ChallengeRecord]:
        if not raw.strip():
            raise StorageCorruptError("empty file")
        try:
            records = _records_adapter.validate_json(raw)
            ensure_unique_ids(records)
        except (ValidationError, ValueError, OverflowError) as e:
            raise StorageCorruptError(str(e).splitlines()[0]) from e
        return records
