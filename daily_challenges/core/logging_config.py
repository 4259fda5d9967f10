"""Configuration du système de logging centralisé."""

import datetime as dt
import json
import logging
import logging.handlers
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel

from daily_challenges.core.settings import get_settings
from daily_challenges.core.utils import now


class CustomJSONEncoder(json.JSONEncoder):
    """Encodeur JSON personnalisé pour gérer dates et modèles pydantic."""

    def default(self, obj):
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json", by_alias=True)
        elif isinstance(obj, (dt.datetime, dt.date)):
            return obj.isoformat()
        elif isinstance(obj, Path):
            return str(obj)
        return super().default(obj)


class DataLogger:
    """Logger spécialisé pour les données lourdes en JSON."""

    def __init__(self, logs_dir: str = "logs"):
        self.logs_dir = Path(logs_dir)
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    def log_data(
        self,
        calling_context: str,
        data: Dict[str, Any],
        user_data: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log des données lourdes en JSON."""
        day = now().strftime("%Y-%m-%d")
        json_file = self.logs_dir / f"{day}-data.json"

        entry = {
            "datetime": now().isoformat(),
            "calling_context": calling_context,
            "user_data": user_data or {},
            "data": data
        }

        # Maintenir un fichier JSON valide au format tableau
        if json_file.exists():
            with open(json_file, "r", encoding="utf-8") as f:
                content = f.read()

            # Retirer les espaces blancs et le dernier crochet fermant
            content = content.rstrip()
            if content.endswith(']'):
                content = content[:-1]
                # Ajouter une virgule si ce n'est pas le premier élément
                if content.rstrip().endswith('}'):
                    content += ','
            elif content.endswith('}'):
                content += ','

            with open(json_file, "w", encoding="utf-8") as f:
                f.write(content)
                f.write(json.dumps(entry, cls=CustomJSONEncoder, ensure_ascii=False))
                f.write(']')
        else:
            with open(json_file, "w", encoding="utf-8") as f:
                f.write('[')
                f.write(json.dumps(entry, cls=CustomJSONEncoder, ensure_ascii=False))
                f.write(']')


def _rotating_handler(path: Path, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=path,
        when="midnight",
        interval=1,
        encoding="utf-8"
    )
    handler.suffix = "%Y-%m-%d"
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    logs_dir: Optional[Path] = None,
    retention_days: Optional[int] = None,
) -> tuple[logging.Logger, logging.Logger, DataLogger]:
    """Configure le système de logging avec rotation quotidienne.

    Args:
        logs_dir: Dossier des logs (défaut : `settings.logs_dir`).
        retention_days: Durée de conservation (défaut : `settings.log_retention_days`).

    Returns:
        tuple: (logger_generic, logger_errors, data_logger)
    """
    settings = get_settings()
    logs_dir = Path(logs_dir or settings.logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Nettoyage des logs anciens
    cleanup_old_logs(
        logs_dir,
        retention_days if retention_days is not None else settings.log_retention_days,
    )

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Logger générique (INFO+)
    generic_logger = logging.getLogger("daily_challenges.generic")
    generic_logger.setLevel(logging.INFO)
    if not generic_logger.handlers:  # Éviter les doublons
        generic_logger.addHandler(_rotating_handler(logs_dir / "generic.log", formatter))

    # Logger erreurs (ERROR+)
    error_logger = logging.getLogger("daily_challenges.errors")
    error_logger.setLevel(logging.ERROR)
    if not error_logger.handlers:
        error_logger.addHandler(_rotating_handler(logs_dir / "errors.log", formatter))

    data_logger = DataLogger(str(logs_dir))

    return generic_logger, error_logger, data_logger


def cleanup_old_logs(logs_dir: Path, retention_days: int = 30) -> None:
    """Supprime les logs plus anciens que retention_days.

    Description:
        Se base sur la date présente dans le nom de fichier : préfixe des fichiers
        `YYYY-MM-DD-data.json`, suffixe de rotation des `generic.log.YYYY-MM-DD`.
    """
    cutoff_str = (now() - dt.timedelta(days=retention_days)).strftime("%Y-%m-%d")

    for file_path in Path(logs_dir).iterdir():
        if not file_path.is_file():
            continue
        name = file_path.name
        if name.endswith("-data.json"):
            date_part = name[:10]
        elif name.startswith(("generic.log.", "errors.log.")):
            date_part = name[-10:]
        else:
            continue

        try:
            dt.date.fromisoformat(date_part)
        except ValueError:
            continue
        if date_part < cutoff_str:
            try:
                os.remove(file_path)
            except OSError:
                continue


# Instance globale (lazy initialization)
_loggers: Optional[tuple[logging.Logger, logging.Logger, DataLogger]] = None


def get_loggers() -> tuple[logging.Logger, logging.Logger, DataLogger]:
    """Retourne les loggers configurés (singleton)."""
    global _loggers
    if _loggers is None:
        _loggers = setup_logging()
    return _loggers
