# daily_challenges/core/settings.py
# Configuration de l'application (variables d'environnement + fichier .env).

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === App settings ===
    app_name: str = "Daily Challenges"
    environment: str = "development"  # or "production"
    api_version: str = "0.1.0"

    # === Storage ===
    data_file: Path = Path("challenges.json")

    # === Logs ===
    logs_dir: Path = Path("logs")
    log_retention_days: int = 30

    # === Challenges ===
    default_duration_days: int = 30

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Retourne l'instance de configuration (singleton)."""
    return Settings()
