# daily_challenges/main.py
# Application FastAPI : cycle de vie, gestionnaires d'erreurs et routes.

from contextlib import asynccontextmanager

from fastapi import FastAPI

from daily_challenges.api.routes import routers
from daily_challenges.core.exception_handlers import register_exception_handlers
from daily_challenges.core.logging_config import get_loggers
from daily_challenges.core.settings import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- startup ---
    logger, _, _ = get_loggers()
    settings = get_settings()
    logger.info(
        "%s %s started (environment=%s, data_file=%s)",
        settings.app_name,
        settings.api_version,
        settings.environment,
        settings.data_file,
    )

    yield  # l'app tourne ici

    # --- shutdown ---
    logger.info("%s stopped", settings.app_name)


def create_app() -> FastAPI:
    """Construit l'application (routes + gestionnaires d'exceptions)."""
    settings = get_settings()
    app = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=lifespan)
    register_exception_handlers(app)

    for r in routers:
        app.include_router(r)
    return app


app = create_app()
