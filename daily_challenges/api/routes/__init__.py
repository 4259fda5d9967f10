# daily_challenges/api/routes/__init__.py

from .challenge_progress import router as challenge_progress_router
from .challenges import router as challenges_router
from .health import router as health_router

routers = [
    health_router,
    challenges_router,
    challenge_progress_router,
]
