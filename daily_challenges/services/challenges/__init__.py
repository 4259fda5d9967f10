# daily_challenges/services/challenges/__init__.py

from .challenge_lifecycle import create_challenge, delete_challenge, set_challenge_status
from .challenge_query import analyze, filter_by_status, list_all
from .challenge_service import ChallengeService
from .challenge_validator import ChallengeValidator
from .progress_engine import RegistrationResult, register_progress
from .stats_calculator import StatsCalculator

__all__ = [
    "ChallengeService",
    "ChallengeValidator",
    "RegistrationResult",
    "StatsCalculator",
    "analyze",
    "create_challenge",
    "delete_challenge",
    "filter_by_status",
    "list_all",
    "register_progress",
    "set_challenge_status",
]
