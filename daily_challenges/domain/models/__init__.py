# daily_challenges/domain/models/__init__.py

from .challenge import (
    ChallengeRecord,
    ChallengeStats,
    ChallengeStatus,
    ProgressEntry,
    StatusFilter,
    challenge_index,
    ensure_unique_ids,
    find_challenge,
    next_challenge_id,
)
from .challenge_views import ChallengeDetail, ChallengeListing, ChallengeSummary

__all__ = [
    "ChallengeDetail",
    "ChallengeListing",
    "ChallengeRecord",
    "ChallengeStats",
    "ChallengeStatus",
    "ChallengeSummary",
    "ProgressEntry",
    "StatusFilter",
    "challenge_index",
    "ensure_unique_ids",
    "find_challenge",
    "next_challenge_id",
]
