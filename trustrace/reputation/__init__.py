"""
Reputation: tier classification, vote power, and Ethos credibility levels.
"""

from trustrace.reputation.credibility import (
    MAX_CREDIBILITY_SCORE,
    CredibilityLevel,
    get_credibility_level,
)
from trustrace.reputation.tiers import (
    REPUTATION_TIERS,
    TIER_DISPLAY_ORDER,
    TIER_ORDER,
    ReputationTier,
    TierName,
    TierProgress,
    can_create_contest,
    can_submit,
    get_next_tier,
    get_progress_to_next_tier,
    get_tier,
    get_tier_from_score,
    get_vote_power,
    is_curator,
)

__all__ = [
    "MAX_CREDIBILITY_SCORE",
    "REPUTATION_TIERS",
    "TIER_DISPLAY_ORDER",
    "TIER_ORDER",
    "CredibilityLevel",
    "ReputationTier",
    "TierName",
    "TierProgress",
    "can_create_contest",
    "can_submit",
    "get_credibility_level",
    "get_next_tier",
    "get_progress_to_next_tier",
    "get_tier",
    "get_tier_from_score",
    "get_vote_power",
    "is_curator",
]
