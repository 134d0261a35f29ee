"""
Reputation tiers: map an Ethos credibility score to a tier and vote power.

Four fixed bands partition the score axis with no gaps:
observer [0, 799] 0.5x, voter [800, 1399] 1x, creator [1400, 1999] 2x,
curator [2000, inf) 3x. Classification checks minimums from the highest tier
down, so any score below 800 (including negatives) is an observer.
Every threshold used elsewhere (permissions, trust confidence) is read from
REPUTATION_TIERS.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class TierName(str, Enum):
    OBSERVER = "observer"
    VOTER = "voter"
    CREATOR = "creator"
    CURATOR = "curator"


@dataclass(frozen=True)
class ReputationTier:
    """
    One reputation band.

    Display fields (display_name, icon, colors) are for presentation only;
    permissions are descriptive labels and are not enforced here.
    """

    name: TierName
    display_name: str
    icon: str
    min_score: float
    max_score: float  # inclusive; math.inf for the top tier
    vote_power: float
    permissions: tuple[str, ...]
    color: str
    bg_color: str
    glow_color: str

    def contains(self, score: float) -> bool:
        """True if score falls inside this tier's inclusive range."""
        return self.min_score <= score <= self.max_score


REPUTATION_TIERS: Mapping[TierName, ReputationTier] = MappingProxyType({
    TierName.OBSERVER: ReputationTier(
        name=TierName.OBSERVER,
        display_name="Observer",
        icon="👁️",
        min_score=0,
        max_score=799,
        vote_power=0.5,
        permissions=("Browse contests", "Vote with 0.5x power"),
        color="#9CA3AF",
        bg_color="rgba(156, 163, 175, 0.1)",
        glow_color="rgba(156, 163, 175, 0.3)",
    ),
    TierName.VOTER: ReputationTier(
        name=TierName.VOTER,
        display_name="Voter",
        icon="🗳️",
        min_score=800,
        max_score=1399,
        vote_power=1.0,
        permissions=("Vote with 1x power", "Submit to contests", "View analytics"),
        color="#60A5FA",
        bg_color="rgba(96, 165, 250, 0.1)",
        glow_color="rgba(96, 165, 250, 0.3)",
    ),
    TierName.CREATOR: ReputationTier(
        name=TierName.CREATOR,
        display_name="Creator",
        icon="✍️",
        min_score=1400,
        max_score=1999,
        vote_power=2.0,
        permissions=("Create contests", "Vote with 2x power", "Featured in Trusted Creators"),
        color="#34D399",
        bg_color="rgba(52, 211, 153, 0.1)",
        glow_color="rgba(52, 211, 153, 0.3)",
    ),
    TierName.CURATOR: ReputationTier(
        name=TierName.CURATOR,
        display_name="Curator",
        icon="⭐",
        min_score=2000,
        max_score=math.inf,
        vote_power=3.0,
        permissions=(
            "Vote with 3x power",
            "Feature other contests",
            "Gold badge",
            "Top Curators leaderboard",
        ),
        color="#FBBF24",
        bg_color="rgba(251, 191, 36, 0.1)",
        glow_color="rgba(251, 191, 36, 0.4)",
    ),
})

# Progression order (lowest first) and display ranking (highest first)
TIER_ORDER: tuple[TierName, ...] = (
    TierName.OBSERVER,
    TierName.VOTER,
    TierName.CREATOR,
    TierName.CURATOR,
)
TIER_DISPLAY_ORDER: tuple[TierName, ...] = tuple(reversed(TIER_ORDER))


@dataclass(frozen=True)
class TierProgress:
    progress: float  # 0-100
    next_tier: ReputationTier | None
    points_needed: float


def get_tier(name: TierName | str) -> ReputationTier:
    """Look up a tier by enum member or name string ("creator")."""
    return REPUTATION_TIERS[TierName(name)]


def get_tier_from_score(score: float) -> ReputationTier:
    """Return the highest tier whose minimum the score reaches; observer otherwise."""
    for name in TIER_DISPLAY_ORDER:
        tier = REPUTATION_TIERS[name]
        if score >= tier.min_score:
            return tier
    return REPUTATION_TIERS[TierName.OBSERVER]


def get_vote_power(score: float) -> float:
    return get_tier_from_score(score).vote_power


def can_create_contest(score: float) -> bool:
    return score >= REPUTATION_TIERS[TierName.CREATOR].min_score


def can_submit(score: float) -> bool:
    return score >= REPUTATION_TIERS[TierName.VOTER].min_score


def is_curator(score: float) -> bool:
    return score >= REPUTATION_TIERS[TierName.CURATOR].min_score


def get_next_tier(tier: ReputationTier) -> ReputationTier | None:
    """Next tier in progression order, or None for the top tier."""
    index = TIER_ORDER.index(tier.name)
    if index + 1 >= len(TIER_ORDER):
        return None
    return REPUTATION_TIERS[TIER_ORDER[index + 1]]


def get_progress_to_next_tier(score: float) -> TierProgress:
    """
    Progress through the current tier toward the next one.

    Curator is terminal: progress 100, no next tier, 0 points needed.
    Otherwise progress = (score - current.min) / (next.min - current.min) * 100,
    capped at 100, and points_needed = next.min - score.
    """
    current = get_tier_from_score(score)
    next_tier = get_next_tier(current)
    if next_tier is None:
        return TierProgress(progress=100, next_tier=None, points_needed=0)

    points_in_current_tier = score - current.min_score
    tier_range = next_tier.min_score - current.min_score
    progress = min(100, points_in_current_tier / tier_range * 100)
    points_needed = next_tier.min_score - score
    return TierProgress(progress=progress, next_tier=next_tier, points_needed=points_needed)
