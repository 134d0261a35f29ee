"""
Vote aggregator: weight raw votes by voter tier and measure trust confidence.

weighted = sum(amount * vote_power(voter_score))
trust confidence = round(weighted from voters >= creator minimum / weighted * 100), 0 if no weight.
Breakdown buckets votes per tier (curator first); bucket weights sum to the total.

Amounts must be finite and >= 0; anything else raises InvalidVoteAmount before
any arithmetic. Scores are not validated: out-of-range scores classify like any
other number (negatives are observers).
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from trustrace.core.exceptions import InvalidVoteAmount
from trustrace.reputation.tiers import (
    REPUTATION_TIERS,
    TIER_DISPLAY_ORDER,
    ReputationTier,
    TierName,
    get_tier_from_score,
)
from trustrace.trustrace_logging import get_logger

logger = get_logger(__name__)

HIGH_TRUST_MIN = 70
MEDIUM_TRUST_MIN = 40

LABEL_HIGH_TRUST = "High Trust"
LABEL_MEDIUM_TRUST = "Medium Trust"
LABEL_LOW_TRUST = "Low Trust"


@dataclass(frozen=True)
class Vote:
    voter_score: float
    amount: float

    @classmethod
    def from_dict(cls, item: Mapping[str, Any]) -> "Vote":
        """Build from {"voterScore": ..., "amount": ...} or {"voter_score": ..., "amount": ...}."""
        score = item["voterScore"] if "voterScore" in item else item["voter_score"]
        return cls(voter_score=score, amount=item["amount"])


VoteLike = Union[Vote, Mapping[str, Any], tuple]


@dataclass(frozen=True)
class TrustLabel:
    label: str
    color: str


@dataclass(frozen=True)
class TierBreakdown:
    tier: ReputationTier
    vote_count: int
    weighted_votes: float
    percentage: int


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (2.5 -> 3), unlike builtin round()."""
    return int(math.floor(value + 0.5))


def validate_amount(amount: Any) -> float:
    """Return amount as float; raise InvalidVoteAmount if not a finite number >= 0."""
    if isinstance(amount, bool):
        raise InvalidVoteAmount("Vote amount must be a number", amount=amount)
    try:
        value = float(amount)
    except (TypeError, ValueError) as e:
        raise InvalidVoteAmount("Vote amount must be a number", amount=amount) from e
    if not math.isfinite(value):
        raise InvalidVoteAmount("Vote amount must be finite", amount=amount)
    if value < 0:
        raise InvalidVoteAmount("Vote amount must not be negative", amount=amount)
    return value


def _to_vote(item: VoteLike) -> Vote:
    if isinstance(item, Vote):
        vote = item
    elif isinstance(item, Mapping):
        vote = Vote.from_dict(item)
    else:
        voter_score, amount = item
        vote = Vote(voter_score=voter_score, amount=amount)
    return Vote(voter_score=vote.voter_score, amount=validate_amount(vote.amount))


def normalize_votes(votes: Iterable[VoteLike]) -> list[Vote]:
    """Convert tuples/mappings to Vote and validate every amount."""
    return [_to_vote(v) for v in votes]


def _weight(vote: Vote) -> float:
    return vote.amount * get_tier_from_score(vote.voter_score).vote_power


def calculate_weighted_votes(votes: Iterable[VoteLike]) -> float:
    """Sum of amount * vote power. Empty input -> 0."""
    return sum((_weight(v) for v in normalize_votes(votes)), 0.0)


def calculate_trust_confidence(votes: Iterable[VoteLike]) -> int:
    """
    Share (0-100) of weighted votes cast by voters at creator tier or above.

    The established threshold is the creator tier's min_score. Returns 0 when
    there are no votes or the total weight is 0.
    """
    normalized = normalize_votes(votes)
    if not normalized:
        return 0

    established_min = REPUTATION_TIERS[TierName.CREATOR].min_score
    total_weighted = sum(_weight(v) for v in normalized)
    established_weighted = sum(
        _weight(v) for v in normalized if v.voter_score >= established_min
    )
    confidence = round_half_up(established_weighted / total_weighted * 100) if total_weighted > 0 else 0

    logger.debug(
        "trust_confidence_result",
        vote_count=len(normalized),
        total_weighted=total_weighted,
        established_weighted=established_weighted,
        confidence=confidence,
    )
    return confidence


def get_trust_confidence_label(confidence: float) -> TrustLabel:
    if confidence >= HIGH_TRUST_MIN:
        return TrustLabel(LABEL_HIGH_TRUST, "#34D399")
    if confidence >= MEDIUM_TRUST_MIN:
        return TrustLabel(LABEL_MEDIUM_TRUST, "#FBBF24")
    return TrustLabel(LABEL_LOW_TRUST, "#F87171")


def get_vote_breakdown_by_tier(votes: Iterable[VoteLike]) -> list[TierBreakdown]:
    """
    Per-tier vote count, weighted votes and share of the total, curator first.

    All four tiers are always present. Percentages are rounded independently,
    so they may sum to 100 +/- 3.
    """
    normalized = normalize_votes(votes)
    counts: dict[TierName, int] = {name: 0 for name in TIER_DISPLAY_ORDER}
    weights: dict[TierName, float] = {name: 0.0 for name in TIER_DISPLAY_ORDER}
    for vote in normalized:
        tier = get_tier_from_score(vote.voter_score)
        counts[tier.name] += 1
        weights[tier.name] += vote.amount * tier.vote_power

    total_weighted = sum(weights.values())
    breakdown = [
        TierBreakdown(
            tier=REPUTATION_TIERS[name],
            vote_count=counts[name],
            weighted_votes=weights[name],
            percentage=round_half_up(weights[name] / total_weighted * 100) if total_weighted > 0 else 0,
        )
        for name in TIER_DISPLAY_ORDER
    ]
    logger.debug(
        "vote_breakdown_result",
        vote_count=len(normalized),
        total_weighted=total_weighted,
        percentages={b.tier.name.value: b.percentage for b in breakdown},
    )
    return breakdown
