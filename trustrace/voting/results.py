"""
Weighted contest results: rank submissions and summarise who decided them.

Submissions are ranked by credibility-weighted votes (not raw votes). The
summary pools every voter of every submission to report the overall tier
breakdown and trust confidence.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from trustrace.reputation.tiers import ReputationTier, get_tier_from_score
from trustrace.trustrace_logging import get_logger
from trustrace.voting.aggregator import (
    TierBreakdown,
    TrustLabel,
    Vote,
    calculate_trust_confidence,
    calculate_weighted_votes,
    get_trust_confidence_label,
    get_vote_breakdown_by_tier,
)

logger = get_logger(__name__)

DEFAULT_TOP_SUPPORTERS = 5


@dataclass(frozen=True)
class Voter:
    address: str
    score: float
    amount: float
    ens: str | None = None

    @property
    def vote(self) -> Vote:
        return Vote(voter_score=self.score, amount=self.amount)

    @property
    def display_name(self) -> str:
        """ENS name if known, else shortened address (0x1234...abcd)."""
        if self.ens:
            return self.ens
        return f"{self.address[:6]}...{self.address[-4:]}"


@dataclass(frozen=True)
class Submission:
    id: str
    submitter: str
    submitter_score: float
    raw_votes: float = 0
    voters: tuple[Voter, ...] = ()
    title: str | None = None

    @classmethod
    def from_dict(cls, item: Mapping[str, Any]) -> "Submission":
        """Build from a stored submission dict (camelCase keys as written by the web app)."""
        voters = tuple(
            Voter(
                address=v["address"],
                score=v["score"],
                amount=v["amount"],
                ens=v.get("ens"),
            )
            for v in item.get("voters") or []
        )
        return cls(
            id=str(item["id"]),
            submitter=item["submitter"],
            submitter_score=item.get("submitterScore") or 0,
            raw_votes=item.get("rawVotes") or 0,
            voters=voters,
            title=item.get("title"),
        )

    @property
    def votes(self) -> list[Vote]:
        return [v.vote for v in self.voters]


@dataclass(frozen=True)
class RankedSubmission:
    submission: Submission
    rank: int  # 1-based
    weighted_votes: float
    trust_confidence: int


@dataclass(frozen=True)
class Supporter:
    voter: Voter
    tier: ReputationTier
    vote_power: float


@dataclass(frozen=True)
class ResultsSummary:
    winner: RankedSubmission | None
    ranked: list[RankedSubmission] = field(default_factory=list)
    breakdown: list[TierBreakdown] = field(default_factory=list)
    confidence: int = 0
    confidence_label: TrustLabel | None = None


def rank_submissions(submissions: Iterable[Submission]) -> list[RankedSubmission]:
    """Sort by weighted votes, highest first; ties keep input order."""
    scored = [
        (sub, calculate_weighted_votes(sub.votes), calculate_trust_confidence(sub.votes))
        for sub in submissions
    ]
    scored.sort(key=lambda row: row[1], reverse=True)
    return [
        RankedSubmission(submission=sub, rank=i, weighted_votes=weighted, trust_confidence=confidence)
        for i, (sub, weighted, confidence) in enumerate(scored, start=1)
    ]


def top_supporters(submission: Submission, limit: int = DEFAULT_TOP_SUPPORTERS) -> list[Supporter]:
    """Highest-scoring voters of a submission, with their tier and vote power."""
    ordered = sorted(submission.voters, key=lambda v: v.score, reverse=True)
    supporters = []
    for voter in ordered[: max(0, limit)]:
        tier = get_tier_from_score(voter.score)
        supporters.append(Supporter(voter=voter, tier=tier, vote_power=tier.vote_power))
    return supporters


def summarize_results(submissions: Iterable[Submission]) -> ResultsSummary:
    """
    Rank submissions and compute the pooled tier breakdown and trust confidence.

    With no submissions the winner is None, the breakdown is empty and
    confidence is 0.
    """
    subs = list(submissions)
    ranked = rank_submissions(subs)
    if not ranked:
        return ResultsSummary(winner=None)

    all_votes = [vote for sub in subs for vote in sub.votes]
    breakdown = get_vote_breakdown_by_tier(all_votes)
    confidence = calculate_trust_confidence(all_votes)
    label = get_trust_confidence_label(confidence)

    winner = ranked[0]
    logger.info(
        "contest_results_summarized",
        submissions=len(ranked),
        winner_id=winner.submission.id,
        winner_weighted_votes=winner.weighted_votes,
        confidence=confidence,
        confidence_label=label.label,
    )
    return ResultsSummary(
        winner=winner,
        ranked=ranked,
        breakdown=breakdown,
        confidence=confidence,
        confidence_label=label,
    )
