"""
Voting: credibility-weighted vote aggregation and contest results.

Modules: aggregator (weighted votes, trust confidence, tier breakdown),
results (submission ranking and pooled summary).
"""

from trustrace.voting.aggregator import (
    TierBreakdown,
    TrustLabel,
    Vote,
    calculate_trust_confidence,
    calculate_weighted_votes,
    get_trust_confidence_label,
    get_vote_breakdown_by_tier,
    normalize_votes,
    validate_amount,
)
from trustrace.voting.results import (
    RankedSubmission,
    ResultsSummary,
    Submission,
    Supporter,
    Voter,
    rank_submissions,
    summarize_results,
    top_supporters,
)

__all__ = [
    "RankedSubmission",
    "ResultsSummary",
    "Submission",
    "Supporter",
    "TierBreakdown",
    "TrustLabel",
    "Vote",
    "Voter",
    "calculate_trust_confidence",
    "calculate_weighted_votes",
    "get_trust_confidence_label",
    "get_vote_breakdown_by_tier",
    "normalize_votes",
    "rank_submissions",
    "summarize_results",
    "top_supporters",
    "validate_amount",
]
