"""
Contest rules: creation form validation, phase timing, and action gates.

Validation returns every field error at once (for form display). Action gates
(vote amount bounds, tier permissions) raise instead, since callers stop on the
first failure.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import Any, Mapping

from trustrace.core.exceptions import InsufficientCredibility, InvalidVoteAmount
from trustrace.reputation.credibility import MAX_CREDIBILITY_SCORE
from trustrace.reputation.tiers import (
    REPUTATION_TIERS,
    TierName,
    can_create_contest,
    can_submit,
)
from trustrace.trustrace_logging import get_logger
from trustrace.voting.aggregator import validate_amount

logger = get_logger(__name__)

MAX_TITLE_LENGTH = 100
MAX_PROMPT_LENGTH = 1000
MIN_PHASE_DURATION = 3600  # seconds

MIN_VOTE_AMOUNT = 0.001  # ETH
MAX_VOTE_AMOUNT = 10.0  # ETH

PHASE_SUBMISSION = "submission"
PHASE_VOTING = "voting"
PHASE_ENDED = "ended"


@dataclass(frozen=True)
class ContestValidation:
    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)


def _parse_number(raw: Any) -> float | None:
    """Finite float from a number or numeric string; None if missing or unparsable."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_positive(raw: Any) -> float | None:
    value = _parse_number(raw)
    return value if value is not None and value > 0 else None


def _check_duration(errors: dict[str, str], data: Mapping[str, Any], key: str, label: str) -> None:
    raw = data.get(key)
    duration = _parse_number(raw)
    if duration is None and raw not in (None, ""):
        errors[key] = f"{label} duration must be a number of seconds"
    elif (duration or 0) < MIN_PHASE_DURATION:
        errors[key] = f"{label} duration must be at least 1 hour"


def validate_contest_data(data: Mapping[str, Any]) -> ContestValidation:
    """
    Validate a contest creation form.

    Expects keys: title, prompt, rewards_pool (string or number),
    submission_duration, voting_duration (seconds), min_credibility_score.
    Returns all field errors keyed by field name.
    """
    errors: dict[str, str] = {}

    title = str(data.get("title") or "")
    if not title.strip():
        errors["title"] = "Title is required"
    elif len(title) > MAX_TITLE_LENGTH:
        errors["title"] = f"Title must be less than {MAX_TITLE_LENGTH} characters"

    prompt = str(data.get("prompt") or "")
    if not prompt.strip():
        errors["prompt"] = "Prompt is required"
    elif len(prompt) > MAX_PROMPT_LENGTH:
        errors["prompt"] = f"Prompt must be less than {MAX_PROMPT_LENGTH} characters"

    if _parse_positive(data.get("rewards_pool", "")) is None:
        errors["rewards_pool"] = "Valid reward amount is required"

    _check_duration(errors, data, "submission_duration", "Submission")
    _check_duration(errors, data, "voting_duration", "Voting")

    raw_min_score = data.get("min_credibility_score")
    min_score = 0.0 if raw_min_score in (None, "") else _parse_number(raw_min_score)
    if min_score is None or min_score < 0 or min_score > MAX_CREDIBILITY_SCORE:
        errors["min_credibility_score"] = "Invalid credibility score range"

    if errors:
        logger.debug("contest_validation_failed", fields=sorted(errors))
    return ContestValidation(is_valid=not errors, errors=errors)


def get_contest_phase(
    submission_deadline: float,
    voting_deadline: float,
    now: float | None = None,
) -> str:
    """Return submission / voting / ended for unix-second deadlines."""
    if now is None:
        now = time.time()
    if now < submission_deadline:
        return PHASE_SUBMISSION
    if now < voting_deadline:
        return PHASE_VOTING
    return PHASE_ENDED


def check_vote_amount(amount: Any) -> float:
    """Validate an amount being cast: finite, and within [MIN_VOTE_AMOUNT, MAX_VOTE_AMOUNT]."""
    value = validate_amount(amount)
    if value < MIN_VOTE_AMOUNT or value > MAX_VOTE_AMOUNT:
        raise InvalidVoteAmount(
            f"Vote amount must be between {MIN_VOTE_AMOUNT} and {MAX_VOTE_AMOUNT} ETH",
            amount=value,
        )
    return value


def check_can_create_contest(score: float) -> None:
    if not can_create_contest(score):
        raise InsufficientCredibility(
            "Insufficient credibility score to create a contest",
            score=score,
            required=REPUTATION_TIERS[TierName.CREATOR].min_score,
        )


def check_can_submit(score: float) -> None:
    if not can_submit(score):
        raise InsufficientCredibility(
            "Insufficient credibility score to submit to a contest",
            score=score,
            required=REPUTATION_TIERS[TierName.VOTER].min_score,
        )
