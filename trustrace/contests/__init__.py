"""
Contest rules: form validation, phases, and permission gates.
"""

from trustrace.contests.rules import (
    ContestValidation,
    check_can_create_contest,
    check_can_submit,
    check_vote_amount,
    get_contest_phase,
    validate_contest_data,
)

__all__ = [
    "ContestValidation",
    "check_can_create_contest",
    "check_can_submit",
    "check_vote_amount",
    "get_contest_phase",
    "validate_contest_data",
]
