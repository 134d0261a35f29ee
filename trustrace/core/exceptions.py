"""
Application-level exceptions.

Every error carries a stable ``code`` so callers (UI handlers, workers) can map
failures to messages without matching on exception text.
"""

from __future__ import annotations

from typing import Any


class TrustRaceError(Exception):
    """Base class for all TrustRace errors."""

    code = "trustrace_error"

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, **self.details}


class InvalidVoteAmount(TrustRaceError):
    """Vote amount is negative, non-finite, not a number, or outside casting bounds."""

    code = "invalid_vote_amount"


class InsufficientCredibility(TrustRaceError):
    """Credibility score is below the tier required for an action."""

    code = "insufficient_credibility"


class EthosAPIError(TrustRaceError):
    """Ethos API request failed (transport error or non-2xx response)."""

    code = "ethos_api_error"


class ENSResolutionError(EthosAPIError):
    """An ENS name could not be resolved to an address."""

    code = "ens_resolution_error"
