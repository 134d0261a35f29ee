"""
Core utilities: exceptions shared by the engine, contest rules and Ethos client.
"""

from trustrace.core.exceptions import (
    ENSResolutionError,
    EthosAPIError,
    InsufficientCredibility,
    InvalidVoteAmount,
    TrustRaceError,
)

__all__ = [
    "ENSResolutionError",
    "EthosAPIError",
    "InsufficientCredibility",
    "InvalidVoteAmount",
    "TrustRaceError",
]
