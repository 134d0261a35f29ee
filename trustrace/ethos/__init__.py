"""
Ethos reputation collaborator: HTTP client, score cache, and service facade.
"""

from trustrace.ethos.cache import ScoreCache
from trustrace.ethos.client import EthosClient, is_ens_name
from trustrace.ethos.service import CredibilityStats, EthosService, UserProfile

__all__ = [
    "CredibilityStats",
    "EthosClient",
    "EthosService",
    "ScoreCache",
    "UserProfile",
    "is_ens_name",
]
