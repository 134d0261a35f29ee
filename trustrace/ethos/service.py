"""
Ethos service: cached scores and credibility stats for an address.

Combines the Ethos client with the score cache and the reputation tier table.
Vote power reported here is the tier multiplier, the same value the vote
aggregator applies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from trustrace.core.exceptions import EthosAPIError
from trustrace.ethos.cache import ScoreCache
from trustrace.ethos.client import EthosClient
from trustrace.reputation.credibility import get_credibility_level
from trustrace.reputation.tiers import ReputationTier, can_create_contest, get_tier_from_score
from trustrace.trustrace_logging import bind_address


@dataclass(frozen=True)
class UserProfile:
    address: str
    credibility_score: float
    vouches_received: int
    vouches_given: int
    attestations: int
    name: str = ""
    bio: str = ""
    avatar: str = ""


@dataclass(frozen=True)
class CredibilityStats:
    score: float
    level: str
    tier: ReputationTier
    vote_power: float
    can_create_contest: bool
    vouches_received: int
    vouches_given: int
    attestations: int


def _profile_score(data: dict[str, Any]) -> float | None:
    """Numeric score from a profile payload, or None when the profile has none."""
    for key in ("credibilityScore", "score"):
        score = data.get(key)
        if isinstance(score, (int, float)) and not isinstance(score, bool):
            return score
    return None


class EthosService:
    def __init__(self, client: EthosClient | None = None, cache: ScoreCache | None = None) -> None:
        self.client = client if client is not None else EthosClient()
        self.cache = cache if cache is not None else ScoreCache()

    def get_score(self, address: str) -> float:
        """Credibility score, served from cache while fresh."""
        log = bind_address(address)
        cached = self.cache.get(address)
        if cached is not None:
            log.debug("score_cache_hit", score=cached)
            return cached
        score = self.client.get_credibility_score(address)
        self.cache.set(address, score)
        log.debug("score_cache_miss", score=score)
        return score

    def get_user_profile(self, address: str) -> UserProfile:
        data = self.client.get_user_profile(address)
        vouches = self.client.get_user_vouches(address)
        attestations = self.client.get_user_attestations(address)
        details = data.get("profile") or {}
        score = _profile_score(data)
        if score is not None:
            self.cache.set(address, score)
        return UserProfile(
            address=address,
            credibility_score=score if score is not None else 0,
            vouches_received=len(vouches),
            vouches_given=int(data.get("vouchesGiven") or 0),
            attestations=len(attestations),
            name=details.get("name") or "",
            bio=details.get("bio") or "",
            avatar=details.get("avatar") or "",
        )

    def batch_get_user_profiles(self, addresses: Iterable[str]) -> list[UserProfile]:
        """Profiles for every address that loads; failed lookups are logged and skipped."""
        profiles: list[UserProfile] = []
        for address in addresses:
            try:
                profiles.append(self.get_user_profile(address))
            except EthosAPIError as e:
                bind_address(address).warning("profile_batch_lookup_failed", error=str(e))
        return profiles

    def check_credibility_requirement(self, address: str, minimum_score: float) -> bool:
        """True if the address scores at least minimum_score; False if it does not or the lookup fails."""
        try:
            score = self.get_score(address)
        except EthosAPIError as e:
            bind_address(address).warning(
                "credibility_requirement_check_failed",
                minimum_score=minimum_score,
                error=str(e),
            )
            return False
        return score >= minimum_score

    def get_credibility_stats(self, address: str) -> CredibilityStats:
        profile = self.get_user_profile(address)
        score = profile.credibility_score
        tier = get_tier_from_score(score)
        stats = CredibilityStats(
            score=score,
            level=get_credibility_level(score).level,
            tier=tier,
            vote_power=tier.vote_power,
            can_create_contest=can_create_contest(score),
            vouches_received=profile.vouches_received,
            vouches_given=profile.vouches_given,
            attestations=profile.attestations,
        )
        bind_address(address).info(
            "credibility_stats_built",
            score=score,
            tier=tier.name.value,
            level=stats.level,
        )
        return stats

    def clear_cache_for_address(self, address: str) -> None:
        self.cache.invalidate(address)
