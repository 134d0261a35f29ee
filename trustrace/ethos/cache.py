"""
In-memory TTL cache for credibility scores, keyed by lowercased address or ENS name.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from trustrace.config.env import get_score_cache_ttl


@dataclass
class CachedScore:
    address: str
    score: float
    timestamp: float


class ScoreCache:
    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else get_score_cache_ttl()
        self._clock = clock
        self._entries: dict[str, CachedScore] = {}

    @staticmethod
    def _key(address: str) -> str:
        return address.strip().lower()

    def get(self, address: str) -> float | None:
        """Cached score, or None if missing or older than the TTL (expired entries are dropped)."""
        key = self._key(address)
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.timestamp >= self.ttl_seconds:
            del self._entries[key]
            return None
        return entry.score

    def set(self, address: str, score: float) -> None:
        """Store a score and drop every entry that has outlived the TTL."""
        now = self._clock()
        self.purge_expired(now)
        self._entries[self._key(address)] = CachedScore(address=address, score=score, timestamp=now)

    def purge_expired(self, now: float | None = None) -> int:
        """Remove expired entries; returns how many were removed."""
        if now is None:
            now = self._clock()
        expired = [key for key, entry in self._entries.items() if now - entry.timestamp >= self.ttl_seconds]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def invalidate(self, address: str) -> None:
        self._entries.pop(self._key(address), None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
