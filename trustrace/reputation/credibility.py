"""
Ethos credibility levels: the seven named bands shown next to a raw score.

These labels are independent of reputation tiers (tiers decide vote power;
levels only describe the score). Ethos scores top out at 2800.
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_CREDIBILITY_SCORE = 2800


@dataclass(frozen=True)
class CredibilityLevel:
    level: str
    color: str
    description: str


# (exclusive upper bound, level); scores at or above the last bound are Legendary
_LEVELS: tuple[tuple[float, CredibilityLevel], ...] = (
    (800, CredibilityLevel("Questionable", "red", "Low credibility score")),
    (1200, CredibilityLevel("Unknown", "orange", "Unknown credibility")),
    (1400, CredibilityLevel("Neutral", "yellow", "Neutral credibility")),
    (1600, CredibilityLevel("Known", "green", "Known credibility")),
    (1800, CredibilityLevel("Established", "blue", "Established credibility")),
    (2000, CredibilityLevel("Reputable", "purple", "Reputable credibility")),
)
_LEGENDARY = CredibilityLevel("Legendary", "indigo", "Legendary credibility")


def get_credibility_level(score: float) -> CredibilityLevel:
    for upper, level in _LEVELS:
        if score < upper:
            return level
    return _LEGENDARY
