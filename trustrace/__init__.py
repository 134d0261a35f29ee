"""
TrustRace: credibility-weighted contest engine.

Classifies Ethos credibility scores into reputation tiers, weights contest
votes by tier, and reports how much of a result comes from established
voters. Modular layout: reputation, voting, contests, and the Ethos client.
"""

__version__ = "1.0.0"
