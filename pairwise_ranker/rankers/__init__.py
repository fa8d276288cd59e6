"""
Ranker implementations.

Provides implementations of the Ranker interface for deriving item ratings
from the matchup history.

Available implementations:
- EloRanker: Elo rating fold with a session-wide K-factor
"""

from .elo_ranker import DEFAULT_RATING, EloRanker, expected_score, sort_ratings

__all__ = ["DEFAULT_RATING", "EloRanker", "expected_score", "sort_ratings"]
