"""
Elo ranker implementation.

Folds the matchup history oldest-first into a rating per item.
"""

from collections.abc import Mapping, Sequence, Set
from typing import TYPE_CHECKING

from typing_extensions import override

if TYPE_CHECKING:
    from loguru import Logger

from ..interfaces import ItemStatistics, Ranker
from ..logging_config import get_logger
from ..models import Matchup

DEFAULT_RATING = 1500.0


def expected_score(rating_a: float, rating_b: float) -> float:
    """
    Calculate the expected score of A against B.

    Args:
        rating_a: Rating of item A
        rating_b: Rating of item B

    Returns:
        Probability that A beats B, between 0 and 1
    """
    try:
        return 1.0 / (1.0 + 10 ** ((rating_b - rating_a) / 400))
    except OverflowError:
        # B is so far ahead that A has no chance at float precision
        return 0.0


def sort_ratings(ratings: Mapping[str, float]) -> list[tuple[str, float]]:
    """Order ratings highest first; equal ratings fall back to name order."""
    return sorted(ratings.items(), key=lambda entry: (-entry[1], entry[0]))


class EloRanker(Ranker):
    """
    Elo ranker that recomputes ratings from scratch on every call.

    Ratings are never stored. History is kept most-recent-first, so it is
    reversed before folding and early comparisons compound forward in time.
    """

    def __init__(self, default_rating: float = DEFAULT_RATING):
        """
        Initialize Elo ranker.

        Args:
            default_rating: Rating every item starts from
        """
        self.default_rating: float = default_rating
        self.logger: Logger = get_logger("elo_ranker")

    def _apply(self, ratings: dict[str, float], matchup: Matchup, k_factor: float) -> None:
        """Apply a single resolved matchup to the working ratings in place."""
        if matchup.winning not in ratings or matchup.losing not in ratings:
            self.logger.warning(f"Skipping matchup with unknown item: {matchup.winning} vs {matchup.losing}")
            return

        winner_rating = ratings[matchup.winning]
        loser_rating = ratings[matchup.losing]
        delta = k_factor * (1 - expected_score(winner_rating, loser_rating))

        ratings[matchup.winning] = winner_rating + delta
        ratings[matchup.losing] = loser_rating - delta

        self.logger.debug(
            f"{matchup.winning} beat {matchup.losing}: "
            f"{winner_rating:.2f}->{ratings[matchup.winning]:.2f}, "
            f"{loser_rating:.2f}->{ratings[matchup.losing]:.2f}"
        )

    @override
    def compute_ratings(
        self, items: Set[str], history: Sequence[Matchup], k_factor: float
    ) -> dict[str, float]:
        """Fold the history oldest-first into ratings for ``items``."""
        ratings = {item: self.default_rating for item in items}
        for matchup in reversed(history):
            self._apply(ratings, matchup, k_factor)
        return ratings

    def ranked(
        self, items: Set[str], history: Sequence[Matchup], k_factor: float
    ) -> list[tuple[str, float]]:
        """Return ``(item, rating)`` pairs, highest rating first."""
        return sort_ratings(self.compute_ratings(items, history, k_factor))

    @override
    def get_statistics(
        self, items: Set[str], history: Sequence[Matchup]
    ) -> dict[str, ItemStatistics]:
        """Count comparisons, wins and losses per item."""
        wins = dict.fromkeys(items, 0)
        losses = dict.fromkeys(items, 0)
        for matchup in history:
            if matchup.winning in wins and matchup.losing in losses:
                wins[matchup.winning] += 1
                losses[matchup.losing] += 1

        stats = dict[str, ItemStatistics]()
        for item in items:
            comparisons = wins[item] + losses[item]
            stats[item] = {
                "comparisons": comparisons,
                "wins": wins[item],
                "losses": losses[item],
                "win_percentage": (wins[item] / comparisons) * 100.0 if comparisons else 0.0,
            }
        return stats
