"""
Random selector implementation.

Simple stateless selector: two distinct items, each draw uniform.
"""

from collections.abc import Sequence, Set
from typing_extensions import override

from ..interfaces import RandomSource, Selector
from ..models import Matchup


class RandomSelector(Selector):
    """Uniform random matchup selector."""

    def __init__(self, source: RandomSource):
        """Initialize random selector.

        Args:
            source: Random source used for both draws
        """
        self.source = source
        from ..logging_config import get_logger
        self.logger = get_logger("random_selector")

    @override
    def select_matchup(self, items: Set[str], history: Sequence[Matchup] = ()) -> Matchup | None:
        """Return a random matchup, or None if fewer than two items exist."""
        if len(items) < 2:
            self.logger.debug("Insufficient items for matchup")
            return None

        pool = sorted(items)
        first = self.source.choice(pool)
        second = self.source.choice([item for item in pool if item != first])
        matchup = Matchup(winning=first, losing=second)
        self.logger.debug(f"Selected random matchup: {first} vs {second}")
        return matchup
