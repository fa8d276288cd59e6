"""
Least-compared selector implementation.

Selects items randomly but prioritizes those that appear least often in the
history, so coverage stays even before any item is compared many more times
than the others.
"""

from collections.abc import Sequence, Set

from typing_extensions import override

from ..interfaces import RandomSource, Selector
from ..logging_config import get_logger
from ..models import Matchup

# Module-level logger
logger = get_logger("least_compared_selector")


class LeastComparedSelector(Selector):
    """Selector that prioritizes items with fewer comparisons."""

    def __init__(self, source: RandomSource):
        """Initialize least-compared selector.

        Args:
            source: Random source used to break ties within a bucket
        """
        self.source = source

    def _least_compared(self, counts: dict[str, int], exclude: str | None = None) -> list[str]:
        """Return the sorted items sharing the lowest comparison count."""
        candidates = {item: count for item, count in counts.items() if item != exclude}
        lowest = min(candidates.values())
        return sorted(item for item, count in candidates.items() if count == lowest)

    @override
    def select_matchup(self, items: Set[str], history: Sequence[Matchup] = ()) -> Matchup | None:
        """Return matchup drawn from the least-compared items."""
        if len(items) < 2:
            logger.debug("Insufficient items for matchup")
            return None

        counts = dict.fromkeys(items, 0)
        for matchup in history:
            for item in (matchup.winning, matchup.losing):
                if item in counts:
                    counts[item] += 1

        first = self.source.choice(self._least_compared(counts))
        second = self.source.choice(self._least_compared(counts, exclude=first))

        logger.debug(f"Selected least-compared matchup: {first} ({counts[first]}) vs {second} ({counts[second]})")
        return Matchup(winning=first, losing=second)
