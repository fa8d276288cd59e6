"""
Abstract base classes defining the interfaces for the pairwise ranker.

All interfaces are synchronous; a session applies one event at a time.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence, Set
from typing import TypedDict, TypeVar

from .models import Matchup

T = TypeVar("T")


class ItemStatistics(TypedDict):
    """TypedDict for per-item comparison statistics."""
    comparisons: int
    wins: int
    losses: int
    win_percentage: float


class RandomSource(ABC):
    """Interface for the external source of randomness."""

    @abstractmethod
    def choice(self, options: Sequence[T]) -> T:
        """
        Return one of ``options``, each equally likely.

        Args:
            options: Non-empty sequence to draw from
        """
        pass


class Ranker(ABC):
    """Interface for deriving ratings from a matchup history."""

    @abstractmethod
    def compute_ratings(
        self, items: Set[str], history: Sequence[Matchup], k_factor: float
    ) -> dict[str, float]:
        """
        Compute a rating for every item.

        Args:
            items: Current item set
            history: Resolved matchups, most recent first
            k_factor: Sensitivity of a single update

        Returns:
            Mapping of item name to rating, covering every item in ``items``
        """
        pass

    @abstractmethod
    def get_statistics(
        self, items: Set[str], history: Sequence[Matchup]
    ) -> dict[str, ItemStatistics]:
        """Get comparison statistics for every item."""
        pass


class Selector(ABC):
    """Interface for selecting the next matchup to compare."""

    @abstractmethod
    def select_matchup(
        self, items: Set[str], history: Sequence[Matchup] = ()
    ) -> Matchup | None:
        """
        Select two distinct items to compare.

        Args:
            items: Items to select from
            history: Resolved matchups, for selectors that balance coverage

        Returns:
            Candidate matchup, or None if fewer than two items exist
        """
        pass
