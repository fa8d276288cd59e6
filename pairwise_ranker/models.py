"""
Core dataclasses for the pairwise ranker.

Defines the Matchup model with validation and the pure item-set update.
"""

from dataclasses import dataclass

from .exceptions import ValidationError


@dataclass(frozen=True)
class Matchup:
    """An ordered pair of items: ``winning`` beat (or is offered against) ``losing``."""

    winning: str
    losing: str

    def __post_init__(self) -> None:
        """Validate matchup data."""
        if not self.winning or not self.losing:
            raise ValidationError("matchup sides cannot be empty")
        if self.winning == self.losing:
            raise ValidationError(f"item cannot be matched against itself: {self.winning!r}")

    def swapped(self) -> "Matchup":
        """Return the same pair with the sides exchanged."""
        return Matchup(winning=self.losing, losing=self.winning)


def add_item(current: frozenset[str], name: str) -> frozenset[str]:
    """
    Add an item name to a set of items.

    Empty (or whitespace-only) names and names already present leave the set
    unchanged.
    """
    name = name.strip()
    if not name or name in current:
        return current
    return current | {name}
