"""
Standard library random source.

Wraps a private ``random.Random`` so seeding never touches global state.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

from typing_extensions import override

from ..interfaces import RandomSource

T = TypeVar("T")


class StdlibRandomSource(RandomSource):
    """Uniform choice backed by ``random.Random``."""

    def __init__(self, seed: int | None = None):
        """
        Initialize stdlib random source.

        Args:
            seed: Random seed for reproducible results (None = OS entropy)
        """
        self.seed = seed
        self._random = random.Random(seed)

    @override
    def choice(self, options: Sequence[T]) -> T:
        """Return a uniformly random element of ``options``."""
        return self._random.choice(options)
