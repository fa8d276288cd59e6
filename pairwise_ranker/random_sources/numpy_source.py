"""
NumPy random source.

Uses a ``numpy.random.Generator`` for draws.
"""

from collections.abc import Sequence
from typing import TypeVar

import numpy as np
from typing_extensions import override

from ..interfaces import RandomSource

T = TypeVar("T")


class NumpyRandomSource(RandomSource):
    """Uniform choice backed by ``numpy.random.default_rng``."""

    def __init__(self, seed: int | None = None):
        """
        Initialize numpy random source.

        Args:
            seed: Random seed for reproducible results (None = OS entropy)
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    @override
    def choice(self, options: Sequence[T]) -> T:
        """Return a uniformly random element of ``options``."""
        if not options:
            raise IndexError("Cannot choose from an empty sequence")
        # Draw an index so the element keeps its Python type
        index = int(self._rng.integers(len(options)))
        return options[index]
