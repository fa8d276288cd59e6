"""
Selector implementations.

Provides implementations of the Selector interface for choosing which pair of
items to compare next.

Available implementations:
- RandomSelector: Uniformly random pair of distinct items
- LeastComparedSelector: Random pair drawn from the least-compared items
"""

from .random_selector import RandomSelector
from .least_compared_selector import LeastComparedSelector

__all__ = ["RandomSelector", "LeastComparedSelector"]
