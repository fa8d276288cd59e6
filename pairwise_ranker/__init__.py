"""
Pairwise Ranker - Elo ranking from pairwise comparisons

Build a set of named items, compare them two at a time and derive a ranking
from the accumulated outcomes with an Elo rating fold.
"""

from .models import Matchup, add_item
from .interfaces import RandomSource, Ranker, Selector
from .session import SessionState
from .controller import Key, SessionConfig, SessionController, SessionView

__version__ = "0.1.0"
__all__ = [
    "Matchup",
    "add_item",
    "RandomSource",
    "Ranker",
    "Selector",
    "SessionState",
    "Key",
    "SessionConfig",
    "SessionController",
    "SessionView",
]
