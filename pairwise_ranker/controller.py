"""
Session controller for pairwise ranking.

Single owner of the session state. Routes input events to the pure
transitions in ``session`` and builds the view consumed by a front-end.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from loguru import Logger

from . import session
from .exceptions import ConfigurationError
from .group_selectors import LeastComparedSelector, RandomSelector
from .interfaces import ItemStatistics, RandomSource, Ranker, Selector
from .logging_config import get_logger
from .models import Matchup
from .random_sources import NumpyRandomSource, StdlibRandomSource
from .rankers import DEFAULT_RATING, EloRanker, expected_score, sort_ratings
from .session import DEFAULT_K_FACTOR, SessionState

SELECTORS = ("random", "least-compared")
RANDOM_SOURCES = ("stdlib", "numpy")


@dataclass
class SessionConfig:
    """Configuration for a ranking session."""

    k_factor: float = DEFAULT_K_FACTOR  # starting K-factor
    default_rating: float = DEFAULT_RATING  # rating before any comparison
    k_step: float = 1.0  # size of one K-factor adjustment
    seed: int | None = None  # random seed, None = OS entropy
    selector: str = "random"  # one of SELECTORS
    rng: str = "stdlib"  # one of RANDOM_SOURCES

    def __post_init__(self):
        """Validate configuration."""
        if not math.isfinite(self.k_factor):
            raise ConfigurationError(f"k_factor must be finite, got {self.k_factor}")
        if not math.isfinite(self.default_rating):
            raise ConfigurationError(f"default_rating must be finite, got {self.default_rating}")
        if not (math.isfinite(self.k_step) and self.k_step > 0):
            raise ConfigurationError(f"k_step must be positive, got {self.k_step}")
        if self.selector not in SELECTORS:
            raise ConfigurationError(f"selector must be one of {SELECTORS}, got {self.selector!r}")
        if self.rng not in RANDOM_SOURCES:
            raise ConfigurationError(f"rng must be one of {RANDOM_SOURCES}, got {self.rng!r}")


class Key(Enum):
    """Logical keys a front-end reports."""

    CONFIRM_FIRST = "confirm-first"
    CONFIRM_SECOND = "confirm-second"
    SUBMIT = "submit"
    OTHER = "other"


class SessionView(TypedDict):
    """Everything a front-end needs to render the session."""
    items: list[str]
    ratings: list[tuple[str, float]]
    statistics: dict[str, ItemStatistics]
    candidate: Matchup | None
    candidate_expected_score: float | None
    winning_options: list[str]
    losing_options: list[str]
    history: list[Matchup]
    k_factor: float


def build_random_source(config: SessionConfig) -> RandomSource:
    """Create the random source named by the config."""
    if config.rng == "numpy":
        return NumpyRandomSource(seed=config.seed)
    return StdlibRandomSource(seed=config.seed)


def build_selector(config: SessionConfig, source: RandomSource) -> Selector:
    """Create the selector named by the config."""
    if config.selector == "least-compared":
        return LeastComparedSelector(source)
    return RandomSelector(source)


class SessionController:
    """Main controller for a pairwise ranking session."""

    def __init__(
        self,
        config: SessionConfig | None = None,
        selector: Selector | None = None,
        ranker: Ranker | None = None,
    ):
        """Initialize controller with an empty session."""
        self.config: SessionConfig = config or SessionConfig()
        self.selector: Selector = selector or build_selector(self.config, build_random_source(self.config))
        self.ranker: Ranker = ranker or EloRanker(default_rating=self.config.default_rating)
        self.state: SessionState = SessionState(k_factor=self.config.k_factor)

        # Setup logger
        self.logger: Logger = get_logger("controller")
        self.logger.info(f"Session started with config: {self.config}")

    def _apply(self, event: str, new_state: SessionState) -> SessionState:
        """Install the next state and log what changed."""
        if new_state is self.state:
            self.logger.debug(f"{event}: no change")
            return self.state
        self.state = new_state
        self.logger.info(f"{event}: {len(new_state.items)} items, {len(new_state.history)} comparisons, candidate={self._describe(new_state.candidate)}")
        return self.state

    @staticmethod
    def _describe(candidate: Matchup | None) -> str:
        if candidate is None:
            return "none"
        return f"{candidate.winning} vs {candidate.losing}"

    def add_item(self, name: str) -> SessionState:
        """Add an item to the session."""
        return self._apply(f"add item {name!r}", session.add_item(self.state, name, self.selector))

    def adjust_k_factor(self, delta: float) -> SessionState:
        """Shift the K-factor by ``delta``."""
        return self._apply(f"adjust k-factor by {delta:+g}", session.adjust_k_factor(self.state, delta))

    def increase_k_factor(self) -> SessionState:
        """Raise the K-factor by one step."""
        return self.adjust_k_factor(self.config.k_step)

    def decrease_k_factor(self) -> SessionState:
        """Lower the K-factor by one step."""
        return self.adjust_k_factor(-self.config.k_step)

    def set_winning(self, name: str) -> SessionState:
        """Reassign the candidate's winning side."""
        return self._apply(f"set winning {name!r}", session.set_winning(self.state, name))

    def set_losing(self, name: str) -> SessionState:
        """Reassign the candidate's losing side."""
        return self._apply(f"set losing {name!r}", session.set_losing(self.state, name))

    def request_random_matchup(self) -> SessionState:
        """Replace the candidate with a new random pair."""
        return self._apply("new matchup", session.request_random_matchup(self.state, self.selector))

    def commit(self) -> SessionState:
        """Confirm the candidate as stated."""
        return self._apply("commit", session.commit(self.state, self.selector))

    def commit_swapped(self) -> SessionState:
        """Confirm that the candidate's losing side actually won."""
        return self._apply("commit swapped", session.commit_swapped(self.state, self.selector))

    def handle_key(self, key: Key, text_focused: bool, draft: str = "") -> SessionState:
        """
        Route a key press to the matching event.

        Args:
            key: Logical key pressed
            text_focused: Whether the item-name entry has focus
            draft: Current contents of the item-name entry

        Returns:
            The session state after the event
        """
        if text_focused:
            # Digits typed into the entry are text, only Enter acts
            if key is Key.SUBMIT:
                return self.add_item(draft)
            return self.state
        if key in (Key.SUBMIT, Key.CONFIRM_FIRST):
            return self.commit()
        if key is Key.CONFIRM_SECOND:
            return self.commit_swapped()
        return self.state

    def ratings(self) -> list[tuple[str, float]]:
        """Current ratings, highest first."""
        state = self.state
        return sort_ratings(self.ranker.compute_ratings(state.items, state.history, state.k_factor))

    def view(self) -> SessionView:
        """Build the render view of the current state."""
        state = self.state
        ratings = self.ratings()
        candidate = state.candidate
        items = sorted(state.items)

        expected: float | None = None
        winning_options: list[str] = []
        losing_options: list[str] = []
        if candidate is not None:
            rating_of = dict(ratings)
            expected = expected_score(rating_of[candidate.winning], rating_of[candidate.losing])
            winning_options = [item for item in items if item != candidate.losing]
            losing_options = [item for item in items if item != candidate.winning]

        return {
            "items": items,
            "ratings": ratings,
            "statistics": self.ranker.get_statistics(state.items, state.history),
            "candidate": candidate,
            "candidate_expected_score": expected,
            "winning_options": winning_options,
            "losing_options": losing_options,
            "history": list(state.history),
            "k_factor": state.k_factor,
        }
