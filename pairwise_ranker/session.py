"""
Session state and its transitions.

Every transition is a pure function: it takes the current state plus the
event's arguments and returns the next state. Invalid input degrades to
returning the state unchanged.
"""

from dataclasses import dataclass, replace

from .interfaces import Selector
from .logging_config import get_logger
from .models import Matchup, add_item as add_to_items

# Module-level logger
logger = get_logger("session")

DEFAULT_K_FACTOR = 40.0


@dataclass(frozen=True)
class SessionState:
    """Items, resolved history (most recent first), K-factor and pending candidate."""

    items: frozenset[str] = frozenset()
    history: tuple[Matchup, ...] = ()
    k_factor: float = DEFAULT_K_FACTOR
    candidate: Matchup | None = None


def add_item(state: SessionState, name: str, selector: Selector) -> SessionState:
    """Add an item; sample a candidate if none is pending."""
    items = add_to_items(state.items, name)
    if items == state.items:
        logger.debug(f"Ignoring empty or duplicate item: {name!r}")
        return state

    new_state = replace(state, items=items)
    if new_state.candidate is None:
        new_state = request_random_matchup(new_state, selector)
    return new_state


def adjust_k_factor(state: SessionState, delta: float) -> SessionState:
    """Shift the K-factor by ``delta``."""
    return replace(state, k_factor=state.k_factor + delta)


def set_winning(state: SessionState, name: str) -> SessionState:
    """Reassign the candidate's winning side unless it would equal the losing side."""
    candidate = state.candidate
    if candidate is None or name == candidate.losing or name not in state.items:
        logger.debug(f"Rejected winning side edit: {name!r}")
        return state
    return replace(state, candidate=Matchup(winning=name, losing=candidate.losing))


def set_losing(state: SessionState, name: str) -> SessionState:
    """Reassign the candidate's losing side unless it would equal the winning side."""
    candidate = state.candidate
    if candidate is None or name == candidate.winning or name not in state.items:
        logger.debug(f"Rejected losing side edit: {name!r}")
        return state
    return replace(state, candidate=Matchup(winning=candidate.winning, losing=name))


def request_random_matchup(state: SessionState, selector: Selector) -> SessionState:
    """Replace the candidate with a freshly sampled one (None below two items)."""
    return replace(state, candidate=selector.select_matchup(state.items, state.history))


def commit(state: SessionState, selector: Selector) -> SessionState:
    """Record the candidate as stated, then sample the next candidate."""
    if state.candidate is None:
        return state
    committed = replace(state, history=(state.candidate, *state.history), candidate=None)
    return request_random_matchup(committed, selector)


def commit_swapped(state: SessionState, selector: Selector) -> SessionState:
    """Record the candidate with the losing side as winner, then sample the next."""
    if state.candidate is None:
        return state
    return commit(replace(state, candidate=state.candidate.swapped()), selector)
