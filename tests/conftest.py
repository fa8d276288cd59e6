"""
Shared fixtures for the pairwise ranker tests.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

import pytest

from pairwise_ranker.controller import SessionConfig, SessionController
from pairwise_ranker.group_selectors import RandomSelector
from pairwise_ranker.interfaces import RandomSource

T = TypeVar("T")


class FirstChoiceSource(RandomSource):
    """Deterministic source that always picks the first option and records every draw."""

    def __init__(self) -> None:
        self.calls: list[list[object]] = []

    def choice(self, options: Sequence[T]) -> T:
        self.calls.append(list(options))
        return options[0]


@pytest.fixture
def first_choice_source() -> FirstChoiceSource:
    return FirstChoiceSource()


@pytest.fixture
def first_choice_selector(first_choice_source: FirstChoiceSource) -> RandomSelector:
    return RandomSelector(first_choice_source)


@pytest.fixture
def make_controller() -> Callable[..., SessionController]:
    """Factory for controllers whose matchups always pair the first two items by name."""

    def make(*items: str, k_factor: float = 40.0) -> SessionController:
        controller = SessionController(
            SessionConfig(k_factor=k_factor),
            selector=RandomSelector(FirstChoiceSource()),
        )
        for item in items:
            controller.add_item(item)
        return controller

    return make
