"""Pytest configuration and fixtures."""

from collections.abc import Iterable
from itertools import cycle

import pytest

from protocol_playground.models.model_named import Person, Starship


class StaticGenerator:
    """Generator stub that always returns the same value."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> int:
        self.calls += 1
        return self.value


class SequenceGenerator:
    """Generator stub that cycles through a fixed sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = cycle(list(values))

    def random(self) -> int:
        return next(self._values)


@pytest.fixture
def static_generator():
    """Factory for generators returning a fixed value."""
    return StaticGenerator


@pytest.fixture
def one_through_ten_values() -> SequenceGenerator:
    """Generator producing every value from 1 to 10 in order."""
    return SequenceGenerator(range(1, 11))


@pytest.fixture
def donna() -> Person:
    return Person(full_name="Donna Mayfield")


@pytest.fixture
def enterprise() -> Starship:
    return Starship(name="Enterprise", prefix="USS")


@pytest.fixture
def serenity() -> Starship:
    return Starship(name="Serenity")
