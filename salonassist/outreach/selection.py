"""
Pluggable selection strategies for outreach generation.

The generator never calls ``random`` directly: offer choice and the
promotion sample go through a selector so tests can pin the outcome.
"""

import logging
import random
from typing import Optional, Protocol, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Selector(Protocol):
    def choose(self, options: Sequence[T]) -> T:
        """Pick one of ``options`` (never empty)."""
        ...

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        """Pick up to ``k`` distinct members of ``population``."""
        ...


class RandomSelector:
    """Production selector backed by ``random.Random``."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def choose(self, options: Sequence[T]) -> T:
        return self._rng.choice(options)

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        return self._rng.sample(list(population), min(k, len(population)))


class RotatingSelector:
    """Deterministic selector: cycles through options, samples from the front."""

    def __init__(self) -> None:
        self._position = 0

    def choose(self, options: Sequence[T]) -> T:
        choice = options[self._position % len(options)]
        self._position += 1
        return choice

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        return list(population)[:max(k, 0)]
