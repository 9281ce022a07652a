"""Sources of random status values."""

import random
from abc import ABC, abstractmethod


class Randomizer(ABC):
    """Produces random floating-point values."""

    @abstractmethod
    def random_float(self, low: float, high: float) -> float:
        """Return a random value in the half-open range [low, high)."""


class StandardRandomizer(Randomizer):
    """Uniform randomizer backed by a Mersenne Twister."""

    def __init__(self, seed=None) -> None:
        self._rng = random.Random(seed)

    def random_float(self, low: float, high: float) -> float:
        return low + (high - low) * self._rng.random()