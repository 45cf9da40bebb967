"""Random number source built on the Mersenne Twister."""

from __future__ import annotations

import random as _random
from typing import Optional

from .mathutil import Vector2, Vector3


class Random:
    """Seedable generator of floats, ints and vectors in given ranges."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._generator = _random.Random()
        self.reseed(seed)

    def reseed(self, seed: Optional[int] = None) -> None:
        """Seed with ``seed``, or from system entropy when it is None."""
        self._generator.seed(seed)

    def get_float(self) -> float:
        """Return a float in [0, 1)."""
        return self.get_float_range(0.0, 1.0)

    def get_float_range(self, low: float, high: float) -> float:
        """Return a float in [low, high); exactly ``low`` when they are equal."""
        if low > high:
            raise ValueError(f"empty range: {low} > {high}")
        return low + (high - low) * self._generator.random()

    def get_int_range(self, low: int, high: int) -> int:
        """Return an int in the closed range [low, high]."""
        if low > high:
            raise ValueError(f"empty range: {low} > {high}")
        return self._generator.randint(low, high)

    def get_vector2(self, low: Vector2, high: Vector2) -> Vector2:
        """Return a vector with each component between those of the bounds."""
        r = Vector2(self.get_float(), self.get_float())
        return low + (high - low) * r

    def get_vector3(self, low: Vector3, high: Vector3) -> Vector3:
        """Return a vector with each component between those of the bounds."""
        r = Vector3(self.get_float(), self.get_float(), self.get_float())
        return low + (high - low) * r