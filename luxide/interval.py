"""Closed numeric intervals on the real line."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar


@dataclass(frozen=True)
class Interval:
    """An interval between ``minimum`` and ``maximum``."""

    minimum: float
    maximum: float

    EMPTY: ClassVar[Interval]
    UNIVERSE: ClassVar[Interval]

    @classmethod
    def from_intervals(cls, a: Interval, b: Interval) -> Interval:
        """Return the smallest interval enclosing both ``a`` and ``b``."""
        return cls(min(a.minimum, b.minimum), max(a.maximum, b.maximum))

    def size(self) -> float:
        return self.maximum - self.minimum

    def expand(self, delta: float) -> Interval:
        """Grow the interval by ``delta`` in total, half on each side."""
        padding = delta / 2.0
        return Interval(self.minimum - padding, self.maximum + padding)

    def contains_including(self, x: float) -> bool:
        """True if ``x`` lies inside the interval or on its bounds."""
        return self.minimum <= x <= self.maximum

    def contains_excluding(self, x: float) -> bool:
        """True if ``x`` lies strictly inside the interval."""
        return self.minimum < x < self.maximum

    def clamp(self, x: float) -> float:
        if x < self.minimum:
            return self.minimum
        if x > self.maximum:
            return self.maximum
        return x

    def __add__(self, other: object) -> Interval:
        if not isinstance(other, Real):
            return NotImplemented
        return Interval(self.minimum + other, self.maximum + other)

    def __radd__(self, other: object) -> Interval:
        return self.__add__(other)

    def __sub__(self, other: object) -> Interval:
        if not isinstance(other, Real):
            return NotImplemented
        return Interval(self.minimum - other, self.maximum - other)


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)