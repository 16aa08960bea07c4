"""Angles expressed in degrees or radians."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class AngleUnit(Enum):
    DEGREES = "degrees"
    RADIANS = "radians"


@dataclass(frozen=True)
class Angle:
    """An angle remembering the unit it was given in."""

    unit: AngleUnit
    value: float

    @classmethod
    def degrees(cls, value: float) -> Angle:
        return cls(AngleUnit.DEGREES, float(value))

    @classmethod
    def radians(cls, value: float) -> Angle:
        return cls(AngleUnit.RADIANS, float(value))

    def as_radians(self) -> float:
        if self.unit is AngleUnit.DEGREES:
            return self.value * (math.pi / 180.0)
        return self.value

    def as_degrees(self) -> float:
        if self.unit is AngleUnit.RADIANS:
            return self.value * (180.0 / math.pi)
        return self.value

    def to_dict(self) -> dict[str, float]:
        """Serialise as a single-key mapping such as ``{"degrees": 90.0}``."""
        return {self.unit.value: self.value}

    @classmethod
    def from_dict(cls, data: Any) -> Angle:
        """Parse the mapping produced by :meth:`to_dict`."""
        if not isinstance(data, dict) or len(data) != 1:
            raise ValueError("an angle must be a mapping with exactly one key")
        ((key, value),) = data.items()
        try:
            unit = AngleUnit(key)
        except ValueError:
            raise ValueError(f"unknown angle unit: {key!r}") from None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"angle value must be a number, got {value!r}")
        return cls(unit, float(value))