"""
Unit-safe angle value type.

An ``Angle`` stores one canonical scalar in radians.  Degrees only appear
at the edges: through ``Angle.from_degrees`` on the way in and the
``degrees`` property on the way out, so solver code never mixes units.

Classes:
    Angle: Immutable angle stored in radians.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Angle:
    """An immutable planar angle.

    Attributes:
        radians: The angle in radians (canonical storage).
    """

    radians: float = 0.0

    @classmethod
    def from_radians(cls, value: float) -> "Angle":
        """Create an angle from a value in radians."""
        return cls(float(value))

    @classmethod
    def from_degrees(cls, value: float) -> "Angle":
        """Create an angle from a value in degrees."""
        return cls(math.radians(float(value)))

    @property
    def degrees(self) -> float:
        """The angle converted to degrees."""
        return math.degrees(self.radians)

    def __neg__(self) -> "Angle":
        return Angle(-self.radians)

    def __add__(self, other: "Angle") -> "Angle":
        return Angle(self.radians + other.radians)

    def __sub__(self, other: "Angle") -> "Angle":
        return Angle(self.radians - other.radians)

    def __mul__(self, scalar: float) -> "Angle":
        return Angle(self.radians * float(scalar))

    __rmul__ = __mul__

    def __float__(self) -> float:
        return self.radians

    def __str__(self) -> str:
        return f"{self.degrees:.2f}°"
