"""
Dataclass configuration for the two-link arm.

Classes:
    ArmGeometry: Immutable link lengths and minimum reach of the arm.
"""

from __future__ import annotations

from dataclasses import dataclass

from armik.errors import InvalidGeometry
from armik.utils.constants import (
    DEFAULT_LOWER_LENGTH,
    DEFAULT_MIN_DISTANCE,
    DEFAULT_UPPER_LENGTH,
)


@dataclass(frozen=True)
class ArmGeometry:
    """Fixed dimensions of a shoulder-elbow-wrist arm.

    Instances are validated on construction and never change afterwards,
    so one geometry can be shared freely between solver calls and threads.

    Attributes:
        l1: Upper-arm length (shoulder to elbow), strictly positive.
        l2: Lower-arm length (elbow to wrist), strictly positive.
        min_dist: Minimum allowed shoulder-to-wrist distance, in
            ``[0, l1 + l2]``.
    """

    l1: float = DEFAULT_UPPER_LENGTH
    l2: float = DEFAULT_LOWER_LENGTH
    min_dist: float = DEFAULT_MIN_DISTANCE

    def __post_init__(self) -> None:
        """Reject dimensions that cannot describe a physical arm.

        Raises:
            InvalidGeometry: If a length is not positive, ``min_dist`` is
                negative, or ``min_dist`` exceeds the full reach.
        """
        if not self.l1 > 0.0:
            raise InvalidGeometry(f"Upper-arm length must be > 0, got {self.l1}")
        if not self.l2 > 0.0:
            raise InvalidGeometry(f"Lower-arm length must be > 0, got {self.l2}")
        if not self.min_dist >= 0.0:
            raise InvalidGeometry(f"Minimum distance must be >= 0, got {self.min_dist}")
        if self.min_dist > self.reach:
            raise InvalidGeometry(
                f"Minimum distance {self.min_dist} exceeds full reach {self.reach}"
            )

    @property
    def reach(self) -> float:
        """Shoulder-to-wrist distance with the arm fully extended."""
        return self.l1 + self.l2

    @property
    def fold_reach(self) -> float:
        """Shoulder-to-wrist distance with the elbow folded shut."""
        return abs(self.l1 - self.l2)
