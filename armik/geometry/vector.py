"""
3-D vector algebra on an immutable ``Vector3`` value type.

The named functions (``dot``, ``cross``, ``normalize``, ...) are the
load-bearing API used by the solver; the operator overloads on
``Vector3`` are shorthand for scaling and summing offsets.  Arithmetic is
delegated to NumPy so the conventions (right-handed cross product, float64
precision) match the rest of the numerical stack.

Classes:
    Vector3: Immutable (x, y, z) triple.

Functions:
    dot: Scalar product.
    cross: Right-handed vector product.
    magnitude: Euclidean length.
    is_zero: Whether a vector is too short to carry a direction.
    normalize: Unit vector in the same direction.
    angle_between: Unsigned angle in [0, pi].
    sign: +1/-1 orientation discriminator.
    is_parallel: Tolerance-based parallelism test.
    project_onto: Component of one vector along another.
    decompose: Split a vector into along/perpendicular components.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from armik.errors import DegenerateVector
from armik.utils.constants import PARALLEL_TOLERANCE, ZERO_TOLERANCE
from armik.utils.helpers import safe_acos


@dataclass(frozen=True)
class Vector3:
    """An immutable 3-D vector of double-precision components.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> "Vector3":
        """Build a vector from any length-3 sequence or array.

        Args:
            values: Three numeric components.

        Returns:
            A new ``Vector3``.

        Raises:
            ValueError: If *values* does not hold exactly three entries.
        """
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape[0] != 3:
            raise ValueError(f"Expected 3 components, got {arr.shape[0]}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        """Return the components as a float64 array of shape ``(3,)``."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def with_x(self, x: float) -> "Vector3":
        """Return a copy with the x component replaced."""
        return Vector3(x, self.y, self.z)

    def approx_equal(self, other: "Vector3", tol: float = PARALLEL_TOLERANCE) -> bool:
        """Return True when every component differs by less than *tol*.

        Args:
            other: Vector to compare against.
            tol: Per-component absolute tolerance.

        Returns:
            Whether the two vectors coincide within *tol*.
        """
        return (
            abs(self.x - other.x) < tol
            and abs(self.y - other.y) < tol
            and abs(self.z - other.z) < tol
        )

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3.from_array(self.as_array() + other.as_array())

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3.from_array(self.as_array() - other.as_array())

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3.from_array(self.as_array() * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3":
        return self * (1.0 / float(scalar))

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}, {self.z}]"


# Unit axes and the origin
X_AXIS = Vector3(1.0, 0.0, 0.0)
Y_AXIS = Vector3(0.0, 1.0, 0.0)
Z_AXIS = Vector3(0.0, 0.0, 1.0)
ZERO = Vector3(0.0, 0.0, 0.0)


def dot(a: Vector3, b: Vector3) -> float:
    """Return the scalar product of *a* and *b*."""
    return float(np.dot(a.as_array(), b.as_array()))


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Return the right-handed vector product ``a x b``.

    ``cross(X_AXIS, Y_AXIS) == Z_AXIS``; the rotation matrices in
    ``armik.geometry.rotation`` follow the same handedness.
    """
    return Vector3.from_array(np.cross(a.as_array(), b.as_array()))


def magnitude(v: Vector3) -> float:
    """Return the Euclidean length of *v*."""
    return math.sqrt(dot(v, v))


def is_zero(v: Vector3) -> bool:
    """Return True when *v* is too short to define a direction."""
    return magnitude(v) <= ZERO_TOLERANCE


def normalize(v: Vector3) -> Vector3:
    """Return the unit vector pointing the same way as *v*.

    Args:
        v: Vector to normalise.

    Returns:
        ``v / magnitude(v)``.

    Raises:
        DegenerateVector: When the magnitude of *v* is within
            ``ZERO_TOLERANCE`` of zero.
    """
    length = magnitude(v)
    if length <= ZERO_TOLERANCE:
        raise DegenerateVector(f"Cannot normalise vector {v} of length {length:g}")
    return v / length


def angle_between(a: Vector3, b: Vector3) -> float:
    """Return the unsigned angle between *a* and *b* in [0, pi].

    The cosine is clamped to [-1, 1] before ``acos`` so nearly parallel
    inputs do not produce NaN.

    Raises:
        DegenerateVector: If either vector is (near) zero.
    """
    return safe_acos(dot(normalize(a), normalize(b)))


def sign(a: Vector3, b: Vector3) -> float:
    """Return +1.0 if *a* and *b* point into the same half-space, else -1.0.

    Perpendicular vectors (a zero dot product) yield +1.0.  This is an
    orientation test, not an angle.

    Raises:
        DegenerateVector: If either vector is (near) zero.
    """
    return 1.0 if dot(normalize(a), normalize(b)) >= 0.0 else -1.0


def is_parallel(a: Vector3, b: Vector3, tol: float = PARALLEL_TOLERANCE) -> bool:
    """Return True when ``|a x b|`` is below *tol*.

    Antiparallel vectors count as parallel.  The test is on the raw cross
    product, so callers comparing directions should pass unit vectors.
    """
    return magnitude(cross(a, b)) < tol


def project_onto(v: Vector3, onto: Vector3) -> Vector3:
    """Return the component of *v* along *onto*.

    Raises:
        DegenerateVector: If *onto* is (near) zero.
    """
    unit = normalize(onto)
    return unit * dot(v, unit)


def decompose(v: Vector3, onto: Vector3) -> Tuple[Vector3, Vector3]:
    """Split *v* into components along and perpendicular to *onto*.

    Args:
        v: Vector to split.
        onto: Reference direction (any non-zero length).

    Returns:
        Tuple ``(along, perpendicular)`` with ``along + perpendicular == v``.
    """
    along = project_onto(v, onto)
    return along, v - along
