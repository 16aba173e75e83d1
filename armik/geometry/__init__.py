"""
3-D geometry primitives for the solver.

Provides the ``Vector3`` value type with its algebra, the unit-safe
``Angle`` wrapper, and Rodrigues axis-angle rotation matrices.
"""

from armik.geometry.angle import Angle
from armik.geometry.rotation import from_axis_angle, rotate
from armik.geometry.vector import (
    X_AXIS,
    Y_AXIS,
    Z_AXIS,
    ZERO,
    Vector3,
    angle_between,
    cross,
    decompose,
    dot,
    is_parallel,
    is_zero,
    magnitude,
    normalize,
    project_onto,
    sign,
)

__all__ = [
    "Angle",
    "Vector3",
    "X_AXIS",
    "Y_AXIS",
    "Z_AXIS",
    "ZERO",
    "angle_between",
    "cross",
    "decompose",
    "dot",
    "from_axis_angle",
    "is_parallel",
    "is_zero",
    "magnitude",
    "normalize",
    "project_onto",
    "rotate",
    "sign",
]
