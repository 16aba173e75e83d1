"""
Axis-angle rotation matrices (Rodrigues' formula).

Functions:
    from_axis_angle: Build the 3x3 rotation matrix for a unit axis and angle.
    rotate: Apply a rotation matrix to a ``Vector3``.
"""

from __future__ import annotations

import numpy as np

from armik.geometry.angle import Angle
from armik.geometry.vector import Vector3


def _skew(axis: np.ndarray) -> np.ndarray:
    """Return the cross-product matrix ``[axis]x`` so that ``[a]x @ v == a x v``.

    Args:
        axis: Array of shape ``(3,)``.

    Returns:
        Skew-symmetric array of shape ``(3, 3)``.
    """
    ax, ay, az = axis
    return np.array(
        [
            [0.0, -az, ay],
            [az, 0.0, -ax],
            [-ay, ax, 0.0],
        ],
        dtype=np.float64,
    )


def from_axis_angle(axis: Vector3, angle: Angle) -> np.ndarray:
    """Return the matrix rotating by *angle* about *axis* (right-hand rule).

    Implements ``R = I cos(t) + sin(t) [axis]x + (1 - cos(t)) axis axis^T``.
    *axis* must already be unit length; it is deliberately not renormalised,
    so a non-unit axis yields a matrix that is not a rotation.

    Args:
        axis: Unit rotation axis.
        angle: Rotation angle.

    Returns:
        Float64 array of shape ``(3, 3)``.
    """
    a = axis.as_array()
    c = np.cos(angle.radians)
    s = np.sin(angle.radians)
    return c * np.eye(3) + s * _skew(a) + (1.0 - c) * np.outer(a, a)


def rotate(matrix: np.ndarray, v: Vector3) -> Vector3:
    """Return ``matrix @ v`` as a new vector."""
    return Vector3.from_array(matrix @ v.as_array())
