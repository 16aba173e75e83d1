"""
Closed-form inverse kinematics for a 4-DOF two-link arm.

Given the arm geometry, a commanded twist of the bend plane about the
shoulder-to-wrist axis, and a wrist goal measured from the shoulder, the
solver returns shoulder pitch (``theta0``), shoulder roll (``theta1``),
upper-arm twist (``theta2``) and elbow flex (``theta3``).

Frame conventions: the shoulder is the origin, shoulder pitch turns about
+X, and the zero-pitch arm hangs along -Y.  The returned angles compose as::

    R     = Rx(theta0) @ Rz(-theta1) @ Rx(theta2)
    elbow = R @ (l1, 0, 0)
    wrist = elbow + R @ Rz(-theta3) @ (l2, 0, 0)

Each call is a fixed sequence of algebraic and trigonometric steps with no
shared state, so ``compute`` is safe to call from any number of threads.

Classes:
    JointAngles: The four solved joint angles.
    ArmIK: Convenience object binding a geometry to the solver.

Functions:
    clamp_goal: Pull a goal into the reachable shell of the arm.
    compute: Solve the joint angles for a twist and goal.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

import numpy as np

from armik.errors import DegenerateGoal
from armik.geometry.angle import Angle
from armik.geometry.rotation import from_axis_angle, rotate
from armik.geometry.vector import (
    X_AXIS,
    Y_AXIS,
    Z_AXIS,
    Vector3,
    angle_between,
    cross,
    is_parallel,
    is_zero,
    magnitude,
    normalize,
    sign,
)
from armik.kinematics.configs import ArmGeometry
from armik.utils.constants import ZERO_TOLERANCE
from armik.utils.helpers import safe_acos

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JointAngles:
    """Solved joint angles of the arm.

    Attributes:
        theta0: Shoulder pitch.
        theta1: Shoulder roll.
        theta2: Upper-arm twist.
        theta3: Elbow flex, in [0, pi].
    """

    theta0: Angle
    theta1: Angle
    theta2: Angle
    theta3: Angle

    def map(self, fn: Callable[[Angle], Angle]) -> "JointAngles":
        """Return a new ``JointAngles`` with *fn* applied to every angle.

        Args:
            fn: Function from ``Angle`` to ``Angle``.

        Returns:
            The transformed joint angles.
        """
        return JointAngles(
            theta0=fn(self.theta0),
            theta1=fn(self.theta1),
            theta2=fn(self.theta2),
            theta3=fn(self.theta3),
        )

    def as_radians(self) -> Tuple[float, float, float, float]:
        return (
            self.theta0.radians,
            self.theta1.radians,
            self.theta2.radians,
            self.theta3.radians,
        )

    def as_degrees(self) -> Tuple[float, float, float, float]:
        return (
            self.theta0.degrees,
            self.theta1.degrees,
            self.theta2.degrees,
            self.theta3.degrees,
        )

    def as_array(self) -> np.ndarray:
        """Return the angles in radians as a float64 array of shape ``(4,)``."""
        return np.array(self.as_radians(), dtype=np.float64)


# ----------------------------------------------------------------------
# Reachability
# ----------------------------------------------------------------------


def _as_vector(goal: Vector3 | Sequence[float] | np.ndarray) -> Vector3:
    """Coerce *goal* to a ``Vector3``."""
    if isinstance(goal, Vector3):
        return goal
    return Vector3.from_array(goal)


def _clamp(geometry: ArmGeometry, goal: Vector3) -> Tuple[Vector3, Vector3, float]:
    """Clamp *goal* into the reachable shell along its own direction.

    The shell runs from ``max(min_dist, |l1 - l2|)`` to ``l1 + l2``.  A
    goal inside ``|l1 - l2|`` cannot be reached even with the elbow folded
    shut, so it is pushed out to the folded distance.

    Args:
        geometry: Arm dimensions.
        goal: Requested wrist position relative to the shoulder.

    Returns:
        Tuple ``(goal, unit, distance)`` after clamping.  ``distance`` is
        exactly the violated bound when clamping happened.

    Raises:
        DegenerateGoal: If *goal* is the zero vector or has a non-finite
            component.
    """
    if not np.all(np.isfinite(goal.as_array())):
        raise DegenerateGoal(f"Goal {goal} has a non-finite component")
    distance = magnitude(goal)
    if distance == 0.0:
        raise DegenerateGoal(f"Goal {goal} coincides with the shoulder")
    unit = goal / distance
    inner = max(geometry.min_dist, geometry.fold_reach)
    if distance < inner:
        logger.debug("Goal %s closer than %g; clamping", goal, inner)
        return unit * inner, unit, inner
    if distance > geometry.reach:
        logger.debug("Goal %s beyond reach %g; clamping", goal, geometry.reach)
        return unit * geometry.reach, unit, geometry.reach
    return goal, unit, distance


def clamp_goal(geometry: ArmGeometry, goal: Vector3 | Sequence[float]) -> Vector3:
    """Return *goal* pulled into the reachable shell of *geometry*.

    Goals nearer than ``max(min_dist, |l1 - l2|)`` are pushed out to it and
    goals beyond ``l1 + l2`` are pulled in to it.  The direction is
    unchanged.  Clamping is silent input correction, not an error.

    Args:
        geometry: Arm dimensions.
        goal: Requested wrist position relative to the shoulder.

    Returns:
        The (possibly) clamped goal.

    Raises:
        DegenerateGoal: If *goal* is the zero vector or not finite.
    """
    clamped, _, _ = _clamp(geometry, _as_vector(goal))
    return clamped


# ----------------------------------------------------------------------
# Angle helpers
# ----------------------------------------------------------------------


def _pitch_angle(v: Vector3) -> float:
    """Return the signed angle from -Y to *v*'s yz-projection about +X.

    A vector lying on the pitch axis has no pitch; 0.0 is returned.
    """
    proj = v.with_x(0.0)
    if is_zero(proj):
        return 0.0
    pitch_sign = 1.0
    if abs(proj.z) > ZERO_TOLERANCE:
        pitch_sign = sign(cross(-Y_AXIS, proj), X_AXIS)
    return angle_between(proj, -Y_AXIS) * pitch_sign


def _elbow_flex(geometry: ArmGeometry, distance: float) -> float:
    """Exterior elbow angle from the law of cosines."""
    l1, l2 = geometry.l1, geometry.l2
    cosine = (distance * distance - l1 * l1 - l2 * l2) / (-2.0 * l1 * l2)
    return math.pi - safe_acos(cosine)


def _elbow_offsets(geometry: ArmGeometry, distance: float) -> Tuple[float, float]:
    """Split the upper arm into offsets along and across the shoulder-wrist line.

    Heron's formula gives the area of the shoulder-elbow-wrist triangle and
    hence its height over the shoulder-wrist side; Pythagoras gives the
    remaining along-line part of the upper arm.  The along-line offset is
    negative when the shoulder's interior angle is obtuse.

    Args:
        geometry: Arm dimensions.
        distance: Shoulder-to-wrist distance, in ``(0, l1 + l2)``.

    Returns:
        Tuple ``(along, across)`` with ``along**2 + across**2 == l1**2``.
    """
    l1, l2 = geometry.l1, geometry.l2
    half_perimeter = 0.5 * (l1 + l2 + distance)
    area_sq = max(
        half_perimeter
        * (half_perimeter - l1)
        * (half_perimeter - l2)
        * (half_perimeter - distance),
        0.0,
    )
    across_sq = 4.0 * area_sq / (distance * distance)
    along = math.sqrt(max(l1 * l1 - across_sq, 0.0))
    if l1 * l1 + distance * distance < l2 * l2:
        along = -along
    return along, math.sqrt(across_sq)


# ----------------------------------------------------------------------
# Branch solvers
# ----------------------------------------------------------------------


def _solve_extended(twist: Angle, goal: Vector3, unit: Vector3) -> JointAngles:
    """Solve the straight-arm case: no bend, so the twist passes through."""
    theta1 = angle_between(unit, X_AXIS)
    theta0 = _pitch_angle(goal)
    return JointAngles(
        theta0=Angle(theta0),
        theta1=Angle(theta1),
        theta2=twist,
        theta3=Angle(0.0),
    )


def _solve_bent(
    geometry: ArmGeometry,
    twist: Angle,
    goal: Vector3,
    unit: Vector3,
    distance: float,
    trace: bool,
) -> JointAngles:
    """Solve the case where the elbow is bent (``distance < l1 + l2``).

    Args:
        geometry: Arm dimensions.
        twist: Commanded twist of the bend plane about the goal axis.
        goal: Clamped wrist goal.
        unit: Unit vector along *goal*.
        distance: Magnitude of *goal*.
        trace: Log intermediate quantities at DEBUG level.

    Returns:
        The solved joint angles.
    """
    theta3 = _elbow_flex(geometry, distance)
    along, across = _elbow_offsets(geometry, distance)
    u = unit * along

    # Untwisted bend direction: the reference axis projected off the goal line
    reference = Y_AXIS if is_parallel(unit, X_AXIS) else X_AXIS
    v_hat = normalize(cross(cross(unit, reference), unit))
    v0 = v_hat * across
    elbow0 = u + v0

    # Which of the two mirror-image roll solutions the elbow falls on
    goal_proj = unit.with_x(0.0)
    roll_sign = 1.0 if is_zero(goal_proj) else sign(goal_proj, elbow0)

    twist_matrix = from_axis_angle(unit, twist)
    v = rotate(twist_matrix, v0)
    elbow = u + v

    # Normal of the shoulder-elbow-wrist plane, i.e. normalize(goal x elbow);
    # stays defined when the arm folds flat onto the goal line.
    bend_normal = normalize(cross(unit, rotate(twist_matrix, v_hat)))

    # Elbow axis before the upper-arm twist is applied
    if is_zero(elbow.with_x(0.0)):
        axis1 = Z_AXIS * roll_sign
    else:
        axis1 = normalize(cross(elbow, X_AXIS)) * roll_sign

    if axis1.approx_equal(bend_normal):
        theta2 = 0.0
    else:
        turn = cross(axis1, bend_normal)
        twist_sign = 1.0 if is_zero(turn) else sign(turn, elbow)
        theta2 = angle_between(axis1, bend_normal) * twist_sign

    theta1 = angle_between(elbow, X_AXIS) * roll_sign

    theta0 = _pitch_angle(elbow)
    if roll_sign < 0.0:
        # Elbow above the shoulder mirrors the pitch rotation
        theta0 += math.pi

    if trace:
        logger.debug(
            "d=%g u=%s v0=%s elbow0=%s roll_sign=%+g",
            distance, u, v0, elbow0, roll_sign,
        )
        logger.debug("elbow=%s bend_normal=%s axis1=%s", elbow, bend_normal, axis1)

    return JointAngles(
        theta0=Angle(theta0),
        theta1=Angle(theta1),
        theta2=Angle(theta2),
        theta3=Angle(theta3),
    )


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------


def compute(
    geometry: ArmGeometry,
    twist: Angle,
    goal: Vector3 | Sequence[float] | np.ndarray,
    trace: bool = False,
) -> JointAngles:
    """Solve the joint angles placing the wrist at *goal* with *twist*.

    The goal is first clamped into ``[min_dist, l1 + l2]``.  At full
    extension the elbow is straight: ``theta3`` is zero and ``theta2``
    is *twist* itself.

    Args:
        geometry: Arm dimensions.
        twist: Rotation of the bend plane about the shoulder-wrist axis.
        goal: Wrist position relative to the shoulder.
        trace: Log intermediate quantities at DEBUG level.

    Returns:
        The four joint angles.

    Raises:
        DegenerateGoal: If *goal* is the zero vector or not finite.
    """
    target, unit, distance = _clamp(geometry, _as_vector(goal))
    if distance < geometry.reach:
        angles = _solve_bent(geometry, twist, target, unit, distance, trace)
    else:
        angles = _solve_extended(twist, target, unit)
    if trace:
        logger.debug("goal=%s twist=%s -> %s", target, twist, angles)
    return angles


class ArmIK:
    """Inverse-kinematics solver bound to one arm geometry.

    Attributes:
        geometry: The arm dimensions used for every solve.
    """

    def __init__(self, geometry: ArmGeometry | None = None) -> None:
        """Initialise the solver.

        Args:
            geometry: Arm dimensions; the demo arm is used when *None*.
        """
        self.geometry = geometry if geometry is not None else ArmGeometry()

    @classmethod
    def from_lengths(cls, l1: float, l2: float, min_dist: float) -> "ArmIK":
        """Create a solver from raw link lengths and minimum distance."""
        return cls(ArmGeometry(l1=l1, l2=l2, min_dist=min_dist))

    def perform(
        self,
        twist: Angle,
        goal: Vector3 | Sequence[float] | np.ndarray,
        trace: bool = False,
    ) -> JointAngles:
        """Solve for *goal* and *twist*; see :func:`compute`."""
        return compute(self.geometry, twist, goal, trace=trace)
