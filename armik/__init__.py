"""
ArmIK: closed-form inverse kinematics for a 4-DOF two-link arm.

Computes shoulder pitch, shoulder roll, upper-arm twist and elbow flex that
place the wrist of a two-segment arm at a commanded 3-D goal while honouring
a commanded twist of the bend plane about the shoulder-to-wrist axis.  The
solution is analytic (law of cosines, Heron's formula, Rodrigues rotation),
so every call is a fixed, bounded amount of arithmetic.

Modules:
    geometry: 3-D vector algebra, the ``Angle`` value type, and axis-angle
        rotation matrices.
    kinematics: Arm geometry configuration and the inverse-kinematics solver.
    utils: Shared constants, tolerances, and helper utilities.
    errors: Exception types raised by the package.
"""

from armik.errors import ArmIKError, DegenerateGoal, DegenerateVector, InvalidGeometry
from armik.geometry.angle import Angle
from armik.geometry.vector import Vector3
from armik.kinematics.arm_ik import ArmIK, JointAngles, clamp_goal, compute
from armik.kinematics.configs import ArmGeometry

__version__ = "0.1.0"

__all__ = [
    "Angle",
    "ArmGeometry",
    "ArmIK",
    "ArmIKError",
    "DegenerateGoal",
    "DegenerateVector",
    "InvalidGeometry",
    "JointAngles",
    "Vector3",
    "clamp_goal",
    "compute",
]
