"""
Arm configuration and the closed-form inverse-kinematics solver.
"""

from armik.kinematics.arm_ik import ArmIK, JointAngles, clamp_goal, compute
from armik.kinematics.configs import ArmGeometry

__all__ = ["ArmGeometry", "ArmIK", "JointAngles", "clamp_goal", "compute"]
