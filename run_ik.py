#!/usr/bin/env python3
"""
Command-line demo for the ArmIK solver.

Sweeps one component of the wrist goal across a range, solves every sample
with a fixed twist, and prints the four joint angles in degrees.  Run
directly with ``python run_ik.py`` or call ``main`` with an argument list.

Usage examples::

    # Default sweep: goal.y from -200 to -100 with a 45 degree twist
    python run_ik.py

    # Single solve with solver traces
    python run_ik.py --goal 0 -150 0 --twist 0 --steps 1 --trace

    # Sweep x on a longer forearm
    python run_ik.py --l2 140 --sweep-axis x --start -50 --stop 50
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

import numpy as np

from armik.errors import ArmIKError
from armik.geometry.angle import Angle
from armik.geometry.vector import Vector3
from armik.kinematics.arm_ik import ArmIK, JointAngles
from armik.kinematics.configs import ArmGeometry
from armik.utils.constants import (
    DEFAULT_GOAL,
    DEFAULT_LOWER_LENGTH,
    DEFAULT_MIN_DISTANCE,
    DEFAULT_SWEEP_AXIS,
    DEFAULT_SWEEP_START,
    DEFAULT_SWEEP_STEPS,
    DEFAULT_SWEEP_STOP,
    DEFAULT_TWIST_DEG,
    DEFAULT_UPPER_LENGTH,
)

_AXIS_INDEX = {"x": 0, "y": 1, "z": 2}

# ======================================================================
# Sweep
# ======================================================================


def _build_goals(args: argparse.Namespace) -> List[Vector3]:
    """Return the goal samples described by the CLI arguments.

    Args:
        args: Namespace from ``argparse``.

    Returns:
        One goal per step, with the sweep component replaced.
    """
    index = _AXIS_INDEX[args.sweep_axis]
    goals = []
    for value in np.linspace(args.start, args.stop, args.steps):
        components = list(args.goal)
        components[index] = float(value)
        goals.append(Vector3.from_array(components))
    return goals


def format_angles(angles: JointAngles) -> str:
    """Render joint angles as degrees with two decimals.

    Args:
        angles: Solved joint angles.

    Returns:
        A line such as ``θ0: 0.00°, θ1: 48.59°, θ2: 0.00°, θ3: 82.82°``.
    """
    return ", ".join(
        f"θ{i}: {value:.2f}°" for i, value in enumerate(angles.as_degrees())
    )


def _run_sweep(solver: ArmIK, twist: Angle, goals: Sequence[Vector3], trace: bool) -> None:
    """Solve and print every goal in *goals*.

    Args:
        solver: Solver bound to the arm geometry.
        twist: Twist applied to every sample.
        goals: Goal samples in sweep order.
        trace: Forward solver traces to the log.
    """
    for goal in goals:
        angles = solver.perform(twist, goal, trace=trace)
        print(format_angles(angles))


# ======================================================================
# CLI
# ======================================================================


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list; ``sys.argv[1:]`` when *None*.

    Returns:
        Parsed ``argparse.Namespace``.
    """
    parser = argparse.ArgumentParser(description="ArmIK goal sweep")
    parser.add_argument("--l1", type=float, default=DEFAULT_UPPER_LENGTH)
    parser.add_argument("--l2", type=float, default=DEFAULT_LOWER_LENGTH)
    parser.add_argument("--min-dist", type=float, default=DEFAULT_MIN_DISTANCE)
    parser.add_argument(
        "--twist", type=float, default=DEFAULT_TWIST_DEG, help="twist in degrees"
    )
    parser.add_argument(
        "--goal",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=list(DEFAULT_GOAL),
    )
    parser.add_argument("--sweep-axis", choices=list(_AXIS_INDEX), default=DEFAULT_SWEEP_AXIS)
    parser.add_argument("--start", type=float, default=DEFAULT_SWEEP_START)
    parser.add_argument("--stop", type=float, default=DEFAULT_SWEEP_STOP)
    parser.add_argument("--steps", type=int, default=DEFAULT_SWEEP_STEPS)
    parser.add_argument("--trace", action="store_true", help="log solver internals")
    args = parser.parse_args(argv)
    if args.steps < 1:
        parser.error("--steps must be at least 1")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sweep and return a process exit status.

    Args:
        argv: Argument list; ``sys.argv[1:]`` when *None*.

    Returns:
        0 on success, 1 when the geometry or a goal is rejected.
    """
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.trace else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        geometry = ArmGeometry(l1=args.l1, l2=args.l2, min_dist=args.min_dist)
        solver = ArmIK(geometry)
        twist = Angle.from_degrees(args.twist)
        print(f"Arm: l1={geometry.l1}, l2={geometry.l2}, min_dist={geometry.min_dist}")
        print(f"Twist: {twist} | Sweep: {args.sweep_axis} {args.start} -> {args.stop}")
        print("-" * 60)
        _run_sweep(solver, twist, _build_goals(args), args.trace)
    except ArmIKError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
