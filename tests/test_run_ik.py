"""Tests for the run_ik command-line driver."""

import pytest

import run_ik
from armik.geometry.angle import Angle
from armik.kinematics.arm_ik import JointAngles


def test_default_sweep_prints_every_sample(capsys):
    assert run_ik.main([]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    results = [line for line in lines if line.startswith("θ0:")]
    assert len(results) == 101
    assert lines[0] == "Arm: l1=100.0, l2=100.0, min_dist=25.0"


def test_single_solve(capsys):
    argv = ["--goal", "0", "-150", "0", "--twist", "0", "--steps", "1", "--start", "-150"]
    assert run_ik.main(argv) == 0
    out = capsys.readouterr().out
    assert "θ1: 48.59°" in out
    assert "θ3: 82.82°" in out


def test_format_angles():
    angles = JointAngles(
        theta0=Angle.from_degrees(0.0),
        theta1=Angle.from_degrees(90.0),
        theta2=Angle.from_degrees(45.0),
        theta3=Angle.from_degrees(0.0),
    )
    assert run_ik.format_angles(angles) == "θ0: 0.00°, θ1: 90.00°, θ2: 45.00°, θ3: 0.00°"


def test_invalid_geometry_exits_nonzero(capsys):
    assert run_ik.main(["--l1", "-5"]) == 1
    assert "error:" in capsys.readouterr().err


def test_zero_goal_exits_nonzero(capsys):
    argv = ["--goal", "0", "0", "0", "--steps", "1", "--start", "0"]
    assert run_ik.main(argv) == 1
    assert "coincides with the shoulder" in capsys.readouterr().err


def test_steps_must_be_positive():
    with pytest.raises(SystemExit):
        run_ik.main(["--steps", "0"])
