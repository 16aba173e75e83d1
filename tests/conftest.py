"""Shared fixtures for the armik test suite."""

import pytest

from armik.kinematics.configs import ArmGeometry


@pytest.fixture
def geometry() -> ArmGeometry:
    """The 100/100 demo arm with a 25 unit minimum reach."""
    return ArmGeometry(l1=100.0, l2=100.0, min_dist=25.0)


@pytest.fixture
def unit_geometry() -> ArmGeometry:
    """A unit-scale arm with a shorter forearm."""
    return ArmGeometry(l1=1.0, l2=0.7, min_dist=0.4)


@pytest.fixture
def long_forearm() -> ArmGeometry:
    """An arm whose forearm is twice the upper arm, so the elbow can fold back."""
    return ArmGeometry(l1=0.5, l2=1.0, min_dist=0.5)
