"""Tests for armik.kinematics.configs."""

import pytest

from armik.errors import ArmIKError, InvalidGeometry
from armik.kinematics.configs import ArmGeometry


def test_defaults_match_demo_arm():
    geometry = ArmGeometry()
    assert (geometry.l1, geometry.l2, geometry.min_dist) == (100.0, 100.0, 25.0)
    assert geometry.reach == 200.0


def test_min_dist_may_span_full_range():
    assert ArmGeometry(l1=1.0, l2=2.0, min_dist=0.0).min_dist == 0.0
    assert ArmGeometry(l1=1.0, l2=2.0, min_dist=3.0).min_dist == 3.0


@pytest.mark.parametrize(
    "l1, l2, min_dist",
    [
        (0.0, 100.0, 25.0),
        (-1.0, 100.0, 25.0),
        (100.0, 0.0, 25.0),
        (100.0, -5.0, 25.0),
        (100.0, 100.0, -0.1),
        (100.0, 100.0, 200.5),
        (float("nan"), 100.0, 25.0),
    ],
)
def test_invalid_geometry_rejected(l1, l2, min_dist):
    with pytest.raises(InvalidGeometry):
        ArmGeometry(l1=l1, l2=l2, min_dist=min_dist)


def test_invalid_geometry_is_value_error():
    with pytest.raises(ValueError):
        ArmGeometry(l1=-1.0)
    assert issubclass(InvalidGeometry, ArmIKError)


def test_geometry_is_frozen():
    geometry = ArmGeometry()
    with pytest.raises(AttributeError):
        geometry.l1 = 50.0


def test_fold_reach_is_link_difference():
    assert ArmGeometry(l1=1.0, l2=0.5, min_dist=0.0).fold_reach == 0.5
    assert ArmGeometry(l1=0.5, l2=1.0, min_dist=0.0).fold_reach == 0.5
    assert ArmGeometry().fold_reach == 0.0
