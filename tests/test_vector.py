"""Tests for armik.geometry.vector."""

import math

import numpy as np
import pytest

from armik.errors import DegenerateVector
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


class TestVector3:
    def test_from_array_round_trip(self):
        v = Vector3.from_array(np.array([1.5, -2.0, 3.25]))
        assert v == Vector3(1.5, -2.0, 3.25)
        np.testing.assert_array_equal(v.as_array(), [1.5, -2.0, 3.25])

    def test_from_array_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            Vector3.from_array([1.0, 2.0])

    def test_operators(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-1.0, 0.5, 2.0)
        assert a + b == Vector3(0.0, 2.5, 5.0)
        assert a - b == Vector3(2.0, 1.5, 1.0)
        assert a * 2.0 == Vector3(2.0, 4.0, 6.0)
        assert 2.0 * a == a * 2.0
        assert a / 2.0 == Vector3(0.5, 1.0, 1.5)
        assert -a == Vector3(-1.0, -2.0, -3.0)

    def test_is_immutable(self):
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_approx_equal_tolerance(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert v.approx_equal(Vector3(1.0 + 5e-6, 2.0, 3.0 - 5e-6))
        assert not v.approx_equal(Vector3(1.0 + 2e-5, 2.0, 3.0))

    def test_with_x_and_str(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert v.with_x(0.0) == Vector3(0.0, 2.0, 3.0)
        assert str(v) == "[1.0, 2.0, 3.0]"


def test_dot_and_cross_follow_right_hand_rule():
    assert dot(Vector3(1.0, 2.0, 3.0), Vector3(4.0, -5.0, 6.0)) == pytest.approx(12.0)
    assert cross(X_AXIS, Y_AXIS) == Z_AXIS
    assert cross(Y_AXIS, Z_AXIS) == X_AXIS
    assert cross(Z_AXIS, X_AXIS) == Y_AXIS


def test_magnitude():
    assert magnitude(Vector3(3.0, 4.0, 12.0)) == pytest.approx(13.0)
    assert magnitude(ZERO) == 0.0


def test_normalize_returns_unit_vector():
    unit = normalize(Vector3(0.0, -150.0, 0.0))
    assert unit.approx_equal(Vector3(0.0, -1.0, 0.0))
    assert magnitude(normalize(Vector3(2.0, -7.0, 1.5))) == pytest.approx(1.0)


@pytest.mark.parametrize("v", [ZERO, Vector3(1e-14, 0.0, -1e-14)])
def test_normalize_degenerate_raises(v):
    assert is_zero(v)
    with pytest.raises(DegenerateVector):
        normalize(v)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (X_AXIS, X_AXIS, 0.0),
        (X_AXIS, Y_AXIS, math.pi / 2),
        (X_AXIS, -X_AXIS, math.pi),
        (Vector3(0.0, -1.0, 0.0), X_AXIS, math.pi / 2),
        (Vector3(1.0, 1.0, 0.0), Vector3(5.0, 0.0, 0.0), math.pi / 4),
    ],
)
def test_angle_between(a, b, expected):
    assert angle_between(a, b) == pytest.approx(expected)


def test_angle_between_clamps_round_off():
    # Nearly identical vectors whose normalised dot can exceed 1.0 by an ulp
    a = Vector3(0.1, 0.2, 0.3)
    b = Vector3(0.1, 0.2, 0.3) * 3.0
    angle = angle_between(a, b)
    assert not math.isnan(angle)
    assert angle == pytest.approx(0.0, abs=1e-7)


def test_sign_discriminator():
    assert sign(X_AXIS, Vector3(1.0, 5.0, 0.0)) == 1.0
    assert sign(X_AXIS, Vector3(-1.0, 5.0, 0.0)) == -1.0
    # Perpendicular counts as positive
    assert sign(X_AXIS, Y_AXIS) == 1.0


def test_sign_degenerate_raises():
    with pytest.raises(DegenerateVector):
        sign(ZERO, X_AXIS)


def test_is_parallel_uses_tolerance():
    assert is_parallel(X_AXIS, Vector3(2.0, 0.0, 0.0))
    assert is_parallel(X_AXIS, -X_AXIS)
    assert is_parallel(X_AXIS, Vector3(1.0, 1e-6, 0.0))
    assert not is_parallel(X_AXIS, Vector3(1.0, 1e-3, 0.0))


def test_decompose_splits_along_and_perpendicular():
    v = Vector3(3.0, 4.0, 5.0)
    along, perpendicular = decompose(v, Vector3(2.0, 0.0, 0.0))
    assert along.approx_equal(Vector3(3.0, 0.0, 0.0))
    assert perpendicular.approx_equal(Vector3(0.0, 4.0, 5.0))
    assert project_onto(v, Z_AXIS).approx_equal(Vector3(0.0, 0.0, 5.0))
