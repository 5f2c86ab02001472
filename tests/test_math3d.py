import math

import numpy as np
import pytest

from mathanim.core.math3d import (
    OUT,
    RIGHT,
    UP,
    angle_of_vector,
    clamp,
    ease_in_out_cubic,
    ease_in_quad,
    ease_out_bounce,
    is_valid_duration,
    linear,
    normalize,
    rotate_vector,
    rotation_matrix,
    rush_from,
    rush_into,
    smooth,
    there_and_back,
)


@pytest.mark.parametrize(
    "rate_func",
    [linear, smooth, rush_into, rush_from, ease_in_quad, ease_in_out_cubic, ease_out_bounce],
)
def test_rate_functions_fix_endpoints(rate_func):
    assert abs(rate_func(0.0)) < 1e-12
    assert abs(rate_func(1.0) - 1.0) < 1e-12


def test_smooth_is_symmetric():
    assert abs(smooth(0.5) - 0.5) < 1e-12
    assert abs(smooth(0.25) + smooth(0.75) - 1.0) < 1e-12


def test_there_and_back():
    assert there_and_back(0.0) == 0.0
    assert abs(there_and_back(0.5) - 1.0) < 1e-12
    assert abs(there_and_back(1.0)) < 1e-12


def test_clamp():
    assert clamp(-1.0, 0.0, 1.0) == 0.0
    assert clamp(2.0, 0.0, 1.0) == 1.0
    assert clamp(0.3, 0.0, 1.0) == 0.3


def test_is_valid_duration():
    assert is_valid_duration(1.0, 300.0)
    assert is_valid_duration(300.0, 300.0)
    assert not is_valid_duration(0.0, 300.0)
    assert not is_valid_duration(-1.0, 300.0)
    assert not is_valid_duration(math.inf, 300.0)
    assert not is_valid_duration(math.nan, 300.0)
    assert not is_valid_duration(301.0, 300.0)
    assert not is_valid_duration(None, 300.0)


def test_rotation_about_z():
    np.testing.assert_allclose(rotate_vector(RIGHT, math.pi / 2, OUT), UP, atol=1e-12)


def test_rotation_matrix_is_orthonormal():
    matrix = rotation_matrix(0.7, np.array([1.0, 2.0, 3.0]))
    np.testing.assert_allclose(matrix @ matrix.T, np.identity(3), atol=1e-12)
    assert abs(np.linalg.det(matrix) - 1.0) < 1e-12


def test_zero_axis_rotation_is_identity():
    np.testing.assert_array_equal(rotation_matrix(1.0, np.zeros(3)), np.identity(3))


def test_normalize():
    np.testing.assert_allclose(normalize(np.array([3.0, 4.0, 0.0])), [0.6, 0.8, 0.0])
    np.testing.assert_array_equal(normalize(np.zeros(3)), np.zeros(3))
    np.testing.assert_array_equal(normalize(np.zeros(3), fall_back=RIGHT), RIGHT)


def test_angle_of_vector():
    assert abs(angle_of_vector(UP) - math.pi / 2) < 1e-12
