import math

import numpy as np
import pytest

from mathanim.core.bezier import (
    bezier,
    choose,
    integer_interpolate,
    interpolate,
    partial_quadratic_bezier_points,
    quadratic_bezier_points_for_arc,
)
from mathanim.core.errors import InvalidParameterError


def test_interpolate():
    assert interpolate(0, 10, 0.5) == 5
    assert abs(interpolate(10, 20, 0.1) - 11) < 1e-12
    np.testing.assert_allclose(interpolate(np.array([0.0, 2.0]), np.array([2.0, 4.0]), 0.5), [1.0, 3.0])


def test_integer_interpolate():
    assert integer_interpolate(0, 4, 0.0) == (0, 0.0)
    assert integer_interpolate(0, 4, 1.0) == (3, 1.0)
    index, residue = integer_interpolate(0, 4, 0.6)
    assert index == 2
    assert abs(residue - 0.4) < 1e-9


def test_choose():
    assert choose(5, 2) == 10
    assert choose(4, 0) == 1
    assert choose(4, 4) == 1
    assert choose(3, 5) == 0
    # Large arguments stay exact
    assert choose(100, 50) == math.comb(100, 50)


def test_bezier_quadratic():
    curve = bezier([(0, 0, 0), (1, 1, 0), (2, 0, 0)])
    np.testing.assert_allclose(curve(0.5), [1.0, 0.5, 0.0])
    np.testing.assert_allclose(curve(0), [0.0, 0.0, 0.0])
    np.testing.assert_allclose(curve(1), [2.0, 0.0, 0.0])


def test_bezier_is_not_clamped():
    curve = bezier([(0, 0, 0), (1, 0, 0)])
    np.testing.assert_allclose(curve(2.0), [2.0, 0.0, 0.0])


def test_bezier_cubic():
    curve = bezier([(0, 0, 0), (0, 1, 0), (1, 1, 0), (1, 0, 0)])
    np.testing.assert_allclose(curve(0.5), [0.5, 0.75, 0.0])


def test_partial_full_range_is_identity():
    points = np.array([[0, 0, 0], [1, 2, 0], [3, 0, 0]], dtype=float)
    np.testing.assert_allclose(partial_quadratic_bezier_points(points, 0, 1), points)


def test_partial_at_end_is_degenerate():
    points = np.array([[0, 0, 0], [1, 2, 0], [3, 0, 0]], dtype=float)
    result = partial_quadratic_bezier_points(points, 1, 1)
    np.testing.assert_allclose(result, [points[2]] * 3)


def test_partial_reproduces_curve():
    points = np.array([[0, 0, 0], [1, 2, 0], [3, 0, 0]], dtype=float)
    a, b = 0.2, 0.7
    original = bezier(points)
    restricted = bezier(partial_quadratic_bezier_points(points, a, b))
    for s in np.linspace(0, 1, 11):
        np.testing.assert_allclose(restricted(s), original(a + s * (b - a)), atol=1e-12)


def test_partial_handle_is_not_sampled_midpoint():
    points = np.array([[0, 0, 0], [1, 2, 0], [3, 0, 0]], dtype=float)
    result = partial_quadratic_bezier_points(points, 0.0, 0.5)
    # Left half of a quadratic has handle at the midpoint of p0 and p1
    np.testing.assert_allclose(result[1], [0.5, 1.0, 0.0])
    assert not np.allclose(result[1], bezier(points)(0.25))


def test_arc_quarter_turn():
    points = quadratic_bezier_points_for_arc(math.pi / 2, 1)
    assert len(points) == 3
    np.testing.assert_allclose(points[0], [1, 0, 0], atol=1e-12)
    np.testing.assert_allclose(points[1], [1, 1, 0], atol=1e-12)
    np.testing.assert_allclose(points[2], [0, 1, 0], atol=1e-12)


def test_arc_anchors_on_unit_circle():
    points = quadratic_bezier_points_for_arc(math.tau, 8)
    assert len(points) == 17
    anchors = points[::2]
    np.testing.assert_allclose(np.linalg.norm(anchors, axis=1), 1.0)
    np.testing.assert_allclose(points[-1], [1, 0, 0], atol=1e-12)


def test_arc_doubles_components_for_wide_segments():
    # One component would put the handle at infinity
    points = quadratic_bezier_points_for_arc(math.pi, 1)
    assert len(points) == 5
    assert np.all(np.isfinite(points))
    np.testing.assert_allclose(points[-1], [-1, 0, 0], atol=1e-12)


def test_arc_negative_angle_runs_clockwise():
    points = quadratic_bezier_points_for_arc(-math.pi / 2, 1)
    np.testing.assert_allclose(points[-1], [0, -1, 0], atol=1e-12)


@pytest.mark.parametrize("angle", [math.inf, -math.inf, math.nan])
def test_arc_rejects_non_finite_angle(angle):
    with pytest.raises(InvalidParameterError):
        quadratic_bezier_points_for_arc(angle, 4)


@pytest.mark.parametrize("n_components", [0, -2, 1.5, True, "4"])
def test_arc_rejects_bad_component_count(n_components):
    with pytest.raises(InvalidParameterError):
        quadratic_bezier_points_for_arc(math.pi / 2, n_components)


if __name__ == "__main__":
    test_interpolate()
    test_choose()
    test_bezier_quadratic()
    test_partial_full_range_is_identity()
    test_arc_quarter_turn()
