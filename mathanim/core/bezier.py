# mathanim/core/bezier.py
"""
Curve math for quadratic Bezier paths.

Paths store quadratic segments as [anchor, handle, anchor] triples, so the
helpers here work on (3, 3) arrays of points unless stated otherwise.
Functions are pure and never mutate their inputs.
"""

from __future__ import annotations
import logging
import math
import numbers
from typing import Callable, Sequence, Tuple

import numpy as np

from mathanim.core.errors import InvalidParameterError
from mathanim.core.math3d import PI

logger = logging.getLogger(__name__)


# =============================================================================
# Interpolation
# =============================================================================

def interpolate(start, end, alpha: float):
    """Linear interpolation, for scalars or numpy arrays."""
    return (1 - alpha) * start + alpha * end


def integer_interpolate(start: int, end: int, alpha: float) -> Tuple[int, float]:
    """
    Split `alpha` into an integer index in [start, end) and a residue.

    alpha = 0 gives (start, 0.0) and alpha = 1 gives (end - 1, 1.0), so the
    last index is never overshot.
    """
    if alpha >= 1:
        return (end - 1, 1.0)
    if alpha <= 0:
        return (start, 0.0)
    value = int(math.floor(interpolate(start, end, alpha)))
    residue = ((end - start) * alpha) % 1
    return (value, residue)


def mid(start, end):
    return interpolate(start, end, 0.5)


# =============================================================================
# Bezier Evaluation
# =============================================================================

def choose(n: int, k: int) -> int:
    """Binomial coefficient, via the multiplicative formula."""
    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1
    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        # Exact: the running product of i consecutive integers is divisible by i!
        result = result * (n - i + 1) // i
    return result


def bezier(points: Sequence) -> Callable[[float], np.ndarray]:
    """
    Return the Bezier curve with the given control points as a function of t.

    The degree is len(points) - 1. t is not clamped, so values outside
    [0, 1] extrapolate along the polynomial.
    """
    control = np.array(points, dtype=float)
    n = len(control) - 1
    coefficients = [choose(n, k) for k in range(n + 1)]

    def result(t: float) -> np.ndarray:
        total = np.zeros(control.shape[1:])
        for k, point in enumerate(control):
            total = total + coefficients[k] * ((1 - t) ** (n - k)) * (t ** k) * point
        return total

    return result


def partial_quadratic_bezier_points(points: Sequence, a: float, b: float) -> np.ndarray:
    """
    Control points of the quadratic segment reproducing `points` on [a, b].

    The endpoints are the curve evaluated at a and b. The handle comes from
    cutting the curve at a (whose right half has handle (1-a)*p1 + a*p2) and
    then cutting that half at the proportion of [a, 1] that b reaches.

    Args:
        points: The segment's [anchor, handle, anchor]
        a: Start of the sub-range, in [0, 1]
        b: End of the sub-range, in [a, 1]

    Returns:
        A (3, 3) array. For a == 1 every row is the end anchor.
    """
    p0, p1, p2 = np.array(points, dtype=float)
    a = min(max(a, 0.0), 1.0)
    b = min(max(b, a), 1.0)

    if a == 1.0:
        return np.array([p2, p2, p2])

    curve = bezier([p0, p1, p2])
    h0 = curve(a) if a > 0 else p0
    h2 = curve(b) if b < 1 else p2
    h1_prime = interpolate(p1, p2, a)
    end_prop = (b - a) / (1.0 - a)
    h1 = interpolate(h0, h1_prime, end_prop)
    return np.array([h0, h1, h2])


# =============================================================================
# Arcs
# =============================================================================

def quadratic_bezier_points_for_arc(angle: float, n_components: int = 8) -> np.ndarray:
    """
    Quadratic segments approximating a unit-radius arc about the origin.

    The arc starts at angle 0 and sweeps `angle` radians (negative sweeps
    run clockwise). Each segment's anchors lie on the unit circle and its
    handle sits at radius 1 / cos(theta / 2) on the mid-angle, which makes
    the segment tangent to the circle at both anchors.

    If a segment would span half a turn or more the handle radius diverges,
    so `n_components` is doubled until every segment is shorter than that.

    Raises:
        InvalidParameterError: `angle` is not finite, or `n_components` is
            not a positive integer.

    Returns:
        A (2 * n + 1, 3) array of points.
    """
    if not isinstance(angle, numbers.Real) or not math.isfinite(angle):
        raise InvalidParameterError(f"Arc angle must be finite, got {angle!r}")
    if (
        isinstance(n_components, bool)
        or not isinstance(n_components, numbers.Integral)
        or n_components <= 0
    ):
        raise InvalidParameterError(
            f"Arc n_components must be a positive integer, got {n_components!r}"
        )

    n_components = int(n_components)
    while abs(angle / n_components) >= PI:
        logger.debug(f"Arc segment of {angle / n_components:.3f} rad too wide, doubling components")
        n_components *= 2

    theta = angle / n_components
    handle_radius = 1.0 / math.cos(theta / 2.0)

    points = [np.array([1.0, 0.0, 0.0])]
    for i in range(n_components):
        mid_angle = (i + 0.5) * theta
        end_angle = (i + 1) * theta
        points.append(np.array([
            handle_radius * math.cos(mid_angle),
            handle_radius * math.sin(mid_angle),
            0.0,
        ]))
        points.append(np.array([math.cos(end_angle), math.sin(end_angle), 0.0]))
    return np.array(points)
