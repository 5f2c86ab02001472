# mathanim/core/math3d.py
"""
Core math for 3D point data.

Vectors are plain numpy arrays of shape (3,). Everything here is pure and
works on single vectors; the scene graph applies these to whole point
buffers at once.
"""

from __future__ import annotations
import logging
import math
from typing import Callable

import numpy as np

logger = logging.getLogger(__name__)

RateFunc = Callable[[float], float]

# =============================================================================
# Direction Constants
# =============================================================================

ORIGIN = np.array([0.0, 0.0, 0.0])
UP = np.array([0.0, 1.0, 0.0])
DOWN = np.array([0.0, -1.0, 0.0])
RIGHT = np.array([1.0, 0.0, 0.0])
LEFT = np.array([-1.0, 0.0, 0.0])
IN = np.array([0.0, 0.0, -1.0])
OUT = np.array([0.0, 0.0, 1.0])
X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])
Z_AXIS = np.array([0.0, 0.0, 1.0])

PI = math.pi
TAU = 2.0 * PI
DEGREES = TAU / 360.0


# =============================================================================
# Rate Functions
# =============================================================================

def linear(t: float) -> float:
    return t

def smooth(t: float) -> float:
    # Zero first and second derivatives at t = 0 and t = 1
    s = 1.0 - t
    return (t ** 3) * (10.0 * s * s + 5.0 * s * t + t * t)

def rush_into(t: float) -> float:
    return 2.0 * smooth(0.5 * t)

def rush_from(t: float) -> float:
    return 2.0 * smooth(0.5 * (t + 1.0)) - 1.0

def there_and_back(t: float) -> float:
    new_t = 2.0 * t if t < 0.5 else 2.0 * (1.0 - t)
    return smooth(new_t)

def ease_in_quad(t: float) -> float:
    return t * t

def ease_out_quad(t: float) -> float:
    return 1.0 - (1.0 - t) ** 2

def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - (-2.0*t + 2.0) ** 2 / 2.0

def ease_in_cubic(t: float) -> float:
    return t * t * t

def ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3

def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - (-2.0*t + 2.0) ** 3 / 2.0

def ease_out_bounce(t: float) -> float:
    n1 = 7.5625
    d1 = 2.75
    if t < 1.0/d1:
        return n1 * t * t
    elif t < 2.0/d1:
        t -= 1.5/d1
        return n1 * t * t + 0.75
    elif t < 2.5/d1:
        t -= 2.25/d1
        return n1 * t * t + 0.9375
    else:
        t -= 2.625/d1
        return n1 * t * t + 0.984375


# =============================================================================
# Scalar Helpers
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))


def is_valid_duration(value: float, ceiling: float) -> bool:
    """True for a finite duration in (0, ceiling]."""
    try:
        return math.isfinite(value) and 0.0 < value <= ceiling
    except TypeError:
        return False


# =============================================================================
# Vector Helpers
# =============================================================================

def get_norm(vect: np.ndarray) -> float:
    return float(np.linalg.norm(vect))


def normalize(vect: np.ndarray, fall_back: np.ndarray = None) -> np.ndarray:
    """Unit vector along `vect`, or `fall_back` (zeros by default) if it has no length."""
    norm = get_norm(vect)
    if norm < 1e-10:
        if fall_back is not None:
            return np.array(fall_back, dtype=float)
        return np.zeros(len(vect))
    return np.asarray(vect, dtype=float) / norm


def angle_of_vector(vect: np.ndarray) -> float:
    """Angle of the xy projection of `vect`, measured from the x axis."""
    return math.atan2(vect[1], vect[0])


def rotation_matrix(angle: float, axis: np.ndarray = OUT) -> np.ndarray:
    """
    3x3 matrix rotating by `angle` radians about `axis` (right-handed).

    A zero-length axis yields the identity, so rotating about it is a no-op.
    """
    unit = normalize(axis)
    if not unit.any():
        logger.debug("Zero-length rotation axis; using identity rotation")
        return np.identity(3)

    x, y, z = unit
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    return np.array([
        [t * x * x + c,      t * x * y - s * z,  t * x * z + s * y],
        [t * x * y + s * z,  t * y * y + c,      t * y * z - s * x],
        [t * x * z - s * y,  t * y * z + s * x,  t * z * z + c],
    ])


def rotate_vector(vect: np.ndarray, angle: float, axis: np.ndarray = OUT) -> np.ndarray:
    return rotation_matrix(angle, axis) @ np.asarray(vect, dtype=float)
