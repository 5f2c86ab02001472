# mathanim/mobject/geometry.py
"""
Shape constructors built purely from the VMobject path-building calls.

Closed shapes repeat their first anchor as their last. Every parameter is
validated in __init__ before the base constructor writes any points.
"""

from __future__ import annotations
import math
import numbers

import numpy as np

from mathanim.core.bezier import quadratic_bezier_points_for_arc
from mathanim.core.errors import InvalidParameterError
from mathanim.core.math3d import (
    DEGREES,
    LEFT,
    ORIGIN,
    OUT,
    RIGHT,
    TAU,
    angle_of_vector,
    get_norm,
    normalize,
)
from mathanim.mobject.vmobject import VMobject


def _require_positive(name: str, value) -> float:
    if not isinstance(value, numbers.Real) or not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(f"{name} must be a positive finite number, got {value!r}")
    return float(value)


# =============================================================================
# Polygons
# =============================================================================

class Polygon(VMobject):
    def __init__(self, *vertices, **kwargs):
        self.vertices = [np.asarray(v, dtype=float) for v in vertices]
        super().__init__(**kwargs)

    def init_points(self):
        if not self.vertices:
            return
        self.start_new_path(self.vertices[0])
        for vertex in self.vertices[1:]:
            self.add_line_to(vertex)
        self.add_line_to(self.vertices[0])

    def get_vertices(self) -> np.ndarray:
        """Anchors without the closing repeat of the first vertex."""
        return self.get_anchors()[:-1]


class RegularPolygon(Polygon):
    def __init__(self, n: int = 6, radius: float = 1.0, start_angle: float = None, **kwargs):
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 3:
            raise InvalidParameterError(f"Polygon needs an integer number of sides >= 3, got {n!r}")
        radius = _require_positive("Polygon radius", radius)
        if start_angle is None:
            start_angle = 90 * DEGREES if n % 2 == 0 else 0.0

        vertices = [
            radius * np.array([math.cos(angle), math.sin(angle), 0.0])
            for angle in (start_angle + i * TAU / n for i in range(n))
        ]
        super().__init__(*vertices, **kwargs)


class Triangle(RegularPolygon):
    def __init__(self, **kwargs):
        super().__init__(n=3, **kwargs)


class Rectangle(Polygon):
    def __init__(self, width: float = 4.0, height: float = 2.0, **kwargs):
        w2 = _require_positive("Rectangle width", width) / 2.0
        h2 = _require_positive("Rectangle height", height) / 2.0
        super().__init__(
            [-w2, h2, 0.0],
            [-w2, -h2, 0.0],
            [w2, -h2, 0.0],
            [w2, h2, 0.0],
            **kwargs
        )


class Square(Rectangle):
    def __init__(self, side_length: float = 2.0, **kwargs):
        side_length = _require_positive("Square side length", side_length)
        super().__init__(width=side_length, height=side_length, **kwargs)


# =============================================================================
# Lines
# =============================================================================

class Line(VMobject):
    """
    Straight segment from `start` to `end`, pulled in by `buff` at both ends.

    A buff larger than half the length is clamped, leaving a zero-length
    line at the midpoint.
    """

    def __init__(self, start=LEFT, end=RIGHT, buff: float = 0.0, **kwargs):
        self.start = np.asarray(start, dtype=float)
        self.end = np.asarray(end, dtype=float)
        self.buff = buff
        super().__init__(**kwargs)

    def init_points(self):
        vect = self.end - self.start
        length = get_norm(vect)
        unit = normalize(vect, fall_back=RIGHT)
        buff = min(max(self.buff, 0.0), length / 2.0)
        self.start_new_path(self.start + buff * unit)
        self.add_line_to(self.end - buff * unit)

    def get_length(self) -> float:
        return get_norm(self.get_end() - self.get_start())

    def get_unit_vector(self) -> np.ndarray:
        return normalize(self.get_end() - self.get_start())

    def get_angle(self) -> float:
        return angle_of_vector(self.get_end() - self.get_start())


# =============================================================================
# Arcs
# =============================================================================

class Arc(VMobject):
    def __init__(
        self,
        start_angle: float = 0.0,
        angle: float = TAU / 4,
        radius: float = 1.0,
        arc_center=ORIGIN,
        n_components: int = None,
        **kwargs
    ):
        self.radius = _require_positive("Arc radius", radius)
        if not isinstance(angle, numbers.Real) or not math.isfinite(angle):
            raise InvalidParameterError(f"Arc angle must be finite, got {angle!r}")
        if n_components is None:
            n_components = max(int(math.ceil(8 * abs(angle) / TAU)), 1)
        # Builds (and validates) the unit arc before any point is stored
        self._unit_arc = quadratic_bezier_points_for_arc(angle, n_components)
        self.start_angle = start_angle
        self.angle = angle
        self.arc_center = np.asarray(arc_center, dtype=float)
        super().__init__(**kwargs)

    def init_points(self):
        self.set_points(self._unit_arc)
        self.rotate(self.start_angle, OUT, about_point=ORIGIN)
        self.scale(self.radius, about_point=ORIGIN)
        self.shift(self.arc_center)

    def get_arc_center(self) -> np.ndarray:
        return self.arc_center.copy()


class Circle(Arc):
    def __init__(self, radius: float = 1.0, arc_center=ORIGIN, **kwargs):
        super().__init__(
            start_angle=0.0,
            angle=TAU,
            radius=radius,
            arc_center=arc_center,
            **kwargs
        )


class Ellipse(Circle):
    def __init__(self, width: float = 2.0, height: float = 1.0, **kwargs):
        self.ellipse_width = _require_positive("Ellipse width", width)
        self.ellipse_height = _require_positive("Ellipse height", height)
        super().__init__(radius=1.0, **kwargs)

    def init_points(self):
        super().init_points()
        self.stretch(self.ellipse_width / 2.0, 0, about_point=self.arc_center)
        self.stretch(self.ellipse_height / 2.0, 1, about_point=self.arc_center)


class Dot(Circle):
    def __init__(self, point=ORIGIN, radius: float = 0.08, **kwargs):
        kwargs.setdefault("fill_opacity", 1.0)
        kwargs.setdefault("stroke_width", 0.0)
        super().__init__(radius=radius, arc_center=point, **kwargs)
