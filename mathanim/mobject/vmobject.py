# mathanim/mobject/vmobject.py
"""
VMobject - Mobject whose points encode a path of quadratic Bezier segments.

Point layout for k segments is [A0, H0, A1, H1, ..., Ak], 2k + 1 points in
all, with segment i at indices 2i, 2i+1, 2i+2. Consecutive segments share
their anchor. A jump to a new sub-path is stored as the degenerate segment
[last, last, new_start], which renderers treat as a move rather than a line.

Stroke and fill style live on the object, not in the point buffer.
"""

from __future__ import annotations
import logging
from typing import List, Optional

import numpy as np

from mathanim.core.bezier import (
    bezier,
    integer_interpolate,
    mid,
    partial_quadratic_bezier_points,
)
from mathanim.core.color import Color, DEFAULT_MOBJECT_COLOR, hex_to_rgb
from mathanim.core.config import VMobjectStyle
from mathanim.core.math3d import ORIGIN, clamp
from mathanim.mobject.mobject import Mobject

logger = logging.getLogger(__name__)

DEFAULT_STYLE = VMobjectStyle()


def partial_path_points(points: np.ndarray, a: float, b: float) -> np.ndarray:
    """
    Points of the sub-path between proportions a and b of a quadratic path.

    Proportions are measured in curve count, the same parameterization as
    VMobject.point_from_proportion. Boundary curves are cut exactly with
    partial_quadratic_bezier_points; interior curves are copied.
    """
    points = np.array(points, dtype=float)
    num_curves = (len(points) - 1) // 2 if len(points) >= 3 else 0
    if num_curves == 0:
        return points
    a = clamp(a, 0.0, 1.0)
    b = clamp(b, a, 1.0)
    if a <= 0 and b >= 1:
        return points

    def curve(n: int) -> np.ndarray:
        return points[2 * n:2 * n + 3]

    lower_index, lower_residue = integer_interpolate(0, num_curves, a)
    upper_index, upper_residue = integer_interpolate(0, num_curves, b)
    if upper_residue == 0 and upper_index > lower_index:
        # End exactly on an anchor rather than on an empty piece of the next curve
        upper_index, upper_residue = upper_index - 1, 1.0

    if lower_index == upper_index:
        return partial_quadratic_bezier_points(curve(lower_index), lower_residue, upper_residue)

    pieces = [partial_quadratic_bezier_points(curve(lower_index), lower_residue, 1.0)]
    for n in range(lower_index + 1, upper_index):
        pieces.append(curve(n)[1:])
    pieces.append(partial_quadratic_bezier_points(curve(upper_index), 0.0, upper_residue)[1:])
    return np.vstack(pieces)


class VMobject(Mobject):
    """
    Vector path node.

    Attributes:
        stroke_color: Outline color
        stroke_opacity: Outline alpha
        stroke_width: Outline width in renderer units
        fill_color: Interior color
        fill_opacity: Interior alpha (0 means unfilled)
    """

    def __init__(
        self,
        color: Optional[Color] = None,
        stroke_color: Optional[Color] = None,
        stroke_opacity: Optional[float] = None,
        stroke_width: Optional[float] = None,
        fill_color: Optional[Color] = None,
        fill_opacity: Optional[float] = None,
        style: Optional[VMobjectStyle] = None,
        **kwargs
    ):
        style = style or DEFAULT_STYLE
        color = color or DEFAULT_MOBJECT_COLOR

        self.stroke_color: Color = stroke_color or color
        self.stroke_opacity: float = style.stroke_opacity if stroke_opacity is None else stroke_opacity
        self.stroke_width: float = style.stroke_width if stroke_width is None else stroke_width
        self.fill_color: Color = fill_color or color
        self.fill_opacity: float = style.fill_opacity if fill_opacity is None else fill_opacity

        super().__init__(color=color, **kwargs)

    def init_colors(self):
        # Point colors only; explicit stroke/fill colors must survive construction
        Mobject.write_color(self, self.color, hex_to_rgb(self.color), self.opacity)

    # -------------------------------------------------------------------------
    # Path Building
    # -------------------------------------------------------------------------

    def start_new_path(self, point) -> VMobject:
        """Begin a sub-path at `point` without drawing a connector to it."""
        point = np.asarray(point, dtype=float)
        if self.has_points():
            # The last anchor doubles as the handle of a degenerate segment
            self.append_points([self.get_last_point(), point])
        else:
            self.set_points([point])
        return self

    def _ensure_path_started(self):
        if not self.has_points():
            logger.debug("Path has no points; starting it at the origin")
            self.start_new_path(ORIGIN)

    def add_quadratic_bezier_curve_to(self, handle, anchor) -> VMobject:
        self._ensure_path_started()
        self.append_points([handle, anchor])
        return self

    def add_cubic_bezier_curve_to(self, handle1, handle2, anchor) -> VMobject:
        """
        Append a cubic segment, approximated by a single quadratic.

        The two cubic handles collapse to their midpoint, which loses
        precision for strongly asymmetric handles.
        """
        handle = mid(np.asarray(handle1, dtype=float), np.asarray(handle2, dtype=float))
        return self.add_quadratic_bezier_curve_to(handle, anchor)

    def add_line_to(self, point) -> VMobject:
        """Append a straight segment, stored as a quadratic with a midpoint handle."""
        self._ensure_path_started()
        point = np.asarray(point, dtype=float)
        return self.add_quadratic_bezier_curve_to(mid(self.get_last_point(), point), point)

    def add_points(self, points) -> VMobject:
        return self.append_points(points)

    def _get_subpath_start_index(self) -> int:
        points = self._points
        for i in range(self.get_num_curves() - 1, -1, -1):
            start, handle, end = points[2 * i:2 * i + 3]
            if np.array_equal(start, handle) and not np.array_equal(handle, end):
                return 2 * i + 2
        return 0

    def close_path(self) -> VMobject:
        """Draw a line back to the start of the current sub-path, unless already there."""
        if not self.has_points():
            return self
        start = self._points[self._get_subpath_start_index()].copy()
        if not np.allclose(start, self.get_last_point()):
            self.add_line_to(start)
        return self

    def is_closed(self) -> bool:
        if self.get_num_curves() == 0:
            return False
        return bool(np.allclose(self._points[0], self._points[-1]))

    # -------------------------------------------------------------------------
    # Geometry Info
    # -------------------------------------------------------------------------

    def get_last_point(self) -> np.ndarray:
        if not self.has_points():
            return ORIGIN.copy()
        return self._points[-1].copy()

    def get_num_curves(self) -> int:
        n_points = self.get_num_points()
        if n_points < 3:
            return 0
        return (n_points - 1) // 2

    def get_nth_curve_points(self, n: int) -> np.ndarray:
        return self._points[2 * n:2 * n + 3].copy()

    def get_anchors(self) -> np.ndarray:
        return self._points[::2].copy()

    def get_start(self) -> np.ndarray:
        if not self.has_points():
            return ORIGIN.copy()
        return self._points[0].copy()

    def get_end(self) -> np.ndarray:
        return self.get_last_point()

    def get_first_handle(self) -> np.ndarray:
        if self.get_num_points() < 2:
            return self.get_start()
        return self._points[1].copy()

    def get_last_handle(self) -> np.ndarray:
        if self.get_num_points() < 3:
            return self.get_last_point()
        return self._points[-2].copy()

    def point_from_proportion(self, alpha: float) -> np.ndarray:
        """
        Point a fraction `alpha` of the way along the path.

        Each curve covers an equal share of [0, 1] regardless of its length,
        so long and short curves are traversed at the same rate.
        """
        alpha = clamp(alpha, 0.0, 1.0)
        num_curves = self.get_num_curves()
        if num_curves == 0:
            return self.get_last_point()

        value = alpha * num_curves
        index = int(np.floor(value))
        residue = value - index
        if index >= num_curves:
            index = num_curves - 1
            residue = 1.0
        return bezier(self.get_nth_curve_points(index))(residue)

    def pointwise_become_partial(self, vmobject: VMobject, a: float, b: float) -> VMobject:
        """Set this path to the part of `vmobject`'s path between proportions a and b."""
        return self.set_points(partial_path_points(vmobject.get_points(), a, b))

    # -------------------------------------------------------------------------
    # Style
    # -------------------------------------------------------------------------

    def _vmobject_family(self, recurse: bool) -> List[VMobject]:
        return [m for m in self.get_family(recurse) if isinstance(m, VMobject)]

    def write_color(self, color: Color, rgb: np.ndarray, opacity: float):
        # set_color recolors the outline and interior as well as the points
        self.stroke_color = color
        self.fill_color = color
        super().write_color(color, rgb, opacity)

    def set_stroke(
        self,
        color: Optional[Color] = None,
        width: Optional[float] = None,
        opacity: Optional[float] = None,
        recurse: bool = True,
    ) -> VMobject:
        for mob in self._vmobject_family(recurse):
            if color is not None:
                mob.stroke_color = color
            if width is not None:
                mob.stroke_width = width
            if opacity is not None:
                mob.stroke_opacity = opacity
        return self

    def set_fill(
        self,
        color: Optional[Color] = None,
        opacity: Optional[float] = None,
        recurse: bool = True,
    ) -> VMobject:
        for mob in self._vmobject_family(recurse):
            if color is not None:
                mob.fill_color = color
            if opacity is not None:
                mob.fill_opacity = opacity
        return self

    def get_stroke_color(self) -> Color:
        return self.stroke_color

    def get_stroke_width(self) -> float:
        return self.stroke_width

    def get_stroke_opacity(self) -> float:
        return self.stroke_opacity

    def get_fill_color(self) -> Color:
        return self.fill_color

    def get_fill_opacity(self) -> float:
        return self.fill_opacity


class VGroup(VMobject):
    """Point-less container for vector paths."""

    def __init__(self, *vmobjects: VMobject, **kwargs):
        super().__init__(**kwargs)
        self.add(*vmobjects)
