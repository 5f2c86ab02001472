# mathanim/mobject/mobject.py
"""
Mobject - Scene graph node carrying point data.

A Mobject owns a point buffer (an (N, 3) array of positions and a parallel
(N, 4) array of RGBA values) plus style state, and links to child and
parent Mobjects.

Design:
- Children and parents form a DAG: one Mobject may sit under several
  parents, but it may never reach itself through its children
- The family list (self plus unique descendants) and the bounding box are
  cached; structural edits invalidate both up through every ancestor, point
  edits invalidate only bounding boxes
- Transforms and recoloring are applied eagerly to the whole family
"""

from __future__ import annotations
import logging
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from mathanim.core.color import Color, DEFAULT_MOBJECT_COLOR, hex_to_rgb
from mathanim.core.errors import StructuralError
from mathanim.core.math3d import OUT, rotation_matrix

logger = logging.getLogger(__name__)

Updater = Callable[["Mobject", float], None]
PointsFunc = Callable[[np.ndarray], np.ndarray]


def _read_only(array: np.ndarray) -> np.ndarray:
    view = array.view()
    view.flags.writeable = False
    return view


class Mobject:
    """
    A node in the animatable scene graph.

    Attributes:
        color: Base color as a '#RRGGBB' string
        opacity: Alpha written into every point's RGBA
        shading: Reflectiveness, gloss and shadow, passed to renderers
        is_fixed_in_frame: Whether renderers should ignore the camera
        depth_test: Whether renderers should depth test this node
        z_index: Draw order hint
        submobjects: Ordered children
        parents: Every Mobject this one is a child of
    """

    dim: int = 3

    def __init__(
        self,
        color: Color = DEFAULT_MOBJECT_COLOR,
        opacity: float = 1.0,
        shading: Tuple[float, float, float] = (0.0, 0.0, 0.0),
        is_fixed_in_frame: bool = False,
        depth_test: bool = False,
        z_index: int = 0,
    ):
        self.color: Color = color
        self.opacity: float = opacity
        self.shading: Tuple[float, float, float] = tuple(shading)
        self.is_fixed_in_frame: bool = is_fixed_in_frame
        self.depth_test: bool = depth_test
        self.z_index: int = z_index

        self.submobjects: List[Mobject] = []
        self.parents: List[Mobject] = []
        self.updaters: List[Updater] = []

        self._points = np.zeros((0, self.dim))
        self._rgbas = np.zeros((0, 4))

        # Derived caches; None / True mean "recompute on next read"
        self._family: Optional[List[Mobject]] = None
        self._bounding_box = np.zeros(2 * self.dim)
        self.needs_new_bounding_box: bool = True

        self.init_uniforms()
        self.init_points()
        self.init_colors()

    def init_uniforms(self):
        self.uniforms = {
            "is_fixed_in_frame": float(self.is_fixed_in_frame),
            "shading": np.array(self.shading, dtype=float),
            "clip_plane": np.zeros(4),
        }

    def init_points(self):
        # Subclasses populate their geometry here
        pass

    def init_colors(self):
        self.write_color(self.color, hex_to_rgb(self.color), self.opacity)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(points={self.get_num_points()}, "
            f"submobjects={len(self.submobjects)})"
        )

    # -------------------------------------------------------------------------
    # Hierarchy
    # -------------------------------------------------------------------------

    def add(self, *mobjects: Mobject) -> Mobject:
        """
        Add children, linking each one back to this node as a parent.

        Every argument is checked before anything is linked, so a rejected
        call leaves the graph untouched. Re-adding an existing child is a no-op.

        Raises:
            StructuralError: A child is this node, or this node is already
                one of the child's descendants.
        """
        for mobject in mobjects:
            if not isinstance(mobject, Mobject):
                raise TypeError(f"Only Mobjects can be added, got {type(mobject).__name__}")
            if mobject is self:
                raise StructuralError("Mobject cannot contain self")
            if any(member is self for member in mobject.get_family()):
                raise StructuralError()

        for mobject in mobjects:
            if not any(sm is mobject for sm in self.submobjects):
                self.submobjects.append(mobject)
            if not any(p is self for p in mobject.parents):
                mobject.parents.append(self)
        self.note_changed_family()
        return self

    def remove(self, *mobjects: Mobject) -> Mobject:
        """Unlink children. Mobjects that are not children are ignored."""
        for mobject in mobjects:
            self.submobjects = [sm for sm in self.submobjects if sm is not mobject]
            mobject.parents = [p for p in mobject.parents if p is not self]
        self.note_changed_family()
        return self

    def clear(self) -> Mobject:
        return self.remove(*self.submobjects)

    def note_changed_family(self) -> Mobject:
        """Drop cached family and bounding box here and in every ancestor."""
        for mob in [self, *self.get_ancestors()]:
            mob._family = None
            mob.needs_new_bounding_box = True
        return self

    def note_changed_points(self) -> Mobject:
        """Drop cached bounding boxes here and in every ancestor."""
        for mob in [self, *self.get_ancestors()]:
            mob.needs_new_bounding_box = True
        return self

    def get_family(self, recurse: bool = True) -> List[Mobject]:
        """
        This node followed by its descendants, depth-first, parent before children.

        A descendant reachable along several paths is listed once, at its
        first position.
        """
        if not recurse:
            return [self]
        if self._family is None:
            family = [self]
            seen = {id(self)}
            for sm in self.submobjects:
                for member in sm.get_family():
                    if id(member) not in seen:
                        seen.add(id(member))
                        family.append(member)
            self._family = family
        return list(self._family)

    def family_members_with_points(self) -> List[Mobject]:
        return [m for m in self.get_family() if m.has_points()]

    def get_ancestors(self) -> List[Mobject]:
        """Every Mobject that has this one as a descendant, nearest first."""
        ancestors: List[Mobject] = []
        seen = set()
        to_visit = list(self.parents)
        while to_visit:
            parent = to_visit.pop(0)
            if id(parent) in seen:
                continue
            seen.add(id(parent))
            ancestors.append(parent)
            to_visit.extend(parent.parents)
        return ancestors

    def split(self) -> List[Mobject]:
        return list(self.submobjects)

    def __iter__(self) -> Iterator[Mobject]:
        return iter(self.split())

    def __len__(self) -> int:
        return len(self.submobjects)

    def __getitem__(self, index):
        return self.submobjects[index]

    # -------------------------------------------------------------------------
    # Point Buffer
    # -------------------------------------------------------------------------

    def _default_rgba(self) -> np.ndarray:
        return np.array([*hex_to_rgb(self.color), self.opacity])

    def resize_points(self, new_length: int) -> Mobject:
        """
        Resize positions and colors together.

        Growing repeats the last point (or the origin for an empty buffer)
        and colors new rows with this node's color and opacity. Shrinking
        truncates.
        """
        current_length = len(self._points)
        if new_length == current_length:
            return self

        if new_length < current_length:
            self._points = self._points[:new_length].copy()
            self._rgbas = self._rgbas[:new_length].copy()
        else:
            extra = new_length - current_length
            fill_point = self._points[-1] if current_length else np.zeros(self.dim)
            self._points = np.vstack([self._points, np.tile(fill_point, (extra, 1))])
            self._rgbas = np.vstack([self._rgbas, np.tile(self._default_rgba(), (extra, 1))])

        self.note_changed_points()
        return self

    def set_points(self, points) -> Mobject:
        points = np.array(points, dtype=float).reshape(-1, self.dim)
        self.resize_points(len(points))
        self._points[:] = points
        self.note_changed_points()
        return self

    def append_points(self, new_points) -> Mobject:
        new_points = np.array(new_points, dtype=float).reshape(-1, self.dim)
        current_length = len(self._points)
        self.resize_points(current_length + len(new_points))
        self._points[current_length:] = new_points
        self.note_changed_points()
        return self

    def clear_points(self) -> Mobject:
        return self.resize_points(0)

    def get_points(self) -> np.ndarray:
        """Read-only view of this node's own points."""
        return _read_only(self._points)

    def get_rgbas(self) -> np.ndarray:
        """Read-only view of this node's per-point RGBA values."""
        return _read_only(self._rgbas)

    def get_num_points(self) -> int:
        return len(self._points)

    def has_points(self) -> bool:
        return len(self._points) > 0

    def get_all_points(self) -> np.ndarray:
        """Points of every family member, stacked."""
        arrays = [m._points for m in self.get_family() if m.has_points()]
        if not arrays:
            return np.zeros((0, self.dim))
        return np.vstack(arrays)

    # -------------------------------------------------------------------------
    # Transforms
    # -------------------------------------------------------------------------

    def apply_points_function(
        self,
        func: PointsFunc,
        about_point: Optional[np.ndarray] = None,
    ) -> Mobject:
        """
        Replace the points of every family member with func(points).

        Args:
            func: Maps an (N, 3) array to an (N, 3) array
            about_point: If given, points are translated so this point sits
                at the origin before `func` and translated back afterwards
        """
        if about_point is not None:
            about_point = np.asarray(about_point, dtype=float)

        for mob in self.get_family():
            if not mob.has_points():
                continue
            if about_point is None:
                mob._points[:] = func(mob._points)
            else:
                mob._points[:] = func(mob._points - about_point) + about_point
            mob.note_changed_points()
        return self

    def shift(self, vector) -> Mobject:
        vector = np.asarray(vector, dtype=float)
        return self.apply_points_function(lambda points: points + vector)

    def scale(self, scale_factor, about_point=None) -> Mobject:
        """
        Scale about `about_point` (the bounding box center by default).

        `scale_factor` may be a scalar or one factor per axis.
        """
        if about_point is None:
            about_point = self.get_center()
        factor = np.asarray(scale_factor, dtype=float)
        return self.apply_points_function(lambda points: points * factor, about_point)

    def stretch(self, factor: float, dim: int, about_point=None) -> Mobject:
        """Scale along a single axis."""
        factors = np.ones(self.dim)
        factors[dim] = factor
        return self.scale(factors, about_point)

    def rotate(self, angle: float, axis=OUT, about_point=None) -> Mobject:
        """Rotate about an axis through `about_point` (the center by default)."""
        if about_point is None:
            about_point = self.get_center()
        matrix = rotation_matrix(angle, axis)
        return self.apply_points_function(lambda points: points @ matrix.T, about_point)

    def move_to(self, point) -> Mobject:
        return self.shift(np.asarray(point, dtype=float) - self.get_center())

    # -------------------------------------------------------------------------
    # Color
    # -------------------------------------------------------------------------

    def set_color(self, color: Color, opacity: Optional[float] = None) -> Mobject:
        """
        Overwrite every point's RGBA here and in every descendant.

        Args:
            color: Hex color; malformed strings become black
            opacity: New opacity, or None to keep this node's current opacity.
                The same value is pushed down the whole subtree.
        """
        if opacity is None:
            opacity = self.opacity
        rgb = hex_to_rgb(color)
        # Shared descendants appear once in the family, so each is written once
        for mob in self.get_family():
            mob.write_color(color, rgb, opacity)
        return self

    def write_color(self, color: Color, rgb: np.ndarray, opacity: float):
        """Color this node alone; subclasses extend it with their own style."""
        self.color = color
        self.opacity = opacity
        if self.has_points():
            self._rgbas[:, :3] = rgb
            self._rgbas[:, 3] = opacity

    def set_opacity(self, opacity: float, recurse: bool = True) -> Mobject:
        """Change alpha only, keeping each member's own color."""
        for mob in self.get_family(recurse):
            mob.opacity = opacity
            mob._rgbas[:, 3] = opacity
        return self

    def get_color(self) -> Color:
        return self.color

    def get_opacity(self) -> float:
        return self.opacity

    def set_z_index(self, z_index: int) -> Mobject:
        self.z_index = z_index
        return self

    # -------------------------------------------------------------------------
    # Bounding Box
    # -------------------------------------------------------------------------

    def get_bounding_box(self) -> np.ndarray:
        """
        Axis-aligned box over the whole family as [min_x, min_y, min_z, max_x, max_y, max_z].

        A family without any points gives the zero box.
        """
        if self.needs_new_bounding_box:
            self._bounding_box = self.compute_bounding_box()
            self.needs_new_bounding_box = False
        return self._bounding_box.copy()

    def compute_bounding_box(self) -> np.ndarray:
        all_points = self.get_all_points()
        if len(all_points) == 0:
            return np.zeros(2 * self.dim)
        return np.concatenate([all_points.min(axis=0), all_points.max(axis=0)])

    def get_center(self) -> np.ndarray:
        bb = self.get_bounding_box()
        return (bb[:self.dim] + bb[self.dim:]) / 2.0

    def length_over_dim(self, dim: int) -> float:
        bb = self.get_bounding_box()
        return float(bb[self.dim + dim] - bb[dim])

    def get_width(self) -> float:
        return self.length_over_dim(0)

    def get_height(self) -> float:
        return self.length_over_dim(1)

    def get_depth(self) -> float:
        return self.length_over_dim(2)

    # -------------------------------------------------------------------------
    # Updaters
    # -------------------------------------------------------------------------

    def add_updater(self, updater: Updater) -> Mobject:
        """Register a per-tick callback, called as updater(mobject, dt)."""
        self.updaters.append(updater)
        return self

    def remove_updater(self, updater: Updater) -> Mobject:
        self.updaters = [u for u in self.updaters if u is not updater]
        return self

    def clear_updaters(self, recurse: bool = True) -> Mobject:
        for mob in self.get_family(recurse):
            mob.updaters = []
        return self

    def get_updaters(self) -> List[Updater]:
        return list(self.updaters)

    def update(self, dt: float = 0.0, recurse: bool = True) -> Mobject:
        """
        Run updaters depth-first, parent before children, in registration order.

        A node shared by several parents runs its updaters once per call.
        """
        for mob in self.get_family(recurse):
            for updater in list(mob.updaters):
                updater(mob, dt)
        return self


class Group(Mobject):
    """Point-less container Mobject."""

    def __init__(self, *mobjects: Mobject, **kwargs):
        super().__init__(**kwargs)
        self.add(*mobjects)
