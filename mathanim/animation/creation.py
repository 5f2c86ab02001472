# mathanim/animation/creation.py
"""
Creation animations that reveal a vector path along its length.

Progress follows VMobject.point_from_proportion, so each curve of a path
takes an equal share of the run time.
"""

from __future__ import annotations
from typing import List, Tuple

import numpy as np

from mathanim.animation.animation import Animation
from mathanim.core.bezier import interpolate
from mathanim.mobject.vmobject import VMobject, partial_path_points


class ShowCreation(Animation):
    """Draw every path in the family from its start to its end."""

    def setup_mobject(self):
        self.start_paths: List[Tuple[VMobject, np.ndarray]] = [
            (mob, mob.get_points().copy())
            for mob in self.mobject.get_family()
            if isinstance(mob, VMobject) and mob.has_points()
        ]
        self.set_revealed(0.0)

    def set_revealed(self, proportion: float):
        for mob, points in self.start_paths:
            mob.set_points(partial_path_points(points, 0.0, proportion))

    def interpolate_mobject(self, alpha: float):
        self.set_revealed(alpha)


class Uncreate(ShowCreation):
    """ShowCreation in reverse; the Mobject is removed from its Scene afterwards."""

    remover = True

    def setup_mobject(self):
        super().setup_mobject()
        self.set_revealed(1.0)

    def interpolate_mobject(self, alpha: float):
        self.set_revealed(1.0 - alpha)


class Write(ShowCreation):
    """
    Draw the outline during the first half, then fade the fill in.

    Fill opacities captured at begin() are the targets of the second half.
    """

    def setup_mobject(self):
        self.fill_targets: List[Tuple[VMobject, float]] = [
            (mob, mob.fill_opacity)
            for mob in self.mobject.get_family()
            if isinstance(mob, VMobject)
        ]
        super().setup_mobject()
        self.set_fill_fraction(0.0)

    def set_fill_fraction(self, fraction: float):
        for mob, fill_opacity in self.fill_targets:
            mob.set_fill(opacity=interpolate(0.0, fill_opacity, fraction), recurse=False)

    def interpolate_mobject(self, alpha: float):
        if alpha < 0.5:
            self.set_revealed(2.0 * alpha)
            self.set_fill_fraction(0.0)
        else:
            self.set_revealed(1.0)
            self.set_fill_fraction(2.0 * alpha - 1.0)
