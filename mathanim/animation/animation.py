# mathanim/animation/animation.py
"""
Animation - Drives one Mobject from a starting state to a terminal state.

Lifecycle is strictly UNSTARTED -> ACTIVE -> FINISHED:
- begin() captures or establishes the starting state
- interpolate(alpha) clamps alpha, applies the rate function and hands the
  result to interpolate_mobject(), the only place a subclass mutates its
  Mobject
- finish() interpolates at exactly 1.0, so the terminal state never
  depends on how playback was stepped
"""

from __future__ import annotations
from enum import Enum, auto
from typing import List, Tuple

from mathanim.core.bezier import interpolate
from mathanim.core.config import DEFAULT_RUN_TIME
from mathanim.core.math3d import RateFunc, clamp, linear
from mathanim.mobject.mobject import Mobject
from mathanim.mobject.vmobject import VMobject


class AnimationState(Enum):
    UNSTARTED = auto()
    ACTIVE = auto()
    FINISHED = auto()


class Animation:
    """
    Base animation bound to a single Mobject.

    Attributes:
        mobject: The animated Mobject
        run_time: Duration in simulated seconds
        rate_func: Maps linear progress in [0, 1] to eased progress
        remover: Whether a Scene should drop the Mobject once finished
        state: Current lifecycle state
    """

    remover: bool = False

    def __init__(
        self,
        mobject: Mobject,
        run_time: float = DEFAULT_RUN_TIME,
        rate_func: RateFunc = linear,
    ):
        self.mobject = mobject
        self.run_time = run_time
        self.rate_func = rate_func
        self.state = AnimationState.UNSTARTED

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.mobject!r}, run_time={self.run_time})"

    def begin(self):
        if self.state is not AnimationState.UNSTARTED:
            raise RuntimeError(f"{self!r} has already begun")
        self.state = AnimationState.ACTIVE
        self.setup_mobject()

    def setup_mobject(self):
        # Subclasses capture starting state here
        pass

    def interpolate(self, alpha: float):
        if self.state is not AnimationState.ACTIVE:
            raise RuntimeError(f"{self!r} is not active (state={self.state.name})")
        alpha = clamp(alpha, 0.0, 1.0)
        self.interpolate_mobject(self.rate_func(alpha))

    def interpolate_mobject(self, alpha: float):
        pass

    def finish(self):
        if self.state is AnimationState.FINISHED:
            return
        self.interpolate(1.0)
        self.state = AnimationState.FINISHED

    def is_finished(self) -> bool:
        return self.state is AnimationState.FINISHED


# =============================================================================
# Fading
# =============================================================================

class _Fade(Animation):
    """
    Shared opacity bookkeeping for fades.

    Each family member's opacities are captured at begin() and every
    member is faded relative to its own captured values.
    """

    def setup_mobject(self):
        self.targets: List[Tuple[Mobject, float, float, float]] = []
        for mob in self.mobject.get_family():
            if isinstance(mob, VMobject):
                self.targets.append((mob, mob.opacity, mob.stroke_opacity, mob.fill_opacity))
            else:
                self.targets.append((mob, mob.opacity, 0.0, 0.0))

    def set_fraction(self, fraction: float):
        for mob, opacity, stroke_opacity, fill_opacity in self.targets:
            mob.set_opacity(interpolate(0.0, opacity, fraction), recurse=False)
            if isinstance(mob, VMobject):
                mob.set_stroke(opacity=interpolate(0.0, stroke_opacity, fraction), recurse=False)
                mob.set_fill(opacity=interpolate(0.0, fill_opacity, fraction), recurse=False)


class FadeIn(_Fade):
    """Fade from fully transparent up to the opacities held at begin()."""

    def setup_mobject(self):
        super().setup_mobject()
        self.set_fraction(0.0)

    def interpolate_mobject(self, alpha: float):
        self.set_fraction(alpha)


class FadeOut(_Fade):
    """Fade from the opacities held at begin() down to transparent."""

    remover = True

    def interpolate_mobject(self, alpha: float):
        self.set_fraction(1.0 - alpha)
