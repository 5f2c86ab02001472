# mathanim/scene/scene.py
"""
Scene - Holds top-level Mobjects and a simulated clock, and steps animations.

play() runs its whole stepping loop before returning. Time advances in
fixed frame-sized increments, the last one clipped so the clock lands
exactly on the longest valid run time.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from mathanim.animation.animation import Animation
from mathanim.core.config import DEFAULT_RUN_TIME, SceneConfig
from mathanim.core.frame import FrameState
from mathanim.core.math3d import is_valid_duration
from mathanim.core.signal import (
    SignalEmitter,
    SIGNAL_FRAME,
    SIGNAL_MOBJECT_ADDED,
    SIGNAL_MOBJECT_REMOVED,
    SIGNAL_PLAY_BEGIN,
    SIGNAL_PLAY_END,
)
from mathanim.mobject.mobject import Mobject

logger = logging.getLogger(__name__)


class Scene(SignalEmitter):
    """
    Top-level container and playback driver.

    Membership is not ownership: the same Mobject may also be a child of
    another Mobject in the scene, and its updaters still run once per tick.

    Attributes:
        mobjects: Top-level Mobjects in insertion order
        time: Simulated clock in seconds
        frame_count: Number of playback steps taken so far
        config: Frame rate and run-time ceiling
    """

    def __init__(self, config: Optional[SceneConfig] = None):
        self.config = config or SceneConfig()
        self.mobjects: List[Mobject] = []
        self.time: float = 0.0
        self.frame_count: int = 0
        self.setup()

    def setup(self):
        # Subclasses prepare state here
        pass

    def construct(self):
        # Subclasses build their animation here
        pass

    def run(self) -> Scene:
        self.construct()
        return self

    # -------------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------------

    def add(self, *mobjects: Mobject) -> Scene:
        for mob in mobjects:
            if not any(m is mob for m in self.mobjects):
                self.mobjects.append(mob)
                self.emit(SIGNAL_MOBJECT_ADDED, mob)
        return self

    def remove(self, *mobjects: Mobject) -> Scene:
        for mob in mobjects:
            if any(m is mob for m in self.mobjects):
                self.mobjects = [m for m in self.mobjects if m is not mob]
                self.emit(SIGNAL_MOBJECT_REMOVED, mob)
        return self

    def clear(self) -> Scene:
        return self.remove(*self.mobjects)

    def get_mobjects(self) -> List[Mobject]:
        return list(self.mobjects)

    # -------------------------------------------------------------------------
    # Clock
    # -------------------------------------------------------------------------

    def update(self, dt: float):
        """Advance the clock by dt and run every updater in the scene once."""
        self.time += dt
        seen = set()
        for top in list(self.mobjects):
            for mob in top.get_family():
                if id(mob) in seen:
                    continue
                seen.add(id(mob))
                for updater in list(mob.updaters):
                    updater(mob, dt)

    def _iter_steps(self, duration: float):
        """Yield (step_dt, elapsed) pairs covering exactly `duration` seconds."""
        frame_step = self.config.frame_step
        elapsed = 0.0
        index = 0
        while elapsed < duration:
            index += 1
            new_elapsed = min(index * frame_step, duration)
            if duration - new_elapsed < 1e-9:
                new_elapsed = duration
            yield new_elapsed - elapsed, new_elapsed
            elapsed = new_elapsed

    def _advance_frame(self, dt: float, start_time: float, elapsed: float, duration: float):
        self.update(dt)
        # Pin the clock to the step boundary so rounding never accumulates
        self.time = start_time + elapsed
        self.frame_count += 1
        self.emit(SIGNAL_FRAME, FrameState(
            frame_id=self.frame_count,
            dt=dt,
            t=self.time,
            elapsed=elapsed,
            duration=duration,
        ))

    def wait(self, duration: float = DEFAULT_RUN_TIME) -> Scene:
        """Step the clock and updaters for `duration` seconds with no animations."""
        if not is_valid_duration(duration, self.config.max_run_time):
            logger.warning(
                f"Scene.wait: duration {duration!r} must satisfy "
                f"0 < t <= {self.config.max_run_time}. Skipping."
            )
            return self
        start_time = self.time
        for dt, elapsed in self._iter_steps(duration):
            self._advance_frame(dt, start_time, elapsed, duration)
        return self

    # -------------------------------------------------------------------------
    # Playback
    # -------------------------------------------------------------------------

    def play(self, *animations: Animation) -> Scene:
        """
        Run animations together until the longest valid one completes.

        Each animation's progress is elapsed / its own run_time, capped at 1,
        so shorter animations hold their terminal state while longer ones
        continue. Animations whose run_time is non-finite, non-positive or
        above the configured ceiling do not drive the clock: they are begun
        and finished but not stepped. If none is valid the call does nothing.
        """
        if not animations:
            return self

        ceiling = self.config.max_run_time
        valid = [a for a in animations if is_valid_duration(a.run_time, ceiling)]
        if not valid:
            logger.warning(
                f"Scene.play: no valid animations (each run_time must be "
                f"0 < t <= {ceiling}). Skipping."
            )
            return self
        for anim in animations:
            if not any(anim is v for v in valid):
                logger.warning(
                    f"Scene.play: {anim!r} has invalid run_time {anim.run_time!r}; "
                    f"it will jump to its final state"
                )

        run_time = max(a.run_time for a in valid)

        for anim in animations:
            anim.begin()
            self.add(anim.mobject)
        self.emit(SIGNAL_PLAY_BEGIN, list(animations), run_time)
        start_time = self.time

        for dt, elapsed in self._iter_steps(run_time):
            for anim in valid:
                anim.interpolate(min(elapsed / anim.run_time, 1.0))
            self._advance_frame(dt, start_time, elapsed, run_time)

        for anim in animations:
            anim.finish()
            if anim.remover:
                self.remove(anim.mobject)
        self.emit(SIGNAL_PLAY_END, list(animations))
        return self
