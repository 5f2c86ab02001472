# mathanim/core/frame.py
"""
Frame State

Immutable record handed to SIGNAL_FRAME listeners after every playback
step of Scene.play or Scene.wait.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class FrameState:
    """
    Snapshot of the scene clock for one stepped frame.
    """
    frame_id: int           # Scene-wide step counter, starting at 1
    dt: float               # Simulated seconds advanced by this step
    t: float                # Scene clock after this step (seconds)
    elapsed: float = 0.0    # Seconds into the current play/wait call
    duration: float = 0.0   # Total length of the current play/wait call

    @property
    def progress(self) -> float:
        """Fraction of the current call completed, 1.0 on its last frame."""
        if self.duration <= 0:
            return 1.0
        return min(self.elapsed / self.duration, 1.0)

    @property
    def is_last(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def fps(self) -> float:
        """Rate implied by this step's dt; the clipped last step reads high."""
        return 1.0 / max(1e-6, self.dt)
