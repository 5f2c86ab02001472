# mathanim/core/config.py
"""
Configuration objects and global constants.

Playback and frame settings are plain dataclasses so a Scene can be handed
a customised copy without touching module state.
"""

from __future__ import annotations
from dataclasses import dataclass

DEFAULT_FRAME_RATE = 60.0
DEFAULT_RUN_TIME = 1.0
MAX_RUN_TIME = 300.0

SMALL_BUFF = 0.1
MED_SMALL_BUFF = 0.25
MED_LARGE_BUFF = 0.5
LARGE_BUFF = 1.0

DEFAULT_MOBJECT_TO_EDGE_BUFF = MED_LARGE_BUFF
DEFAULT_MOBJECT_TO_MOBJECT_BUFF = MED_SMALL_BUFF


@dataclass
class SceneConfig:
    frame_rate: float = DEFAULT_FRAME_RATE
    max_run_time: float = MAX_RUN_TIME

    @property
    def frame_step(self) -> float:
        """Simulated seconds advanced per playback step."""
        return 1.0 / self.frame_rate


@dataclass
class FrameConfig:
    pixel_width: int = 1920
    pixel_height: int = 1080
    frame_height: float = 8.0

    @property
    def aspect_ratio(self) -> float:
        return self.pixel_width / self.pixel_height

    @property
    def frame_width(self) -> float:
        return self.frame_height * self.aspect_ratio

    @property
    def frame_x_radius(self) -> float:
        return self.frame_width / 2.0

    @property
    def frame_y_radius(self) -> float:
        return self.frame_height / 2.0


@dataclass
class VMobjectStyle:
    stroke_width: float = 4.0
    stroke_opacity: float = 1.0
    fill_opacity: float = 0.0


DEFAULT_FRAME = FrameConfig()
FRAME_WIDTH = DEFAULT_FRAME.frame_width
FRAME_HEIGHT = DEFAULT_FRAME.frame_height
FRAME_X_RADIUS = DEFAULT_FRAME.frame_x_radius
FRAME_Y_RADIUS = DEFAULT_FRAME.frame_y_radius
