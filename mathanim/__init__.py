# mathanim/__init__.py
"""
mathanim - Scene graph and timing engine for procedural math animation.

Key components:

- Mobject: Scene graph node owning a point buffer, color state and children
- VMobject: Mobject whose points form a path of quadratic Bezier curves
- Animation: begin / interpolate / finish driver bound to one Mobject
- Scene: Top-level Mobject list plus a stepped simulated clock

Example usage:

    from mathanim import Scene, Circle, Square, ShowCreation, FadeIn, RED

    scene = Scene()
    circle = Circle(radius=2.0, color=RED)
    square = Square(side_length=1.0).shift([3.0, 0.0, 0.0])

    square.add_updater(lambda mob, dt: mob.rotate(dt))

    scene.play(ShowCreation(circle), FadeIn(square, run_time=0.5))
    scene.wait(1.0)
"""

# Core
from mathanim.core.errors import (
    MathanimError,
    StructuralError,
    InvalidParameterError,
)
from mathanim.core.config import (
    SceneConfig,
    FrameConfig,
    VMobjectStyle,
    DEFAULT_FRAME_RATE,
    DEFAULT_RUN_TIME,
    MAX_RUN_TIME,
)
from mathanim.core.math3d import (
    ORIGIN, UP, DOWN, LEFT, RIGHT, IN, OUT,
    PI, TAU, DEGREES,
    linear,
    smooth,
    rush_into,
    rush_from,
    there_and_back,
    ease_in_quad,
    ease_out_quad,
    ease_in_out_quad,
    ease_in_cubic,
    ease_out_cubic,
    ease_in_out_cubic,
    ease_out_bounce,
    rotation_matrix,
)
from mathanim.core.bezier import (
    bezier,
    choose,
    interpolate,
    integer_interpolate,
    partial_quadratic_bezier_points,
    quadratic_bezier_points_for_arc,
)
from mathanim.core.color import (
    Color,
    WHITE, BLACK, RED, GREEN, BLUE, YELLOW,
    hex_to_rgb,
    rgb_to_hex,
    interpolate_color,
    color_gradient,
)
from mathanim.core.frame import FrameState
from mathanim.core.signal import (
    SignalBridge,
    SIGNAL_MOBJECT_ADDED,
    SIGNAL_MOBJECT_REMOVED,
    SIGNAL_PLAY_BEGIN,
    SIGNAL_FRAME,
    SIGNAL_PLAY_END,
)

# Mobjects
from mathanim.mobject.mobject import Mobject, Group
from mathanim.mobject.vmobject import VMobject, VGroup, partial_path_points
from mathanim.mobject.geometry import (
    Polygon,
    RegularPolygon,
    Triangle,
    Rectangle,
    Square,
    Line,
    Arc,
    Circle,
    Ellipse,
    Dot,
)

# Animations
from mathanim.animation.animation import (
    Animation,
    AnimationState,
    FadeIn,
    FadeOut,
)
from mathanim.animation.creation import ShowCreation, Uncreate, Write

# Scene
from mathanim.scene.scene import Scene

from mathanim.logging_config import setup_logging

__all__ = [
    # Errors
    'MathanimError',
    'StructuralError',
    'InvalidParameterError',

    # Config
    'SceneConfig',
    'FrameConfig',
    'VMobjectStyle',
    'DEFAULT_FRAME_RATE',
    'DEFAULT_RUN_TIME',
    'MAX_RUN_TIME',

    # Math
    'ORIGIN', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'IN', 'OUT',
    'PI', 'TAU', 'DEGREES',
    'linear',
    'smooth',
    'rush_into',
    'rush_from',
    'there_and_back',
    'ease_in_quad',
    'ease_out_quad',
    'ease_in_out_quad',
    'ease_in_cubic',
    'ease_out_cubic',
    'ease_in_out_cubic',
    'ease_out_bounce',
    'rotation_matrix',
    'bezier',
    'choose',
    'interpolate',
    'integer_interpolate',
    'partial_quadratic_bezier_points',
    'quadratic_bezier_points_for_arc',

    # Color
    'Color',
    'WHITE', 'BLACK', 'RED', 'GREEN', 'BLUE', 'YELLOW',
    'hex_to_rgb',
    'rgb_to_hex',
    'interpolate_color',
    'color_gradient',

    # Signals
    'FrameState',
    'SignalBridge',
    'SIGNAL_MOBJECT_ADDED',
    'SIGNAL_MOBJECT_REMOVED',
    'SIGNAL_PLAY_BEGIN',
    'SIGNAL_FRAME',
    'SIGNAL_PLAY_END',

    # Mobjects
    'Mobject',
    'Group',
    'VMobject',
    'VGroup',
    'partial_path_points',
    'Polygon',
    'RegularPolygon',
    'Triangle',
    'Rectangle',
    'Square',
    'Line',
    'Arc',
    'Circle',
    'Ellipse',
    'Dot',

    # Animations
    'Animation',
    'AnimationState',
    'FadeIn',
    'FadeOut',
    'ShowCreation',
    'Uncreate',
    'Write',

    # Scene
    'Scene',

    'setup_logging',
]
