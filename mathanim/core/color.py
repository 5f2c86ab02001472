# mathanim/core/color.py
"""
Hex color strings and their normalized RGB form.

Mobjects store colors as "#RRGGBB" strings and expand them to per-point
RGBA when written into a point buffer. Parsing never raises: malformed
input becomes black and a warning is logged.
"""

from __future__ import annotations
import logging
import math
import re
from typing import List, Sequence

import numpy as np

logger = logging.getLogger(__name__)

Color = str

WHITE = "#FFFFFF"
BLACK = "#000000"
RED = "#FF0000"
GREEN = "#00FF00"
BLUE = "#0000FF"
YELLOW = "#FFFF00"

DEFAULT_MOBJECT_COLOR = WHITE

MAX_GRADIENT_LENGTH = 10000

_HEX_PATTERN = re.compile(r"^#([A-Fa-f0-9]{3}|[A-Fa-f0-9]{6})$")


def hex_to_rgb(hex_str: Color) -> np.ndarray:
    """
    Parse '#RGB' or '#RRGGBB' into an RGB array with 0-1 components.

    Anything else logs a warning and returns black.
    """
    if not isinstance(hex_str, str) or not _HEX_PATTERN.match(hex_str):
        logger.warning(f"Invalid hex color string {hex_str!r}. Returning black.")
        return np.zeros(3)

    digits = hex_str[1:]
    if len(digits) == 3:
        digits = "".join(2 * c for c in digits)
    return np.array([int(digits[i:i + 2], 16) / 255.0 for i in range(0, 6, 2)])


def rgb_to_hex(rgb: Sequence[float]) -> Color:
    """Format 0-1 RGB components as an uppercase '#RRGGBB' string."""
    channels = [int(round(min(max(c, 0.0), 1.0) * 255)) for c in rgb[:3]]
    return "#{:02X}{:02X}{:02X}".format(*channels)


def interpolate_color(color1: Color, color2: Color, alpha: float) -> Color:
    rgb = (1 - alpha) * hex_to_rgb(color1) + alpha * hex_to_rgb(color2)
    return rgb_to_hex(rgb)


def color_gradient(colors: Sequence[Color], length: int) -> List[Color]:
    """
    Spread `length` colors evenly along the piecewise-linear path through `colors`.

    Non-finite or non-positive lengths give an empty list; lengths above
    MAX_GRADIENT_LENGTH are truncated with a warning.
    """
    try:
        if not math.isfinite(length) or length <= 0:
            return []
    except TypeError:
        return []

    length = int(math.floor(length))
    if length == 0:
        return []
    if length > MAX_GRADIENT_LENGTH:
        logger.warning(
            f"color_gradient: length {length} exceeds maximum allowed size "
            f"({MAX_GRADIENT_LENGTH}). Truncating."
        )
        length = MAX_GRADIENT_LENGTH

    if len(colors) == 0:
        return [BLACK] * length
    if length == 1 or len(colors) == 1:
        return [colors[0]] * length

    rgbs = [hex_to_rgb(c) for c in colors]
    result = []
    for i in range(length):
        # Position along the color list, from 0 to len(colors) - 1
        pos = i * (len(rgbs) - 1) / (length - 1)
        index = min(int(pos), len(rgbs) - 2)
        alpha = pos - index
        result.append(rgb_to_hex((1 - alpha) * rgbs[index] + alpha * rgbs[index + 1]))
    return result
