"""
Color conversion utilities

Pure functions for color space conversions and brightness scaling.
All channel math rounds half away from zero and clamps to 0-255.
"""

import math
from typing import Tuple


def round_half_away(value: float) -> int:
    """
    Round to nearest integer, ties away from zero

    Python's built-in round() uses banker's rounding (round(0.5) == 0),
    which would shift channel values compared to the preview reference.

    Example:
        round_half_away(127.5)   # 128
        round_half_away(-0.5)    # -1
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def clamp_channel(value: int) -> int:
    """Clamp an integer channel value to 0-255"""
    return max(0, min(255, value))


def round_channel(value: float) -> int:
    """Round a float channel value and clamp it to 0-255"""
    return clamp_channel(round_half_away(value))


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """
    Convert HSL to RGB (0-255)

    Uses the k/a/f decomposition:
        k(n) = (n + h/30) mod 12
        a    = s * min(l, 1 - l)
        f(n) = l - a * max(-1, min(k(n) - 3, 9 - k(n), 1))

    Args:
        hue: Hue in degrees (0-360)
        saturation: Saturation percent (0-100)
        lightness: Lightness percent (0-100)

    Returns:
        (r, g, b) tuple with values 0-255

    Example:
        r, g, b = hsl_to_rgb(0, 100, 50)    # (255, 0, 0)
        r, g, b = hsl_to_rgb(120, 100, 50)  # (0, 255, 0)
    """
    s = saturation / 100
    l = lightness / 100

    def k(n: float) -> float:
        return (n + hue / 30) % 12

    a = s * min(l, 1 - l)

    def f(n: float) -> float:
        return l - a * max(-1, min(k(n) - 3, 9 - k(n), 1))

    return (
        round_channel(255 * f(0)),
        round_channel(255 * f(8)),
        round_channel(255 * f(4)),
    )


def scale_rgb(r: int, g: int, b: int, brightness: float) -> Tuple[int, int, int]:
    """
    Scale RGB channels by a brightness percentage

    Brightness is clamped to 0-100; every channel is multiplied by
    brightness/100, rounded half away from zero and clamped to 0-255.

    Example:
        scale_rgb(200, 200, 200, 50)  # (100, 100, 100)
    """
    factor = max(0.0, min(100.0, brightness)) / 100
    return (
        round_channel(r * factor),
        round_channel(g * factor),
        round_channel(b * factor),
    )
