"""
Pattern rules

One function per pattern. Each rule maps a single LED position at a given
frame to its color BEFORE brightness scaling:

    rule(i, frame, led_count, rng) -> Color

Rules must be pure for deterministic patterns. Fire and sparkle draw from
the injected random.Random instance and nothing else.
"""

import math
import random

from models.color import Color
from utils.colors import round_half_away

SPARKLE_BACKGROUND = Color(0, 0, 20)
SPARKLE_THRESHOLD = 0.95

RAINBOW_DEGREES_PER_FRAME = 2
PHASE_RADIANS_PER_FRAME = 0.1


def rainbow(i: int, frame: int, led_count: int, rng: random.Random) -> Color:
    """Hue spread across the strip, rotating 2 degrees per frame"""
    hue = ((i / led_count) * 360 + frame * RAINBOW_DEGREES_PER_FRAME) % 360
    return Color.from_hsl(hue, 100, 50)


def wave(i: int, frame: int, led_count: int, rng: random.Random) -> Color:
    """Red/green sine wave travelling along the strip, constant blue"""
    w = math.sin((i / led_count) * math.pi * 2 + frame * PHASE_RADIANS_PER_FRAME) * 0.5 + 0.5
    return Color(round_half_away(w * 255), round_half_away((1 - w) * 255), 128)


def chase(i: int, frame: int, led_count: int, rng: random.Random) -> Color:
    """Purple head at frame % led_count with a linear 3-LED falloff"""
    chase_pos = frame % led_count
    distance = abs(i - chase_pos)
    intensity = max(0.0, 1 - distance / 3)
    return Color(
        round_half_away(intensity * 255),
        round_half_away(intensity * 100),
        round_half_away(intensity * 255),
    )


def strobe(i: int, frame: int, led_count: int, rng: random.Random) -> Color:
    """Whole strip on for two frames, off for two frames"""
    strobe_on = (frame // 2) % 2 == 0
    return Color.white() if strobe_on else Color.black()


def fire(i: int, frame: int, led_count: int, rng: random.Random) -> Color:
    """Flickering orange, intensity re-sampled in [0.5, 1.0) every call"""
    intensity = rng.random() * 0.5 + 0.5
    return Color(round_half_away(255 * intensity), round_half_away(100 * intensity), 0)


def police(i: int, frame: int, led_count: int, rng: random.Random) -> Color:
    """
    First half red on phase 0, second half blue on phase 1

    Phase flips every 3 frames. Red keys on phase == 0 and blue on
    phase == 1, so the halves alternate rather than flash together.
    """
    half = led_count // 2
    phase = (frame // 3) % 2
    if i < half:
        return Color.red() if phase == 0 else Color.black()
    return Color.blue() if phase == 1 else Color.black()


def sparkle(i: int, frame: int, led_count: int, rng: random.Random) -> Color:
    """White flashes with ~5% probability per LED over a dim blue background"""
    return Color.white() if rng.random() > SPARKLE_THRESHOLD else SPARKLE_BACKGROUND


def breathing(i: int, frame: int, led_count: int, rng: random.Random) -> Color:
    """Whole strip pulses a soft blue with a sine envelope"""
    breathe = (math.sin(frame * PHASE_RADIANS_PER_FRAME) + 1) / 2
    return Color(
        round_half_away(breathe * 100),
        round_half_away(breathe * 150),
        round_half_away(breathe * 255),
    )


def solid_white(i: int, frame: int, led_count: int, rng: random.Random) -> Color:
    """Fallback for unknown pattern ids"""
    return Color.white()
