"""
Strip configuration model

StripConfig holds the user-tunable numbers of a design session. Ranges
are stateless IntRange definitions; out-of-range values are clamped,
never rejected. Only a negative LED count is treated as a caller bug.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class IntRange:
    """Integer parameter with min/max - stateless definition."""

    label: str
    min: int
    max: Optional[int]
    default: int

    def clamp(self, value: int) -> int:
        """Clamp to [min, max] (max=None means unbounded)"""
        value = max(self.min, int(value))
        if self.max is not None:
            value = min(self.max, value)
        return value


# The engine accepts any positive LED count (the UI slider stops at 5-100).
LED_COUNT = IntRange(label="LED count", min=1, max=None, default=20)
BRIGHTNESS = IntRange(label="Brightness", min=10, max=100, default=100)
SPEED = IntRange(label="Speed", min=0, max=100, default=50)


def _require_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {type(value).__name__}")
    return int(value)


def clamp_led_count(value) -> int:
    """
    Force LED count to >= 1

    A negative count is a programming error in the caller and fails fast.
    Zero is clamped up to one.
    """
    value = _require_int("led_count", value)
    if value < 0:
        raise ValueError(f"led_count must not be negative, got {value}")
    return LED_COUNT.clamp(value)


def clamp_brightness(value) -> int:
    return BRIGHTNESS.clamp(_require_int("brightness", value))


def clamp_speed(value) -> int:
    return SPEED.clamp(_require_int("speed", value))


@dataclass(frozen=True)
class StripConfig:
    """
    LED strip configuration

    Invariant: led_count > 0, brightness in [10, 100], speed in [0, 100].
    Use StripConfig.clamped() to build one from untrusted numbers.
    """

    led_count: int = LED_COUNT.default
    brightness: int = BRIGHTNESS.default
    speed: int = SPEED.default

    def __post_init__(self):
        if self.led_count <= 0:
            raise ValueError(f"led_count must be > 0, got {self.led_count}")

    @classmethod
    def clamped(
        cls,
        led_count=LED_COUNT.default,
        brightness=BRIGHTNESS.default,
        speed=SPEED.default,
    ) -> StripConfig:
        return cls(
            led_count=clamp_led_count(led_count),
            brightness=clamp_brightness(brightness),
            speed=clamp_speed(speed),
        )

    def with_led_count(self, value) -> StripConfig:
        return replace(self, led_count=clamp_led_count(value))

    def with_brightness(self, value) -> StripConfig:
        return replace(self, brightness=clamp_brightness(value))

    def with_speed(self, value) -> StripConfig:
        return replace(self, speed=clamp_speed(value))
