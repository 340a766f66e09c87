"""
Tests for StripConfig and its clamping helpers.
"""

from dataclasses import asdict

import pytest

from models.strip_config import (
    StripConfig, clamp_brightness, clamp_led_count, clamp_speed,
)


class TestClamping:

    def test_led_count_zero_becomes_one(self):
        assert clamp_led_count(0) == 1

    def test_led_count_negative_raises(self):
        with pytest.raises(ValueError):
            clamp_led_count(-1)

    def test_led_count_has_no_upper_bound(self):
        assert clamp_led_count(1000) == 1000

    def test_brightness_range(self):
        assert clamp_brightness(0) == 10
        assert clamp_brightness(150) == 100
        assert clamp_brightness(55) == 55

    def test_speed_range(self):
        assert clamp_speed(-10) == 0
        assert clamp_speed(120) == 100

    def test_non_numbers_rejected(self):
        with pytest.raises(ValueError):
            clamp_speed("fast")
        with pytest.raises(ValueError):
            clamp_brightness(True)


class TestStripConfig:

    def test_defaults(self):
        config = StripConfig()
        assert asdict(config) == {"led_count": 20, "brightness": 100, "speed": 50}

    def test_zero_led_count_rejected_by_constructor(self):
        with pytest.raises(ValueError):
            StripConfig(led_count=0)

    def test_clamped_factory(self):
        config = StripConfig.clamped(led_count=0, brightness=5, speed=200)
        assert config == StripConfig(led_count=1, brightness=10, speed=100)

    def test_with_methods_return_copies(self):
        config = StripConfig()
        faster = config.with_speed(80)
        assert faster.speed == 80
        assert config.speed == 50
