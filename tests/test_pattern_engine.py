"""
Tests for the pattern engine.

Deterministic patterns are checked against exact RGB values; fire and
sparkle are checked against a seeded random source and their value ranges.
"""

import random

import pytest

from models.color import Color
from models.enums import PatternID
from patterns.engine import (
    PATTERN_RULES, available_patterns, compute_frame, is_deterministic,
    pattern_color, resolve_pattern_id,
)
from patterns.rules import SPARKLE_BACKGROUND

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)


class TestRegistry:

    def test_all_patterns_registered_in_order(self):
        assert available_patterns() == [
            PatternID.RAINBOW, PatternID.WAVE, PatternID.CHASE, PatternID.STROBE,
            PatternID.FIRE, PatternID.POLICE, PatternID.SPARKLE, PatternID.BREATHING,
        ]
        assert set(PATTERN_RULES) == set(PatternID)

    @pytest.mark.parametrize("name,expected", [
        ("rainbow", PatternID.RAINBOW),
        ("POLICE", PatternID.POLICE),
        (" fire ", PatternID.FIRE),
        (PatternID.WAVE, PatternID.WAVE),
        ("lava", None),
        (42, None),
    ])
    def test_resolve_pattern_id(self, name, expected):
        assert resolve_pattern_id(name) is expected

    def test_deterministic_flags(self):
        assert not is_deterministic(PatternID.FIRE)
        assert not is_deterministic("sparkle")
        assert is_deterministic(PatternID.RAINBOW)


class TestComputeFrame:

    def test_length_matches_led_count(self):
        for pattern_id in PatternID:
            leds = compute_frame(pattern_id, 7, 3, 100, rng=random.Random(0))
            assert len(leds) == 7

    @pytest.mark.parametrize("pattern_id", [
        p for p in PatternID if p not in (PatternID.FIRE, PatternID.SPARKLE)
    ])
    def test_deterministic_patterns_repeat_exactly(self, pattern_id):
        first = compute_frame(pattern_id, 12, 17, 80)
        second = compute_frame(pattern_id, 12, 17, 80)
        assert first == second

    def test_led_count_zero_is_treated_as_one(self):
        assert compute_frame(PatternID.RAINBOW, 0, 0, 100) == [RED]

    def test_single_led(self):
        assert compute_frame(PatternID.CHASE, 1, 5, 100) == [Color(255, 100, 255)]

    def test_negative_led_count_raises(self):
        with pytest.raises(ValueError):
            compute_frame(PatternID.RAINBOW, -1, 0, 100)

    def test_negative_frame_raises(self):
        with pytest.raises(ValueError):
            compute_frame(PatternID.RAINBOW, 10, -1, 100)

    def test_unknown_pattern_is_solid_white(self):
        assert compute_frame("lava", 4, 9, 100) == [WHITE] * 4

    def test_brightness_scales_every_led(self):
        leds = compute_frame(PatternID.STROBE, 3, 0, 50)
        assert leds == [Color(128, 128, 128)] * 3

    def test_brightness_out_of_range_is_clamped(self):
        assert compute_frame(PatternID.STROBE, 2, 0, 250) == [WHITE] * 2
        assert compute_frame(PatternID.STROBE, 2, 0, -5) == [BLACK] * 2


class TestDeterministicPatterns:

    def test_rainbow_first_frame(self):
        leds = compute_frame(PatternID.RAINBOW, 20, 0, 100)
        assert leds[0] == RED
        assert leds[5] == Color(128, 255, 0)   # hue 90

    def test_rainbow_rotates_two_degrees_per_frame(self):
        assert pattern_color(PatternID.RAINBOW, 0, 60, 20) == Color(0, 255, 0)  # hue 120

    def test_wave_first_led(self):
        assert pattern_color(PatternID.WAVE, 0, 0, 10) == Color(128, 128, 128)

    def test_chase_falloff(self):
        leds = compute_frame(PatternID.CHASE, 10, 0, 100)
        assert leds[0] == Color(255, 100, 255)
        assert leds[1] == Color(170, 67, 170)
        assert leds[2] == Color(85, 33, 85)
        assert leds[3] == BLACK

    def test_chase_head_wraps_around(self):
        leds = compute_frame(PatternID.CHASE, 10, 12, 100)
        assert leds[2] == Color(255, 100, 255)

    @pytest.mark.parametrize("frame,expected", [
        (0, WHITE), (1, WHITE), (2, BLACK), (3, BLACK), (4, WHITE),
    ])
    def test_strobe_two_on_two_off(self, frame, expected):
        assert compute_frame(PatternID.STROBE, 5, frame, 100) == [expected] * 5

    def test_police_phase_zero_lights_first_half_red(self):
        leds = compute_frame(PatternID.POLICE, 10, 0, 100)
        assert leds[3] == RED
        assert leds[:5] == [RED] * 5
        assert leds[5:] == [BLACK] * 5

    def test_police_phase_one_lights_second_half_blue(self):
        leds = compute_frame(PatternID.POLICE, 10, 3, 100)
        assert leds[:5] == [BLACK] * 5
        assert leds[5:] == [BLUE] * 5

    def test_police_odd_count_gives_extra_led_to_blue_half(self):
        leds = compute_frame(PatternID.POLICE, 5, 3, 100)
        assert leds == [BLACK, BLACK, BLUE, BLUE, BLUE]

    def test_breathing_is_uniform(self):
        leds = compute_frame(PatternID.BREATHING, 6, 0, 100)
        assert leds == [Color(50, 75, 128)] * 6


class TestRandomPatterns:

    def test_fire_repeats_with_same_seed(self):
        a = compute_frame(PatternID.FIRE, 20, 4, 100, rng=random.Random(7))
        b = compute_frame(PatternID.FIRE, 20, 4, 100, rng=random.Random(7))
        assert a == b

    def test_fire_channel_ranges(self, rng):
        for led in compute_frame(PatternID.FIRE, 200, 0, 100, rng=rng):
            assert 128 <= led.r <= 255
            assert 50 <= led.g <= 100
            assert led.b == 0

    def test_sparkle_is_white_or_background(self, rng):
        leds = compute_frame(PatternID.SPARKLE, 500, 0, 100, rng=rng)
        assert set(leds) <= {WHITE, SPARKLE_BACKGROUND}
        assert SPARKLE_BACKGROUND in leds

    def test_sparkle_threshold(self):
        class FixedRandom(random.Random):
            def __init__(self, value):
                super().__init__()
                self.value = value

            def random(self):
                return self.value

        assert pattern_color(PatternID.SPARKLE, 0, 0, 1, rng=FixedRandom(0.96)) == WHITE
        assert pattern_color(PatternID.SPARKLE, 0, 0, 1, rng=FixedRandom(0.95)) == SPARKLE_BACKGROUND
