"""
Pattern Engine

Computes the full LED color array for a pattern at a given frame.
The array is rebuilt from scratch on every call; no LED keeps state
between frames except through the frame counter.
"""

import random
from typing import Callable, Dict, List, Optional, Union

from models.color import Color
from models.enums import PatternID
from models.strip_config import clamp_led_count
from patterns import rules
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.PATTERN)

PatternRule = Callable[[int, int, int, random.Random], Color]
PatternLike = Union[PatternID, str]

DEFAULT_RULE: PatternRule = rules.solid_white

# Patterns whose output depends on the random source
NON_DETERMINISTIC = frozenset({PatternID.FIRE, PatternID.SPARKLE})

_default_rng = random.Random()


def _build_pattern_registry() -> Dict[PatternID, PatternRule]:
    """Build pattern registry from PatternID enum"""
    rule_map = {
        PatternID.RAINBOW: rules.rainbow,
        PatternID.WAVE: rules.wave,
        PatternID.CHASE: rules.chase,
        PatternID.STROBE: rules.strobe,
        PatternID.FIRE: rules.fire,
        PatternID.POLICE: rules.police,
        PatternID.SPARKLE: rules.sparkle,
        PatternID.BREATHING: rules.breathing,
    }

    # Keep enum declaration order
    return {pattern_id: rule_map[pattern_id] for pattern_id in PatternID if pattern_id in rule_map}


PATTERN_RULES: Dict[PatternID, PatternRule] = _build_pattern_registry()


def resolve_pattern_id(pattern_id: PatternLike) -> Optional[PatternID]:
    """
    Resolve a PatternID or its name ("rainbow", "RAINBOW") to PatternID

    Returns None for unknown ids. Unknown ids are not an error; callers
    fall back to the default solid white rule.
    """
    if isinstance(pattern_id, PatternID):
        return pattern_id
    if not isinstance(pattern_id, str):
        return None
    try:
        return EnumHelper.from_string(PatternID, pattern_id)
    except ValueError:
        return None


def get_rule(pattern_id: PatternLike) -> PatternRule:
    """Get the per-LED rule for a pattern (solid white if unknown)"""
    resolved = resolve_pattern_id(pattern_id)
    if resolved is None:
        return DEFAULT_RULE
    return PATTERN_RULES.get(resolved, DEFAULT_RULE)


def available_patterns() -> List[PatternID]:
    """Registered pattern ids in declaration order"""
    return list(PATTERN_RULES.keys())


def is_deterministic(pattern_id: PatternLike) -> bool:
    return resolve_pattern_id(pattern_id) not in NON_DETERMINISTIC


def pattern_color(
    pattern_id: PatternLike,
    index: int,
    frame: int,
    led_count: int,
    rng: Optional[random.Random] = None,
) -> Color:
    """Color of a single LED before brightness scaling"""
    return get_rule(pattern_id)(index, frame, led_count, rng or _default_rng)


def compute_frame(
    pattern_id: PatternLike,
    led_count: int,
    frame: int,
    brightness: float,
    rng: Optional[random.Random] = None,
) -> List[Color]:
    """
    Compute the color of every LED for one frame

    Args:
        pattern_id: Pattern to render (PatternID or its name)
        led_count: Number of LEDs (0 is forced to 1, negative raises)
        frame: Frame counter (non-negative)
        brightness: Brightness percent (clamped to 0-100)
        rng: Random source for fire/sparkle; module default if omitted

    Returns:
        List of Color with length led_count

    Raises:
        ValueError: led_count or frame is negative

    Example:
        leds = compute_frame(PatternID.RAINBOW, 20, frame=0, brightness=100)
        leds = compute_frame("fire", 20, 5, 80, rng=random.Random(42))
    """
    led_count = clamp_led_count(led_count)
    if frame < 0:
        raise ValueError(f"frame must not be negative, got {frame}")

    resolved = resolve_pattern_id(pattern_id)
    if resolved is None:
        log.debug(f"Unknown pattern '{pattern_id}', using solid white")
    rule = get_rule(pattern_id)
    rng = rng or _default_rng

    return [
        rule(i, frame, led_count, rng).with_brightness(brightness)
        for i in range(led_count)
    ]
