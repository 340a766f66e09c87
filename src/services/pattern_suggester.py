"""
Pattern suggester

Maps a free-text prompt to a pattern by keyword. Ordered table, first
match wins, case-insensitive substring match.
"""

from typing import Sequence, Tuple

from models.enums import PatternID

KEYWORD_PATTERNS: Sequence[Tuple[str, PatternID]] = (
    ("ocean", PatternID.WAVE),
    ("party", PatternID.RAINBOW),
    ("emergency", PatternID.POLICE),
)

FALLBACK_PATTERN = PatternID.SPARKLE


def suggest_pattern(
    prompt: str,
    table: Sequence[Tuple[str, PatternID]] = KEYWORD_PATTERNS,
    fallback: PatternID = FALLBACK_PATTERN,
) -> PatternID:
    """
    Example:
        suggest_pattern("Create a calm ocean wave effect")   # PatternID.WAVE
        suggest_pattern("something cozy")                   # PatternID.SPARKLE
    """
    text = (prompt or "").lower()
    for keyword, pattern_id in table:
        if keyword in text:
            return pattern_id
    return fallback
