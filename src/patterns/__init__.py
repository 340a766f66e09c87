"""
Pattern system for LED strips

- rules: one pure per-LED color rule per pattern
- engine: registry and compute_frame() over the whole strip
"""

from .engine import (
    PATTERN_RULES,
    available_patterns,
    compute_frame,
    is_deterministic,
    pattern_color,
    resolve_pattern_id,
)

__all__ = [
    "PATTERN_RULES",
    "available_patterns",
    "compute_frame",
    "is_deterministic",
    "pattern_color",
    "resolve_pattern_id",
]
