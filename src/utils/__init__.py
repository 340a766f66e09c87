"""
Utility functions for the LED pattern generator
"""

from .colors import (
    round_half_away,
    clamp_channel,
    round_channel,
    hsl_to_rgb,
    scale_rgb,
)

__all__ = [
    'round_half_away',
    'clamp_channel',
    'round_channel',
    'hsl_to_rgb',
    'scale_rgb',
]
