"""
Models package - Data models for the LED pattern generator
"""

from .enums import PatternID, ClockState, LogLevel, LogCategory
from .color import Color, hsl_color, apply_brightness
from .strip_config import StripConfig

__all__ = [
    'PatternID',
    'ClockState',
    'LogLevel',
    'LogCategory',
    'Color',
    'hsl_color',
    'apply_brightness',
    'StripConfig',
]
