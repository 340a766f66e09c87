"""
Engine package - animation timing
"""

from .animation_clock import AnimationClock

__all__ = ["AnimationClock"]
