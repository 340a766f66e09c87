"""
Enums for the LED pattern generator
"""

from enum import Enum, auto


class PatternID(Enum):
    """
    Pattern identifiers

    Values are the lowercase names used by the UI, the API and the
    generated firmware routine (e.g. "rainbow" -> rainbowPattern()).
    New patterns are added here and registered in patterns.engine and
    codegen.snippets.
    """
    RAINBOW = "rainbow"
    WAVE = "wave"
    CHASE = "chase"
    STROBE = "strobe"
    FIRE = "fire"
    POLICE = "police"
    SPARKLE = "sparkle"
    BREATHING = "breathing"


class ClockState(Enum):
    """Animation clock states"""
    IDLE = auto()
    RUNNING = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    PATTERN = auto()     # Pattern engine evaluation
    CLOCK = auto()       # Animation clock start/stop/ticks
    CODEGEN = auto()     # Firmware source generation
    SESSION = auto()     # Preview session state changes
    API = auto()         # HTTP API
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()     # Default general category
