"""
Code generation - Arduino/FastLED sketches mirroring the pattern engine
"""

from .firmware import (
    CodegenError,
    FirmwareOptions,
    generate_firmware_source,
    pattern_routine_name,
    pattern_snippet,
)

__all__ = [
    "CodegenError",
    "FirmwareOptions",
    "generate_firmware_source",
    "pattern_routine_name",
    "pattern_snippet",
]
