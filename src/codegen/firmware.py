"""
Firmware source generator

Renders an Arduino/FastLED sketch that plays the same pattern as the
preview. The sketch is assembled from a fixed template with @@TOKEN@@
placeholders and one pattern snippet from codegen.snippets.

Generation is pure string formatting: identical arguments always give
byte-identical output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Union

from codegen.snippets import HELPER_FUNCTIONS, PATTERN_SNIPPETS, SOLID_WHITE
from models.enums import PatternID
from models.strip_config import clamp_led_count, clamp_speed
from patterns.engine import resolve_pattern_id
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CODEGEN)

TOKEN_RE = re.compile(r"@@[A-Z0-9_]+@@")
_IDENT_RE = re.compile(r"[^0-9A-Za-z_]")

SKETCH_TEMPLATE = """\
// LED Generator sketch: @@PATTERN_NAME@@ pattern
#include <FastLED.h>

#define LED_PIN     @@LED_PIN@@
#define NUM_LEDS    @@NUM_LEDS@@
#define BRIGHTNESS  @@BRIGHTNESS@@
#define LED_TYPE    @@LED_TYPE@@
#define COLOR_ORDER @@COLOR_ORDER@@

CRGB leds[NUM_LEDS];

void setup() {
  FastLED.addLeds<LED_TYPE, LED_PIN, COLOR_ORDER>(leds, NUM_LEDS);
  FastLED.setBrightness(BRIGHTNESS);
}

void loop() {
  @@ROUTINE@@();
  FastLED.show();
  delay(@@FRAME_DELAY@@);
}

void @@ROUTINE@@() {
  static uint32_t frame = 0;
  frame++;

  @@PATTERN_BODY@@
}

@@HELPERS@@
"""


class CodegenError(Exception):
    """Rendered sketch is malformed (leftover template tokens)"""


@dataclass(frozen=True)
class FirmwareOptions:
    """Board wiring emitted into the sketch preamble"""

    led_pin: int = 6
    led_type: str = "WS2812B"
    color_order: str = "GRB"


def pattern_routine_name(pattern_id: Union[PatternID, str]) -> str:
    """
    C identifier of the per-pattern update routine

    Example:
        pattern_routine_name(PatternID.RAINBOW)   # "rainbowPattern"
        pattern_routine_name("my-glow")           # "my_glowPattern"
    """
    resolved = resolve_pattern_id(pattern_id)
    if resolved is not None:
        name = resolved.value
    else:
        name = _IDENT_RE.sub("_", str(pattern_id).strip()) or "solid"
        if name[0].isdigit():
            name = f"p{name}"
    return f"{name}Pattern"


def pattern_snippet(pattern_id: Union[PatternID, str]) -> str:
    """Snippet for a pattern; unknown ids fill the strip solid white"""
    resolved = resolve_pattern_id(pattern_id)
    if resolved is None:
        return SOLID_WHITE
    return PATTERN_SNIPPETS.get(resolved, SOLID_WHITE)


def _render(template: str, tokens: Dict[str, str]) -> str:
    text = template
    for key, value in tokens.items():
        text = text.replace(f"@@{key}@@", value)
    return text


def _validate_artifact_text(text: str) -> None:
    leftover = sorted(set(TOKEN_RE.findall(text)))
    if leftover:
        raise CodegenError(f"Unresolved template tokens: {', '.join(leftover)}")


def generate_firmware_source(
    pattern_id: Union[PatternID, str],
    led_count: int,
    brightness: int,
    speed: int,
    options: FirmwareOptions = FirmwareOptions(),
) -> str:
    """
    Generate a complete FastLED sketch for a pattern

    Args:
        pattern_id: Pattern to export (PatternID or its name)
        led_count: Number of LEDs (0 is forced to 1, negative raises)
        brightness: Brightness percent, emitted verbatim as BRIGHTNESS
        speed: Speed percent; loop delay is 100 - speed ms
        options: Pin / chipset / color order

    Returns:
        Sketch source text

    Example:
        code = generate_firmware_source(PatternID.POLICE, 30, 80, 50)
    """
    led_count = clamp_led_count(led_count)
    brightness = max(0, min(100, int(brightness)))
    speed = clamp_speed(speed)

    routine = pattern_routine_name(pattern_id)
    pattern_name = routine[: -len("Pattern")]

    tokens = {
        "PATTERN_NAME": pattern_name,
        "LED_PIN": str(options.led_pin),
        "NUM_LEDS": str(led_count),
        "BRIGHTNESS": str(brightness),
        "LED_TYPE": options.led_type,
        "COLOR_ORDER": options.color_order,
        "ROUTINE": routine,
        "FRAME_DELAY": str(100 - speed),
        "PATTERN_BODY": pattern_snippet(pattern_id),
        "HELPERS": HELPER_FUNCTIONS,
    }

    code = _render(SKETCH_TEMPLATE, tokens)
    _validate_artifact_text(code)

    log.debug(
        "Firmware source generated",
        pattern=pattern_name,
        num_leds=led_count,
        frame_delay_ms=100 - speed,
        chars=len(code),
    )
    return code
