"""
FastLED snippets, one per pattern

Each snippet is the body of <pattern>Pattern() after the frame counter
has been incremented. It reproduces the preview rule from patterns.rules
in FastLED idiom: 0-255 hue/sine units instead of degrees/radians and
random8() instead of floating point random.

Hue: 2 degrees per frame is a 180-frame cycle, so the frame term is
(frame % 180) * 256 / 180 hue units. Sine phase: 0.1 rad per frame maps
to ~4 sin8 units per frame.

Arithmetic that can exceed 16 bits is promoted (256L, uint16_t), since
int is 16-bit on AVR boards.
"""

from typing import Dict

from models.enums import PatternID

RAINBOW = """\
for(int i = 0; i < NUM_LEDS; i++) {
    uint8_t hue = (i * 256L / NUM_LEDS + (frame % 180) * 256 / 180) % 256;
    leds[i] = CHSV(hue, 255, 255);
  }"""

WAVE = """\
for(int i = 0; i < NUM_LEDS; i++) {
    uint8_t value = sin8(i * 256L / NUM_LEDS + frame * 4);
    leds[i] = CRGB(value, 255 - value, 128);
  }"""

CHASE = """\
int pos = frame % NUM_LEDS;
  for(int i = 0; i < NUM_LEDS; i++) {
    int dist = abs(i - pos);
    uint8_t level = dist < 3 ? 255 - dist * 85 : 0;
    leds[i] = CRGB(level, level * 100 / 255, level);
  }"""

STROBE = """\
bool strobeOn = (frame / 2) % 2 == 0;
  fill_solid(leds, NUM_LEDS, strobeOn ? CRGB::White : CRGB::Black);"""

FIRE = """\
for(int i = 0; i < NUM_LEDS; i++) {
    uint8_t heat = random8(128, 255);
    leds[i] = CRGB(heat, heat * 100 / 255, 0);
  }"""

POLICE = """\
uint8_t phase = (frame / 3) % 2;
  fill_solid(leds, NUM_LEDS / 2, phase == 0 ? CRGB::Red : CRGB::Black);
  fill_solid(leds + NUM_LEDS / 2, NUM_LEDS - NUM_LEDS / 2, phase == 1 ? CRGB::Blue : CRGB::Black);"""

SPARKLE = """\
for(int i = 0; i < NUM_LEDS; i++) {
    leds[i] = random8() < 13 ? CRGB(CRGB::White) : CRGB(0, 0, 20);
  }"""

BREATHING = """\
uint8_t breathe = sin8(frame * 4);
  fill_solid(leds, NUM_LEDS, CRGB((uint16_t)breathe * 100 / 255, (uint16_t)breathe * 150 / 255, breathe));"""

SOLID_WHITE = "fill_solid(leds, NUM_LEDS, CRGB::White);"


PATTERN_SNIPPETS: Dict[PatternID, str] = {
    PatternID.RAINBOW: RAINBOW,
    PatternID.WAVE: WAVE,
    PatternID.CHASE: CHASE,
    PatternID.STROBE: STROBE,
    PatternID.FIRE: FIRE,
    PatternID.POLICE: POLICE,
    PatternID.SPARKLE: SPARKLE,
    PatternID.BREATHING: BREATHING,
}

HELPER_FUNCTIONS = """\
// Helper functions are provided by FastLED library
// sin8(), random8(), fill_solid(), etc."""
