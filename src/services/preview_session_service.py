"""
Preview Session Service

Owns one design session: strip config, selected pattern, the animation
clock and the derived outputs (LED array + generated sketch).

Recomputation is explicit. Every tick and every setter that affects the
picture while running calls render(); nothing observes values implicitly.
"""

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from codegen.firmware import FirmwareOptions, generate_firmware_source
from engine.animation_clock import AnimationClock
from models.color import Color
from models.enums import ClockState, PatternID
from models.strip_config import StripConfig
from patterns.engine import compute_frame, resolve_pattern_id
from services.pattern_suggester import suggest_pattern
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SESSION)

FrameListener = Callable[[List[Color]], None]


@dataclass
class SessionSnapshot:
    """Read-only view of the session for the view layer / API"""
    pattern: str
    config: StripConfig
    frame: int
    state: ClockState
    leds: List[Color] = field(default_factory=list)
    generated_code: Optional[str] = None


class PreviewSessionService:
    """
    Manages a live preview session:
      - config: LED count, brightness, speed
      - pattern: selected pattern (PatternID, or raw name for unknown ids)
      - clock: frame counter and tick scheduling
      - leds: current LED colors (derived, recomputed on every frame)
      - generated_code: last exported sketch (None until generate_code())

    Example:
        session = PreviewSessionService()
        session.subscribe(lambda leds: view.draw(leds))
        session.set_pattern(PatternID.POLICE)
        session.play()              # start + render + generate code
        session.set_speed(90)       # next tick after 10 ms
        session.reset()             # frame 0, rendered once
    """

    def __init__(
        self,
        config: Optional[StripConfig] = None,
        pattern: Union[PatternID, str] = PatternID.RAINBOW,
        firmware_options: Optional[FirmwareOptions] = None,
        min_interval_ms: int = 1,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or StripConfig()
        self.pattern = self._normalize_pattern(pattern)
        self.firmware_options = firmware_options or FirmwareOptions()
        self.rng = rng or random.Random()

        self.leds: List[Color] = self._blank_leds()
        self.generated_code: Optional[str] = None

        self.clock = AnimationClock(
            on_frame=self._on_frame,
            speed=self.config.speed,
            min_interval_ms=min_interval_ms,
        )
        self._listeners: List[FrameListener] = []

    # === Internal ===

    @staticmethod
    def _normalize_pattern(pattern: Union[PatternID, str]) -> Union[PatternID, str]:
        resolved = resolve_pattern_id(pattern)
        return resolved if resolved is not None else str(pattern)

    def _blank_leds(self) -> List[Color]:
        return [Color.black()] * self.config.led_count

    def _on_frame(self, frame: int) -> None:
        self.render()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.leds)
            except Exception as e:
                log.error(f"Frame listener failed: {e}", listener=getattr(listener, "__name__", repr(listener)))

    # === Properties ===

    @property
    def pattern_name(self) -> str:
        return self.pattern.value if isinstance(self.pattern, PatternID) else self.pattern

    @property
    def frame(self) -> int:
        return self.clock.frame

    @property
    def is_running(self) -> bool:
        return self.clock.is_running

    # === Listeners ===

    def subscribe(self, listener: FrameListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: FrameListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # === Rendering ===

    def render(self) -> List[Color]:
        """Recompute the whole LED array for the current frame"""
        self.leds = compute_frame(
            self.pattern,
            self.config.led_count,
            self.clock.frame,
            self.config.brightness,
            rng=self.rng,
        )
        self._notify()
        return self.leds

    # === Input surface ===

    def set_led_count(self, led_count: int) -> None:
        old = self.config.led_count
        self.config = self.config.with_led_count(led_count)
        self.leds = self._blank_leds()
        log.info("LED count changed", led_count=f"{old} → {self.config.led_count}")
        if self.is_running:
            self.render()

    def set_pattern(self, pattern: Union[PatternID, str]) -> None:
        old = self.pattern_name
        self.pattern = self._normalize_pattern(pattern)
        if resolve_pattern_id(self.pattern) is None:
            log.warn(f"Unknown pattern '{self.pattern_name}', preview falls back to solid white")
        log.info("Pattern changed", pattern=f"{old} → {self.pattern_name}")
        if self.is_running:
            self.render()

    def set_brightness(self, brightness: int) -> None:
        self.config = self.config.with_brightness(brightness)
        log.info("Brightness changed", brightness=self.config.brightness)
        if self.is_running:
            self.render()

    def set_speed(self, speed: int) -> None:
        self.config = self.config.with_speed(speed)
        self.clock.set_speed(self.config.speed)
        log.info("Speed changed", speed=self.config.speed, interval_ms=self.clock.interval_ms)

    def start(self) -> None:
        self.clock.start()

    def stop(self) -> None:
        self.clock.stop()

    def reset(self) -> None:
        """Stop, rewind to frame 0 and render frame 0"""
        self.clock.reset()

    def step(self) -> int:
        """Advance one frame manually (renders through the clock callback)"""
        return self.clock.tick()

    def generate_code(self) -> str:
        self.generated_code = generate_firmware_source(
            self.pattern,
            self.config.led_count,
            self.config.brightness,
            self.config.speed,
            options=self.firmware_options,
        )
        log.info("Firmware code generated", pattern=self.pattern_name, chars=len(self.generated_code))
        return self.generated_code

    def play(self) -> str:
        """Start animating, render immediately and export the sketch"""
        self.start()
        self.render()
        return self.generate_code()

    def apply_prompt(self, prompt: str) -> PatternID:
        """Pick a pattern from a free-text prompt, then play it"""
        pattern = suggest_pattern(prompt)
        log.info("Prompt matched pattern", pattern=pattern.value)
        self.set_pattern(pattern)
        self.play()
        return pattern

    # === Output surface ===

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            pattern=self.pattern_name,
            config=self.config,
            frame=self.clock.frame,
            state=self.clock.state,
            leds=list(self.leds),
            generated_code=self.generated_code,
        )
