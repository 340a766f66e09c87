"""
Animation Clock

Advances the frame counter on a fixed cadence derived from the speed
setting and notifies a callback once per frame.

States:
    IDLE    - no tick task
    RUNNING - exactly one tick task sleeping for interval_ms

Every path that changes the cadence (stop, reset, set_speed) cancels the
current task before anything else, so at most one task can ever tick.
"""

import asyncio
from typing import Callable, Optional

from models.enums import ClockState
from models.strip_config import SPEED, clamp_speed
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CLOCK)

FrameCallback = Callable[[int], None]


class AnimationClock:
    """
    Frame counter driven by an asyncio task

    Tick interval is (100 - speed) milliseconds, never below
    min_interval_ms (speed=100 would otherwise give a zero interval).

    Example:
        clock = AnimationClock(on_frame=session.render, speed=50)
        clock.start()          # must be called inside a running event loop
        ...
        clock.set_speed(80)    # next tick arrives after 20 ms
        clock.stop()
        clock.reset()          # frame=0, on_frame(0) called once
    """

    def __init__(
        self,
        on_frame: Optional[FrameCallback] = None,
        speed: int = SPEED.default,
        min_interval_ms: int = 1,
    ):
        self.on_frame = on_frame
        self.min_interval_ms = max(1, int(min_interval_ms))

        self._speed = clamp_speed(speed)
        self._frame = 0
        self._state = ClockState.IDLE
        self._task: Optional[asyncio.Task] = None

    # ------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ClockState.RUNNING

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def interval_ms(self) -> int:
        return max(self.min_interval_ms, 100 - self._speed)

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000

    # ------------------------------------------------------------
    # Core control methods
    # ------------------------------------------------------------

    def start(self) -> None:
        """
        IDLE -> RUNNING. No-op if already running.

        Raises:
            RuntimeError: called outside a running asyncio event loop
        """
        if self._state is ClockState.RUNNING:
            return

        self._spawn_task()
        self._state = ClockState.RUNNING
        log.info("Clock started", frame=self._frame, interval_ms=self.interval_ms)

    def stop(self) -> None:
        """RUNNING -> IDLE. Frame counter is kept."""
        self._cancel_task()
        if self._state is ClockState.RUNNING:
            self._state = ClockState.IDLE
            log.info("Clock stopped", frame=self._frame)

    def reset(self) -> None:
        """Force IDLE, frame -> 0 and emit frame 0 once"""
        self._cancel_task()
        self._state = ClockState.IDLE
        self._frame = 0
        log.info("Clock reset")
        self._emit()

    def set_speed(self, speed: int) -> None:
        """
        Change speed. While running, the pending tick is dropped and the
        next one is scheduled with the new interval.
        """
        new_speed = clamp_speed(speed)
        if new_speed == self._speed:
            return

        old_interval = self.interval_ms
        self._speed = new_speed

        if self._state is ClockState.RUNNING:
            self._cancel_task()
            self._spawn_task()

        log.debug(
            "Clock speed changed",
            speed=new_speed,
            interval_ms=f"{old_interval} → {self.interval_ms}",
        )

    def tick(self) -> int:
        """Advance one frame synchronously and emit it"""
        self._frame += 1
        self._emit()
        return self._frame

    # ------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------

    def _emit(self) -> None:
        if self.on_frame is None:
            return
        try:
            self.on_frame(self._frame)
        except Exception as e:
            log.error(f"Frame callback failed at frame {self._frame}: {e}")

    def _spawn_task(self) -> None:
        # get_running_loop() raises RuntimeError when there is no loop
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run_loop())

    def _cancel_task(self) -> None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    async def _run_loop(self) -> None:
        """Sleep one interval, tick, repeat until cancelled"""
        ticks = 0
        try:
            while True:
                await asyncio.sleep(self.interval_seconds)
                self.tick()
                ticks += 1
        except asyncio.CancelledError:
            log.debug(f"Tick task cancelled after {ticks} ticks")
            raise
