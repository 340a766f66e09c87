"""
Tests for AnimationClock.

Timing-based tests use the fastest interval (speed 99 -> 1 ms) and only
assert lower bounds on elapsed frames, never exact counts.
"""

import asyncio

import pytest

from engine.animation_clock import AnimationClock
from models.enums import ClockState


class FrameRecorder:
    def __init__(self):
        self.frames = []

    def __call__(self, frame):
        self.frames.append(frame)


class TestInterval:

    @pytest.mark.parametrize("speed,interval", [(0, 100), (50, 50), (80, 20), (99, 1)])
    def test_interval_is_100_minus_speed(self, speed, interval):
        assert AnimationClock(speed=speed).interval_ms == interval

    def test_speed_100_uses_minimum_interval(self):
        assert AnimationClock(speed=100).interval_ms == 1
        assert AnimationClock(speed=100, min_interval_ms=5).interval_ms == 5

    def test_speed_is_clamped(self):
        clock = AnimationClock(speed=150)
        assert clock.speed == 100

    def test_interval_seconds(self):
        assert AnimationClock(speed=80).interval_seconds == pytest.approx(0.02)


class TestManualControl:

    def test_initial_state(self):
        clock = AnimationClock()
        assert clock.frame == 0
        assert clock.state is ClockState.IDLE
        assert not clock.is_running

    def test_tick_advances_and_emits(self):
        recorder = FrameRecorder()
        clock = AnimationClock(on_frame=recorder)
        assert clock.tick() == 1
        assert clock.tick() == 2
        assert recorder.frames == [1, 2]

    def test_reset_emits_frame_zero(self):
        recorder = FrameRecorder()
        clock = AnimationClock(on_frame=recorder)
        clock.tick()
        clock.reset()
        assert clock.frame == 0
        assert recorder.frames == [1, 0]

    def test_failing_callback_does_not_break_clock(self):
        def broken(frame):
            raise RuntimeError("boom")

        clock = AnimationClock(on_frame=broken)
        assert clock.tick() == 1

    def test_start_without_running_loop_raises(self):
        clock = AnimationClock()
        with pytest.raises(RuntimeError):
            clock.start()
        assert clock.state is ClockState.IDLE

    def test_set_speed_while_idle_does_not_start(self):
        clock = AnimationClock(speed=50)
        clock.set_speed(80)
        assert clock.interval_ms == 20
        assert not clock.is_running


class TestRunningClock:

    @pytest.mark.asyncio
    async def test_running_clock_advances_frames(self):
        recorder = FrameRecorder()
        clock = AnimationClock(on_frame=recorder, speed=99)
        clock.start()
        assert clock.is_running
        await asyncio.sleep(0.1)
        clock.stop()

        assert clock.frame >= 1
        assert recorder.frames == list(range(1, clock.frame + 1))

    @pytest.mark.asyncio
    async def test_start_twice_keeps_single_task(self):
        clock = AnimationClock(speed=50)
        clock.start()
        task = clock._task
        clock.start()
        assert clock._task is task
        clock.stop()

    @pytest.mark.asyncio
    async def test_stop_cancels_pending_tick(self):
        clock = AnimationClock(speed=99)
        clock.start()
        task = clock._task
        clock.stop()

        with pytest.raises(asyncio.CancelledError):
            await task

        frame = clock.frame
        await asyncio.sleep(0.05)
        assert clock.frame == frame
        assert clock.state is ClockState.IDLE

    @pytest.mark.asyncio
    async def test_stop_keeps_frame(self):
        clock = AnimationClock(speed=99)
        clock.start()
        await asyncio.sleep(0.05)
        clock.stop()
        assert clock.frame >= 1

    @pytest.mark.asyncio
    async def test_set_speed_replaces_task(self):
        clock = AnimationClock(speed=0)
        clock.start()
        old_task = clock._task

        clock.set_speed(99)
        assert clock.interval_ms == 1
        assert clock._task is not old_task
        with pytest.raises(asyncio.CancelledError):
            await old_task

        # Old 100 ms tick is gone; new 1 ms cadence ticks quickly
        await asyncio.sleep(0.05)
        assert clock.frame >= 1
        clock.stop()

    @pytest.mark.asyncio
    async def test_reset_while_running(self):
        recorder = FrameRecorder()
        clock = AnimationClock(on_frame=recorder, speed=99)
        clock.start()
        await asyncio.sleep(0.02)
        clock.reset()

        assert clock.state is ClockState.IDLE
        assert clock.frame == 0
        assert recorder.frames[-1] == 0
        await asyncio.sleep(0.02)
        assert clock.frame == 0
