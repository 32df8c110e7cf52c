"""Frame schedulers that drive the animation controller."""
from __future__ import annotations

import time
from typing import Callable, Protocol

FrameCallback = Callable[[float], None]


class Scheduler(Protocol):
    """Something that can call back once on the next frame."""

    @property
    def now(self) -> float: ...

    def request_frame(self, callback: FrameCallback) -> None: ...


class FrameClock:
    """Fixed-timestep scheduler advanced by hand.

    Time is ``frame_number * dt``; nothing reads the wall clock, so runs are
    reproducible. Callbacks requested while a frame is firing wait for the
    next ``advance()``.
    """

    def __init__(self, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._frame_number = 0
        self._pending: list[FrameCallback] = []

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def now(self) -> float:
        return self._frame_number * self._dt

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    def advance(self) -> int:
        self._frame_number += 1
        snapshot = self._pending
        self._pending = []
        now = self.now
        for callback in snapshot:
            callback(now)
        return self._frame_number

    def advance_for(self, seconds: float) -> int:
        """Advance whole frames until ``seconds`` have elapsed. Returns frames run."""
        frames = max(0, round(seconds * self._fps))
        for _ in range(frames):
            self.advance()
        return frames

    def run_until_idle(self, max_frames: int = 100_000) -> int:
        """Advance while callbacks are pending. Returns frames run."""
        frames = 0
        while self._pending and frames < max_frames:
            self.advance()
            frames += 1
        return frames

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number
        self._pending.clear()


class WallClock:
    """Scheduler for host loops: ``pump()`` once per rendered frame."""

    def __init__(self, time_fn: Callable[[], float] = time.monotonic) -> None:
        self._time_fn = time_fn
        self._pending: list[FrameCallback] = []

    @property
    def now(self) -> float:
        return self._time_fn()

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    def pump(self) -> int:
        """Fire callbacks requested before this call. Returns how many ran."""
        snapshot = self._pending
        self._pending = []
        now = self.now
        for callback in snapshot:
            callback(now)
        return len(snapshot)
