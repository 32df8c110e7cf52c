"""WheelAnimationController - spin lifecycle from start to settled winner."""
from __future__ import annotations

import logging
import math
import os
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from spinwheel.clock import Scheduler
from spinwheel.config import SpinConfig
from spinwheel.easing import ease_in, ease_out_power, ease_out_power_slope
from spinwheel.selector import weighted_index
from spinwheel.signals import (
    STATE_CHANGED,
    WINNER,
    SignalBus,
    state_change_handler,
    winner_handler,
)
from spinwheel.types import TAU, Entry, Schedule, normalize_angle
from spinwheel.wheel import SegmentWheel

logger = logging.getLogger(__name__)


class SpinPhase(Enum):
    IDLE = "idle"
    SPINNING = "spinning"
    DECELERATING = "decelerating"
    SETTLED = "settled"


_ACTIVE = (SpinPhase.SPINNING, SpinPhase.DECELERATING)


@dataclass
class SpinRun:
    """State of one spin. The target is fixed at start; the curve is not."""

    phase: SpinPhase
    start_time: float
    total: float
    decel: float
    ramp: float
    base_rotation: float
    target_index: int
    landing_angle: float
    decel_start: float | None = None
    decel_duration: float = 0.0
    decel_rotation: float = 0.0
    decel_velocity: float = 0.0
    decel_distance: float = 0.0
    decel_exponent: float = 2.0
    decel_count: int = 0

    @property
    def auto_decel_at(self) -> float:
        return self.start_time + self.total - self.decel

    @property
    def finish_time(self) -> float:
        if self.decel_start is None:
            return self.start_time + self.total
        return self.decel_start + self.decel_duration


def _coerce_seconds(value: Any, default: float) -> float:
    if value is None:
        return default
    try:
        num = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(num):
        return default
    return num


def _clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


class WheelAnimationController:
    """Drives a SegmentWheel through IDLE -> SPINNING -> DECELERATING -> SETTLED.

    The winner is committed when the run starts: a weighted draw over the
    segment widths picks the target, and a second draw places the landing
    angle inside its arc. Deceleration, automatic or requested, is solved so
    the rotation reaches that landing angle exactly when it ends.

    No public method raises for bad durations, an empty wheel or calls made
    in the wrong phase; those are clamped or ignored.
    """

    def __init__(
        self,
        wheel: SegmentWheel,
        scheduler: Scheduler,
        *,
        config: SpinConfig | None = None,
        bus: SignalBus | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
        on_state_change: Callable[[bool, dict[str, bool]], None] | None = None,
        on_finalize: Callable[[Entry], None] | None = None,
    ) -> None:
        self._wheel = wheel
        self._scheduler = scheduler
        self._config = config if config is not None else SpinConfig()
        self._bus = bus if bus is not None else SignalBus()
        if rng is None:
            if seed is None:
                seed = int.from_bytes(os.urandom(8), "big")
            rng = random.Random(seed)
        self._seed = seed
        self._rng = rng
        self._run: SpinRun | None = None
        self._winner: Entry | None = None

        if on_state_change is not None:
            self._bus.subscribe(STATE_CHANGED, state_change_handler(on_state_change))
        if on_finalize is not None:
            self._bus.subscribe(WINNER, winner_handler(on_finalize))

    @property
    def wheel(self) -> SegmentWheel:
        return self._wheel

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def config(self) -> SpinConfig:
        return self._config

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def run(self) -> SpinRun | None:
        return self._run

    @property
    def phase(self) -> SpinPhase:
        return self._run.phase if self._run is not None else SpinPhase.IDLE

    @property
    def running(self) -> bool:
        return self.phase in _ACTIVE

    @property
    def stop_enabled(self) -> bool:
        return self.phase is SpinPhase.SPINNING

    @property
    def winner(self) -> Entry | None:
        return self._winner

    def normalize_schedule(self, total_hint: Any = None, decel_hint: Any = None) -> Schedule:
        """Clamp duration hints into the configured bounds with decel <= total."""
        cfg = self._config
        total = _clamp(
            _coerce_seconds(total_hint, cfg.default_total), cfg.min_total, cfg.max_total
        )
        decel = self._normalize_decel(decel_hint, total)
        return Schedule(total=total, decel=decel)

    def _normalize_decel(self, decel_hint: Any, total: float) -> float:
        cfg = self._config
        decel = _clamp(
            _coerce_seconds(decel_hint, cfg.default_decel), cfg.min_decel, cfg.max_decel
        )
        return min(decel, total)

    # --- public operations ---

    def start(self, total_hint: Any = None, decel_hint: Any = None) -> Schedule | None:
        """Begin a run. Returns the effective schedule, or None if nothing started."""
        if self.running:
            logger.debug("start ignored: run already in progress")
            return None
        if not self._wheel.has_segments:
            logger.debug("start ignored: wheel has no segments")
            return None

        schedule = self.normalize_schedule(total_hint, decel_hint)
        segments = self._wheel.segments
        target_index = weighted_index(self._wheel.widths(), self._rng)
        target = segments[target_index]
        margin = self._config.landing_margin
        fraction = margin + self._rng.random() * (1.0 - 2.0 * margin)
        # Rounding must not carry the landing onto the next segment's start.
        landing = min(
            target.start + target.span * fraction,
            math.nextafter(target.end, target.start),
        )

        run = SpinRun(
            phase=SpinPhase.SPINNING,
            start_time=self._scheduler.now,
            total=schedule.total,
            decel=schedule.decel,
            ramp=schedule.total * self._config.spin_up_fraction,
            base_rotation=self._wheel.rotation,
            target_index=target_index,
            landing_angle=landing,
        )
        self._run = run
        self._winner = None
        self._wheel.lock()
        logger.debug(
            "spin started: total=%.2fs decel=%.2fs target=%r",
            schedule.total, schedule.decel, target.entry.name,
        )
        self._bus.publish(STATE_CHANGED, running=True, stop_enabled=True)
        self._schedule_frame(run)
        self._bus.flush()
        return schedule

    def request_decel(self, decel_hint: Any = None) -> None:
        """Start decelerating now. Only meaningful while SPINNING."""
        run = self._run
        if run is None or run.phase is not SpinPhase.SPINNING:
            logger.debug("request_decel ignored in phase %s", self.phase.value)
            return
        duration = self._normalize_decel(decel_hint, run.total)
        at = max(self._scheduler.now, run.start_time)
        self._begin_decel(run, at, duration)
        self._bus.flush()

    def reset(self) -> None:
        """Discard a settled run and return to IDLE. Ignored while running."""
        if self.running:
            logger.debug("reset ignored: run in progress")
            return
        self._run = None

    # --- motion ---

    def _spin_angle(self, run: SpinRun, t: float) -> float:
        v = self._config.cruise_speed
        if run.ramp > 0 and t < run.ramp:
            return v * run.ramp / 2 * ease_in(t / run.ramp)
        return v * (t - run.ramp / 2)

    def _spin_velocity(self, run: SpinRun, t: float) -> float:
        v = self._config.cruise_speed
        if run.ramp > 0 and t < run.ramp:
            return v * t / run.ramp
        return v

    def _begin_decel(self, run: SpinRun, at: float, duration: float) -> None:
        cfg = self._config
        t = max(0.0, at - run.start_time)
        rotation = run.base_rotation + self._spin_angle(run, t)
        velocity = self._spin_velocity(run, t)

        # Shortest forward rotation onto the landing angle, then whole turns.
        remaining = normalize_angle(run.landing_angle - rotation)
        reach = velocity * duration
        floor = 0 if remaining > 0 else 1
        turns = max(
            floor,
            cfg.extra_turns,
            round((reach / cfg.preferred_decel_exponent - remaining) / TAU),
        )
        # Drop turns that could only be covered by speeding up.
        while turns > floor and reach < cfg.min_decel_exponent * (remaining + turns * TAU):
            turns -= 1
        distance = remaining + turns * TAU

        exponent = _clamp(reach / distance, cfg.min_decel_exponent, cfg.max_decel_exponent)

        run.phase = SpinPhase.DECELERATING
        run.decel_start = at
        run.decel_duration = duration
        run.decel_rotation = rotation
        run.decel_velocity = velocity
        run.decel_distance = distance
        run.decel_exponent = exponent
        run.decel_count += 1
        logger.debug(
            "decelerating at %.3fs for %.2fs: %.1f turns, exponent %.2f",
            t, duration, distance / TAU, exponent,
        )
        self._bus.publish(STATE_CHANGED, running=True, stop_enabled=False)

    def _decel_angle(self, run: SpinRun, now: float) -> float:
        s = (now - run.decel_start) / run.decel_duration
        return run.decel_rotation + run.decel_distance * ease_out_power(s, run.decel_exponent)

    def velocity_at(self, now: float) -> float:
        """Angular velocity (radians/second) of the active run at ``now``."""
        run = self._run
        if run is None or run.phase not in _ACTIVE:
            return 0.0
        if run.phase is SpinPhase.SPINNING:
            return self._spin_velocity(run, max(0.0, now - run.start_time))
        s = (now - run.decel_start) / run.decel_duration
        return (
            run.decel_distance / run.decel_duration
            * ease_out_power_slope(s, run.decel_exponent)
        )

    # --- frame handling ---

    def _schedule_frame(self, run: SpinRun) -> None:
        self._scheduler.request_frame(lambda now: self._on_frame(run, now))

    def _on_frame(self, run: SpinRun, now: float) -> None:
        if run is not self._run or run.phase not in _ACTIVE:
            return

        if run.phase is SpinPhase.SPINNING:
            if now >= run.auto_decel_at:
                self._begin_decel(run, run.auto_decel_at, run.decel)
            else:
                self._wheel.rotation = run.base_rotation + self._spin_angle(
                    run, now - run.start_time
                )

        if run.phase is SpinPhase.DECELERATING:
            if now >= run.finish_time:
                self._finalize(run)
                self._bus.flush()
                return
            self._wheel.rotation = self._decel_angle(run, now)

        self._schedule_frame(run)
        self._bus.flush()

    def _finalize(self, run: SpinRun) -> None:
        self._wheel.rotation = run.landing_angle
        target = self._wheel.segments[run.target_index]
        resolved = self._wheel.resolve_angle(run.landing_angle)
        if resolved is None or resolved.index != target.index:
            logger.warning(
                "landing angle %.6f resolved to %r, reporting committed target %r",
                run.landing_angle,
                resolved.entry.name if resolved is not None else None,
                target.entry.name,
            )
        run.phase = SpinPhase.SETTLED
        self._wheel.unlock()
        self._winner = target.entry
        logger.info("wheel settled on %r", target.entry.name)
        self._bus.publish(STATE_CHANGED, running=False, stop_enabled=False)
        self._bus.publish(WINNER, entry=target.entry, index=target.index)
