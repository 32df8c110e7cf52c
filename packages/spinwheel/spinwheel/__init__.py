"""spinwheel - Weighted spinning-wheel picker with a tick-driven animation core."""
from __future__ import annotations

from spinwheel.clock import FrameClock, Scheduler, WallClock
from spinwheel.config import SpinConfig
from spinwheel.controller import SpinPhase, SpinRun, WheelAnimationController
from spinwheel.selector import select_index, weighted_index
from spinwheel.signals import STATE_CHANGED, WINNER, SignalBus
from spinwheel.types import (
    TAU,
    Entry,
    InvalidInputError,
    Schedule,
    Segment,
    normalize_angle,
    normalize_weight,
)
from spinwheel.wheel import SegmentArc, SegmentWheel, WheelLayout

__all__ = [
    "TAU",
    "Entry",
    "Segment",
    "Schedule",
    "InvalidInputError",
    "normalize_angle",
    "normalize_weight",
    "select_index",
    "weighted_index",
    "SegmentWheel",
    "SegmentArc",
    "WheelLayout",
    "SpinConfig",
    "SpinPhase",
    "SpinRun",
    "WheelAnimationController",
    "FrameClock",
    "WallClock",
    "Scheduler",
    "SignalBus",
    "STATE_CHANGED",
    "WINNER",
]
