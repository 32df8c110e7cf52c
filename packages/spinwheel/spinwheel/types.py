"""Core data types for the segment wheel."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

TAU = 2.0 * math.pi

MIN_WEIGHT = 0.1
MAX_WEIGHT = 10.0
DEFAULT_WEIGHT = 1.0


def normalize_weight(value: Any) -> float:
    """Coerce a weight into [MIN_WEIGHT, MAX_WEIGHT]. Unparseable input gives 1."""
    try:
        num = float(value)
    except (TypeError, ValueError):
        return DEFAULT_WEIGHT
    if math.isnan(num):
        return DEFAULT_WEIGHT
    return min(max(num, MIN_WEIGHT), MAX_WEIGHT)


def normalize_angle(angle: float) -> float:
    """Map any angle into [0, TAU)."""
    a = angle % TAU
    # -1e-20 % TAU rounds to TAU
    if a >= TAU:
        a = 0.0
    return a


@dataclass(frozen=True, slots=True)
class Entry:
    name: str
    weight: float = DEFAULT_WEIGHT


@dataclass(frozen=True, slots=True)
class Segment:
    """Half-open arc [start, end) of the wheel face assigned to one entry."""

    entry: Entry
    start: float
    end: float
    index: int

    @property
    def span(self) -> float:
        return self.end - self.start

    def contains(self, angle: float) -> bool:
        return self.start <= angle < self.end


@dataclass(frozen=True, slots=True)
class Schedule:
    """Effective durations (seconds) of a run after clamping."""

    total: float
    decel: float


class InvalidInputError(ValueError):
    """Raised when a weighted selection pool is empty or has no positive weight."""
