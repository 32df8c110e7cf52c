"""Weighted random index selection."""
from __future__ import annotations

import math
import random
from typing import Sequence

from spinwheel.types import InvalidInputError


def select_index(weights: Sequence[float], u: float) -> int:
    """Return the index of the bucket containing ``u * sum(weights)``.

    Buckets are half-open and laid out by a cumulative scan, so a zero
    weight is never selected. ``u`` must be in [0, 1).
    """
    if not weights:
        raise InvalidInputError("cannot select from an empty weight sequence")
    if not 0.0 <= u < 1.0:
        raise InvalidInputError(f"u must be in [0, 1), got {u!r}")

    total = 0.0
    last_positive = -1
    for i, w in enumerate(weights):
        if not math.isfinite(w) or w < 0:
            raise InvalidInputError(f"weight at index {i} must be finite and >= 0, got {w!r}")
        if w > 0:
            last_positive = i
        total += w
    if last_positive < 0:
        raise InvalidInputError("all weights are zero")

    target = u * total
    cumulative = 0.0
    for i, w in enumerate(weights):
        cumulative += w
        if target < cumulative:
            return i
    return last_positive


def weighted_index(weights: Sequence[float], rng: random.Random) -> int:
    """Pick an index proportional to weight using one draw from ``rng``."""
    return select_index(weights, rng.random())
