"""Easing curves for spin-up and deceleration."""
from __future__ import annotations


def ease_in(t: float) -> float:
    """Quadratic ramp; position along a linear velocity increase."""
    return t * t


def ease_out(t: float) -> float:
    return ease_out_power(t, 2.0)


def ease_out_power(t: float, exponent: float) -> float:
    """``1 - (1 - t)^exponent``, clamped to the unit interval."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return 1.0 - (1.0 - t) ** exponent


def ease_out_power_slope(t: float, exponent: float) -> float:
    """Derivative of ``ease_out_power`` with respect to t."""
    if t >= 1.0:
        return 0.0
    t = max(t, 0.0)
    return exponent * (1.0 - t) ** (exponent - 1.0)
