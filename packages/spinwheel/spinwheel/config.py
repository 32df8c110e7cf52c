"""Spin configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SpinConfig:
    """Immutable timing and motion parameters for the animation controller.

    Attributes:
        min_total: Lower bound (seconds) for the whole run.
        max_total: Upper bound (seconds) for the whole run.
        min_decel: Lower bound (seconds) for the deceleration phase.
        max_decel: Upper bound (seconds) for the deceleration phase.
        default_total: Used when the total duration hint is not a number.
        default_decel: Used when the deceleration hint is not a number.
        cruise_speed: Angular velocity (radians/second) held after spin-up.
        spin_up_fraction: Share of the total duration spent ramping up.
        extra_turns: Whole turns added to the deceleration path when the
            captured velocity can cover them.
        min_decel_exponent: Flattest allowed ease-out exponent (> 1).
        preferred_decel_exponent: Shape aimed for when picking whole turns.
        max_decel_exponent: Steepest allowed ease-out exponent.
        landing_margin: Fraction of the target arc kept clear on each side
            when placing the landing angle.
    """

    min_total: float = 1.0
    max_total: float = 60.0
    min_decel: float = 0.5
    max_decel: float = 30.0
    default_total: float = 8.0
    default_decel: float = 3.0
    cruise_speed: float = 6.0 * math.pi
    spin_up_fraction: float = 0.15
    extra_turns: int = 1
    min_decel_exponent: float = 1.5
    preferred_decel_exponent: float = 3.0
    max_decel_exponent: float = 8.0
    landing_margin: float = 0.1

    def __post_init__(self) -> None:
        if not 0 < self.min_total <= self.max_total:
            raise ValueError(
                f"need 0 < min_total <= max_total, got {self.min_total}, {self.max_total}"
            )
        if not 0 < self.min_decel <= self.max_decel:
            raise ValueError(
                f"need 0 < min_decel <= max_decel, got {self.min_decel}, {self.max_decel}"
            )
        if self.min_decel > self.min_total:
            raise ValueError("min_decel must not exceed min_total")
        if self.cruise_speed <= 0:
            raise ValueError(f"cruise_speed must be > 0, got {self.cruise_speed}")
        if not 0 <= self.spin_up_fraction < 1:
            raise ValueError(f"spin_up_fraction must be in [0, 1), got {self.spin_up_fraction}")
        if self.extra_turns < 0:
            raise ValueError(f"extra_turns must be >= 0, got {self.extra_turns}")
        if not (
            1 < self.min_decel_exponent
            <= self.preferred_decel_exponent
            <= self.max_decel_exponent
        ):
            raise ValueError("need 1 < min_decel_exponent <= preferred <= max_decel_exponent")
        if self.cruise_speed * self.min_decel < self.min_decel_exponent * 2 * math.pi:
            raise ValueError(
                "cruise_speed * min_decel must cover one turn at min_decel_exponent"
            )
        if not 0 <= self.landing_margin < 0.5:
            raise ValueError(f"landing_margin must be in [0, 0.5), got {self.landing_margin}")
