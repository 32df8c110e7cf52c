"""Picker session: roster, persistence, wheel and controller wired together."""
from __future__ import annotations

import logging
from pathlib import Path

from spinwheel import (
    SegmentWheel,
    SpinConfig,
    WallClock,
    WheelAnimationController,
)
from spinwheel_roster import DEFAULT_PRESET, PRESETS, Roster, RosterStore

logger = logging.getLogger(__name__)

PRESET_KEYS = list(PRESETS)


class PickerSession:
    """Holds all picker objects and the UI-facing state."""

    def __init__(self, store_path: Path, config: SpinConfig, seed: int | None, size: int) -> None:
        self.roster = Roster()
        self.store = RosterStore(store_path)
        self.clock = WallClock()
        self.wheel = SegmentWheel(width=size, height=size)
        self.controller = WheelAnimationController(
            self.wheel,
            self.clock,
            config=config,
            seed=seed,
            on_state_change=self._on_state_change,
            on_finalize=self._on_finalize,
        )

        self.total = config.default_total
        self.decel = config.default_decel
        self.selected = 0
        self.stop_enabled = False
        self.winner_name: str | None = None
        self.winner_index: int | None = None
        self.settled_at = 0.0
        self.preset: str | None = None
        self.dirty_wheel = False

        result = self.store.load(self.roster)
        if result.loaded:
            self.preset = result.matched_preset
        else:
            self.roster.apply_preset(DEFAULT_PRESET)
            self.preset = DEFAULT_PRESET
        self.wheel.rebuild(self.roster.active_entries())
        self.store.queue_save()

    # --- controller notifications ---

    def _on_state_change(self, running: bool, info: dict[str, bool]) -> None:
        self.stop_enabled = running and info["stop_enabled"]
        if running:
            self.winner_name = None
            self.winner_index = None

    def _on_finalize(self, entry) -> None:
        self.winner_name = entry.name
        self.winner_index = self.controller.run.target_index
        self.settled_at = self.clock.now
        self.stop_enabled = False
        logger.info("winner: %s", entry.name)

    # --- actions ---

    def spin(self) -> None:
        if self.dirty_wheel or not self.wheel.has_segments:
            self._rebuild()
        schedule = self.controller.start(self.total, self.decel)
        if schedule is not None:
            self.total, self.decel = schedule.total, schedule.decel

    def stop(self) -> None:
        self.controller.request_decel(self.decel)

    def adjust_total(self, delta: float) -> None:
        self.total = self.controller.normalize_schedule(self.total + delta, self.decel).total

    def adjust_decel(self, delta: float) -> None:
        self.decel = self.controller.normalize_schedule(self.total, self.decel + delta).decel

    def select(self, index: int) -> None:
        if self.roster.names:
            self.selected = max(0, min(index, len(self.roster) - 1))

    def toggle(self, index: int) -> None:
        names = self.roster.names
        if 0 <= index < len(names):
            self.selected = index
            name = names[index]
            self._edited(self.roster.set_active(name, not self.roster.is_active(name)))

    def nudge_weight(self, delta: float) -> None:
        names = self.roster.names
        if not names:
            return
        name = names[self.selected]
        before = self.roster.weight(name)
        self._edited(self.roster.update_weight(name, round(before + delta, 1)) != before)

    def enable_all(self) -> None:
        self._edited(self.roster.enable_all())

    def disable_all(self) -> None:
        self._edited(self.roster.disable_all())

    def invert(self) -> None:
        self._edited(self.roster.invert())

    def apply_preset(self, number: int) -> None:
        if number < len(PRESET_KEYS) and self.roster.apply_preset(PRESET_KEYS[number]):
            self.selected = 0
            self._edited(True)

    def _edited(self, changed: bool) -> None:
        if not changed:
            return
        self.preset = self.roster.find_matching_preset()
        self.store.queue_save()
        self.dirty_wheel = True
        self._rebuild()

    def _rebuild(self) -> None:
        # Ignored by the wheel while spinning; retried on the next frame.
        self.wheel.rebuild(self.roster.active_entries())
        if not self.wheel.locked:
            self.dirty_wheel = False
            self.winner_index = None

    # --- per frame ---

    def update(self) -> None:
        self.clock.pump()
        if self.dirty_wheel and not self.controller.running:
            self._rebuild()
        self.store.flush(self.roster)

    @property
    def since_settled(self) -> float:
        return self.clock.now - self.settled_at
