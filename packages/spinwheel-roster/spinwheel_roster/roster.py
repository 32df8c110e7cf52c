"""Roster - the editable, ordered entry set that feeds the wheel."""
from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from spinwheel import Entry, normalize_weight
from spinwheel_roster.presets import PRESETS

_SNAPSHOT_VERSION = 1


class SnapshotError(Exception):
    """Raised when restore data is not a roster snapshot."""


class Roster:
    """Ordered names with per-name enabled flag and weight.

    Names are unique. Mutators return whether anything changed instead of
    raising, so UI handlers can call them blindly.
    """

    def __init__(self) -> None:
        self._names: list[str] = []
        self._active: dict[str, bool] = {}
        self._weights: dict[str, float] = {}

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._active

    def is_active(self, name: str) -> bool:
        return self._active.get(name, False)

    def weight(self, name: str) -> float:
        """Return the weight of ``name``. Raises KeyError if unknown."""
        return self._weights[name]

    def add(self, name: str | None, weight: Any = 1) -> bool:
        trimmed = (name or "").strip()
        if not trimmed or trimmed in self._active:
            return False
        self._names.append(trimmed)
        self._active[trimmed] = True
        self._weights[trimmed] = normalize_weight(weight)
        return True

    def update_weight(self, name: str, value: Any) -> float:
        """Set a normalized weight if ``name`` exists. Returns the normalized value."""
        normalized = normalize_weight(value)
        if name in self._weights:
            self._weights[name] = normalized
        return normalized

    def set_active(self, name: str, active: bool) -> bool:
        if name not in self._active:
            return False
        changed = self._active[name] != bool(active)
        self._active[name] = bool(active)
        return changed

    def update_all_active(self, mapper: Callable[[bool, str], bool]) -> bool:
        """Apply ``mapper(previous, name)`` to every flag. True if any flipped."""
        changed = False
        for name in self._names:
            prev = self._active[name]
            nxt = bool(mapper(prev, name))
            if prev != nxt:
                self._active[name] = nxt
                changed = True
        return changed

    def enable_all(self) -> bool:
        return self.update_all_active(lambda prev, name: True)

    def disable_all(self) -> bool:
        return self.update_all_active(lambda prev, name: False)

    def invert(self) -> bool:
        return self.update_all_active(lambda prev, name: not prev)

    def rename(self, old_name: str, new_name: str | None) -> bool:
        trimmed = (new_name or "").strip()
        if not trimmed or trimmed == old_name or trimmed in self._active:
            return False
        if old_name not in self._active:
            return False
        index = self._names.index(old_name)
        self._names[index] = trimmed
        self._active[trimmed] = self._active.pop(old_name)
        self._weights[trimmed] = self._weights.pop(old_name)
        return True

    def remove(self, name: str) -> bool:
        if name not in self._active:
            return False
        self._names.remove(name)
        del self._active[name]
        del self._weights[name]
        return True

    def active_entries(self) -> list[Entry]:
        """Snapshot of enabled entries in roster order."""
        return [
            Entry(name=name, weight=self._weights[name])
            for name in self._names
            if self._active[name]
        ]

    def apply_preset(
        self, key: str, presets: Mapping[str, Sequence[str]] = PRESETS
    ) -> bool:
        """Replace the roster with a preset, all enabled at weight 1."""
        names = presets.get(key)
        if names is None:
            return False
        self._names = []
        self._active = {}
        self._weights = {}
        for name in names:
            self.add(name)
        return True

    def find_matching_preset(
        self, presets: Mapping[str, Sequence[str]] = PRESETS
    ) -> str | None:
        """Key of the preset this roster equals untouched, if any."""
        for key, names in presets.items():
            if list(names) != self._names:
                continue
            if all(self._active[n] and self._weights[n] == 1 for n in self._names):
                return key
        return None

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "names": list(self._names),
            "on": {name: self._active[name] for name in self._names},
            "weight": {name: self._weights[name] for name in self._names},
        }

    def restore(self, data: Any) -> None:
        """Load snapshot data, skipping malformed names and defaulting flags.

        Raises SnapshotError if ``data`` has no name list.
        """
        if not isinstance(data, dict) or not isinstance(data.get("names"), list):
            raise SnapshotError("roster snapshot must be an object with a 'names' list")
        src_on = data.get("on") if isinstance(data.get("on"), dict) else {}
        src_weight = data.get("weight") if isinstance(data.get("weight"), dict) else {}

        names: list[str] = []
        for raw in data["names"]:
            if not isinstance(raw, str):
                continue
            name = raw.strip()
            if name and name not in names:
                names.append(name)

        self._names = names
        self._active = {name: bool(src_on.get(name, True)) for name in names}
        self._weights = {name: normalize_weight(src_weight.get(name)) for name in names}
