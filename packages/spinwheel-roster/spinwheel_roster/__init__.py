"""spinwheel-roster - Editable entry set, presets and persistence for spinwheel."""
from __future__ import annotations

from spinwheel_roster.presets import DEFAULT_PRESET, PRESETS
from spinwheel_roster.roster import Roster, SnapshotError
from spinwheel_roster.store import LoadResult, RosterStore

__all__ = [
    "Roster",
    "SnapshotError",
    "RosterStore",
    "LoadResult",
    "PRESETS",
    "DEFAULT_PRESET",
]
