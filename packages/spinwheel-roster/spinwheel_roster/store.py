"""JSON file persistence for a Roster with coalesced saves."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from spinwheel_roster.roster import Roster, SnapshotError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    loaded: bool
    matched_preset: str | None = None


class RosterStore:
    """Reads and writes one roster file. Last write wins.

    ``queue_save()`` marks the roster dirty; the host calls ``flush()`` once
    per frame so a burst of edits costs one write.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        self._dirty = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def dirty(self) -> bool:
        return self._dirty

    def load(self, roster: Roster) -> LoadResult:
        """Restore ``roster`` from disk. Missing or corrupt files leave it untouched."""
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return LoadResult(loaded=False)
        except OSError:
            logger.exception("failed to read roster from %s", self._path)
            return LoadResult(loaded=False)
        if not text.strip():
            return LoadResult(loaded=False)

        try:
            roster.restore(json.loads(text))
        except (json.JSONDecodeError, SnapshotError):
            logger.exception("failed to load roster from %s", self._path)
            return LoadResult(loaded=False)
        return LoadResult(loaded=True, matched_preset=roster.find_matching_preset())

    def save(self, roster: Roster) -> bool:
        """Write ``roster`` now. Returns False (and logs) on I/O failure."""
        data = json.dumps(roster.snapshot(), ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(data, encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("failed to save roster to %s", self._path)
            return False
        self._dirty = False
        return True

    def queue_save(self) -> None:
        self._dirty = True

    def flush(self, roster: Roster) -> bool:
        """Save if a save was queued. Returns True if a write happened."""
        if not self._dirty:
            return False
        return self.save(roster)
