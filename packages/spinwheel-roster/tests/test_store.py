"""Tests for RosterStore file persistence."""
from __future__ import annotations

import json
import logging

from spinwheel_roster import DEFAULT_PRESET, LoadResult, Roster, RosterStore


def test_load_missing_file(tmp_path):
    store = RosterStore(tmp_path / "roster.json")
    roster = Roster()
    roster.add("keep")
    assert store.load(roster) == LoadResult(loaded=False)
    assert roster.names == ("keep",)


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "roster.json"
    store = RosterStore(path)
    roster = Roster()
    roster.add("a", 2)
    roster.add("b")
    roster.set_active("b", False)
    assert store.save(roster) is True
    assert path.exists()
    assert not path.with_name("roster.json.tmp").exists()

    loaded = Roster()
    result = RosterStore(path).load(loaded)
    assert result == LoadResult(loaded=True, matched_preset=None)
    assert loaded.snapshot() == roster.snapshot()


def test_non_ascii_names_survive(tmp_path):
    store = RosterStore(tmp_path / "roster.json")
    roster = Roster()
    roster.apply_preset(DEFAULT_PRESET)
    store.save(roster)
    assert "テムジン" in store.path.read_text(encoding="utf-8")

    loaded = Roster()
    assert store.load(loaded) == LoadResult(loaded=True, matched_preset=DEFAULT_PRESET)


def test_corrupt_json(tmp_path, caplog):
    path = tmp_path / "roster.json"
    path.write_text("{not json", encoding="utf-8")
    roster = Roster()
    roster.add("keep")
    with caplog.at_level(logging.ERROR, logger="spinwheel_roster.store"):
        result = RosterStore(path).load(roster)
    assert result.loaded is False
    assert roster.names == ("keep",)
    assert caplog.records


def test_wrong_shape(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps({"names": 5}), encoding="utf-8")
    assert RosterStore(path).load(Roster()).loaded is False


def test_empty_file(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text("  \n", encoding="utf-8")
    assert RosterStore(path).load(Roster()) == LoadResult(loaded=False)


def test_save_failure_logged(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    store = RosterStore(blocker / "roster.json")
    store.queue_save()
    with caplog.at_level(logging.ERROR, logger="spinwheel_roster.store"):
        assert store.save(Roster()) is False
    assert store.dirty
    assert caplog.records


def test_queued_saves_coalesce(tmp_path, monkeypatch):
    store = RosterStore(tmp_path / "roster.json")
    roster = Roster()
    writes = []
    original = RosterStore.save

    def counting_save(self, r):
        writes.append(r.names)
        return original(self, r)

    monkeypatch.setattr(RosterStore, "save", counting_save)

    assert store.flush(roster) is False
    roster.add("a")
    store.queue_save()
    roster.add("b")
    store.queue_save()
    assert store.dirty
    assert store.flush(roster) is True
    assert store.flush(roster) is False
    assert writes == [("a", "b")]
    assert not store.dirty
