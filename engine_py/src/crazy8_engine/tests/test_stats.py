"""
Tests for persisted win/loss stats.
"""

import json

from crazy8_engine.stats import GameStats, StatsStore


def test_missing_file_defaults_to_zero(tmp_path):
    store = StatsStore(str(tmp_path / "stats.json"))
    assert store.stats == GameStats(games=0, wins=0, losses=0)


def test_record_persists_under_namespace(tmp_path):
    path = tmp_path / "nested" / "stats.json"
    store = StatsStore(str(path))

    store.record(True)
    store.record(False)
    store.record(False)

    data = json.loads(path.read_text())
    assert data == {"crazy8_stats": {"games": 3, "wins": 1, "losses": 2}}

    reloaded = StatsStore(str(path))
    assert reloaded.stats.games == 3
    assert reloaded.stats.wins == 1
    assert reloaded.stats.losses == 2


def test_other_namespaces_are_preserved(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text(json.dumps({"other_game": {"score": 5}}))

    StatsStore(str(path)).record(True)

    data = json.loads(path.read_text())
    assert data["other_game"] == {"score": 5}
    assert data["crazy8_stats"]["wins"] == 1


def test_malformed_json_does_not_crash(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text("{not json")

    store = StatsStore(str(path))

    assert store.stats.games == 0
    store.record(True)
    assert json.loads(path.read_text())["crazy8_stats"]["wins"] == 1


def test_invalid_record_falls_back_to_defaults(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text(json.dumps({"crazy8_stats": {"games": "many", "wins": -1}}))
    assert StatsStore(str(path)).stats.games == 0

    path.write_text(json.dumps([1, 2, 3]))
    assert StatsStore(str(path)).stats.games == 0


def test_in_memory_store():
    store = StatsStore()
    store.record(False)
    assert store.stats.losses == 1
    assert store.stats.games == 1


def test_unwritable_path_keeps_counting_in_memory(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    store = StatsStore(str(blocker / "stats.json"))

    assert not store.save()
    stats = store.record(False)

    assert stats.games == 1
    assert stats.losses == 1
    assert blocker.read_text() == ""
