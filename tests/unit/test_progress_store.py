"""Persistence adapter tests: defaults on missing/corrupt data, best-effort saves, migration."""

import json
from datetime import date, datetime, timezone
from unittest.mock import MagicMock

import pytest

from progression.gamification.schemas import SNAPSHOT_VERSION, ProgressSnapshot, TimelineEntry, UserStats
from progression.storage import create_store
from progression.storage.kv import FileStore, MemoryStore, RedisStore
from progression.storage.progress_store import (
    ProgressStore,
    encode_snapshot,
    normalize_snapshot,
    snapshot_key,
)

T1 = datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc)
T2 = datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc)
T3 = datetime(2026, 3, 3, 10, 0, tzinfo=timezone.utc)


def _store_with(raw: bytes) -> ProgressStore:
    kv = MemoryStore()
    kv.set("k", raw)
    return ProgressStore(kv, "k")


class TestLoad:
    """Load never raises."""

    def test_missing_key_returns_defaults(self, progress_store):
        snapshot = progress_store.load()
        assert snapshot == ProgressSnapshot.empty()
        assert snapshot.version == SNAPSHOT_VERSION

    @pytest.mark.parametrize(
        "raw",
        [b"\x00\xff garbage", b"", b"{not json", b"[]", b'{"stats": "nope"}', b'{"unlocked": 5}'],
    )
    def test_corrupted_bytes_return_defaults(self, raw):
        assert _store_with(raw).load() == ProgressSnapshot.empty()

    def test_read_failure_returns_defaults(self):
        kv = MagicMock()
        kv.get.side_effect = OSError("disk gone")
        assert ProgressStore(kv, "k").load() == ProgressSnapshot.empty()

    def test_round_trip(self, progress_store):
        snapshot = ProgressSnapshot.empty()
        snapshot.stats.voids_explored = 3
        snapshot.unlocked = ["first_explore"]
        snapshot.timeline = [TimelineEntry(id="first_explore", unlocked_at=T1)]
        snapshot.completed_nodes = ["a"]
        snapshot.featured = ["first_explore"]
        snapshot.last_active_date = date(2026, 3, 1)
        assert progress_store.save(snapshot) is True
        assert progress_store.load() == snapshot

    def test_version_zero_snapshot_upgrades(self):
        legacy = {
            "stats": {"voidsExplored": 4, "retiredStat": 9},
            "unlocked": ["first_explore"],
            "completedNodes": ["a"],
            "featured": [],
            "timeline": [{"id": "first_explore", "unlockedAt": "2026-03-01T10:00:00.000Z"}],
        }
        snapshot = _store_with(json.dumps(legacy).encode()).load()
        assert snapshot.version == SNAPSHOT_VERSION
        assert snapshot.stats.voids_explored == 4
        assert snapshot.unlocked == ["first_explore"]
        assert snapshot.completed_nodes == ["a"]
        assert snapshot.timeline[0].unlocked_at == T1
        assert snapshot.last_active_date is None

    @pytest.mark.parametrize("stats", [{"voidsExplored": -20}, {"currentStreak": -1}])
    def test_negative_counter_returns_defaults(self, stats):
        raw = json.dumps({"version": SNAPSHOT_VERSION, "stats": stats, "unlocked": ["first_explore"]}).encode()
        assert _store_with(raw).load() == ProgressSnapshot.empty()

    def test_newer_version_loaded_best_effort(self):
        raw = json.dumps({"version": SNAPSHOT_VERSION + 1, "unlocked": ["x"], "futureField": 1}).encode()
        snapshot = _store_with(raw).load()
        assert snapshot.unlocked == ["x"]

    def test_naive_timestamp_read_as_utc(self):
        raw = json.dumps({"unlocked": ["x"], "timeline": [{"id": "x", "unlockedAt": "2026-03-01T10:00:00"}]}).encode()
        assert _store_with(raw).load().timeline[0].unlocked_at == T1


class TestSave:
    """Save is best-effort."""

    def test_writes_camel_case_json(self, memory_store, progress_store):
        progress_store.save(ProgressSnapshot.empty())
        data = json.loads(memory_store.get("test:alice"))
        assert set(data) >= {"version", "stats", "unlocked", "completedNodes", "featured", "timeline", "lastActiveDate"}
        assert "voidsExplored" in data["stats"]

    def test_write_failure_is_swallowed(self):
        kv = MagicMock()
        kv.set.side_effect = OSError("quota exceeded")
        assert ProgressStore(kv, "k").save(ProgressSnapshot.empty()) is False

    def test_encode_is_bytes(self):
        assert isinstance(encode_snapshot(ProgressSnapshot.empty()), bytes)


class TestNormalize:
    """Repairs applied on load."""

    def test_duplicate_ids_removed(self):
        snapshot = ProgressSnapshot(unlocked=["a", "b", "a"], completed_nodes=["n", "n"])
        assert snapshot.unlocked == ["a", "b"]
        assert snapshot.completed_nodes == ["n"]

    def test_timeline_keeps_earliest_entry(self):
        snapshot = ProgressSnapshot(
            unlocked=["a"],
            timeline=[TimelineEntry(id="a", unlocked_at=T2), TimelineEntry(id="a", unlocked_at=T1)],
        )
        normalize_snapshot(snapshot, now=T3)
        assert snapshot.timeline == [TimelineEntry(id="a", unlocked_at=T1)]

    def test_orphan_timeline_entries_dropped(self):
        snapshot = ProgressSnapshot(unlocked=["a"], timeline=[
            TimelineEntry(id="a", unlocked_at=T1),
            TimelineEntry(id="ghost", unlocked_at=T2),
        ])
        normalize_snapshot(snapshot, now=T3)
        assert [e.id for e in snapshot.timeline] == ["a"]

    def test_missing_timeline_entries_back_filled(self):
        snapshot = ProgressSnapshot(unlocked=["a", "b"], timeline=[TimelineEntry(id="b", unlocked_at=T1)])
        normalize_snapshot(snapshot, now=T3)
        assert snapshot.timeline == [
            TimelineEntry(id="b", unlocked_at=T1),
            TimelineEntry(id="a", unlocked_at=T3),
        ]

    def test_timeline_sorted_by_time(self):
        snapshot = ProgressSnapshot(unlocked=["a", "b"], timeline=[
            TimelineEntry(id="b", unlocked_at=T2),
            TimelineEntry(id="a", unlocked_at=T1),
        ])
        normalize_snapshot(snapshot, now=T3)
        assert [e.id for e in snapshot.timeline] == ["a", "b"]

    def test_featured_filtered_and_truncated(self):
        snapshot = ProgressSnapshot(unlocked=["a", "b", "c", "d"], featured=["x", "a", "b", "a", "c", "d"])
        normalize_snapshot(snapshot, featured_limit=3, now=T3)
        assert snapshot.featured == ["a", "b", "c"]


class TestBackends:
    """Byte stores."""

    def test_snapshot_key(self):
        assert snapshot_key("voidspace-progress", "alice.near") == "voidspace-progress:alice.near"

    def test_file_store_round_trip(self, tmp_path):
        store = FileStore(tmp_path / "data")
        assert store.get("p:alice") is None
        store.set("p:alice", b"one")
        store.set("p:alice", b"two")
        assert store.get("p:alice") == b"two"
        assert [p.name for p in (tmp_path / "data").iterdir()] == ["p%3Aalice.json"]

    def test_file_store_keys_do_not_collide(self, tmp_path):
        store = FileStore(tmp_path)
        store.set("p:a_b", b"first")
        store.set("p_a:b", b"second")
        assert store.get("p:a_b") == b"first"
        assert store.get("p_a:b") == b"second"

    def test_file_store_backs_progress_store(self, tmp_path):
        progress = ProgressStore(FileStore(tmp_path), "p:bob")
        snapshot = ProgressSnapshot.empty()
        snapshot.stats = UserStats(voids_explored=2)
        progress.save(snapshot)
        assert ProgressStore(FileStore(tmp_path), "p:bob").load().stats.voids_explored == 2

    def test_redis_store_delegates_to_client(self):
        client = MagicMock()
        client.get.return_value = b"payload"
        store = RedisStore(client)
        assert store.get("p:alice") == b"payload"
        store.set("p:alice", b"x")
        client.set.assert_called_once_with("p:alice", b"x")

    def test_redis_outage_falls_back_to_defaults(self):
        client = MagicMock()
        client.get.side_effect = ConnectionError("redis down")
        assert ProgressStore(RedisStore(client), "k").load() == ProgressSnapshot.empty()

    def test_create_store_memory(self, settings):
        assert isinstance(create_store(settings), MemoryStore)

    def test_create_store_file(self, settings, tmp_path):
        settings.storage_backend = "file"
        settings.storage_dir = str(tmp_path)
        store = create_store(settings)
        assert isinstance(store, FileStore)
        assert store.root == tmp_path

    def test_create_store_unknown(self, settings):
        settings.storage_backend = "floppy"
        with pytest.raises(ValueError, match="floppy"):
            create_store(settings)
