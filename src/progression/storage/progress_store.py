"""Load/save of the whole progress snapshot against a byte key-value store.

Loading never raises: a missing key yields the empty snapshot, and so does
anything that fails to parse. Saving never raises either; the in-memory
snapshot stays authoritative for the session when a write is lost.
"""

from __future__ import annotations

from datetime import datetime, timezone

import structlog

from progression.gamification.schemas import SNAPSHOT_VERSION, ProgressSnapshot, TimelineEntry
from progression.storage.kv import KeyValueStore

logger = structlog.get_logger()


def snapshot_key(prefix: str, account_id: str) -> str:
    return f"{prefix}:{account_id}"


def encode_snapshot(snapshot: ProgressSnapshot) -> bytes:
    return snapshot.model_dump_json(by_alias=True).encode("utf-8")


def normalize_snapshot(
    snapshot: ProgressSnapshot,
    featured_limit: int = 3,
    now: datetime | None = None,
) -> ProgressSnapshot:
    """Repair a decoded snapshot in place and stamp it with the current version.

    - timeline keeps the earliest entry per unlocked ID, drops entries for IDs
      that are not unlocked, and gains an entry for any unlocked ID missing one
    - featured keeps only unlocked IDs, up to ``featured_limit``
    """
    if now is None:
        now = datetime.now(timezone.utc)
    unlocked = set(snapshot.unlocked)

    earliest: dict[str, TimelineEntry] = {}
    for entry in snapshot.timeline:
        if entry.id not in unlocked:
            continue
        seen = earliest.get(entry.id)
        if seen is None or entry.unlocked_at < seen.unlocked_at:
            earliest[entry.id] = entry
    timeline = sorted(earliest.values(), key=lambda e: e.unlocked_at)
    for achievement_id in snapshot.unlocked:
        if achievement_id not in earliest:
            timeline.append(TimelineEntry(id=achievement_id, unlocked_at=now))

    snapshot.timeline = timeline
    snapshot.featured = [f for f in snapshot.featured if f in unlocked][:featured_limit]
    snapshot.version = SNAPSHOT_VERSION
    return snapshot


class ProgressStore:
    """Persistence adapter for one account's snapshot."""

    def __init__(self, store: KeyValueStore, key: str, featured_limit: int = 3) -> None:
        self.store = store
        self.key = key
        self.featured_limit = featured_limit

    def load(self) -> ProgressSnapshot:
        try:
            raw = self.store.get(self.key)
        except Exception:
            logger.warning("snapshot_read_failed", key=self.key, exc_info=True)
            return ProgressSnapshot.empty()

        if raw is None:
            return ProgressSnapshot.empty()

        try:
            snapshot = ProgressSnapshot.model_validate_json(raw)
        except ValueError:
            logger.warning("snapshot_corrupted", key=self.key, size=len(raw), exc_info=True)
            return ProgressSnapshot.empty()

        if snapshot.version > SNAPSHOT_VERSION:
            logger.info(
                "snapshot_from_newer_schema",
                key=self.key,
                version=snapshot.version,
                supported=SNAPSHOT_VERSION,
            )
        return normalize_snapshot(snapshot, self.featured_limit)

    def save(self, snapshot: ProgressSnapshot) -> bool:
        """Write the whole snapshot. Returns False (and logs) if the write failed."""
        try:
            self.store.set(self.key, encode_snapshot(snapshot))
        except Exception:
            logger.warning("snapshot_save_failed", key=self.key, exc_info=True)
            return False
        return True
