"""Snapshot persistence: byte stores and the progress store adapter."""

from progression.config import Settings
from progression.storage.kv import FileStore, KeyValueStore, MemoryStore, RedisStore
from progression.storage.progress_store import ProgressStore, snapshot_key


def create_store(settings: Settings) -> KeyValueStore:
    """Build the byte store selected by ``settings.storage_backend``."""
    backend = settings.storage_backend.lower()
    if backend == "memory":
        return MemoryStore()
    if backend == "file":
        return FileStore(settings.storage_dir)
    if backend == "redis":
        return RedisStore.from_url(settings.redis_url)
    msg = f"Unknown storage backend: {settings.storage_backend!r}"
    raise ValueError(msg)


__all__ = [
    "FileStore",
    "KeyValueStore",
    "MemoryStore",
    "ProgressStore",
    "RedisStore",
    "create_store",
    "snapshot_key",
]
