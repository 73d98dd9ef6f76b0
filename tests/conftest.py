"""Shared test fixtures: a small synthetic catalog, an in-memory store, a fixed clock."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from progression.config import Settings, get_settings
from progression.engine import ProgressionEngine
from progression.gamification.registry import Registry
from progression.gamification.seed import build_achievements, build_skill_nodes
from progression.storage.kv import MemoryStore
from progression.storage.progress_store import ProgressStore

# Wednesday
FIXED_NOW = datetime(2026, 3, 4, 12, 0, 0, tzinfo=timezone.utc)

SMALL_ACHIEVEMENTS = [
    {"id": "first_explore", "category": "exploration", "rarity": "common", "xp": 15, "stat": "voids_explored", "threshold": 1},
    {"id": "explorer_10", "category": "exploration", "rarity": "uncommon", "xp": 50, "stat": "voids_explored", "threshold": 10},
    {"id": "connected", "category": "exploration", "rarity": "common", "xp": 10, "custom": "wallet_connected"},
    {"id": "weekend", "category": "streaks", "rarity": "rare", "xp": 100, "custom": "weekend_active"},
    {"id": "streak_3", "category": "streaks", "rarity": "uncommon", "xp": 40, "stat": "longest_streak", "threshold": 3},
    {"id": "specter", "category": "economy", "rarity": "epic", "xp": 200, "custom": "tier_specter"},
    {"id": "konami", "category": "secret", "rarity": "legendary", "xp": 500, "custom": "konami_code", "secret": True},
    {"id": "unwired", "category": "secret", "rarity": "common", "xp": 5, "custom": "not_wired_yet"},
]

SMALL_NODES = [
    {"id": "a", "xp": 50, "track": "explorer", "tier": "foundation"},
    {"id": "b", "xp": 75, "track": "explorer", "tier": "core", "prerequisites": ["a"]},
    {"id": "c", "xp": 100, "track": "builder", "tier": "advanced", "prerequisites": ["b"]},
]


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry() -> Registry:
    return Registry(build_achievements(SMALL_ACHIEVEMENTS), build_skill_nodes(SMALL_NODES))


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, storage_backend="memory")


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def progress_store(memory_store: MemoryStore) -> ProgressStore:
    return ProgressStore(memory_store, "test:alice")


@pytest.fixture
def engine(registry: Registry, progress_store: ProgressStore, settings: Settings) -> ProgressionEngine:
    """Engine over the small catalog with no activity weights, so XP comes from unlocks and nodes only."""
    return ProgressionEngine(registry, progress_store, settings=settings, weights={}, clock=lambda: FIXED_NOW)
