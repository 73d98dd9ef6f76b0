"""Progression engine: one account's snapshot plus the operations that mutate and read it.

Every mutation follows the same cycle: apply the change to the in-memory
snapshot, re-evaluate achievement triggers, merge new unlocks (with timeline
entries), then write the whole snapshot back. Reads are derived on demand and
never cached.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime, timezone

import structlog

from progression.config import Settings, get_settings
from progression.gamification.level_thresholds import CONSTELLATION_LEVELS, compute_rank
from progression.gamification.registry import Registry
from progression.gamification.schemas import (
    AchievementDef,
    NodeStatus,
    ProgressSnapshot,
    ProgressSummary,
    RankInfo,
    Rarity,
    RarityCount,
    TimelineEntry,
    Track,
    TrackStats,
    XPBreakdown,
    stat_field_name,
)
from progression.gamification.seed import load_default_registry
from progression.gamification.skill_graph import (
    get_node_status,
    resolve_statuses,
    skill_xp,
    track_stats,
)
from progression.gamification.streak_service import (
    completes_weekend,
    compute_streak,
    effective_streak,
    get_today,
)
from progression.gamification.trigger_engine import TriggerEngine, sort_by_rarity
from progression.gamification.xp_service import ACTION_XP_WEIGHTS, compute_xp
from progression.logging import bind_account
from progression.storage import create_store
from progression.storage.kv import KeyValueStore
from progression.storage.progress_store import ProgressStore, snapshot_key

logger = structlog.get_logger()

# Numeric stats that may go down: session counters and streaks reset by policy.
RESETTABLE_STATS = frozenset({"current_streak", "quiz_streak", "bubbles_clicked_in_session"})

# Running counters and the best value they have reached.
HIGH_WATER_STATS = {"current_streak": "longest_streak", "quiz_streak": "max_quiz_streak"}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProgressionEngine:
    """Owns one account's in-memory snapshot for the length of a session."""

    def __init__(
        self,
        registry: Registry,
        store: ProgressStore,
        settings: Settings | None = None,
        weights: Mapping[str, int] = ACTION_XP_WEIGHTS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.registry = registry
        self.store = store
        self.settings = settings or get_settings()
        self.weights = weights
        self.clock = clock
        self.triggers = TriggerEngine(registry)
        self.snapshot: ProgressSnapshot = store.load()

    # --- Internal ---

    def _today(self) -> date:
        return get_today(self.clock())

    def _resolve_stat(self, name: str) -> str:
        field = stat_field_name(name)
        if field is None:
            msg = f"Unknown stat: {name!r}"
            raise KeyError(msg)
        return field

    def _require_node(self, node_id: str) -> None:
        if self.registry.get_node(node_id) is None:
            msg = f"Unknown skill node: {node_id!r}"
            raise KeyError(msg)

    def _commit(self, extra: Iterable[AchievementDef] = ()) -> list[AchievementDef]:
        """Evaluate triggers, merge unlocks, persist. Returns new unlocks, rarest first."""
        snapshot = self.snapshot
        already = set(snapshot.unlocked)
        new: dict[str, AchievementDef] = {}
        for achievement in extra:
            if achievement.id not in already:
                new.setdefault(achievement.id, achievement)
        for achievement in self.triggers.evaluate(snapshot.stats, already):
            new.setdefault(achievement.id, achievement)

        if new:
            now = self.clock()
            for achievement_id in new:
                snapshot.unlocked.append(achievement_id)
                snapshot.timeline.append(TimelineEntry(id=achievement_id, unlocked_at=now))
            logger.info(
                "achievements_unlocked",
                ids=list(new),
                xp=sum(a.xp for a in new.values()),
            )

        self.store.save(snapshot)
        return sort_by_rarity(new.values())

    # --- Stat mutations ---

    def increment_stat(self, name: str, delta: int = 1) -> list[AchievementDef]:
        field = self._resolve_stat(name)
        current = getattr(self.snapshot.stats, field)
        if isinstance(current, bool):
            msg = f"{name!r} is a flag; use set_flag()"
            raise ValueError(msg)
        if delta < 0:
            msg = f"Cannot decrement {name!r} (delta={delta})"
            raise ValueError(msg)
        setattr(self.snapshot.stats, field, current + delta)
        return self._commit()

    def set_flag(self, name: str) -> list[AchievementDef]:
        """Set a boolean stat to true. Flags are never cleared."""
        field = self._resolve_stat(name)
        if not isinstance(getattr(self.snapshot.stats, field), bool):
            msg = f"{name!r} is a counter; use increment_stat() or set_stat()"
            raise ValueError(msg)
        setattr(self.snapshot.stats, field, True)
        return self._commit()

    def set_stat(self, name: str, value: int | bool) -> list[AchievementDef]:
        """Overwrite a stat. Counters may only go up unless listed in RESETTABLE_STATS."""
        field = self._resolve_stat(name)
        current = getattr(self.snapshot.stats, field)
        if isinstance(current, bool):
            if not isinstance(value, bool):
                msg = f"{name!r} is a flag and takes a bool, got {value!r}"
                raise ValueError(msg)
            if current and not value:
                msg = f"Flag {name!r} cannot be cleared"
                raise ValueError(msg)
        else:
            if isinstance(value, bool):
                msg = f"{name!r} is a counter and takes an int, got {value!r}"
                raise ValueError(msg)
            if value < 0:
                msg = f"{name!r} cannot be negative, got {value}"
                raise ValueError(msg)
            if value < current and field not in RESETTABLE_STATS:
                msg = f"{name!r} only increases ({current} -> {value})"
                raise ValueError(msg)
        setattr(self.snapshot.stats, field, value)
        best = HIGH_WATER_STATS.get(field)
        if best is not None and value > getattr(self.snapshot.stats, best):
            setattr(self.snapshot.stats, best, value)
        return self._commit()

    def record_activity(self, today: date | None = None) -> list[AchievementDef]:
        """Count today toward the streak. Safe to call repeatedly within a day."""
        if today is None:
            today = self._today()
        snapshot = self.snapshot
        stats = snapshot.stats
        last = snapshot.last_active_date

        if completes_weekend(last, today):
            stats.weekend_active = True
        stats.current_streak = compute_streak(last, stats.current_streak, today)
        stats.longest_streak = max(stats.longest_streak, stats.current_streak)
        stats.has_visited = True
        snapshot.last_active_date = today
        return self._commit()

    # --- Achievement mutations ---

    def evaluate(self) -> list[AchievementDef]:
        """Re-run triggers against the current stats without changing them."""
        return self._commit()

    def trigger_custom(self, tag: str) -> AchievementDef | None:
        """Unlock the first locked achievement wired to a custom event tag.

        Unknown tags, and tags whose achievements are all unlocked, return None.
        """
        achievement = self.triggers.check_event_trigger(tag, self.snapshot.unlocked)
        if achievement is None:
            return None
        self._commit([achievement])
        return achievement

    def unlock(self, achievement_id: str) -> AchievementDef | None:
        """Unlock an achievement by ID. Returns None if unknown or already unlocked."""
        achievement = self.registry.get_achievement(achievement_id)
        if achievement is None:
            logger.warning("achievement_not_found", achievement_id=achievement_id)
            return None
        if achievement_id in self.snapshot.unlocked:
            return None
        self._commit([achievement])
        return achievement

    def set_featured(self, ids: Iterable[str]) -> list[str]:
        """Pin up to ``featured_limit`` unlocked achievements; other IDs are dropped."""
        unlocked = set(self.snapshot.unlocked)
        valid = [i for i in dict.fromkeys(ids) if i in unlocked]
        self.snapshot.featured = valid[: self.settings.featured_limit]
        self.store.save(self.snapshot)
        return list(self.snapshot.featured)

    # --- Skill nodes ---

    def complete_node(self, node_id: str) -> list[AchievementDef]:
        """Mark a node complete. Completing also counts as activity for the streak."""
        self._require_node(node_id)
        if node_id in self.snapshot.completed_nodes:
            return []
        self.snapshot.completed_nodes.append(node_id)
        return self.record_activity()

    def uncomplete_node(self, node_id: str) -> None:
        self._require_node(node_id)
        if node_id in self.snapshot.completed_nodes:
            self.snapshot.completed_nodes.remove(node_id)
            self.store.save(self.snapshot)

    def toggle_node(self, node_id: str) -> NodeStatus:
        """Flip a node's completion and return its new status."""
        if node_id in self.snapshot.completed_nodes:
            self.uncomplete_node(node_id)
        else:
            self.complete_node(node_id)
        return self.node_status(node_id)

    def reset_nodes(self) -> None:
        """Clear every completed node. Unlocked achievements are kept."""
        self.snapshot.completed_nodes = []
        self.store.save(self.snapshot)

    # --- Reads ---

    def node_statuses(self) -> dict[str, NodeStatus]:
        return resolve_statuses(self.registry, self.snapshot.completed_nodes)

    def node_status(self, node_id: str) -> NodeStatus:
        return get_node_status(self.registry, node_id, self.snapshot.completed_nodes)

    def track_stats(self, track: Track) -> TrackStats:
        return track_stats(self.registry, track, self.snapshot.completed_nodes)

    def constellation_level(self) -> RankInfo:
        """Level from skill-node XP alone."""
        return compute_rank(skill_xp(self.registry, self.snapshot.completed_nodes), CONSTELLATION_LEVELS)

    def xp(self) -> XPBreakdown:
        snapshot = self.snapshot
        return compute_xp(
            self.registry,
            snapshot.stats,
            snapshot.unlocked,
            snapshot.completed_nodes,
            streak_cap_days=self.settings.streak_bonus_cap,
            weights=self.weights,
        )

    def total_xp(self) -> int:
        return self.xp().total

    def rank(self) -> RankInfo:
        return compute_rank(self.total_xp())

    def effective_streak(self, today: date | None = None) -> int:
        if today is None:
            today = self._today()
        stats = self.snapshot.stats
        return effective_streak(self.snapshot.last_active_date, stats.current_streak, today)

    def summary(self, today: date | None = None) -> ProgressSummary:
        breakdown = self.xp()
        stats = self.snapshot.stats
        return ProgressSummary(
            xp=breakdown,
            rank=compute_rank(breakdown.total),
            current_streak=stats.current_streak,
            effective_streak=self.effective_streak(today),
            longest_streak=stats.longest_streak,
            unlocked_count=len(self.snapshot.unlocked),
            total_achievements=len(self.registry.achievements),
        )

    def is_unlocked(self, achievement_id: str) -> bool:
        return achievement_id in self.snapshot.unlocked

    def unlocked_achievements(self, include_secret: bool = True) -> list[AchievementDef]:
        """Unlocked achievements in unlock order. IDs no longer in the catalog are skipped."""
        result = []
        for achievement_id in self.snapshot.unlocked:
            achievement = self.registry.get_achievement(achievement_id)
            if achievement is None or (achievement.secret and not include_secret):
                continue
            result.append(achievement)
        return result

    def displayable(self) -> list[AchievementDef]:
        """Catalog listing: every non-secret achievement plus secrets already unlocked."""
        return self.registry.displayable(self.snapshot.unlocked)

    def featured_achievements(self) -> list[AchievementDef]:
        return [
            a
            for a in (self.registry.get_achievement(i) for i in self.snapshot.featured)
            if a is not None
        ]

    def recent_timeline(self, limit: int | None = None) -> list[TimelineEntry]:
        """Most recent unlocks first."""
        if limit is None:
            limit = self.settings.recent_timeline_limit
        if limit <= 0:
            return []
        return list(reversed(self.snapshot.timeline[-limit:]))

    def count_by_rarity(self) -> dict[Rarity, RarityCount]:
        return self.registry.count_by_rarity(self.snapshot.unlocked)


def create_engine(
    account_id: str,
    settings: Settings | None = None,
    registry: Registry | None = None,
    store: KeyValueStore | None = None,
) -> ProgressionEngine:
    """Build an engine for one account from settings, loading its snapshot."""
    settings = settings or get_settings()
    bind_account(account_id)
    progress_store = ProgressStore(
        store if store is not None else create_store(settings),
        snapshot_key(settings.key_prefix, account_id),
        featured_limit=settings.featured_limit,
    )
    return ProgressionEngine(
        registry if registry is not None else load_default_registry(),
        progress_store,
        settings=settings,
    )
