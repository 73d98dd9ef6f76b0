"""XP derivation.

Total XP is never stored: it is recomputed from (stats, unlocked, completed
nodes) on every read, so the same inputs always yield the same total.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from progression.gamification.registry import Registry
from progression.gamification.schemas import UserStats, XPBreakdown
from progression.gamification.skill_graph import skill_xp

# XP per unit of each activity counter
ACTION_XP_WEIGHTS: dict[str, int] = {
    "voids_explored": 10,
    "briefs_generated": 50,
    "sanctum_messages": 5,
    "code_generations": 25,
    "contracts_deployed": 500,
    "modules_completed": 75,
    "wallets_analyzed": 25,
}

STREAK_BONUS_PER_DAY = 10
STREAK_BONUS_MIN_DAYS = 3
DEFAULT_STREAK_BONUS_CAP = 30


def activity_xp(stats: UserStats, weights: Mapping[str, int] = ACTION_XP_WEIGHTS) -> int:
    return sum(getattr(stats, stat) * weight for stat, weight in weights.items())


def achievement_xp(registry: Registry, unlocked: Iterable[str]) -> int:
    """Sum of XP for unlocked achievements; unknown IDs count for nothing."""
    total = 0
    for achievement_id in set(unlocked):
        achievement = registry.get_achievement(achievement_id)
        if achievement is not None:
            total += achievement.xp
    return total


def streak_bonus(current_streak: int, cap_days: int = DEFAULT_STREAK_BONUS_CAP) -> int:
    """10 XP per streak day once the streak reaches 3 days, capped at ``cap_days``."""
    if current_streak < STREAK_BONUS_MIN_DAYS:
        return 0
    return min(current_streak, cap_days) * STREAK_BONUS_PER_DAY


def compute_xp(
    registry: Registry,
    stats: UserStats,
    unlocked: Iterable[str],
    completed_nodes: Iterable[str] = (),
    streak_cap_days: int = DEFAULT_STREAK_BONUS_CAP,
    weights: Mapping[str, int] = ACTION_XP_WEIGHTS,
) -> XPBreakdown:
    activity = activity_xp(stats, weights)
    achievements = achievement_xp(registry, unlocked)
    skills = skill_xp(registry, completed_nodes)
    bonus = streak_bonus(stats.current_streak, streak_cap_days)
    return XPBreakdown(
        activity=activity,
        achievements=achievements,
        skills=skills,
        streak_bonus=bonus,
        total=activity + achievements + skills + bonus,
    )


def total_xp(
    registry: Registry,
    stats: UserStats,
    unlocked: Iterable[str],
    completed_nodes: Iterable[str] = (),
    streak_cap_days: int = DEFAULT_STREAK_BONUS_CAP,
    weights: Mapping[str, int] = ACTION_XP_WEIGHTS,
) -> int:
    return compute_xp(registry, stats, unlocked, completed_nodes, streak_cap_days, weights).total
