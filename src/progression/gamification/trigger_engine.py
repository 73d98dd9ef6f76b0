"""Achievement trigger engine: evaluates user stats against achievement triggers."""

from __future__ import annotations

from collections.abc import Iterable

from progression.gamification.registry import Registry
from progression.gamification.schemas import (
    AchievementDef,
    CustomTag,
    CustomTrigger,
    ThresholdTrigger,
    UserStats,
    stat_field_name,
)

# Custom tags the evaluator can decide from a boolean stat. Every other tag
# fires only through an explicit event signal (check_event_trigger).
STAT_BACKED_TAGS: dict[CustomTag, str] = {
    CustomTag.WALLET_CONNECTED: "wallet_connected",
    CustomTag.FIRST_VISIT: "has_visited",
    CustomTag.OWN_WALLET_ANALYZED: "own_wallet_analyzed",
    CustomTag.WEEKEND_ACTIVE: "weekend_active",
    CustomTag.QUICK_START_DONE: "quick_start_completed",
    CustomTag.CROSS_CHAIN_DONE: "cross_chain_completed",
    CustomTag.RUST_PATH_DONE: "rust_path_completed",
    CustomTag.ALL_66_MODULES: "all_modules_completed",
    CustomTag.ASKED_THE_PLAN: "asked_about_the_plan",
    CustomTag.ZERO_BALANCE_WALLET: "analyzed_zero_balance",
    CustomTag.KONAMI_CODE: "konami_entered",
}


def threshold_met(trigger: ThresholdTrigger, stats: UserStats) -> bool:
    field = stat_field_name(trigger.stat)
    if field is None:
        return False
    # a flag compares as 0 or 1
    return int(getattr(stats, field)) >= trigger.threshold


def custom_met(trigger: CustomTrigger, stats: UserStats) -> bool:
    field = STAT_BACKED_TAGS.get(trigger.tag)
    if field is None:
        return False
    return bool(getattr(stats, field))


def is_satisfied(achievement: AchievementDef, stats: UserStats) -> bool:
    """Whether the achievement's trigger holds for ``stats``. No trigger: never."""
    trigger = achievement.trigger
    if isinstance(trigger, ThresholdTrigger):
        return threshold_met(trigger, stats)
    if isinstance(trigger, CustomTrigger):
        return custom_met(trigger, stats)
    return False


def sort_by_rarity(achievements: Iterable[AchievementDef]) -> list[AchievementDef]:
    """Legendary first; catalog order is kept within a rarity."""
    return sorted(achievements, key=lambda a: -a.rarity.priority)


class TriggerEngine:
    """Evaluates achievement triggers against a stats record.

    Pure with respect to its inputs: the caller merges the result into the
    unlocked set and records timeline entries.
    """

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def evaluate(self, stats: UserStats, unlocked: Iterable[str]) -> list[AchievementDef]:
        """Return achievements that should newly unlock, in catalog order."""
        already = set(unlocked)
        return [
            a
            for a in self.registry.achievements
            if a.id not in already and is_satisfied(a, stats)
        ]

    def check_event_trigger(self, event: str, unlocked: Iterable[str]) -> AchievementDef | None:
        """Resolve an explicit custom-event signal to the achievement it unlocks.

        Unknown events and events whose achievements are all unlocked return None.
        """
        tag = CustomTag.parse(event)
        if tag is CustomTag.UNRECOGNIZED:
            return None
        already = set(unlocked)
        for achievement in self.registry.by_custom_tag(tag):
            if achievement.id not in already:
                return achievement
        return None
