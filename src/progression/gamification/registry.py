"""Immutable achievement + skill-node catalog with load-time integrity checks."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from types import MappingProxyType

from progression.gamification.schemas import (
    AchievementDef,
    Category,
    CustomTag,
    CustomTrigger,
    Rarity,
    RarityCount,
    SkillNode,
    ThresholdTrigger,
    stat_field_name,
)

logger = logging.getLogger(__name__)


class RegistryError(ValueError):
    """The catalog is broken: duplicate IDs, dangling or cyclic prerequisites."""


class Registry:
    """Read-only catalog built once at startup and shared by every engine."""

    def __init__(
        self,
        achievements: Iterable[AchievementDef],
        skill_nodes: Iterable[SkillNode] = (),
    ) -> None:
        achievements = tuple(achievements)
        skill_nodes = tuple(skill_nodes)

        self._achievements = _index_unique(achievements, "achievement")
        self._nodes = _index_unique(skill_nodes, "skill node")
        _check_triggers(achievements)
        _check_prerequisites(skill_nodes, self._nodes)
        self._topo_order = _topological_order(skill_nodes)

        by_category: dict[Category, list[AchievementDef]] = defaultdict(list)
        by_custom: dict[CustomTag, list[AchievementDef]] = defaultdict(list)
        for a in achievements:
            by_category[a.category].append(a)
            if isinstance(a.trigger, CustomTrigger):
                by_custom[a.trigger.tag].append(a)
        self._by_category = {c: tuple(v) for c, v in by_category.items()}
        self._by_custom = {t: tuple(v) for t, v in by_custom.items()}

        dependents: dict[str, list[str]] = defaultdict(list)
        for node in skill_nodes:
            for prereq in sorted(node.prerequisites):
                dependents[prereq].append(node.id)
        self._dependents = {k: tuple(v) for k, v in dependents.items()}

        logger.debug(
            "Registry loaded: %d achievements, %d skill nodes",
            len(self._achievements),
            len(self._nodes),
        )

    # --- Achievements ---

    @property
    def achievements(self) -> tuple[AchievementDef, ...]:
        """All achievements in catalog order."""
        return tuple(self._achievements.values())

    @property
    def achievement_map(self) -> MappingProxyType[str, AchievementDef]:
        return MappingProxyType(self._achievements)

    def get_achievement(self, achievement_id: str) -> AchievementDef | None:
        return self._achievements.get(achievement_id)

    def by_category(self, category: Category) -> tuple[AchievementDef, ...]:
        return self._by_category.get(category, ())

    def by_custom_tag(self, tag: CustomTag) -> tuple[AchievementDef, ...]:
        return self._by_custom.get(tag, ())

    def visible(self) -> list[AchievementDef]:
        """Achievements listed to everyone (non-secret)."""
        return [a for a in self._achievements.values() if not a.secret]

    def displayable(self, unlocked: Iterable[str]) -> list[AchievementDef]:
        """Visible achievements plus secrets the user has already unlocked."""
        unlocked = set(unlocked)
        return [a for a in self._achievements.values() if not a.secret or a.id in unlocked]

    def count_by_rarity(self, unlocked: Iterable[str]) -> dict[Rarity, RarityCount]:
        unlocked = set(unlocked)
        result = {r: RarityCount() for r in Rarity}
        for a in self._achievements.values():
            result[a.rarity].total += 1
            if a.id in unlocked:
                result[a.rarity].unlocked += 1
        return result

    # --- Skill graph ---

    @property
    def skill_nodes(self) -> tuple[SkillNode, ...]:
        return tuple(self._nodes.values())

    def get_node(self, node_id: str) -> SkillNode | None:
        return self._nodes.get(node_id)

    def dependents(self, node_id: str) -> tuple[str, ...]:
        """IDs of nodes that list ``node_id`` as a direct prerequisite."""
        return self._dependents.get(node_id, ())

    @property
    def topological_order(self) -> tuple[str, ...]:
        """Node IDs ordered so every prerequisite precedes its dependents."""
        return self._topo_order


def _index_unique(items: tuple, label: str) -> dict:
    index: dict = {}
    duplicates = []
    for item in items:
        if item.id in index:
            duplicates.append(item.id)
        index[item.id] = item
    if duplicates:
        msg = f"Duplicate {label} id(s): {', '.join(sorted(set(duplicates)))}"
        raise RegistryError(msg)
    return index


def _check_triggers(achievements: tuple[AchievementDef, ...]) -> None:
    for a in achievements:
        if isinstance(a.trigger, ThresholdTrigger) and stat_field_name(a.trigger.stat) is None:
            msg = f"Achievement {a.id!r} triggers on unknown stat {a.trigger.stat!r}"
            raise RegistryError(msg)
        if isinstance(a.trigger, CustomTrigger) and a.trigger.tag is CustomTag.UNRECOGNIZED:
            # Allowed: the event may simply not be wired up in this deployment
            logger.info("Achievement %s uses unrecognized custom trigger %r", a.id, a.trigger.name)


def _check_prerequisites(nodes: tuple[SkillNode, ...], index: dict[str, SkillNode]) -> None:
    for node in nodes:
        missing = sorted(p for p in node.prerequisites if p not in index)
        if missing:
            msg = f"Skill node {node.id!r} has dangling prerequisite(s): {', '.join(missing)}"
            raise RegistryError(msg)
        if node.id in node.prerequisites:
            msg = f"Skill node {node.id!r} lists itself as a prerequisite"
            raise RegistryError(msg)


def _topological_order(nodes: tuple[SkillNode, ...]) -> tuple[str, ...]:
    """Kahn's algorithm; anything left over sits on (or behind) a cycle."""
    indegree = {n.id: len(n.prerequisites) for n in nodes}
    dependents: dict[str, list[str]] = defaultdict(list)
    for n in nodes:
        for p in n.prerequisites:
            dependents[p].append(n.id)

    ready = [n.id for n in nodes if indegree[n.id] == 0]
    order: list[str] = []
    while ready:
        node_id = ready.pop(0)
        order.append(node_id)
        for dep in dependents[node_id]:
            indegree[dep] -= 1
            if indegree[dep] == 0:
                ready.append(dep)

    if len(order) != len(nodes):
        stuck = sorted(node_id for node_id, deg in indegree.items() if deg > 0)
        msg = f"Prerequisite cycle among skill nodes: {', '.join(stuck)}"
        raise RegistryError(msg)
    return tuple(order)
