"""Skill graph resolver: derives locked / available / completed for every node."""

from __future__ import annotations

from collections.abc import Iterable

from progression.gamification.registry import Registry
from progression.gamification.schemas import NodeStatus, SkillNode, Track, TrackStats


def node_status(node: SkillNode, completed: set[str] | frozenset[str]) -> NodeStatus:
    """Status from direct prerequisites only; no transitive reasoning."""
    if node.id in completed:
        return NodeStatus.COMPLETED
    if all(p in completed for p in node.prerequisites):
        return NodeStatus.AVAILABLE
    return NodeStatus.LOCKED


def resolve_statuses(registry: Registry, completed: Iterable[str]) -> dict[str, NodeStatus]:
    """Status of every node in the registry, recomputed from scratch."""
    completed = frozenset(completed)
    return {node.id: node_status(node, completed) for node in registry.skill_nodes}


def get_node_status(registry: Registry, node_id: str, completed: Iterable[str]) -> NodeStatus:
    """Status of one node. Unknown IDs are reported as locked."""
    node = registry.get_node(node_id)
    if node is None:
        return NodeStatus.LOCKED
    return node_status(node, frozenset(completed))


def prerequisite_chain(registry: Registry, node_id: str) -> list[SkillNode]:
    """Direct prerequisites of a node, in ID order."""
    node = registry.get_node(node_id)
    if node is None:
        return []
    return [registry.get_node(p) for p in sorted(node.prerequisites)]  # type: ignore[misc]


def unlocks_next(registry: Registry, node_id: str) -> list[SkillNode]:
    """Nodes that directly depend on ``node_id``."""
    return [registry.get_node(d) for d in registry.dependents(node_id)]  # type: ignore[misc]


def skill_xp(registry: Registry, completed: Iterable[str]) -> int:
    """XP from completed nodes; IDs not in the registry count for nothing."""
    total = 0
    for node_id in set(completed):
        node = registry.get_node(node_id)
        if node is not None:
            total += node.xp
    return total


def track_stats(registry: Registry, track: Track, completed: Iterable[str]) -> TrackStats:
    completed = set(completed)
    nodes = [n for n in registry.skill_nodes if n.track == track]
    done = [n for n in nodes if n.id in completed]
    total = len(nodes)
    return TrackStats(
        completed=len(done),
        total=total,
        earned_xp=sum(n.xp for n in done),
        total_xp=sum(n.xp for n in nodes),
        pct=round(len(done) / total * 100) if total else 0,
    )
