"""Skill graph resolver tests."""

import pytest

from progression.gamification.registry import Registry
from progression.gamification.schemas import NodeStatus, SkillNode, Track
from progression.gamification.seed import load_default_registry
from progression.gamification.skill_graph import (
    get_node_status,
    prerequisite_chain,
    resolve_statuses,
    skill_xp,
    track_stats,
    unlocks_next,
)

L, A, C = NodeStatus.LOCKED, NodeStatus.AVAILABLE, NodeStatus.COMPLETED


class TestResolveStatuses:
    """Status derivation for the a -> b -> c chain."""

    def test_initial(self, registry):
        assert resolve_statuses(registry, set()) == {"a": A, "b": L, "c": L}

    def test_after_completing_a(self, registry):
        assert resolve_statuses(registry, {"a"}) == {"a": C, "b": A, "c": L}

    def test_all_completed(self, registry):
        assert resolve_statuses(registry, {"a", "b", "c"}) == {"a": C, "b": C, "c": C}

    def test_only_direct_prerequisites_count(self, registry):
        # b completed without a: c becomes available, a stays available
        assert resolve_statuses(registry, {"b"}) == {"a": A, "b": C, "c": A}

    def test_unknown_completed_ids_ignored(self, registry):
        assert resolve_statuses(registry, {"zzz"}) == {"a": A, "b": L, "c": L}

    def test_multiple_prerequisites_need_all(self):
        registry = Registry(
            [],
            [
                SkillNode(id="x", xp=1),
                SkillNode(id="y", xp=1),
                SkillNode(id="z", xp=1, prerequisites=frozenset({"x", "y"})),
            ],
        )
        assert resolve_statuses(registry, {"x"})["z"] is L
        assert resolve_statuses(registry, {"x", "y"})["z"] is A

    @pytest.mark.parametrize("completed", [set(), {"a"}, {"a", "b"}, {"b"}, {"c"}, {"a", "c"}])
    def test_available_implies_prerequisites_completed(self, registry, completed):
        statuses = resolve_statuses(registry, completed)
        for node in registry.skill_nodes:
            if statuses[node.id] is A:
                assert all(statuses[p] is C for p in node.prerequisites)

    def test_production_graph_invariant(self):
        registry = load_default_registry()
        completed = set(registry.topological_order[::3])
        statuses = resolve_statuses(registry, completed)
        assert len(statuses) == len(registry.skill_nodes)
        for node in registry.skill_nodes:
            if statuses[node.id] is A:
                assert all(statuses[p] is C for p in node.prerequisites)


class TestGraphHelpers:
    def test_single_node_status(self, registry):
        assert get_node_status(registry, "b", {"a"}) is A
        assert get_node_status(registry, "missing", {"a"}) is L

    def test_prerequisite_chain(self, registry):
        assert [n.id for n in prerequisite_chain(registry, "c")] == ["b"]
        assert prerequisite_chain(registry, "a") == []
        assert prerequisite_chain(registry, "missing") == []

    def test_unlocks_next(self, registry):
        assert [n.id for n in unlocks_next(registry, "a")] == ["b"]
        assert unlocks_next(registry, "c") == []

    def test_skill_xp(self, registry):
        assert skill_xp(registry, []) == 0
        assert skill_xp(registry, ["a", "b", "ghost"]) == 125

    def test_track_stats(self, registry):
        stats = track_stats(registry, Track.EXPLORER, {"a"})
        assert (stats.completed, stats.total) == (1, 2)
        assert (stats.earned_xp, stats.total_xp) == (50, 125)
        assert stats.pct == 50

    def test_track_stats_empty_track(self, registry):
        stats = track_stats(registry, Track.FOUNDER, set())
        assert stats.total == 0
        assert stats.pct == 0
