"""Registry tests: load-time integrity checks and catalog queries."""

import pytest
from pydantic import ValidationError

from progression.gamification.registry import Registry, RegistryError
from progression.gamification.schemas import (
    AchievementDef,
    Category,
    CustomTag,
    CustomTrigger,
    Rarity,
    SkillNode,
    ThresholdTrigger,
)


def _achievement(achievement_id: str, **kwargs) -> AchievementDef:
    fields = {"category": Category.EXPLORATION, "rarity": Rarity.COMMON, "xp": 10}
    fields.update(kwargs)
    return AchievementDef(id=achievement_id, **fields)


def _node(node_id: str, *prereqs: str, xp: int = 10) -> SkillNode:
    return SkillNode(id=node_id, xp=xp, prerequisites=frozenset(prereqs))


class TestIntegrityChecks:
    """Broken catalogs are rejected at construction."""

    def test_duplicate_achievement_id(self):
        with pytest.raises(RegistryError, match="Duplicate achievement"):
            Registry([_achievement("x"), _achievement("x")])

    def test_duplicate_node_id(self):
        with pytest.raises(RegistryError, match="Duplicate skill node"):
            Registry([], [_node("a"), _node("a")])

    def test_dangling_prerequisite(self):
        with pytest.raises(RegistryError, match="dangling"):
            Registry([], [_node("a"), _node("b", "missing")])

    def test_self_prerequisite(self):
        with pytest.raises(RegistryError, match="itself"):
            Registry([], [_node("a", "a")])

    def test_cycle_names_members(self):
        with pytest.raises(RegistryError, match="cycle") as exc_info:
            Registry([], [_node("root"), _node("a", "c"), _node("b", "a"), _node("c", "b")])
        assert "a, b, c" in str(exc_info.value)
        assert "root" not in str(exc_info.value)

    def test_threshold_on_unknown_stat(self):
        trigger = ThresholdTrigger(stat="no_such_stat", threshold=1)
        with pytest.raises(RegistryError, match="unknown stat"):
            Registry([_achievement("x", trigger=trigger)])

    def test_threshold_accepts_camel_case_stat(self):
        trigger = ThresholdTrigger(stat="voidsExplored", threshold=1)
        registry = Registry([_achievement("x", trigger=trigger)])
        assert registry.get_achievement("x") is not None

    def test_unrecognized_custom_tag_is_allowed(self):
        registry = Registry([_achievement("x", trigger=CustomTrigger(name="someday"))])
        assert registry.get_achievement("x").trigger.tag is CustomTag.UNRECOGNIZED

    def test_registry_error_is_value_error(self):
        assert issubclass(RegistryError, ValueError)

    def test_negative_xp_rejected_by_model(self):
        with pytest.raises(ValidationError):
            _achievement("x", xp=-1)


class TestAchievementQueries:
    """Lookup and grouping over the small catalog."""

    def test_lookup_by_id(self, registry):
        assert registry.get_achievement("first_explore").xp == 15
        assert registry.get_achievement("nope") is None

    def test_catalog_order_preserved(self, registry):
        ids = [a.id for a in registry.achievements]
        assert ids[:3] == ["first_explore", "explorer_10", "connected"]

    def test_achievement_map_is_read_only(self, registry):
        with pytest.raises(TypeError):
            registry.achievement_map["new"] = registry.get_achievement("konami")

    def test_by_category(self, registry):
        streaks = registry.by_category(Category.STREAKS)
        assert {a.id for a in streaks} == {"weekend", "streak_3"}
        assert registry.by_category(Category.SOCIAL) == ()

    def test_by_custom_tag(self, registry):
        assert [a.id for a in registry.by_custom_tag(CustomTag.KONAMI_CODE)] == ["konami"]

    def test_visible_excludes_secrets(self, registry):
        assert "konami" not in {a.id for a in registry.visible()}

    def test_displayable_includes_unlocked_secrets(self, registry):
        assert "konami" not in {a.id for a in registry.displayable([])}
        assert "konami" in {a.id for a in registry.displayable(["konami"])}

    def test_count_by_rarity(self, registry):
        counts = registry.count_by_rarity(["first_explore", "konami"])
        assert counts[Rarity.COMMON].total == 3
        assert counts[Rarity.COMMON].unlocked == 1
        assert counts[Rarity.LEGENDARY].unlocked == 1
        assert counts[Rarity.RARE].unlocked == 0
        assert sum(c.total for c in counts.values()) == len(registry.achievements)


class TestSkillNodeQueries:
    """Node lookup and adjacency."""

    def test_dependents(self, registry):
        assert registry.dependents("a") == ("b",)
        assert registry.dependents("c") == ()

    def test_topological_order(self, registry):
        order = registry.topological_order
        assert order.index("a") < order.index("b") < order.index("c")

    def test_empty_graph(self):
        registry = Registry([])
        assert registry.skill_nodes == ()
        assert registry.topological_order == ()
