"""Production catalog loads and is internally consistent."""

from progression.gamification.schemas import Category, CustomTag, CustomTrigger, Track
from progression.gamification.seed import ACHIEVEMENT_SEED_DATA, SKILL_NODE_SEED_DATA, load_default_registry


class TestDefaultCatalog:
    def test_loads(self):
        registry = load_default_registry()
        assert len(registry.achievements) == len(ACHIEVEMENT_SEED_DATA) == 111
        assert len(registry.skill_nodes) == len(SKILL_NODE_SEED_DATA) == 66

    def test_cached(self):
        assert load_default_registry() is load_default_registry()

    def test_every_category_used(self):
        registry = load_default_registry()
        for category in Category:
            assert registry.by_category(category), category

    def test_every_track_has_a_root(self):
        registry = load_default_registry()
        for track in Track:
            nodes = [n for n in registry.skill_nodes if n.track == track]
            assert any(not n.prerequisites for n in nodes), track

    def test_custom_tags_all_recognized(self):
        registry = load_default_registry()
        for achievement in registry.achievements:
            if isinstance(achievement.trigger, CustomTrigger):
                assert achievement.trigger.tag is not CustomTag.UNRECOGNIZED, achievement.id

    def test_secrets_live_in_secret_category(self):
        registry = load_default_registry()
        assert all(a.category is Category.SECRET for a in registry.achievements if a.secret)
