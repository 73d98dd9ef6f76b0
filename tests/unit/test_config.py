"""Settings and logging setup."""

import structlog

from progression.config import Settings, get_settings
from progression.logging import bind_account, setup_logging, unbind_account


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.key_prefix == "voidspace-progress"
        assert settings.featured_limit == 3
        assert settings.recent_timeline_limit == 10
        assert settings.streak_bonus_cap == 30

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("PROGRESSION_STORAGE_BACKEND", "redis")
        monkeypatch.setenv("PROGRESSION_FEATURED_LIMIT", "5")
        settings = Settings(_env_file=None)
        assert settings.storage_backend == "redis"
        assert settings.featured_limit == 5

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    def test_console_setup(self):
        setup_logging(Settings(_env_file=None, log_format="console", log_level="debug"))
        try:
            assert structlog.is_configured()
            structlog.get_logger("progression.test").info("configured", ok=True)
        finally:
            structlog.reset_defaults()

    def test_account_binding(self):
        bind_account("alice.near")
        assert structlog.contextvars.get_contextvars()["account_id"] == "alice.near"
        unbind_account()
        assert "account_id" not in structlog.contextvars.get_contextvars()
