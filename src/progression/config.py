"""Application settings via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from environment variables with PROGRESSION_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="PROGRESSION_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"

    # --- Storage ---
    storage_backend: str = "file"  # memory | file | redis
    storage_dir: str = ".progress"
    redis_url: str = "redis://localhost:6379/0"
    key_prefix: str = "voidspace-progress"

    # --- Progression rules ---
    featured_limit: int = 3
    recent_timeline_limit: int = 10
    streak_bonus_cap: int = 30  # days


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
