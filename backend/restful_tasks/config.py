"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Store URL and key come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single read-only instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Env names SUPABASE_URL / SUPABASE_ANON_KEY match what the hosting platform injects
    - Empty-string defaults: a missing store config surfaces as a store error per request
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    supabase_url: str = ""
    supabase_anon_key: str = ""
    tasks_table: str = "tasks"
    # None = wait for the store as long as it takes
    store_timeout_seconds: float | None = None

    @field_validator("supabase_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Query URLs are built as f"{url}/rest/v1/{table}"."""
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # Routing
    tasks_route_prefix: str = "/tasks"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
