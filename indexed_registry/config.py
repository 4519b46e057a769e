"""Registry Configuration — environment-driven process settings via pydantic-settings.

Invariants:
    - Settings are process-level (logging); per-collection view config lives in RegistryConfig
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - INDEXED_REGISTRY_ prefix: the library runs inside host applications with their own env
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Process settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="INDEXED_REGISTRY_", env_file=".env",
        case_sensitive=False, extra="ignore",
    )

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    # Emit a DEBUG line per invalidation (noisy under bulk mutation)
    log_invalidations: bool = False

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
