"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The catalog file path is a setting handed to CatalogFile, never a module constant
    - get_settings() is cached (lru_cache): single instance per process
    - Every setting has a default so the service starts with no environment at all
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    data_file: Path = Path("books.json")
    create_missing_data_file: bool = True

    # Server
    host: str = "127.0.0.1"
    port: int = 3000

    # API
    cors_origins: list[str] = ["http://localhost:3000"]
    # Tracebacks in 500 bodies: debugging only
    expose_error_stack: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
