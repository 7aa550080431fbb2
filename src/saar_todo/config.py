"""Centralized configuration: Pydantic BaseSettings with TOML + dotenv sources.

Settings live in config.toml (looked up in the working directory). Environment
variables override it using ``__`` as the nested delimiter
(e.g. ``STORE__PATH=/tmp/todos.json``).

Priority (highest wins): init args > env vars > .env > config.toml

Usage::

    from saar_todo.config import get_settings

    s = get_settings()
    print(s.server.name)
    print(s.store.path)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

# ---------------------------------------------------------------------------
# Sub-models (each maps to a [section] in config.toml)
# ---------------------------------------------------------------------------


class _StrictModel(BaseModel):
    """Base for all config sub-models; rejects unknown keys so typos fail loudly."""

    model_config = {"extra": "forbid"}


class ServerConfig(_StrictModel):
    name: str = "saar-todo"
    version: str = "0.1.0"


class StoreConfig(_StrictModel):
    # validate_default so the "~" in the default is expanded as well
    path: Path = Field(default=Path("~/.saar-todo/todos.json"), validate_default=True)
    seed_examples: bool = False  # seed two example todos instead of starting empty

    @field_validator("path")
    @classmethod
    def expand_home(cls, v: Path) -> Path:
        return v.expanduser()


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(_StrictModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return v


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        toml_file="config.toml",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    server: ServerConfig = ServerConfig()
    store: StoreConfig = StoreConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority: init > env vars > .env > config.toml > file secrets."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


# ---------------------------------------------------------------------------
# Singleton
# ---------------------------------------------------------------------------

_settings: Settings | None = None


def get_settings() -> Settings:
    """Lazy cached singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Clear the cached singleton (for tests)."""
    global _settings
    _settings = None
