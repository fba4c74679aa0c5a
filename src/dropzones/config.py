"""Centralised application configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from collections import Counter
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

# src/dropzones/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class ContainerConfig(BaseModel):
    """One drop zone and the items it starts with."""

    key: str = Field(min_length=1)
    title: str
    items: list[str] = []


def _default_containers() -> list[ContainerConfig]:
    return [
        ContainerConfig(
            key="left", title="Left List", items=["Item 1", "Item 2", "Item 3"]
        ),
        ContainerConfig(key="right", title="Right List", items=["Item 4", "Item 5"]),
    ]


class BoardConfig(BaseModel):
    """Drag-and-drop board layout and drop policy."""

    allow_same_container_drop: bool = True
    containers: list[ContainerConfig] = Field(default_factory=_default_containers)

    @model_validator(mode="after")
    def containers_form_a_partition(self) -> BoardConfig:
        if not self.containers:
            msg = "BOARD__CONTAINERS must define at least one container"
            raise ValueError(msg)

        duplicate_keys = _duplicates(c.key for c in self.containers)
        if duplicate_keys:
            msg = f"Container keys must be unique, duplicated: {duplicate_keys}"
            raise ValueError(msg)

        duplicate_items = _duplicates(
            item for container in self.containers for item in container.items
        )
        if duplicate_items:
            msg = (
                "Items must appear in exactly one container, "
                f"duplicated: {duplicate_items}"
            )
            raise ValueError(msg)
        return self


class AppConfig(BaseModel):
    """Application runtime configuration."""

    port: int = 8080
    storage_secret: SecretStr = SecretStr("dev-secret-change-me")
    log_dir: Path = Path("logs")
    reload: bool = True


def _duplicates(values: Iterable[str]) -> list[str]:
    return sorted(value for value, count in Counter(values).items() if count > 1)


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Application settings with automatic .env loading and type validation.

    Environment variables use double-underscore delimiter for nesting:
    ``BOARD__ALLOW_SAME_CONTAINER_DROP``, ``APP__PORT``, etc. Complex
    values such as ``BOARD__CONTAINERS`` are parsed as JSON.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    board: BoardConfig = BoardConfig()
    app: AppConfig = AppConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()

    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.info("Settings: no .env file found, using env vars and defaults")

    return settings
