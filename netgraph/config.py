"""Settings for the graph core — pydantic-settings backed.

Precedence (highest → lowest): init kwargs, ``NETGRAPH_*`` environment
variables, ``.env``, defaults.
"""

from __future__ import annotations

import logging
import os
import tempfile
from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    format: str = "%(asctime)-20s %(name)-30s %(levelname)-8s: %(message)s"


def _default_output_directory() -> str:
    return tempfile.gettempdir() + os.sep


class NetGraphSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NETGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    edge_probability: float = Field(
        0.001,
        ge=0.0,
        le=1.0,
        description="Probability of adding an edge between two orphan nodes per repair pass.",
    )
    output_directory: str = Field(
        default_factory=_default_output_directory,
        description="Directory prefix that persisted graph file names are appended to.",
    )
    max_repair_passes: int | None = Field(
        default=None,
        gt=0,
        description="Upper bound on reachability repair passes (None = unbounded).",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the default randomness supplier (None = nondeterministic).",
    )
    max_action_cost: float = Field(
        1.0,
        gt=0.0,
        description="Upper bound (exclusive) of costs drawn for repair edges.",
    )

    logging: LoggingSettings = LoggingSettings()


@lru_cache(maxsize=1)
def _get_settings_cached(overrides: tuple[tuple[str, Any], ...]) -> NetGraphSettings:
    return NetGraphSettings(**dict(overrides))


def get_settings(**overrides: Any) -> NetGraphSettings:
    """Cached accessor; ``overrides`` take precedence over the environment."""
    return _get_settings_cached(tuple(sorted(overrides.items())))


def clear_settings_cache() -> None:
    _get_settings_cached.cache_clear()


def configure_logging(settings: NetGraphSettings | None = None) -> None:
    """Apply the logging section to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.logging.level, format=settings.logging.format)
