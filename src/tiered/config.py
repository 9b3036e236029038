"""Configuration for logging and instrumentation of tiered results.

All settings can be overridden via environment variables with the TIERED_
prefix. Example: TIERED_HARD_ERROR_LEVEL=critical, TIERED_LOG_SUCCESS=true
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def levelno(name: str) -> int:
    """Map a validated level name to its ``logging`` constant."""
    return logging.getLevelName(name.upper())


class TieredConfig(BaseSettings):
    """Settings shared by ``configure_logger`` and ``instrument``."""

    model_config = {"env_prefix": "TIERED_"}

    # Logging output
    log_level: str = Field(default="INFO", description="Root log level")
    rich_logging: bool = Field(default=True, description="Use rich console handler")

    # Instrumentation
    soft_error_level: str = Field(
        default="INFO", description="Level for Completed(SoftErr) results"
    )
    hard_error_level: str = Field(
        default="ERROR", description="Level for Failed results"
    )
    log_success: bool = Field(
        default=False, description="Also log Completed(Ok) results at DEBUG"
    )

    @field_validator("log_level", "soft_error_level", "hard_error_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.strip().upper()
        if name not in LEVEL_NAMES:
            raise ValueError(f"Unknown log level: {value!r}")
        return name

    @staticmethod
    def default() -> TieredConfig:
        """Create a configuration from defaults and the environment."""
        return TieredConfig()

    @staticmethod
    def with_overrides(**kwargs: object) -> TieredConfig:
        """Create a configuration with specific overrides."""
        return TieredConfig(**kwargs)  # type: ignore[arg-type]
