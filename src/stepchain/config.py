"""Runtime settings for stepchain.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class StepchainSettings(BaseSettings):
    """Settings for logging around workflows.

    Environment variables:
    - LOG_LEVEL               (optional)
    - STEPCHAIN_LOG_FORMAT    (optional, `json` or `plain`)
    - STEPCHAIN_TRACE_STEPS   (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `StepchainSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )
    log_format: Literal["json", "plain"] = Field(
        default="json",
        validation_alias="STEPCHAIN_LOG_FORMAT",
        description="Log line format",
    )
    trace_steps: bool = Field(
        default=False,
        validation_alias="STEPCHAIN_TRACE_STEPS",
        description="Log every step entry and short-circuit at DEBUG",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level
