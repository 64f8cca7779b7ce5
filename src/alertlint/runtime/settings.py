# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Environment settings for the alertlint CLI."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from alertlint.constants import DEFAULT_CONFIG_PATH

_LOG_LEVELS: frozenset[str] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
)


class AlertLintSettings(BaseSettings):
    """Pydantic Settings for alertlint, loaded from environment.

    Command-line flags take precedence over these values.

    Environment variables:
        ALERTLINT_CONFIG_PATH: str (default ".alertlint.yaml")
        ALERTLINT_LOG_LEVEL: str (default "WARNING")
    """

    model_config = SettingsConfigDict(
        env_prefix="ALERTLINT_",
        extra="ignore",
    )

    config_path: str = Field(
        default=DEFAULT_CONFIG_PATH,
        min_length=1,
        description="Ruleset configuration file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(_LOG_LEVELS)}, got: {v!r}"
            )
        return level

    @property
    def config_path_is_default(self) -> bool:
        return self.config_path == DEFAULT_CONFIG_PATH


__all__ = ["AlertLintSettings"]
