# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pydantic models for the ruleset configuration file.

Configuration YAML structure::

    version: "1.0"
    rules:
      newrelic_nrql_gap_filling:
        enabled: true
      newrelic_nrql_signal_loss:
        enabled: false
    intermittent_sources:
      - TransactionError
      - "transactionName = 'Controller/Rack/get'"
    variables:
      app_name: Bauhaus

Every key is optional; an empty file yields the built-in defaults.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from alertlint.constants import DEFAULT_INTERMITTENT_SOURCES
from alertlint.models.model_expression import LiteralScalar


class ModelRuleConfig(BaseModel):
    """Per-rule settings.

    Attributes:
        enabled: Whether the rule runs. None keeps the rule's default.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    enabled: bool | None = Field(
        default=None,
        description="Whether the rule runs (None keeps the rule default)",
    )


class ModelRulesetConfig(BaseModel):
    """Top-level ruleset configuration.

    Rule ids are checked against the built-in ruleset by the config loader,
    which knows the registry; this model only checks shape.

    Attributes:
        version: Configuration schema version (e.g. "1.0").
        rules: Per-rule settings keyed by rule id.
        intermittent_sources: Ordered intermittent-source catalog.
        variables: Input variable values, applied over document variables.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    version: str = Field(default="1.0", description="Configuration schema version")
    rules: dict[str, ModelRuleConfig] = Field(
        default_factory=dict,
        description="Per-rule settings keyed by rule id",
    )
    intermittent_sources: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INTERMITTENT_SOURCES),
        min_length=1,
        description="Ordered intermittent-source catalog",
    )
    variables: dict[str, LiteralScalar] = Field(
        default_factory=dict,
        description="Input variable values",
    )

    @field_validator("version")
    @classmethod
    def validate_version_format(cls, v: str) -> str:
        """Validate that version follows semver-ish format."""
        if not re.match(r"^\d+\.\d+(\.\d+)?$", v):
            raise ValueError(
                f"version must follow semver format (e.g., '1.0' or '1.0.0'), got: {v!r}"
            )
        return v

    @field_validator("intermittent_sources")
    @classmethod
    def validate_sources_not_blank(cls, v: list[str]) -> list[str]:
        """Validate that no catalog entry is empty or whitespace."""
        blank = [i for i, source in enumerate(v) if not source.strip()]
        if blank:
            raise ValueError(f"intermittent_sources entries must not be blank: {blank}")
        return v

    def is_rule_enabled(self, rule_id: str, default: bool) -> bool:
        """Return the configured enabled flag for a rule, or its default."""
        rule_config = self.rules.get(rule_id)
        if rule_config is None or rule_config.enabled is None:
            return default
        return rule_config.enabled


__all__ = ["ModelRuleConfig", "ModelRulesetConfig"]
