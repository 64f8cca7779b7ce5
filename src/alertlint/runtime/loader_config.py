# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Ruleset configuration loading.

Validates ``.alertlint.yaml`` against ``ModelRulesetConfig`` and then checks
what the schema cannot know on its own: that every configured rule id names
a built-in rule. Problems are collected and raised together as one
``RulesetConfigError`` so users can fix the file in a single pass.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from alertlint.exceptions import RulesetConfigError
from alertlint.models.model_ruleset_config import ModelRulesetConfig
from alertlint.rules.registry import BUILTIN_RULE_IDS
from alertlint.runtime.loader_document import (
    format_validation_errors,
    read_yaml_mapping,
)

logger = logging.getLogger(__name__)


def validate_ruleset_config(data: dict[str, Any]) -> ModelRulesetConfig:
    """Validate an already-parsed configuration mapping.

    Args:
        data: Configuration data as a Python dictionary.

    Returns:
        The validated configuration.

    Raises:
        RulesetConfigError: With one ``field: message`` entry per problem.
    """
    errors: list[str] = []

    rules = data.get("rules")
    if isinstance(rules, dict):
        for rule_id in rules:
            if rule_id not in BUILTIN_RULE_IDS:
                errors.append(
                    f"rules.{rule_id}: Unknown rule id {rule_id!r}. "
                    f"Valid rule ids are: {list(BUILTIN_RULE_IDS)}"
                )

    config: ModelRulesetConfig | None = None
    try:
        config = ModelRulesetConfig.model_validate(data)
    except ValidationError as exc:
        errors.extend(format_validation_errors(exc))

    if errors or config is None:
        raise RulesetConfigError(
            f"Invalid ruleset configuration: {'; '.join(errors)}",
            errors=errors,
        )
    return config


def load_ruleset_config(path: Path, *, required: bool = False) -> ModelRulesetConfig:
    """Load the ruleset configuration file.

    Args:
        path: Path to the YAML configuration file.
        required: When False, a missing file yields the built-in defaults.

    Returns:
        The validated configuration.

    Raises:
        RulesetConfigError: If the file is required but missing, unreadable,
            not valid YAML, or fails validation.
    """
    if not path.exists():
        if required:
            raise RulesetConfigError(
                f"Configuration file not found: '{path}'",
                errors=[f"file: '{path}' does not exist"],
            )
        logger.debug("No configuration file at %s, using defaults", path)
        return ModelRulesetConfig()

    try:
        data = read_yaml_mapping(path)
    except OSError as e:
        raise RulesetConfigError(
            f"Cannot read configuration file '{path}': {e}",
            errors=[f"file: {e}"],
        ) from e
    except yaml.YAMLError as e:
        raise RulesetConfigError(
            f"Invalid YAML in configuration file '{path}': {e}",
            errors=[f"yaml: {e}"],
        ) from e
    except TypeError as e:
        raise RulesetConfigError(
            f"Invalid configuration file '{path}': {e}",
            errors=[f"root: {e}"],
        ) from e

    config = validate_ruleset_config(data or {})
    logger.debug("Loaded configuration from %s", path)
    return config


__all__ = ["load_ruleset_config", "validate_ruleset_config"]
