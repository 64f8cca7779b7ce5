# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Built-in ruleset registry."""

from __future__ import annotations

from collections.abc import Iterable

from alertlint.catalog.pattern_catalog import PatternCatalog
from alertlint.exceptions import RulesetConfigError
from alertlint.models.model_ruleset_config import ModelRulesetConfig
from alertlint.rules.rule_base import BaseAlertRule
from alertlint.rules.rule_nrql_gap_filling import RuleNrqlGapFilling
from alertlint.rules.rule_nrql_signal_loss import RuleNrqlSignalLoss

# Execution order of a pass
BUILTIN_RULES: tuple[type[BaseAlertRule], ...] = (
    RuleNrqlGapFilling,
    RuleNrqlSignalLoss,
)

BUILTIN_RULE_IDS: tuple[str, ...] = tuple(rule.name for rule in BUILTIN_RULES)


def build_ruleset(
    config: ModelRulesetConfig,
    catalog: PatternCatalog | None = None,
    *,
    only: Iterable[str] | None = None,
) -> list[BaseAlertRule]:
    """Instantiate every built-in rule with one shared catalog.

    Args:
        config: Ruleset configuration (enabled flags, catalog entries).
        catalog: Pre-built catalog; built from ``config`` when None.
        only: When given, exactly these rules are enabled, whatever the
            configuration says.

    Returns:
        All built-in rules in execution order, each with its enabled flag set.

    Raises:
        RulesetConfigError: If ``only`` names a rule that does not exist.
        PatternCatalogError: If the configured catalog cannot be compiled.
    """
    selected: set[str] | None = None
    if only is not None:
        selected = set(only)
        unknown = sorted(selected.difference(BUILTIN_RULE_IDS))
        if unknown:
            raise RulesetConfigError(
                f"Unknown rule ids {unknown}. Valid rule ids are: {list(BUILTIN_RULE_IDS)}",
                errors=[f"only: unknown rule id {rule_id!r}" for rule_id in unknown],
            )

    if catalog is None:
        catalog = PatternCatalog(config.intermittent_sources)

    rules: list[BaseAlertRule] = []
    for rule_cls in BUILTIN_RULES:
        if selected is not None:
            enabled = rule_cls.name in selected
        else:
            enabled = config.is_rule_enabled(rule_cls.name, rule_cls.enabled_by_default)
        rules.append(rule_cls(catalog, enabled=enabled))
    return rules


__all__ = ["BUILTIN_RULES", "BUILTIN_RULE_IDS", "build_ruleset"]
