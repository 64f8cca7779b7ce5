# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Rules for NRQL alert conditions.

Rules:
    - newrelic_nrql_gap_filling: fill policy for intermittent sources
    - newrelic_nrql_signal_loss: signal-loss expiration for intermittent sources
"""

from alertlint.rules.helper_intermittent_query import (
    MISSING_NRQL_BLOCK_MESSAGE,
    MISSING_QUERY_MESSAGE,
    build_nrql_condition_schema,
    find_intermittent_query,
)
from alertlint.rules.registry import BUILTIN_RULE_IDS, BUILTIN_RULES, build_ruleset
from alertlint.rules.rule_base import BaseAlertRule
from alertlint.rules.rule_nrql_gap_filling import RuleNrqlGapFilling
from alertlint.rules.rule_nrql_signal_loss import (
    REQUIRED_SIGNAL_LOSS_ATTRIBUTES,
    RuleNrqlSignalLoss,
)

__all__ = [
    "BUILTIN_RULES",
    "BUILTIN_RULE_IDS",
    "MISSING_NRQL_BLOCK_MESSAGE",
    "MISSING_QUERY_MESSAGE",
    "REQUIRED_SIGNAL_LOSS_ATTRIBUTES",
    "BaseAlertRule",
    "RuleNrqlGapFilling",
    "RuleNrqlSignalLoss",
    "build_nrql_condition_schema",
    "build_ruleset",
    "find_intermittent_query",
]
