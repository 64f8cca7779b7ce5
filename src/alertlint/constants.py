# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Shared Constants for alertlint.

Names of the resources, blocks and attributes the rules inspect, plus the
built-in intermittent-source catalog. Rules import these instead of
repeating string literals.

Usage:
    from alertlint.constants import NRQL_ALERT_CONDITION_RESOURCE

    resources = runner.get_resource_content(NRQL_ALERT_CONDITION_RESOURCE, schema)
"""

# =============================================================================
# Ruleset Identity
# =============================================================================

RULESET_NAME: str = "alertlint"
RULESET_VERSION: str = "0.1.0"

RULE_DOCS_PATH: str = "docs/rules"
"""Relative directory holding one markdown page per rule."""

# =============================================================================
# Resource Shape
# =============================================================================

RESOURCE_BLOCK_TYPE: str = "resource"

NRQL_ALERT_CONDITION_RESOURCE: str = "newrelic_nrql_alert_condition"
NRQL_BLOCK_TYPE: str = "nrql"
NRQL_QUERY_ATTRIBUTE: str = "query"

FILL_OPTION_ATTRIBUTE: str = "fill_option"
FILL_VALUE_ATTRIBUTE: str = "fill_value"

IGNORE_ON_EXPECTED_TERMINATION_ATTRIBUTE: str = "ignore_on_expected_termination"
CLOSE_VIOLATIONS_ON_EXPIRATION_ATTRIBUTE: str = "close_violations_on_expiration"

# =============================================================================
# Fill Option Literals
# =============================================================================

FILL_OPTION_NONE: str = "none"
FILL_OPTION_STATIC: str = "static"
FILL_OPTION_LAST_VALUE: str = "last_value"

# =============================================================================
# Intermittent Sources
# =============================================================================

DEFAULT_INTERMITTENT_SOURCES: tuple[str, ...] = (
    "TransactionError",
    "transactionName = 'Controller/Rack/get'",
)
"""
Query fragments that identify telemetry reported sporadically.

Order matters: when two entries match at the same position of a query, the
earlier entry wins.
"""

# =============================================================================
# Files
# =============================================================================

DEFAULT_CONFIG_PATH: str = ".alertlint.yaml"

DOCUMENT_SUFFIXES: frozenset[str] = frozenset({".json", ".yaml", ".yml"})

DOCUMENT_KEYS: frozenset[str] = frozenset({"filename", "variables", "locals", "resources"})
"""Top-level keys of a configuration document; files with other keys are not documents."""
