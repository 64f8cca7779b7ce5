# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""alertlint - static checks for New Relic NRQL alert conditions.

Flags alert conditions whose queries target intermittently reported
telemetry but whose gap-filling or signal-loss settings would make the
alert misfire.

Usage::

    from alertlint import load_documents, run_lint

    result = run_lint(load_documents(paths))
    for finding in result.findings:
        print(finding)
"""

from alertlint.catalog import PatternCatalog
from alertlint.constants import RULESET_NAME, RULESET_VERSION
from alertlint.exceptions import (
    AlertLintError,
    ConfigurationAccessError,
    ExpressionEvaluationError,
    PatternCatalogError,
    RulesetConfigError,
)
from alertlint.models import ModelFinding, ModelLintResult, ModelRulesetConfig
from alertlint.rules import BUILTIN_RULES, build_ruleset
from alertlint.runtime import (
    RunnerDocument,
    discover_document_files,
    load_document,
    load_documents,
    load_ruleset_config,
    load_target_documents,
    run_lint,
)

__version__ = RULESET_VERSION

__all__ = [
    "BUILTIN_RULES",
    "RULESET_NAME",
    "AlertLintError",
    "ConfigurationAccessError",
    "ExpressionEvaluationError",
    "ModelFinding",
    "ModelLintResult",
    "ModelRulesetConfig",
    "PatternCatalog",
    "PatternCatalogError",
    "RulesetConfigError",
    "RunnerDocument",
    "__version__",
    "build_ruleset",
    "discover_document_files",
    "load_document",
    "load_documents",
    "load_ruleset_config",
    "load_target_documents",
    "run_lint",
]
