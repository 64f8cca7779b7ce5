# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Lint pass orchestration.

A pass builds the intermittent-source catalog once, instantiates the
built-in rules with that catalog injected, and runs every enabled rule in
ruleset order against a single ``RunnerDocument``. Findings therefore come
out grouped by rule, and in document order within a rule.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from alertlint.constants import DOCUMENT_SUFFIXES, NRQL_ALERT_CONDITION_RESOURCE
from alertlint.models.model_config_document import ModelConfigDocument
from alertlint.models.model_expression import LiteralScalar
from alertlint.models.model_lint_result import ModelLintMetrics, ModelLintResult
from alertlint.models.model_ruleset_config import ModelRulesetConfig
from alertlint.rules.registry import build_ruleset
from alertlint.runtime.loader_document import (
    load_document,
    load_document_if_recognized,
)
from alertlint.runtime.runner_document import RunnerDocument

logger = logging.getLogger(__name__)


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def discover_document_files(targets: Sequence[str]) -> list[Path]:
    """Expand targets into configuration document paths.

    Directories are scanned recursively for ``.json``, ``.yaml`` and
    ``.yml`` files; hidden files and anything under a hidden directory are
    skipped. File targets are taken as given when their suffix matches.

    Args:
        targets: File or directory paths.

    Returns:
        Document paths, deduplicated by canonical path and sorted.

    Raises:
        FileNotFoundError: If a target does not exist.
    """
    files: set[Path] = set()

    for target in targets:
        target_path = Path(target)
        if not target_path.exists():
            raise FileNotFoundError(f"Target does not exist: '{target}'")

        if target_path.is_file():
            if target_path.suffix.lower() in DOCUMENT_SUFFIXES:
                files.add(target_path.resolve())
            continue

        for candidate in target_path.rglob("*"):
            if candidate.suffix.lower() not in DOCUMENT_SUFFIXES:
                continue
            if _is_hidden(candidate, target_path):
                continue
            try:
                canonical = candidate.resolve()
                if canonical.is_file():
                    files.add(canonical)
            except (OSError, RuntimeError):
                # Broken or circular symlinks
                continue

    return sorted(files)


def load_target_documents(targets: Sequence[str]) -> list[ModelConfigDocument]:
    """Discover and load the documents named by CLI targets.

    Files named directly are loaded strictly: anything that is not a valid
    document is an error. Files found by scanning a directory are skipped
    when they are not configuration documents, so unrelated YAML or JSON
    next to the documents does not abort the pass.

    Args:
        targets: File or directory paths.

    Returns:
        Loaded documents in discovery order.

    Raises:
        FileNotFoundError: If a target does not exist.
        ConfigurationAccessError: If a named file, or a scanned file that
            is recognized as a document, cannot be loaded.
    """
    named = {
        Path(target).resolve() for target in targets if Path(target).is_file()
    }
    documents: list[ModelConfigDocument] = []
    for path in discover_document_files(targets):
        if path in named:
            documents.append(load_document(path))
            continue
        document = load_document_if_recognized(path)
        if document is not None:
            documents.append(document)
    return documents


def run_lint(
    documents: Sequence[ModelConfigDocument],
    config: ModelRulesetConfig | None = None,
    *,
    only: Iterable[str] | None = None,
    variables: Mapping[str, LiteralScalar] | None = None,
    collect_metrics: bool = False,
) -> ModelLintResult:
    """Run the built-in ruleset over a set of configuration documents.

    Variable values are layered: document variables first, then
    ``config.variables``, then ``variables``.

    Args:
        documents: Parsed documents forming one module, in file order.
        config: Ruleset configuration. Defaults to the built-in defaults.
        only: Run exactly these rules, ignoring configured enabled flags.
        variables: Variable values overriding everything else.
        collect_metrics: If True, attach timing and per-rule counts.

    Returns:
        The lint result with findings in emission order.

    Raises:
        RulesetConfigError: If ``only`` names an unknown rule.
        PatternCatalogError: If the configured catalog cannot be compiled.
        ConfigurationAccessError: If the runner cannot serve a document.
        ExpressionEvaluationError: If an expression is malformed.
    """
    start_time = time.perf_counter() if collect_metrics else 0

    if config is None:
        config = ModelRulesetConfig()

    rules = build_ruleset(config, only=only)

    merged_variables: dict[str, LiteralScalar] = dict(config.variables)
    merged_variables.update(variables or {})
    runner = RunnerDocument(documents, variables=merged_variables)

    rules_run: list[str] = []
    for rule in rules:
        if not rule.enabled:
            logger.debug("Skipping disabled rule %s", rule.name)
            continue
        logger.debug("Running rule %s", rule.name)
        rule.check(runner)
        rules_run.append(rule.name)

    findings = runner.issues
    declarations_checked = len(runner.resources_of_type(NRQL_ALERT_CONDITION_RESOURCE))

    metrics = None
    if collect_metrics:
        findings_by_rule: dict[str, int] = {}
        for finding in findings:
            findings_by_rule[finding.rule_id] = (
                findings_by_rule.get(finding.rule_id, 0) + 1
            )
        duration_ms = int((time.perf_counter() - start_time) * 1000)
        metrics = ModelLintMetrics(
            duration_ms=duration_ms,
            rules_run=rules_run,
            findings_by_rule=findings_by_rule,
        )

    logger.info(
        "Lint pass finished: %d finding(s) in %d document(s), %d declaration(s) checked",
        len(findings),
        len(documents),
        declarations_checked,
    )

    return ModelLintResult(
        findings=findings,
        documents_scanned=len(documents),
        declarations_checked=declarations_checked,
        metrics=metrics,
    )


__all__ = ["discover_document_files", "load_target_documents", "run_lint"]
