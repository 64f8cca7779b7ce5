# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
alertlint CLI.

Checks parsed configuration documents for New Relic NRQL alert conditions
that query intermittent data sources without a suitable gap-filling or
signal-loss policy.

The ruleset configuration (default .alertlint.yaml, or ALERTLINT_CONFIG_PATH)
is used automatically when present. Pass --config to require a specific file.

Usage:
    python -m alertlint
    python -m alertlint build/documents
    python -m alertlint --config ci/alertlint.yaml
    python -m alertlint --only newrelic_nrql_gap_filling
    python -m alertlint --var fill_option=static
    python -m alertlint --format json --metrics
    python -m alertlint --list-rules

Exit Codes:
    0 - Success: No findings
    1 - Findings: One or more alert conditions violate a rule
    2 - Error: CLI usage, configuration or document error
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from alertlint.constants import RULESET_NAME, RULESET_VERSION
from alertlint.exceptions import AlertLintError
from alertlint.models.model_finding import ModelFinding
from alertlint.models.model_lint_result import ModelLintMetrics, ModelLintResult
from alertlint.models.model_ruleset_config import ModelRulesetConfig
from alertlint.rules.registry import build_ruleset
from alertlint.runtime.lint import load_target_documents, run_lint
from alertlint.runtime.loader_config import load_ruleset_config
from alertlint.runtime.settings import AlertLintSettings

logger = logging.getLogger(__name__)

# JSON output indentation (spaces)
JSON_INDENT_SPACES = 2

DEFAULT_TARGETS: tuple[str, ...] = (".",)


def _parse_variable_assignments(assignments: list[str]) -> dict[str, str]:
    """Parse repeated ``--var NAME=VALUE`` flags.

    Raises:
        ValueError: If an assignment has no ``=`` or an empty name.
    """
    variables: dict[str, str] = {}
    for assignment in assignments:
        name, sep, value = assignment.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"--var expects NAME=VALUE, got: {assignment!r}")
        variables[name.strip()] = value
    return variables


def _format_finding_line(finding: ModelFinding) -> str:
    return f"  {finding}"


def _format_metrics_text(metrics: ModelLintMetrics) -> str:
    """Format metrics as human-readable text.

    Args:
        metrics: The lint metrics to format.

    Returns:
        Formatted metrics text block.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("Metrics:")
    duration_sec = metrics.duration_ms / 1000.0
    lines.append(f"  Duration: {duration_sec:.2f}s")
    lines.append(f"  Rules run: {', '.join(metrics.rules_run) or '(none)'}")
    if metrics.findings_by_rule:
        lines.append("  By rule:")
        for rule_id in sorted(metrics.findings_by_rule):
            lines.append(f"    {rule_id}: {metrics.findings_by_rule[rule_id]}")
    return "\n".join(lines)


def _format_text_output(result: ModelLintResult, show_metrics: bool = False) -> str:
    """Format a lint result as human-readable text.

    Findings are grouped by file::

        alerts.tf:
          alerts.tf:9,13-78: [newrelic_nrql_gap_filling] `fill_option` must be set ...

        Summary: 1 finding(s) in 1 file(s) (3 documents scanned, 2 declarations checked)

    Args:
        result: The lint result to format.
        show_metrics: If True, include the metrics section.

    Returns:
        Formatted text output.
    """
    lines: list[str] = []
    scanned = (
        f"{result.documents_scanned} documents scanned, "
        f"{result.declarations_checked} declarations checked"
    )

    if result.is_clean:
        lines.append(f"No findings. ({scanned})")
    else:
        findings_by_file: dict[str, list[ModelFinding]] = {}
        for finding in result.findings:
            findings_by_file.setdefault(finding.range.filename, []).append(finding)

        for filename, file_findings in sorted(findings_by_file.items()):
            lines.append(f"{filename}:")
            for finding in sorted(
                file_findings,
                key=lambda f: (f.range.start.line, f.range.start.column),
            ):
                lines.append(_format_finding_line(finding))

        lines.append("")
        lines.append(
            f"Summary: {len(result.findings)} finding(s) in "
            f"{len(findings_by_file)} file(s) ({scanned})"
        )

    if show_metrics and result.metrics is not None:
        lines.append(_format_metrics_text(result.metrics))

    return "\n".join(lines)


def _format_json_output(result: ModelLintResult, show_metrics: bool = False) -> str:
    """Format a lint result as JSON for CI/CD integration.

    Returns:
        JSON string with structure:
        {
            "findings": [...],
            "documents_scanned": N,
            "declarations_checked": N,
            "is_clean": bool,
            "metrics": {...}  // Only if show_metrics is True
        }
    """
    output: dict[str, Any] = {
        "findings": [
            {
                "rule": finding.rule_id,
                "severity": finding.severity.value,
                "message": finding.message,
                "range": str(finding.range),
                "link": finding.link,
            }
            for finding in result.findings
        ],
        "documents_scanned": result.documents_scanned,
        "declarations_checked": result.declarations_checked,
        "is_clean": result.is_clean,
    }

    if show_metrics and result.metrics is not None:
        output["metrics"] = {
            "duration_ms": result.metrics.duration_ms,
            "rules_run": result.metrics.rules_run,
            "findings_by_rule": result.metrics.findings_by_rule,
        }

    return json.dumps(output, indent=JSON_INDENT_SPACES)


def _format_rule_list(config: ModelRulesetConfig, as_json: bool) -> str:
    rules = build_ruleset(config)
    if as_json:
        return json.dumps(
            [
                {
                    "name": rule.name,
                    "severity": rule.severity.value,
                    "enabled": rule.enabled,
                    "link": rule.link,
                }
                for rule in rules
            ],
            indent=JSON_INDENT_SPACES,
        )
    lines = [f"{RULESET_NAME} {RULESET_VERSION}"]
    for rule in rules:
        state = "enabled" if rule.enabled else "disabled"
        lines.append(f"  {rule.name} [{rule.severity.value}] ({state}) {rule.link}")
    return "\n".join(lines)


def _print_error(message: str, error_type: str, as_json: bool) -> None:
    if as_json:
        print(
            json.dumps(
                {"error": message, "error_type": error_type},
                indent=JSON_INDENT_SPACES,
            )
        )
    else:
        print(message, file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="alertlint - check NRQL alert conditions on intermittent data sources",
        prog="python -m alertlint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Rules:
  newrelic_nrql_gap_filling   fill_option / fill_value for intermittent sources
  newrelic_nrql_signal_loss   signal-loss expiration for intermittent sources

Examples:
  %(prog)s                                   # Lint documents under the current directory
  %(prog)s build/documents                  # Lint a specific directory
  %(prog)s -c ci/alertlint.yaml             # Use a specific configuration file
  %(prog)s --only newrelic_nrql_signal_loss # Run one rule
  %(prog)s --var app_name=Bauhaus           # Provide a variable value
  %(prog)s --format json --metrics          # JSON output with metrics
""",
    )

    parser.add_argument(
        "targets",
        nargs="*",
        default=None,
        help="Document files or directories to lint (default: current directory)",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="PATH",
        help="Ruleset configuration file (default: ALERTLINT_CONFIG_PATH or .alertlint.yaml)",
    )

    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--only",
        action="append",
        default=None,
        metavar="RULE",
        help="Run only this rule (repeatable)",
    )

    parser.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Set an input variable value (repeatable)",
    )

    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="List built-in rules and exit",
    )

    parser.add_argument(
        "--metrics",
        "-m",
        action="store_true",
        help="Include detailed metrics (timing, rules run, findings by rule)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"{RULESET_NAME} {RULESET_VERSION}",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """CLI entry point for alertlint.

    Args:
        args: Command line arguments (uses sys.argv if None).

    Returns:
        Exit code following Unix conventions:
            0 - Success: No findings
            1 - Findings: One or more alert conditions violate a rule
            2 - Error: CLI usage, configuration or document error
    """
    parser = _build_parser()
    parsed_args = parser.parse_args(args)
    as_json = parsed_args.format == "json"

    try:
        settings = AlertLintSettings()
    except ValidationError as e:
        _print_error(f"Error: invalid environment settings: {e}", "settings_error", as_json)
        return 2

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        variables = _parse_variable_assignments(parsed_args.var)

        if parsed_args.config is not None:
            config = load_ruleset_config(parsed_args.config, required=True)
        else:
            config = load_ruleset_config(
                Path(settings.config_path),
                required=not settings.config_path_is_default,
            )

        if parsed_args.list_rules:
            print(_format_rule_list(config, as_json))
            return 0

        targets = parsed_args.targets if parsed_args.targets else list(DEFAULT_TARGETS)
        documents = load_target_documents(targets)
        logger.debug("Loaded %d document(s) from %s", len(documents), targets)

        result = run_lint(
            documents,
            config,
            only=parsed_args.only,
            variables=variables,
            collect_metrics=parsed_args.metrics,
        )

        if as_json:
            output = _format_json_output(result, show_metrics=parsed_args.metrics)
        else:
            output = _format_text_output(result, show_metrics=parsed_args.metrics)
        print(output)

        if result.is_clean:
            return 0
        else:
            return 1

    except AlertLintError as e:
        _print_error(f"Error [{e.code}]: {e.message}", "alertlint_error", as_json)
        return 2

    except (FileNotFoundError, ValueError) as e:
        _print_error(f"Error: {e}", "usage_error", as_json)
        return 2

    except Exception as e:
        logger.exception("Unexpected failure")
        _print_error(f"Unexpected error: {e}", "unexpected_error", as_json)
        return 2


if __name__ == "__main__":
    sys.exit(main())
