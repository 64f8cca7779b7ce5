# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Finding assertions for tests."""

from __future__ import annotations

from collections.abc import Sequence

from alertlint.models.model_finding import ModelFinding

# (rule_id, message, range text)
ExpectedFinding = tuple[str, str, str]


def assert_findings(
    actual: Sequence[ModelFinding],
    expected: Sequence[ExpectedFinding],
) -> None:
    """Assert findings match exactly, in order, by rule, message and range.

    Raises:
        AssertionError: With both lists rendered side by side on mismatch.
    """
    actual_tuples = [
        (finding.rule_id, finding.message, str(finding.range)) for finding in actual
    ]
    expected_tuples = list(expected)
    if actual_tuples != expected_tuples:
        rendered_actual = "\n".join(f"  {item}" for item in actual_tuples) or "  (none)"
        rendered_expected = (
            "\n".join(f"  {item}" for item in expected_tuples) or "  (none)"
        )
        raise AssertionError(
            f"Findings do not match.\nExpected:\n{rendered_expected}\n"
            f"Actual:\n{rendered_actual}"
        )


__all__ = ["ExpectedFinding", "assert_findings"]
