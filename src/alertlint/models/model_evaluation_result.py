# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Evaluation results: an expression either resolved or it did not.

``Unresolved`` is an expected outcome, not an error. Call sites consume the
result with a ``match`` statement::

    match runner.evaluate_expr(attribute.expr):
        case Resolved(value=value):
            ...
        case Unresolved():
            return None
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Resolved:
    """An expression that evaluated to a concrete string.

    Attributes:
        value: The evaluated value, converted to a string.
    """

    value: str


@dataclass(frozen=True)
class Unresolved:
    """An expression whose value cannot be known statically.

    Attributes:
        reason: Why the value is unknown (for debug logging only).
    """

    reason: str = ""


EvaluationResult = Resolved | Unresolved


__all__ = ["EvaluationResult", "Resolved", "Unresolved"]
