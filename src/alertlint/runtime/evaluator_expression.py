# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Static expression evaluator.

Resolves what can be known before ``apply``:

- literals (numbers and booleans rendered the way Terraform converts them
  to strings: ``0.0`` -> ``"0"``, ``true`` -> ``"true"``);
- ``var.<name>`` and ``local.<name>`` with known, non-null values;
- templates whose every part resolves.

Everything else (resource attributes, data sources, module outputs,
``each``/``count``, nulls, unknown names) is ``Unresolved``. Only a
malformed reference raises.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from alertlint.enums.enum_expression_kind import EnumExpressionKind
from alertlint.exceptions import ExpressionEvaluationError
from alertlint.models.model_evaluation_result import (
    EvaluationResult,
    Resolved,
    Unresolved,
)
from alertlint.models.model_expression import LiteralScalar, ModelExpression

logger = logging.getLogger(__name__)

# Attribute step after a dot: name, legacy numeric index or splat
_ATTRIBUTE_STEP = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*|\d+|\*")
_ROOT_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")

VARIABLE_ROOT: str = "var"
LOCAL_ROOT: str = "local"


def render_scalar(value: LiteralScalar) -> str | None:
    """Convert a scalar to its string form, or None for null."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _index_end(traversal: str, start: int) -> int:
    """Return the offset just past the ``]`` closing the index at ``start``.

    Nested brackets and quoted keys (which may contain dots or brackets)
    are skipped over.

    Raises:
        ExpressionEvaluationError: If the index is empty or never closed.
    """
    depth = 0
    in_string = False
    pos = start
    while pos < len(traversal):
        char = traversal[pos]
        if in_string:
            if char == "\\":
                pos += 1
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                if pos == start + 1:
                    raise ExpressionEvaluationError(
                        f"Malformed reference: empty index in {traversal!r}"
                    )
                return pos + 1
        pos += 1
    raise ExpressionEvaluationError(
        f"Malformed reference: unclosed index in {traversal!r}"
    )


def split_traversal(traversal: str) -> list[str]:
    """Split a reference into its root name and following steps.

    ``local.queries[each.key].name`` becomes
    ``["local", "queries", '[each.key]', "name"]``. Index contents are kept
    verbatim and never evaluated.

    Raises:
        ExpressionEvaluationError: If the text is empty, has an empty or
            invalid step, or has unbalanced brackets.
    """
    root = _ROOT_NAME.match(traversal)
    if root is None:
        raise ExpressionEvaluationError(f"Malformed reference: {traversal!r}")

    steps = [root.group(0)]
    pos = root.end()
    while pos < len(traversal):
        char = traversal[pos]
        if char == ".":
            step = _ATTRIBUTE_STEP.match(traversal, pos + 1)
            if step is None:
                raise ExpressionEvaluationError(f"Malformed reference: {traversal!r}")
            steps.append(step.group(0))
            pos = step.end()
        elif char == "[":
            end = _index_end(traversal, pos)
            steps.append(traversal[pos:end])
            pos = end
        else:
            raise ExpressionEvaluationError(f"Malformed reference: {traversal!r}")
    return steps


class ExpressionEvaluator:
    """Evaluates expressions against known variable and local values.

    Usage::

        evaluator = ExpressionEvaluator(variables={"fill": "static"})
        match evaluator.evaluate(expr):
            case Resolved(value=value):
                ...
            case Unresolved(reason=reason):
                ...
    """

    def __init__(
        self,
        variables: Mapping[str, LiteralScalar] | None = None,
        locals_: Mapping[str, LiteralScalar] | None = None,
    ) -> None:
        """Initialize the evaluator.

        Args:
            variables: Values for ``var.<name>`` references.
            locals_: Values for ``local.<name>`` references.
        """
        self._scopes: dict[str, dict[str, LiteralScalar]] = {
            VARIABLE_ROOT: dict(variables or {}),
            LOCAL_ROOT: dict(locals_ or {}),
        }

    def evaluate(self, expr: ModelExpression) -> EvaluationResult:
        """Evaluate an expression to a string.

        Args:
            expr: The expression to evaluate.

        Returns:
            ``Resolved`` with the string value, or ``Unresolved``.

        Raises:
            ExpressionEvaluationError: If a reference is malformed.
        """
        match expr.kind:
            case EnumExpressionKind.LITERAL:
                return self._resolve_scalar(expr.value, "literal")
            case EnumExpressionKind.REFERENCE:
                return self._evaluate_reference(expr.traversal or "")
            case EnumExpressionKind.TEMPLATE:
                return self._evaluate_template(expr)

    def _resolve_scalar(self, value: LiteralScalar, source: str) -> EvaluationResult:
        rendered = render_scalar(value)
        if rendered is None:
            return Unresolved(reason=f"{source} is null")
        return Resolved(value=rendered)

    def _evaluate_reference(self, traversal: str) -> EvaluationResult:
        steps = split_traversal(traversal)

        root = steps[0]
        scope = self._scopes.get(root)
        if scope is None:
            return Unresolved(reason=f"{traversal} is only known after apply")
        if len(steps) != 2 or steps[1].startswith("["):
            return Unresolved(reason=f"{traversal} is not a plain {root} reference")

        name = steps[1]
        if name not in scope:
            return Unresolved(reason=f"{traversal} has no known value")
        return self._resolve_scalar(scope[name], traversal)

    def _evaluate_template(self, expr: ModelExpression) -> EvaluationResult:
        rendered: list[str] = []
        for part in expr.parts:
            match self.evaluate(part):
                case Resolved(value=value):
                    rendered.append(value)
                case Unresolved() as unresolved:
                    return unresolved
        return Resolved(value="".join(rendered))


__all__ = [
    "LOCAL_ROOT",
    "VARIABLE_ROOT",
    "ExpressionEvaluator",
    "render_scalar",
    "split_traversal",
]
