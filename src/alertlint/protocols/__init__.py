"""Protocols for the services rules consume from their host.

Rules never parse configuration, evaluate expressions or format output
themselves. The host hands them an object implementing these protocols,
which keeps rules testable with in-memory fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from alertlint.models.model_block import ModelBlock
    from alertlint.models.model_body_schema import ModelBodySchema
    from alertlint.models.model_evaluation_result import EvaluationResult
    from alertlint.models.model_expression import ModelExpression
    from alertlint.models.model_source_range import ModelSourceRange
    from alertlint.rules.rule_base import BaseAlertRule


@runtime_checkable
class ProtocolConfigurationAccessor(Protocol):
    """Protocol for reading declarations and evaluating their expressions.

    Both methods may raise to signal a broken document or evaluator; such
    errors abort the pass. An expression that simply cannot be known
    statically is reported as ``Unresolved`` instead.
    """

    def get_resource_content(
        self,
        resource_type: str,
        schema: ModelBodySchema,
    ) -> list[ModelBlock]:
        """Return all resources of a type, trimmed to the schema, in document order."""
        ...

    def evaluate_expr(self, expr: ModelExpression) -> EvaluationResult:
        """Evaluate an expression to a string, or report it as unresolved."""
        ...


@runtime_checkable
class ProtocolIssueReporter(Protocol):
    """Protocol for recording findings."""

    def emit_issue(
        self,
        rule: BaseAlertRule,
        message: str,
        issue_range: ModelSourceRange,
    ) -> None:
        """Record one finding for a rule at a source range."""
        ...


@runtime_checkable
class ProtocolRuleRunner(ProtocolConfigurationAccessor, ProtocolIssueReporter, Protocol):
    """Everything a rule needs from its host during ``check``."""


__all__ = [
    "ProtocolConfigurationAccessor",
    "ProtocolIssueReporter",
    "ProtocolRuleRunner",
]
