# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""In-process host for rules.

``RunnerDocument`` serves parsed configuration documents to rules, evaluates
their expressions and collects the findings they emit. It implements
``ProtocolRuleRunner``, so rules cannot tell it apart from any other host.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from alertlint.models.model_block import ModelBlock
from alertlint.models.model_finding import ModelFinding
from alertlint.runtime.evaluator_expression import ExpressionEvaluator

if TYPE_CHECKING:
    from alertlint.models.model_body_schema import ModelBodySchema
    from alertlint.models.model_config_document import ModelConfigDocument
    from alertlint.models.model_evaluation_result import EvaluationResult
    from alertlint.models.model_expression import LiteralScalar, ModelExpression
    from alertlint.models.model_source_range import ModelSourceRange
    from alertlint.rules.rule_base import BaseAlertRule


def apply_body_schema(block: ModelBlock, schema: ModelBodySchema) -> ModelBlock:
    """Return a copy of a block holding only what the schema asks for.

    Attributes and nested blocks outside the schema are dropped. Requested
    parts the block does not have stay absent; nothing is invented.
    """
    attributes = {
        name: attribute
        for name, attribute in block.attributes.items()
        if name in schema.attributes
    }
    blocks: list[ModelBlock] = []
    for nested in block.blocks:
        nested_schema = schema.block_schema(nested.type)
        if nested_schema is not None:
            blocks.append(apply_body_schema(nested, nested_schema.body))
    return block.model_copy(update={"attributes": attributes, "blocks": blocks})


class RunnerDocument:
    """Rule host backed by in-memory configuration documents.

    Documents form one module: their variables and locals are merged in
    document order, then ``variables`` passed to the runner are applied on
    top.

    Usage::

        runner = RunnerDocument(documents, variables={"app_name": "Bauhaus"})
        rule.check(runner)
        for finding in runner.issues:
            print(finding)
    """

    def __init__(
        self,
        documents: Sequence[ModelConfigDocument],
        *,
        variables: Mapping[str, LiteralScalar] | None = None,
        evaluator: ExpressionEvaluator | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            documents: Parsed configuration documents, in file order.
            variables: Variable values that override document values.
            evaluator: Evaluator to use; built from the documents when None.
        """
        self._documents = list(documents)
        self._issues: list[ModelFinding] = []
        if evaluator is None:
            merged_variables: dict[str, LiteralScalar] = {}
            merged_locals: dict[str, LiteralScalar] = {}
            for document in self._documents:
                merged_variables.update(document.variables)
                merged_locals.update(document.locals)
            merged_variables.update(variables or {})
            evaluator = ExpressionEvaluator(merged_variables, merged_locals)
        self._evaluator = evaluator

    @property
    def documents(self) -> list[ModelConfigDocument]:
        return list(self._documents)

    @property
    def issues(self) -> list[ModelFinding]:
        """Findings emitted so far, in emission order."""
        return list(self._issues)

    def resources_of_type(self, resource_type: str) -> list[ModelBlock]:
        """Return every resource of a type, untrimmed, in document order."""
        return [
            block
            for document in self._documents
            for block in document.resource_blocks()
            if block.resource_type == resource_type
        ]

    def get_resource_content(
        self,
        resource_type: str,
        schema: ModelBodySchema,
    ) -> list[ModelBlock]:
        return [
            apply_body_schema(block, schema)
            for block in self.resources_of_type(resource_type)
        ]

    def evaluate_expr(self, expr: ModelExpression) -> EvaluationResult:
        return self._evaluator.evaluate(expr)

    def emit_issue(
        self,
        rule: BaseAlertRule,
        message: str,
        issue_range: ModelSourceRange,
    ) -> None:
        self._issues.append(
            ModelFinding(
                rule_id=rule.name,
                severity=rule.severity,
                message=message,
                range=issue_range,
                link=rule.link,
            )
        )


__all__ = ["RunnerDocument", "apply_body_schema"]
