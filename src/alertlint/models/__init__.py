# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for alertlint.

Declarations, expressions and ranges are pydantic models (frozen) so they
can be validated straight from parsed documents. Short-lived value objects
produced during a pass are frozen dataclasses.
"""

from alertlint.models.model_block import (
    ModelAttribute,
    ModelBlock,
    wrap_attribute_mapping,
)
from alertlint.models.model_body_schema import ModelBlockSchema, ModelBodySchema
from alertlint.models.model_config_document import (
    ModelConfigDocument,
    ModelResourceDeclaration,
)
from alertlint.models.model_evaluation_result import (
    EvaluationResult,
    Resolved,
    Unresolved,
)
from alertlint.models.model_expression import LiteralScalar, ModelExpression
from alertlint.models.model_finding import ModelFinding
from alertlint.models.model_intermittent_query import ModelIntermittentQuery
from alertlint.models.model_lint_result import ModelLintMetrics, ModelLintResult
from alertlint.models.model_matched_term import ModelMatchedTerm
from alertlint.models.model_ruleset_config import ModelRuleConfig, ModelRulesetConfig
from alertlint.models.model_source_range import ModelSourcePos, ModelSourceRange

__all__ = [
    "EvaluationResult",
    "LiteralScalar",
    "ModelAttribute",
    "ModelBlock",
    "ModelBlockSchema",
    "ModelBodySchema",
    "ModelConfigDocument",
    "ModelExpression",
    "ModelFinding",
    "ModelIntermittentQuery",
    "ModelLintMetrics",
    "ModelLintResult",
    "ModelMatchedTerm",
    "ModelResourceDeclaration",
    "ModelRuleConfig",
    "ModelRulesetConfig",
    "ModelSourcePos",
    "ModelSourceRange",
    "Resolved",
    "Unresolved",
    "wrap_attribute_mapping",
]
