# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared query extraction and classification for NRQL alert rules.

Both NRQL rules start the same way for each ``newrelic_nrql_alert_condition``:

1. No ``nrql`` block: report at the resource header, stop.
2. No ``nrql.query`` attribute: report at the resource header, stop.
3. Query cannot be evaluated: skip silently.
4. Query does not mention an intermittent source: skip silently.

Only declarations that get past all four steps are returned to the rule.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from alertlint.constants import (
    NRQL_ALERT_CONDITION_RESOURCE,
    NRQL_BLOCK_TYPE,
    NRQL_QUERY_ATTRIBUTE,
)
from alertlint.models.model_body_schema import ModelBlockSchema, ModelBodySchema
from alertlint.models.model_evaluation_result import Resolved, Unresolved
from alertlint.models.model_intermittent_query import ModelIntermittentQuery

if TYPE_CHECKING:
    from alertlint.models.model_block import ModelBlock
    from alertlint.protocols import ProtocolRuleRunner
    from alertlint.rules.rule_base import BaseAlertRule

logger = logging.getLogger(__name__)

MISSING_NRQL_BLOCK_MESSAGE: str = (
    f"`{NRQL_BLOCK_TYPE}` block is missing in `{NRQL_ALERT_CONDITION_RESOURCE}`."
)
MISSING_QUERY_MESSAGE: str = (
    f"`{NRQL_BLOCK_TYPE}.{NRQL_QUERY_ATTRIBUTE}` is missing in "
    f"`{NRQL_ALERT_CONDITION_RESOURCE}`."
)


def build_nrql_condition_schema(*attributes: str) -> ModelBodySchema:
    """Return the schema for an NRQL condition plus extra top-level attributes."""
    return ModelBodySchema(
        attributes=list(attributes),
        blocks=[
            ModelBlockSchema(
                type=NRQL_BLOCK_TYPE,
                body=ModelBodySchema(attributes=[NRQL_QUERY_ATTRIBUTE]),
            )
        ],
    )


def find_intermittent_query(
    rule: BaseAlertRule,
    runner: ProtocolRuleRunner,
    resource: ModelBlock,
) -> ModelIntermittentQuery | None:
    """Classify a declaration's query, reporting structural gaps on the way.

    Args:
        rule: The rule on whose behalf structural findings are emitted.
        runner: Host providing evaluation and reporting.
        resource: One ``newrelic_nrql_alert_condition`` resource.

    Returns:
        The matched term and the query's range, or None when the rule has
        nothing further to check for this declaration.
    """
    nrql_block = resource.first_block(NRQL_BLOCK_TYPE)
    if nrql_block is None:
        runner.emit_issue(rule, MISSING_NRQL_BLOCK_MESSAGE, resource.def_range)
        return None

    query_attr = nrql_block.get_attribute(NRQL_QUERY_ATTRIBUTE)
    if query_attr is None:
        runner.emit_issue(rule, MISSING_QUERY_MESSAGE, resource.def_range)
        return None

    match runner.evaluate_expr(query_attr.expr):
        case Resolved(value=query):
            matched_term = rule.catalog.classify(query)
            if matched_term is None:
                return None
            return ModelIntermittentQuery(
                matched_term=matched_term,
                query_range=query_attr.range,
            )
        case Unresolved(reason=reason):
            logger.debug(
                "Skipping %s for %s: query is not statically known (%s)",
                rule.name,
                resource.resource_name,
                reason,
            )
            return None


__all__ = [
    "MISSING_NRQL_BLOCK_MESSAGE",
    "MISSING_QUERY_MESSAGE",
    "build_nrql_condition_schema",
    "find_intermittent_query",
]
