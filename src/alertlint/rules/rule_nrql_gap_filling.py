# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Gap-filling rule for NRQL alert conditions.

Intermittent sources leave gaps in the aggregated signal. Without a fill
policy the alert evaluates those gaps as "no data", which either pages for
nothing or hides real breaches. For every condition whose query targets an
intermittent source:

- ``fill_option`` must be declared (reported at the query);
- ``fill_option`` must not be ``none`` (reported at the fill option);
- ``fill_option = "static"`` needs ``fill_value`` (reported at the fill option).

A ``fill_option`` that cannot be evaluated is assumed to be compliant.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from alertlint.constants import (
    FILL_OPTION_ATTRIBUTE,
    FILL_OPTION_LAST_VALUE,
    FILL_OPTION_NONE,
    FILL_OPTION_STATIC,
    FILL_VALUE_ATTRIBUTE,
    NRQL_ALERT_CONDITION_RESOURCE,
)
from alertlint.models.model_evaluation_result import Resolved, Unresolved
from alertlint.rules.helper_intermittent_query import (
    build_nrql_condition_schema,
    find_intermittent_query,
)
from alertlint.rules.rule_base import BaseAlertRule

if TYPE_CHECKING:
    from alertlint.models.model_block import ModelBlock
    from alertlint.models.model_intermittent_query import ModelIntermittentQuery
    from alertlint.protocols import ProtocolRuleRunner

logger = logging.getLogger(__name__)


class RuleNrqlGapFilling(BaseAlertRule):
    """Checks that ``fill_option``/``fill_value`` suit intermittent sources."""

    name = "newrelic_nrql_gap_filling"

    _schema = build_nrql_condition_schema(FILL_OPTION_ATTRIBUTE, FILL_VALUE_ATTRIBUTE)

    def check(self, runner: ProtocolRuleRunner) -> None:
        resources = runner.get_resource_content(
            NRQL_ALERT_CONDITION_RESOURCE, self._schema
        )
        for resource in resources:
            intermittent = find_intermittent_query(self, runner, resource)
            if intermittent is None:
                continue
            self._check_fill_policy(runner, resource, intermittent)

    def _check_fill_policy(
        self,
        runner: ProtocolRuleRunner,
        resource: ModelBlock,
        intermittent: ModelIntermittentQuery,
    ) -> None:
        fill_option = resource.get_attribute(FILL_OPTION_ATTRIBUTE)
        if fill_option is None:
            runner.emit_issue(
                self,
                f"`{FILL_OPTION_ATTRIBUTE}` must be set when using intermittent "
                f"data sources like '{intermittent.term}' in "
                f"`{NRQL_ALERT_CONDITION_RESOURCE}`.",
                intermittent.query_range,
            )
            return

        match runner.evaluate_expr(fill_option.expr):
            case Unresolved(reason=reason):
                logger.debug(
                    "Assuming %s is compliant for %s: %s",
                    FILL_OPTION_ATTRIBUTE,
                    resource.resource_name,
                    reason,
                )
            case Resolved(value=value) if value == FILL_OPTION_NONE:
                runner.emit_issue(
                    self,
                    f"`{FILL_OPTION_ATTRIBUTE}` should not be '{FILL_OPTION_NONE}' "
                    f"when using intermittent data sources like '{intermittent.term}' "
                    f"in `{NRQL_ALERT_CONDITION_RESOURCE}`. "
                    f"Consider '{FILL_OPTION_LAST_VALUE}' or '{FILL_OPTION_STATIC}'.",
                    fill_option.range,
                )
            case Resolved(value=value) if value == FILL_OPTION_STATIC:
                if not resource.has_attribute(FILL_VALUE_ATTRIBUTE):
                    runner.emit_issue(
                        self,
                        f"`{FILL_VALUE_ATTRIBUTE}` must be set when "
                        f"`{FILL_OPTION_ATTRIBUTE}` is '{FILL_OPTION_STATIC}' for "
                        f"`{NRQL_ALERT_CONDITION_RESOURCE}`.",
                        fill_option.range,
                    )
            case Resolved():
                pass


__all__ = ["RuleNrqlGapFilling"]
