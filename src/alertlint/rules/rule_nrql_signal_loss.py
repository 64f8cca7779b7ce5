# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Signal-loss rule for NRQL alert conditions.

When a source is expected to go quiet, the condition should say how to
treat that silence. Conditions whose query targets an intermittent source
must declare, in this order:

1. ``ignore_on_expected_termination``
2. ``close_violations_on_expiration``

Presence is enough; values are not inspected. Both findings point at the
query that made the settings necessary, not at the resource header.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from alertlint.constants import (
    CLOSE_VIOLATIONS_ON_EXPIRATION_ATTRIBUTE,
    IGNORE_ON_EXPECTED_TERMINATION_ATTRIBUTE,
    NRQL_ALERT_CONDITION_RESOURCE,
)
from alertlint.rules.helper_intermittent_query import (
    build_nrql_condition_schema,
    find_intermittent_query,
)
from alertlint.rules.rule_base import BaseAlertRule

if TYPE_CHECKING:
    from alertlint.protocols import ProtocolRuleRunner

# Checked in order; the first missing attribute is the only one reported
REQUIRED_SIGNAL_LOSS_ATTRIBUTES: tuple[str, ...] = (
    IGNORE_ON_EXPECTED_TERMINATION_ATTRIBUTE,
    CLOSE_VIOLATIONS_ON_EXPIRATION_ATTRIBUTE,
)


class RuleNrqlSignalLoss(BaseAlertRule):
    """Checks that signal-loss expiration is configured for intermittent sources."""

    name = "newrelic_nrql_signal_loss"

    _schema = build_nrql_condition_schema(*REQUIRED_SIGNAL_LOSS_ATTRIBUTES)

    def check(self, runner: ProtocolRuleRunner) -> None:
        resources = runner.get_resource_content(
            NRQL_ALERT_CONDITION_RESOURCE, self._schema
        )
        for resource in resources:
            intermittent = find_intermittent_query(self, runner, resource)
            if intermittent is None:
                continue

            for attribute in REQUIRED_SIGNAL_LOSS_ATTRIBUTES:
                if not resource.has_attribute(attribute):
                    runner.emit_issue(
                        self,
                        f"`{attribute}` must be set when using intermittent data "
                        f"sources like '{intermittent.term}' in "
                        f"`{NRQL_ALERT_CONDITION_RESOURCE}`.",
                        intermittent.query_range,
                    )
                    break


__all__ = ["REQUIRED_SIGNAL_LOSS_ATTRIBUTES", "RuleNrqlSignalLoss"]
