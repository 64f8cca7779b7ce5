# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelFinding - a single reported rule violation.

Findings are immutable after creation and carry everything an output
formatter needs: which rule fired, how severe it is, what is wrong and
where.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from alertlint.enums.enum_rule_severity import EnumRuleSeverity
from alertlint.models.model_source_range import ModelSourceRange


class ModelFinding(BaseModel):
    """A single rule violation found in a configuration.

    Attributes:
        rule_id: The rule that produced this finding.
        severity: Severity of the rule.
        message: Human-readable description of the violation.
        range: Most specific source range available for the violation.
        link: Documentation link of the rule.

    Example::

        finding = ModelFinding(
            rule_id="newrelic_nrql_gap_filling",
            severity=EnumRuleSeverity.ERROR,
            message="`fill_value` must be set when `fill_option` is 'static' ...",
            range=ModelSourceRange.from_text("main.tf:12,17-25"),
        )
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    rule_id: str = Field(..., min_length=1, description="Rule that fired")
    severity: EnumRuleSeverity = Field(..., description="Severity of the rule")
    message: str = Field(..., min_length=1, description="Violation description")
    range: ModelSourceRange = Field(..., description="Source range of the violation")
    link: str = Field(default="", description="Documentation link of the rule")

    def __str__(self) -> str:
        return f"{self.range}: [{self.rule_id}] {self.message}"


__all__ = ["ModelFinding"]
