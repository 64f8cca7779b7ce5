"""Enumerations for alertlint."""

from alertlint.enums.enum_expression_kind import EnumExpressionKind
from alertlint.enums.enum_rule_severity import EnumRuleSeverity

__all__ = [
    "EnumExpressionKind",
    "EnumRuleSeverity",
]
