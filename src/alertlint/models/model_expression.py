# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelExpression - an unevaluated attribute expression.

Expressions are produced by the configuration parser and are read-only to
the rules. Only the expression evaluator looks inside them.

Documents may use a shorthand with exactly one of ``literal``,
``reference`` or ``template``::

    {"literal": "static", "range": "main.tf:12,17-25"}
    {"reference": "var.fill_option", "range": "main.tf:12,17-32"}
    {"template": ["SELECT count(*) FROM ", {"reference": "var.event"}],
     "range": "main.tf:9,13-52"}

Template parts without their own range inherit the enclosing range.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from alertlint.enums.enum_expression_kind import EnumExpressionKind
from alertlint.models.model_source_range import ModelSourceRange

# any-ok: literal scalars mirror the configuration language's primitive types
LiteralScalar = str | int | float | bool | None

_SHORTHAND_KEYS: tuple[str, ...] = ("literal", "reference", "template")


class ModelExpression(BaseModel):
    """An attribute expression and where it appears in source.

    Attributes:
        kind: Shape of the expression.
        value: Scalar value for LITERAL expressions.
        traversal: Dotted reference for REFERENCE expressions (e.g. ``var.app``).
        parts: Ordered sub-expressions for TEMPLATE expressions.
        range: Source range of the whole expression.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    kind: EnumExpressionKind = Field(..., description="Shape of the expression")
    value: LiteralScalar = Field(
        default=None,
        description="Scalar value for literal expressions",
    )
    traversal: str | None = Field(
        default=None,
        description="Dotted reference for reference expressions",
    )
    parts: list[ModelExpression] = Field(
        default_factory=list,
        description="Ordered sub-expressions for template expressions",
    )
    range: ModelSourceRange = Field(
        default_factory=ModelSourceRange,
        description="Source range of the expression",
    )

    @model_validator(mode="before")
    @classmethod
    def expand_shorthand(cls, data: Any) -> Any:
        """Expand ``literal``/``reference``/``template`` shorthand keys."""
        if not isinstance(data, dict) or "kind" in data:
            return data
        present = [key for key in _SHORTHAND_KEYS if key in data]
        if len(present) != 1:
            raise ValueError(
                "expression must set exactly one of "
                f"{list(_SHORTHAND_KEYS)}, got: {sorted(data)}"
            )
        key = present[0]
        expanded: dict[str, Any] = {
            k: v for k, v in data.items() if k not in _SHORTHAND_KEYS
        }
        if key == "literal":
            expanded["kind"] = EnumExpressionKind.LITERAL
            expanded["value"] = data["literal"]
        elif key == "reference":
            expanded["kind"] = EnumExpressionKind.REFERENCE
            expanded["traversal"] = data["reference"]
        else:
            expanded["kind"] = EnumExpressionKind.TEMPLATE
            expanded["parts"] = [
                cls._expand_template_part(part, data.get("range"))
                for part in data["template"]
            ]
        return expanded

    @staticmethod
    def _expand_template_part(part: Any, parent_range: Any) -> Any:
        if isinstance(part, str):
            part = {"literal": part}
        if isinstance(part, dict) and "range" not in part and parent_range is not None:
            part = {**part, "range": parent_range}
        return part

    @model_validator(mode="after")
    def validate_kind_fields(self) -> ModelExpression:
        """Validate that only the fields belonging to ``kind`` are set."""
        if self.kind == EnumExpressionKind.REFERENCE and self.traversal is None:
            raise ValueError("reference expressions require a traversal")
        if self.kind != EnumExpressionKind.REFERENCE and self.traversal is not None:
            raise ValueError(f"{self.kind.value} expressions cannot set a traversal")
        if self.kind != EnumExpressionKind.TEMPLATE and self.parts:
            raise ValueError(f"{self.kind.value} expressions cannot set parts")
        if self.kind != EnumExpressionKind.LITERAL and self.value is not None:
            raise ValueError(f"{self.kind.value} expressions cannot set a value")
        return self


ModelExpression.model_rebuild()


__all__ = ["LiteralScalar", "ModelExpression"]
