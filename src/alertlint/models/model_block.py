# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Declaration models: attributes and (nested) blocks.

A resource declaration is a block of type ``resource`` whose labels are
``[resource_type, name]``. Attributes map a name to an unevaluated
expression; nested blocks keep document order.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from alertlint.constants import RESOURCE_BLOCK_TYPE
from alertlint.models.model_expression import ModelExpression
from alertlint.models.model_source_range import ModelSourceRange


class ModelAttribute(BaseModel):
    """A single ``name = expression`` attribute.

    Attributes:
        name: Attribute name.
        expr: The unevaluated expression assigned to the attribute.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    name: str = Field(..., min_length=1, description="Attribute name")
    expr: ModelExpression = Field(..., description="Unevaluated expression")

    @property
    def range(self) -> ModelSourceRange:
        """Source range of the attribute's expression."""
        return self.expr.range


def wrap_attribute_mapping(value: Any) -> Any:
    """Turn ``{name: expression}`` into ``{name: {"name": ..., "expr": ...}}``.

    Entries that are already attributes (or already carry ``expr``) pass
    through unchanged; anything else is left for pydantic to reject.
    """
    if not isinstance(value, dict):
        return value
    wrapped: dict[str, Any] = {}
    for name, item in value.items():
        if isinstance(item, ModelExpression):
            wrapped[name] = {"name": name, "expr": item}
        elif isinstance(item, dict) and "expr" not in item:
            wrapped[name] = {"name": name, "expr": item}
        else:
            wrapped[name] = item
    return wrapped


class ModelBlock(BaseModel):
    """A configuration block such as a resource or a nested ``nrql`` block.

    Attributes:
        type: Block type (``resource``, ``nrql``, ...).
        labels: Block labels; for resources ``[resource_type, name]``.
        def_range: Range of the block header, used when nothing more
            specific is available.
        attributes: Attributes declared directly in the block body.
        blocks: Nested blocks, in document order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    type: str = Field(..., min_length=1, description="Block type")
    labels: list[str] = Field(default_factory=list, description="Block labels")
    def_range: ModelSourceRange = Field(
        default_factory=ModelSourceRange,
        description="Range of the block header",
    )
    attributes: dict[str, ModelAttribute] = Field(
        default_factory=dict,
        description="Attributes keyed by name",
    )
    blocks: list[ModelBlock] = Field(
        default_factory=list,
        description="Nested blocks in document order",
    )

    @field_validator("attributes", mode="before")
    @classmethod
    def wrap_bare_expressions(cls, value: Any) -> Any:
        """Allow ``{name: expression}`` mappings without repeating the name."""
        return wrap_attribute_mapping(value)

    def get_attribute(self, name: str) -> ModelAttribute | None:
        """Return the named attribute, or None if it is not declared."""
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        """Return True if the attribute is declared, whatever its value."""
        return name in self.attributes

    def first_block(self, block_type: str) -> ModelBlock | None:
        """Return the first nested block of the given type, or None."""
        for block in self.blocks:
            if block.type == block_type:
                return block
        return None

    @property
    def is_resource(self) -> bool:
        return self.type == RESOURCE_BLOCK_TYPE and len(self.labels) == 2

    @property
    def resource_type(self) -> str | None:
        return self.labels[0] if self.is_resource else None

    @property
    def resource_name(self) -> str | None:
        return self.labels[1] if self.is_resource else None


ModelBlock.model_rebuild()


__all__ = ["ModelAttribute", "ModelBlock", "wrap_attribute_mapping"]
