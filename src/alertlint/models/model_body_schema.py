# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelBodySchema - the attribute/block shape a rule asks the accessor for."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelBlockSchema(BaseModel):
    """A nested block type of interest and the shape of its body.

    Attributes:
        type: Block type to return.
        body: Shape of the nested block's body.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    type: str = Field(..., min_length=1, description="Nested block type")
    body: ModelBodySchema = Field(
        default_factory=lambda: ModelBodySchema(),
        description="Shape of the nested block body",
    )


class ModelBodySchema(BaseModel):
    """Attributes and nested blocks a rule needs from a declaration.

    Parts of a declaration outside the schema are not returned. Parts
    inside the schema that the declaration does not have are simply absent.

    Attributes:
        attributes: Attribute names of interest.
        blocks: Nested block types of interest.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    attributes: list[str] = Field(
        default_factory=list,
        description="Attribute names of interest",
    )
    blocks: list[ModelBlockSchema] = Field(
        default_factory=list,
        description="Nested block types of interest",
    )

    def block_schema(self, block_type: str) -> ModelBlockSchema | None:
        """Return the schema for a nested block type, or None if not requested."""
        for schema in self.blocks:
            if schema.type == block_type:
                return schema
        return None


ModelBlockSchema.model_rebuild()


__all__ = ["ModelBlockSchema", "ModelBodySchema"]
