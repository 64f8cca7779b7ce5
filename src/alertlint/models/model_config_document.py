# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pydantic models for parsed configuration documents.

A configuration document is the structured form of one configuration file,
as produced by an external parser. Document YAML/JSON structure::

    filename: alerts.tf
    variables:
      app_name: Bauhaus
    locals:
      fill: static
    resources:
      - type: newrelic_nrql_alert_condition
        name: errors
        def_range: "alerts.tf:2,1-58"
        attributes:
          fill_option:
            reference: local.fill
            range: "alerts.tf:12,17-27"
        blocks:
          - type: nrql
            def_range: "alerts.tf:8,3-7"
            attributes:
              query:
                literal: "SELECT count(*) FROM TransactionError"
                range: "alerts.tf:9,13-52"
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from alertlint.constants import RESOURCE_BLOCK_TYPE
from alertlint.models.model_block import (
    ModelAttribute,
    ModelBlock,
    wrap_attribute_mapping,
)
from alertlint.models.model_expression import LiteralScalar
from alertlint.models.model_source_range import ModelSourceRange


class ModelResourceDeclaration(BaseModel):
    """A ``resource "<type>" "<name>" { ... }`` declaration.

    Attributes:
        type: Resource type (e.g. ``newrelic_nrql_alert_condition``).
        name: Resource name label.
        def_range: Range of the resource header.
        attributes: Top-level attributes of the resource body.
        blocks: Nested blocks of the resource body.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    type: str = Field(..., min_length=1, description="Resource type")
    name: str = Field(..., min_length=1, description="Resource name label")
    def_range: ModelSourceRange = Field(..., description="Range of the header")
    attributes: dict[str, ModelAttribute] = Field(default_factory=dict)
    blocks: list[ModelBlock] = Field(default_factory=list)

    @field_validator("attributes", mode="before")
    @classmethod
    def wrap_bare_expressions(cls, value: Any) -> Any:
        """Allow ``{name: expression}`` mappings without repeating the name."""
        return wrap_attribute_mapping(value)

    def to_block(self) -> ModelBlock:
        """Return the declaration as a ``resource`` block."""
        return ModelBlock(
            type=RESOURCE_BLOCK_TYPE,
            labels=[self.type, self.name],
            def_range=self.def_range,
            attributes=self.attributes,
            blocks=self.blocks,
        )


class ModelConfigDocument(BaseModel):
    """One parsed configuration file.

    Attributes:
        filename: Name of the source file the document was parsed from.
        variables: Input variable values known for this document.
        locals: Local values known for this document.
        resources: Resource declarations in document order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    filename: str = Field(..., min_length=1, description="Source file name")
    variables: dict[str, LiteralScalar] = Field(default_factory=dict)
    locals: dict[str, LiteralScalar] = Field(default_factory=dict)
    resources: list[ModelResourceDeclaration] = Field(default_factory=list)

    def resource_blocks(self) -> list[ModelBlock]:
        """Return every resource as a block, in document order."""
        return [resource.to_block() for resource in self.resources]


__all__ = ["ModelConfigDocument", "ModelResourceDeclaration"]
