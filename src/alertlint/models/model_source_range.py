# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Source position and range models.

Ranges render in the HCL diagnostic form used by Terraform tooling::

    resource.tf:9,13-78        (start and end on the same line)
    resource.tf:9,13-10,5      (end on a later line)

and parse back from the same text, so configuration documents can state
ranges compactly.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

_RANGE_PATTERN = re.compile(
    r"^(?P<filename>.*):(?P<start_line>\d+),(?P<start_column>\d+)"
    r"-(?:(?P<end_line>\d+),)?(?P<end_column>\d+)$"
)


class ModelSourcePos(BaseModel):
    """A single position in a source file.

    Attributes:
        line: Line number (1-indexed).
        column: Column number (1-indexed).
        byte: Byte offset from the start of the file (0-indexed).
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    line: int = Field(default=1, ge=1, description="Line number (1-indexed)")
    column: int = Field(default=1, ge=1, description="Column number (1-indexed)")
    byte: int = Field(default=0, ge=0, description="Byte offset (0-indexed)")


class ModelSourceRange(BaseModel):
    """A span of source text, start inclusive and end exclusive.

    Attributes:
        filename: File the range belongs to.
        start: First position of the range.
        end: Position just past the last character of the range.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    filename: str = Field(default="", description="File the range belongs to")
    start: ModelSourcePos = Field(default_factory=ModelSourcePos)
    end: ModelSourcePos = Field(default_factory=ModelSourcePos)

    @model_validator(mode="before")
    @classmethod
    def parse_range_text(cls, data: Any) -> Any:
        """Accept the compact ``file:line,col-line,col`` form."""
        if isinstance(data, str):
            return cls._split_range_text(data)
        return data

    @model_validator(mode="after")
    def validate_ordering(self) -> ModelSourceRange:
        """Validate that the range does not end before it starts."""
        if (self.end.line, self.end.column) < (self.start.line, self.start.column):
            raise ValueError(
                f"range end {self.end.line},{self.end.column} is before "
                f"start {self.start.line},{self.start.column}"
            )
        return self

    @classmethod
    def from_text(cls, text: str) -> ModelSourceRange:
        """Build a range from its compact text form."""
        return cls.model_validate(text)

    @staticmethod
    def _split_range_text(text: str) -> dict[str, Any]:
        match = _RANGE_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(
                f"range must look like 'file:line,col-col' or "
                f"'file:line,col-line,col', got: {text!r}"
            )
        start_line = int(match.group("start_line"))
        end_line = match.group("end_line")
        return {
            "filename": match.group("filename"),
            "start": {
                "line": start_line,
                "column": int(match.group("start_column")),
            },
            "end": {
                "line": int(end_line) if end_line is not None else start_line,
                "column": int(match.group("end_column")),
            },
        }

    def __str__(self) -> str:
        if self.start.line == self.end.line:
            return (
                f"{self.filename}:{self.start.line},{self.start.column}"
                f"-{self.end.column}"
            )
        return (
            f"{self.filename}:{self.start.line},{self.start.column}"
            f"-{self.end.line},{self.end.column}"
        )


__all__ = ["ModelSourcePos", "ModelSourceRange"]
