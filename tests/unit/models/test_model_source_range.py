"""Unit tests for source range parsing and rendering."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from alertlint.models import ModelSourcePos, ModelSourceRange

pytestmark = pytest.mark.unit


class TestModelSourceRange:
    def test_parse_same_line(self) -> None:
        source_range = ModelSourceRange.from_text("resource.tf:9,13-78")
        assert source_range.filename == "resource.tf"
        assert source_range.start == ModelSourcePos(line=9, column=13)
        assert source_range.end == ModelSourcePos(line=9, column=78)

    def test_parse_multi_line(self) -> None:
        source_range = ModelSourceRange.from_text("main.tf:9,13-10,5")
        assert source_range.end.line == 10
        assert str(source_range) == "main.tf:9,13-10,5"

    def test_render_same_line(self) -> None:
        assert str(ModelSourceRange.from_text("resource.tf:12,17-23")) == (
            "resource.tf:12,17-23"
        )

    def test_filename_with_directory_and_colon(self) -> None:
        source_range = ModelSourceRange.from_text("C:/infra/alerts.tf:1,1-5")
        assert source_range.filename == "C:/infra/alerts.tf"

    def test_rejects_malformed_text(self) -> None:
        with pytest.raises(ValidationError, match="range must look like"):
            ModelSourceRange.from_text("resource.tf line 9")

    def test_rejects_end_before_start(self) -> None:
        with pytest.raises(ValidationError, match="before start"):
            ModelSourceRange.from_text("resource.tf:9,13-8,1")

    def test_range_is_frozen(self) -> None:
        source_range = ModelSourceRange.from_text("resource.tf:9,13-78")
        with pytest.raises(ValidationError):
            source_range.filename = "other.tf"  # type: ignore[misc]
