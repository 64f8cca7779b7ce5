"""ModelIntermittentQuery - a query classified as intermittent."""

from __future__ import annotations

from dataclasses import dataclass

from alertlint.models.model_matched_term import ModelMatchedTerm
from alertlint.models.model_source_range import ModelSourceRange


@dataclass(frozen=True)
class ModelIntermittentQuery:
    """A declaration whose query targets an intermittent source.

    Attributes:
        matched_term: What the catalog matched in the query.
        query_range: Source range of the query expression.
    """

    matched_term: ModelMatchedTerm
    query_range: ModelSourceRange

    @property
    def term(self) -> str:
        """The matched text, verbatim from the query."""
        return self.matched_term.term
