"""ModelMatchedTerm - an intermittent-source match inside a query."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelMatchedTerm:
    """A catalog pattern found in a query.

    Attributes:
        term: The text as it appears in the query (letter case as written).
        pattern: The catalog entry that matched.
        start: Offset of the first matched character in the query.
        end: Offset just past the last matched character.
    """

    term: str
    pattern: str
    start: int
    end: int
