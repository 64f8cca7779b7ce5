# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Intermittent-source pattern catalog.

Compiles an ordered list of query fragments into one case-insensitive
regular expression. A fragment only matches when it is not glued to
surrounding ASCII word characters, so ``TransactionError`` matches
``FROM TransactionError WHERE`` but not ``FROM TransactionErrorHandler``.

The catalog is built once and shared read-only by every rule.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from alertlint.exceptions import PatternCatalogError
from alertlint.models.model_matched_term import ModelMatchedTerm

logger = logging.getLogger(__name__)

# Case-sensitive class so IGNORECASE does not fold in the Kelvin sign or long s
_WORD_CHAR = "(?-i:[0-9A-Za-z_])"


class PatternCatalog:
    """An immutable, compiled set of intermittent-source patterns.

    Usage::

        catalog = PatternCatalog(["TransactionError"])
        match = catalog.classify("SELECT count(*) FROM transactionerror")
        if match is not None:
            print(match.term)  # "transactionerror"
    """

    __slots__ = ("_patterns", "_regex")

    def __init__(self, patterns: Iterable[str]) -> None:
        """Compile the catalog.

        Args:
            patterns: Query fragments, in priority order.

        Raises:
            PatternCatalogError: If the catalog is empty, a pattern is blank,
                or the combined expression cannot be compiled.
        """
        self._patterns: tuple[str, ...] = tuple(patterns)
        if not self._patterns:
            raise PatternCatalogError("Intermittent-source catalog must not be empty")

        for index, pattern in enumerate(self._patterns):
            if not isinstance(pattern, str) or not pattern.strip():
                raise PatternCatalogError(
                    f"Intermittent-source pattern at index {index} is blank: {pattern!r}"
                )

        # One capture group per pattern; lastindex maps a match back to its entry
        alternation = "|".join(f"({re.escape(pattern)})" for pattern in self._patterns)
        # Boundaries are ASCII word characters only; case folding stays Unicode
        try:
            self._regex = re.compile(
                rf"(?<!{_WORD_CHAR})(?:{alternation})(?!{_WORD_CHAR})", re.IGNORECASE
            )
        except re.error as exc:
            raise PatternCatalogError(
                f"Intermittent-source catalog cannot be compiled: {exc}"
            ) from exc

        logger.debug("Compiled intermittent-source catalog with %d patterns", len(self))

    @property
    def patterns(self) -> tuple[str, ...]:
        """The catalog entries, in priority order."""
        return self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"PatternCatalog({list(self._patterns)!r})"

    def classify(self, query: str) -> ModelMatchedTerm | None:
        """Find the first intermittent source mentioned in a query.

        The leftmost match in the query wins; when several patterns match at
        the same position, the earlier catalog entry wins.

        Args:
            query: The evaluated query text.

        Returns:
            The matched term with the text exactly as written in the query,
            or None if no pattern matches.
        """
        match = self._regex.search(query)
        if match is None:
            return None
        index = (match.lastindex or 1) - 1
        return ModelMatchedTerm(
            term=match.group(0),
            pattern=self._patterns[index],
            start=match.start(),
            end=match.end(),
        )


__all__ = ["PatternCatalog"]
