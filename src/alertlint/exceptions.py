# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for alertlint.

Error Codes:
    - ALERTLINT_001: Intermittent-source catalog cannot be built
    - ALERTLINT_002: Configuration document cannot be read or accessed
    - ALERTLINT_003: Expression is malformed and cannot be evaluated
    - ALERTLINT_004: Ruleset configuration file is invalid

Findings about a single declaration are never raised; they are reported
through the issue reporter. These exceptions abort the whole check pass.
"""

from __future__ import annotations


class AlertLintError(Exception):
    """Base exception for alertlint errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., ALERTLINT_001).

    Example:
        >>> try:
        ...     raise AlertLintError("Something failed", code="ALERTLINT_999")
        ... except AlertLintError as e:
        ...     print(f"Error {e.code}: {e.message}")
        Error ALERTLINT_999: Something failed
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class PatternCatalogError(AlertLintError):
    """Raised when the intermittent-source catalog is empty or unusable.

    Only raised while building the catalog, never while classifying queries.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code="ALERTLINT_001")


class ConfigurationAccessError(AlertLintError):
    """Raised when a configuration document is malformed or unreadable."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="ALERTLINT_002")


class ExpressionEvaluationError(AlertLintError):
    """Raised when an expression is malformed.

    An expression that is well formed but cannot be resolved statically is
    not an error; the evaluator returns ``Unresolved`` for it.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code="ALERTLINT_003")


class RulesetConfigError(AlertLintError):
    """Raised when the ruleset configuration file fails validation.

    Attributes:
        errors: One entry per problem, formatted as ``field: message``.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message, code="ALERTLINT_004")
        self.errors = errors or []


__all__ = [
    "AlertLintError",
    "ConfigurationAccessError",
    "ExpressionEvaluationError",
    "PatternCatalogError",
    "RulesetConfigError",
]
