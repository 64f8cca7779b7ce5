# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""BaseAlertRule - common identity and wiring for every rule."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from alertlint.constants import RULE_DOCS_PATH
from alertlint.enums.enum_rule_severity import EnumRuleSeverity

if TYPE_CHECKING:
    from alertlint.catalog.pattern_catalog import PatternCatalog
    from alertlint.protocols import ProtocolRuleRunner


class BaseAlertRule(ABC):
    """Base class for rules.

    Subclasses set ``name`` (the stable rule id) and implement ``check``.
    The intermittent-source catalog is injected at construction so every
    rule in a pass classifies queries the same way.

    Attributes:
        name: Stable rule identifier used in output and configuration.
        severity: Severity attached to every finding of the rule.
        enabled_by_default: Whether the rule runs when not configured.
    """

    name: ClassVar[str]
    severity: ClassVar[EnumRuleSeverity] = EnumRuleSeverity.ERROR
    enabled_by_default: ClassVar[bool] = True

    def __init__(self, catalog: PatternCatalog, *, enabled: bool | None = None) -> None:
        """Initialize the rule.

        Args:
            catalog: Compiled intermittent-source catalog.
            enabled: Overrides ``enabled_by_default`` when not None.
        """
        self._catalog = catalog
        self._enabled = self.enabled_by_default if enabled is None else enabled

    @property
    def catalog(self) -> PatternCatalog:
        return self._catalog

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def link(self) -> str:
        """Relative path of the rule's documentation page."""
        return f"{RULE_DOCS_PATH}/{self.name}.md"

    @abstractmethod
    def check(self, runner: ProtocolRuleRunner) -> None:
        """Inspect every target declaration and emit findings through the runner.

        Args:
            runner: Host providing declarations, evaluation and reporting.

        Raises:
            Exceptions raised by the runner propagate unchanged.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, enabled={self.enabled})"


__all__ = ["BaseAlertRule"]
