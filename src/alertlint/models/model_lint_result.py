"""ModelLintResult - result of a lint pass."""

from __future__ import annotations

from dataclasses import dataclass, field

from alertlint.models.model_finding import ModelFinding


@dataclass
class ModelLintMetrics:
    """Metrics about a lint pass.

    Attributes:
        duration_ms: Time taken for the pass in milliseconds.
        rules_run: Rule ids that were executed, in execution order.
        findings_by_rule: Number of findings per rule id.
    """

    duration_ms: int = 0
    rules_run: list[str] = field(default_factory=list)
    findings_by_rule: dict[str, int] = field(default_factory=dict)


@dataclass
class ModelLintResult:
    """Result of a lint pass.

    Attributes:
        findings: Findings in emission order (rule order, then document order).
        documents_scanned: Number of configuration documents inspected.
        declarations_checked: Number of target resources inspected.
        is_clean: True if no findings were produced.
        metrics: Optional detailed metrics about the pass.
    """

    findings: list[ModelFinding]
    documents_scanned: int
    declarations_checked: int = 0
    metrics: ModelLintMetrics | None = None

    @property
    def is_clean(self) -> bool:
        """Return True if no findings were produced."""
        return len(self.findings) == 0
