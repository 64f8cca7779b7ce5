"""Host side of alertlint: document loading, evaluation and lint passes."""

from alertlint.runtime.evaluator_expression import (
    ExpressionEvaluator,
    render_scalar,
    split_traversal,
)
from alertlint.runtime.lint import (
    discover_document_files,
    load_target_documents,
    run_lint,
)
from alertlint.runtime.loader_config import (
    load_ruleset_config,
    validate_ruleset_config,
)
from alertlint.runtime.loader_document import (
    format_validation_errors,
    load_document,
    load_document_if_recognized,
    load_documents,
)
from alertlint.runtime.runner_document import RunnerDocument, apply_body_schema
from alertlint.runtime.settings import AlertLintSettings

__all__ = [
    "AlertLintSettings",
    "ExpressionEvaluator",
    "RunnerDocument",
    "apply_body_schema",
    "discover_document_files",
    "format_validation_errors",
    "load_document",
    "load_document_if_recognized",
    "load_documents",
    "load_ruleset_config",
    "load_target_documents",
    "render_scalar",
    "run_lint",
    "split_traversal",
    "validate_ruleset_config",
]
