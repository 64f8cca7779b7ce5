"""Unit tests for ExpressionEvaluator."""

from __future__ import annotations

import pytest

from alertlint.exceptions import ExpressionEvaluationError
from alertlint.models import Resolved, Unresolved
from alertlint.runtime import ExpressionEvaluator, render_scalar, split_traversal
from alertlint.testing import literal, reference, template

pytestmark = pytest.mark.unit


@pytest.fixture
def evaluator() -> ExpressionEvaluator:
    return ExpressionEvaluator(
        variables={"fill": "static", "threshold": 0.0, "unset": None},
        locals_={"event": "TransactionError", "enabled": True},
    )


class TestRenderScalar:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("none", "none"),
            (True, "true"),
            (False, "false"),
            (0.0, "0"),
            (2.5, "2.5"),
            (10, "10"),
            (None, None),
        ],
    )
    def test_render(self, value, expected) -> None:
        assert render_scalar(value) == expected


class TestLiterals:
    def test_string_literal(self, evaluator: ExpressionEvaluator) -> None:
        assert evaluator.evaluate(literal("last_value")) == Resolved(value="last_value")

    def test_null_literal_is_unresolved(self, evaluator: ExpressionEvaluator) -> None:
        assert isinstance(evaluator.evaluate(literal(None)), Unresolved)


class TestReferences:
    def test_known_variable(self, evaluator: ExpressionEvaluator) -> None:
        assert evaluator.evaluate(reference("var.fill")) == Resolved(value="static")

    def test_known_local(self, evaluator: ExpressionEvaluator) -> None:
        assert evaluator.evaluate(reference("local.enabled")) == Resolved(value="true")

    def test_numeric_variable_is_rendered(self, evaluator: ExpressionEvaluator) -> None:
        assert evaluator.evaluate(reference("var.threshold")) == Resolved(value="0")

    @pytest.mark.parametrize(
        "traversal",
        [
            "var.missing",
            "var.unset",
            "var.fill[0]",
            "var.fill.nested",
            "data.newrelic_entity.app.guid",
            "newrelic_alert_policy.main.id",
            "each.value",
            "count.index",
            "module.alerts.query",
            "local.queries[each.key]",
            'var.queries["errors.rack"]',
            'var.m["a.b"]',
            "local.queries[each.key].name",
            "var.hosts.0",
            "var.hosts.*.name",
        ],
    )
    def test_unknown_values_are_unresolved(
        self, evaluator: ExpressionEvaluator, traversal: str
    ) -> None:
        assert isinstance(evaluator.evaluate(reference(traversal)), Unresolved)

    @pytest.mark.parametrize(
        "traversal",
        [
            "",
            "var.",
            ".fill",
            "var..fill",
            "var.a b",
            "var.fill[",
            "var.fill[]",
            "var.fill]",
            'var.fill["a]',
            "var.fill[each.key",
        ],
    )
    def test_malformed_reference_raises(
        self, evaluator: ExpressionEvaluator, traversal: str
    ) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            evaluator.evaluate(reference(traversal))
        assert exc_info.value.code == "ALERTLINT_003"


class TestTemplates:
    def test_all_parts_resolved(self, evaluator: ExpressionEvaluator) -> None:
        expr = template("SELECT count(*) FROM ", reference("local.event"))
        assert evaluator.evaluate(expr) == Resolved(
            value="SELECT count(*) FROM TransactionError"
        )

    def test_any_unresolved_part(self, evaluator: ExpressionEvaluator) -> None:
        expr = template("SELECT count(*) FROM ", reference("var.missing"))
        assert isinstance(evaluator.evaluate(expr), Unresolved)

    def test_empty_template(self, evaluator: ExpressionEvaluator) -> None:
        assert evaluator.evaluate(template()) == Resolved(value="")


class TestSplitTraversal:
    @pytest.mark.parametrize(
        ("traversal", "expected"),
        [
            ("var.fill", ["var", "fill"]),
            ("local.queries[each.key]", ["local", "queries", "[each.key]"]),
            ('var.m["a.b"]', ["var", "m", '["a.b"]']),
            ('var.m["a]b"].id', ["var", "m", '["a]b"]', "id"]),
            ("var.m[local.keys[0]]", ["var", "m", "[local.keys[0]]"]),
            ("aws_instance.web.*.id", ["aws_instance", "web", "*", "id"]),
        ],
    )
    def test_split(self, traversal: str, expected: list[str]) -> None:
        assert split_traversal(traversal) == expected
