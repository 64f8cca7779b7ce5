"""Unit tests for the shared NRQL query extraction helper."""

from __future__ import annotations

import pytest

from alertlint.catalog import PatternCatalog
from alertlint.exceptions import ConfigurationAccessError
from alertlint.models import Resolved, Unresolved
from alertlint.protocols import ProtocolRuleRunner
from alertlint.rules import (
    MISSING_NRQL_BLOCK_MESSAGE,
    MISSING_QUERY_MESSAGE,
    RuleNrqlGapFilling,
    RuleNrqlSignalLoss,
    build_nrql_condition_schema,
    find_intermittent_query,
)
from alertlint.testing import (
    DEFAULT_DEF_RANGE,
    FakeRuleRunner,
    assert_findings,
    make_document,
    make_nrql_condition,
    run_rule,
)

pytestmark = pytest.mark.unit

INTERMITTENT_QUERY = "SELECT count(*) FROM TransactionError"


class TestStructuralFindings:
    @pytest.mark.parametrize("rule_cls", [RuleNrqlGapFilling, RuleNrqlSignalLoss])
    def test_missing_nrql_block(self, rule_cls: type) -> None:
        document = make_document(make_nrql_condition(with_nrql_block=False))
        findings = run_rule(rule_cls, [document])
        assert_findings(
            findings, [(rule_cls.name, MISSING_NRQL_BLOCK_MESSAGE, DEFAULT_DEF_RANGE)]
        )

    @pytest.mark.parametrize("rule_cls", [RuleNrqlGapFilling, RuleNrqlSignalLoss])
    def test_missing_query(self, rule_cls: type) -> None:
        document = make_document(make_nrql_condition(query=None))
        findings = run_rule(rule_cls, [document])
        assert_findings(
            findings, [(rule_cls.name, MISSING_QUERY_MESSAGE, DEFAULT_DEF_RANGE)]
        )

    def test_messages(self) -> None:
        assert MISSING_NRQL_BLOCK_MESSAGE == (
            "`nrql` block is missing in `newrelic_nrql_alert_condition`."
        )
        assert MISSING_QUERY_MESSAGE == (
            "`nrql.query` is missing in `newrelic_nrql_alert_condition`."
        )


class TestFindIntermittentQuery:
    def _runner(self, evaluate) -> FakeRuleRunner:
        resource = make_document(
            make_nrql_condition(query=INTERMITTENT_QUERY)
        ).resource_blocks()[0]
        return FakeRuleRunner([resource], evaluate=evaluate)

    def test_fake_runner_satisfies_protocol(self) -> None:
        runner = self._runner(lambda expr: Unresolved())
        assert isinstance(runner, ProtocolRuleRunner)

    def test_returns_term_and_query_range(self, default_catalog: PatternCatalog) -> None:
        runner = self._runner(lambda expr: Resolved(value=str(expr.value)))
        rule = RuleNrqlGapFilling(default_catalog)
        [resource] = runner.get_resource_content(
            "newrelic_nrql_alert_condition", build_nrql_condition_schema()
        )
        result = find_intermittent_query(rule, runner, resource)
        assert result is not None
        assert result.term == "TransactionError"
        assert str(result.query_range) == "resource.tf:9,13-78"
        assert runner.issues == []

    def test_unresolved_query_returns_none_silently(
        self, default_catalog: PatternCatalog
    ) -> None:
        runner = self._runner(lambda expr: Unresolved(reason="unknown"))
        rule = RuleNrqlSignalLoss(default_catalog)
        rule.check(runner)
        assert runner.issues == []
        assert len(runner.evaluated) == 1

    def test_runner_errors_propagate(self, default_catalog: PatternCatalog) -> None:
        def failing(expr):
            raise ConfigurationAccessError("document vanished")

        runner = self._runner(failing)
        with pytest.raises(ConfigurationAccessError, match="document vanished"):
            RuleNrqlGapFilling(default_catalog).check(runner)

    def test_requests_only_alert_conditions(
        self, default_catalog: PatternCatalog
    ) -> None:
        runner = self._runner(lambda expr: Resolved(value="SELECT 1 FROM Log"))
        RuleNrqlSignalLoss(default_catalog).check(runner)
        assert runner.requested_types == ["newrelic_nrql_alert_condition"]
