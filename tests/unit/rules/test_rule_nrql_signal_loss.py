"""Unit tests for the newrelic_nrql_signal_loss rule."""

from __future__ import annotations

import pytest

from alertlint.rules import RuleNrqlSignalLoss
from alertlint.testing import (
    assert_findings,
    make_document,
    make_nrql_condition,
    run_rule,
)

pytestmark = pytest.mark.unit

RULE = "newrelic_nrql_signal_loss"
INTERMITTENT_QUERY = "SELECT count(*) FROM TransactionError WHERE appName = 'Bauhaus'"
QUERY_RANGE = "resource.tf:9,13-78"


def _missing(attribute: str, term: str = "TransactionError") -> str:
    return (
        f"`{attribute}` must be set when using intermittent data sources like "
        f"'{term}' in `newrelic_nrql_alert_condition`."
    )


class TestSignalLossFindings:
    def test_missing_ignore_on_expected_termination(self) -> None:
        document = make_document(
            make_nrql_condition(
                "test_condition_missing_ignore",
                query=INTERMITTENT_QUERY,
                attributes={"close_violations_on_expiration": True},
            )
        )
        findings = run_rule(RuleNrqlSignalLoss, [document])
        assert_findings(
            findings,
            [(RULE, _missing("ignore_on_expected_termination"), QUERY_RANGE)],
        )

    def test_missing_close_violations_on_expiration(self) -> None:
        document = make_document(
            make_nrql_condition(
                "test_condition_missing_close",
                query=INTERMITTENT_QUERY,
                attributes={"ignore_on_expected_termination": True},
            )
        )
        findings = run_rule(RuleNrqlSignalLoss, [document])
        assert_findings(
            findings,
            [(RULE, _missing("close_violations_on_expiration"), QUERY_RANGE)],
        )

    def test_both_missing_reports_only_first(self) -> None:
        document = make_document(make_nrql_condition(query=INTERMITTENT_QUERY))
        findings = run_rule(RuleNrqlSignalLoss, [document])
        assert_findings(
            findings,
            [(RULE, _missing("ignore_on_expected_termination"), QUERY_RANGE)],
        )

    def test_multi_word_source_term(self) -> None:
        query = (
            "SELECT count(*) FROM Transaction "
            "WHERE transactionName = 'Controller/Rack/get'"
        )
        document = make_document(make_nrql_condition(query=query))
        [finding] = run_rule(RuleNrqlSignalLoss, [document])
        assert finding.message == _missing(
            "ignore_on_expected_termination",
            "transactionName = 'Controller/Rack/get'",
        )


class TestSignalLossCompliant:
    def test_both_attributes_present(self) -> None:
        document = make_document(
            make_nrql_condition(
                "test_condition_valid_signal_loss",
                query=INTERMITTENT_QUERY,
                attributes={
                    "ignore_on_expected_termination": True,
                    "close_violations_on_expiration": True,
                },
            )
        )
        assert run_rule(RuleNrqlSignalLoss, [document]) == []

    def test_presence_not_value_is_checked(self) -> None:
        document = make_document(
            make_nrql_condition(
                query=INTERMITTENT_QUERY,
                attributes={
                    "ignore_on_expected_termination": False,
                    "close_violations_on_expiration": False,
                },
            )
        )
        assert run_rule(RuleNrqlSignalLoss, [document]) == []

    def test_non_intermittent_query_is_ignored(self) -> None:
        document = make_document(
            make_nrql_condition(
                "non_intermittent_signal_loss",
                query="SELECT average(duration) FROM Transaction WHERE appName = 'Bauhaus'",
            )
        )
        assert run_rule(RuleNrqlSignalLoss, [document]) == []


class TestSignalLossPerDeclaration:
    def test_each_declaration_reported_once(self) -> None:
        document = make_document(
            make_nrql_condition("first", query=INTERMITTENT_QUERY),
            make_nrql_condition(
                "second",
                query=INTERMITTENT_QUERY,
                attributes={"ignore_on_expected_termination": True},
            ),
        )
        findings = run_rule(RuleNrqlSignalLoss, [document])
        assert [f.message for f in findings] == [
            _missing("ignore_on_expected_termination"),
            _missing("close_violations_on_expiration"),
        ]
