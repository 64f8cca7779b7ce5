"""Test helpers for rules: builders, fake hosts and finding assertions."""

from alertlint.testing.assertions import ExpectedFinding, assert_findings
from alertlint.testing.builders import (
    DEFAULT_DEF_RANGE,
    DEFAULT_FILENAME,
    DEFAULT_QUERY_RANGE,
    literal,
    make_block,
    make_document,
    make_nrql_condition,
    make_range,
    reference,
    template,
)
from alertlint.testing.fake_runner import FakeRuleRunner, run_rule

__all__ = [
    "DEFAULT_DEF_RANGE",
    "DEFAULT_FILENAME",
    "DEFAULT_QUERY_RANGE",
    "ExpectedFinding",
    "FakeRuleRunner",
    "assert_findings",
    "literal",
    "make_block",
    "make_document",
    "make_nrql_condition",
    "make_range",
    "reference",
    "template",
    "run_rule",
]
