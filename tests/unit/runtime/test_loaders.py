"""Unit tests for document and configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from alertlint.constants import DEFAULT_INTERMITTENT_SOURCES
from alertlint.exceptions import ConfigurationAccessError, RulesetConfigError
from alertlint.runtime import (
    load_document,
    load_document_if_recognized,
    load_documents,
    load_ruleset_config,
)

pytestmark = pytest.mark.unit


class TestLoadDocument:
    def test_yaml_document(self, fixtures_dir: Path) -> None:
        document = load_document(fixtures_dir / "documents" / "alerts.yaml")
        assert document.filename == "alerts.tf"
        assert document.variables == {"app_name": "Bauhaus"}
        [resource] = document.resources
        assert resource.name == "transaction_errors"
        assert [block.type for block in resource.blocks] == ["nrql", "critical"]

    def test_json_document(self, fixtures_dir: Path) -> None:
        document = load_document(fixtures_dir / "documents" / "nested" / "steady.json")
        assert document.filename == "steady.tf"

    def test_filename_defaults_to_path(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.yaml"
        path.write_text("resources: []\n")
        assert load_document(path).filename == str(path)

    def test_empty_file_is_empty_document(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        document = load_document(path)
        assert document.resources == []

    def test_schema_error_names_field(self, fixtures_dir: Path) -> None:
        with pytest.raises(ConfigurationAccessError) as exc_info:
            load_document(fixtures_dir / "invalid" / "bad_range.yaml")
        assert exc_info.value.code == "ALERTLINT_002"
        assert "resources.0.def_range" in exc_info.value.message

    def test_invalid_yaml(self, fixtures_dir: Path) -> None:
        with pytest.raises(ConfigurationAccessError, match="Invalid YAML"):
            load_document(fixtures_dir / "invalid" / "not_yaml.yaml")

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationAccessError, match="must be a mapping"):
            load_document(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationAccessError, match="Cannot read"):
            load_document(tmp_path / "absent.yaml")

    def test_load_documents_keeps_order(self, fixtures_dir: Path) -> None:
        paths = [
            fixtures_dir / "documents" / "compliant.yml",
            fixtures_dir / "documents" / "alerts.yaml",
        ]
        assert [d.filename for d in load_documents(paths)] == [
            "compliant.tf",
            "alerts.tf",
        ]


class TestLoadRulesetConfig:
    def test_valid_config(self, fixtures_dir: Path) -> None:
        config = load_ruleset_config(fixtures_dir / "config" / "valid.yaml")
        assert config.is_rule_enabled("newrelic_nrql_signal_loss", True) is False
        assert config.is_rule_enabled("newrelic_nrql_gap_filling", True) is True
        assert config.intermittent_sources == ["TransactionError", "SyntheticCheck"]
        assert config.variables == {"app_name": "Bauhaus"}

    def test_missing_optional_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_ruleset_config(tmp_path / ".alertlint.yaml")
        assert config.intermittent_sources == list(DEFAULT_INTERMITTENT_SOURCES)
        assert config.rules == {}

    def test_missing_required_file(self, tmp_path: Path) -> None:
        with pytest.raises(RulesetConfigError, match="not found"):
            load_ruleset_config(tmp_path / "absent.yaml", required=True)

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_ruleset_config(path).version == "1.0"

    def test_unknown_rule_lists_valid_ids(self, fixtures_dir: Path) -> None:
        with pytest.raises(RulesetConfigError) as exc_info:
            load_ruleset_config(fixtures_dir / "config" / "unknown_rule.yaml")
        [error] = exc_info.value.errors
        assert error.startswith("rules.newrelic_nrql_gap_fill: Unknown rule id")
        assert "newrelic_nrql_gap_filling" in error

    def test_empty_catalog_rejected(self, fixtures_dir: Path) -> None:
        with pytest.raises(RulesetConfigError) as exc_info:
            load_ruleset_config(fixtures_dir / "config" / "empty_catalog.yaml")
        assert exc_info.value.code == "ALERTLINT_004"
        assert exc_info.value.errors[0].startswith("intermittent_sources:")

    def test_blank_catalog_entry_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "blank.yaml"
        path.write_text("intermittent_sources:\n  - TransactionError\n  - '  '\n")
        with pytest.raises(RulesetConfigError, match="must not be blank"):
            load_ruleset_config(path)

    def test_bad_version_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "version.yaml"
        path.write_text("version: latest\n")
        with pytest.raises(RulesetConfigError, match="semver"):
            load_ruleset_config(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("rules: [unclosed\n")
        with pytest.raises(RulesetConfigError, match="Invalid YAML"):
            load_ruleset_config(path)


class TestLoadDocumentIfRecognized:
    @pytest.mark.parametrize(
        ("name", "content"),
        [
            ("docker-compose.yml", "services:\n  web:\n    image: nginx\n"),
            ("package.json", '{"name": "app", "version": "1.0.0"}'),
            ("list.yaml", "- a\n- b\n"),
            ("template.yaml", "key: {{ .Values.key }}\n  broken: ["),
            ("empty.yaml", ""),
            ("mixed.yaml", "filename: a.tf\nservices: {}\n"),
        ],
    )
    def test_unrelated_files_are_skipped(
        self, tmp_path: Path, name: str, content: str
    ) -> None:
        path = tmp_path / name
        path.write_text(content)
        assert load_document_if_recognized(path) is None

    def test_document_is_loaded(self, fixtures_dir: Path) -> None:
        document = load_document_if_recognized(fixtures_dir / "documents" / "alerts.yaml")
        assert document is not None
        assert document.filename == "alerts.tf"

    def test_variables_only_document_is_loaded(self, tmp_path: Path) -> None:
        path = tmp_path / "variables.yaml"
        path.write_text("variables:\n  fill: static\n")
        document = load_document_if_recognized(path)
        assert document is not None
        assert document.variables == {"fill": "static"}

    def test_recognized_but_invalid_document_still_fails(
        self, fixtures_dir: Path
    ) -> None:
        with pytest.raises(ConfigurationAccessError, match="resources.0.def_range"):
            load_document_if_recognized(fixtures_dir / "invalid" / "bad_range.yaml")
