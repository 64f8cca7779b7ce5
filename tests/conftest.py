"""
Pytest configuration and fixtures for alertlint tests.

Shared fixtures for rule, runtime and CLI tests.
"""

from pathlib import Path

import pytest

from alertlint.catalog import PatternCatalog
from alertlint.constants import DEFAULT_INTERMITTENT_SOURCES
from alertlint.models import ModelRulesetConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding YAML documents and configuration files."""
    return FIXTURES_DIR


@pytest.fixture
def default_catalog() -> PatternCatalog:
    """Catalog compiled from the built-in intermittent sources."""
    return PatternCatalog(DEFAULT_INTERMITTENT_SOURCES)


@pytest.fixture
def default_config() -> ModelRulesetConfig:
    """Ruleset configuration with every default."""
    return ModelRulesetConfig()
