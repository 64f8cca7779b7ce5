"""Intermittent-source catalog."""

from alertlint.catalog.pattern_catalog import PatternCatalog

__all__ = ["PatternCatalog"]
