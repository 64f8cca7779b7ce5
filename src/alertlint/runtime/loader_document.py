# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Configuration document loading.

Reads parsed configuration documents from YAML or JSON files (JSON is a
subset of YAML, so both go through ``yaml.safe_load``) and validates them
into ``ModelConfigDocument``. Any failure is a ``ConfigurationAccessError``
naming the file and, for schema problems, the offending field.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from alertlint.constants import DOCUMENT_KEYS
from alertlint.exceptions import ConfigurationAccessError
from alertlint.models.model_config_document import ModelConfigDocument

logger = logging.getLogger(__name__)


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Render pydantic errors as ``field: message`` lines."""
    lines: list[str] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc) if loc else "root"
        lines.append(f"{field_path}: {error.get('msg', 'Validation error')}")
    return lines


def read_yaml_mapping(path: Path) -> dict[str, Any] | None:
    """Read a YAML file and return its top-level mapping.

    Returns:
        The mapping, or None for an empty file.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the top level is not a mapping.
    """
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return None
    if not isinstance(data, dict):
        raise TypeError(
            f"top level must be a mapping (key: value pairs), got {type(data).__name__}"
        )
    return data


def load_document(path: Path) -> ModelConfigDocument:
    """Load one configuration document.

    When the document does not state ``filename``, the file's own path is
    used so findings still point somewhere meaningful.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` document.

    Returns:
        The validated document.

    Raises:
        ConfigurationAccessError: If the file is unreadable, not YAML/JSON,
            or does not match the document schema.
    """
    try:
        data = read_yaml_mapping(path)
    except OSError as e:
        raise ConfigurationAccessError(f"Cannot read document '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationAccessError(f"Invalid YAML in document '{path}': {e}") from e
    except TypeError as e:
        raise ConfigurationAccessError(f"Invalid document '{path}': {e}") from e

    return _validate_document(path, data or {})


def _validate_document(path: Path, data: dict[str, Any]) -> ModelConfigDocument:
    data = dict(data)
    data.setdefault("filename", str(path))

    try:
        document = ModelConfigDocument.model_validate(data)
    except ValidationError as e:
        details = "; ".join(format_validation_errors(e))
        raise ConfigurationAccessError(f"Invalid document '{path}': {details}") from e

    logger.debug(
        "Loaded %s with %d resource declarations", path, len(document.resources)
    )
    return document


def load_document_if_recognized(path: Path) -> ModelConfigDocument | None:
    """Load a file found by a directory scan, skipping unrelated files.

    Directories routinely hold YAML and JSON that are not configuration
    documents, such as compose files or package manifests. A file is
    only treated as a document when its top level is a non-empty mapping
    whose keys are all document keys; everything else is skipped and logged
    at DEBUG. A recognized document is validated as strictly as
    ``load_document``.

    Returns:
        The validated document, or None when the file is not a document.

    Raises:
        ConfigurationAccessError: If the file is unreadable, or is
            recognized as a document but does not match the schema.
    """
    try:
        data = read_yaml_mapping(path)
    except OSError as e:
        raise ConfigurationAccessError(f"Cannot read document '{path}': {e}") from e
    except (yaml.YAMLError, TypeError) as e:
        logger.debug("Skipping %s: not a YAML/JSON mapping (%s)", path, e)
        return None

    if not data:
        logger.debug("Skipping %s: empty file", path)
        return None
    unknown_keys = set(data).difference(DOCUMENT_KEYS)
    if unknown_keys:
        logger.debug(
            "Skipping %s: not a configuration document (keys %s)",
            path,
            sorted(str(key) for key in unknown_keys),
        )
        return None

    return _validate_document(path, data)


def load_documents(paths: Iterable[Path]) -> list[ModelConfigDocument]:
    """Load documents in the given order; the first failure aborts."""
    return [load_document(path) for path in paths]


__all__ = [
    "format_validation_errors",
    "load_document",
    "load_document_if_recognized",
    "load_documents",
    "read_yaml_mapping",
]
