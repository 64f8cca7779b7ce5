# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""EnumRuleSeverity - severity tiers for reported findings."""

from __future__ import annotations

from enum import Enum


class EnumRuleSeverity(str, Enum):
    """Severity levels for findings.

    Values are UPPER_CASE so they read the same in text and JSON output.

    - ERROR findings indicate a configuration that will misbehave
    - WARNING findings indicate a likely problem
    - NOTICE findings are informational only
    """

    ERROR = "ERROR"
    WARNING = "WARNING"
    NOTICE = "NOTICE"


__all__ = ["EnumRuleSeverity"]
