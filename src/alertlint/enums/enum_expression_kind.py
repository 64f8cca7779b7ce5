"""EnumExpressionKind - shapes of attribute expressions."""

from __future__ import annotations

from enum import Enum


class EnumExpressionKind(str, Enum):
    """Expression shapes understood by the evaluator.

    LITERAL holds a scalar known at parse time. REFERENCE names another
    value (``var.x``, ``local.y``, ``aws_instance.web.id``). TEMPLATE joins
    literal text and nested expressions (``"${var.app}-errors"``).
    """

    LITERAL = "literal"
    REFERENCE = "reference"
    TEMPLATE = "template"


__all__ = ["EnumExpressionKind"]
