"""Value rewriters: exactly one handler per attribute value shape."""

from __future__ import annotations

from typing import Sequence

from tailwind_groups.config import FormatOptions
from tailwind_groups.grouping.renderer import format_class_list
from tailwind_groups.model.values import (
    AttributeValue,
    ExpressionValue,
    SegmentedValue,
    StringValue,
)
from tailwind_groups.rewriters.expression import rewrite_expression
from tailwind_groups.rewriters.segments import rewrite_segments

__all__ = [
    "rewrite_value",
    "rewrite_string",
    "rewrite_segments",
    "rewrite_expression",
]


def rewrite_string(
    value: StringValue,
    group_order: Sequence[str] | str | None = None,
    multiline: bool = False,
) -> StringValue:
    text = format_class_list(
        value.text, FormatOptions(multiline=multiline, group_order=group_order)
    )
    if text == value.text:
        return value
    return StringValue(text)


def rewrite_value(
    value: AttributeValue,
    group_order: Sequence[str] | str | None = None,
    multiline: bool = False,
) -> AttributeValue:
    """Dispatch *value* to the rewriter for its shape."""
    if isinstance(value, StringValue):
        return rewrite_string(value, group_order, multiline)
    if isinstance(value, SegmentedValue):
        return rewrite_segments(value, group_order)
    if isinstance(value, ExpressionValue):
        return rewrite_expression(value, group_order)
    raise TypeError(f"Unknown attribute value type: {type(value).__name__}")
