"""Model layer -- public type re-exports."""

from tailwind_groups.model.groups import (
    DEFAULT_GROUP_ORDER,
    GROUP_NAMES,
    GROUPS,
    OTHER,
    Group,
)
from tailwind_groups.model.values import (
    AttributeValue,
    Dynamic,
    ExpressionKind,
    ExpressionValue,
    Literal,
    SegmentedValue,
    StringValue,
)

__all__ = [
    # groups
    "Group",
    "GROUPS",
    "GROUP_NAMES",
    "DEFAULT_GROUP_ORDER",
    "OTHER",
    # values
    "AttributeValue",
    "Literal",
    "Dynamic",
    "StringValue",
    "SegmentedValue",
    "ExpressionKind",
    "ExpressionValue",
]
