from tailwind_groups.grouping.classifier import base_class, classify
from tailwind_groups.grouping.grouper import (
    bucket_classes,
    group_classes,
    order_classes,
    split_classes,
)
from tailwind_groups.grouping.order import resolve_group_order
from tailwind_groups.grouping.renderer import format_class_list, render_groups

__all__ = [
    "base_class",
    "classify",
    "resolve_group_order",
    "split_classes",
    "bucket_classes",
    "order_classes",
    "group_classes",
    "render_groups",
    "format_class_list",
]
