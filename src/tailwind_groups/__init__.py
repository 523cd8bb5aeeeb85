"""tailwind_groups -- group and order utility CSS classes in markup and templates."""

from tailwind_groups.config import FormatOptions
from tailwind_groups.errors import (
    AmbiguousMatchError,
    ClassFormatError,
    ExpressionParseError,
    UnsupportedShapeError,
)
from tailwind_groups.grouping import (
    classify,
    format_class_list,
    group_classes,
    order_classes,
    render_groups,
    resolve_group_order,
)
from tailwind_groups.locator import AttributeLocator, Located, is_literal_class_value
from tailwind_groups.markup import format_markup, parse_markup
from tailwind_groups.model import DEFAULT_GROUP_ORDER, GROUPS
from tailwind_groups.printing import AttributeDoc, ClassLayoutFormatter, attribute_layout_override
from tailwind_groups.rewriters import rewrite_value
from tailwind_groups.text import format_text
from tailwind_groups.walker import TreeWalker

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # configuration
    "FormatOptions",
    "GROUPS",
    "DEFAULT_GROUP_ORDER",
    # grouping engine
    "classify",
    "resolve_group_order",
    "order_classes",
    "group_classes",
    "render_groups",
    "format_class_list",
    # attributes
    "AttributeLocator",
    "Located",
    "is_literal_class_value",
    "rewrite_value",
    # trees and printing
    "TreeWalker",
    "AttributeDoc",
    "attribute_layout_override",
    "ClassLayoutFormatter",
    # front ends
    "format_markup",
    "parse_markup",
    "format_text",
    # errors
    "ClassFormatError",
    "ExpressionParseError",
    "AmbiguousMatchError",
    "UnsupportedShapeError",
]
