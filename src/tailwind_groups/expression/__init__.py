from tailwind_groups.expression.generator import (
    compact,
    generate_array,
    generate_object,
    quote_literal,
)
from tailwind_groups.expression.parser import (
    ArrayElement,
    ObjectEntry,
    ParsedExpression,
    find_literals,
    parse_expression,
)

__all__ = [
    "parse_expression",
    "find_literals",
    "ParsedExpression",
    "ArrayElement",
    "ObjectEntry",
    "compact",
    "quote_literal",
    "generate_array",
    "generate_object",
]
