"""Adapter for BeautifulSoup trees (HTML, Vue and Svelte markup)."""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import Tag

from tailwind_groups.adapters.base import RawValue
from tailwind_groups.errors import UnsupportedShapeError
from tailwind_groups.model.values import (
    AttributeValue,
    Dynamic,
    ExpressionValue,
    Literal,
    SegmentedValue,
    StringValue,
)

DIALECTS = ("html", "vue", "svelte")


@dataclass(frozen=True)
class SoupAttribute:
    """Handle for one attribute of a BeautifulSoup tag."""

    tag: Tag
    name: str


def split_mustache(text: str) -> list[Literal | Dynamic]:
    """Split Svelte-style ``{expr}`` interpolations out of attribute text.

    Braces inside quoted strings within an interpolation are skipped.
    Raises UnsupportedShapeError for unbalanced braces.
    """
    parts: list[Literal | Dynamic] = []
    literal_start = 0
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "}":
            raise UnsupportedShapeError(f"Unbalanced '}}' at offset {i}")
        if ch != "{":
            i += 1
            continue
        depth = 0
        quote: str | None = None
        j = i
        while j < len(text):
            c = text[j]
            if quote:
                if c == "\\":
                    j += 1
                elif c == quote:
                    quote = None
            elif c in "'\"`":
                quote = c
            elif c == "{":
                depth += 1
            elif c == "}":
                depth -= 1
                if depth == 0:
                    break
            j += 1
        else:
            raise UnsupportedShapeError(f"Unterminated '{{' at offset {i}")
        if literal_start < i:
            parts.append(Literal(text[literal_start:i]))
        parts.append(Dynamic(text[i:j + 1]))
        i = literal_start = j + 1
    if literal_start < len(text):
        parts.append(Literal(text[literal_start:]))
    return parts


class SoupAdapter:
    """Read/write attributes of BeautifulSoup tags via SoupAttribute handles."""

    def __init__(self, dialect: str = "html") -> None:
        if dialect not in DIALECTS:
            raise ValueError(f"Unknown markup dialect: {dialect!r} (expected one of {DIALECTS})")
        self.dialect = dialect

    def read_name(self, attr: SoupAttribute) -> str | None:
        return attr.name

    def read_value(self, attr: SoupAttribute) -> RawValue:
        value = attr.tag.get(attr.name)
        if isinstance(value, list):
            # Tree parsed with multi-valued attributes enabled.
            value = " ".join(value)
        if not isinstance(value, str):
            raise UnsupportedShapeError(f"Unsupported attribute value: {type(value).__name__}")
        if self.dialect == "svelte" and ("{" in value or "}" in value):
            return split_mustache(value)
        return value

    def write_value(self, attr: SoupAttribute, value: AttributeValue) -> None:
        if isinstance(value, StringValue):
            attr.tag[attr.name] = value.text
        elif isinstance(value, ExpressionValue):
            attr.tag[attr.name] = value.source
        elif isinstance(value, SegmentedValue):
            attr.tag[attr.name] = "".join(
                p.text if isinstance(p, Literal) else str(p.source) for p in value.parts
            )
        else:
            raise TypeError(f"Unknown attribute value type: {type(value).__name__}")
