"""Attribute value shapes: the closed set of forms a class value can take."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


@dataclass(frozen=True)
class Literal:
    """Statically known text inside a segmented value."""

    text: str


@dataclass(frozen=True)
class Dynamic:
    """Opaque dynamic content (a mustache tag, a template expression, ...)."""

    source: Any = None


@dataclass(frozen=True)
class StringValue:
    """A plain, fully literal class list."""

    text: str


@dataclass(frozen=True)
class SegmentedValue:
    """Interleaved literal and dynamic parts, in source order."""

    parts: tuple[Literal | Dynamic, ...]

    @property
    def has_literal(self) -> bool:
        return any(isinstance(p, Literal) for p in self.parts)


class ExpressionKind(Enum):
    """Top-level form of a class-binding expression."""

    ARRAY = "array"
    OBJECT = "object"
    # Ternary, logical or parenthesized expression around array/object literals.
    NESTED = "nested"


@dataclass(frozen=True)
class ExpressionValue:
    """Raw source of a class binding."""

    kind: ExpressionKind
    source: str


AttributeValue = Union[StringValue, SegmentedValue, ExpressionValue]
