"""Decide whether an attribute carries classes, and which value shape it has."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from tailwind_groups.adapters.base import AttributeAdapter
from tailwind_groups.errors import UnsupportedShapeError
from tailwind_groups.model.values import (
    AttributeValue,
    Dynamic,
    ExpressionKind,
    ExpressionValue,
    Literal,
    SegmentedValue,
    StringValue,
)

logger = logging.getLogger(__name__)

# Compared case-insensitively: html.parser lowercases attribute names.
CLASS_ATTRIBUTES = frozenset({"class", "classname"})
BINDING_ATTRIBUTES = frozenset({":class", "v-bind:class", "[class]", "[ngclass]"})


def is_literal_class_value(value: object) -> bool:
    """True for a string with no interpolation braces."""
    return isinstance(value, str) and "{" not in value and "}" not in value


def expression_kind(source: str) -> ExpressionKind | None:
    """Classify binding source by its outer delimiters.

    Any other non-empty source is NESTED: literals may sit inside a wrapping
    expression.
    """
    stripped = source.strip()
    if not stripped:
        return None
    if stripped.startswith("[") and stripped.endswith("]"):
        return ExpressionKind.ARRAY
    if stripped.startswith("{") and stripped.endswith("}"):
        return ExpressionKind.OBJECT
    return ExpressionKind.NESTED


@dataclass(frozen=True)
class Located:
    """A class-bearing attribute and its value shape."""

    name: str
    value: AttributeValue

    @property
    def is_binding(self) -> bool:
        return isinstance(self.value, ExpressionValue)


class AttributeLocator:
    """Find class-bearing attributes through an AttributeAdapter."""

    def __init__(self, adapter: AttributeAdapter) -> None:
        self.adapter = adapter

    def is_class_attribute(self, attr: Any) -> bool:
        name = self.adapter.read_name(attr)
        return isinstance(name, str) and name.lower() in CLASS_ATTRIBUTES | BINDING_ATTRIBUTES

    def locate(self, attr: Any) -> Located | None:
        """Return the attribute's shape, or None when it must be left alone.

        None covers non-class attributes as well as values that are fully
        dynamic or of an unsupported shape.
        """
        name = self.adapter.read_name(attr)
        if not name or not isinstance(name, str):
            return None
        key = name.lower()
        if key not in CLASS_ATTRIBUTES and key not in BINDING_ATTRIBUTES:
            return None
        try:
            raw = self.adapter.read_value(attr)
        except UnsupportedShapeError as e:
            logger.debug("Treating %s as dynamic: %s", name, e)
            return None

        if key in BINDING_ATTRIBUTES:
            value = self._binding_value(raw)
        else:
            value = self._class_value(raw)
        return Located(name, value) if value is not None else None

    @staticmethod
    def _class_value(raw: object) -> AttributeValue | None:
        if isinstance(raw, str):
            return StringValue(raw) if is_literal_class_value(raw) else None
        if not isinstance(raw, list):
            return None
        if all(isinstance(p, Literal) for p in raw):
            text = "".join(p.text for p in raw)
            return StringValue(text) if is_literal_class_value(text) else None
        if not any(isinstance(p, Literal) for p in raw):
            return None
        if any(not isinstance(p, (Literal, Dynamic)) for p in raw):
            return None
        return SegmentedValue(tuple(raw))

    @staticmethod
    def _binding_value(raw: object) -> AttributeValue | None:
        if not isinstance(raw, str):
            return None
        kind = expression_kind(raw)
        if kind is None:
            return None
        return ExpressionValue(kind=kind, source=raw)
