"""Adapter for dict-shaped syntax trees.

Covers the JSON shapes produced by the common template parsers:

- HTML / Vue (prettier's angular-html-parser): ``{"name": "class", "value": "p-2 flex"}``
- Svelte: ``{"name": "class", "value": [{"type": "Text", "data": ...}, {"type": "MustacheTag", ...}]}``
- ESTree / Babel JSX: ``{"type": "JSXAttribute", "name": {"name": "className"}, "value": ...}``
"""

from __future__ import annotations

from typing import Any, Callable, MutableMapping

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

_STRING_LITERAL_TYPES = ("Literal", "StringLiteral", "JSXText")

Setter = Callable[[str], None]


def _is_text_part(part: Any) -> bool:
    if not isinstance(part, MutableMapping):
        return False
    if part.get("type") not in (None, "Text"):
        return False
    return isinstance(part.get("data"), str) or isinstance(part.get("raw"), str)


def _text_of(part: MutableMapping[str, Any]) -> str:
    data = part.get("data")
    return data if isinstance(data, str) else part["raw"]


def _set_text_part(part: MutableMapping[str, Any]) -> Setter:
    def setter(text: str) -> None:
        if "data" in part:
            part["data"] = text
        if "raw" in part:
            part["raw"] = text

    return setter


def _set_string_literal(node: MutableMapping[str, Any]) -> Setter:
    def setter(text: str) -> None:
        node["value"] = text
        raw = node.get("raw")
        if isinstance(raw, str) and raw[:1] in ("'", '"'):
            node["raw"] = raw[0] + text + raw[0]
        extra = node.get("extra")
        if isinstance(extra, MutableMapping) and isinstance(extra.get("raw"), str):
            quote = extra["raw"][:1] or '"'
            extra["raw"] = quote + text + quote
            extra["rawValue"] = text

    return setter


def _template_raw(text: str) -> str:
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def _set_quasi(quasi: MutableMapping[str, Any]) -> Setter:
    def setter(text: str) -> None:
        quasi["value"] = {"raw": _template_raw(text), "cooked": text}

    return setter


def _set_list_item(items: list[Any], index: int) -> Setter:
    def setter(text: str) -> None:
        items[index] = text

    return setter


def _set_key(node: MutableMapping[str, Any], key: str) -> Setter:
    def setter(text: str) -> None:
        node[key] = text

    return setter


class MappingAdapter:
    """Read/write class attributes stored in plain dicts and lists."""

    def read_name(self, attr: Any) -> str | None:
        if not isinstance(attr, MutableMapping):
            return None
        name = attr.get("name")
        if isinstance(name, MutableMapping):
            # JSXIdentifier, or JSXNamespacedName for ``ns:name``
            if name.get("type") == "JSXNamespacedName":
                return f"{name['namespace']['name']}:{name['name']['name']}"
            name = name.get("name")
        # ESTree ImportAttribute and similar nodes carry an Identifier dict as key.
        return next(
            (n for n in (name, attr.get("rawName"), attr.get("key")) if isinstance(n, str) and n),
            None,
        )

    # ---- reading ----

    def read_value(self, attr: Any) -> RawValue:
        value = attr.get("value")
        if isinstance(value, str):
            return value
        if isinstance(value, list):
            return self._read_parts(value)
        if isinstance(value, MutableMapping):
            if value.get("type") == "JSXExpressionContainer":
                return self._read_expression(value.get("expression"))
            if isinstance(value.get("value"), str):
                return value["value"]
        raise UnsupportedShapeError(f"Unsupported attribute value: {type(value).__name__}")

    @staticmethod
    def _read_parts(parts: list[Any]) -> RawValue:
        result: list[Literal | Dynamic] = []
        for part in parts:
            if isinstance(part, str):
                result.append(Literal(part))
            elif _is_text_part(part):
                result.append(Literal(_text_of(part)))
            else:
                result.append(Dynamic(part))
        return result

    @staticmethod
    def _read_expression(expression: Any) -> RawValue:
        if not isinstance(expression, MutableMapping):
            raise UnsupportedShapeError("JSX expression container without expression")
        kind = expression.get("type")
        if kind in _STRING_LITERAL_TYPES and isinstance(expression.get("value"), str):
            return expression["value"]
        if kind == "TemplateLiteral":
            quasis = expression.get("quasis") or []
            expressions = expression.get("expressions") or []
            parts: list[Literal | Dynamic] = []
            for i, quasi in enumerate(quasis):
                cooked = quasi["value"].get("cooked")
                parts.append(Literal(cooked if isinstance(cooked, str) else quasi["value"]["raw"]))
                if i < len(expressions):
                    parts.append(Dynamic(expressions[i]))
            return parts
        raise UnsupportedShapeError(f"Unsupported JSX expression: {kind}")

    # ---- writing ----

    def _literal_setters(self, attr: MutableMapping[str, Any]) -> list[Setter]:
        """Return one setter per literal slot, in the order read_value yields them."""
        value = attr.get("value")
        if isinstance(value, str):
            return [_set_key(attr, "value")]
        if isinstance(value, list):
            setters: list[Setter] = []
            for i, part in enumerate(value):
                if isinstance(part, str):
                    setters.append(_set_list_item(value, i))
                elif _is_text_part(part):
                    setters.append(_set_text_part(part))
            return setters
        if isinstance(value, MutableMapping):
            if value.get("type") == "JSXExpressionContainer":
                expression = value["expression"]
                if expression.get("type") == "TemplateLiteral":
                    return [_set_quasi(q) for q in expression.get("quasis") or []]
                return [_set_string_literal(expression)]
            return [_set_string_literal(value)]
        raise UnsupportedShapeError(f"Unsupported attribute value: {type(value).__name__}")

    def write_value(self, attr: Any, value: AttributeValue) -> None:
        setters = self._literal_setters(attr)
        if isinstance(value, SegmentedValue):
            texts = [p.text for p in value.parts if isinstance(p, Literal)]
            if len(texts) != len(setters):
                raise UnsupportedShapeError("Segment count changed between read and write")
            for setter, text in zip(setters, texts):
                setter(text)
            return
        if isinstance(value, (StringValue, ExpressionValue)):
            text = value.text if isinstance(value, StringValue) else value.source
            # An all-literal part list was read as one string; keep its slots.
            for i, setter in enumerate(setters):
                setter(text if i == 0 else "")
            return
        raise TypeError(f"Unknown attribute value type: {type(value).__name__}")
