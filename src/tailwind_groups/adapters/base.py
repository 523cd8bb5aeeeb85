"""Adapter protocol between host syntax trees and the attribute locator."""

from __future__ import annotations

from typing import Any, Protocol, Union

from tailwind_groups.model.values import AttributeValue, Dynamic, Literal

# What an adapter hands the locator: a plain string, or literal/dynamic parts.
RawValue = Union[str, list[Union[Literal, Dynamic]]]


class AttributeAdapter(Protocol):
    """Read and write one host attribute node.

    ``read_value`` raises UnsupportedShapeError for values it cannot express
    as a string or a part list. ``write_value`` receives a value of the shape
    the locator derived from ``read_value``.
    """

    def read_name(self, attr: Any) -> str | None: ...

    def read_value(self, attr: Any) -> RawValue: ...

    def write_value(self, attr: Any, value: AttributeValue) -> None: ...
