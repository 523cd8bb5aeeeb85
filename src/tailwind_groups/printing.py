"""Per-attribute layout override for host printers.

The host asks for an override while printing a single attribute and falls
back to its own layout when ``None`` comes back. Nothing else about the
host's printing is affected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from tailwind_groups.adapters.base import AttributeAdapter
from tailwind_groups.adapters.soup import SoupAdapter, SoupAttribute
from tailwind_groups.config import FormatOptions, coerce_options
from tailwind_groups.grouping.grouper import group_classes
from tailwind_groups.grouping.renderer import render_groups
from tailwind_groups.locator import CLASS_ATTRIBUTES, AttributeLocator
from tailwind_groups.model.values import StringValue


@dataclass(frozen=True)
class AttributeDoc:
    """Custom layout for one class attribute."""

    name: str
    groups: tuple[str, ...]
    multiline: bool = True

    @property
    def value(self) -> str:
        return render_groups(self.groups, multiline=self.multiline)

    def render(self, quote: str = '"') -> str:
        return f"{self.name}={quote}{self.value}{quote}"


def attribute_layout_override(
    attr: Any,
    adapter: AttributeAdapter,
    options: FormatOptions | Mapping[str, Any] | None = None,
) -> AttributeDoc | None:
    """Return a custom layout for a plain class attribute, or None.

    Bindings, segmented values, dynamic values and empty class lists all
    yield None so the host prints them as usual.
    """
    located = AttributeLocator(adapter).locate(attr)
    if located is None or located.name.lower() not in CLASS_ATTRIBUTES:
        return None
    if not isinstance(located.value, StringValue):
        return None
    opts = coerce_options(options)
    groups = group_classes(located.value.text, opts.group_order)
    if not groups:
        return None
    return AttributeDoc(name=located.name, groups=tuple(groups), multiline=opts.multiline)


class ClassLayoutFormatter(HTMLFormatter):
    """BeautifulSoup formatter that lays out class attributes by group.

    Only the attribute step of printing is customized; pass an instance to
    ``soup.decode(formatter=...)`` for a single print call.
    """

    def __init__(
        self,
        options: FormatOptions | Mapping[str, Any] | None = None,
        dialect: str = "html",
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("entity_substitution", EntitySubstitution.substitute_xml)
        super().__init__(**kwargs)
        self.options = coerce_options(options)
        self.adapter = SoupAdapter(dialect)

    def attributes(self, tag):
        """Return attributes in source order; only class values are re-laid out."""
        if tag.attrs is None:
            return []
        result = []
        for key, value in tag.attrs.items():
            doc = attribute_layout_override(SoupAttribute(tag, key), self.adapter, self.options)
            if doc is not None:
                value = doc.value
            elif self.empty_attributes_are_booleans and value == "":
                value = None
            result.append((key, value))
        return result
