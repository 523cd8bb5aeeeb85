"""Walk host syntax trees and rewrite every class-bearing attribute in place."""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

from bs4 import BeautifulSoup

from tailwind_groups.adapters.base import AttributeAdapter
from tailwind_groups.adapters.mapping import MappingAdapter
from tailwind_groups.adapters.soup import SoupAdapter, SoupAttribute
from tailwind_groups.config import FormatOptions, coerce_options
from tailwind_groups.errors import UnsupportedShapeError
from tailwind_groups.locator import AttributeLocator
from tailwind_groups.rewriters import rewrite_value

logger = logging.getLogger(__name__)

MAX_DEPTH = 512

# Keys holding a node's attribute list (prettier HTML/Vue, Svelte, JSX).
ATTRIBUTE_LISTS = ("attrs", "attributes")
# Back-references some parsers attach; following them only revisits nodes.
SKIP_KEYS = frozenset({"parent"})


class TreeWalker:
    """Rewrite class attributes of a caller-owned tree.

    When ``layout_by_printer`` is set the host printer lays out multi-line
    classes through the print hook, so plain strings are written back on a
    single line. JSX ``className`` values are always single-line.
    """

    def __init__(
        self,
        options: FormatOptions | Mapping[str, Any] | None = None,
        *,
        layout_by_printer: bool = False,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        self.options = coerce_options(options)
        self.layout_by_printer = layout_by_printer
        self.max_depth = max_depth

    def rewrite_attribute(
        self, attr: Any, adapter: AttributeAdapter, *, multiline: bool | None = None
    ) -> bool:
        """Rewrite one attribute; return True if its value changed."""
        if multiline is None:
            multiline = self.options.multiline and not self.layout_by_printer
        located = AttributeLocator(adapter).locate(attr)
        if located is None:
            return False
        new_value = rewrite_value(located.value, self.options.group_order, multiline)
        if new_value == located.value:
            return False
        try:
            adapter.write_value(attr, new_value)
        except UnsupportedShapeError as e:
            logger.debug("Could not write %s back: %s", located.name, e)
            return False
        logger.debug("Rewrote %s attribute", located.name)
        return True

    # ---- dict/list trees ----

    def walk(self, tree: Any) -> Any:
        """Rewrite every class attribute in a dict/list tree and return it."""
        adapter = MappingAdapter()
        stack: list[tuple[Any, int, bool]] = [(tree, 0, False)]
        seen: set[int] = set()
        warned = False
        while stack:
            node, depth, is_attribute = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            if depth > self.max_depth:
                if not warned:
                    logger.warning("Tree deeper than %d levels; skipping nested nodes", self.max_depth)
                    warned = True
                continue

            if isinstance(node, list):
                stack.extend((child, depth + 1, False) for child in reversed(node) if _is_container(child))
                continue
            if not isinstance(node, MutableMapping):
                continue

            is_jsx = node.get("type") == "JSXAttribute"
            if is_attribute or is_jsx:
                self.rewrite_attribute(node, adapter, multiline=False if is_jsx else None)

            children: list[tuple[Any, int, bool]] = []
            for key, child in node.items():
                if key in SKIP_KEYS or not _is_container(child):
                    continue
                if key in ATTRIBUTE_LISTS and isinstance(child, list):
                    seen.add(id(child))
                    children.extend((attr, depth + 1, True) for attr in child if _is_container(attr))
                else:
                    children.append((child, depth + 1, False))
            stack.extend(reversed(children))
        return tree

    # ---- BeautifulSoup trees ----

    def walk_soup(self, soup: BeautifulSoup, dialect: str = "html") -> BeautifulSoup:
        """Rewrite every class attribute of every tag in *soup* and return it."""
        adapter = SoupAdapter(dialect)
        for tag in soup.find_all(True):
            for name in list(tag.attrs):
                self.rewrite_attribute(SoupAttribute(tag, name), adapter)
        return soup


def _is_container(value: Any) -> bool:
    return isinstance(value, (list, MutableMapping))
