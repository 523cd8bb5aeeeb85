"""Format class attributes in HTML, Vue and Svelte markup with BeautifulSoup."""

from __future__ import annotations

from typing import Any, Mapping

from bs4 import BeautifulSoup

from tailwind_groups.config import FormatOptions, coerce_options
from tailwind_groups.printing import ClassLayoutFormatter
from tailwind_groups.walker import TreeWalker


def parse_markup(markup: str) -> BeautifulSoup:
    """Parse *markup* keeping ``class`` as a single string attribute."""
    return BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)


def format_markup(
    markup: str,
    options: FormatOptions | Mapping[str, Any] | None = None,
    dialect: str = "html",
) -> str:
    """Parse, rewrite and print *markup*.

    Tree values are normalized on one line; multi-line layout happens only
    while printing, through ClassLayoutFormatter.
    """
    opts = coerce_options(options)
    soup = parse_markup(markup)
    TreeWalker(opts, layout_by_printer=True).walk_soup(soup, dialect=dialect)
    return soup.decode(formatter=ClassLayoutFormatter(opts, dialect=dialect))
