"""Turn ordered group strings into attribute text."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from tailwind_groups.config import FormatOptions, coerce_options
from tailwind_groups.grouping.grouper import group_classes

INDENT = "  "


def render_groups(groups: Sequence[str], multiline: bool = True) -> str:
    """Render group strings on one line, or one group per indented line."""
    if not multiline:
        return " ".join(groups)
    return "\n" + "".join(f"{INDENT}{group}\n" for group in groups)


def format_class_list(
    class_list: str | None,
    options: FormatOptions | Mapping[str, Any] | None = None,
) -> str | None:
    """Group, sort and render *class_list*.

    Empty or whitespace-only input is returned as given.
    """
    opts = coerce_options(options)
    groups = group_classes(class_list, opts.group_order)
    if not groups:
        return class_list
    return render_groups(groups, multiline=opts.multiline)
