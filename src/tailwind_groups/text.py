"""Plain-text fallback: rewrite ``class="..."`` occurrences without a parser."""

from __future__ import annotations

import re
from typing import Any, Mapping

from tailwind_groups.config import FormatOptions, coerce_options
from tailwind_groups.grouping.grouper import group_classes
from tailwind_groups.grouping.renderer import render_groups
from tailwind_groups.locator import is_literal_class_value

_CLASS_ATTR_RE = re.compile(
    r"""
    (?<![\w:.@\[-])                 # not part of data-class, :class, [class]
    (?P<name>class|className)
    =
    (?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')
    """,
    re.VERBOSE,
)


def format_text(text: str, options: FormatOptions | Mapping[str, Any] | None = None) -> str:
    """Group every literal class attribute found in raw *text*.

    Values holding interpolation braces are skipped. Multi-line output is
    trimmed at both ends so the closing quote follows the last group.
    """
    opts = coerce_options(options)

    def replace(match: re.Match[str]) -> str:
        quote = '"' if match.group("dq") is not None else "'"
        value = match.group("dq") if quote == '"' else match.group("sq")
        if not is_literal_class_value(value):
            return match.group(0)
        groups = group_classes(value, opts.group_order)
        if not groups:
            return match.group(0)
        rendered = render_groups(groups, multiline=opts.multiline).strip()
        return f"{match.group('name')}={quote}{rendered}{quote}"

    return _CLASS_ATTR_RE.sub(replace, text)
