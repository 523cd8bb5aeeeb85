"""Regenerate compact single-line source for edited expressions."""

from __future__ import annotations

import re
from typing import Iterable

_LINE_BREAK_RE = re.compile(r"\s*\n\s*")


def compact(source: str) -> str:
    """Fold *source* onto one line.

    Template literals may hold significant newlines, so sources containing a
    backtick are only stripped.
    """
    source = source.strip()
    if "`" in source:
        return source
    return _LINE_BREAK_RE.sub(" ", source)


def quote_literal(text: str, quote: str = "'") -> str:
    """Return *text* as a JS string literal delimited by *quote*."""
    escaped = text.replace("\\", "\\\\").replace(quote, "\\" + quote)
    if quote == "`":
        escaped = escaped.replace("${", "\\${")
    return f"{quote}{escaped}{quote}"


def generate_array(items: Iterable[str]) -> str:
    return "[" + ", ".join(compact(item) for item in items) + "]"


def generate_object(items: Iterable[str]) -> str:
    body = ", ".join(compact(item) for item in items)
    return "{ " + body + " }" if body else "{}"
