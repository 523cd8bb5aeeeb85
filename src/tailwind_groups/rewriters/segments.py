"""Rewrite the literal parts of a segmented (mixed literal/dynamic) value."""

from __future__ import annotations

import re
from typing import Sequence

from tailwind_groups.grouping.grouper import group_classes
from tailwind_groups.grouping.renderer import render_groups
from tailwind_groups.model.values import Dynamic, Literal, SegmentedValue

_EDGES_RE = re.compile(r"^(\s*)(.*?)(\s*)$", re.DOTALL)


def rewrite_literal_text(
    text: str,
    group_order: Sequence[str] | str | None = None,
    *,
    pin_first: bool = False,
    pin_last: bool = False,
) -> str:
    """Group the classes in one literal fragment, keeping its outer whitespace.

    ``pin_first``/``pin_last`` keep the edge token in place; it is glued to a
    neighbouring dynamic part (``bg-{color}``) and only half of a class name.
    """
    leading, core, trailing = _EDGES_RE.match(text).groups()
    tokens = core.split()
    head = tokens[:1] if pin_first else []
    tail = tokens[-1:] if pin_last and len(tokens) > len(head) else []
    middle = tokens[len(head):len(tokens) - len(tail)]

    grouped = render_groups(group_classes(" ".join(middle), group_order), multiline=False)
    rewritten = " ".join(part for part in (*head, grouped, *tail) if part)
    if rewritten == " ".join(tokens):
        return text
    return f"{leading}{rewritten}{trailing}"


def _glued(text: str, neighbour: object, at_start: bool) -> bool:
    if not isinstance(neighbour, Dynamic) or not text:
        return False
    edge = text[0] if at_start else text[-1]
    return not edge.isspace()


def rewrite_segments(
    value: SegmentedValue, group_order: Sequence[str] | str | None = None
) -> SegmentedValue:
    """Return *value* with each literal part grouped independently.

    Dynamic parts and part boundaries are never touched.
    """
    parts = value.parts
    rewritten: list[Literal | Dynamic] = []
    changed = False
    for i, part in enumerate(parts):
        if not isinstance(part, Literal):
            rewritten.append(part)
            continue
        before = parts[i - 1] if i > 0 else None
        after = parts[i + 1] if i + 1 < len(parts) else None
        text = rewrite_literal_text(
            part.text,
            group_order,
            pin_first=_glued(part.text, before, at_start=True),
            pin_last=_glued(part.text, after, at_start=False),
        )
        if text != part.text:
            changed = True
            rewritten.append(Literal(text))
        else:
            rewritten.append(part)
    return SegmentedValue(tuple(rewritten)) if changed else value
