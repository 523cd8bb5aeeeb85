"""Reorder the literal parts of array- and object-literal class bindings."""

from __future__ import annotations

import logging
from collections import defaultdict, deque
from typing import Sequence

from tailwind_groups.errors import AmbiguousMatchError, ExpressionParseError
from tailwind_groups.expression.generator import (
    generate_array,
    generate_object,
    quote_literal,
)
from tailwind_groups.expression.parser import (
    ArrayElement,
    ObjectEntry,
    ParsedExpression,
    find_literals,
    parse_expression,
)
from tailwind_groups.grouping.grouper import order_classes
from tailwind_groups.model.values import ExpressionKind, ExpressionValue
from tailwind_groups.rewriters.runs import literal_runs

logger = logging.getLogger(__name__)


# ---- arrays ----


def _rewrite_array(
    parsed: ParsedExpression, group_order: Sequence[str] | str | None
) -> list[str] | None:
    items: list[str] = []
    changed = False
    for literal, run in literal_runs(parsed.elements, lambda e: e.is_literal):
        if not literal:
            items.extend(e.source for e in run)
            continue
        tokens = [token for element in run for token in element.literal.split()]
        ordered = order_classes(tokens, group_order)
        if ordered == tokens:
            items.extend(e.source for e in run)
            continue
        quote = run[0].quote or "'"
        items.extend(quote_literal(token, quote) for token in ordered)
        changed = True
    return items if changed else None


# ---- objects ----


def match_entries(run: list[ObjectEntry], ordered: list[str]) -> list[ObjectEntry]:
    """Pair each ordered key with a run entry, first seen first assigned.

    Raises AmbiguousMatchError unless every entry is used exactly once.
    """
    pool: dict[str, deque[ObjectEntry]] = defaultdict(deque)
    for entry in run:
        pool[entry.key].append(entry)
    matched: list[ObjectEntry] = []
    for key in ordered:
        candidates = pool.get(key)
        if not candidates:
            break
        matched.append(candidates.popleft())
    if len(matched) != len(run):
        raise AmbiguousMatchError(
            f"Matched {len(matched)} of {len(run)} object entries",
            keys=[e.key for e in run],
        )
    return matched


def _rewrite_object(
    parsed: ParsedExpression, group_order: Sequence[str] | str | None
) -> list[str] | None:
    items: list[str] = []
    changed = False
    for literal, run in literal_runs(parsed.entries, lambda e: e.is_literal):
        keys = [e.key for e in run]
        if not literal:
            items.extend(e.source for e in run)
            continue
        ordered = order_classes(" ".join(keys).split(), group_order)
        if ordered == keys:
            items.extend(e.source for e in run)
            continue
        try:
            matched = match_entries(run, ordered)
        except AmbiguousMatchError as e:
            logger.debug("Leaving object-binding run unchanged: %s (keys=%s)", e, e.keys)
            items.extend(entry.source for entry in run)
            continue
        items.extend(entry.source for entry in matched)
        changed = True
    return items if changed else None


# ---- entry point ----


def _generate(parsed: ParsedExpression, group_order: Sequence[str] | str | None) -> str | None:
    """Return regenerated source for a changed literal, or None."""
    if parsed.kind is ExpressionKind.ARRAY:
        items = _rewrite_array(parsed, group_order)
        return generate_array(items) if items is not None else None
    items = _rewrite_object(parsed, group_order)
    return generate_object(items) if items is not None else None


def _rewrite_nested(
    value: ExpressionValue, group_order: Sequence[str] | str | None
) -> ExpressionValue:
    try:
        literals = find_literals(value.source)
    except ExpressionParseError as e:
        logger.debug("Leaving class binding unchanged, parse failed: %s", e)
        return value
    pieces: list[str] = []
    last = 0
    for start, end, parsed in literals:
        generated = _generate(parsed, group_order)
        if generated is None:
            continue
        pieces += [value.source[last:start], generated]
        last = end
    if not pieces:
        return value
    pieces.append(value.source[last:])
    return ExpressionValue(kind=value.kind, source="".join(pieces))


def rewrite_expression(
    value: ExpressionValue, group_order: Sequence[str] | str | None = None
) -> ExpressionValue:
    """Return *value* with its literal runs ordered, or *value* itself.

    Sources that fail to parse, or whose top-level form differs from
    ``value.kind``, are returned unchanged. NESTED sources have each literal
    in value position rewritten and spliced back; the rest of the source is
    kept verbatim.
    """
    if value.kind is ExpressionKind.NESTED:
        return _rewrite_nested(value, group_order)
    try:
        parsed = parse_expression(value.source)
    except ExpressionParseError as e:
        logger.debug("Leaving class binding unchanged, parse failed: %s", e)
        return value
    if parsed.kind is not value.kind:
        return value
    source = _generate(parsed, group_order)
    if source is None:
        return value
    return ExpressionValue(kind=value.kind, source=source)
