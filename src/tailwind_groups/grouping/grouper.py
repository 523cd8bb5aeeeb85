"""Tokenize, classify and sort class lists into ordered groups."""

from __future__ import annotations

from typing import Iterable, Sequence

from tailwind_groups.grouping.classifier import classify
from tailwind_groups.grouping.order import resolve_group_order


def split_classes(class_list: str) -> list[str]:
    """Split on whitespace runs, dropping empty tokens."""
    return class_list.split()


def bucket_classes(
    tokens: Iterable[str], group_order: Sequence[str] | str | None = None
) -> list[list[str]]:
    """Return one sorted, non-empty token list per group, in display order."""
    buckets: dict[str, list[str]] = {}
    for token in tokens:
        buckets.setdefault(classify(token), []).append(token)
    result: list[list[str]] = []
    for name in resolve_group_order(group_order):
        members = buckets.get(name)
        if members:
            # Ordinal comparison keeps the order independent of locale.
            result.append(sorted(members))
    return result


def order_classes(
    tokens: Iterable[str], group_order: Sequence[str] | str | None = None
) -> list[str]:
    """Return *tokens* flattened into grouped display order."""
    return [token for bucket in bucket_classes(tokens, group_order) for token in bucket]


def group_classes(
    class_list: str | None, group_order: Sequence[str] | str | None = None
) -> list[str]:
    """Return one space-joined string per non-empty group, in display order."""
    if not class_list:
        return []
    return [" ".join(bucket) for bucket in bucket_classes(split_classes(class_list), group_order)]
