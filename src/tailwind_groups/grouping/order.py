"""Resolve the effective group display order."""

from __future__ import annotations

from typing import Sequence

from tailwind_groups.model.groups import DEFAULT_GROUP_ORDER, GROUP_NAMES


def _split_override(override: Sequence[str] | str) -> list[str]:
    if isinstance(override, str):
        return [segment.strip() for segment in override.split(",") if segment.strip()]
    return [str(name).strip() for name in override if str(name).strip()]


def resolve_group_order(override: Sequence[str] | str | None = None) -> tuple[str, ...]:
    """Return the display order for *override*.

    *override* may be a sequence of group names or a comma-separated string.
    Unknown names are dropped, duplicates keep their first position, and
    default groups that were not mentioned follow in their default order.
    """
    if not override:
        return DEFAULT_GROUP_ORDER
    requested = _split_override(override)
    resolved: list[str] = []
    for name in requested:
        if name in GROUP_NAMES and name not in resolved:
            resolved.append(name)
    if not resolved:
        return DEFAULT_GROUP_ORDER
    resolved.extend(name for name in DEFAULT_GROUP_ORDER if name not in resolved)
    return tuple(resolved)
