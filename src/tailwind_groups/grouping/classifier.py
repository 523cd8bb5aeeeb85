"""Map a single class token to its semantic group."""

from __future__ import annotations

from typing import Sequence

from tailwind_groups.model.groups import GROUPS, OTHER, Group


def base_class(token: str) -> str:
    """Return *token* with any variant prefix chain (``hover:``, ``md:``) removed."""
    return token.rsplit(":", 1)[-1]


def classify(token: str, groups: Sequence[Group] = GROUPS) -> str:
    """Return the name of the first declared group whose prefix matches *token*.

    Groups are tried in declaration order, not display order, so an
    overlapping prefix goes to the group declared first.
    """
    base = base_class(token)
    for group in groups:
        if group.name == OTHER:
            continue
        if group.matches(base):
            return group.name
    return OTHER
