"""Split entry lists into maximal literal / non-literal runs."""

from __future__ import annotations

from itertools import groupby
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def literal_runs(
    items: Iterable[T], is_literal: Callable[[T], bool]
) -> list[tuple[bool, list[T]]]:
    """Return ``(literal, items)`` pairs for each maximal run, in order."""
    return [(literal, list(run)) for literal, run in groupby(items, key=is_literal)]
