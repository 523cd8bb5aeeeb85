"""Formatting options consumed by the grouping engine and front ends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

# Accepted spellings for each option, including the prettier plugin option names.
_MULTILINE_KEYS = ("multiline", "multilineMode", "tailwindMultiline")
_GROUP_ORDER_KEYS = ("group_order", "groupOrderOverride", "tailwindGroupOrder")


def _coerce_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


@dataclass(frozen=True)
class FormatOptions:
    multiline: bool = True
    group_order: Sequence[str] | str | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> FormatOptions:
        """Build options from a plain dict, e.g. a host's option bag.

        Unknown keys are ignored. When several spellings of the same option
        are present the first one in the accepted list wins.
        """
        if not mapping:
            return cls()
        kwargs: dict[str, Any] = {}
        for key in _MULTILINE_KEYS:
            if key in mapping and mapping[key] is not None:
                kwargs["multiline"] = _coerce_bool(mapping[key])
                break
        for key in _GROUP_ORDER_KEYS:
            if key in mapping and mapping[key]:
                value = mapping[key]
                kwargs["group_order"] = value if isinstance(value, str) else tuple(value)
                break
        return cls(**kwargs)


DEFAULT_OPTIONS = FormatOptions()


def coerce_options(options: FormatOptions | Mapping[str, Any] | None) -> FormatOptions:
    """Accept a FormatOptions, a mapping, or None and return FormatOptions."""
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, FormatOptions):
        return options
    return FormatOptions.from_mapping(options)
