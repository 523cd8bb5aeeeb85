"""Built-in class groups and their default display order."""

from __future__ import annotations

from dataclasses import dataclass

OTHER = "other"


@dataclass(frozen=True)
class Group:
    """A named bucket of utility classes matched by base-class prefix."""

    name: str
    prefixes: tuple[str, ...] = ()

    def matches(self, base: str) -> bool:
        """Return True if *base* starts with any of this group's prefixes."""
        return any(base.startswith(prefix) for prefix in self.prefixes)


# Declaration order decides classification ties (``text-`` is claimed by both
# typography and colors; typography wins).
GROUPS: tuple[Group, ...] = (
    Group(
        "layout",
        (
            "container", "block", "inline", "flex", "grid", "hidden",
            "relative", "absolute", "fixed", "sticky", "static",
            "justify-", "items-", "content-", "self-", "place-", "order-",
            "col-", "row-",
        ),
    ),
    Group(
        "spacing",
        (
            "m-", "mx-", "my-", "mt-", "mr-", "mb-", "ml-",
            "p-", "px-", "py-", "pt-", "pr-", "pb-", "pl-",
            "space-", "gap-", "w-", "h-", "min-w-", "min-h-", "max-w-",
            "max-h-", "inset-", "top-", "bottom-", "left-", "right-",
        ),
    ),
    Group(
        "typography",
        ("text-", "font-", "leading-", "tracking-", "align-", "whitespace-", "break-"),
    ),
    Group(
        "colors",
        ("bg-", "text-", "from-", "to-", "border-", "ring-", "fill-", "stroke-"),
    ),
    Group("borders", ("border-", "rounded-", "shadow-", "ring-")),
    Group(
        "effects",
        (
            "opacity-", "shadow-", "blur-", "transition-", "duration-",
            "ease-", "transform-", "scale-", "rotate-", "translate-",
        ),
    ),
    Group(
        "states",
        (
            "hover:", "focus:", "active:", "group-", "peer-", "disabled:",
            "checked:", "required:", "valid:", "invalid:",
        ),
    ),
    Group(OTHER),
)

GROUP_NAMES: frozenset[str] = frozenset(g.name for g in GROUPS)

DEFAULT_GROUP_ORDER: tuple[str, ...] = (
    "layout",
    "spacing",
    "typography",
    "colors",
    "borders",
    "effects",
    "states",
    OTHER,
)
