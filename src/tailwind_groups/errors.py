"""Error types raised inside the class-list rewriters.

None of these escape the public entry points: each one marks a scope that is
left unchanged.
"""

from __future__ import annotations


class ClassFormatError(Exception):
    """Base error for all tailwind_groups errors."""


class ExpressionParseError(ClassFormatError):
    """Raised when a class-binding expression cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class AmbiguousMatchError(ClassFormatError):
    """Raised when reordered object-binding keys cannot be paired 1:1 with entries."""

    def __init__(self, message: str, *, keys: list[str] | None = None) -> None:
        super().__init__(message)
        self.keys = keys or []


class UnsupportedShapeError(ClassFormatError):
    """Raised by an adapter when an attribute value has no recognized shape."""
