"""Parse class-binding expressions into element and entry lists.

Only the top-level array or object literal is decomposed. Every element or
entry keeps its exact source slice so that untouched parts are regenerated
verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Tree
from lark.exceptions import LarkError

from tailwind_groups.errors import ExpressionParseError
from tailwind_groups.model.values import ExpressionKind

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

MAX_EXPRESSION_DEPTH = 64

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_PLAIN_ESCAPES = frozenset("\\'\"`")


@dataclass(frozen=True)
class ArrayElement:
    """One array element; ``literal`` is set for static string elements."""

    source: str
    literal: str | None = None
    quote: str | None = None

    @property
    def is_literal(self) -> bool:
        return self.literal is not None


@dataclass(frozen=True)
class ObjectEntry:
    """One object entry; ``key`` is set when the key is statically known."""

    source: str
    key: str | None = None

    @property
    def is_literal(self) -> bool:
        return self.key is not None


@dataclass(frozen=True)
class ParsedExpression:
    kind: ExpressionKind | None
    elements: tuple[ArrayElement, ...] = ()
    entries: tuple[ObjectEntry, ...] = ()


@lru_cache(maxsize=1)
def _get_parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )


def nesting_depth(source: str) -> int:
    """Return the maximum bracket nesting depth of *source*, ignoring quoted text."""
    depth = deepest = 0
    quote: str | None = None
    escaped = False
    for ch in source:
        if quote:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
            continue
        if ch in "'\"`":
            quote = ch
        elif ch in "([{":
            depth += 1
            deepest = max(deepest, depth)
        elif ch in ")]}":
            depth -= 1
    return deepest


def _span(node: Tree | Token) -> tuple[int, int]:
    if isinstance(node, Token):
        return node.start_pos, node.end_pos
    return node.meta.start_pos, node.meta.end_pos


def _slice(source: str, node: Tree | Token) -> str:
    start, end = _span(node)
    return source[start:end]


def decode_string(token: Tree | Token) -> tuple[str, str] | None:
    """Return ``(text, quote)`` for a static string or template token.

    Template literals with ``${`` substitutions and strings using escapes
    other than quote/backslash escapes are not static.
    """
    if not isinstance(token, Token) or token.type not in ("STRING", "TEMPLATE"):
        return None
    raw = str(token)
    quote, body = raw[0], raw[1:-1]
    if token.type == "TEMPLATE" and "${" in body:
        return None
    for match in _ESCAPE_RE.finditer(body):
        if match.group(1) not in _PLAIN_ESCAPES:
            return None
    return _ESCAPE_RE.sub(r"\1", body), quote


def _entry_key(entry: Tree | Token) -> str | None:
    if not isinstance(entry, Tree):
        return None
    if entry.data == "shorthand":
        return str(entry.children[0])
    if entry.data != "pair":
        return None
    key = entry.children[0]
    if isinstance(key, Token) and key.type == "NAME":
        return str(key)
    decoded = decode_string(key)
    return decoded[0] if decoded else None


def _build_array(source: str, tree: Tree) -> ParsedExpression:
    elements: list[ArrayElement] = []
    for child in tree.children:
        text = _slice(source, child)
        decoded = decode_string(child)
        if decoded is None:
            elements.append(ArrayElement(source=text))
        else:
            elements.append(ArrayElement(source=text, literal=decoded[0], quote=decoded[1]))
    return ParsedExpression(kind=ExpressionKind.ARRAY, elements=tuple(elements))


def _build_object(source: str, tree: Tree) -> ParsedExpression:
    entries = [
        ObjectEntry(source=_slice(source, child), key=_entry_key(child))
        for child in tree.children
    ]
    return ParsedExpression(kind=ExpressionKind.OBJECT, entries=tuple(entries))


def _parse(source: str) -> Tree | Token:
    if nesting_depth(source) > MAX_EXPRESSION_DEPTH:
        raise ExpressionParseError(
            f"Expression nests deeper than {MAX_EXPRESSION_DEPTH} levels"
        )
    try:
        tree = _get_parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ExpressionParseError(str(e), line=line, column=column) from e
    return tree


def parse_expression(source: str) -> ParsedExpression:
    """Parse *source* and decompose a top-level array or object literal.

    Raises ExpressionParseError when the source is not a supported expression
    or nests deeper than MAX_EXPRESSION_DEPTH.
    """
    tree = _parse(source)
    if isinstance(tree, Tree) and tree.data == "array":
        return _build_array(source, tree)
    if isinstance(tree, Tree) and tree.data == "object":
        return _build_object(source, tree)
    return ParsedExpression(kind=None)


# Wrapping forms whose operands are class values, with the operands to search.
_VALUE_OPERANDS = {
    "ternary": slice(1, None),
    "logic_or": slice(None),
    "logic_and": slice(None),
    "nullish": slice(None),
    "paren": slice(None),
}


def find_literals(source: str) -> list[tuple[int, int, ParsedExpression]]:
    """Return ``(start, end, parsed)`` for array and object literals in value position.

    Ternary branches, logical operands and parentheses are searched. Literals
    under member access, indexing, calls or arithmetic are not class values
    and are skipped, as are literals nested inside another literal.
    """
    found: list[tuple[int, int, ParsedExpression]] = []
    stack = [_parse(source)]
    while stack:
        node = stack.pop()
        if not isinstance(node, Tree):
            continue
        if node.data == "array":
            found.append((*_span(node), _build_array(source, node)))
        elif node.data == "object":
            found.append((*_span(node), _build_object(source, node)))
        elif node.data in _VALUE_OPERANDS:
            stack.extend(node.children[_VALUE_OPERANDS[node.data]])
    found.sort(key=lambda item: item[0])
    return found
