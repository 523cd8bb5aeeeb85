"""Tests for the segment, expression and dispatching rewriters."""

from collections import Counter

import pytest

from tailwind_groups.errors import AmbiguousMatchError
from tailwind_groups.expression.parser import ObjectEntry
from tailwind_groups.model import (
    Dynamic,
    ExpressionKind,
    ExpressionValue,
    Literal,
    SegmentedValue,
    StringValue,
)
from tailwind_groups.rewriters import (
    rewrite_expression,
    rewrite_segments,
    rewrite_string,
    rewrite_value,
)
from tailwind_groups.rewriters.expression import match_entries
from tailwind_groups.rewriters.runs import literal_runs
from tailwind_groups.rewriters.segments import rewrite_literal_text


def _array(source: str) -> ExpressionValue:
    return ExpressionValue(kind=ExpressionKind.ARRAY, source=source)


def _object(source: str) -> ExpressionValue:
    return ExpressionValue(kind=ExpressionKind.OBJECT, source=source)


# ---------------------------------------------------------------------------
# Runs
# ---------------------------------------------------------------------------


class TestLiteralRuns:
    def test_split_on_boundaries(self):
        runs = literal_runs(["a", 1, 2, "b", "c"], lambda x: isinstance(x, str))
        assert runs == [(True, ["a"]), (False, [1, 2]), (True, ["b", "c"])]

    def test_empty(self):
        assert literal_runs([], bool) == []


# ---------------------------------------------------------------------------
# Segmented values
# ---------------------------------------------------------------------------


class TestRewriteSegments:
    def test_only_literal_part_is_reordered(self):
        dynamic = Dynamic("{extra}")
        value = SegmentedValue((Literal("p-2 flex "), dynamic))
        result = rewrite_segments(value)
        assert result.parts == (Literal("flex p-2 "), dynamic)

    def test_literal_after_dynamic_keeps_leading_space(self):
        value = SegmentedValue((Dynamic("{a}"), Literal(" p-2 flex")))
        assert rewrite_segments(value).parts[1] == Literal(" flex p-2")

    def test_parts_are_never_merged(self):
        value = SegmentedValue((Literal("p-2 "), Dynamic("{a}"), Literal(" flex")))
        assert rewrite_segments(value) is value

    def test_glued_trailing_token_stays_last(self):
        value = SegmentedValue((Literal("p-2 flex bg-"), Dynamic("{color}")))
        assert rewrite_segments(value).parts[0] == Literal("flex p-2 bg-")

    def test_glued_leading_token_stays_first(self):
        value = SegmentedValue((Dynamic("{color}"), Literal("-500 p-2 flex")))
        assert rewrite_segments(value).parts[1] == Literal("-500 flex p-2")

    def test_fully_dynamic_is_noop(self):
        value = SegmentedValue((Dynamic("{a}"), Dynamic("{b}")))
        assert rewrite_segments(value) is value

    def test_already_ordered_keeps_source_spacing(self):
        value = SegmentedValue((Literal("flex  p-2 "), Dynamic("{a}")))
        assert rewrite_segments(value) is value

    def test_whitespace_only_part(self):
        value = SegmentedValue((Dynamic("{a}"), Literal("   "), Dynamic("{b}")))
        assert rewrite_segments(value) is value

    def test_rewrite_literal_text_keeps_outer_whitespace(self):
        assert rewrite_literal_text("  p-2 flex  ") == "  flex p-2  "

    def test_single_pinned_token(self):
        assert rewrite_literal_text("bg-", pin_first=True, pin_last=True) == "bg-"


# ---------------------------------------------------------------------------
# Array bindings
# ---------------------------------------------------------------------------


class TestRewriteArray:
    def test_two_literals(self):
        result = rewrite_expression(_array('["p-2", "flex"]'))
        assert result.source == '["flex", "p-2"]'
        assert result.kind is ExpressionKind.ARRAY

    def test_runs_bounded_by_dynamic_elements(self):
        result = rewrite_expression(
            _array("['p-2', 'flex', cond && 'x', 'text-white', 'bg-red-500']")
        )
        assert result.source == "['flex', 'p-2', cond && 'x', 'text-white', 'bg-red-500']"

    def test_multi_token_element_is_split(self):
        result = rewrite_expression(_array("['p-2 flex', 'm-1']"))
        assert result.source == "['flex', 'm-1', 'p-2']"

    def test_multiline_source_is_compacted(self):
        result = rewrite_expression(_array("[\n  'p-2',\n  'flex',\n  isActive\n    && 'ring'\n]"))
        assert result.source == "['flex', 'p-2', isActive && 'ring']"

    def test_ordered_is_untouched(self):
        value = _array("[ 'flex',\n 'p-2' ]")
        assert rewrite_expression(value) is value

    def test_only_dynamic_is_untouched(self):
        value = _array("[a, b && c]")
        assert rewrite_expression(value) is value

    def test_parse_failure_is_untouched(self):
        value = _array("['p-2' 'flex']")
        assert rewrite_expression(value) is value

    def test_kind_mismatch_is_untouched(self):
        value = _array("['p-2', 'flex'][0]")
        assert rewrite_expression(value) is value

    def test_idempotent(self):
        once = rewrite_expression(_array("['text-white', 'p-2 flex', x, 'm-1', 'block']"))
        assert rewrite_expression(once) is once

    def test_tokens_preserved(self):
        source = "['text-white p-2', 'flex', 'p-2']"
        result = rewrite_expression(_array(source))
        tokens = [t.strip("'") for t in result.source.strip("[]").split(", ")]
        assert Counter(tokens) == Counter(["text-white", "p-2", "flex", "p-2"])


# ---------------------------------------------------------------------------
# Object bindings
# ---------------------------------------------------------------------------


class TestRewriteObject:
    def test_entries_move_with_values(self):
        result = rewrite_expression(_object("{ 'p-2': a, flex: b }"))
        assert result.source == "{ flex: b, 'p-2': a }"

    def test_runs_bounded_by_computed_keys(self):
        result = rewrite_expression(
            _object("{ 'p-2': a, flex: b, [dyn]: c, 'text-white': d, 'bg-red-500': e }")
        )
        assert result.source == "{ flex: b, 'p-2': a, [dyn]: c, 'text-white': d, 'bg-red-500': e }"

    def test_duplicate_keys_first_seen_first_assigned(self):
        result = rewrite_expression(_object("{ 'p-2': a, flex: b, 'p-2': c }"))
        assert result.source == "{ flex: b, 'p-2': a, 'p-2': c }"

    def test_ambiguous_run_is_abandoned_alone(self):
        result = rewrite_expression(
            _object("{ 'p-2 flex': a, 'm-1': b, ...rest, 'p-2': c, flex: d }")
        )
        assert result.source == "{ 'p-2 flex': a, 'm-1': b, ...rest, flex: d, 'p-2': c }"

    def test_ambiguous_only_run_is_untouched(self):
        value = _object("{ 'p-2 flex': a, 'm-1': b }")
        assert rewrite_expression(value) is value

    def test_ordered_is_untouched(self):
        value = _object("{\n  flex: a,\n  'p-2': b\n}")
        assert rewrite_expression(value) is value

    def test_idempotent(self):
        once = rewrite_expression(_object("{ 'text-white': x, 'p-2': y, block: z }"))
        assert rewrite_expression(once) is once


# ---------------------------------------------------------------------------
# Wrapped bindings
# ---------------------------------------------------------------------------


def _nested(source: str) -> ExpressionValue:
    return ExpressionValue(kind=ExpressionKind.NESTED, source=source)


class TestRewriteNested:
    def test_ternary_branches(self):
        result = rewrite_expression(_nested("on ? ['p-2', 'flex'] : { 'm-1': a, block: b }"))
        assert result.source == "on ? ['flex', 'p-2'] : { block: b, 'm-1': a }"
        assert result.kind is ExpressionKind.NESTED

    def test_surrounding_source_kept_verbatim(self):
        result = rewrite_expression(_nested("base  &&\n  ['p-2',\n 'flex']"))
        assert result.source == "base  &&\n  ['flex', 'p-2']"

    def test_indexed_literal_is_untouched(self):
        value = _nested("(['p-2', 'flex'])[0]")
        assert rewrite_expression(value) is value

    def test_no_literals_is_untouched(self):
        value = _nested("isActive ? activeClass : ''")
        assert rewrite_expression(value) is value

    def test_parse_failure_is_untouched(self):
        value = _nested("on ? ['p-2' : x")
        assert rewrite_expression(value) is value

    def test_idempotent(self):
        once = rewrite_expression(_nested("a || ['text-white', 'p-2'] || { block: x, 'm-1': y }"))
        assert rewrite_expression(once) is once


# ---------------------------------------------------------------------------
# Entry matching
# ---------------------------------------------------------------------------


class TestMatchEntries:
    def test_match(self):
        run = [ObjectEntry("'p-2': a", "p-2"), ObjectEntry("flex: b", "flex")]
        assert match_entries(run, ["flex", "p-2"]) == [run[1], run[0]]

    def test_mismatch_raises(self):
        run = [ObjectEntry("'p-2 flex': a", "p-2 flex")]
        with pytest.raises(AmbiguousMatchError) as exc_info:
            match_entries(run, ["flex", "p-2"])
        assert exc_info.value.keys == ["p-2 flex"]


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class TestRewriteValue:
    def test_string_single_line(self):
        assert rewrite_value(StringValue("p-2 flex")) == StringValue("flex p-2")

    def test_string_multiline(self):
        assert rewrite_value(StringValue("p-2 flex"), multiline=True) == StringValue("\n  flex\n  p-2\n")

    def test_string_with_group_order(self):
        result = rewrite_string(StringValue("flex bg-red-500"), group_order="colors")
        assert result == StringValue("bg-red-500 flex")

    def test_unchanged_string_is_same_object(self):
        value = StringValue("flex p-2")
        assert rewrite_value(value) is value

    def test_segmented(self):
        value = SegmentedValue((Literal("p-2 flex "), Dynamic("{x}")))
        assert rewrite_value(value).parts[0] == Literal("flex p-2 ")

    def test_expression(self):
        assert rewrite_value(_array("['p-2', 'flex']")).source == "['flex', 'p-2']"

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            rewrite_value("p-2 flex")  # type: ignore[arg-type]
