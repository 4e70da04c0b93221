"""Tests for the line-joined text builder."""

import pytest

from builders import Fragment, FragmentError, TextBuilder, build_text
from samples import items


class TestLeadingSeparator:
    """The first fragment never gets a leading newline."""

    def test_single_fragment(self):
        assert build_text(Fragment.Item("solo")) == "solo"

    def test_empty_composition(self):
        assert build_text() == ""

    def test_trailing_empty_fragment_emits_newline(self):
        assert build_text(*items("a", "")) == "a\n"

    def test_leading_empty_fragment_is_absorbed(self):
        assert build_text(*items("", "a")) == "a"

    def test_empty_fragment_between_lines(self):
        assert build_text(*items("a", "", "b")) == "a\n\nb"


class TestTextControlFlow:
    """Absent optionals and loops."""

    def test_absent_after_content_is_a_blank_line(self):
        result = build_text(Fragment.Item("Start"), Fragment.Optional(None), Fragment.Item("End"))
        assert result == "Start\n\nEnd"

    def test_absent_first_is_invisible(self):
        assert build_text(Fragment.Absent(), Fragment.Item("Start")) == "Start"

    def test_collection_is_newline_joined(self):
        assert build_text(Fragment.Item("head"), Fragment.Collection(["a", "b"])) == "head\na\nb"

    def test_loop(self):
        builder = TextBuilder()
        result = builder.build(
            Fragment.Item("# Fruit"),
            builder.each(["Apple", "Banana"], lambda fruit: Fragment.Item(f"- {fruit}")),
        )
        assert result == "# Fruit\n- Apple\n- Banana"

    def test_loop_joins_iterations_plainly(self):
        """An empty first iteration still produces a separator inside the loop."""
        builder = TextBuilder()
        assert builder.build(builder.each(["", "x"], Fragment.Item)) == "\nx"

    def test_branch(self):
        builder = TextBuilder()
        result = builder.build(
            Fragment.Item("a"),
            builder.either(False, Fragment.Item("b"), [Fragment.Item("c"), Fragment.Item("d")]),
        )
        assert result == "a\nc\nd"


def test_non_string_item_is_rejected() -> None:
    with pytest.raises(FragmentError, match="expects str"):
        build_text(Fragment.Item(3))


def test_non_string_line_in_collection_is_rejected() -> None:
    with pytest.raises(FragmentError):
        build_text(Fragment.Collection(["a", None]))


def test_block_must_hold_text() -> None:
    with pytest.raises(FragmentError, match="block must hold a str") as exc_info:
        build_text(Fragment.Item("a"), Fragment.Block(["b"]))
    assert exc_info.value.kind == "block"
