"""Unit tests for block segmentation.

Covers the single-step transition function, end-of-input flushing, and the
partition properties of segment(): lossless line order and table/text purity.
"""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from cooling_ai.markup.schema import Block
from cooling_ai.markup.segment import SegmenterState, finish, is_table_line, segment, step

DOCUMENTS = [
    "",
    "single line",
    "| a | b |",
    "intro\n| a | b |\n|---|---|\n| 1 | 2 |\noutro",
    "| a |\ntext\n| b |\n| c |\ntext again\n\n",
    "## Heading\n- bullet\n\n   | indented | row |\n|x|\nlast",
    "\n\n\n",
    "cost is $5 | not a table\n|$x$ | **y**|",
]


# ===========================================================================
# is_table_line tests
# ===========================================================================


class TestIsTableLine:

    def test_pipe_start(self):
        assert is_table_line("| a | b |") is True

    def test_leading_whitespace(self):
        assert is_table_line("   |a|") is True

    def test_pipe_in_middle(self):
        assert is_table_line("a | b") is False

    def test_empty(self):
        assert is_table_line("") is False


# ===========================================================================
# step / finish tests
# ===========================================================================


class TestStep:

    def test_entering_table_flushes_text(self):
        state, done = step(SegmenterState(False, ("intro",)), "| a |")
        assert done == Block(kind="text", lines=("intro",))
        assert state == SegmenterState(True, ("| a |",))

    def test_entering_table_with_empty_buffer_emits_nothing(self):
        state, done = step(SegmenterState(), "| a |")
        assert done is None
        assert state.in_table is True

    def test_leaving_table_flushes_table(self):
        state, done = step(SegmenterState(True, ("| a |", "|---|")), "after")
        assert done == Block(kind="table", lines=("| a |", "|---|"))
        assert state == SegmenterState(False, ("after",))

    def test_same_kind_appends(self):
        state, done = step(SegmenterState(False, ("one",)), "two")
        assert done is None
        assert state.buffer == ("one", "two")

    def test_finish_tags_by_state(self):
        assert finish(SegmenterState(True, ("| x |",))) == Block(kind="table", lines=("| x |",))
        assert finish(SegmenterState(False, ("x",))) == Block(kind="text", lines=("x",))

    def test_finish_empty(self):
        assert finish(SegmenterState()) is None


# ===========================================================================
# segment tests
# ===========================================================================


class TestSegment:

    def test_empty_document(self):
        assert segment("") == []

    def test_single_text_line(self):
        assert segment("hello") == [Block(kind="text", lines=("hello",))]

    def test_single_table_line(self):
        assert segment("| a |") == [Block(kind="table", lines=("| a |",))]

    def test_mixed_document(self):
        blocks = segment("intro\n| a | b |\n|---|---|\n| 1 | 2 |\noutro")
        assert [b.kind for b in blocks] == ["text", "table", "text"]
        assert blocks[1].lines == ("| a | b |", "|---|---|", "| 1 | 2 |")

    def test_blank_lines_stay_in_text_blocks(self):
        blocks = segment("a\n\n| t |\n\nb")
        assert blocks[0].lines == ("a", "")
        assert blocks[2].lines == ("", "b")

    def test_inline_markup_does_not_split_table(self):
        blocks = segment("|$x|y$ | **a|b**|")
        assert len(blocks) == 1
        assert blocks[0].kind == "table"

    @pytest.mark.parametrize("document", DOCUMENTS)
    def test_lossless_partition(self, document):
        lines = [line for block in segment(document) for line in block.lines]
        expected = document.split("\n") if document else []
        assert lines == expected

    @pytest.mark.parametrize("document", DOCUMENTS)
    def test_block_purity(self, document):
        for block in segment(document):
            if block.kind == "table":
                assert all(line.strip().startswith("|") for line in block.lines)
            else:
                assert not any(line.strip().startswith("|") for line in block.lines)

    @pytest.mark.parametrize("document", DOCUMENTS)
    def test_blocks_alternate(self, document):
        kinds = [block.kind for block in segment(document)]
        assert all(a != b for a, b in zip(kinds, kinds[1:]))
