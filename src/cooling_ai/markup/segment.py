"""Split a document into an ordered sequence of text and table blocks.

Segmentation is a fold over the document's lines.  The state carries the
lines accumulated so far and whether they are table lines; a block is emitted
only when a line flips that flag.  Runs strictly before inline formatting, so
a ``$`` or ``**`` inside a table cell can never affect the table/text split.
"""

import logging
from typing import NamedTuple

from cooling_ai.markup.patterns import TABLE_LINE_MARKER
from cooling_ai.markup.schema import Block

logger = logging.getLogger(__name__)


class SegmenterState(NamedTuple):
    in_table: bool = False
    buffer: tuple[str, ...] = ()


def is_table_line(line: str) -> bool:
    """Return True if the line, once trimmed, starts with a pipe."""
    return line.strip().startswith(TABLE_LINE_MARKER)


def _as_block(in_table: bool, lines: tuple[str, ...]) -> Block:
    return Block(kind="table" if in_table else "text", lines=lines)


def step(state: SegmenterState, line: str) -> tuple[SegmenterState, Block | None]:
    """Advance the segmenter by one line, returning any block completed by it."""
    table_line = is_table_line(line)

    # Entering a table: the pending prose (if any) is complete
    if table_line and not state.in_table:
        done = _as_block(False, state.buffer) if state.buffer else None
        return SegmenterState(True, (line,)), done

    # Leaving a table: the pending rows are complete
    if not table_line and state.in_table:
        return SegmenterState(False, (line,)), _as_block(True, state.buffer)

    return SegmenterState(state.in_table, state.buffer + (line,)), None


def finish(state: SegmenterState) -> Block | None:
    """Flush whatever is left in the buffer at end of input."""
    if not state.buffer:
        return None
    return _as_block(state.in_table, state.buffer)


def segment(document: str) -> list[Block]:
    """Partition *document* into blocks whose lines, concatenated, are the document's lines."""
    if not document:
        return []

    blocks: list[Block] = []
    state = SegmenterState()
    for line in document.split("\n"):
        state, done = step(state, line)
        if done is not None:
            blocks.append(done)

    last = finish(state)
    if last is not None:
        blocks.append(last)

    logger.debug("Segmented %d lines into %d blocks", sum(len(b.lines) for b in blocks), len(blocks))
    return blocks
