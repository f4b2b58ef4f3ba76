"""Turn segmented blocks into render units: classified lines and tokenized tables.

Classification is per line, never per block, so headings, bullets and
paragraphs interleave freely inside one text block.
"""

import logging
from typing import Iterable

from cooling_ai.markup.inline import tokenize
from cooling_ai.markup.patterns import BULLET_PREFIX, HEADING_2_PREFIX, HEADING_3_PREFIX
from cooling_ai.markup.schema import Block, LineKind, RenderedLine, RenderedTable, RenderedUnit
from cooling_ai.markup.segment import segment
from cooling_ai.markup.tables import parse_table

logger = logging.getLogger(__name__)


def classify_line(line: str) -> tuple[LineKind, str]:
    """Return the line's kind and its text with the recognised prefix removed.

    Headings are matched on the raw line; bullets on the trimmed line.
    """
    if line.startswith(HEADING_3_PREFIX):
        return LineKind.HEADING_3, line[len(HEADING_3_PREFIX) :]
    if line.startswith(HEADING_2_PREFIX):
        return LineKind.HEADING_2, line[len(HEADING_2_PREFIX) :]
    stripped = line.strip()
    if stripped.startswith(BULLET_PREFIX):
        return LineKind.BULLET, stripped[len(BULLET_PREFIX) :]
    return LineKind.PARAGRAPH, line


def render_line(line: str) -> RenderedLine:
    kind, text = classify_line(line)
    return RenderedLine(kind=kind, spans=tuple(tokenize(text)))


def render_table(lines: Iterable[str]) -> RenderedTable | None:
    """Parse and tokenize a table block; None when the block has no data rows."""
    model = parse_table(tuple(lines))
    if model.is_empty:
        return None
    return RenderedTable(
        header=tuple(tuple(tokenize(cell)) for cell in model.header),
        rows=tuple(tuple(tuple(tokenize(cell)) for cell in row) for row in model.rows),
    )


def render(blocks: Iterable[Block]) -> list[RenderedUnit]:
    """Render blocks in order: one unit per text line, one per non-empty table."""
    units: list[RenderedUnit] = []
    for block in blocks:
        if block.kind == "table":
            table = render_table(block.lines)
            if table is not None:
                units.append(table)
            continue
        units.extend(render_line(line) for line in block.lines)
    return units


def render_document(text: str) -> list[RenderedUnit]:
    """Segment then render *text*.  Pure: the same text always gives equal units."""
    units = render(segment(text))
    logger.debug("Rendered document into %d units", len(units))
    return units
