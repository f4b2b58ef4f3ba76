"""Pipe-table parsing: separator filtering, cell splitting, header/body split.

A table block that has no rows left once separator rows are removed is not an
error.  parse_table() returns an empty TableModel and the renderer skips it.
"""

import logging

from cooling_ai.markup.patterns import CELL_DELIMITER, SEPARATOR_CHARS, TABLE_LINE_MARKER
from cooling_ai.markup.schema import TableModel

logger = logging.getLogger(__name__)


def is_separator_row(line: str) -> bool:
    """Return True for alignment rows like ``|---|:--:|`` (and bare ``|`` / ``||``)."""
    body = line.strip()
    if body.startswith(TABLE_LINE_MARKER):
        body = body[1:]
    if body.endswith(TABLE_LINE_MARKER):
        body = body[:-1]
    return all(ch in SEPARATOR_CHARS or ch.isspace() for ch in body)


def split_row(line: str) -> tuple[str, ...]:
    """Split a row on pipes and trim each cell.

    Only an empty *first* or *last* piece is dropped (the artifact of the
    outer delimiters); empty interior cells keep their position.  A row that
    genuinely starts or ends with an empty column therefore loses it.
    """
    pieces = [piece.strip() for piece in line.split(CELL_DELIMITER)]
    last = len(pieces) - 1
    return tuple(cell for i, cell in enumerate(pieces) if not (i in (0, last) and cell == ""))


def parse_table(lines: list[str] | tuple[str, ...]) -> TableModel:
    """Parse the lines of a table block into a header and positional body rows."""
    rows = [line.strip() for line in lines]
    rows = [row for row in rows if row and not is_separator_row(row)]

    # Malformed table: nothing but separators
    if not rows:
        logger.debug("Table block of %d lines has no data rows; rendering nothing", len(lines))
        return TableModel()

    header = split_row(rows[0])
    body = tuple(split_row(row) for row in rows[1:])
    return TableModel(header=header, rows=body)
