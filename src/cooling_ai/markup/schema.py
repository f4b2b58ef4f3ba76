"""Pydantic models for segmented documents, parsed tables and inline spans.

Every model is frozen: segmentation and rendering are pure functions of the
input text, so two passes over the same text compare equal field by field.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ─── Blocks ───────────────────────────────────────────────────────────────────


class Block(_Frozen):
    """A maximal contiguous run of table lines or non-table lines."""

    kind: Literal["text", "table"]
    lines: tuple[str, ...]


class TableModel(_Frozen):
    """Header and body cells of a pipe table.

    Rows are positional only: a body row may have more or fewer cells than the
    header.  An empty header marks a table block with no data rows left after
    separator filtering; it renders as nothing.
    """

    header: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.header and not self.rows


# ─── Inline Spans ────────────────────────────────────────────────────────────


class PlainSpan(_Frozen):
    kind: Literal["plain"] = "plain"
    text: str


class MathSpan(_Frozen):
    """Inline math with the surrounding ``$`` delimiters removed."""

    kind: Literal["math"] = "math"
    expr: str


class EmphasisSpan(_Frozen):
    """Bold text with the surrounding ``**`` delimiters removed."""

    kind: Literal["emphasis"] = "emphasis"
    text: str


Span = Annotated[Union[PlainSpan, MathSpan, EmphasisSpan], Field(discriminator="kind")]


# ─── Rendered Units ──────────────────────────────────────────────────────────


class LineKind(str, Enum):
    HEADING_3 = "heading_3"
    HEADING_2 = "heading_2"
    BULLET = "bullet"
    PARAGRAPH = "paragraph"


class RenderedLine(_Frozen):
    """One classified line of a text block, prefix removed, split into spans."""

    kind: LineKind
    spans: tuple[Span, ...]


class RenderedTable(_Frozen):
    """A parsed table whose every cell has been tokenized independently."""

    header: tuple[tuple[Span, ...], ...]
    rows: tuple[tuple[tuple[Span, ...], ...], ...]


RenderedUnit = Union[RenderedLine, RenderedTable]
