"""Delimiter, prefix and character-class constants for the markup pipeline.

Used by segment.py (table detection), tables.py (separator rows and cell
splitting), inline.py (math / emphasis delimiters) and render.py (line
classification).
"""

import re

# ─── Table Markers ────────────────────────────────────────────────────────────

# A line whose trimmed form starts with this belongs to a table block
TABLE_LINE_MARKER = "|"

# Cell delimiter inside a table row
CELL_DELIMITER = "|"

# Characters allowed in a separator row such as "|:---|---:|"
SEPARATOR_CHARS = frozenset(":-|")


# ─── Inline Delimiters ───────────────────────────────────────────────────────

MATH_DELIMITER = "$"
STRONG_DELIMITER = "**"


# ─── Line Prefixes (checked in this order) ───────────────────────────────────

HEADING_3_PREFIX = "### "
HEADING_2_PREFIX = "## "
BULLET_PREFIX = "- "


# ─── Plain-Text Stripping ────────────────────────────────────────────────────

# Used only by strip_markdown() for chart labels
STRONG_RE = re.compile(r"\*\*(.*?)\*\*")
ITALIC_RE = re.compile(r"\*(.*?)\*")
BACKTICK = "`"
