"""Command-line front end for the plant assistant.

Usage:
    cooling-ai render reply.md            # show a document as terminal text
    cooling-ai render reply.md --json     # dump the render units as JSON
    cooling-ai chat                       # interactive assistant ('x' quits)
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from cooling_ai.assistant.client import RetryingCompletionClient
from cooling_ai.assistant.conversation import Conversation, render_message
from cooling_ai.assistant.exceptions import ConfigurationError
from cooling_ai.assistant.prompts import GREETING
from cooling_ai.markup.render import render_document
from cooling_ai.markup.schema import LineKind, RenderedLine, RenderedTable, RenderedUnit

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Terminal formatting
# ---------------------------------------------------------------------------


def _spans_text(spans) -> str:
    """Visible text of a span sequence (math shown as its source expression)."""
    return "".join(span.expr if span.kind == "math" else span.text for span in spans)


def _format_line(unit: RenderedLine) -> str:
    text = _spans_text(unit.spans)
    if unit.kind is LineKind.HEADING_2:
        return f"{text}\n{'=' * len(text)}"
    if unit.kind is LineKind.HEADING_3:
        return f"> {text}"
    if unit.kind is LineKind.BULLET:
        return f"  * {text}"
    return text


def _format_table(unit: RenderedTable) -> str:
    """Lay the table out in padded columns; ragged rows are padded, never truncated."""
    rows = [[_spans_text(cell) for cell in unit.header]]
    rows += [[_spans_text(cell) for cell in row] for row in unit.rows]
    n_cols = max(len(row) for row in rows)
    widths = [max((len(row[i]) for row in rows if i < len(row)), default=0) for i in range(n_cols)]

    def fmt(row: list[str]) -> str:
        cells = row + [""] * (n_cols - len(row))
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [fmt(rows[0]), "-+-".join("-" * width for width in widths)]
    lines += [fmt(row) for row in rows[1:]]
    return "\n".join(lines)


def format_units(units: list[RenderedUnit]) -> str:
    """Convert render units into plain terminal text, one unit per block of output."""
    out = []
    for unit in units:
        if isinstance(unit, RenderedTable):
            out.append(_format_table(unit))
        else:
            out.append(_format_line(unit))
    return "\n".join(out)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_render(path: str, as_json: bool = False) -> int:
    """Render a document file to stdout."""
    text = Path(path).read_text(encoding="utf-8")
    units = render_document(text)
    if as_json:
        print(json.dumps([unit.model_dump(mode="json") for unit in units], indent=2, ensure_ascii=False))
    else:
        print(format_units(units))
    return 0


def cmd_chat() -> int:
    """Interactive loop: accept questions and print rendered assistant replies."""
    try:
        client = RetryingCompletionClient.from_env()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1

    with client:
        conversation = Conversation(client, greeting=GREETING)
        print(format_units(render_message(conversation.messages[0])))
        logger.info("Assistant ready. Type your question or 'x' to quit.")
        print()

        while True:
            try:
                user_input = input(">> ")
            except (EOFError, KeyboardInterrupt):
                print()
                return 0

            if user_input.strip().lower() == "x":
                return 0

            reply = conversation.send(user_input)
            if reply is None:
                continue
            print()
            print(format_units(render_message(reply)))
            print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cooling-ai", description="Chiller-plant AI assistant")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Render a Markdown-ish reply file")
    render_parser.add_argument("path", help="Text file to render")
    render_parser.add_argument("--json", action="store_true", help="Dump render units as JSON")

    subparsers.add_parser("chat", help="Start an interactive assistant session")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if args.command == "render":
        return cmd_render(args.path, as_json=args.json)
    return cmd_chat()


if __name__ == "__main__":
    sys.exit(main())
