"""Inline formatting: split one line into plain, math and emphasis spans.

Two passes.  lex() cuts the line at every ``$`` and every ``**`` (pairing
asterisks from the left), producing delimiter tokens and the text runs between
them.  reduce_tokens() then walks the tokens left to right: a delimiter opens
a span that the *next* delimiter of the same kind closes, and the raw text of
everything in between becomes the span's content.  An opener with no closer
is ordinary text.

This gives the same result as a non-greedy ``(\\$.*?\\$|\\*\\*.*?\\*\\*)`` split:
matches never overlap, the first closing delimiter wins, and a character
range is claimed by at most one span.
"""

from enum import Enum
from typing import NamedTuple

from cooling_ai.markup.patterns import BACKTICK, ITALIC_RE, MATH_DELIMITER, STRONG_DELIMITER, STRONG_RE
from cooling_ai.markup.schema import EmphasisSpan, MathSpan, PlainSpan, Span


class TokenKind(Enum):
    TEXT = "text"
    MATH_DELIM = "math_delim"
    STRONG_DELIM = "strong_delim"


class Token(NamedTuple):
    kind: TokenKind
    text: str


def lex(line: str) -> list[Token]:
    """Cut *line* into delimiter tokens and the text runs between them."""
    tokens: list[Token] = []
    text_start = 0
    i = 0
    while i < len(line):
        if line.startswith(MATH_DELIMITER, i):
            delim = Token(TokenKind.MATH_DELIM, MATH_DELIMITER)
        elif line.startswith(STRONG_DELIMITER, i):
            delim = Token(TokenKind.STRONG_DELIM, STRONG_DELIMITER)
        else:
            i += 1
            continue

        if text_start < i:
            tokens.append(Token(TokenKind.TEXT, line[text_start:i]))
        tokens.append(delim)
        i += len(delim.text)
        text_start = i

    if text_start < len(line):
        tokens.append(Token(TokenKind.TEXT, line[text_start:]))
    return tokens


def _find_closer(tokens: list[Token], opener: int) -> int | None:
    kind = tokens[opener].kind
    for j in range(opener + 1, len(tokens)):
        if tokens[j].kind is kind:
            return j
    return None


def reduce_tokens(tokens: list[Token]) -> list[Span]:
    """Pair delimiter tokens into spans; unpaired delimiters become plain text."""
    spans: list[Span] = []
    pending: list[str] = []

    def flush() -> None:
        if pending:
            spans.append(PlainSpan(text="".join(pending)))
            pending.clear()

    i = 0
    while i < len(tokens):
        token = tokens[i]
        closer = None if token.kind is TokenKind.TEXT else _find_closer(tokens, i)
        if closer is None:
            pending.append(token.text)
            i += 1
            continue

        flush()
        inner = "".join(t.text for t in tokens[i + 1 : closer])
        if token.kind is TokenKind.MATH_DELIM:
            spans.append(MathSpan(expr=inner))
        else:
            spans.append(EmphasisSpan(text=inner))
        i = closer + 1

    flush()
    return spans


def tokenize(line: str) -> list[Span]:
    """Split one line into plain / math / emphasis spans."""
    return reduce_tokens(lex(line))


def strip_markdown(text: str) -> str:
    """Remove bold, italic and backtick markup for plain-text contexts such as chart labels."""
    text = STRONG_RE.sub(r"\1", text)
    text = ITALIC_RE.sub(r"\1", text)
    return text.replace(BACKTICK, "")
