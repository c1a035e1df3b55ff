"""
Directive Comment Lexer

First stage of directive scanning: locate comment spans in JavaScript source
that open with the directive marker.

A line span starts at ``//`` followed by optional spaces or tabs and ``#``,
and runs to the end of the line (the line terminator is not part of the
span). A block span starts at ``/*`` followed by optional whitespace and
``#``, and runs to the first ``*/``. Comments without the marker are never
spans, so an ordinary ``//`` or ``/*`` (including one inside a string
literal such as ``"http://host"`` or ``"lib/*.js"``) cannot hide a directive
that follows it.

String literals are not tracked: marker comments inside a string are
lexed as directives. An unterminated block comment is not a span.
"""

import re
from dataclasses import dataclass
from typing import Iterator

from ..utils.config import DIRECTIVE_MARKER

LINE_COMMENT = "line"
BLOCK_COMMENT = "block"

_MARKER = re.escape(DIRECTIVE_MARKER)
_COMMENT_PATTERN = re.compile(
    rf"//(?P<line>[ \t]*{_MARKER}[^\r\n]*)|/\*(?P<block>\s*{_MARKER}[\s\S]*?)\*/"
)


@dataclass(frozen=True)
class CommentSpan:
    """A marker comment found in source text: ``source[start:end] == text``"""
    kind: str
    start: int
    end: int
    text: str
    interior: str


def iter_comment_spans(source: str) -> Iterator[CommentSpan]:
    """Yield every marker comment span of ``source`` in source order."""
    for match in _COMMENT_PATTERN.finditer(source):
        if match.group("line") is not None:
            kind, interior = LINE_COMMENT, match.group("line")
        else:
            kind, interior = BLOCK_COMMENT, match.group("block")
        yield CommentSpan(
            kind=kind,
            start=match.start(),
            end=match.end(),
            text=match.group(0),
            interior=interior,
        )
