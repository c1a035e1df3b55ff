"""
Directive Scanner

Replaces directive comments in a source unit with whatever a callback
returns. Scanning and import collection happen in one pass: the callback is
invoked once per directive, in source order.
"""

from typing import Callable, List, Optional

from .lexer import iter_comment_spans
from .parser import DirectiveParser
from ..shared.nodes import Directive

DirectiveCallback = Callable[[Directive], Optional[str]]


def map_directives(
    source: str,
    callback: DirectiveCallback,
    source_file: Optional[str] = None,
    parser: Optional[DirectiveParser] = None,
) -> str:
    """
    Map directives found in ``source`` to callback results.

    The result of ``callback`` is inserted in place of the directive comment;
    ``None`` or an empty string removes the comment. All other text is left
    untouched.
    """
    parser = parser or DirectiveParser()
    pieces: List[str] = []
    last = 0

    for span in iter_comment_spans(source):
        directive = parser.parse_comment(span, source, source_file)
        if directive is None:
            continue
        replacement = callback(directive)
        pieces.append(source[last:span.start])
        if replacement:
            pieces.append(replacement)
        last = span.end

    pieces.append(source[last:])
    return "".join(pieces)
