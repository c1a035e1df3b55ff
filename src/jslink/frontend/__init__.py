"""Frontend: comment lexer, directive parser and directive scanner."""

from .lexer import CommentSpan, iter_comment_spans
from .parser import DirectiveParser
from .scanner import map_directives

__all__ = [
    'CommentSpan',
    'iter_comment_spans',
    'DirectiveParser',
    'map_directives',
]
