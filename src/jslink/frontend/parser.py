"""
Directive Parser

Second stage of directive scanning: decide whether a comment carries a
directive and parse it.

A comment is a directive when its interior, after optional leading
whitespace, starts with the directive marker ``#``. The payload after the
marker is split into a command token (the first whitespace-delimited run)
and an optional argument string (the remainder, possibly spanning several
lines). The argument string of ``import`` is parsed with a lark LALR grammar.
"""

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from lark import Lark
from lark.exceptions import UnexpectedToken, UnexpectedCharacters, ParseError as LarkParseError

from .lexer import CommentSpan
from .transformer import ImportListTransformer
from ..shared.errors import DirectiveSyntaxError, UnknownDirectiveError
from ..shared.nodes import Directive, ImportSpec
from ..shared.source_location import SourceLocation
from ..utils.config import DIRECTIVE_MARKER, IMPORT_COMMAND

logger = logging.getLogger(__name__)

SUPPORTED_COMMANDS = (IMPORT_COMMAND,)

_COMMAND_PATTERN = re.compile(r"^(\S+)(?:\s+([\s\S]*))?$")


@lru_cache(maxsize=1)
def _import_list_parser() -> Lark:
    """Build the import argument parser once per process (grammar is immutable)."""
    grammar_path = Path(__file__).parent / "directive.lark"
    return Lark.open(
        str(grammar_path),
        start='import_list',
        parser='lalr',
        propagate_positions=True,
        maybe_placeholders=False,
    )


class DirectiveParser:
    """
    Turns comment spans into Directive nodes.

    Only ``import`` is a known command; any other command token is fatal.
    """

    def __init__(self):
        self.parser = _import_list_parser()
        self.transformer = ImportListTransformer()

    def parse_comment(
        self,
        span: CommentSpan,
        source: str,
        source_file: Optional[str] = None,
    ) -> Optional[Directive]:
        """
        Parse a comment span.

        Returns None when the comment is not a directive.

        Raises:
            UnknownDirectiveError: command token is not ``import``
            DirectiveSyntaxError: import arguments are malformed
        """
        interior = span.interior.lstrip()
        if not interior.startswith(DIRECTIVE_MARKER):
            return None

        payload = interior[len(DIRECTIVE_MARKER):].strip()
        if not payload:
            return None

        match = _COMMAND_PATTERN.match(payload)
        command, arguments = match.group(1), match.group(2) or None
        location = SourceLocation.from_offset(source, span.start, source_file)

        if command not in SUPPORTED_COMMANDS:
            raise UnknownDirectiveError(command, location)

        directive = Directive(
            command=command,
            text=span.text,
            location=location,
        )
        directive.imports = self.parse_imports(arguments, location)
        logger.debug(f"Directive at {location}: {directive.text!r} -> {', '.join(map(str, directive.imports))}")
        return directive

    def parse_imports(self, arguments: Optional[str], location: Optional[SourceLocation] = None) -> List[ImportSpec]:
        """Parse ``a.b, .c as d`` into ImportSpecs, preserving order."""
        if not arguments or not arguments.strip():
            raise DirectiveSyntaxError(
                f"'{IMPORT_COMMAND}' directive requires at least one module name", location
            )
        try:
            tree = self.parser.parse(arguments)
        except (UnexpectedToken, UnexpectedCharacters, LarkParseError) as e:
            raise DirectiveSyntaxError(
                f"Invalid '{IMPORT_COMMAND}' directive arguments {arguments.strip()!r}: {_describe(e)}",
                location,
            ) from e
        return self.transformer.transform(tree)


def _describe(error: Exception) -> str:
    """One-line summary of a lark error."""
    if isinstance(error, UnexpectedCharacters):
        return f"unexpected character {error.char!r} at column {error.column}"
    if isinstance(error, UnexpectedToken):
        if error.token.type == "$END":
            return "unexpected end of arguments"
        return f"unexpected {error.token!r} at column {error.column}"
    return str(error).splitlines()[0]
