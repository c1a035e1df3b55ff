"""
Source Location

Position of a directive inside a source unit, used for diagnostics.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SourceLocation:
    """
    Source location of a directive comment.

    - File, line, column (1-based), plus the byte offset into the source
    - Immutable (frozen) for hashability
    """
    file: str
    line: int
    column: int
    offset: int = 0

    def __str__(self) -> str:
        """Format as file:line:column"""
        return f"{self.file}:{self.line}:{self.column}"

    @classmethod
    def from_offset(cls, source: str, offset: int, file: Optional[str] = None) -> "SourceLocation":
        """Compute line/column for an offset into ``source``."""
        line = source.count("\n", 0, offset) + 1
        column = offset - (source.rfind("\n", 0, offset) + 1) + 1
        return cls(file=file or "<input>", line=line, column=column, offset=offset)
