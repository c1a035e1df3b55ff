"""
Directive nodes

Clean, minimal nodes produced by the directive parser. Pure data, no
business logic.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .source_location import SourceLocation


@dataclass(frozen=True)
class ImportSpec:
    """One ``<dotted-module-name>[ as <alias>]`` entry of an import directive"""
    name: str
    alias: Optional[str] = None

    def __str__(self) -> str:
        if self.alias:
            return f"{self.name} as {self.alias}"
        return self.name


@dataclass
class Directive:
    """
    A directive comment found in a source unit.

    - command: command token (``import``)
    - text: the full comment text being replaced
    - imports: parsed import entries, in source order
    """
    command: str
    text: str
    location: Optional[SourceLocation] = None
    imports: List[ImportSpec] = field(default_factory=list)
