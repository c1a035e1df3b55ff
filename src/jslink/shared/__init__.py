"""
Shared components: directive nodes, source locations and errors.
"""

from .source_location import SourceLocation
from .nodes import Directive, ImportSpec
from .errors import (
    Error, ErrorReporter, LinkError, ModuleNotFoundError, RecursiveImportError,
    UnknownDirectiveError, DirectiveSyntaxError, ExportEvaluationError,
    LinkerImplementationError,
)

__all__ = [
    'SourceLocation',
    'Directive',
    'ImportSpec',
    'Error',
    'ErrorReporter',
    'LinkError',
    'ModuleNotFoundError',
    'RecursiveImportError',
    'UnknownDirectiveError',
    'DirectiveSyntaxError',
    'ExportEvaluationError',
    'LinkerImplementationError',
]
