"""
jslink: static module linker for JavaScript sources.

Resolves ``// #import a.b`` directives against a module folder and emits one
self-contained script.
"""

from .compiler.driver import LinkerDriver, build, build_file, build_stream
from .shared.errors import (
    LinkError,
    ModuleNotFoundError,
    RecursiveImportError,
    UnknownDirectiveError,
    DirectiveSyntaxError,
    ExportEvaluationError,
)

__version__ = "0.1.0"

__all__ = [
    'LinkerDriver',
    'build',
    'build_file',
    'build_stream',
    'LinkError',
    'ModuleNotFoundError',
    'RecursiveImportError',
    'UnknownDirectiveError',
    'DirectiveSyntaxError',
    'ExportEvaluationError',
]
