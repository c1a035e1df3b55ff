"""
Error Reporting

Typed link errors plus a rustc-style diagnostic formatter used by the CLI.

All link errors are unrecoverable: they are raised at the point of detection
and propagate unchanged to the caller of the build. There is no partial
output mode.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .source_location import SourceLocation
from ..utils.config import COLOR_ENV_VAR, ERROR_POINTER_CHAR
from ..utils.io_utils import read_source_file


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set or not a TTY)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get(COLOR_ENV_VAR, "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    if explicit in ("1", "true", "yes", "always"):
        return True
    return sys.stderr.isatty()

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_CYAN   = "\033[36m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


# ============================================================================
# Exception Classes
# ============================================================================

class LinkError(Exception):
    """Base exception for all jslink errors"""
    error_code = "L0000"

    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        return self.message


class ModuleNotFoundError(LinkError):
    """Raised when a dotted module name matches no artifact under the search root"""
    error_code = "L0001"

    def __init__(self, module_name: str):
        super().__init__(f"Module '{module_name}' not found")
        self.module_name = module_name


class RecursiveImportError(ModuleNotFoundError):
    """Raised when a module directly or transitively imports itself"""
    error_code = "L0002"

    def __init__(self, stack: Sequence[str]):
        self.stack = list(stack)
        LinkError.__init__(
            self,
            "Recursive imports are not allowed (" + " -> ".join(self.stack) + ")",
        )
        self.module_name = self.stack[-1]


class UnknownDirectiveError(LinkError):
    """Raised when a directive comment carries a command other than `import`"""
    error_code = "L0003"

    def __init__(self, command: str, location: Optional[SourceLocation] = None):
        super().__init__(f"Unknown directive '{command}'", location)
        self.command = command


class DirectiveSyntaxError(LinkError):
    """Raised when the arguments of a directive cannot be parsed"""
    error_code = "L0004"


class ExportEvaluationError(LinkError):
    """Raised when a generator module fails to produce its body"""
    error_code = "L0005"

    def __init__(self, filename: str, reason: str):
        super().__init__(f"Generator module '{filename}' failed: {reason}")
        self.filename = filename
        self.reason = reason


class LinkerImplementationError(Exception):
    """
    Error in jslink itself (invalid internal state), never in user sources.
    """
    def __init__(self, message: str, error_code: str = "L9999"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


# ---------------------------------------------------------------------------
# Error dataclass
# ---------------------------------------------------------------------------

@dataclass
class Error:
    """Renderable diagnostic"""
    message: str
    location: Optional[SourceLocation]
    code: Optional[str] = None
    help: Optional[str] = None
    note: Optional[str] = None

    @classmethod
    def from_exception(cls, exc: LinkError) -> "Error":
        help_text = None
        note = None
        if isinstance(exc, RecursiveImportError):
            note = "import chain: " + " -> ".join(exc.stack)
        elif isinstance(exc, ModuleNotFoundError):
            help_text = "check the search root and the module's file layout"
        elif isinstance(exc, UnknownDirectiveError):
            help_text = "the only supported directive is `import`"
        return cls(
            message=exc.message,
            location=exc.location,
            code=exc.error_code,
            help=help_text,
            note=note,
        )


# ---------------------------------------------------------------------------
# Formatting engine
# ---------------------------------------------------------------------------

def _format_diagnostic(
    error: Error,
    source_files: Dict[str, str],
    color: bool = False,
) -> str:
    """
    Render a single diagnostic in rustc style.

    Example output (plain, no color)::

        error[L0003]: Unknown directive 'include'
         --> main.js:1:1
          |
        1 | // #include a.b
          | ^^^^^^^^^^^^^^^
          |
          = help: the only supported directive is `import`
    """
    out: List[str] = []

    code_str = f"[{error.code}]" if error.code else ""
    out.append(
        _style(f"error{code_str}", _BOLD, _RED, color=color)
        + _style(f": {error.message}", _BOLD, color=color)
    )

    if error.location is None:
        _append_annotations(out, error, 1, color)
        return "\n".join(out)

    loc = error.location
    source = source_files.get(loc.file)
    if source is None and Path(loc.file).is_file():
        source = read_source_file(loc.file)

    gw = max(len(str(loc.line)), 1)
    out.append(_style(" " * gw + "--> ", _BOLD, _BLUE, color=color) + str(loc))
    if source is None:
        _append_annotations(out, error, gw, color)
        return "\n".join(out)

    src_lines = source.split("\n")
    idx = loc.line - 1
    code_line = src_lines[idx].rstrip("\r") if 0 <= idx < len(src_lines) else ""
    col_start = max(loc.column, 1) - 1
    span_len = max(1, len(code_line.rstrip()) - col_start)
    carets = " " * col_start + ERROR_POINTER_CHAR * span_len

    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))
    out.append(_style(str(loc.line).rjust(gw) + " | ", _BOLD, _BLUE, color=color) + code_line)
    out.append(_style(" " * (gw + 1) + "| ", _BOLD, _BLUE, color=color) + _style(carets, _BOLD, _RED, color=color))

    _append_annotations(out, error, gw, color)
    return "\n".join(out)


def _append_annotations(
    out: List[str],
    error: Error,
    gw: int,
    color: bool,
) -> None:
    if not (error.help or error.note):
        return
    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))
    pad = " " * (gw + 1)
    if error.help:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("help: ", _BOLD, color=color)
            + error.help
        )
    if error.note:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("note: ", _BOLD, color=color)
            + error.note
        )


# ---------------------------------------------------------------------------
# ErrorReporter
# ---------------------------------------------------------------------------

class ErrorReporter:
    """
    Formats link errors for the command line.

    ``source_files`` maps filenames to already-loaded text; files that are
    not in the map are read from disk when a diagnostic points into them.
    """

    def __init__(self, source_files: Optional[Dict[str, str]] = None):
        self.source_files = source_files or {}

    def format_error(self, error: LinkError, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        return _format_diagnostic(Error.from_exception(error), self.source_files, color=use_color)

    def print_error(self, error: LinkError) -> None:
        print(self.format_error(error), file=sys.stderr)
