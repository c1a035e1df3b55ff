"""
Linker Driver

Build entry points: link a root source unit given as text, as a file, or as
an input stream. Every call creates a fresh ModuleBuilder, so builds are
independent of each other.

Errors propagate unchanged to the caller.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, TextIO, Union

from ..analysis.module_system import ModuleBuilder
from ..runtime.sandbox import ExportEvaluator
from ..utils.io_utils import read_source_file, read_stream

logger = logging.getLogger(__name__)


class LinkerDriver:
    """
    Linker driver.

    Holds build-wide options (generator evaluator, source overlay) and
    creates one ModuleBuilder per build.
    """

    def __init__(
        self,
        evaluator: Optional[ExportEvaluator] = None,
        source_overlay: Optional[Dict[str, str]] = None,
    ):
        self.evaluator = evaluator
        self.source_overlay = source_overlay or {}

    def create_builder(self, search_root: Union[Path, str]) -> ModuleBuilder:
        return ModuleBuilder(
            search_root,
            evaluator=self.evaluator,
            source_overlay=self.source_overlay,
        )

    def build(
        self,
        source: str,
        search_root: Optional[Union[Path, str]] = None,
        source_file: Optional[str] = None,
    ) -> str:
        """
        Build from text.

        Args:
            source: Root source unit
            search_root: Library folder (current directory if None)
            source_file: Name used in diagnostics

        Returns:
            Linked output
        """
        root = Path(search_root) if search_root is not None else Path.cwd()
        logger.debug(f"Building {source_file or '<input>'} against {root}")
        return self.create_builder(root).link(source, source_file)

    def build_file(self, path: Union[Path, str]) -> str:
        """Build from a file; its directory is the search root."""
        path = Path(path)
        return self.build(read_source_file(path), path.parent, str(path))

    def build_stream(
        self,
        input_stream: TextIO,
        output_stream: TextIO,
        search_root: Optional[Union[Path, str]] = None,
    ) -> str:
        """Buffer the whole input stream, build once and write the result."""
        output = self.build(read_stream(input_stream), search_root, "<stdin>")
        output_stream.write(output)
        output_stream.flush()
        return output


def build(
    source: str,
    search_root: Optional[Union[Path, str]] = None,
    source_file: Optional[str] = None,
) -> str:
    """Build from text with default options."""
    return LinkerDriver().build(source, search_root, source_file)


def build_file(path: Union[Path, str]) -> str:
    """Build from a file with default options."""
    return LinkerDriver().build_file(path)


def build_stream(
    input_stream: TextIO,
    output_stream: TextIO,
    search_root: Optional[Union[Path, str]] = None,
) -> str:
    """Build from a stream with default options."""
    return LinkerDriver().build_stream(input_stream, output_stream, search_root)
