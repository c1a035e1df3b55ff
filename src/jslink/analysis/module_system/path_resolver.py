"""
Module Path Resolution

Pure path resolution algorithm for jslink modules.

Dotted names are walked one segment at a time below the search root. At
each step, in priority order:

1. ``<path>.export.js``            → generator module (stops the walk;
                                     remaining segments are ignored)
2. last segment, ``<path>.js``     → plain module
3. last segment, ``<path>/^.js``   → package index module
4. inner segment: descend only if ``<path>/^.js`` exists

    foo.bar.baz → foo/bar.export.js
    foo.bar.baz → foo/bar/baz.js
    foo.bar.baz → foo/bar/baz/^.js

This class is stateless and can be shared/reused.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .module_info import AbstractModule, ExportedModule, Module
from ...runtime.sandbox import ExportEvaluator, default_evaluator
from ...shared.errors import ModuleNotFoundError
from ...utils.config import (
    EXPORT_MODULE_EXTENSION,
    MODULE_FILE_EXTENSION,
    MODULE_SEPARATOR,
    PACKAGE_INDEX_FILENAME,
)
from ...utils.io_utils import read_source_file

logger = logging.getLogger(__name__)


class PathResolver:
    """
    Resolves absolute dotted module names to module objects.

    Generator modules are evaluated with ``evaluator`` when they are built.
    """

    def __init__(self, search_root: Union[Path, str], evaluator: Optional[ExportEvaluator] = None):
        """
        Args:
            search_root: Directory the module namespace is rooted at
            evaluator: Generator module evaluator (dukpy sandbox if None)
        """
        self.search_root = Path(search_root)
        self.evaluator = evaluator or default_evaluator()

    def resolve(self, module_name: str) -> AbstractModule:
        """
        Resolve an absolute module name.

        Raises:
            ModuleNotFoundError: If no resolution rule matches
        """
        segments = module_name.split(MODULE_SEPARATOR)
        location = self.search_root

        for index, segment in enumerate(segments):
            location = location / segment
            is_last = index == len(segments) - 1

            export_file = _with_suffix(location, EXPORT_MODULE_EXTENSION)
            if export_file.is_file():
                logger.debug(f"Resolved {module_name} to generator module {export_file}")
                return ExportedModule(
                    str(export_file), module_name, read_source_file(export_file), self.evaluator
                )

            index_file = location / PACKAGE_INDEX_FILENAME
            if is_last:
                module_file = _with_suffix(location, MODULE_FILE_EXTENSION)
                if module_file.is_file():
                    return self._load_source_module(module_file, module_name)
                if index_file.is_file():
                    return self._load_source_module(index_file, module_name)
            elif not index_file.is_file():
                # traverse into package folders only
                break

        raise ModuleNotFoundError(module_name)

    def _load_source_module(self, file_path: Path, module_name: str) -> Module:
        logger.debug(f"Resolved {module_name} to {file_path}")
        return Module(read_source_file(file_path), str(file_path), module_name)


def _with_suffix(location: Path, suffix: str) -> Path:
    """Append ``suffix`` to the final path component (``Path.with_suffix`` would replace dots)."""
    return location.parent / (location.name + suffix)
