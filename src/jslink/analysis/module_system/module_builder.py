"""
Module Builder

Turns a tree of directive-bearing sources into a flat, deduplicated set of
module closures.

This class handles:
- Import resolution (relative names, export table, cycle detection)
- Module loading through the PathResolver or an in-memory source overlay
- Slot variable assignment and immediate emission of each module
- Linking the root module into the final artifact

All state (export table, slot counter, output buffer) belongs to one builder
instance, so independent builds never interfere. A builder links exactly one
root.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .module_info import AbstractModule, Module, ModuleExport
from .name_normalizer import normalize_name
from .path_resolver import PathResolver
from ...backends.iife import IIFEWriter
from ...frontend.parser import DirectiveParser
from ...runtime.sandbox import ExportEvaluator
from ...shared.errors import RecursiveImportError
from ...utils.config import OVERLAY_FILENAME_TEMPLATE, SLOT_VARIABLE_PREFIX

logger = logging.getLogger(__name__)


class ModuleBuilder:
    """
    Dependency graph builder and import resolver.

    - ``exports``: qualified name → ModuleExport, grows monotonically
    - ``writer``: output buffer; modules are written in first-discovery order
    """

    def __init__(
        self,
        search_root: Union[Path, str],
        evaluator: Optional[ExportEvaluator] = None,
        source_overlay: Optional[Dict[str, str]] = None,
    ):
        """
        Args:
            search_root: Library folder the module namespace is rooted at
            evaluator: Generator module evaluator (dukpy sandbox if None)
            source_overlay: Optional in-memory module sources (qualified name -> source);
                           consulted before the filesystem.
        """
        self.path_resolver = PathResolver(search_root, evaluator)
        self.source_overlay = source_overlay or {}
        self.directive_parser = DirectiveParser()
        self.writer = IIFEWriter()
        self.exports: Dict[str, ModuleExport] = {}
        self.modules_count = 0

    def resolve_import(self, module_name: str, stack: Optional[Sequence[str]] = None) -> ModuleExport:
        """
        Resolve an import directive entry.

        Args:
            module_name: Module name as written (may be relative)
            stack: Names of the modules currently being built, outermost first

        Returns:
            ModuleExport (slot varname and alias) of the imported module

        Raises:
            ModuleNotFoundError: If the module cannot be found
            RecursiveImportError: If the module is already being built
        """
        stack = list(stack or [])
        module_name = normalize_name(stack[-1] if stack else None, module_name)

        module_export = self.exports.get(module_name)
        if module_export is not None:
            return module_export

        if module_name in stack:
            raise RecursiveImportError(stack + [module_name])

        module_export = self.exports[module_name] = self.write_module(module_name, stack)
        return module_export

    def write_module(self, module_name: str, stack: List[str]) -> ModuleExport:
        """Load, build and emit a module; returns its export."""
        module = self.load_module(module_name)
        module.build(self, stack + [module_name])

        varname = f"{SLOT_VARIABLE_PREFIX}{self.modules_count}"
        self.modules_count += 1
        self.writer.write_module(module_name, module, varname)

        logger.debug(f"Linked module {module_name} as {varname}: {len(module.imports)} imports")
        return ModuleExport(varname=varname, alias=module.alias)

    def load_module(self, module_name: str) -> AbstractModule:
        """Create an unbuilt module for an absolute name (overlay first, then disk)."""
        if module_name in self.source_overlay:
            return Module(
                self.source_overlay[module_name],
                OVERLAY_FILENAME_TEMPLATE.format(name=module_name),
                module_name,
            )
        return self.path_resolver.resolve(module_name)

    def link(self, source: str, source_file: Optional[str] = None) -> str:
        """
        Link a root source unit.

        The root is wrapped in its own closure. When it imports anything, the
        slot variable list comes first and the root body is nested in a
        closure over its imports; otherwise the body is written directly.
        """
        root = Module(source, source_file)
        writer = self.writer

        with writer.iife():
            root.build(self)

            if root.imports:
                writer.write(";\n")
                with writer.iife(root.imports):
                    writer.write(root.body)
                writer.write(";")
            else:
                writer.write(root.body)

        writer.write(";\n")

        logger.info(f"Linked {source_file or '<input>'}: {self.modules_count} modules")
        return writer.dump()
