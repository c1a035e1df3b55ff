"""
Module System Types

Modules as seen by the linker, and the records that connect them.

A module is created when it is first resolved (or once for the root), built
exactly once, and never mutated afterwards.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ...frontend.scanner import map_directives
from ...shared.errors import LinkerImplementationError
from ...shared.nodes import Directive
from ...utils.config import MODULE_SEPARATOR

if TYPE_CHECKING:
    from ...runtime.sandbox import ExportEvaluator
    from .module_builder import ModuleBuilder


@dataclass(frozen=True)
class ModuleExport:
    """What the export table remembers about a linked module"""
    varname: str
    alias: str


@dataclass(frozen=True)
class ImportRecord:
    """
    One dependency edge of a built module.

    - varname: slot variable holding the imported module's closure result
    - alias: parameter name inside the importing closure
    """
    varname: str
    alias: str


def module_alias(name: str) -> str:
    """Closure parameter name of a module: the last dotted segment."""
    return name.rsplit(MODULE_SEPARATOR, 1)[-1]


class AbstractModule:
    """
    Common state of all modules.

    ``body`` and ``imports`` are populated by ``build()``.
    """

    def __init__(self, filename: Optional[str] = None, name: Optional[str] = None):
        self.filename = filename
        self.name = name
        self.alias = module_alias(name) if name else None
        self.body: Optional[str] = None
        self.imports: Tuple[ImportRecord, ...] = ()
        self._built = False

    @property
    def is_built(self) -> bool:
        return self._built

    def build(self, builder: "ModuleBuilder", stack: Optional[Sequence[str]] = None) -> None:
        """Populate ``body`` and ``imports``; resolves imports through ``builder``."""
        if self._built:
            raise LinkerImplementationError(f"Module {self.name or '<root>'} built twice")
        body, imports = self._build(builder, list(stack or []))
        self.body = body
        self.imports = tuple(imports)
        self._built = True

    def _build(self, builder: "ModuleBuilder", stack: List[str]) -> Tuple[str, List[ImportRecord]]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, filename={self.filename!r})"


class Module(AbstractModule):
    """Module with directive-bearing source text"""

    def __init__(self, source: str, filename: Optional[str] = None, name: Optional[str] = None):
        super().__init__(filename, name)
        self.source = source

    def _build(self, builder: "ModuleBuilder", stack: List[str]) -> Tuple[str, List[ImportRecord]]:
        imports: List[ImportRecord] = []

        def handle(directive: Directive) -> None:
            for spec in directive.imports:
                module_export = builder.resolve_import(spec.name, stack)
                imports.append(ImportRecord(
                    varname=module_export.varname,
                    alias=spec.alias or module_export.alias,
                ))

        body = map_directives(self.source, handle, self.filename, builder.directive_parser)
        return body, imports


class ExportedModule(AbstractModule):
    """
    Generator module: its body is computed by running code in isolation.

    Generator modules never import anything.
    """

    def __init__(self, filename: str, name: str, source: str, evaluator: "ExportEvaluator"):
        super().__init__(filename, name)
        self._source = source
        self._evaluator = evaluator

    def produce_body(self) -> str:
        return self._evaluator.evaluate(self._source, self.filename)

    def _build(self, builder: "ModuleBuilder", stack: List[str]) -> Tuple[str, List[ImportRecord]]:
        return self.produce_body(), []
