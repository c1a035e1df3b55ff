"""
IIFE Code Generator

Emits linked output as immediately-invoked function expressions. Each module
becomes a closure whose parameters are its import aliases and whose
arguments are the slot variables of the imported modules:

    var __module_0 = /* a.b */ (function () {
    var b = 1;
    if (typeof b !== 'undefined') { return b }
    }()),
    __module_1 = /* a.c */ (function (b) {
    ...
    }(__module_0));

The generator owns the output buffer; fragments are appended in emission
order and joined once by ``dump()``.
"""

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, List, Sequence

if TYPE_CHECKING:
    from ..analysis.module_system.module_info import AbstractModule, ImportRecord


class IIFEWriter:
    """Append-only output buffer with IIFE helpers"""

    def __init__(self):
        self.buffer: List[str] = []
        self.modules_count = 0

    def write(self, *fragments: str) -> None:
        self.buffer.extend(fragments)

    def dump(self) -> str:
        """Data written so far"""
        return "".join(self.buffer)

    @contextmanager
    def iife(self, imports: Sequence["ImportRecord"] = ()) -> Iterator[None]:
        """Write an IIFE around whatever is written inside the ``with`` block."""
        self.write(
            "(function (",
            ", ".join(i.alias for i in imports),
            ") {\n",
        )
        yield
        self.write(
            "\n}(",
            ", ".join(i.varname for i in imports),
            "))",
        )

    def write_module(self, module_name: str, module: "AbstractModule", varname: str) -> None:
        """
        Write a built module as the next entry of the slot variable list.

        The closure returns the module's own alias when the body defines it.
        """
        self.modules_count += 1
        self.write(
            "var " if self.modules_count == 1 else ",\n",
            varname, " = ", "/* ", module_name, " */ ",
        )
        with self.iife(module.imports):
            self.write(
                module.body, "\n",
                "if (typeof ", module.alias, " !== 'undefined') { return ", module.alias, " }",
            )
