"""
Directive Transformer

Converts the lark parse tree of an import argument list into ImportSpec nodes.
"""

from typing import List

from lark import Transformer
from lark.lexer import Token

from ..shared.nodes import ImportSpec


class ImportListTransformer(Transformer):
    """Transform ``import_list`` trees into ``List[ImportSpec]``"""

    def import_list(self, specs: List[ImportSpec]) -> List[ImportSpec]:
        return list(specs)

    def import_spec(self, children: List[Token]) -> ImportSpec:
        name = str(children[0])
        alias = str(children[1]) if len(children) > 1 else None
        return ImportSpec(name=name, alias=alias)
