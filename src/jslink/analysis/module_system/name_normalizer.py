"""
Module Name Normalization

Maps possibly-relative import names to absolute dotted names.

    normalize_name(None, "a.b")        -> "a.b"
    normalize_name("pkg.sub", ".sib")  -> "pkg.subsib"
    normalize_name(None, ".a")         -> "a"

Exactly one leading separator is consumed; any further leading separators
stay in the name untouched.
"""

from typing import Optional

from ...utils.config import MODULE_SEPARATOR


def is_relative_name(name: str) -> bool:
    return name.startswith(MODULE_SEPARATOR)


def normalize_name(basename: Optional[str], name: str) -> str:
    """
    Normalize a module name to an absolute name.

    Args:
        basename: Absolute name of the importing module (None for the root)
        name: Module name as written in the import directive

    Returns:
        Absolute module name. A relative name is concatenated onto
        ``basename`` with its leading separator dropped; no separator is
        inserted.
    """
    if not is_relative_name(name):
        return name
    relative = name[len(MODULE_SEPARATOR):]
    if basename:
        return basename + relative
    return relative
