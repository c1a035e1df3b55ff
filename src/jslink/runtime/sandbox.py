"""
Sandboxed Export Evaluator

Runs the JavaScript of a generator module (``*.export.js``) and returns the
text produced by its global ``dump()`` function.

Every evaluation gets a fresh Duktape interpreter (via dukpy): the generator
sees none of the linker's state and cannot leak globals into later
evaluations.
"""

import logging
from typing import Optional

import dukpy
from typing_extensions import Protocol

from ..shared.errors import ExportEvaluationError
from ..utils.config import EXPORT_DUMP_FUNCTION

logger = logging.getLogger(__name__)

# Evaluated after the generator source; yields null when dump() is missing.
_DUMP_EXPRESSION = (
    "(function () {\n"
    f"  if (typeof {EXPORT_DUMP_FUNCTION} !== 'function') {{ return null; }}\n"
    f"  var body = {EXPORT_DUMP_FUNCTION}();\n"
    "  return {body: body == null ? '' : String(body)};\n"
    "}())"
)


class ExportEvaluator(Protocol):
    """Produces the body text of a generator module from its source"""

    def evaluate(self, source: str, filename: str) -> str:
        ...


class DukpyEvaluator:
    """ExportEvaluator backed by an isolated dukpy interpreter per call"""

    def evaluate(self, source: str, filename: str) -> str:
        code = source + "\n;\n" + _DUMP_EXPRESSION
        try:
            result = dukpy.evaljs(code)
        except dukpy.JSRuntimeError as e:
            raise ExportEvaluationError(filename, str(e)) from e

        if result is None:
            raise ExportEvaluationError(
                filename, f"no '{EXPORT_DUMP_FUNCTION}()' function defined"
            )
        body = result.get("body") if isinstance(result, dict) else None
        if not isinstance(body, str):
            raise ExportEvaluationError(
                filename, f"'{EXPORT_DUMP_FUNCTION}()' did not produce text"
            )
        logger.debug(f"Evaluated generator module {filename}: {len(body)} characters")
        return body


_default_evaluator: Optional[DukpyEvaluator] = None


def default_evaluator() -> DukpyEvaluator:
    """Shared stateless evaluator instance."""
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = DukpyEvaluator()
    return _default_evaluator
