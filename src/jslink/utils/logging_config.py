"""
Logging configuration: central setup for the CLI entrypoint.

Called once at startup by ``jslink.__main__``. Every module that does
``logger = logging.getLogger(__name__)`` inherits this config; the library
itself never installs handlers.

Levels are resolved in precedence order:
    CLI flag  >  JSLINK_LOG_LEVEL env var  >  WARNING (default)
"""

import logging
import os
import sys
from typing import Optional

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

# WARNING level: minimal, no noise
_FMT_MINIMAL = "%(message)s"

# INFO level: module context
_FMT_VERBOSE = "[%(name)s] %(message)s"

# DEBUG level: full diagnostic with file:line
_FMT_DEBUG = "%(levelname)-5s %(name)s:%(lineno)d %(message)s"

# Third-party loggers that are noisy at INFO/DEBUG
_NOISY_LOGGERS = ("lark",)


def setup_logging(level: Optional[str] = None, quiet_third_party: bool = True) -> None:
    """Configure Python logging for the entire process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Falls back to ``JSLINK_LOG_LEVEL`` and then WARNING.
        quiet_third_party: If True, keep noisy third-party loggers at WARNING
            unless we're at DEBUG level.
    """
    if not level:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    numeric_level = _parse_level(level)

    if numeric_level <= logging.DEBUG:
        fmt = _FMT_DEBUG
    elif numeric_level <= logging.INFO:
        fmt = _FMT_VERBOSE
    else:
        fmt = _FMT_MINIMAL

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(numeric_level)

    if quiet_third_party and numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def _parse_level(level: Optional[str]) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
