"""
Pytest configuration and shared fixtures for all jslink tests.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from jslink.analysis.module_system import ModuleBuilder
from jslink.compiler.driver import LinkerDriver
from tests.test_utils import write_modules


# =============================================================================
# Library folders
# =============================================================================

@pytest.fixture
def lib_root(tmp_path):
    """Empty module folder, unique per test."""
    root = tmp_path / "lib"
    root.mkdir()
    return root


@pytest.fixture
def make_lib(lib_root):
    """
    Factory fixture that writes module files below ``lib_root``.

    Usage:
        def test_something(make_lib):
            lib = make_lib({"a/^.js": "", "a/b.js": "var b = 1;"})
    """
    def _make_lib(files: Dict[str, str]) -> Path:
        return write_modules(lib_root, files)
    return _make_lib


# =============================================================================
# Linker instances
# =============================================================================

@pytest.fixture
def driver():
    """Fresh driver with default options."""
    return LinkerDriver()


@pytest.fixture
def make_builder(lib_root):
    """Factory fixture for builders rooted at ``lib_root``."""
    def _make_builder(
        source_overlay: Optional[Dict[str, str]] = None,
        evaluator=None,
    ) -> ModuleBuilder:
        return ModuleBuilder(lib_root, evaluator=evaluator, source_overlay=source_overlay)
    return _make_builder


# =============================================================================
# Logging isolation
# =============================================================================

@pytest.fixture
def restore_logging():
    """Restore root logger handlers and level changed by setup_logging()."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
