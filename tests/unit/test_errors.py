"""
Tests for link errors and the diagnostic formatter.
"""

import pytest
from jslink.shared.errors import (
    DirectiveSyntaxError,
    ErrorReporter,
    LinkError,
    ModuleNotFoundError,
    RecursiveImportError,
    UnknownDirectiveError,
)
from jslink.shared.source_location import SourceLocation


class TestErrorHierarchy:

    def test_all_errors_are_link_errors(self):
        for error in (
            ModuleNotFoundError("a"),
            RecursiveImportError(["a", "a"]),
            UnknownDirectiveError("x"),
            DirectiveSyntaxError("bad"),
        ):
            assert isinstance(error, LinkError)

    def test_recursive_import_error_carries_chain(self):
        error = RecursiveImportError(["a", "b", "a"])
        assert isinstance(error, ModuleNotFoundError)
        assert error.stack == ["a", "b", "a"]
        assert error.module_name == "a"


class TestSourceLocation:

    def test_from_offset(self):
        source = "one\ntwo\n  three"
        loc = SourceLocation.from_offset(source, source.index("three"), "f.js")
        assert (loc.line, loc.column) == (3, 3)
        assert str(loc) == "f.js:3:3"

    def test_default_file(self):
        assert SourceLocation.from_offset("x", 0).file == "<input>"


class TestErrorReporter:
    """Rendering without color"""

    def test_error_without_location(self):
        out = ErrorReporter().format_error(ModuleNotFoundError("a.b"), color=False)
        assert out.startswith("error[L0001]: Module 'a.b' not found")
        assert "= help:" in out

    def test_recursive_import_note(self):
        out = ErrorReporter().format_error(RecursiveImportError(["x", "y", "x"]), color=False)
        assert "error[L0002]" in out
        assert "= note: import chain: x -> y -> x" in out

    def test_error_with_source_snippet(self):
        source = "var a;\n// #include b\n"
        loc = SourceLocation.from_offset(source, source.index("//"), "main.js")
        out = ErrorReporter({"main.js": source}).format_error(
            UnknownDirectiveError("include", loc), color=False
        )
        assert "error[L0003]: Unknown directive 'include'" in out
        assert " --> main.js:2:1" in out
        assert "2 | // #include b" in out
        assert "^^^^^^^^^^^^^" in out

    def test_error_source_read_from_disk(self, tmp_path):
        path = tmp_path / "mod.js"
        path.write_text("// #import ,\n", encoding="utf-8")
        loc = SourceLocation(file=str(path), line=1, column=1)
        out = ErrorReporter().format_error(DirectiveSyntaxError("bad import", loc), color=False)
        assert "1 | // #import ," in out

    def test_color_output(self):
        out = ErrorReporter().format_error(ModuleNotFoundError("a"), color=True)
        assert "\033[" in out


if __name__ == "__main__":
    pytest.main([__file__])
