"""
Tests for LinkerDriver build entry points.
"""

import io

import pytest
from jslink import build, build_file, build_stream
from jslink.compiler.driver import LinkerDriver
from jslink.shared.errors import ModuleNotFoundError


class TestBuildEntryPoints:

    def test_build_from_text(self, make_lib, lib_root):
        make_lib({"a.js": "var a = 1;"})
        output = build("// #import a\nuse(a);", lib_root)
        assert "/* a */" in output
        assert output.endswith("}());\n")

    def test_build_defaults_to_current_directory(self, make_lib, lib_root, monkeypatch):
        make_lib({"a.js": "var a = 1;"})
        monkeypatch.chdir(lib_root)
        assert "/* a */" in build("// #import a\n")

    def test_build_file_uses_file_directory(self, make_lib, lib_root):
        make_lib({
            "main.js": "// #import util.strings\nstrings.upper('x');",
            "util/^.js": "",
            "util/strings.js": "var strings = {upper: function (s) { return s.toUpperCase(); }};",
        })
        output = build_file(lib_root / "main.js")
        assert "/* util.strings */" in output

    def test_build_stream(self, make_lib, lib_root):
        make_lib({"a.js": "var a = 1;"})
        out = io.StringIO()
        result = build_stream(io.StringIO("// #import a\nuse(a);"), out, lib_root)
        assert out.getvalue() == result
        assert "/* a */" in result

    def test_errors_propagate(self, lib_root):
        with pytest.raises(ModuleNotFoundError):
            build("// #import nothing\n", lib_root)


class TestDeterminism:

    def test_identical_inputs_give_identical_output(self, make_lib, lib_root):
        make_lib({
            "a.js": "// #import b, c\nvar a = b + c;",
            "b.js": "// #import c\nvar b = c;",
            "c.js": "var c = 1;",
        })
        source = "// #import a, c as cc\nuse(a, cc);"
        assert build(source, lib_root) == build(source, lib_root)

    def test_builds_do_not_share_state(self, make_lib, lib_root):
        make_lib({"a.js": "var a = 1;"})
        driver = LinkerDriver()
        first = driver.build("// #import a\n", lib_root)
        second = driver.build("// #import a\n", lib_root)
        assert first == second
        assert "__module_1" not in second

    def test_driver_overlay(self, lib_root):
        driver = LinkerDriver(source_overlay={"mem": "var mem = 'overlay';"})
        assert "'overlay'" in driver.build("// #import mem\n", lib_root)


if __name__ == "__main__":
    pytest.main([__file__])
