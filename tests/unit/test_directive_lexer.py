"""
Tests for the comment lexer (first stage of directive scanning).
"""

import pytest
from jslink.frontend.lexer import BLOCK_COMMENT, LINE_COMMENT, iter_comment_spans


class TestCommentSpans:
    """Marker comment spans are found in order and never overlap"""

    def test_line_comment(self):
        source = "var a = 1; // #import x\nvar b;"
        spans = list(iter_comment_spans(source))
        assert len(spans) == 1
        span = spans[0]
        assert span.kind == LINE_COMMENT
        assert span.text == "// #import x"
        assert span.interior == " #import x"
        assert source[span.start:span.end] == span.text

    def test_line_comment_excludes_carriage_return(self):
        source = "// #import x\r\nvar b;"
        span = next(iter_comment_spans(source))
        assert span.text == "// #import x"

    def test_line_marker_does_not_cross_lines(self):
        assert list(iter_comment_spans("//\n#import x")) == []

    def test_block_comment_spans_lines(self):
        source = "/*\n #import a,\n   b as c\n*/\ncode();"
        span = next(iter_comment_spans(source))
        assert span.kind == BLOCK_COMMENT
        assert span.text == "/*\n #import a,\n   b as c\n*/"
        assert span.interior == "\n #import a,\n   b as c\n"

    def test_block_comment_is_not_greedy(self):
        source = "/* #one */ x(); /* #two */"
        assert [s.interior for s in iter_comment_spans(source)] == [" #one ", " #two "]

    def test_line_marker_inside_block_belongs_to_block(self):
        source = "/* #import a // #import x */"
        spans = list(iter_comment_spans(source))
        assert len(spans) == 1
        assert spans[0].kind == BLOCK_COMMENT

    def test_block_marker_inside_line_belongs_to_line(self):
        source = "// #import a /* #b\nc(); */"
        spans = list(iter_comment_spans(source))
        assert [s.kind for s in spans] == [LINE_COMMENT]

    def test_unterminated_block_comment_is_ignored(self):
        assert list(iter_comment_spans("/* #import never closed")) == []

    def test_comments_without_marker_are_not_spans(self):
        source = "// header\n/* block */\nvar a = 1; // trailing\n"
        assert list(iter_comment_spans(source)) == []


class TestCommentLikeText:
    """Ordinary comment openers never hide a later directive"""

    def test_url_in_string_before_line_directive(self):
        source = 'var u = "http://x.org"; // #import b\nconsole.log(b)'
        spans = list(iter_comment_spans(source))
        assert [s.text for s in spans] == ["// #import b"]

    def test_glob_in_string_before_block_directive(self):
        source = 'var p = "lib/*.js";\n/* #import b */\nconsole.log(b)'
        spans = list(iter_comment_spans(source))
        assert [s.text for s in spans] == ["/* #import b */"]

    def test_plain_block_comment_before_directive(self):
        source = "/* see below */\n// #import b"
        spans = list(iter_comment_spans(source))
        assert [s.kind for s in spans] == [LINE_COMMENT]

    def test_marker_comment_inside_string_is_a_span(self):
        spans = list(iter_comment_spans("var s = '/* #import a */';"))
        assert [s.text for s in spans] == ["/* #import a */"]

    def test_no_comments(self):
        assert list(iter_comment_spans("var a = 1 / 2;")) == []


if __name__ == "__main__":
    pytest.main([__file__])
