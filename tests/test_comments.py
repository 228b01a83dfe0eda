"""Tests for comment extraction, including multi-line block tracking."""

from __future__ import annotations

import pytest

from conftest import FIXTURES

from codepick.extract import extract_comments


class TestJavaScriptComments:
    def test_single_and_multi_line(self):
        content = """// This is a single line comment
function helloWorld() {
  /*
   * This is a multi-line comment
   * It spans multiple lines
   */
  console.log("Hello, World!");

  // Another single line comment
  return true;
}

/*
 * This is another multi-line comment
 * At the end of the file
 */"""
        comments = extract_comments(content, "javascript")

        assert len(comments) == 4
        assert [c.type for c in comments] == [
            "single-line-comment", "multi-line-comment",
            "single-line-comment", "multi-line-comment",
        ]
        assert [c.line for c in comments] == [1, 3, 9, 13]

        assert comments[0].content == "This is a single line comment"
        assert comments[2].content == "Another single line comment"
        assert "This is a multi-line comment" in comments[1].content
        assert "It spans multiple lines" in comments[1].content
        assert "This is another multi-line comment" in comments[3].content
        assert "At the end of the file" in comments[3].content

    def test_names_reference_start_line(self):
        comments = extract_comments("x();\n/* a\n b */\n// c", "javascript")
        assert [c.name for c in comments] == ["Comment at line 2", "Comment at line 4"]

    def test_block_closed_on_same_line(self):
        comments = extract_comments("let x = 1; /* inline note */\nlet y = 2;", "javascript")
        assert len(comments) == 1
        assert comments[0].type == "multi-line-comment"
        assert comments[0].line == 1
        assert comments[0].content == "inline note"

    def test_block_content_accumulates_all_lines(self):
        comments = extract_comments("/* first\nsecond\nthird */", "javascript")
        assert len(comments) == 1
        assert comments[0].content == "first\nsecond\nthird */"

    def test_single_line_markers_inside_block_are_not_separate(self):
        comments = extract_comments("/*\n// not separate\n*/", "javascript")
        assert len(comments) == 1
        assert "// not separate" in comments[0].content

    def test_unterminated_block_is_dropped(self):
        comments = extract_comments("// kept\n/* never closed\nstill open\n", "javascript")
        assert len(comments) == 1
        assert comments[0].content == "kept"

    def test_only_unterminated_block(self):
        assert extract_comments("/*\n * dangling", "javascript") == []

    def test_line_comment_first_swallows_block_opener(self):
        comments = extract_comments("// note /* not a block", "javascript")
        assert len(comments) == 1
        assert comments[0].type == "single-line-comment"
        assert comments[0].content == "note /* not a block"

    def test_block_then_line_comment_on_one_line(self):
        comments = extract_comments("x(); // note\ny(); /* a */ // b", "javascript")
        assert [(c.type, c.line, c.content) for c in comments] == [
            ("single-line-comment", 1, "note"),
            ("multi-line-comment", 2, "a"),
            ("single-line-comment", 2, "b"),
        ]

    def test_block_opener_containing_slashes(self):
        text = "/* docs at http://example.com\n * detail line\n */\nfoo();"
        comments = extract_comments(text, "javascript")
        assert len(comments) == 1
        assert comments[0].type == "multi-line-comment"
        assert comments[0].line == 1
        assert comments[0].content.startswith("docs at http://example.com")
        assert "detail line" in comments[0].content

    def test_line_comment_after_block_close(self):
        comments = extract_comments("/* a\n b */ // tail", "javascript")
        assert [(c.type, c.line) for c in comments] == [
            ("multi-line-comment", 1),
            ("single-line-comment", 2),
        ]
        assert comments[1].content == "tail"

    def test_empty_single_line_comment(self):
        comments = extract_comments("//", "javascript")
        assert len(comments) == 1
        assert comments[0].content == ""

    def test_calculator_fixture(self):
        text = (FIXTURES / "calculator.js").read_text(encoding="utf-8")
        comments = extract_comments(text, "javascript")
        assert [(c.type, c.line) for c in comments] == [
            ("multi-line-comment", 1),
            ("multi-line-comment", 5),
            ("multi-line-comment", 15),
            ("single-line-comment", 26),
        ]
        assert comments[-1].content == "Export the calculator"


class TestPythonComments:
    def test_hash_comments_and_docstrings(self):
        content = '''# module comment
def f():
    """Summary line.

    Details.
    """
    return 1  # trailing

def g():
    """One-liner."""
'''
        comments = extract_comments(content, "python")
        assert [(c.type, c.line) for c in comments] == [
            ("single-line-comment", 1),
            ("multi-line-comment", 3),
            ("single-line-comment", 7),
            ("multi-line-comment", 10),
        ]
        assert comments[0].content == "module comment"
        assert comments[1].content.startswith("Summary line.")
        assert "Details." in comments[1].content
        assert comments[2].content == "trailing"
        assert comments[3].content == "One-liner."

    def test_single_quote_docstring(self):
        comments = extract_comments("'''\nblock\n'''", "python")
        assert len(comments) == 1
        assert comments[0].content == "block\n'''"

    def test_unterminated_docstring_dropped(self):
        assert extract_comments('x = 1\n"""\nopen forever', "python") == []


class TestCountProperty:
    """N single-line comments plus M closed blocks give N + M elements."""

    SAMPLES = {
        "javascript": ("// one\nfoo();\n/* a\n b */\n// two\n/* c */", 4),
        "typescript": ("// one\nlet x: number = 1;\n/*\n * doc\n */", 2),
        "java": ("// one\n/**\n * Javadoc\n */\npublic class A {} // two", 3),
        "go": ("// Package main\npackage main\n/* block */\n// three", 3),
        "python": ("# one\n'''\nblock\n'''\n# two\n\"\"\"inline\"\"\"", 4),
    }

    @pytest.mark.parametrize("language", sorted(SAMPLES))
    def test_count(self, language):
        text, expected = self.SAMPLES[language]
        comments = extract_comments(text, language)
        assert len(comments) == expected
        lines = [c.line for c in comments]
        assert lines == sorted(lines)


class TestUnsupportedLanguage:
    def test_unknown_language_returns_empty(self):
        assert extract_comments("// comment", "cobol") == []

    def test_empty_text(self):
        assert extract_comments("", "javascript") == []
