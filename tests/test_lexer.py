"""
YAMLSTEP LEXER TESTS
--------------------
Shape priority and extraction helpers of the LineClassifier.
"""

import pytest

from yamlstep.core.models import ConstructKind, Line, ValidationVerdict
from yamlstep.scanning.lexer import LineClassifier
from yamlstep.scanning.scanner import scan_document
from yamlstep.scanning.trace import TraceCollector

K = ConstructKind


@pytest.mark.parametrize("text, expected", [
    ("data: |", K.MULTILINE_START),
    ("  conf: >", K.MULTILINE_START),
    ("notes:   |", K.MULTILINE_START),
    ("- item", K.SEQUENCE),
    ("    - name: web", K.SEQUENCE),
    ("- a: |", K.SEQUENCE),
    ("kind: Pod", K.KEY_VALUE),
    ("  spec:", K.KEY_VALUE),
    ("key:value", K.KEY_VALUE),
    ("data: | inline", K.KEY_VALUE),
    ("@@@", K.INVALID),
    ("-", K.INVALID),
    ("-x", K.INVALID),
    ("my key: value", K.INVALID),
    ("just text", K.INVALID),
])
def test_classification_priority(text, expected):
    """PRIORITY TEST: the first matching shape wins."""
    assert LineClassifier().classify(Line(text=text, number=1)) is expected


def test_split_keeps_trailing_empty_line_and_strips_right():
    lines = LineClassifier().split("a: 1  \r\n  b: 2\n")
    assert [l.text for l in lines] == ["a: 1", "  b: 2", ""]
    assert [l.number for l in lines] == [1, 2, 3]
    assert lines[1].indent == 2


def test_split_empty_document():
    lines = LineClassifier().split("")
    assert len(lines) == 1 and lines[0].is_skippable


@pytest.mark.parametrize("text", ["", "   ", "# comment", "    # indented comment"])
def test_skippable_lines(text):
    assert Line(text=text, number=1).is_skippable


def test_key_value_extraction():
    lexer = LineClassifier()
    assert lexer.key_value("  name: web ") == ("name", "web")
    assert lexer.key_value("spec:") == ("spec", None)
    assert lexer.key_value("not a key: x") is None


def test_sequence_content_and_header_key():
    lexer = LineClassifier()
    assert lexer.sequence_content(Line(text="  -   name: web", number=1)) == "name: web"
    assert lexer.header_key(Line(text="  body: |", number=1)) == "body"


def test_no_break_space_indent_matches_classification():
    """WHITESPACE TEST: no-break spaces indent a line and still classify."""
    line = Line(text="\u00a0\u00a0b: 1", number=1)
    assert line.indent == 2
    assert LineClassifier().classify(line) is K.KEY_VALUE
    assert Line(text="\u00a0\u3000", number=1).is_skippable


def test_no_break_space_indented_document_is_valid():
    collector = TraceCollector()
    verdict = scan_document("a:\n\u00a0\u00a0b: 1\n", collector)
    assert verdict == ValidationVerdict(True, "")
    assert collector.records[1].stack[-1].depth == 1.0


def test_leading_byte_order_mark_is_whitespace():
    verdict = scan_document("\ufeffa: 1\n")
    assert verdict == ValidationVerdict(True, "")


def test_bare_carriage_return_is_not_line_content():
    """A lone CR is not a line break and cannot appear inside a value."""
    verdict = scan_document("a: 1\rb: 2")
    assert verdict == ValidationVerdict(False, "Error at line 1: Unexpected line content")
    assert LineClassifier().key_value("a: 1\rb: 2") is None
