"""
YAMLSTEP CONTEXT STACK TESTS
----------------------------
Push/unwind arithmetic of the IndentContextStack, fractional depths included.
"""

from yamlstep.core.models import Line
from yamlstep.scanning.context import IndentContextStack


def _line(text):
    return Line(text=text, number=1)


def test_deeper_lines_push_without_unwinding():
    stack = IndentContextStack()
    assert stack.adjust(_line("a:")) is False
    assert stack.adjust(_line("  b:")) is False
    assert [f.depth for f in stack.snapshot()] == [0.0, 1.0]


def test_same_level_unwinds_then_pushes():
    stack = IndentContextStack()
    stack.adjust(_line("a:"))
    stack.adjust(_line("  b: 1"))
    assert stack.adjust(_line("  c: 2")) is True
    frames = stack.snapshot()
    assert [f.origin for f in frames] == ["a:", "  c: 2"]


def test_return_to_root_clears_nested_frames():
    stack = IndentContextStack()
    for text in ("a:", "  b:", "    c: 1"):
        stack.adjust(_line(text))
    assert stack.adjust(_line("d: 2")) is True
    assert len(stack) == 1
    assert stack.top.origin == "d: 2"


def test_odd_indent_gives_fractional_depth():
    """FRACTIONAL DEPTH: 3 spaces is depth 1.5, never floored."""
    stack = IndentContextStack()
    stack.adjust(_line("a:"))
    stack.adjust(_line("   b: 1"))
    assert stack.top.depth == 1.5
    # 2 <= 1.5 * 2 unwinds the 1.5 frame but not the root
    assert stack.adjust(_line("  c: 2")) is True
    assert [f.depth for f in stack.snapshot()] == [0.0, 1.0]


def test_snapshot_is_independent():
    stack = IndentContextStack()
    stack.adjust(_line("a:"))
    snap = stack.snapshot()
    stack.adjust(_line("  b:"))
    assert len(snap) == 1
