#!/usr/bin/env python3
"""
YAMLSTEP BLOCK TRACKER
----------------------
Keeps the scanner out of literal (|) and folded (>) block scalar bodies.
Lines inside an open block are not structure, so they are never classified.

Author: YamlStep Team
Date: 2026-10-19
"""

from yamlstep.core.models import Line, MultilineState


class MultilineBlockTracker:
    """
    Two-state gate: INACTIVE, or ACTIVE with the header's indent as threshold.

    The threshold is the header line's own indent, not the indent expected
    of its children, so any later line at the header's level or deeper is
    swallowed into the block.
    """

    def __init__(self):
        self.state = MultilineState()

    @property
    def active(self) -> bool:
        return self.state.active

    def reset(self):
        self.state = MultilineState()

    def open(self, header: Line):
        self.state = MultilineState(active=True, indent_threshold=header.indent)

    def swallows(self, line: Line) -> bool:
        """
        True if the line belongs to the open block body and must be skipped.
        A shallower line closes the block and is then classified normally.
        """
        if not self.state.active:
            return False
        if line.indent >= self.state.indent_threshold:
            return True
        self.state = MultilineState()
        return False
