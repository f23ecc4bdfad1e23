#!/usr/bin/env python3
"""
YAMLSTEP INDENT CONTEXT
-----------------------
The stack of nesting contexts opened while walking a document. Each frame
records the line that opened it and its depth in two-space units.

Author: YamlStep Team
Date: 2026-10-19
"""

from typing import List, Optional, Tuple

from yamlstep.core.models import ContextFrame, Line


class IndentContextStack:
    """
    Ordered stack of ContextFrames. Only the top is ever inspected.
    """

    def __init__(self):
        self._frames: List[ContextFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def top(self) -> Optional[ContextFrame]:
        return self._frames[-1] if self._frames else None

    def clear(self):
        self._frames.clear()

    def snapshot(self) -> Tuple[ContextFrame, ...]:
        """Independent copy for trace records."""
        return tuple(self._frames)

    def adjust(self, line: Line) -> bool:
        """
        Pushes a frame for the line, unwinding first when the line is not
        deeper than the current top.

        Returns True when frames were popped. The caller emits the
        "returned to outer scope" trace record in that case.
        """
        indent = line.indent
        frame = ContextFrame(origin=line.text, depth=indent / 2)

        if not self._frames or indent > self._frames[-1].depth * 2:
            self._frames.append(frame)
            return False

        while self._frames and indent <= self._frames[-1].depth * 2:
            self._frames.pop()
        self._frames.append(frame)
        return True
