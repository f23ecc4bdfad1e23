#!/usr/bin/env python3
"""
YAMLSTEP CORE MODELS
--------------------
Defines the fundamental data structures used across the YamlStep scanner.
These models represent the lowest level of document abstraction: a line,
the nesting frame it opens, and the trace record emitted for it.

Author: YamlStep Team
Date: 2026-10-19
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# Characters treated as whitespace for indentation, trimming and patterns:
# Unicode space separators, line terminators and the byte-order mark.
WHITESPACE = (
    "\t\n\x0b\x0c\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200b))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class YamlStepError(Exception):
    """Base class for every error raised by the scanner."""


class StructuralError(YamlStepError):
    """
    Raised by a line handler when a line is malformed.
    Always caught at the line boundary; never escapes a scan.
    """

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ConstructKind(Enum):
    """The classification bucket a line lands in."""
    START = "START"
    SEQUENCE = "SEQUENCE"
    KEY_VALUE = "KEY_VALUE"
    MULTILINE_START = "MULTILINE_START"
    INVALID = "INVALID"


@dataclass
class Line:
    """
    A single physical line of the document.

    The text is stored with trailing whitespace already removed, so the
    indent is measured against the same string the classifier sees.
    """
    text: str               # Raw text, trailing whitespace stripped
    number: int             # 1-based line number in the source document

    @property
    def indent(self) -> int:
        """Count of leading whitespace characters, including no-break spaces."""
        return len(self.text) - len(self.text.lstrip(WHITESPACE))

    @property
    def is_skippable(self) -> bool:
        """Blank lines and full-line comments never reach the classifier."""
        stripped = self.text.lstrip(WHITESPACE)
        return not stripped or stripped.startswith('#')


@dataclass(frozen=True)
class ContextFrame:
    """
    One nesting level on the IndentContextStack.

    depth is indent / 2 and is never floored: a 3-space indent is depth 1.5.
    """
    origin: str             # Text of the line that opened this context
    depth: float            # Indentation unit (indent width / 2)


@dataclass
class MultilineState:
    """Whether the scanner is inside a |/> block scalar body."""
    active: bool = False
    indent_threshold: int = 0


@dataclass
class ValidationVerdict:
    """
    Final result of a scan. is_valid only ever moves from True to False;
    message holds the most recent error.
    """
    is_valid: bool = True
    message: str = ""


@dataclass(frozen=True)
class TraceRecord:
    """
    Per-line observation handed to the trace sink. The stack is a tuple
    snapshot, so later mutation of the live stack cannot reach it.
    """
    kind: ConstructKind
    stack: Tuple[ContextFrame, ...]
    line_number: int
    content: str
