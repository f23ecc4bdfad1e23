#!/usr/bin/env python3
"""
YAMLSTEP LEXER - Line Classifier
--------------------------------
Splits raw text into Line models and decides which of the four line
shapes each one has. Shapes are tested in a fixed priority order and the
first pattern that matches wins.

Author: YamlStep Team
Date: 2026-10-19
"""

import re
from typing import List, Optional, Tuple

from yamlstep.core.models import WHITESPACE, ConstructKind, Line

_S = "[" + re.escape(WHITESPACE) + "]"
_WORD = "[A-Za-z0-9_]+"
# Any character except a line terminator
_ANY = "[^\r\n\u2028\u2029]"


class LineClassifier:
    """
    Pattern-matches a single line into a ConstructKind.
    Holds no state between lines; one instance may serve any number of scans.
    """

    # Header with nothing after the block indicator: "key: |" / "key: >"
    MULTILINE_PATTERN = re.compile(f"^{_S}*{_WORD}:{_S}*[|>]{_S}*$")
    # Group 1: item content (must be non-empty after the dash and spacing)
    SEQUENCE_PATTERN = re.compile(f"^{_S}*-{_S}+({_ANY}*)$")
    # Group 1: Key, Group 2: Value (may be empty)
    KEY_VALUE_PATTERN = re.compile(f"^{_S}*({_WORD}):{_S}*({_ANY}*)$")

    PRIORITY = (
        (MULTILINE_PATTERN, ConstructKind.MULTILINE_START),
        (SEQUENCE_PATTERN, ConstructKind.SEQUENCE),
        (KEY_VALUE_PATTERN, ConstructKind.KEY_VALUE),
    )

    def split(self, raw_text: str) -> List[Line]:
        """
        Breaks a document into Lines on line-feed boundaries only.
        A trailing newline yields a final empty Line, which is later skipped.
        """
        return [Line(text=raw.rstrip(WHITESPACE), number=i)
                for i, raw in enumerate(raw_text.split('\n'), 1)]

    def classify(self, line: Line) -> ConstructKind:
        """Returns the first matching shape, or INVALID."""
        for pattern, kind in self.PRIORITY:
            if pattern.match(line.text):
                return kind
        return ConstructKind.INVALID

    def sequence_content(self, line: Line) -> str:
        """
        The item text after the leading dash.
        Example: "  - name: web" -> "name: web"
        """
        return line.text.lstrip(WHITESPACE)[1:].strip(WHITESPACE)

    def key_value(self, text: str) -> Optional[Tuple[str, Optional[str]]]:
        """
        Extracts (key, value) from a key-value shaped string.
        An empty value comes back as None. Returns None when the shape fails.
        """
        match = self.KEY_VALUE_PATTERN.match(text)
        if not match:
            return None
        key, value = match.groups()
        return key, value.strip(WHITESPACE) or None

    def header_key(self, line: Line) -> str:
        """Text before the first colon of a block-scalar header."""
        return line.text.split(":", 1)[0].strip(WHITESPACE)
