#!/usr/bin/env python3
"""
YAMLSTEP SCANNER - Document Walker
----------------------------------
Drives a single forward pass over a document: gate block-scalar bodies,
classify each line, run the matching handler against the context stack,
and report every step to the trace sink.

A malformed line never stops the pass. Its error is folded into the
verdict and the scanner moves on to the next line.

Author: YamlStep Team
Date: 2026-10-19
"""

import logging
from typing import Callable, Dict, Optional

from yamlstep.core.models import ConstructKind, Line, StructuralError, ValidationVerdict
from yamlstep.scanning.context import IndentContextStack
from yamlstep.scanning.lexer import LineClassifier
from yamlstep.scanning.trace import TraceEmitter, TraceSink
from yamlstep.scanning.tracker import MultilineBlockTracker
from yamlstep.scanning.verdict import ValidationAggregator

logger = logging.getLogger("yamlstep.scanner")


class DocumentScanner:
    """
    Owns one stack, one block tracker and one verdict per scan.
    State is reset at the start of every scan, so an instance can be reused
    but two scans never share anything.
    """

    def __init__(self):
        self.classifier = LineClassifier()
        self.stack = IndentContextStack()
        self.tracker = MultilineBlockTracker()
        self.aggregator = ValidationAggregator()
        self.emitter = TraceEmitter()

        self._handlers: Dict[ConstructKind, Callable[[Line], None]] = {
            ConstructKind.MULTILINE_START: self._handle_multiline,
            ConstructKind.SEQUENCE: self._handle_sequence,
            ConstructKind.KEY_VALUE: self._handle_key_value,
            ConstructKind.INVALID: self._handle_invalid,
        }

    def scan(self, raw_text: str, sink: Optional[TraceSink] = None) -> ValidationVerdict:
        """
        Validates a whole document and returns its verdict.

        Args:
            raw_text: The full document.
            sink: Optional callable that receives each TraceRecord in order.
        """
        # --- RESET GATE ---
        self.stack.clear()
        self.tracker.reset()
        self.aggregator.reset()
        self.emitter = TraceEmitter(sink)

        for line in self.classifier.split(raw_text):
            self.process_line(line)

        verdict = self.aggregator.verdict
        logger.debug(f"Scan finished: valid={verdict.is_valid}, records={self.emitter.emitted}")
        return verdict

    def process_line(self, line: Line):
        if line.is_skippable:
            return
        if self.tracker.swallows(line):
            return

        kind = self.classifier.classify(line)
        try:
            self._handlers[kind](line)
        except StructuralError as e:
            logger.debug(f"Line {line.number}: {e.detail}")
            kind = ConstructKind.INVALID
            self.aggregator.record_error(line.number, e.detail)

        self.emitter.emit(kind, self.stack.snapshot(), line)

    def _adjust_stack(self, line: Line):
        """Push/unwind shared by every structural shape."""
        if self.stack.adjust(line):
            self.emitter.emit(ConstructKind.START, self.stack.snapshot(), line)

    def _handle_multiline(self, line: Line):
        # MULTILINE_PATTERN already requires a key, so this never fires
        if not self.classifier.header_key(line):
            raise StructuralError(f"Invalid multiline string at line {line.number}: Missing key")
        self._adjust_stack(line)
        self.tracker.open(line)

    def _handle_sequence(self, line: Line):
        content = self.classifier.sequence_content(line)
        self._adjust_stack(line)

        # Free text with a colon is only allowed as a well-formed "key: value"
        if ':' in content and self.classifier.key_value(content) is None:
            raise StructuralError("Invalid sequence item: Incorrect nested key-value format")

    def _handle_key_value(self, line: Line):
        key, value = self.classifier.key_value(line.text)
        self._adjust_stack(line)

        if not key:
            raise StructuralError("Missing key")
        if value and value.startswith('-'):
            raise StructuralError("Inline sequences are not allowed")

    def _handle_invalid(self, line: Line):
        raise StructuralError("Unexpected line content")


def scan_document(raw_text: str, sink: Optional[TraceSink] = None) -> ValidationVerdict:
    """Scans with a fresh DocumentScanner."""
    return DocumentScanner().scan(raw_text, sink)
