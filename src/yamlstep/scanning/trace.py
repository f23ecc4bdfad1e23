#!/usr/bin/env python3
"""
YAMLSTEP TRACE EMITTER
----------------------
One-way notification channel from the scanner to whoever watches it,
typically a visualizer that animates construct-kind transitions.

Each scan takes its own sink. There is no global observer registry.

Author: YamlStep Team
Date: 2026-10-19
"""

from typing import Callable, Iterator, List, Optional, Tuple

from yamlstep.core.models import ConstructKind, ContextFrame, Line, TraceRecord

TraceSink = Callable[[TraceRecord], None]


class TraceEmitter:
    """
    Builds TraceRecords and hands them to the sink synchronously.
    A scan with no sink still runs; records are simply dropped.
    """

    def __init__(self, sink: Optional[TraceSink] = None):
        self.sink = sink
        self.emitted = 0

    def emit(self, kind: ConstructKind, stack: Tuple[ContextFrame, ...], line: Line):
        """
        Args:
            kind: Classification reported for this record.
            stack: Tuple snapshot of the context frames.
            line: The line being processed.
        """
        self.emitted += 1
        if self.sink is None:
            return
        self.sink(TraceRecord(kind=kind, stack=stack,
                              line_number=line.number, content=line.text))


class TraceCollector:
    """Sink that keeps every record in order. Handy for tests and the CLI."""

    def __init__(self):
        self.records: List[TraceRecord] = []

    def __call__(self, record: TraceRecord):
        self.records.append(record)

    def __iter__(self) -> Iterator[TraceRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def kinds(self) -> List[ConstructKind]:
        return [r.kind for r in self.records]
