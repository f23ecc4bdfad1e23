#!/usr/bin/env python3
"""
YAMLSTEP AUTOMATON - Reference Edge Table
-----------------------------------------
The fixed construct-kind diagram a visualizer animates while replaying a
trace. A (previous kind, current kind) pair selects one labelled edge.
Pairs with no entry mean "no edge" and are not an error. The scanner can
produce pairs the diagram does not draw, such as INVALID -> anything.

This table is presentational only and has no say in validity.

Author: YamlStep Team
Date: 2026-10-19
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

from yamlstep.core.models import ConstructKind, TraceRecord

K = ConstructKind


@dataclass(frozen=True)
class Edge:
    id: str
    source: ConstructKind
    target: ConstructKind
    label: str


EDGES: Tuple[Edge, ...] = (
    Edge("e1", K.START, K.SEQUENCE, "Process Sequence"),
    Edge("e2", K.START, K.KEY_VALUE, "Process Key-Value"),
    Edge("e3", K.START, K.MULTILINE_START, "Start Multiline"),
    Edge("e4", K.START, K.INVALID, "Invalid Syntax"),

    Edge("e5", K.SEQUENCE, K.INVALID, "Error in Sequence"),
    Edge("e6", K.SEQUENCE, K.KEY_VALUE, "Nested Key-Value"),
    Edge("e7", K.SEQUENCE, K.SEQUENCE, "Continue Sequence"),
    Edge("e15", K.SEQUENCE, K.START, "Sequence Completed"),

    Edge("e8", K.KEY_VALUE, K.INVALID, "Error in Key-Value"),
    Edge("e9", K.KEY_VALUE, K.SEQUENCE, "Start Sequence"),
    Edge("e10", K.KEY_VALUE, K.MULTILINE_START, "Multiline Value"),
    Edge("e11", K.KEY_VALUE, K.KEY_VALUE, "Continue Key-Value"),
    Edge("e16", K.KEY_VALUE, K.START, "Key-Value Completed"),

    Edge("e12", K.MULTILINE_START, K.INVALID, "Error in Multiline"),
    Edge("e13", K.MULTILINE_START, K.KEY_VALUE, "Complete Multiline"),
    Edge("e14", K.MULTILINE_START, K.SEQUENCE, "Multiline in Sequence"),
    Edge("e17", K.MULTILINE_START, K.START, "Multiline Completed"),
)

TRANSITIONS: Dict[Tuple[ConstructKind, ConstructKind], Edge] = {
    (edge.source, edge.target): edge for edge in EDGES
}


def edge_for(previous: Optional[ConstructKind], current: ConstructKind) -> Optional[Edge]:
    """
    Looks up the edge for a transition. The first record of a trace has
    no predecessor and is treated as leaving START.
    """
    return TRANSITIONS.get((previous or K.START, current))


def replay(records: Iterable[TraceRecord]) -> Iterator[Tuple[TraceRecord, Optional[Edge]]]:
    """Pairs every record with the edge that leads into it."""
    previous = None
    for record in records:
        yield record, edge_for(previous, record.kind)
        previous = record.kind
