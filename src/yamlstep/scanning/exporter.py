#!/usr/bin/env python3
"""
YAMLSTEP EXPORTER - Trace Serialization
---------------------------------------
Converts trace records and verdicts into the plain step objects an
external visualizer consumes: {state, stack, line, content}.

Author: YamlStep Team
Date: 2026-10-19
"""

import json
from typing import Any, Dict, Iterable, List

from yamlstep.core.models import TraceRecord, ValidationVerdict


class TraceExporter:
    """
    The Reconstructor: turns scanner output back into JSON-ready dicts.
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def record_to_dict(self, record: TraceRecord) -> Dict[str, Any]:
        return {
            "state": record.kind.value,
            "stack": [{"origin": f.origin, "depth": f.depth} for f in record.stack],
            "line": record.line_number,
            "content": record.content,
        }

    def verdict_to_dict(self, verdict: ValidationVerdict) -> Dict[str, Any]:
        return {"isValid": verdict.is_valid, "errorMessage": verdict.message}

    def export(self, records: Iterable[TraceRecord], verdict: ValidationVerdict) -> str:
        """
        Serializes a full scan. Steps keep emission order, so a consumer can
        replay them as-is.
        """
        steps: List[Dict[str, Any]] = [self.record_to_dict(r) for r in records]
        payload = {"result": self.verdict_to_dict(verdict), "steps": steps}
        return json.dumps(payload, indent=self.indent, ensure_ascii=False)
