"""
YAMLSTEP EXPORTER TESTS
"""

import json

from yamlstep.scanning.exporter import TraceExporter
from yamlstep.scanning.scanner import scan_document
from yamlstep.scanning.trace import TraceCollector


def test_export_matches_step_shape():
    collector = TraceCollector()
    verdict = scan_document("a:\n   b: 1\n", collector)
    payload = json.loads(TraceExporter().export(collector, verdict))

    assert payload["result"] == {"isValid": True, "errorMessage": ""}
    assert payload["steps"][0] == {
        "state": "KEY_VALUE",
        "stack": [{"origin": "a:", "depth": 0.0}],
        "line": 1,
        "content": "a:",
    }
    assert payload["steps"][1]["stack"][1]["depth"] == 1.5


def test_export_of_invalid_document():
    collector = TraceCollector()
    verdict = scan_document("a: 1\n@@@\n", collector)
    payload = json.loads(TraceExporter(indent=None).export(collector, verdict))

    assert payload["result"]["isValid"] is False
    assert payload["result"]["errorMessage"] == "Error at line 2: Unexpected line content"
    assert [s["state"] for s in payload["steps"]] == ["KEY_VALUE", "INVALID"]
