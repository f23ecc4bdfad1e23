#!/usr/bin/env python3
"""
YAMLSTEP VALIDATION AGGREGATOR
------------------------------
Accumulates the outcome of a scan. Validity is monotonic: one error makes
the whole document invalid. The message reports only the last error.

Author: YamlStep Team
Date: 2026-10-19
"""

from yamlstep.core.models import ValidationVerdict


class ValidationAggregator:

    def __init__(self):
        self._verdict = ValidationVerdict()

    def reset(self):
        self._verdict = ValidationVerdict()

    def record_error(self, line_number: int, detail: str):
        self._verdict.is_valid = False
        self._verdict.message = f"Error at line {line_number}: {detail}"

    @property
    def verdict(self) -> ValidationVerdict:
        """A copy, so callers cannot flip validity back."""
        return ValidationVerdict(is_valid=self._verdict.is_valid,
                                 message=self._verdict.message)
