#!/usr/bin/env python3
"""
YAMLSTEP ENGINE - The Orchestrator
----------------------------------
The ValidationEngine walks a workspace, runs a fresh DocumentScanner on
every matching file, and folds the outcome into report dicts that the
CLI renders. File-level failures become reports, never exceptions.

Author: YamlStep Team
Date: 2026-10-19
"""

import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from yamlstep.core.config import ConfigManager
from yamlstep.scanning.scanner import DocumentScanner
from yamlstep.scanning.trace import TraceCollector

logger = logging.getLogger("yamlstep.engine")


class ValidationEngine:
    """
    Principal orchestrator for document validation.
    Holds the workspace and its configuration; scanners are per file.
    """

    def __init__(self, workspace_path: str, config: Optional[ConfigManager] = None):
        self.workspace = Path(workspace_path).resolve()
        self.config = config or ConfigManager(self.workspace)

    def check_text(self, raw_text: str, source: str = "<string>") -> Dict[str, Any]:
        """Scans in-memory text and builds a report."""
        collector = TraceCollector()
        verdict = DocumentScanner().scan(raw_text, collector)

        logger.debug(f"{source}: valid={verdict.is_valid} ({len(collector)} trace records)")
        return {
            "file_path": source,
            "success": verdict.is_valid,
            "status": "VALID" if verdict.is_valid else "INVALID",
            "message": verdict.message,
            "verdict": verdict,
            "records": collector.records,
            "timestamp": time.time()
        }

    def check_file(self, relative_path: str) -> Dict[str, Any]:
        """
        Reads a file (BOM-aware) from the workspace and validates it.
        """
        full_path = (self.workspace / relative_path).resolve()

        if not full_path.is_file():
            return self._file_error(relative_path, "FILE_NOT_FOUND", f"Path missing: {full_path}")

        try:
            raw_text = full_path.read_text(encoding='utf-8-sig')
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {relative_path}: {str(e)}")
            return self._file_error(relative_path, "ENGINE_ERROR", str(e))

        return self.check_text(raw_text, source=str(relative_path))

    def discover(self, extensions: Optional[List[str]] = None) -> List[Path]:
        """
        Finds candidate files under the workspace. Symlinks are excluded to
        prevent loops; ignored and too-deep paths are dropped.
        """
        exts = {e.lower() for e in (extensions or self.config.extensions)}
        max_depth = self.config.max_depth
        found = []

        for file_path in self.workspace.rglob("*"):
            if not file_path.is_file() or file_path.is_symlink():
                continue
            if file_path.suffix.lower() not in exts:
                continue
            rel = file_path.relative_to(self.workspace)
            if len(rel.parts) > max_depth or self.config.is_ignored(str(rel)):
                continue
            found.append(file_path)

        return sorted(found)

    def scan_directory(self, extensions: Optional[List[str]] = None,
                       progress_callback: Optional[Callable[[int, int], None]] = None) -> List[Dict[str, Any]]:
        """Validates every discovered file and returns the reports in path order."""
        targets = self.discover(extensions)
        total = len(targets)
        reports = []

        for processed, file_path in enumerate(targets, 1):
            rel_path = str(file_path.relative_to(self.workspace))
            reports.append(self.check_file(rel_path))
            if progress_callback:
                progress_callback(processed, total)

        return reports

    def generate_summary(self, reports: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Aggregate counts for the final panel."""
        if not reports:
            return {
                "total_files": 0, "success_rate": 0, "valid": 0,
                "invalid": 0, "system_errors": 0
            }

        total = len(reports)
        valid = sum(1 for r in reports if r.get('success', False))
        system_errors = sum(1 for r in reports if r.get('status') in ("ENGINE_ERROR", "FILE_NOT_FOUND"))

        return {
            "total_files": total,
            "success_rate": valid / total,
            "valid": valid,
            "invalid": total - valid - system_errors,
            "system_errors": system_errors,
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S")
        }

    def _file_error(self, path: str, status: str, error: str) -> Dict[str, Any]:
        return {
            "file_path": str(path), "status": status, "error": error,
            "success": False, "message": error, "records": []
        }
