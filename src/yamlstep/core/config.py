#!/usr/bin/env python3
"""
YAMLSTEP CONFIGURATION MANAGER
------------------------------
Handles loading and parsing of user configuration (.yamlstep.yaml).
Allows customization of:
- File extensions picked up by directory scans
- Ignore patterns (glob-based)
- Trace rendering options
"""

import copy
import logging
from fnmatch import fnmatch
from pathlib import Path
from typing import Any, Dict, List

from ruamel.yaml import YAML, YAMLError

logger = logging.getLogger("yamlstep.config")


class ConfigManager:
    """
    Manages user configuration state.
    defaults:
      scan:
        extensions: [.yaml, .yml]
        ignore: [...]
        max_depth: 10
      trace:
        show_edges: true
    """

    DEFAULT_CONFIG = {
        "scan": {
            "extensions": [".yaml", ".yml"],
            "ignore": [
                ".git/*",
                "node_modules/*",
                "venv/*",
                "__pycache__/*",
                ".yamlstep*"
            ],
            "max_depth": 10
        },
        "trace": {
            "show_edges": True
        }
    }

    def __init__(self, workspace_root: Path, app_name: str = "yamlstep"):
        self.workspace = Path(workspace_root)
        self.app_name = app_name
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.source = None
        self._load_config()

    def _load_config(self):
        """
        Attempts to load configuration from:
        1. .<app_name>/config.yaml (Preferred)
        2. .<app_name>.yaml (Root file)
        """
        yaml = YAML(typ='safe')
        possible_files = [
            self.workspace / f".{self.app_name}" / "config.yaml",
            self.workspace / f".{self.app_name}.yaml",
        ]

        for path in possible_files:
            if not path.is_file():
                continue
            try:
                loaded = yaml.load(path)
            except (YAMLError, OSError) as e:
                logger.warning(f"Failed to parse {path.name}: {e}")
                return
            if isinstance(loaded, dict):
                self._merge_config(loaded)
            self.source = path
            logger.info(f"Loaded configuration from {path.name}")
            return

    def _merge_config(self, user_config: Dict[str, Any]):
        """Depth-1 merge of user sections into defaults."""
        for section, values in user_config.items():
            if section in self.config and isinstance(values, dict):
                self.config[section].update(values)
            else:
                logger.warning(f"Ignoring unknown config section '{section}'")

    @property
    def extensions(self) -> List[str]:
        exts = self.config["scan"].get("extensions") or []
        if isinstance(exts, str):
            exts = [exts]
        return [e if e.startswith('.') else f".{e}" for e in exts]

    @property
    def max_depth(self) -> int:
        try:
            return int(self.config["scan"].get("max_depth", 10))
        except (ValueError, TypeError):
            logger.warning("Invalid max_depth in config. Falling back to default: 10")
            return 10

    @property
    def show_edges(self) -> bool:
        return bool(self.config["trace"].get("show_edges", True))

    @property
    def ignore(self) -> List[str]:
        patterns = self.config["scan"].get("ignore") or []
        if isinstance(patterns, str):
            patterns = [patterns]
        return [str(p) for p in patterns]

    def is_ignored(self, relative_path: str) -> bool:
        """True if the workspace-relative path matches any ignore glob."""
        posix = Path(relative_path).as_posix()
        return any(fnmatch(posix, pattern) for pattern in self.ignore)
