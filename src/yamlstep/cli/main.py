#!/usr/bin/env python3
"""
YAMLSTEP CLI
------------
Primary interface. Routes the two subcommands:
1. check - validate a file or every matching file under a directory
2. trace - replay one file's trace records with their diagram edges

Author: YamlStep Team
Date: 2026-10-19
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

# Rich library components for high-fidelity terminal UI
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    BarColumn,
    TaskProgressColumn
)

from yamlstep.cli.formatter import StepFormatter
from yamlstep.core.config import ConfigManager
from yamlstep.core.engine import ValidationEngine
from yamlstep.scanning.exporter import TraceExporter

__version__ = "1.0.0"

# Global console for consistent styling across the application
console = Console()


class YamlStepCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self, out: Optional[Console] = None):
        """Initializes the CLI and sets up the argument parser."""
        self.console = out or console
        self.formatter = StepFormatter(self.console)
        self.parser = argparse.ArgumentParser(
            prog="yamlstep",
            description="YamlStep - Line-by-line YAML structure validator with step traces",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("-v", "--version", action="version", version=f"yamlstep v{__version__}")
        self.parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        # 'check' subcommand - validity verdicts
        check_parser = subparsers.add_parser("check", help="🔍 Validate YAML structure")
        check_parser.add_argument("path", help="Path to a YAML file or directory")
        check_parser.add_argument("--ext", action="append",
                                  help="File extension filter, repeatable (default: from config)")

        # 'trace' subcommand - step-by-step replay
        trace_parser = subparsers.add_parser("trace", help="🧭 Show the per-line trace of one file")
        trace_parser.add_argument("path", help="Path to a YAML file")
        trace_parser.add_argument("--json", action="store_true", help="Emit trace steps as JSON")
        trace_parser.add_argument("--no-edges", action="store_true", help="Hide diagram edge labels")

    def print_header(self, subtitle: str):
        """Renders the YamlStep splash header."""
        self.console.print(Panel.fit(
            f"[bold cyan]YamlStep v{__version__}[/bold cyan]",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def _resolve(self, raw_path: str) -> Optional[Path]:
        input_path = Path(raw_path).resolve()
        if not input_path.exists():
            self.console.print(f"[bold red]Error:[/bold red] Path '{escape(raw_path)}' not found.")
            return None
        return input_path

    def _run_check(self, args: argparse.Namespace) -> int:
        """Main validation loop orchestration."""
        input_path = self._resolve(args.path)
        if input_path is None:
            return 2

        workspace = input_path if input_path.is_dir() else input_path.parent
        engine = ValidationEngine(str(workspace), ConfigManager(workspace))

        if input_path.is_file():
            targets = [input_path]
        else:
            targets = engine.discover(args.ext)

        if not targets:
            self.console.print("\n[bold yellow]⚠️  No YAML files found.[/bold yellow]")
            return 0

        reports = []
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=40),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self.console
        ) as progress:
            task_id = progress.add_task("Validating documents...", total=len(targets))
            for file_path in targets:
                reports.append(engine.check_file(str(file_path.relative_to(workspace))))
                progress.update(task_id, advance=1, description=f"Checked: {escape(file_path.name)}")

        self.formatter.print_final_table(reports)
        self.formatter.print_summary(engine.generate_summary(reports))
        return 0 if all(r.get("success") for r in reports) else 1

    def _run_trace(self, args: argparse.Namespace) -> int:
        input_path = self._resolve(args.path)
        if input_path is None:
            return 2
        if not input_path.is_file():
            self.console.print(f"[bold red]Error:[/bold red] '{escape(args.path)}' is not a file.")
            return 2

        config = ConfigManager(input_path.parent)
        engine = ValidationEngine(str(input_path.parent), config)
        report = engine.check_file(input_path.name)

        if report.get("status") in ("ENGINE_ERROR", "FILE_NOT_FOUND"):
            self.console.print(f"[bold red]Error in {escape(str(report['file_path']))}:[/bold red] {escape(str(report.get('error')))}")
            return 2

        if args.json:
            print(TraceExporter().export(report["records"], report["verdict"]))
        else:
            self.formatter.print_trace(report, show_edges=config.show_edges and not args.no_edges)
        return 0 if report["success"] else 1

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit status."""
        argv = sys.argv[1:] if argv is None else argv
        if not argv:
            self.print_header("YAML Structure Validator")
            self.parser.print_help()
            return 0

        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

        if args.command == "check":
            self.print_header("Structure Check")
            return self._run_check(args)
        if args.command == "trace":
            if not args.json:
                self.print_header("Step Trace")
            return self._run_trace(args)

        self.parser.print_help()
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(YamlStepCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
