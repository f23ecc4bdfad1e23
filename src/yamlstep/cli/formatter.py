# src/yamlstep/cli/formatter.py
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from yamlstep.core.models import ConstructKind
from yamlstep.scanning.automaton import replay

# Initialize the Rich console for high-quality terminal output
console = Console()

KIND_STYLES = {
    ConstructKind.START: "dim",
    ConstructKind.SEQUENCE: "cyan",
    ConstructKind.KEY_VALUE: "green",
    ConstructKind.MULTILINE_START: "magenta",
    ConstructKind.INVALID: "bold red",
}


class StepFormatter:
    """
    StepFormatter: The visual heart of the CLI.
    Responsible for rendering verdicts, trace replays and execution reports.
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def verdict_line(self, report: Dict[str, Any]) -> str:
        if report.get("success"):
            return "[green]Valid YAML format[/green]"
        return f"[red]Invalid YAML format: {escape(report.get('message') or '')}[/red]"

    def print_trace(self, report: Dict[str, Any], show_edges: bool = True):
        """
        Renders every trace record with the diagram edge it would light up.
        """
        table = Table(title=f"Trace: {escape(str(report.get('file_path')))}", header_style="bold magenta")
        table.add_column("Step", justify="right", style="dim")
        table.add_column("Line", justify="right")
        table.add_column("Kind")
        if show_edges:
            table.add_column("Edge")
        table.add_column("Depth", justify="right")
        table.add_column("Content")

        for step, (record, edge) in enumerate(replay(report.get("records", [])), 1):
            row = [
                str(step),
                str(record.line_number),
                Text(record.kind.value, style=KIND_STYLES[record.kind]),
            ]
            if show_edges:
                row.append(edge.label if edge else "[dim]-[/dim]")
            row.append(str(len(record.stack)))
            # Text keeps markup-like brackets in the raw line literal
            row.append(Text(record.content))
            table.add_row(*row)

        self.console.print(table)
        self.console.print(self.verdict_line(report))

    def print_final_table(self, reports: List[Dict[str, Any]]):
        """
        Builds the summary table shown at the very end of a check.
        """
        table = Table(title="YamlStep Validation Report", show_lines=True, header_style="bold magenta")
        table.add_column("File Path", style="cyan")
        table.add_column("Status", style="bold")
        table.add_column("Message")
        table.add_column("Result", justify="center")

        for r in reports:
            success = r.get("success", False)
            status_color = "green" if success else "red"
            result_icon = "✅" if success else "❌"
            table.add_row(
                Text(str(r.get("file_path"))),
                f"[{status_color}]{r.get('status', 'FAILED')}[/{status_color}]",
                Text(r.get("message") or ""),
                result_icon
            )

        self.console.print(table)

    def print_summary(self, summary: Dict[str, Any]):
        self.console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Total Files:    {summary['total_files']}\n"
            f"Valid:          [green]{summary['valid']}[/green]\n"
            f"Invalid:        [red]{summary['invalid']}[/red]\n"
            f"System Errors:  [red]{summary['system_errors']}[/red]",
            border_style="dim"
        ))
