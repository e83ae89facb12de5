"""Rich console output for the CLI."""

from typing import Iterable, List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..core.compiler import compile_detector
from ..core.patterns import Detector
from ..core.results import ScanState
from ..utils.exceptions import PatternError

console = Console()


def display_scan_header(target: str, output_format: str, workers: int):
    """Display what is about to be scanned."""
    table = Table(title="Scan Configuration", show_header=True, box=None)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="yellow")

    table.add_row("Target", escape(target))
    table.add_row("Output", escape(output_format))
    table.add_row("Workers", str(workers))

    console.print(table)
    console.print()


def display_summary_panel(state: ScanState, max_patterns: int = 15):
    """Display scan summary panel."""
    lines = [
        f"[bold]Target:[/bold] {escape(state.target)}",
        f"[bold]Duration:[/bold] {state.duration_seconds:.2f}s",
        f"[bold]Detectors:[/bold] {state.detectors_loaded}",
        f"[bold]Files:[/bold] {state.files_scanned}",
        f"[bold]Lines:[/bold] {state.lines_scanned}",
        f"[bold]Matches:[/bold] {state.total_matches}",
    ]

    by_pattern = state.matches_by_pattern
    if by_pattern:
        lines.append("")
        lines.append("[bold]By Detector:[/bold]")
        ranked = sorted(by_pattern.items(), key=lambda kv: (-kv[1], kv[0]))
        for label, count in ranked[:max_patterns]:
            lines.append(f"  {escape(label)}: {count}")
        if len(ranked) > max_patterns:
            lines.append(f"  [dim]... and {len(ranked) - max_patterns} more[/dim]")

    if state.errors:
        lines.append("")
        lines.append(f"[bold yellow]Errors:[/bold yellow] {len(state.errors)} (see log)")

    summary = "\n".join(lines)

    if state.total_matches == 0:
        console.print(Panel(summary, title="Scan Complete - No Matches", border_style="green"))
    else:
        console.print(Panel(summary, title="Scan Complete - Matches Found", border_style="yellow"))


def display_errors(errors: List[str], max_display: int = 10):
    """List recoverable errors collected during the scan."""
    if not errors:
        return

    console.print(f"\n[bold yellow]Recoverable errors ({len(errors)})[/bold yellow]")
    for message in errors[:max_display]:
        console.print(f"  [dim]-[/dim] {escape(message)}")
    if len(errors) > max_display:
        console.print(f"  [dim]... and {len(errors) - max_display} more[/dim]")


def display_patterns_table(detectors: Iterable[Detector]):
    """Show the detector catalog and whether each pattern compiles."""
    table = Table(title="Detector Catalog", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Label", style="cyan")
    table.add_column("Pattern", style="yellow", overflow="fold")
    table.add_column("Status")

    for i, detector in enumerate(detectors, 1):
        try:
            compile_detector(detector)
            status = "[green]ok[/green]"
        except PatternError:
            status = "[red]invalid[/red]"
        # repr keeps control characters such as backspace visible
        shown = repr(detector.pattern)
        if isinstance(detector.pattern, str):
            shown = shown[1:-1]
        table.add_row(str(i), escape(detector.label), escape(shown), status)

    console.print(table)
