"""CLI entry point for LeakScan."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .config_cmd import config
from .output import (
    display_errors,
    display_patterns_table,
    display_scan_header,
    display_summary_panel,
)
from ..core.patterns import load_detectors
from ..core.scanner import Scanner
from ..output.reporters import write_report
from ..utils.config import Config, init_config
from ..utils.env_loader import load_env
from ..utils.exceptions import ConfigError, OutputError, ScanError, UnsupportedFormatError
from ..utils.logger import get_logger, setup_logging
from ..version import VERSION

console = Console()
logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_SCAN_ERROR = 3


@click.group()
@click.version_option(version=VERSION, prog_name="LeakScan")
@click.option("--config", "config_file", type=click.Path(exists=True), help="Configuration file path")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--log-file", type=click.Path(), help="Write logs to file")
@click.option("--hide-findings", is_flag=True, help="Do not print a console line for each match")
@click.pass_context
def cli(ctx, config_file, verbose, log_file, hide_findings):
    """
    LeakScan - find secrets and sensitive data in a directory tree.

    \b
    Examples:
        # Scan and write <dir>.txt
        leakscan scan ./project

        # JSON report
        leakscan scan ./project -o json

        # List detectors
        leakscan patterns
    """
    exported_env = load_env()

    try:
        if config_file:
            cfg = init_config(Path(config_file))
        else:
            cfg = Config()
            cfg.validate()
    except ConfigError as e:
        console.print(f"[red]Configuration Error:[/red]\n{escape(str(e))}")
        sys.exit(EXIT_ERROR)

    verbose = verbose or cfg.output.verbose
    setup_logging(
        level="DEBUG" if verbose else "INFO",
        log_file=Path(log_file) if log_file else None,
        verbose=verbose,
        show_findings=not hide_findings,
    )
    if config_file:
        logger.info(f"Loaded config from: {config_file}")
    if exported_env:
        logger.debug(f"Loaded from .env: {', '.join(sorted(exported_env))}")

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("target", type=click.Path(), required=True)
@click.option("--output", "-o", "output_format", help="Output format: html, json, or txt")
@click.option("--output-dir", type=click.Path(file_okay=False), help="Directory for the report file")
@click.option("--workers", "-w", type=click.IntRange(min=1), help="Files to scan in parallel")
@click.option("--patterns-file", type=click.Path(dir_okay=False), help="YAML mapping of extra detectors")
@click.option("--no-builtin", is_flag=True, help="Do not load the built-in detectors")
@click.pass_context
def scan(ctx, target, output_format, output_dir, workers, patterns_file, no_builtin):
    """
    Scan TARGET and write <name-of-TARGET>.<format> to the current directory.

    \b
    Exit Codes:
        0 - Report written (whether or not anything matched)
        1 - Configuration or report file error
        2 - Unsupported output format
        3 - Scan error (e.g. TARGET does not exist)
    """
    cfg = ctx.obj.get("config") or Config()
    verbose = ctx.obj.get("verbose", False)

    output_format = output_format or cfg.output.format
    output_dir = output_dir or cfg.output.directory
    if workers:
        cfg.scan.workers = workers
    if no_builtin:
        cfg.patterns.builtin = False

    console.print()
    console.print(Panel.fit(
        f"[bold cyan]LeakScan v{VERSION}[/bold cyan]\nTarget: [yellow]{escape(target)}[/yellow]",
        border_style="cyan",
    ))
    display_scan_header(target, output_format, cfg.scan.workers)

    try:
        scanner = Scanner(
            config=cfg,
            patterns_file=Path(patterns_file) if patterns_file else None,
        )
        state = scanner.scan(target)
    except ConfigError as e:
        console.print(f"\n[bold red]Configuration Error:[/bold red]\n{escape(str(e))}")
        sys.exit(EXIT_ERROR)
    except ScanError as e:
        console.print(f"\n[bold red]Error:[/bold red]\n{escape(str(e))}")
        logger.error(f"Scan failed: {e.message}", exc_info=verbose)
        sys.exit(EXIT_SCAN_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Scan interrupted[/yellow]")
        sys.exit(130)

    console.print()
    display_summary_panel(state)
    display_errors(state.errors)

    try:
        report = write_report(state, output_format, output_dir)
    except UnsupportedFormatError as e:
        console.print(f"\n[bold red]Usage Error:[/bold red]\n{escape(str(e))}")
        sys.exit(EXIT_USAGE)
    except OutputError as e:
        console.print(f"\n[bold red]Output Error:[/bold red]\n{escape(str(e))}")
        logger.error(f"Report failed: {e.message}")
        sys.exit(EXIT_ERROR)

    console.print(f"\n[green]Results written to {escape(str(report))}[/green]\n")
    sys.exit(EXIT_OK)


@cli.command()
@click.option("--patterns-file", type=click.Path(dir_okay=False), help="YAML mapping of extra detectors")
@click.pass_context
def patterns(ctx, patterns_file):
    """List the detectors a scan would use."""
    cfg = ctx.obj.get("config") or Config()
    try:
        detectors = load_detectors(cfg, Path(patterns_file) if patterns_file else None)
    except ConfigError as e:
        console.print(f"[red]Configuration Error:[/red]\n{escape(str(e))}")
        sys.exit(EXIT_ERROR)

    display_patterns_table(detectors)
    console.print(f"\n[bold]{len(detectors)}[/bold] detectors\n")


@cli.command()
def version():
    """Show version information."""
    console.print(f"\n[bold cyan]LeakScan[/bold cyan] v[yellow]{VERSION}[/yellow]\n")


cli.add_command(config)


if __name__ == "__main__":
    cli(obj={})
