"""Configuration management CLI commands."""

import sys
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from ..utils.config import Config, init_config
from ..utils.exceptions import ConfigError
from ..utils.logger import get_logger

console = Console()
logger = get_logger(__name__)


def _current_config(ctx) -> Config:
    obj = ctx.obj or {}
    return obj.get("config") or Config()


@click.group()
def config():
    """Manage LeakScan configuration."""
    pass


@config.command()
@click.pass_context
def show(ctx):
    """Show current configuration."""
    cfg = _current_config(ctx)
    console.print("\n[bold cyan]Current Configuration[/bold cyan]\n")

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="yellow")

    table.add_row("scan.workers", str(cfg.scan.workers))
    table.add_row("patterns.builtin", str(cfg.patterns.builtin))
    table.add_row("patterns.custom", str(len(cfg.patterns.custom)))
    table.add_row("patterns.disabled", escape(", ".join(cfg.patterns.disabled) or "-"))
    table.add_row("output.format", escape(cfg.output.format))
    table.add_row("output.directory", escape(cfg.output.directory))
    table.add_row("output.verbose", str(cfg.output.verbose))

    console.print(table)
    console.print()


@config.command()
@click.option("--overwrite", is_flag=True, help="Overwrite existing config")
def init(overwrite):
    """Initialize user configuration file."""
    try:
        config_file = Config.create_user_config(overwrite=overwrite)
    except ConfigError as e:
        console.print(f"\n[red]Error:[/red] {escape(str(e))}\n")
        sys.exit(1)

    console.print(f"\n[green]Created configuration file:[/green] {escape(str(config_file))}")
    console.print("\n[dim]Edit this file to customize your settings.[/dim]\n")


@config.command()
@click.argument("config_file", type=click.Path(exists=True))
def validate(config_file):
    """Validate configuration file."""
    console.print(f"\n[bold]Validating:[/bold] {escape(config_file)}\n")

    try:
        cfg = init_config(Path(config_file))
    except ConfigError as e:
        console.print(f"[red]Validation failed:[/red]\n{escape(str(e))}\n")
        sys.exit(1)

    console.print("[green]Configuration is valid![/green]\n")
    console.print("[bold]Loaded configuration:[/bold]")

    config_yaml = yaml.dump(cfg.to_dict(), default_flow_style=False, sort_keys=False)
    console.print(Syntax(config_yaml, "yaml", theme="monokai", line_numbers=True))


@config.command()
@click.argument("key")
@click.pass_context
def get(ctx, key):
    """Get configuration value."""
    cfg = _current_config(ctx)
    try:
        value = cfg.get(key)
    except ConfigError as e:
        console.print(f"\n[red]Error:[/red] {escape(str(e))}\n")
        sys.exit(1)

    if value is None:
        console.print(f"\n[yellow]Key not found:[/yellow] {escape(key)}\n")
    else:
        console.print(f"\n[cyan]{escape(key)}:[/cyan] [yellow]{escape(str(value))}[/yellow]\n")
