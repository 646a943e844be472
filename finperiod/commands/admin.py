"""Admin commands for setting up configuration."""

import sys

from rich.console import Console

from finperiod.config import create_default_config, get_config_path

console = Console()


def init_command(force: bool = False) -> None:
    """Write the default configuration file."""
    config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'finperiod init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Initialization failed: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print("[dim]Edit the labels table to change date format and wording[/dim]")
