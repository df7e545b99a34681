"""Admin commands for initializing configuration."""

import sys
from pathlib import Path

from rich.console import Console

from fundwarrior.config import create_default_config, get_fund_path, load_config
from fundwarrior.errors import FundError
from fundwarrior.store.manager import FundManager

console = Console()


def init_command(config_path: Path, force: bool = False) -> None:
    """Write a default config file and create the fund file."""
    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'fund init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")

        fund_path = get_fund_path(load_config(config_path))
        funds = FundManager.load(fund_path)
        console.print(f"[green]✓[/green] Fund file ready ({len(funds)} funds)")
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
    except FundError as e:
        console.print(f"[red]Error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Config: {config_path}[/dim]")
    console.print(f"[dim]Funds: {fund_path}[/dim]")
