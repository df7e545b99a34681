"""CLI entry point for fundwarrior."""

import logging
import sys
import tomllib
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from fundwarrior.commands.admin import init_command
from fundwarrior.commands.funds import (
    deposit_command,
    info_command,
    new_command,
    rename_command,
    spend_command,
    transfer_command,
)
from fundwarrior.config import get_config_path, get_fund_path, load_config

app = typer.Typer(
    name="fund",
    help="FundWarrior - Simple CLI money management",
    add_completion=False,
)

console = Console(stderr=True)

# Negative amounts like -1.00 are arguments, not options
AMOUNT_CONTEXT = {"ignore_unknown_options": True}


def configure_logging(verbose: bool) -> None:
    """Send fundwarrior debug logs to stderr when verbose output is on."""
    if not verbose:
        return
    logger = logging.getLogger("fundwarrior")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))
    logger.setLevel(logging.DEBUG)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Path = typer.Option(None, "--config", "-c", help="Use a custom config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """FundWarrior - Simple CLI money management."""
    configure_logging(verbose)

    config_path = config.expanduser() if config else get_config_path()
    if ctx.invoked_subcommand == "init":
        # init rewrites the config, so a broken one must not block it
        ctx.obj = {"config_path": config_path}
        return

    try:
        fund_path = get_fund_path(load_config(config_path))
    except (tomllib.TOMLDecodeError, ValueError) as e:
        console.print(f"[red]Invalid config {config_path}: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read config {config_path}: {e}[/red]", style="bold")
        sys.exit(1)

    logging.getLogger(__name__).debug("Using fund file %s", fund_path)
    ctx.obj = {"config_path": config_path, "fund_path": fund_path}

    if ctx.invoked_subcommand is None:
        info_command(fund_path)


@app.command(name="init")
def init(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize fundwarrior configuration and fund file."""
    init_command(ctx.obj["config_path"], force)


@app.command(context_settings=AMOUNT_CONTEXT)
def new(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="The name of the fund to create"),
    amount: str = typer.Argument(None, help="The amount to start the fund with"),
    goal: str = typer.Argument(None, help="The amount you want this fund to have in the future"),
) -> None:
    """Create a new fund."""
    new_command(ctx.obj["fund_path"], name, amount, goal)


@app.command(context_settings=AMOUNT_CONTEXT)
def deposit(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="The name of the fund you are depositing into"),
    amount: str = typer.Argument(..., help="The amount you wish to deposit"),
) -> None:
    """Deposit money into a fund."""
    deposit_command(ctx.obj["fund_path"], name, amount)


@app.command(context_settings=AMOUNT_CONTEXT)
def spend(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="The name of the fund you are spending from"),
    amount: str = typer.Argument(..., help="The amount you are spending"),
) -> None:
    """Spend money from a fund."""
    spend_command(ctx.obj["fund_path"], name, amount)


@app.command(context_settings=AMOUNT_CONTEXT)
def transfer(
    ctx: typer.Context,
    from_name: str = typer.Argument(..., help="The fund you wish to transfer money out of"),
    to_name: str = typer.Argument(..., help="The fund you wish to transfer money to"),
    amount: str = typer.Argument(..., help="The amount you wish to transfer"),
) -> None:
    """Transfer money between funds."""
    transfer_command(ctx.obj["fund_path"], from_name, to_name, amount)


@app.command()
def rename(
    ctx: typer.Context,
    old_name: str = typer.Argument(..., help="The current name of the fund"),
    new_name: str = typer.Argument(..., help="The new name for the fund"),
) -> None:
    """Rename a fund."""
    rename_command(ctx.obj["fund_path"], old_name, new_name)


@app.command()
def info(
    ctx: typer.Context,
    name: str = typer.Argument(None, help="The fund to view. If absent, all funds are shown."),
) -> None:
    """View fund information."""
    info_command(ctx.obj["fund_path"], name)


if __name__ == "__main__":
    app()
