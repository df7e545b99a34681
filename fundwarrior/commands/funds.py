"""Fund commands: create, deposit, spend, transfer, rename and show funds."""

import sys
from pathlib import Path
from typing import NoReturn

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fundwarrior.domain.fund import Fund
from fundwarrior.domain.models import Money
from fundwarrior.domain.money import display_dollars, parse_dollars
from fundwarrior.errors import FundError
from fundwarrior.store.manager import FundManager

console = Console()


def parse_amount(amount_str: str) -> Money:
    """Parse a dollar amount given on the command line, exiting on bad input."""
    try:
        return parse_dollars(amount_str)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def fail(error: FundError) -> NoReturn:
    """Report a fund store error and exit."""
    console.print(f"[red]Error: {escape(str(error))}[/red]", style="bold")
    sys.exit(1)


def format_fund(name: str, fund: Fund) -> str:
    """Render a fund as a single line, name right-aligned."""
    return f"{name + ':':>10} {fund.display()}"


def print_fund(name: str, fund: Fund) -> None:
    console.print(escape(format_fund(name, fund)))


def new_command(fund_path: Path, name: str, amount: str | None = None, goal: str | None = None) -> None:
    """Create a new fund.

    Args:
        fund_path: Location of the fund file.
        name: Name of the new fund.
        amount: Starting balance in dollars (default 0).
        goal: Savings goal in dollars (default 0).
    """
    fund = Fund(
        amount=parse_amount(amount) if amount is not None else Money(0),
        goal=parse_amount(goal) if goal is not None else Money(0),
    )

    try:
        funds = FundManager.load(fund_path)
        funds.add_fund(name, fund)
        funds.save(fund_path)
    except FundError as e:
        fail(e)

    console.print(f"[green]✓[/green] Created fund: {escape(name)}")
    print_fund(name, fund)


def deposit_command(fund_path: Path, name: str, amount: str) -> None:
    """Deposit money into a fund."""
    cents = parse_amount(amount)

    try:
        funds = FundManager.load(fund_path)
        funds.fund_mut(name).deposit(cents)
        funds.save(fund_path)
    except FundError as e:
        fail(e)

    print_fund(name, funds.fund(name))


def spend_command(fund_path: Path, name: str, amount: str) -> None:
    """Spend money from a fund."""
    cents = parse_amount(amount)

    try:
        funds = FundManager.load(fund_path)
        funds.fund_mut(name).spend(cents)
        funds.save(fund_path)
    except FundError as e:
        fail(e)

    fund = funds.fund(name)
    print_fund(name, fund)
    if fund.amount < 0:
        console.print(f"[yellow]{escape(name)} is overspent by {display_dollars(-fund.amount)}[/yellow]")


def transfer_command(fund_path: Path, from_name: str, to_name: str, amount: str) -> None:
    """Move money from one fund to another."""
    cents = parse_amount(amount)

    try:
        funds = FundManager.load(fund_path)
        funds.transfer(from_name, to_name, cents)
        funds.save(fund_path)
    except FundError as e:
        fail(e)

    print_fund(from_name, funds.fund(from_name))
    print_fund(to_name, funds.fund(to_name))


def rename_command(fund_path: Path, old_name: str, new_name: str) -> None:
    """Rename a fund, keeping its balance and goal."""
    try:
        funds = FundManager.load(fund_path)
        funds.rename(old_name, new_name)
        funds.save(fund_path)
    except FundError as e:
        fail(e)

    console.print(f"[green]✓[/green] Renamed {escape(old_name)} to {escape(new_name)}")
    print_fund(new_name, funds.fund(new_name))


def info_command(fund_path: Path, name: str | None = None) -> None:
    """Show one fund, or a table of every fund."""
    try:
        funds = FundManager.load(fund_path)
        if name is not None:
            print_fund(name, funds.fund(name))
            return
    except FundError as e:
        fail(e)

    if not funds:
        console.print("[yellow]No funds found[/yellow]")
        console.print("[dim]Create one with 'fund new NAME AMOUNT GOAL'[/dim]")
        return

    table = Table(title=f"Funds ({len(funds)})")
    table.add_column("Fund", style="cyan")
    table.add_column("Balance", justify="right")
    table.add_column("Goal", justify="right")
    table.add_column("Away from goal", justify="right")

    total_amount = 0
    total_goal = 0
    for fund_name, fund in funds:
        balance_style = "red" if fund.amount < 0 else "green"
        table.add_row(
            escape(fund_name),
            f"[{balance_style}]{display_dollars(fund.amount)}[/{balance_style}]",
            display_dollars(fund.goal),
            display_dollars(fund.remaining),
        )
        total_amount += fund.amount
        total_goal += fund.goal

    table.add_section()
    table.add_row(
        "[bold]Total[/bold]",
        f"[bold]{display_dollars(total_amount)}[/bold]",
        f"[bold]{display_dollars(total_goal)}[/bold]",
        f"[bold]{display_dollars(total_goal - total_amount)}[/bold]",
    )

    console.print(table)
