"""CLI entry point for budget."""

import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from budget.commands.admin import backup_command, init_command
from budget.commands.export import export_command
from budget.commands.goals import goals_command, setgoal_command
from budget.commands.report import balance_command
from budget.commands.transactions import add_command, delete_command, list_command
from budget.config import ConfigError, Settings, resolve_settings
from budget.log import configure_logging
from budget.store.ledger import LedgerStore

app = typer.Typer(
    name="budget",
    help="CLI Budget Tracker - record income and expenses and keep spending under your goals",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


@dataclass
class AppState:
    """Objects shared by every command of one invocation."""

    settings: Settings
    store: LedgerStore


@app.callback()
def main(
    ctx: typer.Context,
    data_file: Path = typer.Option(None, "--data-file", help="Ledger file (default: from config or XDG data dir)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """CLI Budget Tracker - record income and expenses and keep spending under your goals."""
    configure_logging(verbose)

    try:
        settings = resolve_settings(data_file)
    except (tomllib.TOMLDecodeError, ConfigError) as e:
        console.print(f"[red]Invalid config file: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    ctx.obj = AppState(settings=settings, store=LedgerStore(settings.data_file))


@app.command()
def add(
    ctx: typer.Context,
    type_: str = typer.Argument(..., metavar="TYPE", help='"income" or "expense"'),
    amount: str = typer.Argument(..., help="Amount as a number"),
    category: str = typer.Argument(..., help="Category name"),
    description: str = typer.Argument("", help="Description (optional)"),
) -> None:
    """Add a transaction."""
    add_command(ctx.obj.store, type_, amount, category, description)


@app.command()
def balance(ctx: typer.Context) -> None:
    """Show your current balance."""
    balance_command(ctx.obj.store)


@app.command(name="list")
def list_transactions(ctx: typer.Context) -> None:
    """List all your transactions."""
    list_command(ctx.obj.store)


@app.command()
def delete(
    ctx: typer.Context,
    transaction_id: str = typer.Argument(..., metavar="ID", help="Transaction ID"),
) -> None:
    """Delete a transaction by ID."""
    delete_command(ctx.obj.store, transaction_id)


@app.command()
def export(
    ctx: typer.Context,
    filename: str = typer.Argument(None, help="CSV file name (default: budget_export.csv)"),
) -> None:
    """Export your transactions to a CSV file."""
    export_command(ctx.obj.store, filename or ctx.obj.settings.export_file)


@app.command()
def setgoal(
    ctx: typer.Context,
    category: str = typer.Argument(..., help='Category name or "total" for overall goal'),
    amount: str = typer.Argument(..., help="Goal amount"),
) -> None:
    """Set a budget goal for a category or your total spending."""
    setgoal_command(ctx.obj.store, category, amount)


@app.command()
def goals(ctx: typer.Context) -> None:
    """Show your current budget goals."""
    goals_command(ctx.obj.store)


@app.command(name="init")
def init(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing ledger and config"),
) -> None:
    """Initialize an empty ledger and configuration."""
    init_command(ctx.obj.store, force)


@app.command(name="backup")
def backup(
    ctx: typer.Context,
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: beside the ledger)"),
) -> None:
    """Backup your ledger and configuration files."""
    backup_command(ctx.obj.store, output_dir)


if __name__ == "__main__":
    app()
