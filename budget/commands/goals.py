"""Spending goal commands (setgoal, goals)."""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from budget.domain.errors import CorruptStoreError, ValidationError
from budget.domain.ledger import set_goal
from budget.domain.models import TOTAL_GOAL, format_money
from budget.domain.transactions import parse_amount
from budget.store.ledger import LedgerStore

console = Console()


def setgoal_command(store: LedgerStore, key: str, amount: str) -> None:
    """Set the spending goal for a category or the overall total.

    Invalid amounts are reported without changing the ledger; unlike
    'add' this is not treated as a failed run.

    Args:
        store: Ledger to update.
        key: Category name, or "total" for all spending.
        amount: Goal in major units.
    """
    try:
        money = parse_amount(amount)
    except ValidationError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        return

    try:
        document = set_goal(store.load(), key, money)
        store.save(document)
    except ValidationError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        return
    except CorruptStoreError as e:
        console.print(f"[red]Ledger file is corrupt: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not save ledger: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print(f'[green]Set budget goal for "{escape(key)}" as {format_money(money)}[/green]')


def goals_command(store: LedgerStore) -> None:
    """Show configured spending goals in the order they were set."""
    try:
        document = store.load()
    except CorruptStoreError as e:
        console.print(f"[red]Ledger file is corrupt: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read ledger: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    if not document.goals:
        console.print("No budget goals set.")
        return

    table = Table(title="Budget goals")
    table.add_column("Category", style="magenta")
    table.add_column("Goal", justify="right", no_wrap=True)

    for key, amount in document.goals.items():
        label = "[bold]total[/bold]" if key == TOTAL_GOAL else escape(key)
        table.add_row(label, format_money(amount))

    console.print(table)
