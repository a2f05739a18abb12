"""Balance report command."""

import sys

from rich.console import Console
from rich.markup import escape

from budget.domain.balance import compute_balance
from budget.domain.errors import CorruptStoreError
from budget.domain.models import format_money
from budget.store.ledger import LedgerStore

console = Console()


def balance_command(store: LedgerStore) -> None:
    """Show income minus expenses across the whole ledger."""
    try:
        document = store.load()
    except CorruptStoreError as e:
        console.print(f"[red]Ledger file is corrupt: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read ledger: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    balance = compute_balance(document.transactions)
    console.print(f"[blue]Current balance: {format_money(balance)}[/blue]")
