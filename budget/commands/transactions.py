"""Transaction management commands (add, delete, list)."""

import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from budget.domain.alerts import check_alerts
from budget.domain.errors import CorruptStoreError, NotFoundError, ValidationError
from budget.domain.ledger import add_transaction, delete_transaction
from budget.domain.models import format_money
from budget.domain.transactions import create_transaction, parse_amount, parse_transaction_type
from budget.store.ledger import LedgerStore

console = Console()
logger = logging.getLogger(__name__)


def add_command(
    store: LedgerStore,
    type_: str,
    amount: str,
    category: str,
    description: str = "",
) -> None:
    """Add a transaction and report any goals it pushes over.

    Args:
        store: Ledger to update.
        type_: "income" or "expense".
        amount: Amount in major units, e.g. "12.50".
        category: Category name.
        description: Optional description.
    """
    # Validate before touching the ledger
    try:
        parse_transaction_type(type_)
        parse_amount(amount)
    except ValidationError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        sys.exit(1)

    try:
        document = store.load()
        transaction = create_transaction(type_, amount, category, description, after_id=document.last_id)
        document = add_transaction(document, transaction)
        store.save(document)
    except ValidationError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        sys.exit(1)
    except CorruptStoreError as e:
        console.print(f"[red]Ledger file is corrupt: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not save ledger: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    logger.debug("Added transaction %d", transaction.id)
    console.print(
        f"[green]Added {transaction.type.value} of amount {format_money(transaction.amount)} "
        f'in category "{escape(transaction.category)}"[/green]'
    )

    alerts = check_alerts(document.transactions, document.goals)
    logger.debug("%d goal alerts", len(alerts))
    for alert in alerts:
        console.print(f"[yellow]⚠️  {escape(alert.message)}[/yellow]")


def delete_command(store: LedgerStore, transaction_id: str) -> None:
    """Delete a transaction by its id.

    Args:
        store: Ledger to update.
        transaction_id: Id as shown by 'budget list'.
    """
    try:
        document = store.load()
        document, found = delete_transaction(document, transaction_id)
        if not found:
            raise NotFoundError(transaction_id)
        store.save(document)
    except NotFoundError:
        console.print("[red]No transaction found with that ID[/red]")
        return
    except CorruptStoreError as e:
        console.print(f"[red]Ledger file is corrupt: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not save ledger: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]Deleted transaction with ID {escape(transaction_id)}[/green]")


def list_command(store: LedgerStore) -> None:
    """List all transactions in the order they were added."""
    try:
        document = store.load()
    except CorruptStoreError as e:
        console.print(f"[red]Ledger file is corrupt: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read ledger: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    if not document.transactions:
        console.print("No transactions found.")
        return

    table = Table(title=f"Transactions ({len(document.transactions)})")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Type")
    table.add_column("Amount", justify="right", no_wrap=True)
    table.add_column("Category", style="magenta")
    table.add_column("Description", style="white")
    table.add_column("Date", style="cyan", no_wrap=True)

    for txn in document.transactions:
        if txn.is_expense:
            amount_display = f"[red]{format_money(txn.amount)}[/red]"
        else:
            amount_display = f"[green]{format_money(txn.amount)}[/green]"

        table.add_row(
            str(txn.id),
            txn.type.value,
            amount_display,
            escape(txn.category),
            escape(txn.description),
            txn.date.isoformat(),
        )

    console.print(table)
