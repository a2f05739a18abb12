"""CSV export command."""

import sys
from pathlib import Path

import pandas as pd
from rich.console import Console
from rich.markup import escape

from budget.domain.errors import CorruptStoreError
from budget.domain.export import EXPORT_COLUMNS, export_records
from budget.store.ledger import LedgerStore

console = Console()


def export_command(store: LedgerStore, filename: str) -> None:
    """Export all transactions to a CSV file.

    Nothing is written when the ledger has no transactions. Write
    failures are reported but do not fail the run.

    Args:
        store: Ledger to read.
        filename: Output path, relative to the working directory.
    """
    try:
        document = store.load()
    except CorruptStoreError as e:
        console.print(f"[red]Ledger file is corrupt: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read ledger: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    if not document.transactions:
        console.print("No transactions to export.")
        return

    df = pd.DataFrame(export_records(document.transactions), columns=EXPORT_COLUMNS)

    try:
        df.to_csv(Path(filename), index=False, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error writing CSV: {escape(str(e))}[/red]")
        return

    console.print(f"[green]Exported {len(df)} transactions to {escape(filename)}[/green]")
