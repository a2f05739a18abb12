"""Projection of transactions to export rows."""

from collections.abc import Iterable

from budget.domain.models import format_money
from budget.domain.transactions import Transaction

EXPORT_COLUMNS = ["ID", "Type", "Amount", "Category", "Description", "Date"]


def export_records(transactions: Iterable[Transaction]) -> list[dict[str, str]]:
    """Build one row per transaction, keyed by EXPORT_COLUMNS, in ledger order."""
    return [
        {
            "ID": str(t.id),
            "Type": t.type.value,
            "Amount": format_money(t.amount),
            "Category": t.category,
            "Description": t.description,
            "Date": t.date.isoformat(),
        }
        for t in transactions
    ]
