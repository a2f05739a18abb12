"""Ledger file location and the persisted document layout."""

import os
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any

from budget.domain.errors import CorruptStoreError, ValidationError
from budget.domain.ledger import LedgerDocument
from budget.domain.models import CategoryName, Description, GoalKey, Money
from budget.domain.transactions import Transaction, parse_amount, parse_transaction_type


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_data_path() -> Path:
    """Get the default ledger file path (XDG compliant)."""
    return get_xdg_data_home() / "budget" / "data.json"


def money_to_json(amount: Money) -> int | float:
    """Convert minor units to a JSON number in major units.

    Whole amounts are written as integers (500, not 500.0).
    """
    if amount % 100 == 0:
        return amount // 100
    return float(Decimal(amount).scaleb(-2))


def money_from_json(value: Any) -> Money:
    """Convert a JSON number in major units to minor units.

    Raises:
        CorruptStoreError: If value is not a positive number.
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise CorruptStoreError(f"Expected a number for amount, got {value!r}")
    try:
        return parse_amount(value)
    except ValidationError as e:
        raise CorruptStoreError(f"Invalid amount {value!r}: {e.message}") from e


def transaction_to_dict(transaction: Transaction) -> dict[str, Any]:
    """Serialize a transaction to its persisted record."""
    return {
        "id": transaction.id,
        "type": transaction.type.value,
        "amount": money_to_json(transaction.amount),
        "category": transaction.category,
        "description": transaction.description,
        "date": transaction.date.isoformat(),
    }


def transaction_from_dict(record: Any) -> Transaction:
    """Parse a persisted transaction record.

    Args:
        record: Decoded JSON object.

    Returns:
        Transaction.

    Raises:
        CorruptStoreError: If the record is missing fields or holds bad values.
    """
    if not isinstance(record, dict):
        raise CorruptStoreError(f"Expected a transaction object, got {type(record).__name__}")

    missing = {"id", "type", "amount", "category", "date"} - record.keys()
    if missing:
        raise CorruptStoreError(f"Transaction record missing fields: {', '.join(sorted(missing))}")

    record_id = record["id"]
    if isinstance(record_id, bool) or not isinstance(record_id, int):
        raise CorruptStoreError(f"Transaction id must be an integer, got {record_id!r}")

    category = record["category"]
    description = record.get("description", "")
    if not isinstance(category, str) or not isinstance(description, str):
        raise CorruptStoreError(f"Transaction {record_id} has non-text category or description")

    try:
        transaction_type = parse_transaction_type(str(record["type"]))
        transaction_date = date.fromisoformat(str(record["date"]))
    except (ValidationError, ValueError) as e:
        raise CorruptStoreError(f"Transaction {record_id} is invalid: {e}") from e

    return Transaction(
        id=record_id,
        type=transaction_type,
        amount=money_from_json(record["amount"]),
        category=CategoryName(category),
        description=Description(description),
        date=transaction_date,
    )


def document_to_dict(document: LedgerDocument) -> dict[str, Any]:
    """Serialize the ledger to its persisted layout."""
    return {
        "transactions": [transaction_to_dict(t) for t in document.transactions],
        "goals": {key: money_to_json(amount) for key, amount in document.goals.items()},
    }


def document_from_dict(payload: Any) -> LedgerDocument:
    """Parse the persisted layout back into a ledger.

    Missing top-level fields default to empty.

    Raises:
        CorruptStoreError: If the payload does not have the expected structure.
    """
    if not isinstance(payload, dict):
        raise CorruptStoreError("Ledger file must contain a JSON object")

    transactions = payload.get("transactions", [])
    goals = payload.get("goals", {})
    if not isinstance(transactions, list):
        raise CorruptStoreError('"transactions" must be a list')
    if not isinstance(goals, dict):
        raise CorruptStoreError('"goals" must be an object')

    parsed = [transaction_from_dict(record) for record in transactions]

    ids = [t.id for t in parsed]
    if len(set(ids)) != len(ids):
        raise CorruptStoreError("Ledger contains duplicate transaction ids")

    return LedgerDocument(
        transactions=parsed,
        goals={GoalKey(key): money_from_json(value) for key, value in goals.items()},
    )
