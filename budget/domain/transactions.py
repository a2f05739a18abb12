"""Pure functions for creating and validating transactions.

This module contains the functional core for transaction operations:
- No I/O operations (no files, no console)
- Pure data transformations, apart from reading the clock for ids and dates
- Easy to test

All monetary amounts are in minor units (Money type).
"""

import time
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from enum import Enum

from budget.domain.errors import ValidationError, ValidationReason
from budget.domain.models import CategoryName, Description, Money

_CENT = Decimal("0.01")

# Highest id handed out by this process
_last_issued_id = 0


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Transaction:
    """Immutable ledger entry."""

    id: int
    type: TransactionType
    amount: Money
    category: CategoryName
    description: Description
    date: date

    @property
    def is_expense(self) -> bool:
        return self.type is TransactionType.EXPENSE


def parse_transaction_type(value: str) -> TransactionType:
    """Parse a transaction type, ignoring case.

    Args:
        value: User supplied type, e.g. "Income" or "EXPENSE".

    Returns:
        The matching TransactionType.

    Raises:
        ValidationError: If value is neither income nor expense.
    """
    try:
        return TransactionType(value.strip().lower())
    except ValueError:
        raise ValidationError(ValidationReason.INVALID_TYPE, 'Type must be "income" or "expense"') from None


def parse_amount(value: str | int | float | Decimal) -> Money:
    """Parse a positive decimal amount to minor units.

    Amounts are rounded half-up to two decimal places. A positive amount
    smaller than half a cent is kept as one cent so it stays positive.

    Args:
        value: Amount in major units, e.g. "12.50".

    Returns:
        Amount in minor units.

    Raises:
        ValidationError: If value is not a finite number greater than zero.
    """
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(ValidationReason.INVALID_AMOUNT, "Amount must be a positive number") from None

    if not amount.is_finite() or amount <= 0:
        raise ValidationError(ValidationReason.INVALID_AMOUNT, "Amount must be a positive number")

    # Enough digits for every whole unit plus the cents
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        minor = int(amount.quantize(_CENT, rounding=ROUND_HALF_UP).scaleb(2))
    return Money(max(minor, 1))


def validate_category(value: str) -> CategoryName:
    """Return the category verbatim, rejecting blank names."""
    if not value or not value.strip():
        raise ValidationError(ValidationReason.INVALID_CATEGORY, "Category must not be empty")
    return CategoryName(value)


def next_transaction_id(after: int = 0, now_ms: int | None = None) -> int:
    """Allocate a transaction id.

    Ids are millisecond timestamps where possible, bumped past both the
    last id issued by this process and ``after``, so two transactions
    created within the same millisecond never share an id.

    Args:
        after: Highest id already present in the ledger.
        now_ms: Current time in milliseconds. If None, reads the clock.

    Returns:
        A new id strictly greater than every id seen so far.
    """
    global _last_issued_id

    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    new_id = max(now_ms, _last_issued_id + 1, after + 1)
    _last_issued_id = new_id
    return new_id


def create_transaction(
    type_: str,
    amount: str | int | float | Decimal,
    category: str,
    description: str = "",
    *,
    after_id: int = 0,
    today: date | None = None,
) -> Transaction:
    """Validate input and build a new transaction.

    The transaction is not added to any ledger; callers append it.

    Args:
        type_: "income" or "expense", any case.
        amount: Positive amount in major units.
        category: Category name, kept verbatim.
        description: Optional free text.
        after_id: Highest id already in the ledger.
        today: Date to stamp. If None, uses the current date.

    Returns:
        Fully populated Transaction.

    Raises:
        ValidationError: If type, amount or category is invalid.
    """
    transaction_type = parse_transaction_type(type_)
    money = parse_amount(amount)
    category_name = validate_category(category)

    return Transaction(
        id=next_transaction_id(after_id),
        type=transaction_type,
        amount=money,
        category=category_name,
        description=Description(description or ""),
        date=today or date.today(),
    )
