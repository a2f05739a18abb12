"""Pure functions over the ledger document.

Every mutation returns a new LedgerDocument; the input is never modified.
"""

from dataclasses import dataclass, field, replace

from budget.domain.errors import ValidationError, ValidationReason
from budget.domain.models import GoalKey, Money
from budget.domain.transactions import Transaction, parse_amount


@dataclass(frozen=True)
class LedgerDocument:
    """Full persisted state: transactions in insertion order plus goals."""

    transactions: list[Transaction] = field(default_factory=list)
    goals: dict[GoalKey, Money] = field(default_factory=dict)

    @property
    def last_id(self) -> int:
        """Highest transaction id in the ledger, or 0 when empty."""
        return max((t.id for t in self.transactions), default=0)


def add_transaction(document: LedgerDocument, transaction: Transaction) -> LedgerDocument:
    """Append a transaction to the ledger."""
    return replace(document, transactions=[*document.transactions, transaction])


def delete_transaction(document: LedgerDocument, identifier: str) -> tuple[LedgerDocument, bool]:
    """Remove transactions whose id matches an identifier string.

    Identifiers are compared as strings, the way they arrive from the
    command line, so "0042" does not match id 42.

    Args:
        document: Current ledger.
        identifier: Transaction id as supplied by the user.

    Returns:
        Tuple of (new_document, found).
    """
    kept = [t for t in document.transactions if str(t.id) != identifier]
    if len(kept) == len(document.transactions):
        return document, False
    return replace(document, transactions=kept), True


def set_goal(document: LedgerDocument, key: str, amount: str | Money) -> LedgerDocument:
    """Create or overwrite a spending goal.

    An existing key keeps its position, so alert order follows the order
    in which goals were first set.

    Raises:
        ValidationError: If key is blank or amount is not positive.
    """
    if not key or not key.strip():
        raise ValidationError(ValidationReason.INVALID_CATEGORY, "Category must not be empty")
    money = parse_amount(amount) if isinstance(amount, str) else Money(amount)
    if money <= 0:
        raise ValidationError(ValidationReason.INVALID_AMOUNT, "Amount must be a positive number")

    goals = dict(document.goals)
    goals[GoalKey(key)] = money
    return replace(document, goals=goals)
