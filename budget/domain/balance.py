"""Pure reductions deriving balances and spend totals from transactions.

All monetary amounts are in minor units (Money type).
"""

from collections.abc import Iterable

from budget.domain.models import CategoryName, Money
from budget.domain.transactions import Transaction


def compute_balance(transactions: Iterable[Transaction]) -> Money:
    """Sum of income minus sum of expenses (0 for no transactions)."""
    return Money(sum(-t.amount if t.is_expense else t.amount for t in transactions))


def compute_category_spend(transactions: Iterable[Transaction]) -> dict[CategoryName, Money]:
    """Sum expenses per category.

    Income is ignored and categories without expenses are left out
    rather than reported as zero.

    Args:
        transactions: Ledger transactions.

    Returns:
        Dictionary of category to amount spent.
    """
    spend: dict[CategoryName, Money] = {}
    for t in transactions:
        if t.is_expense:
            spend[t.category] = Money(spend.get(t.category, 0) + t.amount)
    return spend


def compute_total_expense(transactions: Iterable[Transaction]) -> Money:
    """Sum of all expenses across categories."""
    return Money(sum(t.amount for t in transactions if t.is_expense))
