"""Goal alert engine.

Compares spending against goals. Alerts are derived on demand and never
persisted.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from budget.domain.balance import compute_category_spend, compute_total_expense
from budget.domain.models import TOTAL_GOAL, CategoryName, GoalKey, Money, format_money
from budget.domain.transactions import Transaction


@dataclass(frozen=True)
class Alert:
    """Immutable notice that spending went over a goal."""

    key: GoalKey
    spent: Money
    goal: Money

    @property
    def message(self) -> str:
        """Warning shown to the user, amounts with two decimals."""
        spent = format_money(self.spent)
        goal = format_money(self.goal)
        if self.key == TOTAL_GOAL:
            return f"Total spending exceeded goal! Spent: {spent}, Goal: {goal}"
        return f'Spending in category "{self.key}" exceeded goal! Spent: {spent}, Goal: {goal}'


def check_alerts(transactions: Sequence[Transaction], goals: Mapping[GoalKey, Money]) -> list[Alert]:
    """Find goals that current spending exceeds.

    Spending equal to a goal is within budget; only strictly greater
    spending raises an alert. The "total" key compares total expenses,
    any other key compares that category's expenses.

    Args:
        transactions: Ledger transactions.
        goals: Goals in the order they were set.

    Returns:
        Alerts in goal order.
    """
    by_category = compute_category_spend(transactions)
    total = compute_total_expense(transactions)

    alerts: list[Alert] = []
    for key, goal in goals.items():
        if key == TOTAL_GOAL:
            spent = total
        else:
            spent = by_category.get(CategoryName(key), Money(0))
        if spent > goal:
            alerts.append(Alert(key=key, spent=spent, goal=goal))
    return alerts
