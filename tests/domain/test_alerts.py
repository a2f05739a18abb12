"""Tests for budget.domain.alerts."""

from datetime import date

from budget.domain.alerts import Alert, check_alerts
from budget.domain.models import TOTAL_GOAL, CategoryName, Description, GoalKey, Money
from budget.domain.transactions import Transaction, TransactionType


def expense(txn_id: int, amount: int, category: str) -> Transaction:
    return Transaction(
        id=txn_id,
        type=TransactionType.EXPENSE,
        amount=Money(amount),
        category=CategoryName(category),
        description=Description(""),
        date=date(2025, 1, 1),
    )


def income(txn_id: int, amount: int, category: str) -> Transaction:
    return Transaction(
        id=txn_id,
        type=TransactionType.INCOME,
        amount=Money(amount),
        category=CategoryName(category),
        description=Description(""),
        date=date(2025, 1, 1),
    )


class TestCheckAlerts:
    """Tests for check_alerts."""

    def test_no_goals_no_alerts(self) -> None:
        """Should return nothing without goals."""
        assert check_alerts([expense(1, 100, "food")], {}) == []

    def test_category_over_goal(self) -> None:
        """Should alert when a category spends more than its goal."""
        transactions = [
            income(1, 100000, "salary"),
            expense(2, 20000, "groceries"),
            expense(3, 40000, "groceries"),
            expense(4, 15000, "groceries"),
        ]
        goals = {GoalKey("groceries"): Money(50000)}

        alerts = check_alerts(transactions, goals)

        assert alerts == [Alert(key=GoalKey("groceries"), spent=Money(75000), goal=Money(50000))]

    def test_spend_equal_to_goal_is_fine(self) -> None:
        """Should not alert when spending exactly matches the goal."""
        transactions = [expense(1, 50000, "groceries")]
        goals = {GoalKey("groceries"): Money(50000), TOTAL_GOAL: Money(50000)}

        assert check_alerts(transactions, goals) == []

    def test_total_goal_uses_all_expenses(self) -> None:
        """Should compare total expenses against the total goal."""
        transactions = [expense(1, 3000, "a"), expense(2, 3000, "b"), income(3, 99999, "c")]
        goals = {TOTAL_GOAL: Money(5000)}

        alerts = check_alerts(transactions, goals)

        assert alerts == [Alert(key=TOTAL_GOAL, spent=Money(6000), goal=Money(5000))]

    def test_goal_for_unused_category(self) -> None:
        """Should treat a category with no expenses as zero spend."""
        goals = {GoalKey("holiday"): Money(1)}

        assert check_alerts([expense(1, 100, "food")], goals) == []

    def test_income_does_not_count(self) -> None:
        """Should ignore income in a goal category."""
        goals = {GoalKey("freelance"): Money(100)}

        assert check_alerts([income(1, 50000, "freelance")], goals) == []

    def test_alerts_follow_goal_order(self) -> None:
        """Should report alerts in the order goals were set."""
        transactions = [expense(1, 1000, "a"), expense(2, 1000, "b")]
        goals = {GoalKey("b"): Money(1), TOTAL_GOAL: Money(1), GoalKey("a"): Money(1)}

        keys = [alert.key for alert in check_alerts(transactions, goals)]

        assert keys == ["b", "total", "a"]


class TestAlertMessage:
    """Tests for Alert.message."""

    def test_category_message(self) -> None:
        """Should name the category and both amounts."""
        alert = Alert(key=GoalKey("groceries"), spent=Money(75000), goal=Money(50000))

        assert alert.message == 'Spending in category "groceries" exceeded goal! Spent: 750.00, Goal: 500.00'

    def test_total_message(self) -> None:
        """Should describe total spending."""
        alert = Alert(key=TOTAL_GOAL, spent=Money(123456), goal=Money(100000))

        assert alert.message == "Total spending exceeded goal! Spent: 1234.56, Goal: 1000.00"
