"""Domain type definitions for budget.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in minor units (hundredths)
- CategoryName: Name of a spending or income category
- Description: Transaction description text
- GoalKey: Category name or the reserved "total" key
"""

from decimal import Decimal
from typing import NewType

# Money amounts are stored as minor units to avoid floating point errors
Money = NewType("Money", int)

# Category name, case-sensitive and free-form
CategoryName = NewType("CategoryName", str)

# Transaction description text
Description = NewType("Description", str)

# Key of a spending goal: a category name or TOTAL_GOAL
GoalKey = NewType("GoalKey", str)

# Reserved goal key that caps spending across all categories
TOTAL_GOAL = GoalKey("total")


def format_money(amount: Money) -> str:
    """Format minor units as a two-decimal string (e.g. 80000 -> "800.00")."""
    return f"{Decimal(amount).scaleb(-2):.2f}"
