"""Domain models and pure functions for budget.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Ledger rules separated from storage and the CLI
"""

from budget.domain.models import TOTAL_GOAL, CategoryName, Description, GoalKey, Money

__all__ = ["Money", "CategoryName", "Description", "GoalKey", "TOTAL_GOAL"]
