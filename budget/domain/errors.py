"""Error taxonomy for ledger operations."""

from enum import Enum


class BudgetError(Exception):
    """Base class for all budget errors."""


class ValidationReason(str, Enum):
    """Why user input was rejected."""

    INVALID_TYPE = "invalid_type"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_CATEGORY = "invalid_category"


class ValidationError(BudgetError):
    """User input failed a precondition."""

    def __init__(self, reason: ValidationReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


class NotFoundError(BudgetError):
    """Referenced transaction does not exist."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"No transaction found with ID {identifier}")
        self.identifier = identifier


class CorruptStoreError(BudgetError):
    """Persisted ledger content could not be parsed."""
