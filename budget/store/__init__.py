"""Ledger store layer - provides persistence for the application.

This module re-exports the public store API for easy importing.
"""

from budget.store.ledger import LedgerStore
from budget.store.schema import (
    document_from_dict,
    document_to_dict,
    get_data_path,
    get_xdg_data_home,
)

__all__ = [
    "LedgerStore",
    "document_from_dict",
    "document_to_dict",
    "get_data_path",
    "get_xdg_data_home",
]
