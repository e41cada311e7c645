"""
Data Models Package

Pydantic models for ledger entries, the client settings and the wire
envelope of the Ledger API.
"""

from account_book.models.api import ApiRequest, Method
from account_book.models.entry import (
    ENTRY_COLUMNS,
    ENTRY_ID_LENGTH,
    LedgerEntry,
    generate_entry_id,
    year_month_of,
)
from account_book.models.settings import ClientSettings, split_items

__all__ = [
    # Wire models
    "ApiRequest",
    "Method",
    # Entry model
    "ENTRY_COLUMNS",
    "ENTRY_ID_LENGTH",
    "LedgerEntry",
    "generate_entry_id",
    "year_month_of",
    # Settings model
    "ClientSettings",
    "split_items",
]
