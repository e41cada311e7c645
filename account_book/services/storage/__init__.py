"""
Storage Services Package

Provides the abstract month-sheet interface and its implementations.
Google Sheets is the real backend; the in-memory store serves tests and
local development.
"""

from account_book.services.storage.interface import (
    ConnectionError,
    LedgerStorageInterface,
    NotFoundError,
    StorageError,
)
from account_book.services.storage.google_sheets import (
    GoogleSheetsClient,
    GoogleSheetsLedgerStorage,
)
from account_book.services.storage.memory import InMemoryLedgerStorage
from account_book.services.storage.template import (
    FIRST_DATA_ROW,
    HEADER_ROW,
    build_month_template,
)

__all__ = [
    # Interface
    "LedgerStorageInterface",
    # Exceptions
    "ConnectionError",
    "NotFoundError",
    "StorageError",
    # Implementations
    "GoogleSheetsClient",
    "GoogleSheetsLedgerStorage",
    "InMemoryLedgerStorage",
    # Month sheet layout
    "FIRST_DATA_ROW",
    "HEADER_ROW",
    "build_month_template",
]
