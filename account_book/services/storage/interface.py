"""
Abstract Storage Interface

DESIGN DECISION: The ledger is partitioned into month sheets named
`YYYY-MM`, and rows are addressed by their 1-based sheet row number.
Defining the operations abstractly allows us to:
1. Use in-memory storage for testing and local development
2. Keep the request handler decoupled from the Google Sheets API

The interface is intentionally small. Look-up, write and delete are
separate calls, mirroring what a spreadsheet offers; there are no
transactions.
"""

from abc import ABC, abstractmethod
from typing import Optional

from account_book.models.entry import LedgerEntry


class LedgerStorageInterface(ABC):
    """
    Abstract interface for month-partitioned ledger storage.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def sheet_exists(self, year_month: str) -> bool:
        """
        Check whether the sheet for a month exists.

        Args:
            year_month: Month key, `YYYY-MM`
        """
        pass

    @abstractmethod
    def create_sheet(self, year_month: str) -> None:
        """
        Create a month sheet with the summary template.

        Raises:
            StorageError: If the sheet cannot be created
        """
        pass

    @abstractmethod
    def list_entries(self, year_month: str) -> list[LedgerEntry]:
        """
        Read every entry of a month, in sheet order.

        Raises:
            NotFoundError: If the month sheet doesn't exist
        """
        pass

    @abstractmethod
    def append_entry(self, year_month: str, entry: LedgerEntry) -> None:
        """
        Append an entry after the last data row.

        Raises:
            NotFoundError: If the month sheet doesn't exist
        """
        pass

    @abstractmethod
    def find_row(self, year_month: str, entry_id: str) -> Optional[int]:
        """
        Locate an entry.

        Returns:
            The 1-based sheet row of the entry, None if absent

        Raises:
            NotFoundError: If the month sheet doesn't exist
        """
        pass

    @abstractmethod
    def update_row(self, year_month: str, row: int, entry: LedgerEntry) -> None:
        """
        Overwrite the date..memo cells (B..H) of a row. The id cell is kept.
        """
        pass

    @abstractmethod
    def delete_row(self, year_month: str, row: int) -> None:
        """Remove a row; later rows move up."""
        pass

    def count_rows(self, year_month: str) -> int:
        """Number of data rows in a month sheet."""
        return len(self.list_entries(year_month))


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Sheet or entry not found in storage."""
    pass


class ConnectionError(StorageError):
    """Could not connect to storage backend."""
    pass
