"""
In-Memory Storage Implementation

Keeps month sheets as lists of rows in process memory, using the same row
numbering as the spreadsheet (data from row 7). Used by the tests and by
the API server when `LEDGER_API_STORAGE_BACKEND=memory`.
"""

from typing import Optional

from account_book.models.entry import LedgerEntry
from account_book.services.storage.interface import (
    LedgerStorageInterface,
    NotFoundError,
)
from account_book.services.storage.template import (
    FIRST_DATA_ROW,
    build_month_template,
    parse_year_month,
)


class InMemoryLedgerStorage(LedgerStorageInterface):
    """Month sheets held in a dict of `YYYY-MM` -> entries."""

    def __init__(self):
        self._sheets: dict[str, list[LedgerEntry]] = {}
        self.templates: dict[str, list[dict]] = {}

    def _get_sheet(self, year_month: str) -> list[LedgerEntry]:
        try:
            return self._sheets[year_month]
        except KeyError:
            raise NotFoundError(f"No sheet for {year_month}")

    def _index(self, year_month: str, row: int) -> int:
        sheet = self._get_sheet(year_month)
        index = row - FIRST_DATA_ROW
        if not 0 <= index < len(sheet):
            raise NotFoundError(f"No row {row} in {year_month}")
        return index

    def sheet_exists(self, year_month: str) -> bool:
        return year_month in self._sheets

    def create_sheet(self, year_month: str) -> None:
        year, month = parse_year_month(year_month)
        self.templates[year_month] = build_month_template(year, month)
        self._sheets[year_month] = []

    def list_entries(self, year_month: str) -> list[LedgerEntry]:
        return [entry.model_copy() for entry in self._get_sheet(year_month)]

    def append_entry(self, year_month: str, entry: LedgerEntry) -> None:
        self._get_sheet(year_month).append(entry.model_copy())

    def find_row(self, year_month: str, entry_id: str) -> Optional[int]:
        for offset, entry in enumerate(self._get_sheet(year_month)):
            if entry.id == entry_id:
                return FIRST_DATA_ROW + offset
        return None

    def update_row(self, year_month: str, row: int, entry: LedgerEntry) -> None:
        index = self._index(year_month, row)
        sheet = self._sheets[year_month]
        sheet[index] = entry.model_copy(update={"id": sheet[index].id})

    def delete_row(self, year_month: str, row: int) -> None:
        index = self._index(year_month, row)
        del self._sheets[year_month][index]
