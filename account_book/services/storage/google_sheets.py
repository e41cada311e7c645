"""
Google Sheets Storage Implementation

DESIGN DECISION: The ledger lives in a Google spreadsheet with one sheet
per month, because:
1. The user can open the month directly and read the summary formulas
2. No database setup required
3. Built-in backup (Google's infrastructure)

TRADEOFFS:
- Not suitable for high-volume data (we're fine for personal use)
- No transactions: sheet creation, appends, updates and deletes are
  separate API calls and can partially complete
- Concurrent writers are serialized by Google, not by this code

Text cells are written with a leading apostrophe and USER_ENTERED input,
so Sheets keeps "2024-05-01" or "007" as text instead of converting them
to a date or a number.
"""

from typing import Optional

import gspread
from google.oauth2.service_account import Credentials
from gspread.utils import ValueInputOption, ValueRenderOption
from tenacity import retry, stop_after_attempt, wait_exponential

from account_book.config import GoogleSheetsSettings, get_settings
from account_book.log import get_logger
from account_book.models.entry import ENTRY_COLUMNS, TEXT_COLUMNS, LedgerEntry
from account_book.services.storage.interface import (
    ConnectionError,
    LedgerStorageInterface,
    NotFoundError,
    StorageError,
)
from account_book.services.storage.template import (
    FIRST_DATA_ROW,
    LAST_DATA_COLUMN,
    MONTH_SHEET_COLUMNS,
    build_month_template,
    parse_year_month,
)


logger = get_logger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive",
]

TEXT_MARKER = "'"


class GoogleSheetsClient:
    """
    Low-level Google Sheets client wrapper.

    Handles authentication and provides retry logic for connecting.
    """

    def __init__(self, settings: Optional[GoogleSheetsSettings] = None):
        self._client: Optional[gspread.Client] = None
        self._spreadsheet: Optional[gspread.Spreadsheet] = None
        self._settings = settings or get_settings().google_sheets

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    def connect(self) -> gspread.Client:
        """
        Establish connection to Google Sheets.

        Uses service account credentials for authentication.
        """
        if self._client is None:
            try:
                credentials = Credentials.from_service_account_file(
                    self._settings.credentials_path,
                    scopes=SCOPES,
                )
                self._client = gspread.authorize(credentials)
            except FileNotFoundError:
                raise ConnectionError(
                    f"Google credentials file not found: {self._settings.credentials_path}"
                )
            except Exception as e:
                raise ConnectionError(f"Failed to connect to Google Sheets: {e}")

        return self._client

    def get_spreadsheet(self) -> gspread.Spreadsheet:
        """Get the configured spreadsheet."""
        if self._spreadsheet is None:
            client = self.connect()
            try:
                self._spreadsheet = client.open_by_key(
                    self._settings.spreadsheet_id
                )
            except gspread.SpreadsheetNotFound:
                raise ConnectionError(
                    f"Spreadsheet not found: {self._settings.spreadsheet_id}"
                )
        return self._spreadsheet


def to_sheet_row(entry: LedgerEntry) -> list:
    """Cells of an entry as written with USER_ENTERED input."""
    row = []
    for column, value in zip(ENTRY_COLUMNS, entry.to_row()):
        if column in TEXT_COLUMNS:
            value = TEXT_MARKER + value
        row.append(value)
    return row


class GoogleSheetsLedgerStorage(LedgerStorageInterface):
    """
    Google Sheets implementation of the month-partitioned ledger.

    Each month is a worksheet titled `YYYY-MM`; entries are rows A..H
    from row 7 on.
    """

    def __init__(self, client: Optional[GoogleSheetsClient] = None, sheet_rows: int = 1000):
        self._client = client or GoogleSheetsClient()
        self._sheet_rows = sheet_rows

    def _find_sheet(self, year_month: str) -> Optional[gspread.Worksheet]:
        try:
            return self._client.get_spreadsheet().worksheet(year_month)
        except gspread.WorksheetNotFound:
            return None

    def _get_sheet(self, year_month: str) -> gspread.Worksheet:
        sheet = self._find_sheet(year_month)
        if sheet is None:
            raise NotFoundError(f"No sheet for {year_month}")
        return sheet

    def _data_rows(self, sheet: gspread.Worksheet) -> list[list]:
        rows = sheet.get(
            f"A{FIRST_DATA_ROW}:{LAST_DATA_COLUMN}",
            value_render_option=ValueRenderOption.unformatted,
        )
        return [list(row) for row in rows]

    def sheet_exists(self, year_month: str) -> bool:
        try:
            return self._find_sheet(year_month) is not None
        except gspread.exceptions.GSpreadException as e:
            raise StorageError(f"Failed to look up sheet {year_month}: {e}")

    def create_sheet(self, year_month: str) -> None:
        """Create a month sheet and write the summary template into it."""
        year, month = parse_year_month(year_month)
        try:
            sheet = self._client.get_spreadsheet().add_worksheet(
                title=year_month,
                rows=self._sheet_rows,
                cols=MONTH_SHEET_COLUMNS,
            )
            sheet.batch_update(
                build_month_template(year, month),
                value_input_option=ValueInputOption.user_entered,
            )
        except gspread.exceptions.GSpreadException as e:
            raise StorageError(f"Failed to create sheet {year_month}: {e}")
        logger.info("month_sheet_created", year_month=year_month)

    def list_entries(self, year_month: str) -> list[LedgerEntry]:
        sheet = self._get_sheet(year_month)
        try:
            rows = self._data_rows(sheet)
        except gspread.exceptions.GSpreadException as e:
            raise StorageError(f"Failed to read sheet {year_month}: {e}")
        entries = []
        for offset, row in enumerate(rows):
            # Skip blank rows left by manual edits
            if not row or row[0] == "":
                continue
            try:
                entries.append(LedgerEntry.from_row(row))
            except ValueError as e:
                # Covers pydantic's ValidationError
                logger.warning(
                    "malformed_row_skipped",
                    year_month=year_month,
                    row=FIRST_DATA_ROW + offset,
                    error=str(e),
                )
        return entries

    def append_entry(self, year_month: str, entry: LedgerEntry) -> None:
        sheet = self._get_sheet(year_month)
        try:
            row = FIRST_DATA_ROW + len(self._data_rows(sheet))
            if row > sheet.row_count:
                sheet.add_rows(row - sheet.row_count)
            sheet.update(
                range_name=f"A{row}:{LAST_DATA_COLUMN}{row}",
                values=[to_sheet_row(entry)],
                value_input_option=ValueInputOption.user_entered,
            )
        except gspread.exceptions.GSpreadException as e:
            raise StorageError(f"Failed to append entry to {year_month}: {e}")

    def find_row(self, year_month: str, entry_id: str) -> Optional[int]:
        sheet = self._get_sheet(year_month)
        try:
            ids = sheet.col_values(1)[FIRST_DATA_ROW - 1:]
        except gspread.exceptions.GSpreadException as e:
            raise StorageError(f"Failed to read sheet {year_month}: {e}")
        for offset, value in enumerate(ids):
            if value == entry_id:
                return FIRST_DATA_ROW + offset
        return None

    def update_row(self, year_month: str, row: int, entry: LedgerEntry) -> None:
        sheet = self._get_sheet(year_month)
        try:
            sheet.update(
                range_name=f"B{row}:{LAST_DATA_COLUMN}{row}",
                values=[to_sheet_row(entry)[1:]],
                value_input_option=ValueInputOption.user_entered,
            )
        except gspread.exceptions.GSpreadException as e:
            raise StorageError(f"Failed to update row {row} of {year_month}: {e}")

    def delete_row(self, year_month: str, row: int) -> None:
        sheet = self._get_sheet(year_month)
        try:
            sheet.delete_rows(row)
        except gspread.exceptions.GSpreadException as e:
            raise StorageError(f"Failed to delete row {row} of {year_month}: {e}")

