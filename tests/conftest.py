"""Shared fixtures: in-memory store, a fake gspread spreadsheet, sample items."""

import json
import re

import gspread
import pytest

from account_book.api.handler import LedgerApi
from account_book.services.storage import InMemoryLedgerStorage


AUTH_TOKEN = "test-token"


def _column_index(letters: str) -> int:
    index = 0
    for char in letters:
        index = index * 26 + ord(char.upper()) - ord("A") + 1
    return index


def _parse_cell(a1: str) -> tuple[int, int]:
    """'B7' -> (7, 2); 'H' -> (0, 8)."""
    match = re.match(r"^([A-Z]+)(\d*)$", a1)
    letters, digits = match.groups()
    return (int(digits) if digits else 0), _column_index(letters)


def _entered(value):
    """What Sheets stores for a USER_ENTERED value (formulas kept as text)."""
    if isinstance(value, str) and value.startswith("'"):
        return value[1:]
    return value


class FakeWorksheet:
    """The subset of gspread.Worksheet the ledger storage uses."""

    def __init__(self, title: str, rows: int, cols: int):
        self.title = title
        self.row_count = rows
        self.col_count = cols
        self.cells: dict[tuple[int, int], object] = {}
        self.calls: list[str] = []

    def _write(self, range_name: str, values: list[list]) -> None:
        row, col = _parse_cell(range_name.split(":")[0])
        for r, values_row in enumerate(values):
            for c, value in enumerate(values_row):
                self.cells[(row + r, col + c)] = _entered(value)

    def _last_row(self, first_col: int = 1, last_col: int = 10**6) -> int:
        return max(
            (r for (r, c), v in self.cells.items() if v != "" and first_col <= c <= last_col),
            default=0,
        )

    def batch_update(self, data, value_input_option=None):
        self.calls.append("batch_update")
        for block in data:
            self._write(block["range"], block["values"])

    def update(self, range_name=None, values=None, value_input_option=None):
        self.calls.append(f"update {range_name}")
        self._write(range_name, values)

    def get(self, range_name, value_render_option=None):
        start, end = range_name.split(":")
        first_row, first_col = _parse_cell(start)
        _, last_col = _parse_cell(end)
        rows = []
        for r in range(first_row, self._last_row(first_col, last_col) + 1):
            row = [self.cells.get((r, c), "") for c in range(first_col, last_col + 1)]
            while row and row[-1] == "":
                row.pop()
            rows.append(row)
        return rows

    def col_values(self, col):
        values = [self.cells.get((r, col), "") for r in range(1, self._last_row(col, col) + 1)]
        while values and values[-1] == "":
            values.pop()
        return values

    def add_rows(self, rows):
        self.row_count += rows

    def delete_rows(self, index):
        self.calls.append(f"delete_rows {index}")
        shifted = {}
        for (r, c), value in self.cells.items():
            if r < index:
                shifted[(r, c)] = value
            elif r > index:
                shifted[(r - 1, c)] = value
        self.cells = shifted


class FakeSpreadsheet:
    def __init__(self):
        self.sheets: dict[str, FakeWorksheet] = {}

    def worksheet(self, title):
        try:
            return self.sheets[title]
        except KeyError:
            raise gspread.WorksheetNotFound(title)

    def add_worksheet(self, title, rows, cols):
        sheet = FakeWorksheet(title, rows, cols)
        self.sheets[title] = sheet
        return sheet


class FakeSheetsClient:
    """Stands in for GoogleSheetsClient; no network."""

    def __init__(self):
        self.spreadsheet = FakeSpreadsheet()

    def get_spreadsheet(self):
        return self.spreadsheet


@pytest.fixture
def storage():
    return InMemoryLedgerStorage()


@pytest.fixture
def api(storage):
    return LedgerApi(storage, AUTH_TOKEN)


@pytest.fixture
def call(api):
    """Send one request body through the handler."""
    def _call(method, params=None, token=AUTH_TOKEN):
        body = {"authToken": token, "method": method, "params": params or {}}
        return api.handle(json.dumps(body))
    return _call


@pytest.fixture
def outgo_item():
    return {
        "date": "2024-05-10",
        "title": "Lunch",
        "category": "Food",
        "tags": "work",
        "income": None,
        "outgo": 850,
        "memo": "",
    }


@pytest.fixture
def income_item():
    return {
        "date": "2024-05-25",
        "title": "May salary",
        "category": "Salary",
        "tags": "",
        "income": 300000,
        "outgo": None,
        "memo": "net",
    }


@pytest.fixture
def sheets_client():
    return FakeSheetsClient()
