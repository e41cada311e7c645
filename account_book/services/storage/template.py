"""
Month Sheet Template

Layout written into a month sheet when it is created:

    rows 1-5   title and summary formulas (budget, income, outgo, balance)
    row 6      header of the eight data columns A..H
    row 7+     entries
    J1         outgo-by-category QUERY (spills downward)
    M1:N6      spending trend for one category
    P1:Q5      spending trend for all outgo

Written cells stay within rows 1-6; only the QUERY result spills lower.
Deleting an entry removes its whole spreadsheet row, so no template cell
may sit in the data region.

The budget cell (B2) and the trend category cell (N2) are left for the
user to fill in. Only values and formulas are produced here; formatting is
left to the spreadsheet.
"""

from account_book.models.entry import ENTRY_COLUMNS


HEADER_ROW = 6
FIRST_DATA_ROW = 7
LAST_DATA_COLUMN = "H"

# Columns A..Q, so the trend blocks fit in a new sheet
MONTH_SHEET_COLUMNS = 17

_DATA = FIRST_DATA_ROW
INCOME_RANGE = f"F{_DATA}:F"
OUTGO_RANGE = f"G{_DATA}:G"
CATEGORY_RANGE = f"D{_DATA}:D"


def _pad(row: list, width: int = len(ENTRY_COLUMNS)) -> list:
    return row + [""] * (width - len(row))


def _days_in_month(first_day: str) -> str:
    return f"DAY(EOMONTH({first_day},0))"


def _elapsed_days(first_day: str) -> str:
    """Days of the month so far; the whole month once it is over."""
    return f"MIN({_days_in_month(first_day)},MAX(1,TODAY()-{first_day}+1))"


def summary_block(year: int, month: int) -> list[list]:
    """Rows 1-6: title, summary formulas and the column header."""
    return [
        _pad([f"{year}-{month:02d} Household Account"]),
        _pad(["Budget", 0, "", "Income", f"=SUM({INCOME_RANGE})"]),
        _pad(["Spent", f"=SUM({OUTGO_RANGE})", "", "Balance", "=E2-B3"]),
        _pad(["Remaining", "=B2-B3", "", "Entries", f"=COUNTA(A{_DATA}:A)"]),
        _pad([]),
        list(ENTRY_COLUMNS),
    ]


def category_breakdown_block() -> list[list]:
    query = (
        f"=QUERY(A{HEADER_ROW}:{LAST_DATA_COLUMN},"
        "\"select D, sum(G) where G is not null group by D "
        "order by sum(G) desc label D 'category', sum(G) 'outgo'\",1)"
    )
    return [["Outgo by category"], [query]]


def category_trend_block(year: int, month: int) -> list[list]:
    """M1:N6, spending trend of the category typed into N2."""
    first_day = f"DATE({year},{month},1)"
    return [
        ["Spending trend (category)", ""],
        ["Category", ""],
        ["Spent", f"=SUMIF({CATEGORY_RANGE},N2,{OUTGO_RANGE})"],
        ["Daily average", f"=N3/{_elapsed_days(first_day)}"],
        ["Weekly pace", "=N4*7"],
        ["Month-end projection", f"=N4*{_days_in_month(first_day)}"],
    ]


def overall_trend_block(year: int, month: int) -> list[list]:
    """P1:Q5, spending trend of all outgo."""
    first_day = f"DATE({year},{month},1)"
    return [
        ["Spending trend (overall)", ""],
        ["Spent", f"=SUM({OUTGO_RANGE})"],
        ["Daily average", f"=Q2/{_elapsed_days(first_day)}"],
        ["Weekly pace", "=Q3*7"],
        ["Month-end projection", f"=Q3*{_days_in_month(first_day)}"],
    ]


def build_month_template(year: int, month: int) -> list[dict]:
    """
    Build the initial content of the `YYYY-MM` sheet.

    Returns:
        Ranges in the shape `Worksheet.batch_update` expects
    """
    return [
        {"range": f"A1:{LAST_DATA_COLUMN}{HEADER_ROW}", "values": summary_block(year, month)},
        {"range": "J1:J2", "values": category_breakdown_block()},
        {"range": "M1:N6", "values": category_trend_block(year, month)},
        {"range": "P1:Q5", "values": overall_trend_block(year, month)},
    ]


def parse_year_month(year_month: str) -> tuple[int, int]:
    year, month = year_month.split("-")
    return int(year), int(month)
