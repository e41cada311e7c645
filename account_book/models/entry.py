"""
Ledger Entry Model

One entry is one row of a month sheet. The row layout is fixed:

    A    B     C      D         E     F       G      H
    id   date  title  category  tags  income  outgo  memo

DESIGN DECISION: An entry id is a random UUID truncated to 8 characters.
It is only unique within its month sheet, and even there collisions are
possible in principle. That is acceptable for a personal, low-volume
ledger; the id is a row handle, not a global key.
"""

from typing import Any, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


ENTRY_ID_LENGTH = 8

ENTRY_COLUMNS = [
    "id",
    "date",
    "title",
    "category",
    "tags",
    "income",
    "outgo",
    "memo",
]

# Cells that hold free text (everything except the two amounts)
TEXT_COLUMNS = ("id", "date", "title", "category", "tags", "memo")

Amount = Union[int, float]


def year_month_of(entry_date: str) -> str:
    """Month sheet key (`YYYY-MM`) of a `YYYY-MM-DD` date."""
    return entry_date[:7]


def generate_entry_id() -> str:
    """New sheet-scoped entry id."""
    return str(uuid4())[:ENTRY_ID_LENGTH]


def _parse_amount(value: Any) -> Optional[Amount]:
    """Empty cells become None; numeric text becomes a number."""
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    number = float(str(value).replace(",", ""))
    return int(number) if number.is_integer() else number


class LedgerEntry(BaseModel):
    """
    A stored income or outgo record.

    Exactly one of income/outgo is set.
    """
    model_config = ConfigDict(extra="ignore")

    id: str = Field(
        ...,
        max_length=ENTRY_ID_LENGTH,
        description="Sheet-scoped identifier"
    )
    date: str = Field(..., description="YYYY-MM-DD")
    title: str = ""
    category: str = ""
    tags: str = Field(default="", description="Comma-delimited tags")
    income: Optional[Amount] = None
    outgo: Optional[Amount] = None
    memo: str = ""

    @model_validator(mode='after')
    def check_single_amount(self) -> 'LedgerEntry':
        """An entry is either income or outgo, never both or neither."""
        if (self.income is None) == (self.outgo is None):
            raise ValueError("Exactly one of income or outgo must be set")
        return self

    @property
    def year_month(self) -> str:
        return year_month_of(self.date)

    @property
    def is_income(self) -> bool:
        return self.income is not None

    @property
    def amount(self) -> Amount:
        return self.income if self.income is not None else self.outgo

    @property
    def tag_list(self) -> list[str]:
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]

    def to_row(self) -> list:
        """Convert to the eight A..H cell values (None becomes an empty cell)."""
        row = []
        for column in ENTRY_COLUMNS:
            value = getattr(self, column)
            row.append("" if value is None else value)
        return row

    @classmethod
    def from_row(cls, row: list) -> 'LedgerEntry':
        """Convert a sheet row back to an entry."""
        # Trailing empty cells are not returned by the Sheets API
        def safe_get(index: int) -> Any:
            try:
                return row[index]
            except IndexError:
                return ""

        return cls(
            id=str(safe_get(0)),
            date=str(safe_get(1)),
            title=str(safe_get(2)),
            category=str(safe_get(3)),
            tags=str(safe_get(4)),
            income=_parse_amount(safe_get(5)),
            outgo=_parse_amount(safe_get(6)),
            memo=str(safe_get(7)),
        )

    @classmethod
    def from_item(cls, item: dict, entry_id: str) -> 'LedgerEntry':
        """Build an entry from a validated request item and an id."""
        return cls(
            id=entry_id,
            date=item["date"],
            title=item["title"],
            category=item["category"],
            tags=item["tags"],
            income=item["income"],
            outgo=item["outgo"],
            memo=item["memo"],
        )
