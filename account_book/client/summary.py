"""Month totals shown above the entry list."""

from collections import defaultdict

from pydantic import BaseModel, Field

from account_book.models.entry import LedgerEntry


class MonthSummary(BaseModel):
    income_total: float = 0
    outgo_total: float = 0
    outgo_by_category: dict[str, float] = Field(default_factory=dict)

    @property
    def balance(self) -> float:
        return self.income_total - self.outgo_total


def summarize(entries: list[LedgerEntry]) -> MonthSummary:
    income_total = 0
    outgo_total = 0
    by_category: dict[str, float] = defaultdict(float)

    for entry in entries:
        if entry.is_income:
            income_total += entry.income
        else:
            outgo_total += entry.outgo
            by_category[entry.category] += entry.outgo

    ranked = dict(sorted(by_category.items(), key=lambda item: item[1], reverse=True))
    return MonthSummary(
        income_total=income_total,
        outgo_total=outgo_total,
        outgo_by_category=ranked,
    )
