"""
Entry Validation

Every item arriving on POST or PUT is checked here before anything touches
the store. The client runs the same checks before sending, but the server
never trusts it.

IMPORTANT: Validation NEVER silently fixes an item. It reports every
problem it finds.
"""

import math
import re
from datetime import date
from typing import Any


REQUIRED_FIELDS = ("date", "title", "category", "tags", "memo", "income", "outgo")
STRING_FIELDS = ("date", "title", "category", "tags", "memo")

DATE_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$")
YEAR_MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def is_number(value: Any) -> bool:
    """JSON numbers only: booleans, NaN and infinities do not count."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_valid_date(value: Any) -> bool:
    """`YYYY-MM-DD` naming a real calendar day."""
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_valid_year_month(value: Any) -> bool:
    return isinstance(value, str) and YEAR_MONTH_PATTERN.match(value) is not None


def validate_entry(item: Any) -> list[str]:
    """
    Check an incoming entry item.

    Args:
        item: The decoded `item` param of a POST or PUT request

    Returns:
        Human-readable problems; empty when the item is valid
    """
    if not isinstance(item, dict):
        return ["Entry must be an object"]

    missing = [field for field in REQUIRED_FIELDS if field not in item]
    if missing:
        return [f"Missing fields: {', '.join(missing)}"]

    problems = []
    for field in STRING_FIELDS:
        if not isinstance(item[field], str):
            problems.append(f"'{field}' must be a string")

    if isinstance(item["date"], str) and not is_valid_date(item["date"]):
        problems.append(f"'date' must be a YYYY-MM-DD calendar date: {item['date']!r}")

    income, outgo = item["income"], item["outgo"]
    if income is not None and outgo is not None:
        problems.append("Only one of income or outgo may be set")
    elif income is None and outgo is None:
        problems.append("One of income or outgo must be set")
    else:
        field = "income" if income is not None else "outgo"
        if not is_number(item[field]):
            problems.append(f"'{field}' must be a number")

    return problems


def is_valid(item: Any) -> bool:
    """Whether an incoming entry item may be stored."""
    return not validate_entry(item)
