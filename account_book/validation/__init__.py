"""Validation package."""

from account_book.validation.entry import (
    is_number,
    is_valid,
    is_valid_date,
    is_valid_year_month,
    validate_entry,
)
from account_book.validation.forms import (
    entry_form_errors,
    is_settings_valid,
    settings_errors,
)

__all__ = [
    "entry_form_errors",
    "is_number",
    "is_settings_valid",
    "is_valid",
    "is_valid_date",
    "is_valid_year_month",
    "settings_errors",
    "validate_entry",
]
