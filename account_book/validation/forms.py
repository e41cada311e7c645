"""
Form Validation Rules

Rules for the two client forms: the settings form and the entry form.
Each rule takes the raw field value and returns an error message, or None
when the value is acceptable. The UI evaluates them on every rerun and
only enables the save action when no rule fails.

DESIGN DECISION: Messages always state the limit that is actually
enforced (250 characters for URL/token, 5 characters per tag).
"""

from typing import Callable, Optional

from account_book.models.settings import ClientSettings, split_items
from account_book.validation.entry import is_number, is_valid_date


APP_NAME_MAX_LENGTH = 30
TEXT_MAX_LENGTH = 250
CATEGORY_MAX_LENGTH = 20
TAG_MAX_LENGTH = 5

Rule = Callable[[str], Optional[str]]


def app_name_rule(value: str) -> Optional[str]:
    if len(value) > APP_NAME_MAX_LENGTH:
        return f"Must be {APP_NAME_MAX_LENGTH} characters or less"
    return None


def long_text_rule(value: str) -> Optional[str]:
    if len(value) > TEXT_MAX_LENGTH:
        return f"Must be {TEXT_MAX_LENGTH} characters or less"
    return None


def category_list_rule(value: str) -> Optional[str]:
    items = split_items(value)
    if not items:
        return "Enter at least one category"
    if any(len(item) > CATEGORY_MAX_LENGTH for item in items):
        return f"Each category must be {CATEGORY_MAX_LENGTH} characters or less"
    return None


def tag_list_rule(value: str) -> Optional[str]:
    if any(len(item) > TAG_MAX_LENGTH for item in split_items(value)):
        return f"Each tag must be {TAG_MAX_LENGTH} characters or less"
    return None


SETTINGS_RULES: dict[str, list[Rule]] = {
    "app_name": [app_name_rule],
    "api_url": [long_text_rule],
    "auth_token": [long_text_rule],
    "income_categories": [category_list_rule],
    "outgo_categories": [category_list_rule],
    "tags": [tag_list_rule],
}


def settings_errors(settings: ClientSettings) -> dict[str, str]:
    """First failing rule message per field; fields that pass are omitted."""
    errors = {}
    for field, rules in SETTINGS_RULES.items():
        value = getattr(settings, field)
        for rule in rules:
            message = rule(value)
            if message:
                errors[field] = message
                break
    return errors


def is_settings_valid(settings: ClientSettings) -> bool:
    return not settings_errors(settings)


def entry_form_errors(
    entry_date: str,
    title: str,
    category: str,
    amount: Optional[float],
) -> dict[str, str]:
    """
    Client-side checks of the entry form before a request is sent.

    Amounts are signed like on the server, so a refund can be negative.
    The server re-validates the assembled item with `validate_entry`.
    """
    errors = {}
    if not entry_date:
        errors["date"] = "Date is required"
    elif not is_valid_date(entry_date):
        errors["date"] = "Date must be YYYY-MM-DD"
    if not title.strip():
        errors["title"] = "Title is required"
    if not category.strip():
        errors["category"] = "Category is required"
    if amount is None:
        errors["amount"] = "Amount is required"
    elif not is_number(amount):
        errors["amount"] = "Amount must be a number"
    return errors
