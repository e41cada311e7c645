"""Client-side helpers used by the form UI."""

from account_book.client.api_client import LedgerApiClient, LedgerApiError, build_item
from account_book.client.settings_store import SettingsStore
from account_book.client.summary import MonthSummary, summarize

__all__ = [
    "LedgerApiClient",
    "LedgerApiError",
    "MonthSummary",
    "SettingsStore",
    "build_item",
    "summarize",
]
