"""
Ledger API Client

Used by the form UI. Each user action issues exactly one request; there
is no retry, batching or debouncing. An `{error}` payload raises
`LedgerApiError` so the caller can keep its previous state.
"""

from typing import Any, Optional

import requests

from account_book.log import get_logger
from account_book.models.api import ApiRequest, Method
from account_book.models.entry import LedgerEntry


logger = get_logger(__name__)


class LedgerApiError(Exception):
    """The API answered with an error, or could not be reached."""
    pass


class LedgerApiClient:
    """Thin wrapper around the single Ledger API endpoint."""

    def __init__(self, api_url: str, auth_token: str, timeout: float = 30.0):
        self._api_url = api_url
        self._auth_token = auth_token
        self._timeout = timeout

    def _call(self, method: Method, params: dict) -> Any:
        request = ApiRequest(auth_token=self._auth_token, method=method, params=params)
        try:
            response = requests.post(
                self._api_url,
                json=request.to_payload(),
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("ledger_api_unreachable", method=method.value, error=str(e))
            raise LedgerApiError(f"Could not reach the ledger API: {e}")

        try:
            result = response.json()
        except ValueError:
            raise LedgerApiError("The ledger API did not answer with JSON")

        if isinstance(result, dict) and "error" in result:
            logger.warning("ledger_api_error", method=method.value, error=result["error"])
            raise LedgerApiError(str(result["error"]))
        return result

    def list_entries(self, year_month: str) -> list[LedgerEntry]:
        result = self._call(Method.GET, {"yearMonth": year_month})
        return [LedgerEntry.model_validate(item) for item in result]

    def add_entry(self, item: dict) -> LedgerEntry:
        """Store a new entry; `item` carries every field except id."""
        result = self._call(Method.POST, {"item": item})
        return LedgerEntry.model_validate(result)

    def update_entry(self, before_ym: str, item: dict) -> LedgerEntry:
        """
        Update an entry stored under `before_ym`.

        If the item's date falls in another month, the entry moves there
        and comes back with a new id.
        """
        result = self._call(Method.PUT, {"beforeYM": before_ym, "item": item})
        return LedgerEntry.model_validate(result)

    def delete_entry(self, year_month: str, entry_id: str) -> str:
        result = self._call(Method.DELETE, {"yearMonth": year_month, "id": entry_id})
        return result["message"]


def build_item(
    entry_date: str,
    title: str,
    category: str,
    amount: float,
    is_income: bool,
    tags: Optional[list[str]] = None,
    memo: str = "",
    entry_id: Optional[str] = None,
) -> dict:
    """Assemble a request item from entry form values."""
    item = {
        "date": entry_date,
        "title": title.strip(),
        "category": category.strip(),
        "tags": ",".join(tags or []),
        "income": amount if is_income else None,
        "outgo": None if is_income else amount,
        "memo": memo,
    }
    if entry_id is not None:
        item["id"] = entry_id
    return item
