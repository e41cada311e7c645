"""
Ledger API Request Handler

A single entry point receives `{authToken, method, params}` and routes the
request to one of four operations on the month-partitioned store:

    GET     {yearMonth}          -> list of entries
    POST    {item}               -> stored entry (with a new id)
    PUT     {beforeYM, item}     -> updated entry
    DELETE  {yearMonth, id}      -> {message}

DESIGN DECISION: The handler never raises. Every failure, from a malformed
body to an exception inside the Sheets client, becomes `{"error": str}`.
The HTTP layer always answers 200 with whatever `handle` returns.

Moving an entry to another month is not atomic. The entry is inserted
into the new month first and only then deleted from the old one; if that
delete fails, the new copy is removed again. A crash between the two steps
leaves a duplicate rather than losing the entry.
"""

import hmac
import json
from typing import Any, Callable, Union

from account_book.log import get_logger
from account_book.models.api import Method
from account_book.models.entry import LedgerEntry, generate_entry_id, year_month_of
from account_book.services.storage import LedgerStorageInterface, NotFoundError
from account_book.validation.entry import is_valid_year_month, validate_entry


logger = get_logger(__name__)

Result = Union[dict, list]


class RequestError(Exception):
    """A request that cannot be served as sent."""
    pass


def error(message: str) -> dict:
    return {"error": message}


class LedgerApi:
    """
    The Ledger API.

    Storage and the shared auth token are injected; the hosting process
    owns their lifecycle.
    """

    def __init__(self, storage: LedgerStorageInterface, auth_token: str):
        if not auth_token:
            raise ValueError("auth_token must not be empty")
        self._storage = storage
        self._auth_token = auth_token
        self._routes: dict[Method, Callable[[dict], Result]] = {
            Method.GET: self.get_entries,
            Method.POST: self.post_entry,
            Method.PUT: self.put_entry,
            Method.DELETE: self.delete_entry,
        }

    def _is_authorized(self, token: Any) -> bool:
        if not isinstance(token, str):
            return False
        return hmac.compare_digest(token.encode("utf-8"), self._auth_token.encode("utf-8"))

    def handle(self, body: Union[str, bytes]) -> Result:
        """
        Serve one request body.

        Returns:
            The operation's result, or `{"error": message}`
        """
        try:
            payload = json.loads(body)
        except (TypeError, ValueError):
            logger.warning("ledger_request_malformed")
            return error("Request body is not valid JSON")
        if not isinstance(payload, dict):
            logger.warning("ledger_request_malformed")
            return error("Request body must be a JSON object")

        if not self._is_authorized(payload.get("authToken")):
            logger.warning("ledger_auth_failed", method=payload.get("method"))
            return error("Authentication failed")

        raw_method = payload.get("method")
        try:
            method = Method(raw_method)
        except ValueError:
            return error(f"Unsupported method: {raw_method}")

        params = payload.get("params")
        if params is None:
            params = {}
        if not isinstance(params, dict):
            return error("'params' must be an object")

        try:
            result = self._routes[method](params)
        except Exception as e:
            logger.error("ledger_request_failed", method=method.value, error=str(e))
            return error(str(e))

        logger.info("ledger_request", method=method.value)
        return result

    # =========================================================================
    # Operations
    # =========================================================================

    def get_entries(self, params: dict) -> list[dict]:
        year_month = self._require_year_month(params, "yearMonth")
        if not self._storage.sheet_exists(year_month):
            return []
        return [entry.model_dump() for entry in self._storage.list_entries(year_month)]

    def post_entry(self, params: dict) -> dict:
        item = self._require_item(params)
        return self._insert(item).model_dump()

    def put_entry(self, params: dict) -> dict:
        before_ym = self._require_year_month(params, "beforeYM")
        item = self._require_item(params)
        entry_id = item.get("id")
        if not isinstance(entry_id, str) or not entry_id:
            raise RequestError("'item.id' is required to update an entry")

        row = self._locate(before_ym, entry_id)
        if year_month_of(item["date"]) != before_ym:
            return self._move(before_ym, row, item).model_dump()

        entry = LedgerEntry.from_item(item, entry_id)
        self._storage.update_row(before_ym, row, entry)
        return entry.model_dump()

    def delete_entry(self, params: dict) -> dict:
        year_month = self._require_year_month(params, "yearMonth")
        entry_id = params.get("id")
        if not isinstance(entry_id, str) or not entry_id:
            raise RequestError("'id' is required")

        row = self._locate(year_month, entry_id)
        self._storage.delete_row(year_month, row)
        return {"message": f"Deleted entry {entry_id} from {year_month}"}

    # =========================================================================
    # Helpers
    # =========================================================================

    def _require_year_month(self, params: dict, key: str) -> str:
        value = params.get(key)
        if not is_valid_year_month(value):
            raise RequestError(f"'{key}' must be in YYYY-MM format: {value!r}")
        return value

    def _require_item(self, params: dict) -> dict:
        item = params.get("item")
        problems = validate_entry(item)
        if problems:
            raise RequestError("Invalid entry: " + "; ".join(problems))
        return item

    def _locate(self, year_month: str, entry_id: str) -> int:
        if not self._storage.sheet_exists(year_month):
            raise NotFoundError(f"No sheet for {year_month}")
        row = self._storage.find_row(year_month, entry_id)
        if row is None:
            raise NotFoundError(f"Entry {entry_id} not found in {year_month}")
        return row

    def _insert(self, item: dict) -> LedgerEntry:
        year_month = year_month_of(item["date"])
        if not self._storage.sheet_exists(year_month):
            self._storage.create_sheet(year_month)
        entry = LedgerEntry.from_item(item, generate_entry_id())
        self._storage.append_entry(year_month, entry)
        return entry

    def _move(self, before_ym: str, row: int, item: dict) -> LedgerEntry:
        """Re-insert an entry under its new month, then drop the old row."""
        moved = self._insert(item)
        try:
            self._storage.delete_row(before_ym, row)
        except Exception:
            target_ym = moved.year_month
            new_row = self._storage.find_row(target_ym, moved.id)
            if new_row is not None:
                self._storage.delete_row(target_ym, new_row)
            raise
        logger.info("ledger_entry_moved", before=before_ym, after=moved.year_month)
        return moved
