"""Ledger API package."""

from account_book.api.handler import LedgerApi, RequestError
from account_book.api.server import build_ledger_api, create_app

__all__ = ["LedgerApi", "RequestError", "build_ledger_api", "create_app"]
