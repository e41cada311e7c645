"""
HTTP Server for the Ledger API

One POST endpoint carries every operation. The raw body is handed to
`LedgerApi.handle` untouched, so a malformed body is answered with an
`{error}` payload like any other failure, and always with status 200.
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from account_book.api.handler import LedgerApi
from account_book.config import ApiSettings, get_settings
from account_book.log import configure_logging
from account_book.services.storage import (
    GoogleSheetsClient,
    GoogleSheetsLedgerStorage,
    InMemoryLedgerStorage,
    LedgerStorageInterface,
)


def build_storage(api_settings: ApiSettings) -> LedgerStorageInterface:
    """Create the storage backend named in the API settings."""
    if api_settings.storage_backend == "memory":
        return InMemoryLedgerStorage()
    sheets_settings = get_settings().google_sheets
    return GoogleSheetsLedgerStorage(
        GoogleSheetsClient(sheets_settings),
        sheet_rows=sheets_settings.sheet_rows,
    )


def build_ledger_api(api_settings: Optional[ApiSettings] = None) -> LedgerApi:
    api_settings = api_settings or get_settings().api
    return LedgerApi(build_storage(api_settings), api_settings.auth_token)


def create_app(ledger_api: Optional[LedgerApi] = None) -> FastAPI:
    app = FastAPI(title="Account Book API")
    app.state.ledger_api = ledger_api or build_ledger_api()

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/")
    async def ledger(request: Request) -> JSONResponse:
        body = await request.body()
        # gspread is blocking
        result = await run_in_threadpool(app.state.ledger_api.handle, body)
        return JSONResponse(result)

    return app


def main() -> None:
    api_settings = get_settings().api
    configure_logging(api_settings.log_level)
    app = create_app(build_ledger_api(api_settings))
    uvicorn.run(app, host=api_settings.host, port=api_settings.port)
