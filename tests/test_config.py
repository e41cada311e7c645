"""Tests for environment configuration."""

import pytest
from pydantic import ValidationError

from account_book.config import ApiSettings, ClientAppSettings, GoogleSheetsSettings


def test_api_settings_from_env(monkeypatch):
    monkeypatch.setenv("LEDGER_API_AUTH_TOKEN", "from-env")
    monkeypatch.setenv("LEDGER_API_PORT", "9000")
    monkeypatch.setenv("LEDGER_API_STORAGE_BACKEND", "memory")

    settings = ApiSettings()

    assert settings.auth_token == "from-env"
    assert settings.port == 9000
    assert settings.storage_backend == "memory"


def test_api_settings_require_token(monkeypatch):
    monkeypatch.delenv("LEDGER_API_AUTH_TOKEN", raising=False)
    with pytest.raises(ValidationError):
        ApiSettings(auth_token="")


def test_unknown_storage_backend():
    with pytest.raises(ValidationError):
        ApiSettings(auth_token="t", storage_backend="postgres")


def test_missing_credentials_file_only_warns(tmp_path):
    with pytest.warns(UserWarning, match="credentials file not found"):
        settings = GoogleSheetsSettings(
            credentials_path=str(tmp_path / "missing.json"),
            spreadsheet_id="sheet-id",
        )
    assert settings.sheet_rows == 1000


def test_client_settings_path(monkeypatch, tmp_path):
    monkeypatch.setenv("LEDGER_CLIENT_SETTINGS_PATH", str(tmp_path / "s.json"))
    assert ClientAppSettings().settings_path == str(tmp_path / "s.json")
