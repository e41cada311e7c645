"""Tests for the client helpers: API client, settings store and month summary."""

import json

import pytest
import requests

from account_book.client import (
    LedgerApiClient,
    LedgerApiError,
    SettingsStore,
    build_item,
    summarize,
)
from account_book.models import ClientSettings, LedgerEntry


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def api_client():
    return LedgerApiClient("https://ledger.example/api", "test-token", timeout=5)


@pytest.fixture
def wire(monkeypatch, api):
    """Route requests.post through the in-process handler and record bodies."""
    sent = []

    def fake_post(url, json=None, timeout=None):
        sent.append(json)
        return FakeResponse(api.handle(_dumps(json)))

    monkeypatch.setattr(requests, "post", fake_post)
    return sent


def _dumps(payload):
    return json.dumps(payload)


class TestLedgerApiClient:

    def test_round_trip(self, api_client, wire):
        item = build_item("2024-05-10", " Lunch ", "Food", 850, is_income=False, tags=["work"])
        stored = api_client.add_entry(item)

        assert wire[0] == {"authToken": "test-token", "method": "POST", "params": {"item": item}}
        assert stored.title == "Lunch"
        assert api_client.list_entries("2024-05") == [stored]

        moved = api_client.update_entry("2024-05", build_item(
            "2024-06-01", "Lunch", "Food", 900, is_income=False, entry_id=stored.id,
        ))
        assert moved.date == "2024-06-01"
        assert api_client.list_entries("2024-05") == []

        message = api_client.delete_entry("2024-06", moved.id)
        assert moved.id in message

    def test_error_payload_raises(self, api_client, wire):
        with pytest.raises(LedgerApiError, match="YYYY-MM"):
            api_client.list_entries("2024-13")

    def test_network_failure_raises(self, api_client, monkeypatch):
        def fail(*args, **kwargs):
            raise requests.ConnectionError("connection refused")

        monkeypatch.setattr(requests, "post", fail)
        with pytest.raises(LedgerApiError, match="Could not reach"):
            api_client.list_entries("2024-05")

    def test_non_json_response_raises(self, api_client, monkeypatch):
        monkeypatch.setattr(requests, "post", lambda *a, **k: FakeResponse(ValueError("bad")))
        with pytest.raises(LedgerApiError, match="JSON"):
            api_client.list_entries("2024-05")


class TestBuildItem:

    def test_income(self):
        item = build_item("2024-05-25", "Salary", "Salary", 300000, is_income=True)
        assert item["income"] == 300000
        assert item["outgo"] is None
        assert item["tags"] == ""
        assert "id" not in item

    def test_tags_joined(self):
        item = build_item("2024-05-25", "x", "y", 1, is_income=False, tags=["a", "b"], entry_id="abcd1234")
        assert item["tags"] == "a,b"
        assert item["id"] == "abcd1234"


class TestSettingsStore:

    def test_missing_file_gives_defaults(self, tmp_path):
        store = SettingsStore(tmp_path / "settings.json")
        assert store.load() == ClientSettings()

    def test_save_and_load(self, tmp_path):
        store = SettingsStore(tmp_path / "nested" / "settings.json")
        settings = ClientSettings(app_name="Home", api_url="https://x", auth_token="t", tags="a,b")
        store.save(settings)
        assert store.load() == settings


class TestSummary:

    def test_summarize(self):
        entries = [
            LedgerEntry(id="1", date="2024-05-01", category="Salary", income=1000),
            LedgerEntry(id="2", date="2024-05-02", category="Food", outgo=300),
            LedgerEntry(id="3", date="2024-05-03", category="Rent", outgo=500),
            LedgerEntry(id="4", date="2024-05-04", category="Food", outgo=50.5),
        ]
        summary = summarize(entries)
        assert summary.income_total == 1000
        assert summary.outgo_total == 850.5
        assert summary.balance == 149.5
        assert list(summary.outgo_by_category) == ["Rent", "Food"]

    def test_empty(self):
        summary = summarize([])
        assert summary.balance == 0
        assert summary.outgo_by_category == {}
