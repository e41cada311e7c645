"""
Tests for Account Book models

Test strategy:
1. Unit tests for models and validators
2. Handler tests against the in-memory store
3. No real API calls in tests (fake gspread objects, monkeypatched requests)
"""

import pytest

from account_book.models import (
    ApiRequest,
    ClientSettings,
    LedgerEntry,
    Method,
    generate_entry_id,
    split_items,
    year_month_of,
)


class TestLedgerEntry:
    """Tests for the LedgerEntry model."""

    def test_entry_creation(self):
        """Test LedgerEntry model creation."""
        entry = LedgerEntry(id="abcd1234", date="2024-05-10", title="Lunch", outgo=850)
        assert entry.year_month == "2024-05"
        assert entry.is_income is False
        assert entry.amount == 850

    def test_entry_rejects_both_amounts(self):
        """Test that income and outgo cannot both be set."""
        with pytest.raises(ValueError, match="Exactly one of income or outgo"):
            LedgerEntry(id="abcd1234", date="2024-05-10", income=1, outgo=1)

    def test_entry_rejects_no_amount(self):
        """Test that one amount is required."""
        with pytest.raises(ValueError):
            LedgerEntry(id="abcd1234", date="2024-05-10")

    def test_to_row_order_and_empty_cells(self):
        """Test the A..H cell order with None written as an empty cell."""
        entry = LedgerEntry(
            id="abcd1234",
            date="2024-05-10",
            title="Lunch",
            category="Food",
            tags="work,team",
            outgo=850,
            memo="ramen",
        )
        assert entry.to_row() == [
            "abcd1234", "2024-05-10", "Lunch", "Food", "work,team", "", 850, "ramen",
        ]

    def test_from_row_converts_empty_numbers_to_none(self):
        """Test that empty numeric cells come back as None."""
        entry = LedgerEntry.from_row(["abcd1234", "2024-05-25", "Salary", "Salary", "", 300000, "", "net"])
        assert entry.income == 300000
        assert entry.outgo is None

    def test_from_row_handles_trimmed_trailing_cells(self):
        """Test rows where the Sheets API dropped the empty memo cell."""
        entry = LedgerEntry.from_row(["abcd1234", "2024-05-10", "Lunch", "Food", "", "", 850])
        assert entry.memo == ""
        assert entry.outgo == 850

    def test_from_row_parses_numeric_text(self):
        """Test amounts that were read back as formatted text."""
        entry = LedgerEntry.from_row(["abcd1234", "2024-05-10", "TV", "Goods", "", "", "1,200.5", ""])
        assert entry.outgo == 1200.5

    def test_tag_list(self):
        entry = LedgerEntry(id="x", date="2024-05-10", tags="a, b,,", outgo=1)
        assert entry.tag_list == ["a", "b"]


class TestEntryHelpers:
    """Tests for month keys and ids."""

    @pytest.mark.parametrize("value", ["2024-01-01", "1999-12-31", "2024-02-29"])
    def test_year_month_is_first_seven_characters(self, value):
        assert year_month_of(value) == value[:7]

    def test_generated_id_is_eight_characters(self):
        ids = {generate_entry_id() for _ in range(50)}
        assert all(len(entry_id) == 8 for entry_id in ids)
        assert len(ids) > 1


class TestClientSettings:
    """Tests for the client-local settings."""

    def test_split_items_drops_empty_segments(self):
        assert split_items("Food, Transport,,  ") == ["Food", "Transport"]

    def test_split_items_empty(self):
        assert split_items("  , ,") == []

    def test_defaults_are_not_connected(self):
        settings = ClientSettings()
        assert settings.is_connected is False
        assert settings.outgo_category_list

    def test_category_lists(self):
        settings = ClientSettings(income_categories="Salary, Bonus", tags="a,b")
        assert settings.income_category_list == ["Salary", "Bonus"]
        assert settings.tag_list == ["a", "b"]


class TestApiRequest:
    """Tests for the wire envelope."""

    def test_payload_uses_wire_names(self):
        request = ApiRequest(auth_token="t", method=Method.GET, params={"yearMonth": "2024-05"})
        assert request.to_payload() == {
            "authToken": "t",
            "method": "GET",
            "params": {"yearMonth": "2024-05"},
        }

    def test_parse_from_wire(self):
        request = ApiRequest.model_validate({"authToken": "t", "method": "DELETE"})
        assert request.method is Method.DELETE
        assert request.params == {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
