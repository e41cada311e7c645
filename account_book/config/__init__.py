"""Configuration package."""

from account_book.config.settings import (
    ApiSettings,
    ClientAppSettings,
    GoogleSheetsSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "ClientAppSettings",
    "GoogleSheetsSettings",
    "Settings",
    "get_settings",
]
