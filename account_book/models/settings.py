"""
Client Settings Model

The user-editable settings of the form UI. They live only on the client:
the server never sees them, except for the auth token that travels with
every request.
"""

from pydantic import BaseModel, Field


def split_items(text: str) -> list[str]:
    """
    Split a comma-separated list, trimming items and dropping empty ones.

    "Food, Transport,,  " -> ["Food", "Transport"]
    """
    return [item.strip() for item in text.split(",") if item.strip()]


class ClientSettings(BaseModel):
    """Settings persisted in local client storage."""

    app_name: str = Field(
        default="Account Book",
        description="Display name shown in the UI"
    )
    api_url: str = Field(
        default="",
        description="URL of the Ledger API endpoint"
    )
    auth_token: str = Field(
        default="",
        description="Shared secret sent with every request"
    )
    income_categories: str = Field(
        default="Salary,Bonus,Other",
        description="Comma-separated income categories"
    )
    outgo_categories: str = Field(
        default="Food,Daily goods,Transport,Utilities,Other",
        description="Comma-separated outgo categories"
    )
    tags: str = Field(
        default="",
        description="Comma-separated tags"
    )

    @property
    def income_category_list(self) -> list[str]:
        return split_items(self.income_categories)

    @property
    def outgo_category_list(self) -> list[str]:
        return split_items(self.outgo_categories)

    @property
    def tag_list(self) -> list[str]:
        return split_items(self.tags)

    @property
    def is_connected(self) -> bool:
        """Whether enough is configured to talk to the API."""
        return bool(self.api_url and self.auth_token)
