"""
Wire Models for the Ledger API

Every request is a single JSON body:

    {"authToken": "...", "method": "GET", "params": {...}}

The operation travels in `method`, not in the HTTP verb.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Method(str, Enum):
    """The closed set of ledger operations."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ApiRequest(BaseModel):
    """Request envelope sent by the client."""
    model_config = ConfigDict(populate_by_name=True)

    auth_token: str = Field(..., alias="authToken")
    method: Method
    params: dict[str, Any] = Field(default_factory=dict)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
