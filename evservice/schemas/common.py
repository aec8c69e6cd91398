"""
Pydantic schemas for the API response envelope.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class Meta(BaseModel):
    """Pagination metadata returned by list endpoints."""
    total: Optional[int] = None
    page: Optional[int] = None
    limit: Optional[int] = None
    total_pages: Optional[int] = Field(default=None, alias="totalPages")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ApiResponse(BaseModel):
    """Generic `{success, message, data, meta}` envelope."""
    success: bool = True
    message: str = ""
    data: Any = None
    meta: Optional[Meta] = None

    model_config = ConfigDict(extra="allow")

    def unwrap(self, key: str, default: Any = None) -> Any:
        """
        Look up `key` under `data`, falling back to the top level.

        Some endpoints answer `{data: {user: ...}}`, others `{user: ...}`.
        """
        if isinstance(self.data, dict) and self.data.get(key) is not None:
            return self.data[key]
        extra = self.model_extra or {}
        if extra.get(key) is not None:
            return extra[key]
        return default

    def items(self) -> list:
        """The list carried by the envelope, if any."""
        return extract_items(self.model_dump(exclude={"meta"}))


def extract_items(payload: Any) -> list:
    """
    Pull a list out of a response body.

    Accepts `data.data.data`, `data.data`, `data` or a bare list; anything
    else yields an empty list.
    """
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        return []
    data = payload.get("data")
    if isinstance(data, dict) and isinstance(data.get("data"), list):
        return data["data"]
    if isinstance(data, list):
        return data
    return []
