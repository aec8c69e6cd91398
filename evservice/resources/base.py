"""
Shared plumbing for endpoint groups.
"""
from typing import Any

from pydantic import BaseModel

from evservice.client import ApiClient


def payload(obj: Any) -> Any:
    """Request body for a schema instance or a plain dict."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True, exclude_none=True, mode="json")
    return obj


class Resource:
    """One group of related endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client
