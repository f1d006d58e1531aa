"""
Schemas - Request/Response Models

Route-level request and response envelopes.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


DEFAULT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Content-Type": "application/json",
}


class HandlerRequest(BaseModel):
    """Incoming route request."""
    params: Dict[str, str] = {}
    notion_token: Optional[str] = Field(None, alias="notionToken")

    model_config = {"populate_by_name": True}


class RouteResponse(BaseModel):
    """Outgoing route response."""
    body: Any
    status: int = 200
    headers: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_HEADERS))

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def create_response(
    body: Any,
    headers: Optional[Dict[str, str]] = None,
    status: int = 200,
) -> RouteResponse:
    """Wrap a JSON body with the default CORS headers."""
    return RouteResponse(
        body=body,
        status=status,
        headers={**DEFAULT_HEADERS, **(headers or {})},
    )
