"""Pydantic response schemas for the API."""

from app.schemas.health import HealthResponse
from app.schemas.search import (
    ErrorResponse,
    EventResponse,
    SearchEventsResponse,
    SuggestionsResponse,
)

__all__ = [
    "ErrorResponse",
    "EventResponse",
    "HealthResponse",
    "SearchEventsResponse",
    "SuggestionsResponse",
]
