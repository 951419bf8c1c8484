"""Search API: ranked festival event search and autocomplete suggestions."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_event_search_service, get_suggestion_service
from app.application.services.filter_normalizer import (
    normalize_search_params,
    parse_int,
    parse_suggestion_type,
)
from app.application.use_cases.search import EventSearchService
from app.application.use_cases.suggestions import SuggestionService
from app.core.config import get_settings
from app.core.limiter import limit_search
from app.schemas.search import ErrorResponse, SearchEventsResponse, SuggestionsResponse

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request parameter"},
    408: {"model": ErrorResponse, "description": "Query timed out"},
    503: {"model": ErrorResponse, "description": "Database temporarily unavailable"},
    500: {"model": ErrorResponse, "description": "Search failed"},
}


@router.get(
    "/events",
    response_model=SearchEventsResponse,
    responses=_ERROR_RESPONSES,
)
@limit_search
async def search_events(
    request: Request,
    search_svc: Annotated[EventSearchService, Depends(get_event_search_service)],
    page: str | None = Query(None, description="Page number, 1-based"),
    limit: str | None = Query(None, description="Page size, clamped to 1..100"),
    query: str | None = Query(None, description="Free-text query"),
    city: str | None = Query(None),
    country: str | None = Query(None),
    teachers: str | None = Query(None, description="Comma-separated teacher names"),
    musicians: str | None = Query(None, description="Comma-separated musician names"),
    sort_by: str | None = Query(
        None, alias="sortBy", description="relevance | date | distance | popularity | price"
    ),
    sort_order: str | None = Query(None, alias="sortOrder", description="asc | desc"),
):
    """Search events ordered by relevance (or the requested sort).

    Query parameters are read leniently: malformed numbers fall back to
    defaults; only unknown sortBy/sortOrder values are rejected.
    """
    settings = get_settings()
    raw = {
        "page": page,
        "limit": limit,
        "query": query,
        "city": city,
        "country": country,
        "teachers": teachers,
        "musicians": musicians,
        "sortBy": sort_by,
        "sortOrder": sort_order,
    }
    filters = normalize_search_params(
        raw,
        default_limit=settings.search_default_limit,
        max_limit=settings.search_max_limit,
    )
    result = await search_svc.search(filters)
    return SearchEventsResponse.from_result(result)


@router.get(
    "/suggestions",
    response_model=SuggestionsResponse,
    responses={400: _ERROR_RESPONSES[400], 408: _ERROR_RESPONSES[408], 500: _ERROR_RESPONSES[500]},
)
@limit_search
async def search_suggestions(
    request: Request,
    suggestion_svc: Annotated[SuggestionService, Depends(get_suggestion_service)],
    query: str = Query("", description="Partial text, 2..100 characters"),
    limit: str | None = Query(None, description="Suggestions per category, 1..20"),
    suggestion_type: str | None = Query(
        None, alias="type", description="all | events | teachers | musicians | locations"
    ),
):
    """Autocomplete suggestions grouped into events, teachers, musicians and locations."""
    settings = get_settings()
    parsed = parse_int(limit)
    size = settings.suggestions_default_limit if parsed is None else parsed
    size = min(max(size, 1), settings.suggestions_max_limit)
    result = await suggestion_svc.suggest(query, size, parse_suggestion_type(suggestion_type))
    return SuggestionsResponse.from_result(result)
