"""Build the paginated SearchResult returned by the search use case."""

from __future__ import annotations

import math

from app.application.dtos.search import (
    EnrichedEvent,
    Pagination,
    SearchFilters,
    SearchMeta,
    SearchResult,
)
from app.domain.enums import SearchType


def build_pagination(page: int, limit: int, total: int) -> Pagination:
    """Pagination block: totalPages = ceil(total / limit); hasNext iff page < totalPages."""
    total_pages = math.ceil(total / limit) if total > 0 else 0
    return Pagination(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )


def _search_meta(filters: SearchFilters, total: int, search_type: SearchType) -> SearchMeta:
    return SearchMeta(
        query=filters.query,
        sort_by=filters.sort_by,
        sort_order=filters.sort_order,
        city=filters.city,
        country=filters.country,
        total_matches=total,
        search_type=search_type,
    )


def assemble(
    filters: SearchFilters,
    events: list[EnrichedEvent],
    total: int,
    search_type: SearchType,
) -> SearchResult:
    """Wrap enriched events with pagination and echoed search metadata."""
    return SearchResult(
        events=events,
        pagination=build_pagination(filters.page, filters.limit, total),
        search_meta=_search_meta(filters, total, search_type),
    )


def empty_result(filters: SearchFilters, search_type: SearchType) -> SearchResult:
    """Zero-match result: no events, totalPages 0, no next/prev.

    hasPrev is reported False even on page > 1 since there is nothing to go
    back to.
    """
    return SearchResult(
        events=[],
        pagination=Pagination(
            page=filters.page,
            limit=filters.limit,
            total=0,
            total_pages=0,
            has_next=False,
            has_prev=False,
        ),
        search_meta=_search_meta(filters, 0, search_type),
    )
