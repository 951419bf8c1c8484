"""Application DTOs (no ORM dependency)."""

from app.application.dtos.search import (
    EnginePage,
    EnrichedEvent,
    Pagination,
    PriceSummary,
    RankedEvent,
    RelatedRecords,
    SearchFilters,
    SearchMeta,
    SearchResult,
    SuggestionResult,
    VenueRecord,
    VenueSummary,
)

__all__ = [
    "EnginePage",
    "EnrichedEvent",
    "Pagination",
    "PriceSummary",
    "RankedEvent",
    "RelatedRecords",
    "SearchFilters",
    "SearchMeta",
    "SearchResult",
    "SuggestionResult",
    "VenueRecord",
    "VenueSummary",
]
