"""Search API schemas (camelCase JSON).

Built from the application DTOs via the from_* classmethods; the endpoints
never hand ORM rows to these models.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.application.dtos.search import (
    EnrichedEvent,
    Pagination,
    PriceSummary,
    SearchMeta,
    SearchResult,
    SuggestionResult,
    VenueSummary,
)
from app.shared.utils.datetime import utc_now


class CamelModel(BaseModel):
    """Serialize with camelCase aliases; accept either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VenueResponse(CamelModel):
    name: str | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None

    @classmethod
    def from_summary(cls, venue: VenueSummary) -> "VenueResponse":
        return cls(
            name=venue.name,
            address=venue.address,
            city=venue.city,
            country=venue.country,
        )


class PriceResponse(CamelModel):
    """One pricing entry; `type` is the price category (e.g. "full pass")."""

    price: float | None = None
    currency: str | None = None
    type: str | None = None

    @classmethod
    def from_summary(cls, price: PriceSummary) -> "PriceResponse":
        return cls(
            price=float(price.amount) if price.amount is not None else None,
            currency=price.currency,
            type=price.category,
        )


class EventResponse(CamelModel):
    """Single ranked event with at most one venue and one price."""

    id: str
    name: str
    description: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    country: str | None = None
    city: str | None = None
    website: str | None = None
    style: str | None = None
    image_url: str | None = None
    ai_quality_score: float | None = None
    ai_completeness_score: float | None = None
    extraction_method: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    search_rank: float | None = Field(
        None, description="Relevance score; null when served by the fallback engine"
    )
    venue: VenueResponse | None = None
    pricing: list[PriceResponse] = Field(default_factory=list)

    @classmethod
    def from_enriched(cls, item: EnrichedEvent) -> "EventResponse":
        event = item.event
        return cls(
            id=str(event.id),
            name=event.name,
            description=event.description,
            start_date=event.from_date,
            end_date=event.to_date,
            country=event.country,
            city=event.city,
            website=event.website,
            style=event.style,
            image_url=item.image_url,
            ai_quality_score=event.ai_quality_score,
            ai_completeness_score=event.ai_completeness_score,
            extraction_method=event.extraction_method,
            created_at=event.created_at,
            updated_at=event.updated_at,
            search_rank=event.search_rank,
            venue=VenueResponse.from_summary(item.venue) if item.venue else None,
            pricing=[PriceResponse.from_summary(item.pricing)] if item.pricing else [],
        )


class PaginationResponse(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_pagination(cls, pagination: Pagination) -> "PaginationResponse":
        return cls(
            page=pagination.page,
            limit=pagination.limit,
            total=pagination.total,
            total_pages=pagination.total_pages,
            has_next=pagination.has_next,
            has_prev=pagination.has_prev,
        )


class SortingResponse(CamelModel):
    sort_by: str
    sort_order: str


class LocationFilterResponse(CamelModel):
    city: str
    country: str


class SearchMetaResponse(CamelModel):
    query: str
    sorting: SortingResponse
    filters: LocationFilterResponse
    total_matches: int
    search_type: str = Field(..., description="optimized | fallback")

    @classmethod
    def from_meta(cls, meta: SearchMeta) -> "SearchMetaResponse":
        return cls(
            query=meta.query,
            sorting=SortingResponse(
                sort_by=meta.sort_by.value, sort_order=meta.sort_order.value
            ),
            filters=LocationFilterResponse(city=meta.city, country=meta.country),
            total_matches=meta.total_matches,
            search_type=meta.search_type.value,
        )


class SearchEventsData(CamelModel):
    events: list[EventResponse]
    pagination: PaginationResponse
    search_meta: SearchMetaResponse


class SearchEventsResponse(CamelModel):
    """Envelope for GET /search/events."""

    success: bool = True
    data: SearchEventsData
    timestamp: datetime = Field(default_factory=utc_now)

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchEventsResponse":
        return cls(
            data=SearchEventsData(
                events=[EventResponse.from_enriched(e) for e in result.events],
                pagination=PaginationResponse.from_pagination(result.pagination),
                search_meta=SearchMetaResponse.from_meta(result.search_meta),
            )
        )


class SuggestionsData(CamelModel):
    events: list[str]
    teachers: list[str]
    musicians: list[str]
    locations: list[str]


class SuggestionsResponse(CamelModel):
    """Envelope for GET /search/suggestions."""

    success: bool = True
    data: SuggestionsData
    timestamp: datetime = Field(default_factory=utc_now)

    @classmethod
    def from_result(cls, result: SuggestionResult) -> "SuggestionsResponse":
        return cls(
            data=SuggestionsData(
                events=result.events,
                teachers=result.teachers,
                musicians=result.musicians,
                locations=result.locations,
            )
        )


class ErrorResponse(CamelModel):
    """Error envelope rendered by app.core.exception_handlers."""

    success: bool = False
    error: str
    code: str | None = None
    timestamp: datetime
