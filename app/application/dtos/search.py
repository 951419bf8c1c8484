"""DTOs for event search (no dependency on ORM).

Everything here is built per request and discarded once the response is
serialized.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from app.domain.enums import SearchType, SortBy, SortOrder


@dataclass(frozen=True)
class SearchFilters:
    """Canonical search request. Built only by normalize_search_params."""

    page: int = 1
    limit: int = 20
    query: str = ""
    city: str = ""
    country: str = ""
    teacher_names: tuple[str, ...] = ()
    musician_names: tuple[str, ...] = ()
    sort_by: SortBy = SortBy.RELEVANCE
    sort_order: SortOrder = SortOrder.DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def has_named_filters(self) -> bool:
        return bool(self.teacher_names or self.musician_names)

    @property
    def has_text_query(self) -> bool:
        return bool(self.query)


@dataclass(frozen=True)
class RankedEvent:
    """Event row plus its computed rank (None when produced by the fallback engine)."""

    id: int
    name: str
    description: str | None
    from_date: datetime | None
    to_date: datetime | None
    city: str | None
    country: str | None
    website: str | None
    style: str | None
    image_url: str | None
    ai_quality_score: float | None
    ai_completeness_score: float | None
    extraction_method: str | None
    created_at: datetime | None
    updated_at: datetime | None
    search_rank: float | None = None


@dataclass(frozen=True)
class EnginePage:
    """One engine execution: the requested page of rows and the total match count."""

    rows: list[RankedEvent]
    total: int


@dataclass(frozen=True)
class VenueSummary:
    """First venue of an event. city/country are taken from the event itself."""

    name: str | None
    address: str | None
    city: str | None
    country: str | None


@dataclass(frozen=True)
class PriceSummary:
    """First price record of an event."""

    amount: Decimal | None
    currency: str | None
    category: str | None


@dataclass(frozen=True)
class VenueRecord:
    """Venue row as stored (no location columns of its own)."""

    name: str | None
    address: str | None


@dataclass(frozen=True)
class RelatedRecords:
    """First venue and first price row for one event, as read from storage."""

    venue: VenueRecord | None = None
    price: PriceSummary | None = None


@dataclass(frozen=True)
class EnrichedEvent:
    """Ranked event with at most one venue and at most one price attached."""

    event: RankedEvent
    image_url: str | None
    venue: VenueSummary | None
    pricing: PriceSummary | None


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


@dataclass(frozen=True)
class SearchMeta:
    """Echo of what was searched and which engine answered."""

    query: str
    sort_by: SortBy
    sort_order: SortOrder
    city: str
    country: str
    total_matches: int
    search_type: SearchType


@dataclass(frozen=True)
class SearchResult:
    events: list[EnrichedEvent]
    pagination: Pagination
    search_meta: SearchMeta


@dataclass(frozen=True)
class SuggestionResult:
    """Autocomplete suggestions grouped by category."""

    events: list[str] = field(default_factory=list)
    teachers: list[str] = field(default_factory=list)
    musicians: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
