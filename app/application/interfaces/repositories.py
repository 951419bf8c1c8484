"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.search import EnginePage, RelatedRecords, SearchFilters
    from app.domain.enums import SearchType


class ISearchEngine(Protocol):
    """One search strategy: count matches and fetch the requested page."""

    search_type: SearchType

    async def execute(self, filters: SearchFilters) -> EnginePage:
        """Return (rows, total). Rows are empty when total is 0."""


class IEventRelationsRepository(Protocol):
    """Protocol for batched venue/price lookups used by result enrichment."""

    async def first_related(self, event_ids: list[int]) -> dict[int, RelatedRecords]:
        """Return the first venue and first price per event id. Missing ids have no entry."""


class ISuggestionRepository(Protocol):
    """Protocol for autocomplete lookups."""

    async def event_locations(
        self, query: str, limit: int
    ) -> list[tuple[str, str | None, str | None]]:
        """Return (name, city, country) of events matching name/city/country, newest first."""

    async def teacher_names(self, query: str, limit: int) -> list[str]:
        """Return teacher names containing query, newest first."""

    async def musician_names(self, query: str, limit: int) -> list[str]:
        """Return musician names containing query, newest first."""
