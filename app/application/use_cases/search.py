"""Event search use case: optimized engine first, fallback engine on failure.

The optimized engine is an optimization layer only; the fallback engine is
the availability floor. Exactly one fall-through per request, no retries.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.search import EnginePage, SearchFilters, SearchResult
from app.application.services.error_classifier import classify_store_error
from app.application.services.response_assembler import assemble, empty_result
from app.domain.enums import SearchType, SortBy
from app.domain.exceptions import PrimaryEngineError
from app.shared.telemetry.tracing import add_span_attributes

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ISearchEngine
    from app.application.services.result_enricher import ResultEnricher

logger = logging.getLogger(__name__)


class EventSearchService:
    """Run a normalized search through the engine pair, then enrich and assemble."""

    def __init__(
        self,
        primary: "ISearchEngine",
        fallback: "ISearchEngine",
        enricher: "ResultEnricher",
    ) -> None:
        self.primary = primary
        self.fallback = fallback
        self.enricher = enricher

    async def search(self, filters: SearchFilters) -> SearchResult:
        """Return a paginated, enriched result.

        Raises:
            StoreUnavailableError: Connection-class failure on the fallback path.
            StoreTimeoutError: Query timeout on the fallback path.
            SearchFailedError: Any other failure.
        """
        if filters.sort_by is SortBy.POPULARITY:
            logger.debug("sortBy=popularity is not implemented; ordering by event name")
        elif filters.sort_by in (SortBy.DISTANCE, SortBy.PRICE):
            logger.debug(
                "sortBy=%s is not implemented; ordering by start date", filters.sort_by.value
            )
        try:
            page, search_type = await self._execute(filters)
            if page.total == 0:
                add_span_attributes(**{"search.type": search_type.value, "search.total": 0})
                return empty_result(filters, search_type)
            events = await self.enricher.enrich(page.rows)
        except Exception as e:
            classified = classify_store_error(e)
            logger.exception(
                "Event search failed (%s): %s", classified.error_code, type(e).__name__
            )
            raise classified from e
        add_span_attributes(
            **{"search.type": search_type.value, "search.total": page.total}
        )
        return assemble(filters, events, page.total, search_type)

    async def _execute(self, filters: SearchFilters) -> tuple[EnginePage, SearchType]:
        try:
            return await self.primary.execute(filters), self.primary.search_type
        except Exception as e:
            cause = e.cause if isinstance(e, PrimaryEngineError) else e
            logger.warning(
                "Optimized search failed, falling back to standard search: %s: %s",
                type(cause).__name__,
                cause,
            )
        return await self.fallback.execute(filters), self.fallback.search_type
