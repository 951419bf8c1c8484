"""Optimized event search engine: combined predicate plus a typed relevance CASE.

Count first; the page query (with the relevance score as search_rank) only
runs when something matched. Any failure is wrapped in PrimaryEngineError so
the caller can fall back to FallbackSearchEngine.
"""

from __future__ import annotations

import logging

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.search import EnginePage, RankedEvent, SearchFilters
from app.domain.enums import SearchType
from app.domain.exceptions import PrimaryEngineError
from app.domain.ranking import TEXT_SEARCH_FIELDS
from app.infrastructure.persistence.models import Event
from app.infrastructure.persistence.repositories.search_predicates import (
    SEARCH_RANK_LABEL,
    event_ordering,
    location_predicates,
    named_filter_predicate,
    relevance_expression,
    text_predicate,
)
from app.shared.telemetry.tracing import traced
from app.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


def to_ranked_event(event: Event, search_rank: float | None) -> RankedEvent:
    """Map an ORM row to the RankedEvent DTO."""
    return RankedEvent(
        id=event.id,
        name=event.name,
        description=event.description,
        from_date=ensure_utc(event.from_date),
        to_date=ensure_utc(event.to_date),
        city=event.city,
        country=event.country,
        website=event.website,
        style=event.style,
        image_url=event.image_url,
        ai_quality_score=event.ai_quality_score,
        ai_completeness_score=event.ai_completeness_score,
        extraction_method=event.extraction_method,
        created_at=ensure_utc(event.created_at),
        updated_at=ensure_utc(event.updated_at),
        search_rank=float(search_rank) if search_rank is not None else None,
    )


def optimized_predicates(filters: SearchFilters) -> list[ColumnElement[bool]]:
    """Named filters if any, else the free-text predicate; narrowed by city/country."""
    clauses: list[ColumnElement[bool]] = []
    if filters.has_named_filters:
        clauses.append(named_filter_predicate(filters))
    elif filters.has_text_query:
        clauses.append(text_predicate(filters.query, TEXT_SEARCH_FIELDS))
    clauses.extend(location_predicates(filters))
    return clauses


class OptimizedSearchEngine:
    """Primary search strategy (ISearchEngine)."""

    search_type = SearchType.OPTIMIZED

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @traced("search.optimized.execute", search_engine="optimized")
    async def execute(self, filters: SearchFilters) -> EnginePage:
        """Count and fetch one page. Raises PrimaryEngineError on any failure."""
        try:
            return await self._execute(filters)
        except Exception as e:
            await self._reset_session()
            raise PrimaryEngineError(e) from e

    async def _execute(self, filters: SearchFilters) -> EnginePage:
        clauses = optimized_predicates(filters)
        count_stmt = select(func.count()).select_from(Event).where(*clauses)
        total = int(await self.db.scalar(count_stmt) or 0)
        if total == 0:
            return EnginePage(rows=[], total=0)

        rank = relevance_expression(filters).label(SEARCH_RANK_LABEL)
        page_stmt = (
            select(Event, rank)
            .where(*clauses)
            .order_by(*event_ordering(filters, rank))
            .limit(filters.limit)
            .offset(filters.offset)
        )
        result = await self.db.execute(page_stmt)
        rows = [to_ranked_event(event, score) for event, score in result.all()]
        logger.debug("Optimized search found %d events (total: %d)", len(rows), total)
        return EnginePage(rows=rows, total=total)

    async def _reset_session(self) -> None:
        """Roll back so the fallback engine can reuse the session after a failed statement."""
        try:
            await self.db.rollback()
        except Exception:
            logger.warning("Rollback after optimized search failure did not complete", exc_info=True)
