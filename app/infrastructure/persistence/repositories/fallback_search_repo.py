"""Fallback event search engine: plain ORM entity queries, no relevance scoring.

Only substring matching on the event's own columns and date/name ordering.
Named teacher/musician filters are not supported here and are ignored.
Store errors propagate to the caller.
"""

from __future__ import annotations

import logging

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.search import EnginePage, SearchFilters
from app.domain.enums import SearchType
from app.domain.ranking import FALLBACK_TEXT_FIELDS
from app.infrastructure.persistence.models import Event
from app.infrastructure.persistence.repositories.search_predicates import (
    event_ordering,
    location_predicates,
    text_predicate,
)
from app.infrastructure.persistence.repositories.search_repo import to_ranked_event
from app.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


def fallback_predicates(filters: SearchFilters) -> list[ColumnElement[bool]]:
    clauses: list[ColumnElement[bool]] = []
    if filters.has_text_query:
        clauses.append(text_predicate(filters.query, FALLBACK_TEXT_FIELDS))
    clauses.extend(location_predicates(filters))
    return clauses


class FallbackSearchEngine:
    """Availability-floor search strategy (ISearchEngine)."""

    search_type = SearchType.FALLBACK

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @traced("search.fallback.execute", search_engine="fallback")
    async def execute(self, filters: SearchFilters) -> EnginePage:
        """Count and fetch one page ordered by date (or name for popularity)."""
        if filters.has_named_filters:
            logger.info("Fallback search ignores teacher/musician filters")
        clauses = fallback_predicates(filters)
        total = int(
            await self.db.scalar(select(func.count(Event.id)).where(*clauses)) or 0
        )
        if total == 0:
            return EnginePage(rows=[], total=0)

        events = await self.db.scalars(
            select(Event)
            .where(*clauses)
            .order_by(*event_ordering(filters))
            .limit(filters.limit)
            .offset(filters.offset)
        )
        rows = [to_ranked_event(event, None) for event in events.all()]
        logger.debug("Fallback search found %d events (total: %d)", len(rows), total)
        return EnginePage(rows=rows, total=total)
