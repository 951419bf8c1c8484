"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the request-scoped DB session and the search
use cases. Routes depend only on these providers, never on infra directly.
Both engines share the request session; the optimized engine rolls it back
after a failure so the fallback can reuse it.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.result_enricher import ResultEnricher
from app.application.use_cases.search import EventSearchService
from app.application.use_cases.suggestions import SuggestionService
from app.core.config import get_settings
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import (
    EventRelationsRepository,
    FallbackSearchEngine,
    OptimizedSearchEngine,
    SuggestionRepository,
)


async def get_optimized_engine(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OptimizedSearchEngine:
    """Primary engine: relevance-scored SQL."""
    return OptimizedSearchEngine(db)


async def get_fallback_engine(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> FallbackSearchEngine:
    """Fallback engine: plain ORM queries, no scoring."""
    return FallbackSearchEngine(db)


async def get_result_enricher(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ResultEnricher:
    """Venue/price enrichment with asset URL rewriting from settings."""
    settings = get_settings()
    return ResultEnricher(
        EventRelationsRepository(db),
        asset_base_url=settings.asset_base_url,
        upload_prefix=settings.asset_upload_prefix,
    )


async def get_event_search_service(
    primary: Annotated[OptimizedSearchEngine, Depends(get_optimized_engine)],
    fallback: Annotated[FallbackSearchEngine, Depends(get_fallback_engine)],
    enricher: Annotated[ResultEnricher, Depends(get_result_enricher)],
) -> EventSearchService:
    return EventSearchService(primary=primary, fallback=fallback, enricher=enricher)


async def get_suggestion_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SuggestionService:
    return SuggestionService(SuggestionRepository(db))
