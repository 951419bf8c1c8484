"""Autocomplete suggestions use case (events, teachers, musicians, locations).

Suggestions are best-effort: a connection-class store failure yields an
empty result instead of an error, and teacher/musician lookups degrade
independently of the event lookup.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from app.application.dtos.search import SuggestionResult
from app.application.services.error_classifier import classify_store_error
from app.domain.enums import SuggestionType
from app.domain.exceptions import NormalizationError, StoreUnavailableError

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ISuggestionRepository

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
MAX_QUERY_LENGTH = 100


class SuggestionService:
    """Build grouped suggestions for a partial query."""

    def __init__(self, suggestion_repo: "ISuggestionRepository") -> None:
        self.suggestion_repo = suggestion_repo

    async def suggest(
        self,
        query: str,
        limit: int,
        suggestion_type: SuggestionType = SuggestionType.ALL,
    ) -> SuggestionResult:
        """Return suggestions for query, restricted to suggestion_type unless ALL.

        Raises:
            NormalizationError: query is empty or longer than MAX_QUERY_LENGTH.
            StoreTimeoutError: Event lookup timed out.
            SearchFailedError: Event lookup failed for a non-connection reason.
        """
        query = query.strip()
        if not query or len(query) > MAX_QUERY_LENGTH:
            raise NormalizationError(
                f"query must be between 1 and {MAX_QUERY_LENGTH} characters", field="query"
            )
        if len(query) < MIN_QUERY_LENGTH:
            return SuggestionResult()

        try:
            event_rows = await self.suggestion_repo.event_locations(query, limit * 2)
        except Exception as e:
            classified = classify_store_error(e)
            if isinstance(classified, StoreUnavailableError):
                logger.warning("Suggestions unavailable, returning empty result: %s", e)
                return SuggestionResult()
            logger.exception("Event suggestions failed")
            raise classified from e

        people_limit = math.ceil(limit / 2)
        teachers = await self._names_or_empty(
            self.suggestion_repo.teacher_names, query, people_limit, "Teachers"
        )
        musicians = await self._names_or_empty(
            self.suggestion_repo.musician_names, query, people_limit, "Musicians"
        )

        result = SuggestionResult(
            events=[name for name, _, _ in event_rows][:limit],
            teachers=teachers,
            musicians=musicians,
            locations=unique_locations(event_rows, limit),
        )
        return filter_by_type(result, suggestion_type)

    async def _names_or_empty(self, lookup, query: str, limit: int, label: str) -> list[str]:
        try:
            return await lookup(query, limit)
        except Exception as e:
            logger.warning("%s suggestions failed: %s", label, e)
            return []


def unique_locations(
    event_rows: list[tuple[str, str | None, str | None]], limit: int
) -> list[str]:
    """Cities, then countries, then "city, country" pairs; first occurrence wins.

    Pairs are only built when both parts are known.
    """
    candidates: list[str] = []
    candidates.extend(city for _, city, _ in event_rows if city)
    candidates.extend(country for _, _, country in event_rows if country)
    candidates.extend(
        f"{city}, {country}" for _, city, country in event_rows if city and country
    )
    return list(dict.fromkeys(candidates))[:limit]


def filter_by_type(result: SuggestionResult, suggestion_type: SuggestionType) -> SuggestionResult:
    """Blank every category except suggestion_type (ALL keeps everything)."""
    if suggestion_type is SuggestionType.ALL:
        return result
    return SuggestionResult(
        events=result.events if suggestion_type is SuggestionType.EVENTS else [],
        teachers=result.teachers if suggestion_type is SuggestionType.TEACHERS else [],
        musicians=result.musicians if suggestion_type is SuggestionType.MUSICIANS else [],
        locations=result.locations if suggestion_type is SuggestionType.LOCATIONS else [],
    )
