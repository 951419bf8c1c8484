"""Persistence repositories: search engines and read-side lookups."""

from app.infrastructure.persistence.repositories.event_relations_repo import (
    EventRelationsRepository,
)
from app.infrastructure.persistence.repositories.fallback_search_repo import (
    FallbackSearchEngine,
)
from app.infrastructure.persistence.repositories.search_repo import (
    OptimizedSearchEngine,
)
from app.infrastructure.persistence.repositories.suggestion_repo import (
    SuggestionRepository,
)

__all__ = [
    "EventRelationsRepository",
    "FallbackSearchEngine",
    "OptimizedSearchEngine",
    "SuggestionRepository",
]
