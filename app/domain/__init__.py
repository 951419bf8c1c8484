"""Domain layer: enums, ranking ladder, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import SearchType, SortBy, SortOrder, SuggestionType
from app.domain.exceptions import (
    FestivalSearchException,
    NormalizationError,
    PrimaryEngineError,
    SearchFailedError,
    StoreTimeoutError,
    StoreUnavailableError,
)
from app.domain.ranking import NAMED_FILTER_SCORE, RELEVANCE_LADDER, RankTier

__all__ = [
    # Enums
    "SearchType",
    "SortBy",
    "SortOrder",
    "SuggestionType",
    # Exceptions
    "FestivalSearchException",
    "NormalizationError",
    "PrimaryEngineError",
    "SearchFailedError",
    "StoreTimeoutError",
    "StoreUnavailableError",
    # Ranking
    "NAMED_FILTER_SCORE",
    "RELEVANCE_LADDER",
    "RankTier",
]
