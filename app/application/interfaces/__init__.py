"""Application interfaces (ports) implemented by infrastructure."""

from app.application.interfaces.repositories import (
    IEventRelationsRepository,
    ISearchEngine,
    ISuggestionRepository,
)

__all__ = [
    "IEventRelationsRepository",
    "ISearchEngine",
    "ISuggestionRepository",
]
