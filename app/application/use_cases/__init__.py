"""Application use cases: one entry point per workflow."""

from app.application.use_cases.search import EventSearchService
from app.application.use_cases.suggestions import SuggestionService

__all__ = [
    "EventSearchService",
    "SuggestionService",
]
