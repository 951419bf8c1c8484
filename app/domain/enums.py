"""Domain enumerations for the festival search service.

Enums represent fixed sets of request and result values (sort modes,
engine identity, suggestion categories).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings.

        Returns:
            List of enum value strings (e.g. for validation or error messages).
        """
        return [member.value for member in cls]


class SortBy(_ValuesMixin, str, Enum):
    """Result ordering requested by the client."""

    RELEVANCE = "relevance"
    DATE = "date"
    DISTANCE = "distance"
    # Placeholder: ordered by event name until popularity signals exist.
    POPULARITY = "popularity"
    PRICE = "price"


class SortOrder(_ValuesMixin, str, Enum):
    """Direction for field-ordered sorts."""

    ASC = "asc"
    DESC = "desc"


class SearchType(_ValuesMixin, str, Enum):
    """Which engine produced a result set. Echoed to clients in searchMeta."""

    OPTIMIZED = "optimized"
    FALLBACK = "fallback"


class SuggestionType(_ValuesMixin, str, Enum):
    """Suggestion categories for the autocomplete endpoint."""

    ALL = "all"
    EVENTS = "events"
    TEACHERS = "teachers"
    MUSICIANS = "musicians"
    LOCATIONS = "locations"
