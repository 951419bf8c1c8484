"""Relevance ladder for free-text event search.

Tiers are evaluated top to bottom and the first matching tier sets the
score, so a name prefix match (80) wins over an exact teacher match (90).
Storage adapters render the ladder; nothing here touches SQL.
"""

from dataclasses import dataclass
from enum import Enum


class MatchField(str, Enum):
    """Searchable attribute of an event or of its related people."""

    NAME = "name"
    DESCRIPTION = "description"
    CITY = "city"
    COUNTRY = "country"
    STYLE = "style"
    TEACHER_NAME = "teacher_name"
    MUSICIAN_NAME = "musician_name"


class MatchKind(str, Enum):
    """How the query is compared with the field (always case-insensitive)."""

    EQUALS = "equals"
    STARTS_WITH = "starts_with"
    CONTAINS = "contains"


@dataclass(frozen=True)
class RankTier:
    """One rung of the ladder."""

    field: MatchField
    kind: MatchKind
    score: float


RELEVANCE_LADDER: tuple[RankTier, ...] = (
    RankTier(MatchField.NAME, MatchKind.EQUALS, 100.0),
    RankTier(MatchField.NAME, MatchKind.STARTS_WITH, 80.0),
    RankTier(MatchField.TEACHER_NAME, MatchKind.EQUALS, 90.0),
    RankTier(MatchField.TEACHER_NAME, MatchKind.CONTAINS, 70.0),
    RankTier(MatchField.MUSICIAN_NAME, MatchKind.EQUALS, 85.0),
    RankTier(MatchField.MUSICIAN_NAME, MatchKind.CONTAINS, 65.0),
    RankTier(MatchField.NAME, MatchKind.CONTAINS, 60.0),
    RankTier(MatchField.DESCRIPTION, MatchKind.CONTAINS, 40.0),
    RankTier(MatchField.CITY, MatchKind.CONTAINS, 30.0),
    RankTier(MatchField.STYLE, MatchKind.CONTAINS, 25.0),
    RankTier(MatchField.COUNTRY, MatchKind.CONTAINS, 20.0),
)

NO_MATCH_SCORE = 0.0

# Flat score for every event matched through explicit teacher/musician filters.
NAMED_FILTER_SCORE = 90.0

# Fields covered by the free-text predicate of the optimized engine.
TEXT_SEARCH_FIELDS: tuple[MatchField, ...] = (
    MatchField.NAME,
    MatchField.DESCRIPTION,
    MatchField.CITY,
    MatchField.COUNTRY,
    MatchField.STYLE,
    MatchField.TEACHER_NAME,
    MatchField.MUSICIAN_NAME,
)

# The fallback engine only sees the event's own columns.
FALLBACK_TEXT_FIELDS: tuple[MatchField, ...] = (
    MatchField.NAME,
    MatchField.DESCRIPTION,
    MatchField.CITY,
    MatchField.COUNTRY,
    MatchField.STYLE,
)
