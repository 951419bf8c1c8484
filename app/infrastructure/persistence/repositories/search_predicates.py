"""SQLAlchemy expressions shared by the search engines.

User text only ever enters statements as bound parameters; LIKE wildcards in
it are escaped (autoescape) so "%" and "_" match literally. Case-insensitive
comparisons render as ILIKE on PostgreSQL and lower() LIKE lower() elsewhere.
"""

from __future__ import annotations

from sqlalchemy import ColumnElement, Float, case, func, literal, or_, select
from sqlalchemy.sql.elements import UnaryExpression

from app.application.dtos.search import SearchFilters
from app.domain.enums import SortBy, SortOrder
from app.domain.ranking import (
    NAMED_FILTER_SCORE,
    NO_MATCH_SCORE,
    RELEVANCE_LADDER,
    MatchField,
    MatchKind,
)
from app.infrastructure.persistence.models import (
    Event,
    Musician,
    Teacher,
    event_musicians,
    event_teachers,
)

SEARCH_RANK_LABEL = "search_rank"

_EVENT_COLUMNS = {
    MatchField.NAME: Event.name,
    MatchField.DESCRIPTION: Event.description,
    MatchField.CITY: Event.city,
    MatchField.COUNTRY: Event.country,
    MatchField.STYLE: Event.style,
}


def compare(column, kind: MatchKind, value: str) -> ColumnElement[bool]:
    """Case-insensitive comparison of column with a bound value."""
    if kind is MatchKind.EQUALS:
        return func.lower(column) == func.lower(value)
    if kind is MatchKind.STARTS_WITH:
        return column.istartswith(value, autoescape=True)
    return column.icontains(value, autoescape=True)


def teacher_exists(condition: ColumnElement[bool]) -> ColumnElement[bool]:
    """EXISTS an associated teacher satisfying condition (correlated to events)."""
    return (
        select(event_teachers.c.event_id)
        .join(Teacher, Teacher.id == event_teachers.c.teacher_id)
        .where(event_teachers.c.event_id == Event.id, condition)
        .correlate(Event)
        .exists()
    )


def musician_exists(condition: ColumnElement[bool]) -> ColumnElement[bool]:
    """EXISTS an associated musician satisfying condition (correlated to events)."""
    return (
        select(event_musicians.c.event_id)
        .join(Musician, Musician.id == event_musicians.c.musician_id)
        .where(event_musicians.c.event_id == Event.id, condition)
        .correlate(Event)
        .exists()
    )


def field_match(field: MatchField, kind: MatchKind, query: str) -> ColumnElement[bool]:
    """Predicate for one (field, kind) pair of the relevance ladder."""
    if field is MatchField.TEACHER_NAME:
        return teacher_exists(compare(Teacher.name, kind, query))
    if field is MatchField.MUSICIAN_NAME:
        return musician_exists(compare(Musician.name, kind, query))
    return compare(_EVENT_COLUMNS[field], kind, query)


def text_predicate(query: str, fields: tuple[MatchField, ...]) -> ColumnElement[bool]:
    """Substring OR-match of query across fields."""
    return or_(*(field_match(f, MatchKind.CONTAINS, query) for f in fields))


def named_filter_predicate(filters: SearchFilters) -> ColumnElement[bool]:
    """OR of exact (case-insensitive) teacher and musician name matches."""
    conditions = [
        teacher_exists(compare(Teacher.name, MatchKind.EQUALS, name))
        for name in filters.teacher_names
    ]
    conditions.extend(
        musician_exists(compare(Musician.name, MatchKind.EQUALS, name))
        for name in filters.musician_names
    )
    return or_(*conditions)


def location_predicates(filters: SearchFilters) -> list[ColumnElement[bool]]:
    """Independent city/country substring filters (AND-combined by the caller)."""
    clauses: list[ColumnElement[bool]] = []
    if filters.city:
        clauses.append(Event.city.icontains(filters.city, autoescape=True))
    if filters.country:
        clauses.append(Event.country.icontains(filters.country, autoescape=True))
    return clauses


def relevance_expression(filters: SearchFilters) -> ColumnElement[float]:
    """Score per row: flat score for named filters, the ladder for text, else 0."""
    if filters.has_named_filters:
        return literal(NAMED_FILTER_SCORE, Float)
    if not filters.has_text_query:
        return literal(NO_MATCH_SCORE, Float)
    whens = [
        (field_match(tier.field, tier.kind, filters.query), literal(tier.score, Float))
        for tier in RELEVANCE_LADDER
    ]
    return case(*whens, else_=literal(NO_MATCH_SCORE, Float))


def is_scored(filters: SearchFilters) -> bool:
    """Whether ranking by search_rank means anything for this request."""
    return filters.has_named_filters or filters.has_text_query


def event_ordering(
    filters: SearchFilters, rank: ColumnElement[float] | None = None
) -> list[UnaryExpression]:
    """ORDER BY clauses for the requested sort.

    relevance: rank desc then start date asc when a rank is given and the
    request is scored, otherwise start date asc. date: start date in
    sort_order. popularity: event name in sort_order (placeholder until
    popularity data exists). distance, price: start date asc (not supported).
    Event id is the final tie-break so pages are stable.
    """
    descending = filters.sort_order is SortOrder.DESC
    if filters.sort_by is SortBy.RELEVANCE and rank is not None and is_scored(filters):
        clauses = [rank.desc(), Event.from_date.asc()]
    elif filters.sort_by is SortBy.DATE:
        clauses = [Event.from_date.desc() if descending else Event.from_date.asc()]
    elif filters.sort_by is SortBy.POPULARITY:
        clauses = [Event.name.desc() if descending else Event.name.asc()]
    else:
        clauses = [Event.from_date.asc()]
    clauses.append(Event.id.asc())
    return clauses

