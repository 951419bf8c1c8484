"""Optimized and fallback search engines against a seeded SQLite catalogue."""

from datetime import UTC, datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.filter_normalizer import normalize_search_params
from app.domain.enums import SearchType
from app.infrastructure.persistence.models import (
    Event,
    Musician,
    Teacher,
    event_musicians,
    event_teachers,
)
from app.infrastructure.persistence.repositories import (
    FallbackSearchEngine,
    OptimizedSearchEngine,
)


def _filters(**params: str):
    return normalize_search_params(params)


def _names(page) -> list[str]:
    return [row.name for row in page.rows]


async def test_exact_name_match_ranks_first(db_session: AsyncSession, catalogue) -> None:
    page = await OptimizedSearchEngine(db_session).execute(
        _filters(query="blues festival madrid")
    )
    assert page.total == 1
    assert page.rows[0].name == "Blues Festival Madrid"
    assert page.rows[0].search_rank == 100.0


async def test_ladder_orders_prefix_before_substring(db_session: AsyncSession, catalogue) -> None:
    page = await OptimizedSearchEngine(db_session).execute(_filters(query="Blues"))
    assert _names(page) == ["Blues Festival Madrid", "Berlin Blues Exchange"]
    assert [row.search_rank for row in page.rows] == [80.0, 60.0]


async def test_teacher_and_musician_names_are_searched(db_session: AsyncSession, catalogue) -> None:
    teacher_page = await OptimizedSearchEngine(db_session).execute(_filters(query="alice mei"))
    assert _names(teacher_page) == ["Madrid Swing Weekend"]
    assert teacher_page.rows[0].search_rank == 90.0

    musician_page = await OptimizedSearchEngine(db_session).execute(_filters(query="moon"))
    assert _names(musician_page) == ["Madrid Swing Weekend"]
    assert musician_page.rows[0].search_rank == 65.0


async def test_lower_tiers(db_session: AsyncSession, catalogue) -> None:
    engine = OptimizedSearchEngine(db_session)
    description = await engine.execute(_filters(query="live bands"))
    assert [row.search_rank for row in description.rows] == [40.0]
    style = await engine.execute(_filters(query="balboa"))
    # "Paris Balboa Nights" contains the query in its name, which outranks style.
    assert [row.search_rank for row in style.rows] == [60.0]
    country = await engine.execute(_filters(query="franc"))
    assert _names(country) == ["Paris Balboa Nights"]
    assert country.rows[0].search_rank == 20.0


async def test_named_teacher_filter(db_session: AsyncSession, catalogue) -> None:
    page = await OptimizedSearchEngine(db_session).execute(
        _filters(teachers="dan repsch", query="ignored by named filters")
    )
    assert page.total == 2
    assert _names(page) == ["Blues Festival Madrid", "Berlin Blues Exchange"]
    assert {row.search_rank for row in page.rows} == {90.0}


async def test_named_filters_are_or_combined(db_session: AsyncSession, catalogue) -> None:
    page = await OptimizedSearchEngine(db_session).execute(
        _filters(teachers="Alice Mei", musicians="Nobody,Blue Moon Band")
    )
    assert _names(page) == ["Madrid Swing Weekend"]


async def test_named_filter_requires_exact_name(db_session: AsyncSession, catalogue) -> None:
    page = await OptimizedSearchEngine(db_session).execute(_filters(teachers="Dan"))
    assert page.total == 0
    assert page.rows == []


async def test_city_filter_same_rows_on_both_engines(db_session: AsyncSession, catalogue) -> None:
    filters = _filters(city="berlin")
    optimized = await OptimizedSearchEngine(db_session).execute(filters)
    fallback = await FallbackSearchEngine(db_session).execute(filters)

    assert optimized.total == fallback.total == 2
    assert _names(optimized) == _names(fallback) == ["Winter Shag Camp", "Berlin Blues Exchange"]
    assert {row.search_rank for row in optimized.rows} == {0.0}
    assert {row.search_rank for row in fallback.rows} == {None}


async def test_event_field_query_counts_match(db_session: AsyncSession, catalogue) -> None:
    filters = _filters(query="madrid")
    optimized = await OptimizedSearchEngine(db_session).execute(filters)
    fallback = await FallbackSearchEngine(db_session).execute(filters)
    assert optimized.total == fallback.total == 2


async def test_query_narrowed_by_country(db_session: AsyncSession, catalogue) -> None:
    page = await OptimizedSearchEngine(db_session).execute(
        _filters(query="blues", country="germany")
    )
    assert _names(page) == ["Berlin Blues Exchange"]


@pytest.mark.parametrize("query", ["%", "_", "100%"])
async def test_like_wildcards_match_literally(db_session: AsyncSession, catalogue, query) -> None:
    for engine in (OptimizedSearchEngine(db_session), FallbackSearchEngine(db_session)):
        page = await engine.execute(_filters(query=query))
        assert _names(page) == ["Winter Shag Camp"]


async def test_quotes_in_query_are_bound_not_interpolated(
    db_session: AsyncSession, catalogue
) -> None:
    page = await OptimizedSearchEngine(db_session).execute(
        _filters(query="x' OR '1'='1", city="'; DROP TABLE events; --")
    )
    assert page.total == 0
    # Table still there.
    assert (await OptimizedSearchEngine(db_session).execute(_filters())).total == 5


async def test_pagination_window(db_session: AsyncSession, catalogue) -> None:
    page = await OptimizedSearchEngine(db_session).execute(
        _filters(city="berlin", limit="1", page="2")
    )
    assert page.total == 2
    assert _names(page) == ["Berlin Blues Exchange"]


async def test_page_beyond_last_is_empty(db_session: AsyncSession, catalogue) -> None:
    page = await OptimizedSearchEngine(db_session).execute(_filters(page="9"))
    assert page.total == 5
    assert page.rows == []


async def test_sort_by_date_descending(db_session: AsyncSession, catalogue) -> None:
    filters = _filters(sortBy="date", sortOrder="desc")
    expected = [
        "Paris Balboa Nights",
        "Berlin Blues Exchange",
        "Blues Festival Madrid",
        "Madrid Swing Weekend",
        "Winter Shag Camp",
    ]
    assert _names(await OptimizedSearchEngine(db_session).execute(filters)) == expected
    assert _names(await FallbackSearchEngine(db_session).execute(filters)) == expected


async def test_sort_by_popularity_orders_by_name(db_session: AsyncSession, catalogue) -> None:
    page = await OptimizedSearchEngine(db_session).execute(
        _filters(sortBy="popularity", sortOrder="asc", city="madrid")
    )
    assert _names(page) == ["Blues Festival Madrid", "Madrid Swing Weekend"]


async def test_unsupported_sorts_use_start_date(db_session: AsyncSession, catalogue) -> None:
    page = await OptimizedSearchEngine(db_session).execute(
        _filters(sortBy="price", query="blues")
    )
    assert _names(page) == ["Blues Festival Madrid", "Berlin Blues Exchange"]


async def test_fallback_ignores_named_filters(db_session: AsyncSession, catalogue) -> None:
    engine = FallbackSearchEngine(db_session)
    page = await engine.execute(_filters(teachers="Dan Repsch"))
    assert engine.search_type is SearchType.FALLBACK
    assert page.total == 5


async def test_fallback_does_not_search_people(db_session: AsyncSession, catalogue) -> None:
    page = await FallbackSearchEngine(db_session).execute(_filters(query="moon"))
    assert page.total == 0


async def test_rows_carry_utc_dates(db_session: AsyncSession, catalogue) -> None:
    page = await OptimizedSearchEngine(db_session).execute(_filters(query="winter shag camp"))
    start = page.rows[0].from_date
    assert start is not None and start.utcoffset() is not None
    assert (start.month, start.day) == (1, 15)


@pytest.fixture
async def tiered_events(db_session: AsyncSession) -> dict[str, int]:
    """Events that each match one ladder tier for a chosen query."""

    def event(name: str, month: int, **columns: str) -> Event:
        return Event(name=name, from_date=datetime(2026, month, 1, tzinfo=UTC), **columns)

    events = [
        event("Alpha Gathering", 1, city="Oslo", country="Norway", style="Lindy Hop"),
        event("Beta Jam", 2, city="Oslo", country="Norway", style="Lindy Hop"),
        event("Gamma Social", 3, city="Lisbon", country="Portugal", style="Blues"),
        event("Delta Weekend", 4, city="Oslo", country="Norway", style="Tango Nuevo"),
        event("Epsilon Camp", 5, city="Zurich", country="Switzerland", style="Swiss Boogie"),
        event("Zeta Retreat", 6, city="Bern", country="Switzerland", style="Blues"),
        event("Kim Lee Weekend", 7, city="Oslo", country="Norway", style="Blues"),
    ]
    rosa = Teacher(name="Rosa Quartermain")
    kim = Teacher(name="Kim Lee")
    sugar = Musician(name="Hot Sugar")
    db_session.add_all([*events, rosa, kim, sugar])
    await db_session.flush()
    ids = {e.name: e.id for e in events}
    await db_session.execute(
        event_teachers.insert(),
        [
            {"event_id": ids["Alpha Gathering"], "teacher_id": rosa.id},
            {"event_id": ids["Kim Lee Weekend"], "teacher_id": kim.id},
        ],
    )
    await db_session.execute(
        event_musicians.insert(),
        [{"event_id": ids["Beta Jam"], "musician_id": sugar.id}],
    )
    await db_session.commit()
    return ids


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("quarter", [("Alpha Gathering", 70.0)]),
        ("hot sugar", [("Beta Jam", 85.0)]),
        ("lisbon", [("Gamma Social", 30.0)]),
        ("nuevo", [("Delta Weekend", 25.0)]),
        # Style outranks country when both contain the query.
        ("swi", [("Epsilon Camp", 25.0), ("Zeta Retreat", 20.0)]),
        # First matching tier wins: name prefix (80) before exact teacher (90).
        ("kim lee", [("Kim Lee Weekend", 80.0)]),
    ],
)
async def test_single_tier_scores(
    db_session: AsyncSession, tiered_events, query: str, expected: list[tuple[str, float]]
) -> None:
    page = await OptimizedSearchEngine(db_session).execute(_filters(query=query))
    assert [(row.name, row.search_rank) for row in page.rows] == expected
