"""Pytest configuration and fixtures for festival-search.

HTTP tests use app.main:app through httpx ASGITransport. Engine and
repository tests run against an in-memory SQLite database (aiosqlite,
StaticPool) created from the ORM metadata and seeded with a small catalogue.
"""

import os
from datetime import UTC, datetime
from decimal import Decimal

# Settings require DATABASE_URL; set it before app.main builds the app.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.config import get_settings

get_settings.cache_clear()

from app.infrastructure.persistence.database import Base, get_db
from app.infrastructure.persistence.models import (
    Event,
    EventPrice,
    EventVenue,
    Musician,
    Teacher,
    event_musicians,
    event_teachers,
)
from app.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite://"


def _date(month: int, day: int) -> datetime:
    return datetime(2025, month, day, 18, 0, tzinfo=UTC)


async def seed_catalogue(session: AsyncSession) -> dict[str, int]:
    """Insert five events with teachers, musicians, venues and prices.

    Returns event ids keyed by event name.
    """
    events = [
        Event(
            name="Blues Festival Madrid",
            description="Three days of blues dancing",
            from_date=_date(5, 1),
            to_date=_date(5, 4),
            city="Madrid",
            country="Spain",
            style="Blues",
            website="https://bluesmadrid.example.com",
            image_url="/uploads/2025/blues.jpg",
            ai_quality_score=0.9,
            extraction_method="manual",
        ),
        Event(
            name="Madrid Swing Weekend",
            description="Swing with live bands",
            from_date=_date(3, 1),
            to_date=_date(3, 3),
            city="Madrid",
            country="Spain",
            style="Lindy Hop",
        ),
        Event(
            name="Berlin Blues Exchange",
            description="A blues exchange in Berlin.",
            from_date=_date(6, 10),
            to_date=_date(6, 12),
            city="Berlin",
            country="Germany",
            style="Blues",
            image_url="https://cdn.example.com/berlin.png",
        ),
        Event(
            name="Winter Shag Camp",
            description="100% shag_all night",
            from_date=_date(1, 15),
            to_date=_date(1, 17),
            city="Berlin",
            country="Germany",
            style="Collegiate Shag",
        ),
        Event(
            name="Paris Balboa Nights",
            from_date=_date(9, 1),
            city="Paris",
            country="France",
            style="Balboa",
        ),
    ]
    dan = Teacher(name="Dan Repsch")
    alice = Teacher(name="Alice Mei")
    band = Musician(name="Blue Moon Band")
    session.add_all([*events, dan, alice, band])
    await session.flush()
    ids = {event.name: event.id for event in events}

    await session.execute(
        event_teachers.insert(),
        [
            {"event_id": ids["Blues Festival Madrid"], "teacher_id": dan.id},
            {"event_id": ids["Berlin Blues Exchange"], "teacher_id": dan.id},
            {"event_id": ids["Madrid Swing Weekend"], "teacher_id": alice.id},
        ],
    )
    await session.execute(
        event_musicians.insert(),
        [{"event_id": ids["Madrid Swing Weekend"], "musician_id": band.id}],
    )
    session.add_all(
        [
            EventVenue(event_id=ids["Blues Festival Madrid"], name="Sala A", address="Calle 1"),
            EventVenue(event_id=ids["Blues Festival Madrid"], name="Sala B", address="Calle 2"),
            EventVenue(event_id=ids["Berlin Blues Exchange"], name="Ballhaus", address="Str. 5"),
            EventPrice(
                event_id=ids["Blues Festival Madrid"],
                amount=Decimal("120.00"),
                currency="EUR",
                category="full pass",
            ),
            EventPrice(
                event_id=ids["Blues Festival Madrid"],
                amount=Decimal("40.00"),
                currency="EUR",
                category="party",
            ),
        ]
    )
    await session.commit()
    return ids


@pytest.fixture
async def db_engine():
    """Fresh in-memory database per test, schema created from Base.metadata."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncSession:
    """Session bound to the in-memory database."""
    factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
async def catalogue(db_session: AsyncSession) -> dict[str, int]:
    """Seed the catalogue; returns event ids by name."""
    return await seed_catalogue(db_session)


@pytest.fixture
async def client(db_session: AsyncSession, catalogue: dict[str, int]) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), wired to the seeded database."""

    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
