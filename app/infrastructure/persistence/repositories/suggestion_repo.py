"""Autocomplete lookups over events, teachers and musicians."""

from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.models import Event, Musician, Teacher


class SuggestionRepository:
    """Substring lookups for the suggestions endpoint (ISuggestionRepository)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def event_locations(
        self, query: str, limit: int
    ) -> list[tuple[str, str | None, str | None]]:
        """(name, city, country) of events matching name/city/country, latest start first."""
        result = await self.db.execute(
            select(Event.name, Event.city, Event.country)
            .where(
                or_(
                    Event.name.icontains(query, autoescape=True),
                    Event.city.icontains(query, autoescape=True),
                    Event.country.icontains(query, autoescape=True),
                )
            )
            .order_by(Event.from_date.desc(), Event.id.desc())
            .limit(limit)
        )
        return [(row.name, row.city, row.country) for row in result.all()]

    async def teacher_names(self, query: str, limit: int) -> list[str]:
        names = await self.db.scalars(
            select(Teacher.name)
            .where(Teacher.name.icontains(query, autoescape=True))
            .order_by(Teacher.id.desc())
            .limit(limit)
        )
        return list(names.all())

    async def musician_names(self, query: str, limit: int) -> list[str]:
        names = await self.db.scalars(
            select(Musician.name)
            .where(Musician.name.icontains(query, autoescape=True))
            .order_by(Musician.id.desc())
            .limit(limit)
        )
        return list(names.all())
