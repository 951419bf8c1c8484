"""Batched venue/price lookups for search result enrichment.

One query per relation for the whole page, keeping only the first row
(lowest id) per event via row_number().
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.search import PriceSummary, RelatedRecords, VenueRecord
from app.infrastructure.persistence.models import EventPrice, EventVenue


class EventRelationsRepository:
    """First venue and first price per event (IEventRelationsRepository)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def first_related(self, event_ids: list[int]) -> dict[int, RelatedRecords]:
        """Return RelatedRecords for each event id that has a venue or a price."""
        if not event_ids:
            return {}
        venues = await self._first_venues(event_ids)
        prices = await self._first_prices(event_ids)
        return {
            event_id: RelatedRecords(venue=venues.get(event_id), price=prices.get(event_id))
            for event_id in set(venues) | set(prices)
        }

    async def _first_venues(self, event_ids: list[int]) -> dict[int, VenueRecord]:
        ranked = (
            select(
                EventVenue.event_id,
                EventVenue.name,
                EventVenue.address,
                func.row_number()
                .over(partition_by=EventVenue.event_id, order_by=EventVenue.id)
                .label("rn"),
            )
            .where(EventVenue.event_id.in_(event_ids))
            .subquery()
        )
        result = await self.db.execute(
            select(ranked.c.event_id, ranked.c.name, ranked.c.address).where(ranked.c.rn == 1)
        )
        return {
            row.event_id: VenueRecord(name=row.name, address=row.address)
            for row in result.all()
        }

    async def _first_prices(self, event_ids: list[int]) -> dict[int, PriceSummary]:
        ranked = (
            select(
                EventPrice.event_id,
                EventPrice.amount,
                EventPrice.currency,
                EventPrice.category,
                func.row_number()
                .over(partition_by=EventPrice.event_id, order_by=EventPrice.id)
                .label("rn"),
            )
            .where(EventPrice.event_id.in_(event_ids))
            .subquery()
        )
        result = await self.db.execute(
            select(
                ranked.c.event_id, ranked.c.amount, ranked.c.currency, ranked.c.category
            ).where(ranked.c.rn == 1)
        )
        return {
            row.event_id: PriceSummary(
                amount=row.amount, currency=row.currency, category=row.category
            )
            for row in result.all()
        }
