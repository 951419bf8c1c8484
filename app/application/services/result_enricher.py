"""Attach first venue and first price to ranked events and absolutize image URLs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.search import (
    EnrichedEvent,
    RankedEvent,
    RelatedRecords,
    VenueSummary,
)
from app.shared.utils.asset_urls import rewrite_image_url

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IEventRelationsRepository


class ResultEnricher:
    """Enrich a page of ranked events with one batched relations lookup.

    Only the first venue and the first price of each event are kept, even
    when storage holds several.
    """

    def __init__(
        self,
        relations_repo: "IEventRelationsRepository",
        asset_base_url: str,
        upload_prefix: str = "/uploads/",
    ) -> None:
        self.relations_repo = relations_repo
        self.asset_base_url = asset_base_url
        self.upload_prefix = upload_prefix

    async def enrich(self, rows: list[RankedEvent]) -> list[EnrichedEvent]:
        """Return rows enriched, in the same order as given."""
        if not rows:
            return []
        related = await self.relations_repo.first_related([row.id for row in rows])
        return [self._enrich_one(row, related.get(row.id, RelatedRecords())) for row in rows]

    def _enrich_one(self, row: RankedEvent, related: RelatedRecords) -> EnrichedEvent:
        venue = None
        if related.venue is not None:
            venue = VenueSummary(
                name=related.venue.name,
                address=related.venue.address,
                city=row.city,
                country=row.country,
            )
        return EnrichedEvent(
            event=row,
            image_url=rewrite_image_url(row.image_url, self.asset_base_url, self.upload_prefix),
            venue=venue,
            pricing=related.price,
        )
