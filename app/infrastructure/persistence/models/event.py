"""Event ORM model. Table: events (festival/workshop listings)."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CatalogModel


class Event(CatalogModel, Base):
    """Listed event. Searchable by name, description, city, country and style."""

    __tablename__ = "events"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    from_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), index=True)
    to_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    city: Mapped[str | None] = mapped_column(String(255))
    country: Mapped[str | None] = mapped_column(String(255))
    website: Mapped[str | None] = mapped_column(String(512))
    style: Mapped[str | None] = mapped_column(String(255))
    image_url: Mapped[str | None] = mapped_column(String(1024))
    ai_quality_score: Mapped[float | None] = mapped_column(Float)
    ai_completeness_score: Mapped[float | None] = mapped_column(Float)
    extraction_method: Mapped[str | None] = mapped_column(String(64))

    __table_args__ = (
        Index("ix_events_city_country", "city", "country"),
    )
