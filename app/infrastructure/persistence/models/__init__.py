"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.event import Event
from app.infrastructure.persistence.models.mixins import (
    CatalogModel,
    IntegerIdMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.people import (
    Musician,
    Teacher,
    event_musicians,
    event_teachers,
)
from app.infrastructure.persistence.models.price import EventPrice
from app.infrastructure.persistence.models.venue import EventVenue

__all__ = [
    "CatalogModel",
    "Event",
    "EventPrice",
    "EventVenue",
    "IntegerIdMixin",
    "Musician",
    "Teacher",
    "TimestampMixin",
    "event_musicians",
    "event_teachers",
]
