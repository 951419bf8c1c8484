"""UTC helpers. Datetimes leaving the service are always timezone-aware UTC."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime (response timestamps)."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as aware UTC; naive values are taken to be UTC already.

    Applied when mapping rows to DTOs: SQLite hands back naive datetimes even
    for DateTime(timezone=True) columns, PostgreSQL may return another offset.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
