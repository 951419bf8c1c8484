"""Classify store-layer failures into terminal search errors.

The store reports problems through driver exceptions whose types differ
between drivers (asyncpg, aiosqlite) and are often wrapped by SQLAlchemy,
so classification looks at both exception types and message text.
Explicit query timeouts are checked before the broader connection class
because their messages also mention "timeout". A bare TimeoutError carries
no statement context (asyncpg raises it when connecting times out), so it
counts as a connection failure; server-side statement_timeout cancels are
what reach the query-timeout branch.
"""

from __future__ import annotations

from sqlalchemy import exc as sa_exc

from app.domain.exceptions import (
    FestivalSearchException,
    SearchFailedError,
    StoreTimeoutError,
    StoreUnavailableError,
)

_QUERY_TIMEOUT_MARKERS = (
    "query timeout",
    "statement timeout",
    "canceling statement",
    "querycancelederror",
)

_CONNECTION_MARKERS = (
    "connection pool",
    "queuepool limit",
    "connection refused",
    "could not connect",
    "connection was closed",
    "connection is closed",
    "too many connections",
    "timeout",
    "timed out",
)

_CONNECTION_ERROR_TYPES: tuple[type[BaseException], ...] = (
    sa_exc.TimeoutError,
    sa_exc.DisconnectionError,
    ConnectionError,
    OSError,
)


def _describe(error: BaseException) -> str:
    """Lowercased type names and messages of error and its wrapped cause."""
    parts = [type(error).__name__, str(error)]
    orig = getattr(error, "orig", None) or error.__cause__
    if orig is not None:
        parts.extend([type(orig).__name__, str(orig)])
    return " ".join(parts).lower()


def is_query_timeout(error: BaseException) -> bool:
    """True when the store cancelled the statement itself (not a pool/connect timeout)."""
    text = _describe(error)
    return any(marker in text for marker in _QUERY_TIMEOUT_MARKERS)


def is_connection_failure(error: BaseException) -> bool:
    """True for pool exhaustion, connect failures, dropped connections and generic timeouts."""
    if isinstance(error, _CONNECTION_ERROR_TYPES):
        return True
    orig = getattr(error, "orig", None)
    if orig is not None and isinstance(orig, _CONNECTION_ERROR_TYPES):
        return True
    if isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated:
        return True
    text = _describe(error)
    return any(marker in text for marker in _CONNECTION_MARKERS)


def classify_store_error(error: BaseException) -> FestivalSearchException:
    """Map any failure to StoreTimeoutError, StoreUnavailableError or SearchFailedError.

    Already-classified domain exceptions are returned unchanged.
    """
    if isinstance(error, FestivalSearchException):
        return error
    if is_query_timeout(error):
        return StoreTimeoutError()
    if is_connection_failure(error):
        return StoreUnavailableError()
    return SearchFailedError()
