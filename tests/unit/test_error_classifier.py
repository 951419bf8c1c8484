"""Tests for store error classification."""

import asyncio

from sqlalchemy import exc as sa_exc

from app.application.services.error_classifier import (
    classify_store_error,
    is_connection_failure,
    is_query_timeout,
)
from app.domain.exceptions import (
    NormalizationError,
    SearchFailedError,
    StoreTimeoutError,
    StoreUnavailableError,
)


class QueryCanceledError(Exception):
    """Stands in for the driver's statement-cancel exception (matched by name)."""


def test_statement_timeout_message_is_query_timeout() -> None:
    error = sa_exc.OperationalError(
        "SELECT 1", {}, Exception("canceling statement due to statement timeout")
    )
    assert is_query_timeout(error)
    assert isinstance(classify_store_error(error), StoreTimeoutError)


def test_driver_cancel_type_is_query_timeout() -> None:
    error = sa_exc.DBAPIError("SELECT 1", {}, QueryCanceledError("cancelled"))
    assert isinstance(classify_store_error(error), StoreTimeoutError)


def test_bare_timeout_is_unavailable() -> None:
    # asyncpg raises a bare TimeoutError when opening a connection times out.
    for error in (asyncio.TimeoutError(), TimeoutError("")):
        assert not is_query_timeout(error)
        assert isinstance(classify_store_error(error), StoreUnavailableError)


def test_pool_timeout_is_unavailable() -> None:
    error = sa_exc.TimeoutError("QueuePool limit of size 20 overflow 30 reached")
    assert not is_query_timeout(error)
    assert is_connection_failure(error)
    assert isinstance(classify_store_error(error), StoreUnavailableError)


def test_connection_refused_is_unavailable() -> None:
    error = sa_exc.OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused"))
    assert isinstance(classify_store_error(error), StoreUnavailableError)


def test_generic_timeout_text_is_unavailable() -> None:
    assert isinstance(
        classify_store_error(RuntimeError("connect timeout while acquiring")),
        StoreUnavailableError,
    )


def test_other_errors_are_search_failed() -> None:
    error = sa_exc.ProgrammingError("SELECT x", {}, Exception('column "x" does not exist'))
    classified = classify_store_error(error)
    assert isinstance(classified, SearchFailedError)
    assert "does not exist" not in classified.message


def test_domain_errors_pass_through() -> None:
    error = NormalizationError("bad", field="sortBy")
    assert classify_store_error(error) is error
