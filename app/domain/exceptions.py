"""Domain exceptions for the festival search service.

Defines domain-level exceptions for request normalization and search
execution. These exceptions are independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class FestivalSearchException(Exception):
    """Base exception for all festival search errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, parameter value).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    @property
    def retryable(self) -> bool:
        """Whether the client may reasonably retry the same request."""
        return False


class NormalizationError(FestivalSearchException):
    """Raised when a raw search parameter cannot be normalized (e.g. unknown sortBy)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional parameter name.

        Args:
            message: Description of the normalization failure.
            field: Optional request parameter that failed.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class PrimaryEngineError(FestivalSearchException):
    """Raised when the optimized search engine fails. Recovered by the fallback engine."""

    def __init__(self, cause: BaseException) -> None:
        """Initialize with the underlying failure.

        Args:
            cause: Exception raised by the store or statement construction.
        """
        super().__init__(
            "Optimized search failed",
            "PRIMARY_ENGINE_ERROR",
            {"cause": type(cause).__name__},
        )
        self.cause = cause


class StoreUnavailableError(FestivalSearchException):
    """Raised when the store reports connection-pool exhaustion or a connection timeout."""

    def __init__(self) -> None:
        super().__init__(
            "Database is temporarily unavailable. Please try again in a moment.",
            "STORE_UNAVAILABLE",
        )

    @property
    def retryable(self) -> bool:
        return True


class StoreTimeoutError(FestivalSearchException):
    """Raised when the store cancels a query for exceeding its statement timeout."""

    def __init__(self) -> None:
        super().__init__(
            "Search request timed out. Please try with more specific filters.",
            "STORE_TIMEOUT",
        )

    @property
    def retryable(self) -> bool:
        return True


class SearchFailedError(FestivalSearchException):
    """Raised for any other terminal search failure. Raw store text is never exposed."""

    def __init__(self) -> None:
        super().__init__("Search failed", "SEARCH_FAILED")
