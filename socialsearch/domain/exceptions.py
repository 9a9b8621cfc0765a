"""Domain exceptions for the search engine.

"No match" is never an exception; matchers return an empty MatchResult.
These exceptions cover misuse of the engine and missing infrastructure.
Failures raised by the query executor propagate unchanged.
"""

from typing import Any


class SocialSearchException(Exception):
    """Base exception for all search engine errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context.
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


class ValidationException(SocialSearchException):
    """Raised when search input is structurally invalid (e.g. wrong type)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional parameter that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class UnknownSearchTypeException(SocialSearchException):
    """Raised when a search type has neither an entity matcher nor a custom registration."""

    def __init__(self, search_type: str, available: list[str]) -> None:
        super().__init__(
            f"Unknown search type: {search_type}",
            "UNKNOWN_SEARCH_TYPE",
            {"search_type": search_type, "available": available},
        )


class SqlNotConfiguredException(SocialSearchException):
    """Raised when the SQL executor is requested but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
