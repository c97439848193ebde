"""Domain exceptions.

A missing product is reported as ``None`` by the services, not raised.
The errors below cover the two failure modes the catalog distinguishes:
an unresolvable brand (recovered locally) and a failing store query
(propagated to the HTTP layer).
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class BrandNotFoundError(DomainError):
    """Raised when a brand token cannot be resolved to a brand ID.

    Covers both "no brand with that name" and a failing name lookup.
    """

    def __init__(self, token: str, reason: str | None = None) -> None:
        """Initialize brand not found error.

        Args:
            token: Brand token as supplied by the caller.
            reason: Optional underlying cause.
        """
        super().__init__(
            f"Brand not found: {token}",
            details={"token": token, "reason": reason},
        )
        self.token = token


class UpstreamQueryError(DomainError):
    """Raised when the data store reports an error for a query."""

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize upstream query error.

        Args:
            operation: Store operation that failed (e.g. "count_products").
            reason: Error text reported by the store driver.
        """
        super().__init__(
            f"Catalog query '{operation}' failed: {reason}",
            details={"operation": operation, "reason": reason},
        )
        self.operation = operation
