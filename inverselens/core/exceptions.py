"""
Exception hierarchy for InverseLens.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging; only
``message`` is ever shown to API clients.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class InverseLensException(Exception):
    """Base exception for all InverseLens application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message, safe to show to end users
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(InverseLensException):
    """Raised when an upload is missing, empty, oversize or not an image."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class AnalysisError(InverseLensException):
    """Raised when the external AI capability fails on either analysis phase."""

    def __init__(
        self,
        message: str = "Failed to analyze image.",
        phase: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize analysis error.

        Args:
            message: Generic, user-safe error message
            phase: Phase that failed (original, mirror)
            details: Additional context
        """
        details = details or {}
        if phase:
            details["phase"] = phase
        super().__init__(message, details)


class PersistenceError(InverseLensException):
    """Raised when the record store cannot read or write a record."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize persistence error.

        Args:
            message: Generic, user-safe error message
            operation: Store operation that failed (put, get_by_id, list_recent)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
