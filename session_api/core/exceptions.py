"""
Exception hierarchy for the Session API.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class SessionApiException(Exception):
    """Base exception for all Session API errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
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


class SessionNotFoundError(SessionApiException):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: Any, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}", details)


class PatchError(SessionApiException):
    """Raised when a JSON-Patch document is malformed or cannot be applied."""

    def __init__(
        self,
        message: str,
        operation: dict[str, Any] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize patch error.

        Args:
            message: Error message
            operation: The offending patch operation, when known
            details: Additional context
        """
        details = details or {}
        if operation is not None:
            details["operation"] = operation
        self.operation = operation
        super().__init__(message, details)
