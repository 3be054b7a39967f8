"""
Base exception classes for the Chirper backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to one HTTP status, so modules never deal with
status codes themselves.
"""

from typing import Optional, Any


class ChirperError(Exception):
    """
    Base exception for all Chirper errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(ChirperError):
    """Resource not found."""

    pass


class ValidationError(ChirperError):
    """Input validation failed."""

    pass


class AuthenticationError(ChirperError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(ChirperError):
    """Authorization failed (authenticated, but not allowed)."""

    pass


class ConflictError(ChirperError):
    """Resource conflicts with existing state (duplicate unique field)."""

    pass


class ExternalServiceError(ChirperError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
