"""
Base exception classes for the Accounts backend.

Each module should define its own exceptions that inherit from these bases.
Every class carries the HTTP status the API layer answers with, so route
handlers never translate errors by hand.
"""

from typing import Optional, Any


class AccountsError(Exception):
    """
    Base exception for all Accounts errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

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
        """Convert exception to the flat body returned by the API."""
        return {"error": self.message}


class ValidationError(AccountsError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(AccountsError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(AccountsError):
    """Authorization failed (authenticated, but not allowed)."""

    status_code = 403


class NotFoundError(AccountsError):
    """Resource not found."""

    status_code = 404


class ConflictError(AccountsError):
    """A uniqueness or referential constraint rejected the write."""

    status_code = 409


class StorageError(AccountsError):
    """Unexpected failure talking to the relational store."""

    status_code = 500

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.operation = operation
        if operation:
            self.details["operation"] = operation
