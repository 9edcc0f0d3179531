"""
Authentication module.

Handles sign-in, password hashing, token issuance and token validation.

Public API:
- IAuthService: Interface for auth operations
- SignInRequest, SignInResponse, TokenClaims: Auth payloads
- Auth exceptions: InvalidCredentialsError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .models import SignInRequest, SignInResponse, TokenClaims
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    MissingAPIKeyError,
    AuthNotConfiguredError,
    AccountMismatchError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "SignInRequest",
    "SignInResponse",
    "TokenClaims",
    # Exceptions
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "MissingAPIKeyError",
    "AuthNotConfiguredError",
    "AccountMismatchError",
]
