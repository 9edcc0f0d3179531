"""
Authentication module exceptions.

These exceptions are raised by the auth module and rendered by the API
error handler as 401/403 responses.
"""

from shared.exceptions import AuthenticationError, AuthorizationError


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when a sign-in fails.

    The same message is used for an unknown username and a wrong password.
    """

    def __init__(self):
        super().__init__("invalid username or password", code="INVALID_CREDENTIALS")


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authorization header is missing"):
        super().__init__(message, code="MISSING_TOKEN")


class MissingAPIKeyError(AuthenticationError):
    """Raised when the API key header is absent or empty."""

    def __init__(self):
        super().__init__("API key is required", code="MISSING_API_KEY")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when no token signing secret is configured."""

    def __init__(self):
        super().__init__("Server authentication not configured", code="AUTH_NOT_CONFIGURED")


class AccountMismatchError(AuthorizationError):
    """Raised when a path account ID differs from the token's account ID."""

    def __init__(self, path_account_id: int, token_account_id: int):
        super().__init__(
            "cannot act on another user's account",
            code="ACCOUNT_MISMATCH",
            details={
                "path_account_id": path_account_id,
                "token_account_id": token_account_id,
            },
        )
