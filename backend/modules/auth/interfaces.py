"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import SignInRequest, SignInResponse


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    def sign_in(self, request: SignInRequest) -> SignInResponse:
        """
        Verify a username/password pair and issue a token.

        Args:
            request: Username and password

        Returns:
            SignInResponse with the token, account ID and verified flag

        Raises:
            InvalidCredentialsError: Unknown username, deleted account or wrong password
            StorageError: If the credential lookup fails
        """
        ...

    def issue_token(self, user_id: int) -> str:
        """
        Sign a token whose payload carries the account ID.

        Raises:
            AuthNotConfiguredError: If no signing secret is configured
        """
        ...

    def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated account.

        Args:
            token: Bearer token issued by issue_token

        Returns:
            AuthenticatedUser with the account ID

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...
