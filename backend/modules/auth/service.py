"""
Authentication service implementation.

Verifies credentials against the account store and issues/validates
HS256 JWT tokens carrying the account ID.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from shared.exceptions import StorageError
from shared.models import AuthenticatedUser
from modules.accounts.repository import AccountRepository

from .interfaces import IAuthService
from .models import SignInRequest, SignInResponse, TokenClaims
from .passwords import verify_dummy_password, verify_password
from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Token validation is a pure function of the token and the shared
    secret; only sign_in touches the store.
    """

    def __init__(
        self,
        accounts: AccountRepository,
        jwt_secret: str,
        jwt_algorithm: str = "HS256",
        expiry_minutes: Optional[int] = None,
    ):
        self._accounts = accounts
        self._secret = jwt_secret
        self._algorithm = jwt_algorithm
        self._expiry_minutes = expiry_minutes

    def sign_in(self, request: SignInRequest) -> SignInResponse:
        """
        Verify credentials and issue a token.

        Unknown usernames, soft-deleted accounts and wrong passwords all
        raise the same InvalidCredentialsError.
        """
        try:
            credentials = self._accounts.get_credentials(request.username)
        except SQLAlchemyError as e:
            logger.error(f"Error querying credentials: {e}")
            raise StorageError("failed to authenticate user", operation="sign_in")

        if credentials is None:
            verify_dummy_password(request.password)
            logger.info("Sign-in failed: unknown or deleted username")
            raise InvalidCredentialsError()

        if not verify_password(credentials.password_hash, request.password):
            logger.info(f"Sign-in failed: wrong password for account {credentials.id}")
            raise InvalidCredentialsError()

        token = self.issue_token(credentials.id)
        return SignInResponse(
            token=token,
            user_id=credentials.id,
            is_verified=credentials.is_verified,
        )

    def issue_token(self, user_id: int) -> str:
        """Sign a token with the user_id claim (plus iat/exp when configured)."""
        if not self._secret:
            raise AuthNotConfiguredError()

        payload: dict = {"user_id": user_id}
        if self._expiry_minutes:
            now = datetime.now(timezone.utc)
            payload["iat"] = now
            payload["exp"] = now + timedelta(minutes=self._expiry_minutes)

        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated account.

        The payload must decode to an object with an integer user_id.
        """
        if not token:
            raise MissingTokenError()

        if not self._secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected token: {e}")
            raise InvalidTokenError()

        try:
            claims = TokenClaims.model_validate(payload)
        except PydanticValidationError as e:
            if any(error["loc"][:1] == ("user_id",) for error in e.errors()):
                raise InvalidTokenError("Invalid user ID in token")
            logger.debug(f"Rejected token claims: {e}")
            raise InvalidTokenError()

        return AuthenticatedUser(id=claims.user_id)
