"""
JWT Authentication middleware.

Validates bearer tokens issued by the auth service and resolves the
acting account for protected routes.
"""

from typing import Optional
from fastapi import Depends, Path
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.models import ACCOUNT_ID_MAX, ACCOUNT_ID_MIN, AuthenticatedUser
from modules.auth.exceptions import AccountMismatchError, MissingTokenError
from modules.auth.interfaces import IAuthService
from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that act on the caller's own account. Any
    failure raises an AuthenticationError and the handler never runs.

    Usage:
        @router.post("/profile")
        def create_profile(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError()

    return auth.validate_token(credentials.credentials)


async def get_path_owner(
    user_id: int = Path(..., ge=ACCOUNT_ID_MIN, le=ACCOUNT_ID_MAX),
    user: AuthenticatedUser = Depends(get_current_user),
) -> AuthenticatedUser:
    """
    Dependency for routes that name the account in the path.

    The path ID must equal the token's account ID.
    """
    if user_id != user.id:
        raise AccountMismatchError(user_id, user.id)
    return user


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
RequirePathOwner = Depends(get_path_owner)
