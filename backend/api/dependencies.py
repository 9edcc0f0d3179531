"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The container owns the single SQLAlchemy engine and
is attached to the application in create_app(); route dependencies
reach it through request.app.state, never through a module global.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Request
from sqlalchemy.engine import Engine

from shared.config import Settings
from shared.database import create_engine_from_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.accounts.interfaces import IAccountService
    from modules.accounts.repository import AccountRepository
    from modules.auth.interfaces import IAuthService
    from modules.profiles.interfaces import IProfileService
    from modules.profiles.repository import ProfileRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services and repositories are created lazily on first access and
    cached for the lifetime of the container. Use reset() to drop the
    cached instances in tests.
    """

    def __init__(self, settings: Settings, engine: Optional[Engine] = None) -> None:
        self.settings = settings
        self.engine = engine if engine is not None else create_engine_from_settings(settings)
        self._account_repository: "AccountRepository | None" = None
        self._profile_repository: "ProfileRepository | None" = None
        self._account_service: "IAccountService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._profile_service: "IProfileService | None" = None

    @property
    def account_repository(self) -> "AccountRepository":
        """Get the account repository instance."""
        if self._account_repository is None:
            from modules.accounts.repository import AccountRepository
            self._account_repository = AccountRepository(self.engine)
        return self._account_repository

    @property
    def profile_repository(self) -> "ProfileRepository":
        """Get the profile repository instance."""
        if self._profile_repository is None:
            from modules.profiles.repository import ProfileRepository
            self._profile_repository = ProfileRepository(self.engine)
        return self._profile_repository

    @property
    def accounts(self) -> "IAccountService":
        """Get the account service instance."""
        if self._account_service is None:
            from modules.accounts.service import AccountService
            self._account_service = AccountService(self.account_repository)
        return self._account_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                self.account_repository,
                jwt_secret=self.settings.jwt_secret,
                jwt_algorithm=self.settings.jwt_algorithm,
                expiry_minutes=self.settings.jwt_expiry_minutes,
            )
        return self._auth_service

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.service import ProfileService
            self._profile_service = ProfileService(self.profile_repository)
        return self._profile_service

    def reset(self) -> None:
        """Reset all cached services and repositories."""
        self._account_repository = None
        self._profile_repository = None
        self._account_service = None
        self._auth_service = None
        self._profile_service = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_account_service(request: Request) -> "IAccountService":
    """FastAPI dependency for account service."""
    return get_container(request).accounts


def get_auth_service(request: Request) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container(request).auth


def get_profile_service(request: Request) -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container(request).profiles
