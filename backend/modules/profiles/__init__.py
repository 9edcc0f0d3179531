"""
Profiles module.

Handles profile creation, partial updates and account soft deletion.

Public API:
- IProfileService: Interface for profile operations
- ProfileCreate, ProfileUpdate, MessageResponse: Profile payloads
- Profile exceptions: MissingFullNameError, ProfileOwnerNotFoundError, etc.
"""

from .interfaces import IProfileService
from .models import ProfileCreate, ProfileUpdate, MessageResponse
from .exceptions import (
    MissingFullNameError,
    EmptyProfileUpdateError,
    ProfileOwnerNotFoundError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)

__all__ = [
    # Interface
    "IProfileService",
    # Models
    "ProfileCreate",
    "ProfileUpdate",
    "MessageResponse",
    # Exceptions
    "MissingFullNameError",
    "EmptyProfileUpdateError",
    "ProfileOwnerNotFoundError",
    "ProfileAlreadyExistsError",
    "ProfileNotFoundError",
]
