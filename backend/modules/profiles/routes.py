"""
Profile API endpoints.

Two route families share the same service calls:
- /profile, /updateProfile, /deleteUser take the account from the token
- /profile/{user_id} names the account in the path; it must match the token
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_profile_service
from api.middleware.auth import get_current_user, get_path_owner
from api.models.errors import ErrorResponse
from shared.models import AuthenticatedUser

from .interfaces import IProfileService
from .models import MessageResponse, ProfileCreate, ProfileUpdate

router = APIRouter()

PROFILE_CREATED = "Profile created successfully"
PROFILE_UPDATED = "Profile updated successfully"
USER_DELETED = "User deleted successfully"

_auth_errors = {401: {"model": ErrorResponse}}
_path_errors = {401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}}


# -------------------------------------------------------------------------
# Token-identified routes
# -------------------------------------------------------------------------


@router.post("/profile", response_model=MessageResponse, status_code=201, responses=_auth_errors)
def create_profile(
    request: ProfileCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Create the caller's profile and mark the account verified."""
    service.create_profile(user.id, request)
    return MessageResponse(message=PROFILE_CREATED)


@router.post("/updateProfile", response_model=MessageResponse, responses=_auth_errors)
def update_profile(
    request: ProfileUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Update the supplied fields of the caller's profile."""
    service.update_profile(user.id, request)
    return MessageResponse(message=PROFILE_UPDATED)


@router.patch("/deleteUser", response_model=MessageResponse, responses=_auth_errors)
def delete_user(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Soft-delete the caller's account and profile."""
    service.delete_account(user.id)
    return MessageResponse(message=USER_DELETED)


# -------------------------------------------------------------------------
# Path-identified routes
# -------------------------------------------------------------------------


@router.post("/profile/{user_id}", response_model=MessageResponse, status_code=201, responses=_path_errors)
def create_profile_for(
    request: ProfileCreate,
    owner: AuthenticatedUser = Depends(get_path_owner),
    service: IProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Create the profile of the account in the path (must be the caller)."""
    service.create_profile(owner.id, request)
    return MessageResponse(message=PROFILE_CREATED)


@router.put("/profile/{user_id}", response_model=MessageResponse, responses=_path_errors)
def update_profile_for(
    request: ProfileUpdate,
    owner: AuthenticatedUser = Depends(get_path_owner),
    service: IProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Update the profile of the account in the path (must be the caller)."""
    service.update_profile(owner.id, request)
    return MessageResponse(message=PROFILE_UPDATED)


@router.delete("/profile/{user_id}", response_model=MessageResponse, responses=_path_errors)
def delete_user_for(
    owner: AuthenticatedUser = Depends(get_path_owner),
    service: IProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Soft-delete the account in the path (must be the caller)."""
    service.delete_account(owner.id)
    return MessageResponse(message=USER_DELETED)
