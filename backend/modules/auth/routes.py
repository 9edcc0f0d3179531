"""
Authentication API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.models.errors import ErrorResponse

from .interfaces import IAuthService
from .models import SignInRequest, SignInResponse

router = APIRouter()


@router.post(
    "/login",
    response_model=SignInResponse,
    responses={401: {"model": ErrorResponse}},
)
def sign_in(
    request: SignInRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SignInResponse:
    """
    Exchange a username and password for a bearer token.

    Unknown usernames and wrong passwords get the same 401 response.
    """
    return service.sign_in(request)
