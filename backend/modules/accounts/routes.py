"""
Account API endpoints.

Registration, account listing and account lookup by ID.
"""

from fastapi import APIRouter, Depends, Path

from api.dependencies import get_account_service
from api.models.errors import ErrorResponse
from shared.models import ACCOUNT_ID_MAX, ACCOUNT_ID_MIN

from .interfaces import IAccountService
from .models import Account, AccountDetail, RegisterRequest, RegisterResponse

router = APIRouter()


@router.post(
    "/users",
    response_model=RegisterResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def register(
    request: RegisterRequest,
    service: IAccountService = Depends(get_account_service),
) -> RegisterResponse:
    """
    Create a new account.

    The account starts unverified; creating a profile verifies it.
    """
    return service.register(request)


@router.get("/users", response_model=list[Account])
def list_accounts(
    service: IAccountService = Depends(get_account_service),
) -> list[Account]:
    """List all accounts, including soft-deleted ones."""
    return service.list_accounts()


@router.get(
    "/profile/{user_id}",
    response_model=AccountDetail,
    responses={404: {"model": ErrorResponse}},
)
def get_account(
    user_id: int = Path(..., ge=ACCOUNT_ID_MIN, le=ACCOUNT_ID_MAX),
    service: IAccountService = Depends(get_account_service),
) -> AccountDetail:
    """Get an account and its profile by account ID."""
    return service.get_account(user_id)
