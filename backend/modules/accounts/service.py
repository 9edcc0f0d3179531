"""
Account service implementation.

Registers accounts and reads them back. Store errors are classified here
and converted to the shared exception taxonomy.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from shared.database import UNIQUE_VIOLATION, classify_integrity_error
from shared.exceptions import StorageError
from modules.auth.passwords import hash_password

from .interfaces import IAccountService
from .models import Account, AccountDetail, RegisterRequest, RegisterResponse
from .repository import AccountRepository
from .exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    MissingAccountFieldsError,
)

logger = logging.getLogger(__name__)


class AccountService(IAccountService):
    """
    Account service backed by the relational store.

    Implements IAccountService with the repository injected at construction.
    """

    def __init__(self, repository: AccountRepository):
        self._repository = repository

    def register(self, request: RegisterRequest) -> RegisterResponse:
        """Create an account; duplicates are detected by the unique constraints."""
        if not request.username or not request.email or not request.password:
            raise MissingAccountFieldsError()

        password_hash = hash_password(request.password)

        try:
            account_id = self._repository.create_account(
                request.username,
                request.email,
                password_hash,
            )
        except IntegrityError as e:
            if classify_integrity_error(e) == UNIQUE_VIOLATION:
                logger.info(f"Registration rejected, duplicate username or email: {request.username}")
                raise DuplicateAccountError()
            logger.error(f"Integrity error creating account: {e}")
            raise StorageError("failed to create user", operation="register")
        except SQLAlchemyError as e:
            logger.error(f"Error creating account: {e}")
            raise StorageError("failed to create user", operation="register")

        logger.info(f"Created account {account_id}")
        return RegisterResponse(id=account_id, is_verified=False)

    def list_accounts(self) -> list[Account]:
        """List every account."""
        try:
            return self._repository.list_accounts()
        except SQLAlchemyError as e:
            logger.error(f"Error listing accounts: {e}")
            raise StorageError("failed to retrieve users", operation="list_accounts")

    def get_account(self, account_id: int) -> AccountDetail:
        """Get an account with its profile, zero-valued when there is none."""
        try:
            detail = self._repository.get_account_detail(account_id)
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving account {account_id}: {e}")
            raise StorageError("failed to retrieve user", operation="get_account")

        if detail is None:
            raise AccountNotFoundError(account_id)
        return detail
