"""
Accounts module interface.

Other modules should depend on IAccountService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from .models import Account, AccountDetail, RegisterRequest, RegisterResponse


@runtime_checkable
class IAccountService(Protocol):
    """
    Interface for account operations.

    This protocol defines the contract that the accounts module exposes
    to the API layer and other modules.
    """

    def register(self, request: RegisterRequest) -> RegisterResponse:
        """
        Create a new, unverified account.

        Args:
            request: Username, email and password

        Returns:
            RegisterResponse with the generated account ID

        Raises:
            MissingAccountFieldsError: If any field is empty
            DuplicateAccountError: If the username or email is taken
            StorageError: On any other store failure
        """
        ...

    def list_accounts(self) -> list[Account]:
        """
        List every account, soft-deleted ones included.

        Returns:
            Accounts ordered by ID; empty list when there are none

        Raises:
            StorageError: If the read fails
        """
        ...

    def get_account(self, account_id: int) -> AccountDetail:
        """
        Get an account together with its profile.

        Args:
            account_id: Account ID

        Returns:
            AccountDetail; profile fields are zero-valued when no profile exists

        Raises:
            AccountNotFoundError: If the account does not exist
            StorageError: If the read fails
        """
        ...
