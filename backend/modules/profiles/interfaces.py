"""
Profiles module interface.
"""

from typing import Protocol, runtime_checkable

from .models import ProfileCreate, ProfileUpdate


@runtime_checkable
class IProfileService(Protocol):
    """
    Interface for profile mutations.

    The account ID is always resolved by the caller from a verified token.
    """

    def create_profile(self, account_id: int, request: ProfileCreate) -> None:
        """
        Create the account's profile and mark the account verified.

        Both writes happen in one transaction.

        Raises:
            MissingFullNameError: If full_name is empty
            ProfileOwnerNotFoundError: If the account does not exist
            ProfileAlreadyExistsError: If the account already has a profile
            StorageError: On any other store failure (nothing is persisted)
        """
        ...

    def update_profile(self, account_id: int, request: ProfileUpdate) -> None:
        """
        Update only the supplied profile fields.

        Raises:
            EmptyProfileUpdateError: If no field is supplied
            MissingFullNameError: If full_name is supplied but empty
            ProfileNotFoundError: If the account has no profile
            StorageError: If the update fails
        """
        ...

    def delete_account(self, account_id: int) -> None:
        """
        Soft-delete the account and its profile.

        Raises:
            AccountNotFoundError: If the account does not exist
            StorageError: If either update fails (both are rolled back)
        """
        ...
