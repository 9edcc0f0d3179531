"""
Profile service implementation.

Creates, partially updates and soft-deletes profiles. Store errors are
classified here; transactions are already rolled back by the repository
by the time an exception reaches this layer.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from shared.database import (
    FOREIGN_KEY_VIOLATION,
    UNIQUE_VIOLATION,
    classify_integrity_error,
)
from shared.exceptions import StorageError
from modules.accounts.exceptions import AccountNotFoundError

from .interfaces import IProfileService
from .models import ProfileCreate, ProfileUpdate
from .repository import ProfileRepository
from .exceptions import (
    EmptyProfileUpdateError,
    MissingFullNameError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
    ProfileOwnerNotFoundError,
)

logger = logging.getLogger(__name__)


class ProfileService(IProfileService):
    """Profile service backed by the relational store."""

    def __init__(self, repository: ProfileRepository):
        self._repository = repository

    def create_profile(self, account_id: int, request: ProfileCreate) -> None:
        if not request.full_name:
            raise MissingFullNameError()

        try:
            self._repository.create_profile(
                account_id,
                request.full_name,
                age=request.age,
                gender=request.gender,
            )
        except IntegrityError as e:
            code = classify_integrity_error(e)
            if code == FOREIGN_KEY_VIOLATION:
                raise ProfileOwnerNotFoundError(account_id)
            if code == UNIQUE_VIOLATION:
                raise ProfileAlreadyExistsError(account_id)
            logger.error(f"Integrity error creating profile for account {account_id}: {e}")
            raise StorageError("failed to create profile", operation="create_profile")
        except SQLAlchemyError as e:
            logger.error(f"Error creating profile for account {account_id}, rolled back: {e}")
            raise StorageError("failed to create profile", operation="create_profile")

        logger.info(f"Created profile for account {account_id}")

    def update_profile(self, account_id: int, request: ProfileUpdate) -> None:
        fields = request.supplied_fields()
        if not fields:
            raise EmptyProfileUpdateError()
        if "full_name" in fields and not fields["full_name"]:
            raise MissingFullNameError()

        try:
            matched = self._repository.update_profile(account_id, fields)
        except SQLAlchemyError as e:
            logger.error(f"Error updating profile for account {account_id}: {e}")
            raise StorageError("failed to update profile", operation="update_profile")

        if matched == 0:
            raise ProfileNotFoundError(account_id)

    def delete_account(self, account_id: int) -> None:
        try:
            found = self._repository.soft_delete(account_id)
        except SQLAlchemyError as e:
            logger.error(f"Error soft-deleting account {account_id}, rolled back: {e}")
            raise StorageError("failed to delete user", operation="delete_account")

        if not found:
            raise AccountNotFoundError(account_id)

        logger.info(f"Soft-deleted account {account_id}")
