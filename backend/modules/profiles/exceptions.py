"""
Profiles module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class MissingFullNameError(ValidationError):
    """Raised when a profile is created, or renamed, with an empty full name."""

    def __init__(self):
        super().__init__("full name is required", code="MISSING_FULL_NAME")


class EmptyProfileUpdateError(ValidationError):
    """Raised when a partial update supplies no fields at all."""

    def __init__(self):
        super().__init__("no profile fields to update", code="EMPTY_PROFILE_UPDATE")


class ProfileOwnerNotFoundError(ConflictError):
    """
    Raised when the profile's account does not exist.

    Surfaced from a foreign key violation; answered with 400 rather than 409.
    """

    status_code = 400

    def __init__(self, account_id: int):
        super().__init__(
            "user does not exist",
            code="PROFILE_OWNER_NOT_FOUND",
            details={"account_id": account_id},
        )


class ProfileAlreadyExistsError(ConflictError):
    """Raised when the account already has a profile."""

    def __init__(self, account_id: int):
        super().__init__(
            "profile already exists",
            code="PROFILE_ALREADY_EXISTS",
            details={"account_id": account_id},
        )


class ProfileNotFoundError(NotFoundError):
    """Raised when an update targets an account without a profile."""

    def __init__(self, account_id: int):
        super().__init__(
            "profile not found",
            code="PROFILE_NOT_FOUND",
            details={"account_id": account_id},
        )
