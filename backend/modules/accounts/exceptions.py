"""
Accounts module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class MissingAccountFieldsError(ValidationError):
    """Raised when registration is missing the username, email or password."""

    def __init__(self):
        super().__init__(
            "username, email, and password are required",
            code="MISSING_ACCOUNT_FIELDS",
        )


class DuplicateAccountError(ConflictError):
    """Raised when the username or email is already registered."""

    def __init__(self):
        super().__init__(
            "username or email already exists",
            code="DUPLICATE_ACCOUNT",
        )


class AccountNotFoundError(NotFoundError):
    """Raised when no account exists for the given ID."""

    def __init__(self, account_id: int):
        super().__init__(
            "user not found",
            code="ACCOUNT_NOT_FOUND",
            details={"account_id": account_id},
        )
