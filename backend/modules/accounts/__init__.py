"""
Accounts module.

Handles registration and account retrieval.

Public API:
- IAccountService: Interface for account operations
- Account, AccountDetail, AccountProfile: Account views
- RegisterRequest, RegisterResponse: Registration payloads
- Account exceptions: DuplicateAccountError, AccountNotFoundError, etc.
"""

from .interfaces import IAccountService
from .models import (
    Account,
    AccountCredentials,
    AccountDetail,
    AccountProfile,
    RegisterRequest,
    RegisterResponse,
)
from .exceptions import (
    MissingAccountFieldsError,
    DuplicateAccountError,
    AccountNotFoundError,
)

__all__ = [
    # Interface
    "IAccountService",
    # Models
    "Account",
    "AccountCredentials",
    "AccountDetail",
    "AccountProfile",
    "RegisterRequest",
    "RegisterResponse",
    # Exceptions
    "MissingAccountFieldsError",
    "DuplicateAccountError",
    "AccountNotFoundError",
]
