"""
Shared infrastructure for the Accounts backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Engine factory and store error classification
- tables: SQLAlchemy Core table definitions
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    create_db_engine,
    create_engine_from_settings,
    create_schema,
    check_connection,
    classify_integrity_error,
)
from .exceptions import (
    AccountsError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    StorageError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "create_db_engine",
    "create_engine_from_settings",
    "create_schema",
    "check_connection",
    "classify_integrity_error",
    "AccountsError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "StorageError",
    "AuthenticatedUser",
]
