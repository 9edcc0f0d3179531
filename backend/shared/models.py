"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field

# users.id is a 32-bit INTEGER column; IDs outside this range never match a row
ACCOUNT_ID_MIN = 1
ACCOUNT_ID_MAX = 2**31 - 1


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated account in the system.

    Populated from the verified token claims and made available
    to route handlers via dependency injection.
    """

    id: int = Field(
        ...,
        ge=ACCOUNT_ID_MIN,
        le=ACCOUNT_ID_MAX,
        description="Account ID taken from the user_id claim",
    )

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
