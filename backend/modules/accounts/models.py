"""
Accounts module data models.

These models define the data structures used by the accounts module
and exposed to other modules through the interface.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """
    Account registration payload.

    Fields default to empty strings so that a missing field is reported
    with the same message as an empty one.
    """

    username: str = Field(default="", description="Unique login identity")
    email: str = Field(default="", description="Unique contact address")
    password: str = Field(default="", description="Plaintext secret, hashed before storage")


class RegisterResponse(BaseModel):
    """Response returned after a successful registration."""

    message: str = "Account created successfully"
    id: int = Field(..., description="Generated account ID")
    is_verified: bool = Field(default=False, description="Always false for new accounts")


class Account(BaseModel):
    """
    Public view of an account row.

    The password hash is never part of this model.
    """

    id: int
    username: str
    email: str
    is_verified: bool = False
    is_deleted: bool = False


class AccountProfile(BaseModel):
    """
    Profile fields as seen through the account detail view.

    An account without a profile row reports zero values.
    """

    full_name: str = ""
    age: int = 0
    gender: str = ""


class AccountDetail(BaseModel):
    """Account joined with its (possibly empty) profile."""

    user: Account
    profile: AccountProfile = Field(default_factory=AccountProfile)


class AccountCredentials(BaseModel):
    """Stored credentials needed to authenticate a sign-in. Internal only."""

    id: int
    password_hash: str
    is_verified: bool = False
