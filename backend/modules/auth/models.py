"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, StrictInt

from shared.models import ACCOUNT_ID_MAX, ACCOUNT_ID_MIN


class TokenClaims(BaseModel):
    """
    Decoded JWT claim set.

    Only user_id is issued by default; iat/exp appear when an expiry
    is configured.
    """

    user_id: StrictInt = Field(..., ge=ACCOUNT_ID_MIN, le=ACCOUNT_ID_MAX, description="Account ID")
    iat: Optional[datetime] = Field(None, description="Issued at")
    exp: Optional[datetime] = Field(None, description="Expiration")


class SignInRequest(BaseModel):
    """Sign-in payload."""

    username: str = Field(default="", description="Account username")
    password: str = Field(default="", description="Plaintext password")


class SignInResponse(BaseModel):
    """Result of a successful sign-in."""

    token: str = Field(..., description="Signed bearer token")
    user_id: int = Field(..., description="Account ID")
    is_verified: bool = Field(..., description="Whether the account has a profile")
