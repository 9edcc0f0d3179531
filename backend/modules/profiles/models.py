"""
Profiles module data models.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class ProfileCreate(BaseModel):
    """Profile creation payload. Only full_name is required."""

    full_name: str = Field(default="", description="Full name (required)")
    age: Optional[int] = Field(default=None, ge=0, description="Age in years")
    gender: Optional[str] = Field(default=None, description="Free-text gender")


class ProfileUpdate(BaseModel):
    """
    Partial profile update.

    A field is supplied when it is present and not null. Zero and empty
    values are real values, not "unset" markers.
    """

    full_name: Optional[str] = Field(default=None, description="New full name")
    age: Optional[int] = Field(default=None, ge=0, description="New age")
    gender: Optional[str] = Field(default=None, description="New gender")

    def supplied_fields(self) -> dict[str, Any]:
        """Return the supplied fields in column order."""
        return self.model_dump(exclude_none=True)


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str
