"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format: a single error string."""

    error: str
