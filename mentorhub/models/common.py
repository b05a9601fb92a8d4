"""
Common response models.

Generic status and error envelopes shared by all routes.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Status envelope with a human-readable message."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    message: str = Field(description="Client-safe error message")
