"""
Chat domain models and schemas.

Request/response schemas for the AI chat proxy.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    message: str | None = Field(default=None, description="User message")


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    success: bool = True
    response: str = Field(description="Assistant reply rendered from markdown to HTML")
