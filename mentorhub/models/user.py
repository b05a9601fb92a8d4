"""
User domain models and schemas.

Request/response schemas for registration, login and profile operations.
Request fields are optional at the schema level; presence is checked by
the service so a missing field yields a 400 with a readable message.

Dependencies: pydantic
System role: User API contracts
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field

from mentorhub.core.roles import UserRole


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    username: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = Field(default=None, description="'mentor' or 'student'")
    courses: list[str] | None = Field(default=None, description="Course identifiers")
    contact: str | None = Field(default=None, description="Comma-separated contact details")


class LoginRequest(BaseModel):
    """Request schema for login."""

    username: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    success: bool = True
    message: str = "Login successful"
    role: UserRole


class UserResponse(BaseModel):
    """Public view of a user record; never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str
    email: str
    role: UserRole
    courses: list[str]
    contact: list[str]


class ProfileDetail(BaseModel):
    """Profile fields returned by /api/user/profile."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    email: str
    role: UserRole
    courses: list[str]
    contact: list[str]


class ProfileResponse(BaseModel):
    """Response schema for /api/user/profile."""

    success: bool = True
    user: ProfileDetail


class ProfileSummaryResponse(BaseModel):
    """Response schema for /user/profile."""

    success: bool = True
    name: str
    role: UserRole
