"""Pydantic schemas for authentication endpoints.

Credential fields are optional at the schema level so that a missing
field produces the endpoint's own error (400 on register, 401 on login)
rather than a generic validation failure.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request body for user registration."""

    email: str | None = Field(None, description="User's email address")
    password: str | None = Field(None, description="User's password")


class LoginRequest(BaseModel):
    """Request body for user login."""

    email: str | None = Field(None, description="User's email address")
    password: str | None = Field(None, description="User's password")


class MessageResponse(BaseModel):
    message: str = Field(..., description="Human-readable result")


class LoginResponse(BaseModel):
    """Response for successful login."""

    message: str = Field(..., description="Human-readable result")
    token: str = Field(..., description="JWT access token")
