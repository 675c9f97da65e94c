"""
Authentication schemas.
"""
from pydantic import EmailStr, Field
from app.schemas.base import BaseSchema


class LoginRequest(BaseSchema):
    """Login request body."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseSchema):
    """Token response after successful authentication."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
