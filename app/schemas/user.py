"""
User schemas.
"""
from pydantic import EmailStr, Field
from app.schemas.base import BaseSchema, TimestampSchema, IDSchema


class UserBase(BaseSchema):
    """Base user schema."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr


class NewUser(UserBase):
    """Registration request body."""

    password: str = Field(..., min_length=6, max_length=72)


class UserResponse(UserBase, IDSchema, TimestampSchema):
    """User response schema. Never carries the password hash."""
