"""
Company schemas.
"""
from pydantic import Field
from app.schemas.base import BaseSchema, TimestampSchema, IDSchema


class CompanyBase(BaseSchema):
    """Base company schema."""

    name: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=255)


class NewCompany(CompanyBase):
    """Company creation schema."""

    pass


class CompanyResponse(CompanyBase, IDSchema, TimestampSchema):
    """Company response schema."""
