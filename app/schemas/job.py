"""
Job schemas.
"""
from typing import Optional
from pydantic import Field
from app.schemas.base import BaseSchema, TimestampSchema, IDSchema


class CompanyBrief(BaseSchema):
    """Brief company info for job responses."""

    id: int
    name: str
    location: str


class JobBase(BaseSchema):
    """Base job schema."""

    role: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class NewJob(JobBase):
    """Job creation schema. The owning company comes from the URL."""

    pass


class JobResponse(JobBase, IDSchema, TimestampSchema):
    """Job response schema."""

    company_id: int
    company: Optional[CompanyBrief] = None
