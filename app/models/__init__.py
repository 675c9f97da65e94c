"""
Database models for the job portal.

All models use integer primary keys and include created_at/updated_at timestamps.
"""
from app.models.base import BaseModel, TimestampMixin, IDMixin
from app.models.company import Company
from app.models.job import Job
from app.models.user import User

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "IDMixin",
    "Company",
    "Job",
    "User",
]
