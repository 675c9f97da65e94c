"""
Company model - the employers that post jobs on the portal.
"""
from typing import TYPE_CHECKING, List
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel

if TYPE_CHECKING:
    from app.models.job import Job


class Company(BaseModel):
    """Company entity. Fields are fixed once the company is created."""

    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    jobs: Mapped[List["Job"]] = relationship(
        "Job",
        back_populates="company",
    )

    def __repr__(self) -> str:
        return f"<Company {self.name}>"
