"""
Repository contract consumed by the service layer.

The service only ever talks to this interface. Implementations raise
RepositoryError (or NotFoundError / ConflictError) on failure.
"""
from abc import ABC, abstractmethod
from typing import List

from app.models.company import Company
from app.models.job import Job
from app.models.user import User


class Repository(ABC):
    """Data access for users, companies and jobs."""

    @abstractmethod
    async def create_user(self, user: User) -> User:
        """Persist a new user"""

    @abstractmethod
    async def user_login(self, email: str) -> User:
        """Fetch the user (with password hash) registered under an email"""

    @abstractmethod
    async def view_companies(self) -> List[Company]:
        """All companies"""

    @abstractmethod
    async def view_company_by_id(self, company_id: int) -> Company:
        """One company"""

    @abstractmethod
    async def create_company(self, company: Company) -> Company:
        """Persist a new company"""

    @abstractmethod
    async def view_all_jobs(self) -> List[Job]:
        """All jobs"""

    @abstractmethod
    async def view_job_details_by_id(self, job_id: int) -> Job:
        """One job"""

    @abstractmethod
    async def view_job_by_company_id(self, company_id: int) -> List[Job]:
        """Jobs posted by one company, possibly none"""

    @abstractmethod
    async def create_job(self, job: Job) -> Job:
        """Persist a new job for an existing company"""
