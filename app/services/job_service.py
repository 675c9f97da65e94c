"""
Job service - listing, lookup and creation of job postings.
"""
from typing import List

from app.models.job import Job
from app.schemas.job import NewJob
from app.services.base import BaseService


class JobService(BaseService):
    """Handles job listing, detail retrieval and posting."""

    async def list_jobs(self) -> List[Job]:
        return await self.repo.view_all_jobs()

    async def get_job_by_id(self, job_id: int) -> Job:
        """
        Get a single job.

        Raises:
            NotFoundError: If the job doesn't exist.
        """
        return await self.repo.view_job_details_by_id(job_id)

    async def list_jobs_by_company_id(self, company_id: int) -> List[Job]:
        """Jobs posted by one company. An empty list is not an error."""
        return await self.repo.view_job_by_company_id(company_id)

    async def create_job(self, new_job: NewJob, company_id: int) -> Job:
        """
        Post a job under an existing company.

        Raises:
            NotFoundError: If the company doesn't exist.
            RepositoryError: If the repository rejects the job.
        """
        job = Job(
            company_id=company_id,
            role=new_job.role,
            description=new_job.description,
        )
        return await self.repo.create_job(job)
