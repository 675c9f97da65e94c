"""
Job repository - data access for Job entity.

Every query eagerly loads Job.company so responses can be built
outside the session without lazy loads.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.job import Job
from app.repositories.base import BaseRepository


class JobRepository(BaseRepository[Job]):
    def __init__(self):
        super().__init__(Job)

    async def get_all_with_company(
        self,
        db: AsyncSession,
    ) -> List[Job]:
        """Get all jobs with their company, in insertion order."""
        result = await db.execute(
            select(Job)
            .options(selectinload(Job.company))
            .order_by(Job.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def get_with_company(
        self,
        db: AsyncSession,
        job_id: int,
    ) -> Optional[Job]:
        """Get a job with company eagerly loaded."""
        result = await db.execute(
            select(Job)
            .options(selectinload(Job.company))
            .where(Job.id == job_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_company(
        self,
        db: AsyncSession,
        company_id: int,
    ) -> List[Job]:
        """Get every job posted by one company."""
        result = await db.execute(
            select(Job)
            .options(selectinload(Job.company))
            .where(Job.company_id == company_id)
            .order_by(Job.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())
