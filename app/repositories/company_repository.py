"""
Company repository - data access for Company entity.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.company import Company
from app.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    def __init__(self):
        super().__init__(Company)

    async def exists(
        self,
        db: AsyncSession,
        company_id: int,
    ) -> bool:
        """Check if a company with this ID exists."""
        result = await db.execute(
            select(Company.id).where(Company.id == company_id)
        )
        return result.scalar_one_or_none() is not None
