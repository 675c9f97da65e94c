"""
Company service - listing, lookup and creation of companies.
"""
from typing import List

from app.models.company import Company
from app.schemas.company import NewCompany
from app.services.base import BaseService


class CompanyService(BaseService):
    """Handles company listing and management."""

    async def list_companies(self) -> List[Company]:
        """Get all companies in repository order."""
        return await self.repo.view_companies()

    async def get_company_by_id(self, company_id: int) -> Company:
        """
        Get a single company.

        Raises:
            NotFoundError: If the company doesn't exist.
        """
        return await self.repo.view_company_by_id(company_id)

    async def create_company(self, new_company: NewCompany) -> Company:
        company = Company(
            name=new_company.name,
            location=new_company.location,
        )
        return await self.repo.create_company(company)
