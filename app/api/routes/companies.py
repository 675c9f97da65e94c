"""
Company routes, including the jobs nested under a company.

Thin controllers - Service does the work.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from app.api.deps import get_current_user, get_service
from app.models.user import User
from app.schemas.company import CompanyResponse, NewCompany
from app.schemas.job import JobResponse, NewJob
from app.services import Service

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=List[CompanyResponse])
async def list_companies(
    current_user: User = Depends(get_current_user),
    service: Service = Depends(get_service),
):
    """List all companies."""
    return await service.list_companies()


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
async def create_company(
    data: NewCompany,
    current_user: User = Depends(get_current_user),
    service: Service = Depends(get_service),
):
    """Create a new company."""
    return await service.create_company(data)


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: int,
    current_user: User = Depends(get_current_user),
    service: Service = Depends(get_service),
):
    """Get a single company by ID."""
    return await service.get_company_by_id(company_id)


@router.get("/{company_id}/jobs", response_model=List[JobResponse])
async def list_company_jobs(
    company_id: int,
    current_user: User = Depends(get_current_user),
    service: Service = Depends(get_service),
):
    """List the jobs posted by one company."""
    return await service.list_jobs_by_company_id(company_id)


@router.post(
    "/{company_id}/jobs",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_company_job(
    company_id: int,
    data: NewJob,
    current_user: User = Depends(get_current_user),
    service: Service = Depends(get_service),
):
    """Post a job under a company."""
    return await service.create_job(data, company_id)
