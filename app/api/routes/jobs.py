"""
Job routes.
"""
from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_current_user, get_service
from app.models.user import User
from app.schemas.job import JobResponse
from app.services import Service

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=List[JobResponse])
async def list_jobs(
    current_user: User = Depends(get_current_user),
    service: Service = Depends(get_service),
):
    """List every job across all companies."""
    return await service.list_jobs()


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: int,
    current_user: User = Depends(get_current_user),
    service: Service = Depends(get_service),
):
    """Get a single job with its company."""
    return await service.get_job_by_id(job_id)
