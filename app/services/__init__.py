"""
Service layer - business logic and orchestration.

Services contain the application's business logic and coordinate between
the repository, password hashing and claims construction.

RULE: Routes call services. Services call the repository. Never the reverse.
"""
from app.services.base import BaseService
from app.services.user_service import UserService
from app.services.company_service import CompanyService
from app.services.job_service import JobService


class Service(UserService, CompanyService, JobService):
    """Every service operation behind one object, built once per repository."""


__all__ = [
    "BaseService",
    "Service",
    "UserService",
    "CompanyService",
    "JobService",
]
