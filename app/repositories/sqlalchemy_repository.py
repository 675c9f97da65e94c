"""
SQLAlchemy implementation of the Repository contract.

Binds one AsyncSession (one request) to the per-entity repositories and
turns "no row" results and driver errors into RepositoryError subclasses.
"""
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    CompanyNotFoundException,
    ConflictError,
    EmailAlreadyExistsException,
    JobNotFoundException,
    RepositoryError,
    UserNotFoundException,
)
from app.core.logging import get_logger
from app.models.company import Company
from app.models.job import Job
from app.models.user import User
from app.repositories.company_repository import CompanyRepository
from app.repositories.interfaces import Repository
from app.repositories.job_repository import JobRepository
from app.repositories.user_repository import UserRepository

logger = get_logger(__name__)


class SQLAlchemyRepository(Repository):
    """Repository backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.user_repo = UserRepository()
        self.company_repo = CompanyRepository()
        self.job_repo = JobRepository()

    # ─── Users ─────────────────────────────────────────────────

    async def create_user(self, user: User) -> User:
        if await self._run(self.user_repo.email_exists(self.db, user.email)):
            raise EmailAlreadyExistsException()
        return await self._write(self.user_repo.add(self.db, user))

    async def user_login(self, email: str) -> User:
        user = await self._run(self.user_repo.get_by_email(self.db, email))
        if user is None:
            raise UserNotFoundException()
        return user

    # ─── Companies ─────────────────────────────────────────────

    async def view_companies(self) -> List[Company]:
        return await self._run(self.company_repo.get_all(self.db))

    async def view_company_by_id(self, company_id: int) -> Company:
        company = await self._run(self.company_repo.get_by_id(self.db, company_id))
        if company is None:
            raise CompanyNotFoundException()
        return company

    async def create_company(self, company: Company) -> Company:
        return await self._write(self.company_repo.add(self.db, company))

    # ─── Jobs ──────────────────────────────────────────────────

    async def view_all_jobs(self) -> List[Job]:
        return await self._run(self.job_repo.get_all_with_company(self.db))

    async def view_job_details_by_id(self, job_id: int) -> Job:
        job = await self._run(self.job_repo.get_with_company(self.db, job_id))
        if job is None:
            raise JobNotFoundException()
        return job

    async def view_job_by_company_id(self, company_id: int) -> List[Job]:
        return await self._run(self.job_repo.get_by_company(self.db, company_id))

    async def create_job(self, job: Job) -> Job:
        # SQLite does not enforce foreign keys by default, so check explicitly
        if not await self._run(self.company_repo.exists(self.db, job.company_id)):
            raise CompanyNotFoundException()
        job = await self._write(self.job_repo.add(self.db, job))
        return await self._run(self.job_repo.get_with_company(self.db, job.id))

    # ─── Helpers ───────────────────────────────────────────────

    async def _run(self, operation):
        """Await a read, wrapping driver failures."""
        try:
            return await operation
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.error("repository_query_failed", error=str(exc))
            raise RepositoryError() from exc

    async def _write(self, operation):
        """Await a write and commit it, rolling back on failure."""
        try:
            instance = await operation
            await self.db.commit()
            return instance
        except IntegrityError as exc:
            await self.db.rollback()
            logger.warning("repository_integrity_error", error=str(exc.orig))
            raise ConflictError("record violates a database constraint") from exc
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.error("repository_write_failed", error=str(exc))
            raise RepositoryError() from exc
