"""
Integration tests for SQLAlchemyRepository against an in-memory SQLite database.
"""
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from app.core.exceptions import (
    CompanyNotFoundException,
    ConflictError,
    EmailAlreadyExistsException,
    JobNotFoundException,
    NotFoundError,
    RepositoryError,
)
from app.models.company import Company
from app.models.job import Job
from app.models.user import User
from app.repositories.sqlalchemy_repository import SQLAlchemyRepository


@pytest.fixture
def repo(db_session):
    return SQLAlchemyRepository(db_session)


async def _company(repo, name="airtel", location="kolkata") -> Company:
    return await repo.create_company(Company(name=name, location=location))


@pytest.mark.integration
class TestUserPersistence:

    @pytest.mark.asyncio
    async def test_create_and_lookup_by_email(self, repo):
        created = await repo.create_user(
            User(name="tina", email="hr@gmail.com", password_hash="$2b$04$hash")
        )

        found = await repo.user_login("hr@gmail.com")

        assert created.id is not None
        assert found.id == created.id
        assert found.password_hash == "$2b$04$hash"

    @pytest.mark.asyncio
    async def test_unknown_email_is_not_found(self, repo):
        with pytest.raises(NotFoundError):
            await repo.user_login("nobody@gmail.com")

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, repo):
        await repo.create_user(User(name="tina", email="hr@gmail.com", password_hash="h1"))

        with pytest.raises(EmailAlreadyExistsException) as exc_info:
            await repo.create_user(User(name="other", email="hr@gmail.com", password_hash="h2"))

        assert isinstance(exc_info.value, ConflictError)


@pytest.mark.integration
class TestCompanyPersistence:

    @pytest.mark.asyncio
    async def test_companies_listed_in_creation_order(self, repo):
        dell = await _company(repo, "dell", "bangalore")
        vipre = await _company(repo, "vipre", "bangalore")

        companies = await repo.view_companies()

        assert [c.id for c in companies] == [dell.id, vipre.id]
        assert [c.id for c in await repo.view_companies()] == [c.id for c in companies]

    @pytest.mark.asyncio
    async def test_view_company_by_id(self, repo):
        company = await _company(repo)

        found = await repo.view_company_by_id(company.id)

        assert (found.name, found.location) == ("airtel", "kolkata")

    @pytest.mark.asyncio
    async def test_missing_company(self, repo):
        with pytest.raises(CompanyNotFoundException):
            await repo.view_company_by_id(404)


@pytest.mark.integration
class TestJobPersistence:

    @pytest.mark.asyncio
    async def test_create_job_loads_company(self, repo):
        company = await _company(repo)

        job = await repo.create_job(Job(company_id=company.id, role="z", description="ma"))

        assert job.id is not None
        assert job.company.name == "airtel"

    @pytest.mark.asyncio
    async def test_create_job_for_unknown_company(self, repo):
        with pytest.raises(CompanyNotFoundException):
            await repo.create_job(Job(company_id=999, role="z"))

    @pytest.mark.asyncio
    async def test_jobs_filtered_by_company(self, repo):
        airtel = await _company(repo, "airtel", "kolkata")
        dell = await _company(repo, "dell", "bangalore")
        first = await repo.create_job(Job(company_id=airtel.id, role="adobe", description="new york"))
        await repo.create_job(Job(company_id=dell.id, role="other"))
        second = await repo.create_job(Job(company_id=airtel.id, role="bc", description="qr"))

        jobs = await repo.view_job_by_company_id(airtel.id)

        assert [j.id for j in jobs] == [first.id, second.id]
        assert len(await repo.view_all_jobs()) == 3

    @pytest.mark.asyncio
    async def test_company_without_jobs(self, repo):
        company = await _company(repo)

        assert await repo.view_job_by_company_id(company.id) == []

    @pytest.mark.asyncio
    async def test_view_job_details(self, repo):
        company = await _company(repo)
        job = await repo.create_job(Job(company_id=company.id, role="xyz", description="abcd"))

        found = await repo.view_job_details_by_id(job.id)

        assert found.role == "xyz"
        assert found.company.id == company.id

    @pytest.mark.asyncio
    async def test_missing_job(self, repo):
        with pytest.raises(JobNotFoundException):
            await repo.view_job_details_by_id(404)


def _driver_error():
    return OperationalError("SELECT 1", {}, Exception("server closed the connection"))


@pytest.mark.integration
class TestDatabaseFailures:

    @pytest.mark.asyncio
    async def test_not_null_violation_conflicts_and_rolls_back(self, repo):
        company = await _company(repo)
        company_id = company.id

        with pytest.raises(ConflictError) as exc_info:
            await repo.create_job(Job(company_id=company_id, role=None))

        assert isinstance(exc_info.value.__cause__, IntegrityError)
        assert await repo.view_job_by_company_id(company_id) == []
        assert [c.name for c in await repo.view_companies()] == ["airtel"]

    @pytest.mark.asyncio
    async def test_session_accepts_writes_after_conflict(self, repo):
        with pytest.raises(ConflictError):
            await repo.create_company(Company(name=None, location="kolkata"))

        company = await _company(repo, "dell", "bangalore")

        assert company.id is not None
        assert [c.name for c in await repo.view_companies()] == ["dell"]

    @pytest.mark.asyncio
    async def test_read_driver_error_is_repository_error(self, repo, db_session):
        await _company(repo)

        with patch.object(db_session, "execute", AsyncMock(side_effect=_driver_error())):
            with pytest.raises(RepositoryError) as exc_info:
                await repo.view_companies()

        assert not isinstance(exc_info.value, (ConflictError, NotFoundError))
        assert exc_info.value.status_code == 500
        assert [c.name for c in await repo.view_companies()] == ["airtel"]

    @pytest.mark.asyncio
    async def test_lookup_driver_error_is_not_a_missing_user(self, repo, db_session):
        with patch.object(db_session, "execute", AsyncMock(side_effect=_driver_error())):
            with pytest.raises(RepositoryError) as exc_info:
                await repo.user_login("hr@gmail.com")

        assert exc_info.value.code == "REPOSITORY_ERROR"

    @pytest.mark.asyncio
    async def test_write_driver_error_is_repository_error(self, repo, db_session):
        with patch.object(db_session, "flush", AsyncMock(side_effect=_driver_error())):
            with pytest.raises(RepositoryError) as exc_info:
                await repo.create_company(Company(name="byju", location="gurgaon"))

        assert not isinstance(exc_info.value, ConflictError)
        assert isinstance(exc_info.value.__cause__, OperationalError)

        company = await _company(repo, "byju", "gurgaon")
        assert [c.id for c in await repo.view_companies()] == [company.id]
