"""
Seed script - populates the database with sample data for development.

Usage:
    python -m scripts.seed

Everything goes through the Service, so seeded users get real bcrypt
hashes and jobs are attached to companies the same way the API does it.

This script is IDEMPOTENT - running it twice won't create duplicates.
It checks for existing data before inserting.
"""
import asyncio

from sqlalchemy import select

from app.core.database import async_session_maker, init_db
from app.models.company import Company
from app.models.job import Job
from app.models.user import User
from app.repositories.sqlalchemy_repository import SQLAlchemyRepository
from app.schemas.company import NewCompany
from app.schemas.job import NewJob
from app.schemas.user import NewUser
from app.services import Service


# ─── Test User ─────────────────────────────────────────────────

TEST_USER = {
    "name": "Dev User",
    "email": "dev@jobportal.dev",
    "password": "password123",
}


# ─── Companies and their openings ──────────────────────────────

COMPANIES = [
    {
        "name": "airtel",
        "location": "kolkata",
        "jobs": [
            {"role": "Backend Engineer", "description": "Billing platform APIs in Go and Python"},
            {"role": "Network Analyst", "description": "Monitor and tune the core network"},
        ],
    },
    {
        "name": "dell",
        "location": "bangalore",
        "jobs": [
            {"role": "Site Reliability Engineer", "description": "Keep the support portal up"},
        ],
    },
    {
        "name": "byju",
        "location": "gurgaon",
        "jobs": [
            {"role": "Frontend Engineer", "description": "Learning app UI in React"},
            {"role": "Data Engineer", "description": "Batch pipelines for course analytics"},
        ],
    },
]


async def seed():
    """Run the seed process."""
    print("Seeding database...")

    # Initialize tables
    await init_db()
    print("  Tables created")

    async with async_session_maker() as db:
        service = Service(SQLAlchemyRepository(db))

        # ── Users ──────────────────────────────────────────
        existing = await db.execute(select(User.id).where(User.email == TEST_USER["email"]))
        if existing.scalar_one_or_none():
            print("  Users already exist, skipping...")
        else:
            await service.create_user(NewUser(**TEST_USER))
            print(f"  Created user: {TEST_USER['email']}")

        # ── Companies and jobs ─────────────────────────────
        existing = await db.execute(select(Company.id).limit(1))
        if existing.scalar_one_or_none():
            print("  Companies already exist, skipping...")
        else:
            for entry in COMPANIES:
                company = await service.create_company(
                    NewCompany(name=entry["name"], location=entry["location"])
                )
                for job in entry["jobs"]:
                    await service.create_job(NewJob(**job), company.id)
            print(f"  Created {len(COMPANIES)} companies")

        job_count = len((await db.execute(select(Job.id))).scalars().all())

    print()
    print("Seed complete!")
    print(f"  Jobs in database: {job_count}")
    print(f"  Login: {TEST_USER['email']} / {TEST_USER['password']}")


if __name__ == "__main__":
    asyncio.run(seed())
