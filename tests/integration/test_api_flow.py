"""
End-to-end flow over HTTP with the real repository on SQLite:
signup, login, then company and job management with the issued token.
"""
import pytest

from app.core.database import get_db
from app.main import app

API = "/api/v1"


@pytest.fixture
def use_test_db(session_maker):
    async def _get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db


@pytest.mark.integration
@pytest.mark.asyncio
async def test_portal_flow(client, use_test_db):
    resp = await client.post(
        f"{API}/signup",
        json={"name": "tina", "email": "hr@gmail.com", "password": "12345678"},
    )
    assert resp.status_code == 201
    user_id = resp.json()["id"]

    resp = await client.post(
        f"{API}/signup",
        json={"name": "tina", "email": "hr@gmail.com", "password": "12345678"},
    )
    assert resp.status_code == 409

    resp = await client.post(f"{API}/login", json={"email": "hr@gmail.com", "password": "12345678"})
    assert resp.status_code == 200
    headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}

    resp = await client.post(
        f"{API}/companies", json={"name": "airtel", "location": "kolkata"}, headers=headers
    )
    assert resp.status_code == 201
    company_id = resp.json()["id"]

    resp = await client.post(
        f"{API}/companies/{company_id}/jobs",
        json={"role": "Backend Engineer", "description": "APIs"},
        headers=headers,
    )
    assert resp.status_code == 201
    job = resp.json()
    assert job["company"]["name"] == "airtel"

    resp = await client.get(f"{API}/companies/{company_id}/jobs", headers=headers)
    assert [j["id"] for j in resp.json()] == [job["id"]]

    resp = await client.get(f"{API}/jobs/{job['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["role"] == "Backend Engineer"

    resp = await client.post(
        f"{API}/companies/999/jobs", json={"role": "ghost"}, headers=headers
    )
    assert resp.status_code == 404

    assert user_id >= 1


@pytest.mark.integration
@pytest.mark.asyncio
async def test_login_with_wrong_password(client, use_test_db):
    await client.post(
        f"{API}/signup",
        json={"name": "tina", "email": "hr@gmail.com", "password": "12345678"},
    )

    resp = await client.post(f"{API}/login", json={"email": "hr@gmail.com", "password": "nope-nope"})

    assert resp.status_code == 401
    assert resp.json()["error"] == "AUTHENTICATION_FAILED"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_login_with_unregistered_email(client, use_test_db):
    resp = await client.post(f"{API}/login", json={"email": "ghost@gmail.com", "password": "12345678"})

    assert resp.status_code == 401
    assert resp.json()["error"] == "INVALID_CREDENTIALS"
