"""
Pytest fixtures for testing.
"""
import pytest
import pytest_asyncio
from typing import AsyncGenerator
from uuid import uuid4

from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from job_portal.database import Database, get_database
from job_portal.main import app as fastapi_app


@pytest.fixture
def db() -> Database:
    """
    Fresh in-memory MongoDB for each test.
    The app's get_database dependency is pointed at it for the test's duration.
    """
    client = AsyncMongoMockClient()
    database = Database(client[f"job-portal-test-{uuid4().hex}"])

    fastapi_app.dependency_overrides[get_database] = lambda: database
    try:
        yield database
    finally:
        fastapi_app.dependency_overrides.pop(get_database, None)


@pytest_asyncio.fixture
async def client(db: Database) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client for testing endpoints.

    raise_app_exceptions=False lets tests observe the 500 response produced
    by the app's error handler instead of the re-raised exception.
    """
    transport = ASGITransport(app=fastapi_app, raise_app_exceptions=False)

    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def job_data() -> dict:
    return {
        "title": "Senior Software Engineer",
        "company": "Test Corp",
        "location": "San Francisco, CA",
        "salaryRange": {"min": 120000, "max": 160000, "currency": "usd"},
        "hr_email": "hr@testcorp.com",
        "jobType": "Full-time",
        "requirements": ["Python", "FastAPI", "MongoDB"],
    }


@pytest.fixture
def application_data() -> dict:
    return {
        "job_id": "65a1f0c2e4b0a1b2c3d4e5f6",
        "applicant_email": "applicant@example.com",
        "linkedIn": "https://linkedin.com/in/applicant",
        "resume": "https://example.com/resume.pdf",
    }
