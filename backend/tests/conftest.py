"""
Test fixtures shared across all tests.

Architecture:
- The app's default database is in-memory SQLite on a StaticPool, so all
  sessions (ours and the app's) share one connection for the whole run.
- pyproject.toml sets the asyncio fixture/test loop scope to session so
  every test runs on the same event loop as that connection.
- The HTTP test client uses the real FastAPI app via httpx's ASGITransport.
  ASGITransport does not run the lifespan, so setup_db creates the tables.
- Each test signs up a user with a unique email to avoid collisions.
- Generated PDFs go to a per-test temporary directory.
"""

import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from assessment_api.config import settings
from assessment_api.database import Base, engine
from assessment_api.main import app


@pytest_asyncio.fixture(scope="session")
async def setup_db():
    """Create all tables once before the test session."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield


@pytest.fixture(autouse=True)
def reports_dir(tmp_path, monkeypatch):
    """Point report storage at a throwaway directory."""
    path = tmp_path / "reports"
    monkeypatch.setattr(settings, "REPORTS_DIR", str(path))
    return path


@pytest_asyncio.fixture
async def client(setup_db):
    """Async HTTP test client against the real app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def credentials():
    """Fresh signup payload with a unique email."""
    return {
        "email": f"test_{uuid.uuid4().hex[:8]}@example.com",
        "password": "s3cret-pass",
        "name": "Test User",
    }


@pytest_asyncio.fixture
async def registered_user(client: AsyncClient, credentials):
    """Sign up through the API and return the response body plus password."""
    response = await client.post("/api/auth/signup", json=credentials)
    assert response.status_code == 201, response.text
    body = response.json()
    body["password"] = credentials["password"]
    return body


@pytest.fixture
def auth_headers(registered_user):
    return {"Authorization": f"Bearer {registered_user['token']}"}
