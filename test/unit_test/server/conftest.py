from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel.pool import StaticPool

from scouts.core.database import build_sql_repos, create_all, create_engine, create_sessionmaker

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(name="client")
async def client_fixture(test_engine) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client bound to the test database.

    ``ASGITransport`` does not run the lifespan, so the application engine is
    never touched.
    """
    from scouts.core.database.session import get_session
    from scouts.server.main import app
    from scouts.server.services.deps import get_repos

    session_factory = create_sessionmaker(test_engine)

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_repos] = lambda: build_sql_repos(session_factory=session_factory)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def group(client: AsyncClient) -> dict:
    response = await client.post("/api/v1/groups", json={"name": "Wolf Cubs"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def scout_payload():
    def _payload(**overrides) -> dict:
        payload = {
            "name": "Max Muster",
            "birth_date": "2012-05-17",
            "address": "Hauptstr. 1, 12345 Musterstadt",
            "phone_number": "+49 30 123456",
            "health_insurance": "AOK",
            "allergy_info": "",
            "vaccination_info": "",
            "contacts": [
                {
                    "name": "Anna Muster",
                    "phone_number": "+49 170 1234567",
                    "email": "anna@example.org",
                    "relationship": "mother",
                }
            ],
            "group_ids": [],
            "last_updated": "2025-01-15",
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def event_payload():
    def _payload(**overrides) -> dict:
        payload = {
            "name": "Summer Camp",
            "start_date": "2025-07-01",
            "end_date": "2025-07-14",
            "meeting_point": "Train station",
            "location": "Lake Camp",
            "cost": "120 EUR",
            "additional_info": "",
            "group_ids": [],
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest_asyncio.fixture
async def scout(client: AsyncClient, scout_payload) -> dict:
    response = await client.post("/api/v1/scouts", json=scout_payload())
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def event(client: AsyncClient, event_payload) -> dict:
    response = await client.post("/api/v1/events", json=event_payload())
    assert response.status_code == 201
    return response.json()
