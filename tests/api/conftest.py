"""API test fixtures — FastAPI test clients over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - client sends the configured API key on every request; anon_client sends none
    - db_manager patched so the readiness check hits the test engine

Design Decisions:
    - Lifespan not run by ASGITransport: the app never touches the configured DATABASE_URL
"""

import pytest
from httpx import ASGITransport, AsyncClient

import task_api.infrastructure.database as db_module
from task_api.config import get_settings
from task_api.infrastructure.database import DatabaseSessionManager, get_db
from task_api.main import app


@pytest.fixture
async def app_with_test_db(test_engine, test_session_factory):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    yield app

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(app_with_test_db):
    """Authenticated client: carries the configured API key header."""
    settings = get_settings()
    async with AsyncClient(
        transport=ASGITransport(app=app_with_test_db),
        base_url="http://test",
        headers={settings.api_key_header: settings.api_key},
    ) as c:
        yield c


@pytest.fixture
async def anon_client(app_with_test_db):
    """Client without an API key header."""
    async with AsyncClient(
        transport=ASGITransport(app=app_with_test_db), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seed_user(client):
    """Register a user through the API and return its JSON."""
    res = await client.post(
        "/api/users", json={"name": "Ada Lovelace", "email": "ada@example.com"},
    )
    assert res.status_code == 201
    return res.json()
