"""API test fixtures — in-memory SQLite store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all three tables
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager points at the test engine for the readiness check
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from rental_api.db.base import Base
from rental_api.infrastructure.database import get_db, DatabaseSessionManager
import rental_api.models  # noqa: F401
from rental_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = getattr(app.state, "db_manager", None)
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager


@pytest.fixture
def car_payload():
    return {
        "Make": "Toyota",
        "Model": "Corolla",
        "Year": 2020,
        "Color": "Blue",
        "LicensePlate": "ABC123",
        "DailyRate": 29.99,
        "Status": "Available",
        "ImageURL": "http://x/y.png",
    }


@pytest.fixture
def rental_payload():
    return {
        "CarID": 1,
        "UserID": 7,
        "StartDate": "2024-05-01",
        "EndDate": "2024-05-04",
        "TotalAmount": 89.97,
    }


@pytest.fixture
def user_payload():
    return {
        "Name": "Ada Lovelace",
        "Email": "ada@example.com",
        "Password": "hunter2",
    }
