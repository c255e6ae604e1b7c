import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from typing import AsyncGenerator, Dict
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool
from fastapi import FastAPI
from asgi_lifespan import LifespanManager

from app.core.config import settings
from app.core.database import create_session_factory, get_db
from app.core.security import create_access_token
from app.crud.user import create_user
from app.db.base import Base
from app.db.models import Client
from app.schemas.user import UserCreate
from app.utils.seed_data import seed_database
from main import app

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database for every test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()

@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)

@pytest.fixture
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a new database session for a test."""
    async with session_factory() as session:
        yield session

@pytest.fixture
async def seeded_db(test_db) -> AsyncSession:
    """Session over a database holding the demo data."""
    await seed_database(test_db)
    return test_db

@pytest.fixture
async def test_app(session_factory) -> AsyncGenerator[FastAPI, None]:
    """The application with get_db bound to the test database."""
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with LifespanManager(app):
        yield app
    app.dependency_overrides.clear()

@pytest.fixture
async def client(test_app, seeded_db) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with the seeded test database."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client

@pytest.fixture
def lawyer_token() -> str:
    """Session token for the seeded lawyer."""
    return create_access_token("user-1")

@pytest.fixture
def auth_headers(lawyer_token) -> Dict[str, str]:
    return {"Authorization": f"Bearer {lawyer_token}"}

@pytest.fixture
def session_cookie_header(lawyer_token) -> Dict[str, str]:
    return {"Cookie": f"{settings.SESSION_COOKIE_NAME}={lawyer_token}"}

@pytest.fixture
async def other_lawyer_headers(seeded_db) -> Dict[str, str]:
    """A second lawyer who owns no cases."""
    user = await create_user(
        seeded_db,
        UserCreate(
            id="user-2",
            email="jane@example.com",
            password="password456",
            name="Jane Roe",
        ),
    )
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}

@pytest.fixture
async def dana(seeded_db) -> Client:
    client = Client(
        id="client-9",
        first_name="Dana",
        last_name="Lee",
        email="dana@example.com",
        nationality="Korean",
    )
    seeded_db.add(client)
    await seeded_db.commit()
    return client
