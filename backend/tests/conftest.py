"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from backend.app.core.config import settings
from backend.app.db.base import Base, build_engine, get_db
from backend.app.main import app
from backend.app.models.user import User
from backend.app.core.security import hash_password


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """Use the cheapest bcrypt cost so registration-heavy tests stay fast."""
    monkeypatch.setattr(settings, "bcrypt_rounds", 4)


@pytest.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with all tables created."""
    engine = build_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture(scope="function")
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """
    Create a test database session.

    Each test gets a fresh database with all tables created.
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_user(test_db):
    """Insert a user directly and return it."""
    async def _make_user(username: str = "alice", password: str = "secret123") -> User:
        user = User(username=username, password_hash=hash_password(password, rounds=4))
        test_db.add(user)
        await test_db.commit()
        await test_db.refresh(user)
        return user

    return _make_user


@pytest.fixture(scope="function")
async def test_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    Create test client with in-memory database.

    Overrides the app's database dependency so every request uses the
    per-test database.
    """
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def client_factory(session_factory) -> AsyncGenerator:
    """
    Open additional clients against the same database.

    Each client keeps its own cookie jar, so each can hold a different
    logged-in user.
    """
    clients: list[AsyncClient] = []

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    def _factory() -> AsyncClient:
        client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(client)
        return client

    yield _factory

    for client in clients:
        await client.aclose()
    app.dependency_overrides.clear()


@pytest.fixture
def register_user():
    """Register and log in a user on the given client."""
    async def _register(client: AsyncClient, username: str, password: str = "secret123") -> dict:
        response = await client.post(
            "/api/auth/register",
            json={"username": username, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def idea_payload() -> dict:
    """A valid idea creation body."""
    return {
        "what": "X",
        "who": "Y",
        "features": "F",
        "doneCriteria": "D",
        "inspiration": "Insp",
    }
