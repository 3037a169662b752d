"""
Shared Test Fixtures
====================

Every test gets a fresh in-memory SQLite database wired into the app
through the ``get_db`` dependency override.
"""

import os

# Must be set before lifehub.config is imported
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-for-jwt")
os.environ.setdefault("SEED_RELAXATION_SOUNDS", "false")

from datetime import date
from typing import AsyncGenerator
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from lifehub.core.security import create_access_token, hash_password
from lifehub.db.base import Base
from lifehub.db.session import get_db
from lifehub.main import app
from lifehub.models.user import User

import lifehub.models  # noqa: F401

USER_PASSWORD = "old-password"


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    yield factory
    app.dependency_overrides.pop(get_db, None)
    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A session for arranging rows and checking results directly."""
    async with session_factory() as session:
        yield session


async def _make_user(db: AsyncSession, email: str) -> User:
    user = User(
        id=uuid.uuid4(),
        email=email,
        name=email.split("@")[0].title(),
        password_hash=hash_password(USER_PASSWORD),
    )
    db.add(user)
    await db.commit()
    return user


@pytest_asyncio.fixture
async def user(db: AsyncSession) -> User:
    return await _make_user(db, "ada@example.com")


@pytest_asyncio.fixture
async def other_user(db: AsyncSession) -> User:
    return await _make_user(db, "grace@example.com")


def bearer(user: User) -> dict[str, str]:
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(user: User) -> dict[str, str]:
    return bearer(user)


@pytest.fixture
def other_headers(other_user: User) -> dict[str, str]:
    return bearer(other_user)


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def today() -> date:
    return date.today()


@pytest.fixture
def user_password() -> str:
    return USER_PASSWORD
