from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from stay_with_friends.core.database import create_all, create_sessionmaker
from stay_with_friends.core.database.entities import User

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with create_sessionmaker(test_engine)() as session:
        yield session


@pytest_asyncio.fixture
async def alice(session: AsyncSession) -> User:
    user = User(email="alice@example.com", name="Alice")
    session.add(user)
    await session.commit()
    # Detached so a rolled back request cannot expire it under the test
    session.expunge(user)
    return user


@pytest_asyncio.fixture
async def bob(session: AsyncSession) -> User:
    user = User(email="bob@example.com", name="Bob")
    session.add(user)
    await session.commit()
    # Detached so a rolled back request cannot expire it under the test
    session.expunge(user)
    return user
