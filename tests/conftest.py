"""
Pytest fixtures for Multi Author Metabox tests.

All tests share one temporary SQLite file; tables are recreated for every
test that asks for a database session.
"""

import os
import tempfile
from typing import AsyncGenerator

import pytest
import pytest_asyncio

# Point the application at a throwaway database before anything imports it
_tmp = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
_tmp.close()
TEST_DB_PATH = _tmp.name
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-0123456789"
os.environ["SITE_URL"] = "http://test"

from euclid_mam.config import get_settings  # noqa: E402

get_settings.cache_clear()

from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from euclid_mam.database import async_session_maker, engine  # noqa: E402
from euclid_mam.kernel.identity import JWTManager  # noqa: E402
from euclid_mam.kernel.models import Base, Post, User, UserRole  # noqa: E402
from euclid_mam.kernel.platform import HostPlatform  # noqa: E402

from factories import create_post, create_user  # noqa: E402


def pytest_sessionfinish(session, exitstatus):
    """Clean up temp DB file after test run."""
    for path in (TEST_DB_PATH, f"{TEST_DB_PATH}-wal", f"{TEST_DB_PATH}-shm"):
        if os.path.exists(path):
            os.unlink(path)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh tables and a session on the test database."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def admin_user(db_session: AsyncSession) -> User:
    return await create_user(db_session, "ada", [UserRole.ADMINISTRATOR.value], "Ada", "Admin")


@pytest_asyncio.fixture
async def editor_user(db_session: AsyncSession) -> User:
    return await create_user(db_session, "eddie", [UserRole.EDITOR.value], "Eddie", "Editor")


@pytest_asyncio.fixture
async def author_user(db_session: AsyncSession) -> User:
    return await create_user(db_session, "alice", [UserRole.AUTHOR.value], "Alice", "Author")


@pytest_asyncio.fixture
async def contributor_user(db_session: AsyncSession) -> User:
    # No first or last name: labelled by handle only
    return await create_user(db_session, "carl", [UserRole.CONTRIBUTOR.value])


@pytest_asyncio.fixture
async def subscriber_user(db_session: AsyncSession) -> User:
    return await create_user(db_session, "sam", [UserRole.SUBSCRIBER.value], "Sam", "Reader")


@pytest_asyncio.fixture
async def team(admin_user, editor_user, author_user, contributor_user, subscriber_user) -> dict:
    return {
        "admin": admin_user,
        "editor": editor_user,
        "author": author_user,
        "contributor": contributor_user,
        "subscriber": subscriber_user,
    }


@pytest_asyncio.fixture
async def post(db_session: AsyncSession, author_user: User) -> Post:
    """A published post written by the author fixture user."""
    return await create_post(db_session, author_user)


@pytest.fixture
def host(db_session: AsyncSession, editor_user: User) -> HostPlatform:
    """Host platform acting as the editor."""
    return HostPlatform(db_session, current_user=editor_user)


@pytest.fixture
def jwt_manager() -> JWTManager:
    """Create a JWT manager for tests."""
    return JWTManager(
        secret_key="test-secret-key-for-testing-only-0123456789",
        algorithm="HS256",
        access_token_expire_minutes=30,
    )
