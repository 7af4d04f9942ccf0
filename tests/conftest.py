"""
Pytest configuration and fixtures for Team service tests.

Provides fixtures for:
- Database engine and session (file-based SQLite)
- Test team and user
- Platform settings overrides
"""

import os
import tempfile

# Override settings before any teamspace code reads them
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(tempfile.gettempdir(), "teamspace_test.sqlite")
os.environ["REDIS_URL"] = "redis://localhost:6379/15"

from typing import AsyncGenerator  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from teamspace.config.settings import get_settings  # noqa: E402
from teamspace.models import Attachment, Base, Team, TeamDomain, User  # noqa: E402


@pytest.fixture
def platform_settings(monkeypatch):
    """Override platform settings for a test.

    Usage:
        settings = platform_settings(url="https://app.example.com", subdomains_enabled=True)
    """

    def configure(**values):
        for key, value in values.items():
            if value is None:
                monkeypatch.delenv(key.upper(), raising=False)
            else:
                monkeypatch.setenv(key.upper(), str(value))
        get_settings.cache_clear()
        return get_settings()

    get_settings.cache_clear()
    yield configure
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def test_engine(tmp_path):
    """Create test database engine."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test_db.sqlite'}", poolclass=NullPool, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine) -> async_sessionmaker:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_team(test_db: AsyncSession) -> Team:
    """Create test team."""
    team = Team(name="Test Team", subdomain="test-team")
    test_db.add(team)
    await test_db.commit()
    return team


@pytest_asyncio.fixture
async def other_team(test_db: AsyncSession) -> Team:
    """Create a second team to check tenant isolation."""
    team = Team(name="Other Team", subdomain="other-team")
    test_db.add(team)
    await test_db.commit()
    return team


@pytest_asyncio.fixture
async def test_user(test_db: AsyncSession, test_team: Team) -> User:
    """Create test user."""
    user = User(id=uuid4(), team_id=test_team.id, name="Test User", email="user@testteam.com")
    test_db.add(user)
    await test_db.commit()
    return user


@pytest_asyncio.fixture
async def avatar_attachment(test_db: AsyncSession, test_team: Team, test_user: User) -> Attachment:
    """Create an uploaded avatar owned by the test team."""
    attachment = Attachment(
        id=uuid4(),
        team_id=test_team.id,
        user_id=test_user.id,
        key=f"avatars/{test_team.id}/logo.png",
        content_type="image/png",
        size=2048,
    )
    test_db.add(attachment)
    await test_db.commit()
    return attachment


@pytest_asyncio.fixture
async def allowed_domain(test_db: AsyncSession, test_team: Team) -> TeamDomain:
    domain = TeamDomain(team_id=test_team.id, name="testteam.com")
    test_db.add(domain)
    await test_db.commit()
    return domain


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a database")
    config.addinivalue_line("markers", "integration: tests against a SQLite database")
