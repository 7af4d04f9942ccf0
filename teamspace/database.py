"""
Async engine and session factory for the Team service.

Schema helpers are for development and tests; deployed databases are
migrated with Alembic.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from teamspace.config.settings import get_settings
from teamspace.models.base import Base

ASYNC_DRIVERS = {
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


def async_database_url(url: str) -> str:
    """Point a plain database URL at its async driver.

    URLs that already name a driver are returned unchanged.
    """
    for prefix, async_prefix in ASYNC_DRIVERS.items():
        if url.startswith(prefix):
            return async_prefix + url[len(prefix):]
    return url


settings = get_settings()

engine = create_async_engine(
    async_database_url(settings.database_url),
    echo=settings.sql_echo,
    pool_pre_ping=True,
    # Connections are not shared across test event loops
    poolclass=NullPool if settings.environment == "test" else None,
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def init_db() -> None:
    """Create every table of the models (development and tests only)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db() -> None:
    """Drop every table. Deletes all data."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def close_db() -> None:
    await engine.dispose()
