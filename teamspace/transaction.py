"""
Transaction scope for multi-step writes.

Kept apart from ``teamspace.database`` so models can use it without
importing the engine.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """
    Run a block of writes as one atomic unit and commit it.

    On a session with no open transaction the block runs in a new one. When
    the session already autobegan (any earlier read does that), the block runs
    in a SAVEPOINT and the session is committed once the savepoint is
    released, so the block's writes are durable either way. A block that
    raises rolls back everything it wrote; earlier work on the session is
    left to the caller.

    Usage:
        async with transaction(db):
            db.add(collection)
            await db.flush()
    """
    if not session.in_transaction():
        async with session.begin():
            yield session
        return

    async with session.begin_nested():
        yield session
    await session.commit()
