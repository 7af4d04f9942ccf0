"""
Seed data script for local development.

Creates a sample team with a user, an allowed sign-in domain and the
welcome collection.

Usage:
    python -m teamspace.scripts.seed_data
"""

import asyncio
import logging
from uuid import uuid4

import sentry_sdk
from sqlalchemy import select

from teamspace.config.settings import get_settings
from teamspace.database import AsyncSessionLocal, close_db, init_db
from teamspace.models import Team, TeamDomain, TeamPreference, User
from teamspace.services.teams import TeamService

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def seed_database():
    """Create seed data for development."""
    logger.info("Seeding database with sample data...")

    async with AsyncSessionLocal() as db:
        # Check if data already exists
        result = await db.execute(select(Team))
        if result.scalars().first():
            logger.warning("Database already has data. Skipping seed.")
            return
        await db.commit()

        service = TeamService(db)
        team = await service.create(name="Acme Corporation", subdomain="acme")

        admin = User(id=uuid4(), team_id=team.id, name="Jane Admin", email="jane@acme.com", role="admin")
        db.add(admin)
        db.add(TeamDomain(team_id=team.id, name="acme.com", created_by_id=admin.id))
        await db.commit()

        await service.set_preference(team, TeamPreference.COMMENTING, True)

        collection = await team.provision_first_collection(db, admin.id)

        logger.info(f"Team:       {team.name} ({team.id})")
        logger.info(f"URL:        {team.url}")
        logger.info(f"Logo:       {team.logo_url}")
        logger.info(f"Admin:      {admin.email}")
        logger.info(f"Collection: {collection.name} ({len(collection.document_structure or [])} documents)")


async def main():
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn, environment=settings.environment)

    await init_db()
    try:
        await seed_database()
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
