"""
Team Repository

Centralizes the queries the Team service runs against related records.
Every method takes its session explicitly through the repository.
"""

from typing import List, Optional, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from teamspace.models import Attachment, Team, TeamDomain
from teamspace.models.team_domain import find_allowed_domains


class TeamRepository:
    """Repository for team database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(
        self,
        team_id: UUID,
        with_domains: bool = False,
        with_authentication_providers: bool = False,
        paranoid: bool = True,
    ) -> Optional[Team]:
        """Get team by ID.

        Args:
            team_id: Team UUID
            with_domains: Eager load allowed sign-in domains
            with_authentication_providers: Eager load authentication providers
            paranoid: Exclude soft-deleted teams
        """
        query = select(Team).where(Team.id == team_id)
        if paranoid:
            query = query.where(Team.deleted_at.is_(None))
        if with_domains:
            query = query.options(selectinload(Team.allowed_domains))
        if with_authentication_providers:
            query = query.options(selectinload(Team.authentication_providers))

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_subdomain(self, subdomain: str) -> Optional[Team]:
        """Get team by subdomain."""
        result = await self.session.execute(
            select(Team).where(Team.subdomain == subdomain, Team.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def get_by_domain(self, domain: str) -> Optional[Team]:
        """Get team by custom domain."""
        result = await self.session.execute(
            select(Team).where(Team.domain == domain, Team.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def subdomain_taken(self, subdomain: str, exclude_team_id: Optional[UUID] = None) -> bool:
        """Check whether another team, deleted or not, holds the subdomain."""
        return await self._taken(Team.subdomain == subdomain, exclude_team_id)

    async def domain_taken(self, domain: str, exclude_team_id: Optional[UUID] = None) -> bool:
        """Check whether another team, deleted or not, holds the domain."""
        return await self._taken(Team.domain == domain, exclude_team_id)

    async def _taken(self, condition, exclude_team_id: Optional[UUID]) -> bool:
        query = select(Team.id).where(condition)
        if exclude_team_id is not None:
            query = query.where(Team.id != exclude_team_id)
        result = await self.session.execute(query.limit(1))
        return result.first() is not None

    async def find_allowed_domains(self, team_id: UUID) -> List[TeamDomain]:
        """Get the sign-in domains configured for a team."""
        return await find_allowed_domains(self.session, team_id)

    async def find_attachment(self, attachment_id: Union[UUID, str], team_id: UUID) -> Optional[Attachment]:
        """Get an attachment owned by the team. Never matches another team's attachments."""
        if isinstance(attachment_id, str):
            attachment_id = UUID(attachment_id)

        result = await self.session.execute(
            select(Attachment).where(Attachment.id == attachment_id, Attachment.team_id == team_id)
        )
        return result.scalar_one_or_none()
