"""
Allowed sign-in domains.

A team with no TeamDomain rows accepts sign-ins from any domain.
"""

from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, String, UniqueConstraint, select
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Mapped, mapped_column, relationship

from teamspace.models.base import Base, TimestampMixin


class TeamDomain(TimestampMixin, Base):
    """A domain allowed to sign in to a team."""

    __tablename__ = "team_domains"

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True, default=uuid4)

    team_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_by_id: Mapped[Optional[UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    team: Mapped["Team"] = relationship("Team", back_populates="allowed_domains")

    __table_args__ = (UniqueConstraint("team_id", "name", name="uq_team_domain_name"),)

    def __repr__(self) -> str:
        return f"<TeamDomain(id={self.id}, name={self.name}, team_id={self.team_id})>"


async def find_allowed_domains(session: AsyncSession, team_id: UUID) -> List[TeamDomain]:
    """Load the sign-in domains configured for a team."""
    result = await session.execute(
        select(TeamDomain).where(TeamDomain.team_id == team_id).order_by(TeamDomain.name)
    )
    return list(result.scalars().all())
