"""Authentication providers (SSO connections) configured for a team."""

from uuid import UUID, uuid4

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from teamspace.models.base import Base, TimestampMixin


class AuthenticationProvider(TimestampMixin, Base):
    """
    Identity provider a team signs in with.

    provider_id is the id of the team/workspace at the provider
    (e.g. a Google Workspace domain or a Slack team id).
    """

    __tablename__ = "authentication_providers"

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True, default=uuid4)

    team_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(50), nullable=False)  # google, slack, oidc, ...
    provider_id: Mapped[str] = mapped_column(String(255), nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    team: Mapped["Team"] = relationship("Team", back_populates="authentication_providers")

    __table_args__ = (UniqueConstraint("name", "provider_id", name="uq_authentication_provider"),)

    def __repr__(self) -> str:
        return f"<AuthenticationProvider(id={self.id}, name={self.name}, team_id={self.team_id})>"
