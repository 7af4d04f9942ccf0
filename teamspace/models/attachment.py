"""Uploaded files (images, avatars, document attachments)."""

from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from teamspace.models.base import Base, TimestampMixin


class Attachment(TimestampMixin, Base):
    """An uploaded file stored under `key` in the file store."""

    __tablename__ = "attachments"

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True, default=uuid4)

    team_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[Optional[UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    document_id: Mapped[Optional[UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("documents.id", ondelete="SET NULL"),
        nullable=True,
    )

    key: Mapped[str] = mapped_column(String(4096), nullable=False)
    content_type: Mapped[str] = mapped_column(String(255), nullable=False, default="application/octet-stream")
    size: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    acl: Mapped[str] = mapped_column(String(50), nullable=False, default="private")  # private, public-read

    def __repr__(self) -> str:
        return f"<Attachment(id={self.id}, key={self.key}, team_id={self.team_id})>"

    @property
    def redirect_url(self) -> str:
        return f"/api/attachments.redirect?id={self.id}"
