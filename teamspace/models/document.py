"""
Document model.

Only creation and publishing are needed by the Team aggregate.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Mapped, mapped_column, relationship

from teamspace.models.base import Base, SoftDeleteMixin
from teamspace.models.collection import Collection


class Document(SoftDeleteMixin, Base):
    """A document belonging to a team, optionally inside a collection."""

    __tablename__ = "documents"

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True, default=uuid4)

    team_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    collection_id: Mapped[Optional[UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("collections.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    parent_document_id: Mapped[Optional[UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("documents.id", ondelete="SET NULL"),
        nullable=True,
    )
    user_id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), ForeignKey("users.id"), nullable=False)
    created_by_id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), ForeignKey("users.id"), nullable=False)
    last_modified_by_id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), ForeignKey("users.id"), nullable=False)

    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # Schema version of the stored text
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=2)
    is_welcome: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    template: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    team: Mapped["Team"] = relationship("Team", back_populates="documents")
    collection: Mapped[Optional[Collection]] = relationship(Collection, back_populates="documents")

    def __repr__(self) -> str:
        return f"<Document(id={self.id}, title={self.title}, collection_id={self.collection_id})>"

    @property
    def is_published(self) -> bool:
        return self.published_at is not None

    async def publish(self, session: AsyncSession, user_id: UUID) -> "Document":
        """
        Publish the document within the caller's transaction.

        Non-template documents are added to the top of their collection's
        structure.

        Args:
            session: Session carrying the caller's transaction
            user_id: User publishing the document
        """
        if self.is_published:
            return self

        if not self.template and self.collection_id:
            collection = await session.get(Collection, self.collection_id, with_for_update=True)
            collection.add_document_to_structure(self, 0)

        self.last_modified_by_id = user_id
        self.published_at = datetime.now(timezone.utc)
        await session.flush()
        return self
