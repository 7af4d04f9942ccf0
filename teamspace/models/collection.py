"""
Collection model.

Collections group the documents of a team. Only the parts the Team
aggregate relies on are modelled here.
"""

from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from teamspace.models.base import Base, SoftDeleteMixin


class CollectionPermission(str, Enum):
    """Default access level members get on a collection."""

    READ = "read"
    READ_WRITE = "read_write"
    ADMIN = "admin"


class Collection(SoftDeleteMixin, Base):
    """A named group of documents owned by a team."""

    __tablename__ = "collections"

    DEFAULT_SORT = {"field": "index", "direction": "asc"}

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True, default=uuid4)

    team_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_by_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    sort: Mapped[dict] = mapped_column(JSON, nullable=False, default=lambda: dict(Collection.DEFAULT_SORT))
    # None for private collections
    permission: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    # Published documents as a nested list of {id, title, children}
    document_structure: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)

    team: Mapped["Team"] = relationship("Team", back_populates="collections")
    documents: Mapped[list["Document"]] = relationship("Document", back_populates="collection")

    def __repr__(self) -> str:
        return f"<Collection(id={self.id}, name={self.name}, team_id={self.team_id})>"

    def add_document_to_structure(self, document: "Document", index: Optional[int] = None) -> list:
        """Place a published document at the top level of the structure.

        A new list is assigned so the change is persisted.
        """
        structure = [node for node in (self.document_structure or []) if node["id"] != str(document.id)]
        node = {"id": str(document.id), "title": document.title, "children": []}

        if index is None:
            structure.append(node)
        else:
            structure.insert(index, node)

        self.document_structure = structure
        return structure
