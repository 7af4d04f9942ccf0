"""
Team model.

A team is the tenant workspace that owns collections, documents and users.
Besides its columns it derives the public URL and logo, stores boolean
preferences and bootstraps new workspaces with a welcome collection.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlsplit, urlunsplit
from uuid import UUID, uuid4

from sqlalchemy import JSON, Boolean, String, select
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Mapped, mapped_column, relationship

from teamspace.config.settings import get_settings
from teamspace.content import ContentSource
from teamspace.errors import TeamspaceError, TransactionFailure, ValidationError
from teamspace.models.authentication_provider import AuthenticationProvider
from teamspace.models.base import Base, SoftDeleteMixin
from teamspace.models.collection import Collection, CollectionPermission
from teamspace.models.document import Document
from teamspace.models.team_domain import TeamDomain, find_allowed_domains
from teamspace.models.user import User
from teamspace.models.validators import validate_team_fields
from teamspace.transaction import transaction
from teamspace.utils.avatars import generate_avatar_url

logger = logging.getLogger(__name__)


class TeamPreference(str, Enum):
    """Boolean settings that decide behavior for a team."""

    SEAMLESS_EDIT = "seamless_edit"
    PUBLIC_BRANDING = "public_branding"
    VIEW_COUNT = "view_count"
    COMMENTING = "commenting"
    CUSTOM_THEME = "custom_theme"


WELCOME_COLLECTION_NAME = "Welcome"
WELCOME_COLLECTION_DESCRIPTION = (
    "This collection is a quick guide to what Teamspace is all about. Feel free to delete "
    "this collection once your team is up to speed with the basics!"
)

# Created in this order; each is published to the top of the collection,
# so the last one is listed first.
ONBOARDING_DOCUMENTS = [
    "Integrations & API",
    "Our Editor",
    "Getting Started",
    "What is Teamspace",
]

TEAM_DEFAULTS: Dict[str, Any] = {
    "sharing": True,
    "invite_required": False,
    "guest_signin": True,
    "document_embeds": True,
    "member_collection_create": True,
    "collaborative_editing": True,
    "default_user_role": "member",
}


class Team(SoftDeleteMixin, Base):
    """
    Team (tenant) model.

    Routing: a custom domain always wins, then the subdomain when subdomain
    routing is enabled, otherwise the platform URL.
    """

    __tablename__ = "teams"

    # Primary key
    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True, default=uuid4)

    # Identity
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    subdomain: Mapped[Optional[str]] = mapped_column(String(32), unique=True, nullable=True)
    domain: Mapped[Optional[str]] = mapped_column(String(255), unique=True, nullable=True)
    # Reference only, the collection is not owned through this column
    default_collection_id: Mapped[Optional[UUID]] = mapped_column(PG_UUID(as_uuid=True), nullable=True)
    avatar_url: Mapped[Optional[str]] = mapped_column(String(4096), nullable=True)

    # Policy flags
    sharing: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    invite_required: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    guest_signin: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    document_embeds: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    member_collection_create: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    collaborative_editing: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    default_user_role: Mapped[str] = mapped_column(String(20), default="member", nullable=False)

    # Query params captured at signup (utm_source, ref, ...)
    signup_query_params: Mapped[Optional[Dict[str, str]]] = mapped_column(JSON, nullable=True)
    preferences: Mapped[Optional[Dict[str, bool]]] = mapped_column(JSON, nullable=True)

    # Relationships
    collections: Mapped[list["Collection"]] = relationship("Collection", back_populates="team")
    documents: Mapped[list["Document"]] = relationship("Document", back_populates="team")
    users: Mapped[list["User"]] = relationship("User", back_populates="team")
    authentication_providers: Mapped[list["AuthenticationProvider"]] = relationship(
        "AuthenticationProvider", back_populates="team"
    )
    allowed_domains: Mapped[list["TeamDomain"]] = relationship("TeamDomain", back_populates="team")

    def __init__(self, **kwargs: Any):
        # Column defaults only apply on INSERT; mirror them on new instances
        for field, default in TEAM_DEFAULTS.items():
            kwargs.setdefault(field, default)
        kwargs.setdefault("id", uuid4())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Team(id={self.id}, name={self.name}, subdomain={self.subdomain}, domain={self.domain})>"

    # Validation

    def validate(self) -> List[ValidationError]:
        """Check every governed field of the record.

        Returns:
            All violations, empty when the record can be persisted
        """
        return validate_team_fields(
            {
                "name": self.name,
                "subdomain": self.subdomain,
                "domain": self.domain,
                "avatar_url": self.avatar_url,
                "default_user_role": self.default_user_role,
            }
        )

    # Derived values

    @property
    def email_signin_enabled(self) -> bool:
        """
        Whether the team has email login enabled. For self-hosted installs
        this also considers whether SMTP connection details have been
        configured.
        """
        settings = get_settings()
        return bool(self.guest_signin) and (bool(settings.smtp_host) or settings.environment == "development")

    @property
    def url(self) -> str:
        """Public URL of the team, derived on every access."""
        settings = get_settings()

        # custom domain
        if self.domain:
            return f"https://{self.domain}"

        if not self.subdomain or not settings.subdomains_enabled:
            return settings.url

        parts = urlsplit(settings.url)
        host = f"{self.subdomain}.{settings.platform_base_domain}"
        if parts.port:
            host = f"{host}:{parts.port}"

        url = urlunsplit(parts._replace(netloc=host))
        return url[:-1] if url.endswith("/") else url

    @property
    def logo_url(self) -> str:
        return self.avatar_url or generate_avatar_url(id=self.id, name=self.name)

    # Preferences

    def set_preference(self, preference: Union[TeamPreference, str], value: bool) -> Dict[str, bool]:
        """
        Set a team preference.

        A new mapping is assigned on every write so the change is always
        picked up on the next flush.

        Args:
            preference: The team preference to set
            value: Sets the preference value

        Returns:
            The current team preferences
        """
        key = TeamPreference(preference).value
        self.preferences = {**(self.preferences or {}), key: value}
        return self.preferences

    def get_preference(self, preference: Union[TeamPreference, str]) -> Optional[bool]:
        """
        Return the passed preference value.

        Args:
            preference: The team preference to retrieve

        Returns:
            True or False when the preference was set, None when it never was
        """
        if not self.preferences:
            return None
        return self.preferences.get(TeamPreference(preference).value)

    # Queries

    async def collection_ids(self, session: AsyncSession, paranoid: bool = True) -> List[UUID]:
        """Ids of the team's collections that have a permission set.

        Args:
            session: Database session
            paranoid: Exclude soft-deleted collections
        """
        query = select(Collection.id).where(
            Collection.team_id == self.id,
            Collection.permission.is_not(None),
        )
        if paranoid:
            query = query.where(Collection.deleted_at.is_(None))

        result = await session.execute(query)
        return list(result.scalars().all())

    async def is_domain_allowed(self, session: AsyncSession, domain: str) -> bool:
        """
        Find whether the passed domain can be used to sign-in to this team.
        Note that this always returns True if no domain restrictions are set.

        Args:
            session: Database session
            domain: The domain to check

        Returns:
            True if the domain is allowed to sign-in to this team
        """
        allowed_domains = await find_allowed_domains(session, self.id)
        return not allowed_domains or domain in [d.name for d in allowed_domains]

    # Provisioning

    async def provision_first_collection(
        self,
        session: AsyncSession,
        user_id: UUID,
        content_source: Optional[ContentSource] = None,
    ) -> Collection:
        """
        Create the welcome collection and its onboarding documents.

        Everything is written in one transaction: if reading any document or
        any write fails, neither the collection nor any document persists.

        Args:
            session: Database session
            user_id: User the collection and documents are created by
            content_source: Where onboarding texts are read from

        Returns:
            The created collection

        Raises:
            NotFoundError: If an onboarding document is missing
            TransactionFailure: If the database rejected a write
        """
        content_source = content_source or ContentSource()
        # Rolling back expires every loaded instance, self included
        team_id = self.id

        try:
            async with transaction(session):
                collection = Collection(
                    name=WELCOME_COLLECTION_NAME,
                    description=WELCOME_COLLECTION_DESCRIPTION,
                    team_id=team_id,
                    created_by_id=user_id,
                    sort=dict(Collection.DEFAULT_SORT),
                    permission=CollectionPermission.READ_WRITE.value,
                )
                session.add(collection)
                await session.flush()

                for title in ONBOARDING_DOCUMENTS:
                    text = await content_source.read(title)
                    document = Document(
                        version=2,
                        is_welcome=True,
                        parent_document_id=None,
                        collection_id=collection.id,
                        team_id=collection.team_id,
                        user_id=collection.created_by_id,
                        last_modified_by_id=collection.created_by_id,
                        created_by_id=collection.created_by_id,
                        title=title,
                        text=text,
                    )
                    session.add(document)
                    await session.flush()
                    await document.publish(session, collection.created_by_id)
        except TeamspaceError:
            logger.warning(f"Provisioning rolled back for team {team_id}")
            raise
        except SQLAlchemyError as e:
            logger.error(f"Provisioning failed for team {team_id}: {e}")
            raise TransactionFailure(f"Could not provision first collection for team {team_id}", cause=e) from e

        logger.info(f"Provisioned collection {collection.id} with {len(ONBOARDING_DOCUMENTS)} documents for team {team_id}")
        return collection

