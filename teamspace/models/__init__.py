"""
Database models.

The Team aggregate and the collaborator records it reads and writes:
- Team (tenant workspace)
- Collection and Document (welcome content)
- User, AuthenticationProvider
- TeamDomain (sign-in allow-list)
- Attachment (uploaded avatars)
"""

from teamspace.models.attachment import Attachment
from teamspace.models.authentication_provider import AuthenticationProvider
from teamspace.models.base import Base, SoftDeleteMixin, TimestampMixin
from teamspace.models.collection import Collection, CollectionPermission
from teamspace.models.document import Document
from teamspace.models.team import ONBOARDING_DOCUMENTS, Team, TeamPreference
from teamspace.models.team_domain import TeamDomain
from teamspace.models.user import User

__all__ = [
    "Attachment",
    "AuthenticationProvider",
    "Base",
    "Collection",
    "CollectionPermission",
    "Document",
    "ONBOARDING_DOCUMENTS",
    "SoftDeleteMixin",
    "Team",
    "TeamDomain",
    "TeamPreference",
    "TimestampMixin",
    "User",
]
