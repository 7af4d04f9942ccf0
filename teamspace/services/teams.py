"""
Team Service

Validated writes to teams. Every create and update checks the governed
fields before the record is touched, checks subdomain/domain uniqueness
before committing (the unique constraints stay authoritative at commit) and
runs the after-update hooks once the update is durable.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Union
from uuid import UUID

import sentry_sdk
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from teamspace.errors import UniquenessConflictError, ValidationError
from teamspace.hooks import AfterUpdateHook, FieldChange, delete_previous_avatar
from teamspace.models import Team, TeamPreference
from teamspace.models.validators import validate_team_fields
from teamspace.repositories.teams import TeamRepository

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = frozenset(["id", "created_at", "updated_at", "deleted_at"])
# Changed through set_preference only
ACCESSOR_FIELDS = frozenset(["preferences"])
UNIQUE_FIELDS = ("subdomain", "domain")
# Managed fields a new team may still be given
CREATE_FIELDS = frozenset(["id"])

DEFAULT_AFTER_UPDATE_HOOKS: Sequence[AfterUpdateHook] = (delete_previous_avatar,)


class TeamService:
    """Create and update teams."""

    def __init__(self, session: AsyncSession, after_update: Optional[Sequence[AfterUpdateHook]] = None):
        """
        Args:
            session: Database session
            after_update: Hooks run after each committed update, defaults to
                deleting the previous avatar
        """
        self.session = session
        self.repository = TeamRepository(session)
        self.after_update = list(DEFAULT_AFTER_UPDATE_HOOKS if after_update is None else after_update)

    async def create(self, **fields: Any) -> Team:
        """
        Create a team.

        Only column values may be passed; of the managed fields just `id` is
        accepted, preferences are written with set_preference.

        Raises:
            ValidationError: If any field is invalid, managed or unknown
            UniquenessConflictError: If the subdomain or domain is in use
        """
        errors = self._check_fields(fields, writable=CREATE_FIELDS)
        if errors:
            raise ValidationError.aggregate(errors)

        team = Team(**fields)

        errors = team.validate()
        if errors:
            raise ValidationError.aggregate(errors)

        await self._check_unique({"subdomain": team.subdomain, "domain": team.domain})

        self.session.add(team)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            conflict = self._uniqueness_conflict(e, fields)
            if conflict is None:
                raise
            raise conflict from e

        logger.info(f"Created team {team.id} ({team.name})")
        return team

    async def update(self, team: Team, **changes: Any) -> Team:
        """
        Update fields of a team and run the after-update hooks.

        The record is left unchanged when validation fails. Hook failures are
        logged and reported but never undo the committed update.

        Raises:
            ValidationError: If a field is invalid, immutable or unknown
            UniquenessConflictError: If the subdomain or domain is in use
        """
        errors = self._check_fields(changes)
        errors.extend(validate_team_fields(changes))
        if errors:
            raise ValidationError.aggregate(errors)

        unique_changes = {
            field: value
            for field, value in changes.items()
            if field in UNIQUE_FIELDS and value != getattr(team, field)
        }
        await self._check_unique(unique_changes, exclude_team_id=team.id)

        previous = {field: getattr(team, field) for field in changes}
        for field, value in changes.items():
            setattr(team, field, value)

        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            await self.session.refresh(team)
            conflict = self._uniqueness_conflict(e, changes)
            if conflict is None:
                raise
            raise conflict from e

        logger.info(f"Updated team {team.id}: {', '.join(changes) or 'no fields'}")

        field_changes = {field: FieldChange(previous[field], getattr(team, field)) for field in changes}
        await self._run_after_update(team, field_changes)
        return team

    async def set_preference(
        self, team: Team, preference: Union[TeamPreference, str], value: bool
    ) -> Dict[str, bool]:
        """Set a team preference and persist it."""
        preferences = team.set_preference(preference, value)
        await self.session.commit()
        return preferences

    async def soft_delete(self, team: Team) -> None:
        team.soft_delete()
        await self.session.commit()
        logger.info(f"Soft deleted team {team.id}")

    async def get(self, team_id: UUID, **options: bool) -> Optional[Team]:
        return await self.repository.get_by_id(team_id, **options)

    def _check_fields(self, changes: Mapping[str, Any], writable: frozenset = frozenset()) -> list:
        errors = []
        columns = Team.__table__.columns.keys()
        for field in changes:
            if field in IMMUTABLE_FIELDS and field not in writable:
                errors.append(ValidationError(field, f"{field} cannot be changed"))
            elif field in ACCESSOR_FIELDS:
                errors.append(ValidationError(field, f"{field} can only be changed with set_preference"))
            elif field not in columns:
                errors.append(ValidationError(field, f"{field} is not a team attribute"))
        return errors

    async def _check_unique(self, values: Mapping[str, Any], exclude_team_id: Optional[UUID] = None) -> None:
        # Fast path only: two writers can both pass this check, the unique
        # constraint decides at commit.
        if values.get("subdomain") and await self.repository.subdomain_taken(values["subdomain"], exclude_team_id):
            raise UniquenessConflictError("subdomain", values["subdomain"])
        if values.get("domain") and await self.repository.domain_taken(values["domain"], exclude_team_id):
            raise UniquenessConflictError("domain", values["domain"])

    def _uniqueness_conflict(
        self, error: IntegrityError, values: Mapping[str, Any]
    ) -> Optional[UniquenessConflictError]:
        message = str(error.orig)
        # "subdomain" first, its constraint name also contains "domain"
        for field in UNIQUE_FIELDS:
            if field in message:
                return UniquenessConflictError(field, values.get(field))
        return None

    async def _run_after_update(self, team: Team, changes: Mapping[str, FieldChange]) -> None:
        for hook in self.after_update:
            try:
                await hook(self.session, team, changes)
            except Exception as e:
                name = getattr(hook, "__name__", repr(hook))
                logger.error(f"After-update hook {name} failed for team {team.id}: {e}", exc_info=True)
                sentry_sdk.capture_exception(e)
