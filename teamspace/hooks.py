"""
After-update hooks for teams.

Hooks run once per successful update, after it committed, and receive the
before/after value of every field the update wrote.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from teamspace.models import Team
from teamspace.repositories.teams import TeamRepository
from teamspace.tasks.delete_attachment import DeleteAttachmentTask
from teamspace.utils.attachments import parse_attachment_ids

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldChange:
    """Value of a field before and after an update."""

    previous: Any
    current: Any

    @property
    def changed(self) -> bool:
        return self.previous != self.current


AfterUpdateHook = Callable[[AsyncSession, Team, Mapping[str, FieldChange]], Awaitable[None]]


async def delete_previous_avatar(session: AsyncSession, team: Team, changes: Mapping[str, FieldChange]) -> None:
    """
    Schedule deletion of the attachment behind a replaced team avatar.

    Only attachments owned by the team are considered.
    """
    change = changes.get("avatar_url")
    if not change or not change.previous or not change.changed:
        return

    attachment_ids = parse_attachment_ids(change.previous, include_public=True)
    if not attachment_ids:
        return

    attachment = await TeamRepository(session).find_attachment(attachment_ids[0], team.id)
    if not attachment:
        return

    if await DeleteAttachmentTask.schedule({"attachmentId": str(attachment.id)}):
        logger.info(f"Scheduled deletion of previous avatar {attachment.id} for team {team.id}")
    else:
        logger.warning(f"Task queue rejected deletion of previous avatar {attachment.id} for team {team.id}")
