"""Services for the Team aggregate."""

from teamspace.services.teams import TeamService

__all__ = ["TeamService"]
