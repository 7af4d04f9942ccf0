"""Repositories for Team lookups."""

from teamspace.repositories.teams import TeamRepository

__all__ = ["TeamRepository"]
