"""
Errors raised by the Team service.

ValidationError and UniquenessConflictError reject a write before or at
commit; NotFoundError covers missing seed content and records;
TransactionFailure wraps storage errors that rolled back a multi-step write.
"""

from typing import Any, List, Optional


class TeamspaceError(Exception):
    """Base class for Team service errors."""


class ValidationError(TeamspaceError):
    """A governed field failed a validation rule.

    Attributes:
        field: Name of the offending field
        message: Human-readable description of the rule that failed
        violations: Every violation found when several were aggregated
    """

    def __init__(self, field: str, message: str, violations: Optional[List["ValidationError"]] = None):
        self.field = field
        self.message = message
        self.violations = violations if violations is not None else [self]
        super().__init__(f"{field}: {message}")

    @classmethod
    def aggregate(cls, violations: List["ValidationError"]) -> "ValidationError":
        """Combine several violations into one raisable error."""
        if len(violations) == 1:
            return violations[0]
        fields = ", ".join(dict.fromkeys(v.field for v in violations))
        message = "; ".join(str(v) for v in violations)
        return cls(fields, message, violations=list(violations))

    @property
    def fields(self) -> List[str]:
        return [v.field for v in self.violations]

    def __repr__(self) -> str:
        return f"<ValidationError(field={self.field}, message={self.message!r})>"


class UniquenessConflictError(TeamspaceError):
    """A unique field (subdomain or domain) collides with another team."""

    def __init__(self, field: str, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(f"{field} '{value}' is already in use" if value else f"{field} is already in use")


class NotFoundError(TeamspaceError):
    """A referenced record or seed document does not exist."""


class TransactionFailure(TeamspaceError):
    """A multi-step write failed and was rolled back.

    The underlying storage error is available as ``cause`` and ``__cause__``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)
