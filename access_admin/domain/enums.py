"""Domain enumerations for the access admin backend.

Enums represent fixed sets of domain values (user status, database error
codes the service knows how to translate).
"""

from enum import Enum


class UserStatus(str, Enum):
    """User lifecycle status.

    Only ACTIVE -> BLOCKED is driven by this backend; other transitions
    belong to processes outside it.
    """

    ACTIVE = "active"
    BLOCKED = "blocked"
    INACTIVE = "inactive"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings."""
        return [status.value for status in cls]


class DBErrorCode(str, Enum):
    """PostgreSQL SQLSTATE codes recognized by persistence error classification."""

    PG_UNIQUE_CONSTRAINT_VIOLATION = "23505"
    PG_FOREIGN_KEY_CONSTRAINT_VIOLATION = "23503"
    PG_NOT_NULL_CONSTRAINT_VIOLATION = "23502"
    PG_QUERY_CANCELED = "57014"
