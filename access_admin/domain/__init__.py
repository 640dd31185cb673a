"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from access_admin.domain.enums import DBErrorCode, UserStatus
from access_admin.domain.exceptions import (
    AccessAdminException,
    ForeignKeyConflictException,
    InternalErrorException,
    InvalidCurrentPasswordException,
    RequestTimeoutException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UserExistsException,
    ValidationException,
)

__all__ = [
    # Enums
    "DBErrorCode",
    "UserStatus",
    # Exceptions
    "AccessAdminException",
    "ForeignKeyConflictException",
    "InternalErrorException",
    "InvalidCurrentPasswordException",
    "RequestTimeoutException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "UserExistsException",
    "ValidationException",
]
