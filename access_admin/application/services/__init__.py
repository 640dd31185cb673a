"""Application services: user lifecycle, pagination envelope, persistence error classification."""

from access_admin.application.services.pagination import Pagination
from access_admin.application.services.persistence_errors import (
    PersistenceFailure,
    classify_persistence_error,
)
from access_admin.application.services.user_service import UserService

__all__ = [
    "Pagination",
    "PersistenceFailure",
    "UserService",
    "classify_persistence_error",
]
