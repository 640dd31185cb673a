"""Domain exceptions for the access admin backend.

Every failure surfaced by the user lifecycle service is one of these kinds.
Raw storage-layer errors are classified and re-raised as one of them, so
callers never see driver or ORM exceptions. Presentation layer maps them to
HTTP responses in exception handlers.
"""

from typing import Any


class AccessAdminException(Exception):
    """Base exception for all access admin errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. username, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(AccessAdminException):
    """Raised when input validation fails (e.g. invalid page size)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(AccessAdminException):
    """Raised when a requested resource (or page of resources) is not found."""

    def __init__(self, resource_type: str, resource_id: str | None = None) -> None:
        """Initialize with resource type and optional id.

        Args:
            resource_type: Type of resource (e.g. 'user').
            resource_id: The ID that was not found; None for an empty listing.
        """
        if resource_id is None:
            message = f"No {resource_type} records found"
        else:
            message = f"{resource_type} not found: {resource_id}"
        details: dict[str, Any] = {"resource_type": resource_type}
        if resource_id is not None:
            details["resource_id"] = resource_id
        super().__init__(message, "RESOURCE_NOT_FOUND", details)


class UserExistsException(AccessAdminException):
    """Raised when a username is already taken (unique constraint violation)."""

    def __init__(self, username: str | None) -> None:
        super().__init__(
            f"User '{username}' already exists",
            "USER_EXISTS",
            {"username": username},
        )


class ForeignKeyConflictException(AccessAdminException):
    """Raised on a foreign-key or not-null constraint violation (e.g. unknown role id)."""

    def __init__(self) -> None:
        super().__init__(
            "Referenced record does not exist or a required field is missing",
            "FOREIGN_KEY_CONFLICT",
        )


class InvalidCurrentPasswordException(AccessAdminException):
    """Raised when the current password supplied for a password change does not match."""

    def __init__(self) -> None:
        super().__init__("Current password is invalid", "INVALID_CURRENT_PASSWORD")


class RequestTimeoutException(AccessAdminException):
    """Raised when the persistence layer reports that it exceeded its deadline."""

    def __init__(self) -> None:
        super().__init__("Request timed out", "REQUEST_TIMEOUT")


class InternalErrorException(AccessAdminException):
    """Raised for any unrecognized failure. Never carries storage error details."""

    def __init__(self) -> None:
        super().__init__("Internal server error", "INTERNAL_ERROR")


class SqlNotConfiguredException(AccessAdminException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
