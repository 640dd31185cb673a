"""User application service: list, fetch, create, update, change password, block.

Persistence failures are translated into domain exceptions here; the raw error
is kept as __cause__ and logged, never copied into the message.
"""

from __future__ import annotations

import asyncio

from access_admin.application.dtos.pagination import PaginationRequest
from access_admin.application.interfaces.repositories import IUserRepository
from access_admin.application.interfaces.services import IPasswordHasher
from access_admin.application.mappers.user_mapper import UserMapper
from access_admin.application.services.pagination import Pagination
from access_admin.application.services.persistence_errors import (
    PersistenceFailure,
    classify_persistence_error,
)
from access_admin.domain.enums import UserStatus
from access_admin.domain.exceptions import (
    AccessAdminException,
    ForeignKeyConflictException,
    InternalErrorException,
    InvalidCurrentPasswordException,
    RequestTimeoutException,
    ResourceNotFoundException,
    UserExistsException,
)
from access_admin.infrastructure.persistence.models.user import User
from access_admin.schemas.pagination import PaginationResponse
from access_admin.schemas.user import (
    ChangePasswordRequest,
    CreateUserBaseRequest,
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)
from access_admin.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _translate_error(error: Exception, operation: str) -> AccessAdminException:
    """Timeout -> RequestTimeoutException, anything else -> InternalErrorException."""
    if classify_persistence_error(error) is PersistenceFailure.TIMEOUT:
        logger.warning("%s timed out: %s", operation, type(error).__name__)
        return RequestTimeoutException()
    logger.error("%s failed", operation, exc_info=error)
    return InternalErrorException()


def _translate_write_error(
    error: Exception, operation: str, username: str
) -> AccessAdminException:
    """Constraint-aware translation for create and update."""
    failure = classify_persistence_error(error)
    if failure is PersistenceFailure.UNIQUE_VIOLATION:
        return UserExistsException(username)
    if failure in (
        PersistenceFailure.FOREIGN_KEY_VIOLATION,
        PersistenceFailure.NOT_NULL_VIOLATION,
    ):
        return ForeignKeyConflictException()
    return _translate_error(error, operation)


class UserService:
    """User lifecycle operations over an injected repository and password hasher."""

    def __init__(
        self, user_repo: IUserRepository, password_hasher: IPasswordHasher
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher

    async def _get_existing(
        self, user_id: str, operation: str, *, with_relations: bool = False
    ) -> User:
        """Fetch user or raise ResourceNotFoundException("user", user_id)."""
        try:
            user = await self._user_repo.get_by_id(
                user_id, with_relations=with_relations
            )
        except AccessAdminException:
            raise
        except Exception as e:
            raise _translate_error(e, operation) from e
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return user

    async def _hash(self, plaintext: str) -> str:
        return await asyncio.to_thread(self._password_hasher.hash, plaintext)

    async def list_users(
        self, pagination: PaginationRequest
    ) -> PaginationResponse[UserResponse]:
        """Return one page of users with roles and permissions.

        Raises ResourceNotFoundException when the page is empty.
        """
        try:
            users, total = await self._user_repo.get_users_and_count(pagination)
        except AccessAdminException:
            raise
        except Exception as e:
            raise _translate_error(e, "list_users") from e
        if not users or total == 0:
            raise ResourceNotFoundException("user")
        try:
            items = [UserMapper.to_dto_with_relations(user) for user in users]
        except Exception as e:
            raise _translate_error(e, "list_users") from e
        return Pagination.of(pagination, total, items)

    async def get_user_by_id(self, user_id: str) -> UserResponse:
        """Return the user with roles and permissions."""
        user = await self._get_existing(
            user_id, "get_user_by_id", with_relations=True
        )
        return UserMapper.to_dto_with_relations(user)

    async def create_user(self, dto: CreateUserRequest) -> UserResponse:
        """Create a user with initial roles and permissions."""
        user = UserMapper.to_create_entity(dto)
        return await self._create(user, "create_user")

    async def create_user_base(self, dto: CreateUserBaseRequest) -> UserResponse:
        """Create an active, non-super user without roles or permissions."""
        user = UserMapper.to_create_simple_entity(dto)
        return await self._create(user, "create_user_base")

    async def _create(self, user: User, operation: str) -> UserResponse:
        try:
            user.password = await self._hash(user.password)
            saved = await self._user_repo.save(user)
        except AccessAdminException:
            raise
        except Exception as e:
            raise _translate_write_error(e, operation, user.username) from e
        logger.info("User created: id=%s username=%s", saved.id, saved.username)
        return UserMapper.to_dto(saved)

    async def update_user(self, user_id: str, dto: UpdateUserRequest) -> UserResponse:
        """Apply the fields present in dto; unspecified fields keep their values."""
        user = await self._get_existing(user_id, "update_user")
        merged = UserMapper.to_update_entity(user, dto)
        try:
            saved = await self._user_repo.save(merged)
        except AccessAdminException:
            raise
        except Exception as e:
            raise _translate_write_error(e, "update_user", merged.username) from e
        return UserMapper.to_dto(saved)

    async def change_password(
        self, request: ChangePasswordRequest, user_id: str
    ) -> UserResponse:
        """Replace the password after verifying the current one.

        Raises InvalidCurrentPasswordException (nothing saved) on mismatch.
        """
        user = await self._get_existing(user_id, "change_password")
        matches = await asyncio.to_thread(
            self._password_hasher.compare, request.current_password, user.password
        )
        if not matches:
            raise InvalidCurrentPasswordException()
        try:
            user.password = await self._hash(request.new_password)
            saved = await self._user_repo.save(user)
        except AccessAdminException:
            raise
        except Exception as e:
            raise _translate_error(e, "change_password") from e
        logger.info("Password changed: id=%s", saved.id)
        return UserMapper.to_dto(saved)

    async def block_user(self, user_id: str) -> UserResponse:
        """Set the user's status to blocked."""
        user = await self._get_existing(user_id, "block_user")
        user.status = UserStatus.BLOCKED
        try:
            saved = await self._user_repo.save(user)
        except AccessAdminException:
            raise
        except Exception as e:
            raise _translate_error(e, "block_user") from e
        logger.info("User blocked: id=%s", saved.id)
        return UserMapper.to_dto(saved)
