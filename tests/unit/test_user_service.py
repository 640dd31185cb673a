"""UserService unit tests with a mocked repository and an in-memory hasher."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import exc as sa_exc

from access_admin.application.dtos.pagination import PaginationRequest
from access_admin.application.mappers.user_mapper import UserMapper
from access_admin.application.services.user_service import UserService
from access_admin.domain.enums import UserStatus
from access_admin.domain.exceptions import (
    ForeignKeyConflictException,
    InternalErrorException,
    InvalidCurrentPasswordException,
    RequestTimeoutException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UserExistsException,
)
from access_admin.infrastructure.persistence.models import User
from access_admin.infrastructure.security.password import BcryptPasswordHasher
from access_admin.schemas.user import (
    ChangePasswordRequest,
    CreateUserBaseRequest,
    CreateUserRequest,
    UpdateUserRequest,
)

_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


class FakeHasher:
    """Deterministic hasher: digest is 'hashed:' + plaintext."""

    def hash(self, plaintext: str) -> str:
        return f"hashed:{plaintext}"

    def compare(self, plaintext: str, digest: str) -> bool:
        return digest == f"hashed:{plaintext}"


class _DriverError(Exception):
    def __init__(self, sqlstate: str) -> None:
        super().__init__(f"duplicate key value violates constraint ({sqlstate})")
        self.sqlstate = sqlstate


def _integrity_error(sqlstate: str) -> sa_exc.IntegrityError:
    return sa_exc.IntegrityError("INSERT INTO app_user ...", {}, _DriverError(sqlstate))


def _user(user_id: str = "u1", **overrides) -> User:
    values = {
        "id": user_id,
        "username": "alice",
        "first_name": "Alice",
        "last_name": "Smith",
        "password": "hashed:p@ss1word",
        "is_super_user": False,
        "status": UserStatus.ACTIVE,
        "created_at": _NOW,
        "updated_at": _NOW,
    }
    values.update(overrides)
    return User(**values)


def _persist(user: User) -> User:
    if user.id is None:
        user.id = "new-id"
    user.created_at = user.created_at or _NOW
    user.updated_at = _NOW
    return user


def _create_request(**overrides) -> CreateUserRequest:
    values = {
        "username": "alice",
        "first_name": "Alice",
        "last_name": "Smith",
        "password": "p@ss1word",
    }
    values.update(overrides)
    return CreateUserRequest(**values)


def _create_base_request() -> CreateUserBaseRequest:
    return CreateUserBaseRequest(
        username="alice", first_name="Alice", last_name="Smith", password="p@ss1word"
    )


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.save = AsyncMock(side_effect=_persist)
    repo.get_by_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def service(user_repo: AsyncMock) -> UserService:
    return UserService(user_repo=user_repo, password_hasher=FakeHasher())


# ---- create ----


async def test_create_user_hashes_password_and_hides_it(service, user_repo) -> None:
    """Created user is saved with a digest and the response carries no password."""
    dto = await service.create_user(_create_request(roles=["r1"], permissions=["p1"]))

    saved: User = user_repo.save.await_args.args[0]
    assert saved.password == "hashed:p@ss1word"
    assert [link.role_id for link in saved.role_links] == ["r1"]
    assert [link.permission_id for link in saved.permission_links] == ["p1"]
    assert dto.id == "new-id"
    assert dto.username == "alice"
    assert "password" not in dto.model_dump()
    assert "p@ss1word" not in dto.model_dump_json()


async def test_create_user_base_is_active_and_not_super(service, user_repo) -> None:
    dto = await service.create_user_base(_create_base_request())
    saved: User = user_repo.save.await_args.args[0]
    assert saved.password == "hashed:p@ss1word"
    assert dto.status is UserStatus.ACTIVE
    assert dto.is_super_user is False
    assert saved.role_links == []


@pytest.mark.parametrize("variant", ["create_user", "create_user_base"])
async def test_duplicate_username_raises_user_exists(service, user_repo, variant) -> None:
    """A unique violation on save becomes UserExistsException for both variants."""
    user_repo.save.side_effect = _integrity_error("23505")
    request = _create_request() if variant == "create_user" else _create_base_request()

    with pytest.raises(UserExistsException) as exc_info:
        await getattr(service, variant)(request)

    assert exc_info.value.details == {"username": "alice"}
    assert isinstance(exc_info.value.__cause__, sa_exc.IntegrityError)


@pytest.mark.parametrize("sqlstate", ["23503", "23502"])
async def test_create_constraint_violation_raises_fk_conflict(
    service, user_repo, sqlstate
) -> None:
    user_repo.save.side_effect = _integrity_error(sqlstate)
    with pytest.raises(ForeignKeyConflictException):
        await service.create_user(_create_request(roles=["missing-role"]))


async def test_create_timeout_raises_request_timeout(service, user_repo) -> None:
    user_repo.save.side_effect = TimeoutError()
    with pytest.raises(RequestTimeoutException):
        await service.create_user(_create_request())


async def test_create_unknown_error_hides_raw_text(service, user_repo) -> None:
    """Unrecognized failures become InternalErrorException without the raw message."""
    user_repo.save.side_effect = RuntimeError("connection string leaked")
    with pytest.raises(InternalErrorException) as exc_info:
        await service.create_user(_create_request())
    assert "leaked" not in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, RuntimeError)


async def test_create_domain_exception_passes_through(service, user_repo) -> None:
    user_repo.save.side_effect = SqlNotConfiguredException()
    with pytest.raises(SqlNotConfiguredException):
        await service.create_user(_create_request())


async def test_create_short_password_then_duplicate(service, user_repo) -> None:
    """alice/p@ss1 is created; creating alice again fails with UserExistsException."""
    taken: set[str] = set()

    def save(user: User) -> User:
        if user.username in taken:
            raise _integrity_error("23505")
        taken.add(user.username)
        return _persist(user)

    user_repo.save.side_effect = save
    request = CreateUserRequest(
        username="alice", first_name="Alice", last_name="Smith", password="p@ss1"
    )

    created = await service.create_user(request)
    assert created.username == "alice"
    assert "password" not in created.model_dump()

    with pytest.raises(UserExistsException) as exc_info:
        await service.create_user(request)
    assert exc_info.value.details == {"username": "alice"}


# ---- get / list ----


async def test_get_user_by_id_loads_relations(service, user_repo) -> None:
    user_repo.get_by_id.return_value = _user()
    dto = await service.get_user_by_id("u1")
    user_repo.get_by_id.assert_awaited_once_with("u1", with_relations=True)
    assert dto.id == "u1"
    assert dto.roles == []
    assert dto.permissions == []


async def test_get_user_by_id_not_found(service) -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await service.get_user_by_id("missing")
    assert exc_info.value.details["resource_id"] == "missing"


async def test_get_user_by_id_timeout(service, user_repo) -> None:
    user_repo.get_by_id.side_effect = sa_exc.TimeoutError("pool exhausted")
    with pytest.raises(RequestTimeoutException):
        await service.get_user_by_id("u1")


async def test_list_users_returns_page_in_repository_order(service, user_repo) -> None:
    users = [_user("u2", username="bob"), _user("u1", username="alice")]
    user_repo.get_users_and_count = AsyncMock(return_value=(users, 12))

    page = await service.list_users(PaginationRequest(page=1, limit=2))

    assert [u.id for u in page.content] == ["u2", "u1"]
    assert page.total_records == 12
    assert page.total_pages == 6
    assert page.payload_size == 2
    assert page.has_next is True
    assert page.content[0].roles == []


@pytest.mark.parametrize("result", [([], 0), ([], 5)])
async def test_list_users_empty_raises_not_found(service, user_repo, result) -> None:
    user_repo.get_users_and_count = AsyncMock(return_value=result)
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await service.list_users(PaginationRequest())
    assert exc_info.value.message == "No user records found"


async def test_list_users_timeout(service, user_repo) -> None:
    user_repo.get_users_and_count = AsyncMock(side_effect=TimeoutError())
    with pytest.raises(RequestTimeoutException):
        await service.list_users(PaginationRequest())


async def test_list_users_unknown_error(service, user_repo) -> None:
    user_repo.get_users_and_count = AsyncMock(side_effect=RuntimeError("boom"))
    with pytest.raises(InternalErrorException):
        await service.list_users(PaginationRequest())


# ---- update ----


async def test_update_user_keeps_unspecified_fields(service, user_repo) -> None:
    user_repo.get_by_id.return_value = _user()
    dto = await service.update_user("u1", UpdateUserRequest(last_name="Jones"))
    assert dto.last_name == "Jones"
    assert dto.first_name == "Alice"
    assert dto.username == "alice"
    assert dto.status is UserStatus.ACTIVE


async def test_update_user_empty_request_still_saves(service, user_repo) -> None:
    """An empty update returns the user exactly as it was before."""
    user = _user()
    prior = UserMapper.to_dto(user)
    user_repo.get_by_id.return_value = user

    dto = await service.update_user("u1", UpdateUserRequest())

    user_repo.save.assert_awaited_once()
    assert dto == prior


async def test_update_user_not_found(service, user_repo) -> None:
    with pytest.raises(ResourceNotFoundException):
        await service.update_user("missing", UpdateUserRequest(first_name="X"))
    user_repo.save.assert_not_awaited()


async def test_update_user_duplicate_username(service, user_repo) -> None:
    """UserExistsException names the username the update tried to take."""
    user_repo.get_by_id.return_value = _user()
    user_repo.save.side_effect = _integrity_error("23505")
    with pytest.raises(UserExistsException) as exc_info:
        await service.update_user("u1", UpdateUserRequest(username="bob"))
    assert exc_info.value.details == {"username": "bob"}


async def test_update_user_unknown_role(service, user_repo) -> None:
    user_repo.get_by_id.return_value = _user()
    user_repo.save.side_effect = _integrity_error("23503")
    with pytest.raises(ForeignKeyConflictException):
        await service.update_user("u1", UpdateUserRequest(roles=["missing"]))


# ---- change password ----


async def test_change_password_wrong_current_never_saves(service, user_repo) -> None:
    user_repo.get_by_id.return_value = _user()
    request = ChangePasswordRequest(current_password="wrong", new_password="n3w-secret")
    with pytest.raises(InvalidCurrentPasswordException):
        await service.change_password(request, "u1")
    user_repo.save.assert_not_awaited()


async def test_change_password_replaces_digest(service, user_repo) -> None:
    user = _user()
    user_repo.get_by_id.return_value = user
    request = ChangePasswordRequest(current_password="p@ss1word", new_password="n3w-secret")

    dto = await service.change_password(request, "u1")

    assert user.password == "hashed:n3w-secret"
    assert dto.id == "u1"
    assert "password" not in dto.model_dump()


async def test_change_password_with_bcrypt(user_repo) -> None:
    """After a change the old password no longer verifies and the new one does."""
    hasher = BcryptPasswordHasher(rounds=4)
    user = _user(password=hasher.hash("p@ss1word"))
    user_repo.get_by_id.return_value = user
    service = UserService(user_repo=user_repo, password_hasher=hasher)

    await service.change_password(
        ChangePasswordRequest(current_password="p@ss1word", new_password="n3w-secret"),
        "u1",
    )

    assert not hasher.compare("p@ss1word", user.password)
    assert hasher.compare("n3w-secret", user.password)


async def test_change_password_not_found(service) -> None:
    request = ChangePasswordRequest(current_password="p@ss1word", new_password="n3w-secret")
    with pytest.raises(ResourceNotFoundException):
        await service.change_password(request, "missing")


async def test_change_password_save_timeout(service, user_repo) -> None:
    user_repo.get_by_id.return_value = _user()
    user_repo.save.side_effect = TimeoutError()
    request = ChangePasswordRequest(current_password="p@ss1word", new_password="n3w-secret")
    with pytest.raises(RequestTimeoutException):
        await service.change_password(request, "u1")


async def test_change_password_constraint_error_is_internal(service, user_repo) -> None:
    """Only timeouts are distinguished when saving a new password."""
    user_repo.get_by_id.return_value = _user()
    user_repo.save.side_effect = _integrity_error("23505")
    request = ChangePasswordRequest(current_password="p@ss1word", new_password="n3w-secret")
    with pytest.raises(InternalErrorException):
        await service.change_password(request, "u1")


# ---- block ----


async def test_block_user_sets_blocked(service, user_repo) -> None:
    user_repo.get_by_id.return_value = _user()
    dto = await service.block_user("u1")
    assert dto.status is UserStatus.BLOCKED
    saved: User = user_repo.save.await_args.args[0]
    assert saved.status is UserStatus.BLOCKED


async def test_block_user_not_found(service, user_repo) -> None:
    with pytest.raises(ResourceNotFoundException):
        await service.block_user("missing")
    user_repo.save.assert_not_awaited()


async def test_block_user_timeout(service, user_repo) -> None:
    user_repo.get_by_id.return_value = _user()
    user_repo.save.side_effect = _integrity_error("57014")
    with pytest.raises(RequestTimeoutException):
        await service.block_user("u1")
